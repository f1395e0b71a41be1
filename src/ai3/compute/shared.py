"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Helpers shared by chat-completion compute adapters.
"""

from __future__ import annotations

from typing import Any

from ..errors import ProviderError


def user_messages(prompt: str) -> list[dict[str, str]]:
    return [{"role": "user", "content": prompt}]


def _field(obj: Any, name: str) -> Any:
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def completion_text(response: Any, *, provider_id: str) -> str:
    """
    Pull the first choice's message content out of a chat-completion response.

    Accepts SDK objects and plain dict payloads.

    Raises:
        ProviderError: when the response carries no text content.
    """
    choices = _field(response, "choices")
    if not choices:
        raise ProviderError(
            f"{provider_id} response contained no choices", provider_id=provider_id
        )
    message = _field(choices[0], "message")
    content = _field(message, "content") if message is not None else None
    if not isinstance(content, str):
        raise ProviderError(
            f"{provider_id} response contained no text content",
            provider_id=provider_id,
        )
    return content
