"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: compute/litellm.py.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

from ..errors import ProviderError
from ..settings import AI3Settings
from .shared import completion_text, user_messages

CompletionFn = Callable[..., Awaitable[Any]]


class LiteLLMCompute:
    """Compute backend calling `litellm.acompletion` for one user message."""

    provider_id = "litellm"

    def __init__(
        self,
        *,
        model: str,
        api_key: str | None = None,
        api_base: str | None = None,
        timeout_s: float = 30.0,
        acompletion: CompletionFn | None = None,
    ) -> None:
        self._model = model
        self._api_key = api_key
        self._api_base = api_base
        self._timeout_s = timeout_s
        self._acompletion = acompletion

    @classmethod
    def from_settings(cls, settings: AI3Settings) -> "LiteLLMCompute":
        return cls(
            model=settings.compute_model,
            api_key=settings.compute_api_key,
            api_base=settings.compute_api_base_url,
            timeout_s=settings.compute_timeout_s,
        )

    def _completion_fn(self) -> CompletionFn:
        if self._acompletion is not None:
            return self._acompletion
        try:
            import litellm
        except ModuleNotFoundError as exc:  # pragma: no cover
            raise ProviderError(
                "LiteLLM compute backend requires `litellm` to be installed.",
                provider_id=self.provider_id,
            ) from exc
        self._acompletion = litellm.acompletion
        return self._acompletion

    async def compute(self, prompt: str) -> str:
        acompletion = self._completion_fn()
        kwargs: dict[str, Any] = {
            "model": self._model,
            "messages": user_messages(prompt),
            "timeout": self._timeout_s,
        }
        if self._api_key:
            kwargs["api_key"] = self._api_key
        if self._api_base:
            kwargs["api_base"] = self._api_base
        try:
            response = await acompletion(**kwargs)
        except Exception as exc:
            raise ProviderError(
                f"litellm completion failed: {exc}", provider_id=self.provider_id
            ) from exc
        return completion_text(response, provider_id=self.provider_id)
