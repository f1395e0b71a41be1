"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: compute/openai.py.
"""

from __future__ import annotations

from typing import Any

from ..errors import ProviderError
from ..settings import AI3Settings
from .shared import completion_text, user_messages


class OpenAICompute:
    """Compute backend using `openai.AsyncOpenAI` chat completions."""

    provider_id = "openai"

    def __init__(
        self,
        *,
        model: str,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout_s: float = 30.0,
        client: Any | None = None,
    ) -> None:
        self._model = model
        self._api_key = api_key
        self._base_url = base_url
        self._timeout_s = timeout_s
        self._client = client

    @classmethod
    def from_settings(cls, settings: AI3Settings) -> "OpenAICompute":
        return cls(
            model=settings.compute_model,
            api_key=settings.compute_api_key,
            base_url=settings.compute_api_base_url,
            timeout_s=settings.compute_timeout_s,
        )

    def _build_client(self) -> Any:
        if self._client is not None:
            return self._client
        try:
            from openai import AsyncOpenAI
        except ModuleNotFoundError as exc:  # pragma: no cover
            raise ProviderError(
                "OpenAI compute backend requires `openai` to be installed.",
                provider_id=self.provider_id,
            ) from exc
        kwargs: dict[str, Any] = {"timeout": self._timeout_s}
        if self._api_key:
            kwargs["api_key"] = self._api_key
        if self._base_url:
            kwargs["base_url"] = self._base_url
        self._client = AsyncOpenAI(**kwargs)
        return self._client

    async def compute(self, prompt: str) -> str:
        client = self._build_client()
        try:
            response = await client.chat.completions.create(
                model=self._model,
                messages=user_messages(prompt),
            )
        except Exception as exc:
            raise ProviderError(
                f"openai completion failed: {exc}", provider_id=self.provider_id
            ) from exc
        return completion_text(response, provider_id=self.provider_id)
