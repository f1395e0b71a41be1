"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Thread-safe registry of compute backend factories.
"""

from __future__ import annotations

from threading import Lock

from ..errors import ConfigurationError
from ..settings import AI3Settings
from .contracts import ComputeBackend, ComputeFactory
from .litellm import LiteLLMCompute
from .openai import OpenAICompute

_REGISTRY: dict[str, ComputeFactory] = {
    LiteLLMCompute.provider_id: LiteLLMCompute.from_settings,
    OpenAICompute.provider_id: OpenAICompute.from_settings,
}
_LOCK = Lock()


def register_compute_provider(
    provider_id: str,
    factory: ComputeFactory,
    *,
    overwrite: bool = False,
) -> None:
    """Register one compute factory under a stable provider id."""
    key = provider_id.strip().lower()
    if not key:
        raise ConfigurationError("Compute provider id must be non-empty")

    with _LOCK:
        if key in _REGISTRY and not overwrite:
            raise ConfigurationError(f"Compute provider already registered: {key}")
        _REGISTRY[key] = factory


def create_compute_backend(
    provider: str | ComputeBackend,
    settings: AI3Settings | None = None,
) -> ComputeBackend:
    """Resolve a compute backend from an id or pass an instance through."""
    if not isinstance(provider, str):
        return provider

    key = provider.strip().lower()
    with _LOCK:
        factory = _REGISTRY.get(key)
    if factory is None:
        raise ConfigurationError(f"Unknown compute provider '{provider}'")
    return factory(settings or AI3Settings())


def list_compute_providers() -> list[str]:
    """List registered provider ids in deterministic order."""
    with _LOCK:
        return sorted(_REGISTRY.keys())
