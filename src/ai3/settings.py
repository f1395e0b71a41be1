"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Runtime settings and explicit config loading.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .errors import ConfigurationError


def _env_first(*names: str, default: str | None = None) -> str | None:
    """
    Return the first non-empty environment variable in `names`.

    Args:
        *names: Environment variable names to check in order.
        default: Value returned if no non-empty variable is found.
    """
    for name in names:
        raw = os.getenv(name)
        if raw is None:
            continue
        value = raw.strip()
        if value:
            return value
    return default


def _env_int(name: str, default: int) -> int:
    raw = _env_first(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc


def _env_float(name: str, default: float) -> float:
    value = _env_optional_float(name)
    return default if value is None else value


def _env_optional_float(name: str) -> float | None:
    raw = _env_first(name)
    if raw is None:
        return None
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from exc


@dataclass(frozen=True, slots=True)
class AI3Settings:
    """Explicit settings consumed by session, cache, and compute factories."""

    max_sessions: int = 10
    eviction_strategy: str = "oldest"

    cache_ttl_s: float = 300.0
    cache_max_size: int = 100
    cache_sweep_interval_s: float | None = None

    compute_provider: str = "litellm"
    compute_model: str = "gpt-4.1-mini"
    compute_api_key: str | None = None
    compute_api_base_url: str | None = None
    compute_timeout_s: float = 30.0

    @staticmethod
    def from_env() -> "AI3Settings":
        """Load settings from `AI3_*` environment variables."""
        return AI3Settings(
            max_sessions=_env_int("AI3_MAX_SESSIONS", 10),
            eviction_strategy=_env_first("AI3_EVICTION_STRATEGY", default="oldest")
            or "oldest",
            cache_ttl_s=_env_float("AI3_CACHE_TTL_S", 300.0),
            cache_max_size=_env_int("AI3_CACHE_MAX_SIZE", 100),
            cache_sweep_interval_s=_env_optional_float("AI3_CACHE_SWEEP_INTERVAL_S"),
            compute_provider=_env_first("AI3_COMPUTE_PROVIDER", default="litellm")
            or "litellm",
            compute_model=_env_first("AI3_COMPUTE_MODEL", default="gpt-4.1-mini")
            or "gpt-4.1-mini",
            compute_api_key=_env_first("AI3_COMPUTE_API_KEY"),
            compute_api_base_url=_env_first("AI3_COMPUTE_API_BASE_URL"),
            compute_timeout_s=_env_float("AI3_COMPUTE_TIMEOUT_S", 30.0),
        )
