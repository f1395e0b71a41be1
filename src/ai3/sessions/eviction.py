"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Eviction strategies for bounded session stores.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping

from ..errors import ConfigurationError
from .types import SessionRow

EvictionSelector = Callable[[Mapping[str, SessionRow]], str | None]


def _least_recently_touched(rows: Mapping[str, SessionRow]) -> str | None:
    """
    Return the user id with the smallest `last_touched`.

    `rows` iterates in touch order, and `min` keeps the first of equal keys,
    so ties resolve to the session touched earliest.
    """
    if not rows:
        return None
    return min(rows.items(), key=lambda item: item[1].last_touched)[0]


_STRATEGIES: dict[str, EvictionSelector] = {
    "oldest": _least_recently_touched,
    "least_recently_used": _least_recently_touched,
}


def normalize_strategy_name(name: str) -> str:
    return name.strip().lower().replace("-", "_")


def resolve_eviction_strategy(name: str) -> tuple[str, EvictionSelector]:
    """
    Resolve a strategy name into its canonical id and victim selector.

    Raises:
        ConfigurationError: when `name` is not a supported strategy.
    """
    if not isinstance(name, str):
        raise ConfigurationError(f"Unknown eviction strategy: {name!r}")
    key = normalize_strategy_name(name)
    selector = _STRATEGIES.get(key)
    if selector is None:
        raise ConfigurationError(f"Unknown eviction strategy: {name}")
    return key, selector


def list_eviction_strategies() -> list[str]:
    """List supported eviction strategy ids."""
    return sorted(_STRATEGIES.keys())
