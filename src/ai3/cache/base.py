"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: cache/base.py.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(slots=True)
class CacheEntry:
    """One cached response with its creation timestamp."""
    value: Any
    created_at: float


@dataclass(frozen=True, slots=True)
class CacheStats:
    """Occupancy and hit counters for one cache instance."""
    count: int
    max_size: int
    utilization: float
    hits: int = 0
    misses: int = 0

    def as_dict(self) -> dict[str, int | float]:
        return {
            "count": self.count,
            "max_size": self.max_size,
            "utilization": self.utilization,
            "hits": self.hits,
            "misses": self.misses,
        }


class QueryCacheBackend(Protocol):
    """Protocol implemented by query caches consumed by the orchestrator."""

    def get(self, key: str) -> Any | None: ...

    def put(self, key: str, value: Any) -> None: ...

    def delete(self, key: str) -> None: ...

    def stats(self) -> CacheStats: ...
