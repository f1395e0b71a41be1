"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: cache/inmemory.py.
"""

from __future__ import annotations

import logging
import threading
import time
from collections import OrderedDict
from typing import Any

from ..errors import ConfigurationError
from ..types import Clock
from .base import CacheEntry, CacheStats, QueryCacheBackend

logger = logging.getLogger("ai3.cache")


class InMemoryQueryCache(QueryCacheBackend):
    """
    Process-local response cache bounded by TTL and entry count.

    An entry is visible while `now - created_at < ttl_s`. Expired entries are
    dropped when touched, when room is needed, or by `purge_expired`. When the
    cache is full, the entry with the oldest `created_at` is evicted whether or
    not it has expired.

    `max_size=0` makes the cache a no-op: `put` discards and `get` misses.
    """

    def __init__(
        self,
        *,
        ttl_s: float = 300.0,
        max_size: int = 100,
        clock: Clock | None = None,
    ) -> None:
        if isinstance(ttl_s, bool) or not isinstance(ttl_s, (int, float)):
            raise ConfigurationError("ttl_s must be a number")
        if ttl_s < 0:
            raise ConfigurationError("ttl_s must be >= 0")
        if isinstance(max_size, bool) or not isinstance(max_size, int):
            raise ConfigurationError("max_size must be an integer")
        if max_size < 0:
            raise ConfigurationError("max_size must be >= 0")
        self._ttl_s = float(ttl_s)
        self._max_size = max_size
        self._clock: Clock = clock or time.time
        self._rows: OrderedDict[str, CacheEntry] = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    @property
    def ttl_s(self) -> float:
        return self._ttl_s

    @property
    def max_size(self) -> int:
        return self._max_size

    def get(self, key: str) -> Any | None:
        with self._lock:
            row = self._rows.get(key)
            if row is None:
                self._misses += 1
                return None
            if self._expired(row, self._clock()):
                self._rows.pop(key, None)
                self._misses += 1
                return None
            self._hits += 1
            return row.value

    def put(self, key: str, value: Any) -> None:
        if self._max_size == 0:
            return
        with self._lock:
            now = self._clock()
            if key not in self._rows and len(self._rows) >= self._max_size:
                self._purge_expired_locked(now)
                while len(self._rows) >= self._max_size:
                    self._evict_oldest_locked()
            self._rows.pop(key, None)
            self._rows[key] = CacheEntry(value=value, created_at=now)

    def delete(self, key: str) -> None:
        with self._lock:
            self._rows.pop(key, None)

    def clear(self) -> None:
        """Drop every entry and reset the hit and miss counters."""
        with self._lock:
            self._rows.clear()
            self._hits = 0
            self._misses = 0

    def purge_expired(self) -> int:
        """Drop every expired entry and return how many were removed."""
        with self._lock:
            return self._purge_expired_locked(self._clock())

    def stats(self) -> CacheStats:
        with self._lock:
            count = len(self._rows)
            utilization = (
                round(count / self._max_size * 100, 2) if self._max_size else 0.0
            )
            return CacheStats(
                count=count,
                max_size=self._max_size,
                utilization=utilization,
                hits=self._hits,
                misses=self._misses,
            )

    def __len__(self) -> int:
        with self._lock:
            return len(self._rows)

    def _expired(self, row: CacheEntry, now: float) -> bool:
        return not (now - row.created_at < self._ttl_s)

    def _purge_expired_locked(self, now: float) -> int:
        stale = [key for key, row in self._rows.items() if self._expired(row, now)]
        for key in stale:
            del self._rows[key]
        return len(stale)

    def _evict_oldest_locked(self) -> None:
        # Rows iterate in insertion order; min keeps the first of equal timestamps.
        victim = min(self._rows.items(), key=lambda item: item[1].created_at)[0]
        del self._rows[victim]
        logger.debug("Evicted cache entry (max_size=%d)", self._max_size)
