"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Optional periodic expiry sweep for query caches.

The cache already drops expired entries lazily on access. Hosts that want a
bound on memory held by stale entries can run this sweeper next to it.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol

logger = logging.getLogger("ai3.cache.sweep")


class PurgeableCache(Protocol):
    """Cache that can drop its expired entries on demand."""

    def purge_expired(self) -> int: ...


class CacheExpirySweeper:
    """Background asyncio task calling `purge_expired` every `interval_s`."""

    def __init__(self, cache: PurgeableCache, *, interval_s: float = 60.0) -> None:
        if interval_s <= 0:
            raise ValueError("interval_s must be > 0")
        self._cache = cache
        self._interval_s = interval_s
        self._running = False
        self._task: asyncio.Task[None] | None = None
        self._purged_total = 0

    async def start(self) -> None:
        """Start the sweep loop on the running event loop."""
        if self._running:
            raise RuntimeError("CacheExpirySweeper is already running")
        self._running = True
        self._task = asyncio.create_task(self._loop())
        logger.info("CacheExpirySweeper started (interval=%.1fs)", self._interval_s)

    async def shutdown(self) -> None:
        """Stop the sweep loop and wait for it to exit."""
        self._running = False
        if self._task and not self._task.done():
            self._task.cancel()
            await asyncio.gather(self._task, return_exceptions=True)
        self._task = None
        logger.info(
            "CacheExpirySweeper shut down (purged_total=%d)", self._purged_total
        )

    def sweep_once(self) -> int:
        """Run one purge pass synchronously and return the number removed."""
        removed = self._cache.purge_expired()
        self._purged_total += removed
        if removed:
            logger.debug("Purged %d expired cache entries", removed)
        return removed

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def purged_total(self) -> int:
        return self._purged_total

    async def _loop(self) -> None:
        while self._running:
            try:
                await asyncio.sleep(self._interval_s)
                if not self._running:
                    break
                self.sweep_once()
            except asyncio.CancelledError:
                raise
            except Exception:  # noqa: BLE001
                logger.exception("CacheExpirySweeper pass failed")
