"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Request orchestrator routing request records to direct or cached compute.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from ..cache import InMemoryQueryCache, QueryCacheBackend, normalize_query_key
from ..compute import ComputeBackend
from ..errors import UnrecognizedAction
from ..sessions import SessionStore
from .metrics import NoOpOrchestratorMetrics, OrchestratorMetrics
from .types import CACHED_COMPUTE, DIRECT_COMPUTE, Action, RequestRecord, resolve_action

logger = logging.getLogger("ai3.orchestration")

ActionHandler = Callable[[str], Awaitable[str]]


class RequestOrchestrator:
    """
    Dispatch request records to the compute collaborator.

    - ``direct-compute`` always calls compute and never touches the cache.
    - ``cached-compute`` serves from the query cache when the normalized
      prompt is present and stores the compute result on a miss.

    The orchestrator keeps no state of its own beyond its collaborators.
    Compute runs outside every store lock, and provider errors propagate to
    the caller unchanged.
    """

    def __init__(
        self,
        compute: ComputeBackend,
        *,
        cache: QueryCacheBackend | None = None,
        sessions: SessionStore | None = None,
        metrics: OrchestratorMetrics | None = None,
    ) -> None:
        self._compute = compute
        self._cache: QueryCacheBackend = cache if cache is not None else InMemoryQueryCache()
        self._sessions = sessions if sessions is not None else SessionStore()
        self._metrics: OrchestratorMetrics = metrics or NoOpOrchestratorMetrics()
        self._handlers: dict[Action, ActionHandler] = {
            DIRECT_COMPUTE: self._direct_compute,
            CACHED_COMPUTE: self._cached_compute,
        }

    @property
    def cache(self) -> QueryCacheBackend:
        return self._cache

    @property
    def sessions(self) -> SessionStore:
        return self._sessions

    async def process_request(
        self, request: RequestRecord | Mapping[str, Any]
    ) -> str:
        """
        Route one request and return the compute result.

        Raises:
            UnrecognizedAction: for unknown action tags, checked before the
                rest of the record. No state is touched.
            ValueError: when the record is malformed or carries no prompt.
            ProviderError: whatever the compute collaborator raised.
        """
        tag = (
            request.action
            if isinstance(request, RequestRecord)
            else request.get("action")
        )
        try:
            action = resolve_action(tag)
        except UnrecognizedAction:
            self._metrics.incr(
                "orchestrator_requests_total",
                tags={"action": "unrecognized", "outcome": "rejected"},
            )
            raise

        try:
            record = (
                request
                if isinstance(request, RequestRecord)
                else RequestRecord.model_validate(request)
            )
            prompt = record.prompt
        except ValueError:
            self._metrics.incr(
                "orchestrator_requests_total",
                tags={"action": action, "outcome": "rejected"},
            )
            raise

        logger.debug("Dispatching request (action=%s)", action)
        try:
            result = await self._handlers[action](prompt)
        except Exception:
            self._metrics.incr(
                "orchestrator_requests_total",
                tags={"action": action, "outcome": "error"},
            )
            raise

        if record.user_id is not None:
            self._sessions.update(
                record.user_id, {"last_action": action, "last_prompt": prompt}
            )
        self._metrics.incr(
            "orchestrator_requests_total",
            tags={"action": action, "outcome": "ok"},
        )
        return result

    def stats(self) -> dict[str, Any]:
        """Cache occupancy and session load in one mapping."""
        return {
            "cache_stats": self._cache.stats().as_dict(),
            "session_count": self._sessions.session_count(),
            "session_load": self._sessions.load_percentage(),
        }

    async def _direct_compute(self, prompt: str) -> str:
        return await self._compute.compute(prompt)

    async def _cached_compute(self, prompt: str) -> str:
        key = normalize_query_key(prompt)
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("Query cache hit")
            self._metrics.incr("orchestrator_cache_hits_total")
            return cached

        logger.debug("Query cache miss")
        self._metrics.incr("orchestrator_cache_misses_total")
        result = await self._compute.compute(prompt)
        self._cache.put(key, result)
        return result
