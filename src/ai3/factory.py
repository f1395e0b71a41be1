"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Factory helpers building ai3 components from environment variables.
"""

from __future__ import annotations

import logging

from .cache import CacheExpirySweeper, InMemoryQueryCache
from .compute import ComputeBackend, create_compute_backend
from .orchestration import OrchestratorMetrics, RequestOrchestrator
from .sessions import SessionStore
from .settings import AI3Settings

logger = logging.getLogger("ai3.factory")


def create_session_store_from_env(settings: AI3Settings | None = None) -> SessionStore:
    """Create a session store from `AI3_MAX_SESSIONS` / `AI3_EVICTION_STRATEGY`."""
    row = settings or AI3Settings.from_env()
    return SessionStore(
        max_sessions=row.max_sessions,
        eviction_strategy=row.eviction_strategy,
    )


def create_query_cache_from_env(settings: AI3Settings | None = None) -> InMemoryQueryCache:
    """Create a query cache from `AI3_CACHE_TTL_S` / `AI3_CACHE_MAX_SIZE`."""
    row = settings or AI3Settings.from_env()
    return InMemoryQueryCache(ttl_s=row.cache_ttl_s, max_size=row.cache_max_size)


def create_cache_sweeper_from_env(
    cache: InMemoryQueryCache,
    settings: AI3Settings | None = None,
) -> CacheExpirySweeper | None:
    """
    Create an expiry sweeper when `AI3_CACHE_SWEEP_INTERVAL_S` is set.

    The sweeper is returned unstarted; the host owns its lifecycle.
    """
    row = settings or AI3Settings.from_env()
    if row.cache_sweep_interval_s is None:
        return None
    return CacheExpirySweeper(cache, interval_s=row.cache_sweep_interval_s)


def create_orchestrator_from_env(
    *,
    compute: ComputeBackend | str | None = None,
    metrics: OrchestratorMetrics | None = None,
    settings: AI3Settings | None = None,
) -> RequestOrchestrator:
    """
    Create a request orchestrator wired to fresh stores.

    Compute resolution:
    - Uses the provided `compute` backend instance when supplied.
    - A string selects a registered provider id.
    - Otherwise falls back to `AI3_COMPUTE_PROVIDER` (default `litellm`).
    """
    row = settings or AI3Settings.from_env()
    backend = create_compute_backend(
        compute if compute is not None else row.compute_provider, row
    )
    orchestrator = RequestOrchestrator(
        backend,
        cache=create_query_cache_from_env(row),
        sessions=create_session_store_from_env(row),
        metrics=metrics,
    )
    logger.debug(
        "Built orchestrator (provider=%s, max_sessions=%d, cache_max_size=%d)",
        backend.provider_id,
        row.max_sessions,
        row.cache_max_size,
    )
    return orchestrator
