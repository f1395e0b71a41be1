"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Public API for the ai3 assistant core: sessions, query cache, and request
orchestration over a pluggable compute provider.
"""

from __future__ import annotations

from .cache import CacheExpirySweeper, CacheStats, InMemoryQueryCache, normalize_query_key
from .compute import (
    ComputeBackend,
    LiteLLMCompute,
    OpenAICompute,
    create_compute_backend,
    register_compute_provider,
)
from .errors import AI3Error, ConfigurationError, ProviderError, UnrecognizedAction
from .factory import (
    create_cache_sweeper_from_env,
    create_orchestrator_from_env,
    create_query_cache_from_env,
    create_session_store_from_env,
)
from .orchestration import RequestOrchestrator, RequestRecord
from .sessions import Session, SessionStore
from .settings import AI3Settings

__all__ = [
    "AI3Error",
    "ConfigurationError",
    "ProviderError",
    "UnrecognizedAction",
    "AI3Settings",
    "Session",
    "SessionStore",
    "CacheStats",
    "InMemoryQueryCache",
    "CacheExpirySweeper",
    "normalize_query_key",
    "ComputeBackend",
    "LiteLLMCompute",
    "OpenAICompute",
    "create_compute_backend",
    "register_compute_provider",
    "RequestRecord",
    "RequestOrchestrator",
    "create_session_store_from_env",
    "create_query_cache_from_env",
    "create_cache_sweeper_from_env",
    "create_orchestrator_from_env",
]
