"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: cache/__init__.py.
"""

from .base import CacheEntry, CacheStats, QueryCacheBackend
from .inmemory import InMemoryQueryCache
from .keys import normalize_query_key
from .sweep import CacheExpirySweeper

__all__ = [
    "CacheEntry",
    "CacheStats",
    "QueryCacheBackend",
    "InMemoryQueryCache",
    "normalize_query_key",
    "CacheExpirySweeper",
]
