"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: sessions/__init__.py.
"""

from .eviction import list_eviction_strategies, resolve_eviction_strategy
from .store import SessionStore
from .types import Session

__all__ = [
    "Session",
    "SessionStore",
    "resolve_eviction_strategy",
    "list_eviction_strategies",
]
