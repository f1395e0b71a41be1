"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Bounded in-memory session store with least-recently-touched eviction.
"""

from __future__ import annotations

import logging
import threading
import time
from collections import OrderedDict
from collections.abc import Mapping
from typing import Any

from ..errors import ConfigurationError
from ..types import Clock
from .eviction import resolve_eviction_strategy
from .types import Session, SessionRow

logger = logging.getLogger("ai3.sessions")


class SessionStore:
    """
    Process-local map of user id -> session context.

    At most `max_sessions` sessions are held. When a new session would exceed
    the bound, the session selected by `eviction_strategy` is dropped first.
    Sessions are lost on process restart.

    Every public operation runs under one lock, so the capacity check, the
    eviction, and the insert are observed as a single step by other threads.
    """

    def __init__(
        self,
        *,
        max_sessions: int = 10,
        eviction_strategy: str = "oldest",
        clock: Clock | None = None,
    ) -> None:
        if isinstance(max_sessions, bool) or not isinstance(max_sessions, int):
            raise ConfigurationError("max_sessions must be an integer")
        if max_sessions <= 0:
            raise ConfigurationError("max_sessions must be > 0")
        self._eviction_strategy, self._select_victim = resolve_eviction_strategy(
            eviction_strategy
        )
        self._max_sessions = max_sessions
        self._clock: Clock = clock or time.time
        self._rows: OrderedDict[str, SessionRow] = OrderedDict()
        self._lock = threading.Lock()

    @property
    def max_sessions(self) -> int:
        return self._max_sessions

    @property
    def eviction_strategy(self) -> str:
        return self._eviction_strategy

    def create(self, user_id: str) -> Session:
        """
        Create or reset the session for `user_id` with an empty context.

        Evicts one session first when the store is full and `user_id` is new.
        """
        with self._lock:
            return self._create_locked(user_id).snapshot(user_id)

    def get(self, user_id: str) -> Session | None:
        """Return the session for `user_id`, or `None` without creating one."""
        with self._lock:
            row = self._rows.get(user_id)
            return None if row is None else row.snapshot(user_id)

    def get_or_create(self, user_id: str) -> Session:
        """Return the existing session, or create it when absent."""
        with self._lock:
            row = self._rows.get(user_id)
            if row is None:
                row = self._create_locked(user_id)
            return row.snapshot(user_id)

    def update(self, user_id: str, partial_context: Mapping[str, Any]) -> None:
        """Shallow-merge `partial_context` into the session and refresh it."""
        with self._lock:
            row = self._rows.get(user_id)
            if row is None:
                row = self._create_locked(user_id)
            row.context.update(partial_context)
            self._touch_locked(user_id, row)

    def remove(self, user_id: str) -> None:
        """Drop the session for `user_id` if present."""
        with self._lock:
            self._rows.pop(user_id, None)

    def clear(self) -> None:
        """Drop every session."""
        with self._lock:
            self._rows.clear()

    def list_active(self) -> list[str]:
        """Return held user ids. Order is not significant."""
        with self._lock:
            return list(self._rows.keys())

    def session_count(self) -> int:
        with self._lock:
            return len(self._rows)

    def load_percentage(self) -> float:
        """Current session count as a percentage of `max_sessions`."""
        with self._lock:
            return round(len(self._rows) / self._max_sessions * 100, 2)

    def __len__(self) -> int:
        return self.session_count()

    def __contains__(self, user_id: object) -> bool:
        with self._lock:
            return user_id in self._rows

    def _create_locked(self, user_id: str) -> SessionRow:
        if user_id not in self._rows and len(self._rows) >= self._max_sessions:
            self._evict_locked()
        row = SessionRow(context={}, last_touched=self._clock())
        self._rows.pop(user_id, None)
        self._rows[user_id] = row
        return row

    def _touch_locked(self, user_id: str, row: SessionRow) -> None:
        row.last_touched = self._clock()
        self._rows.move_to_end(user_id)

    def _evict_locked(self) -> None:
        victim = self._select_victim(self._rows)
        if victim is None:
            return
        self._rows.pop(victim, None)
        logger.debug(
            "Evicted session (user_id=%s, strategy=%s, max_sessions=%d)",
            victim,
            self._eviction_strategy,
            self._max_sessions,
        )
