"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Session data models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Session:
    """
    Point-in-time snapshot of one user session.

    `context` is a shallow copy of the stored context; mutating it does not
    change the store. Use `SessionStore.update` to merge new keys.
    """

    user_id: str
    context: dict[str, Any] = field(default_factory=dict)
    last_touched: float = 0.0


@dataclass(slots=True)
class SessionRow:
    """Mutable row held by the session store."""

    context: dict[str, Any]
    last_touched: float

    def snapshot(self, user_id: str) -> Session:
        return Session(
            user_id=user_id,
            context=dict(self.context),
            last_touched=self.last_touched,
        )
