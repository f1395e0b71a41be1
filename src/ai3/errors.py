"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Error types shared by the session, cache, compute, and orchestration modules.
"""

from __future__ import annotations


class AI3Error(RuntimeError):
    """Base class for ai3 core failures."""


class ConfigurationError(AI3Error):
    """Raised when a component is constructed with invalid configuration."""


class UnrecognizedAction(AI3Error):
    """Raised when a request record carries an action tag with no handler."""

    def __init__(self, action: str) -> None:
        super().__init__(f"Unrecognized action '{action}'")
        self.action = action


class ProviderError(AI3Error):
    """Raised by compute backends when the upstream provider call fails."""

    def __init__(self, message: str, *, provider_id: str | None = None) -> None:
        super().__init__(message)
        self.provider_id = provider_id
