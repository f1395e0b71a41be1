"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Compute collaborator contract consumed by the request orchestrator.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, TypeAlias

from ..settings import AI3Settings


class ComputeBackend(Protocol):
    """
    One prompt in, one response string out.

    Implementations raise `ProviderError` on network, quota, or malformed
    response failures. Callers surface those errors unmodified.
    """

    provider_id: str

    async def compute(self, prompt: str) -> str: ...


ComputeFactory: TypeAlias = Callable[[AI3Settings], ComputeBackend]
