"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Shared type aliases.
"""

from __future__ import annotations

from typing import Callable, TypeAlias

# Zero-argument callable returning Unix epoch seconds; injectable for tests.
Clock: TypeAlias = Callable[[], float]
