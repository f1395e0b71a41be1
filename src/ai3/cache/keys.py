"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: cache/keys.py.
"""

from __future__ import annotations


def normalize_query_key(text: str) -> str:
    """Trim, lowercase, and collapse whitespace runs so equivalent prompts share a key."""
    return " ".join(text.split()).lower()
