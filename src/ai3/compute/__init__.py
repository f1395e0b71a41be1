"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: compute/__init__.py.
"""

from .contracts import ComputeBackend, ComputeFactory
from .litellm import LiteLLMCompute
from .openai import OpenAICompute
from .registry import (
    create_compute_backend,
    list_compute_providers,
    register_compute_provider,
)

__all__ = [
    "ComputeBackend",
    "ComputeFactory",
    "LiteLLMCompute",
    "OpenAICompute",
    "register_compute_provider",
    "create_compute_backend",
    "list_compute_providers",
]
