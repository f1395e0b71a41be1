"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: orchestration/__init__.py.
"""

from .metrics import (
    NoOpOrchestratorMetrics,
    OrchestratorMetrics,
    PrometheusOrchestratorMetrics,
)
from .orchestrator import RequestOrchestrator
from .types import CACHED_COMPUTE, DIRECT_COMPUTE, Action, RequestRecord, resolve_action

__all__ = [
    "Action",
    "DIRECT_COMPUTE",
    "CACHED_COMPUTE",
    "RequestRecord",
    "resolve_action",
    "RequestOrchestrator",
    "OrchestratorMetrics",
    "NoOpOrchestratorMetrics",
    "PrometheusOrchestratorMetrics",
]
