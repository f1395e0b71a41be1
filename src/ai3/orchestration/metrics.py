"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Counter sinks for request orchestrator instrumentation.
"""

from __future__ import annotations

import threading
from collections.abc import Mapping
from typing import Any, Protocol


class OrchestratorMetrics(Protocol):
    """Minimal metrics interface for orchestrator instrumentation."""

    def incr(
        self, name: str, value: int = 1, *, tags: Mapping[str, str] | None = None
    ) -> None:
        """Increment a counter metric."""


class NoOpOrchestratorMetrics:
    """Default metrics sink when no metrics backend is provided."""

    def incr(
        self, name: str, value: int = 1, *, tags: Mapping[str, str] | None = None
    ) -> None:
        _ = name
        _ = value
        _ = tags


class PrometheusOrchestratorMetrics(OrchestratorMetrics):
    """
    Prometheus-backed orchestrator metrics adapter.

    One `Counter` is created per (name, label set) on first use. Pass a
    dedicated `registry` when more than one adapter lives in the same process.
    """

    def __init__(self, *, namespace: str = "ai3", registry: Any | None = None) -> None:
        try:
            from prometheus_client import REGISTRY, Counter
        except ModuleNotFoundError as exc:  # pragma: no cover
            raise RuntimeError(
                "PrometheusOrchestratorMetrics requires `prometheus_client` to be installed."
            ) from exc

        self._counter_cls = Counter
        self._namespace = namespace
        self._registry = registry if registry is not None else REGISTRY
        self._counters: dict[tuple[str, tuple[str, ...]], Any] = {}
        self._lock = threading.Lock()

    def incr(self, name: str, value: int = 1, *, tags: Mapping[str, str] | None = None) -> None:
        row = dict(tags or {})
        label_names = tuple(sorted(row))
        counter = self._counter(name, label_names)
        if label_names:
            counter.labels(**{label: str(row[label]) for label in label_names}).inc(value)
        else:
            counter.inc(value)

    def _counter(self, name: str, label_names: tuple[str, ...]) -> Any:
        key = (name, label_names)
        with self._lock:
            counter = self._counters.get(key)
            if counter is None:
                counter = self._counter_cls(
                    name=name,
                    documentation=f"ai3 orchestrator metric {name}",
                    namespace=self._namespace,
                    labelnames=label_names,
                    registry=self._registry,
                )
                self._counters[key] = counter
            return counter
