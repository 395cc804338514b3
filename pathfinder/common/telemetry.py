# Copyright (c) 2025 Arne Deutsch, itemis AG, MIT License
"""Thread-safe query telemetry counters."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Dict


@dataclass
class QueryStats:
    """Accumulated route query statistics.

    ``requests`` counts every validated query, ``cache_hits`` those served
    from the path cache and ``solver_runs`` those that ran Dijkstra.
    """

    requests: int = 0
    cache_hits: int = 0
    solver_runs: int = 0
    no_path: int = 0
    solve_ms_sum: float = 0.0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def record_request(self, *, hit: bool) -> None:
        """Count one answered query."""

        with self._lock:
            self.requests += 1
            if hit:
                self.cache_hits += 1

    def record_solve(self, *, found: bool, latency_ms: float) -> None:
        """Count one solver run and its latency."""

        with self._lock:
            self.solver_runs += 1
            self.solve_ms_sum += max(0.0, latency_ms)
            if not found:
                self.no_path += 1

    def snapshot(self) -> Dict[str, int | float]:
        """Return counters with hit rate and average solve latency."""

        with self._lock:
            requests = self.requests
            runs = self.solver_runs
            return {
                "requests": requests,
                "cache_hits": self.cache_hits,
                "solver_runs": runs,
                "no_path": self.no_path,
                "hit_rate": (self.cache_hits / requests) if requests else 0.0,
                "avg_solve_ms": (self.solve_ms_sum / runs) if runs else 0.0,
            }

    def reset(self) -> None:
        """Zero all counters."""

        with self._lock:
            self.requests = 0
            self.cache_hits = 0
            self.solver_runs = 0
            self.no_path = 0
            self.solve_ms_sum = 0.0


__all__ = ["QueryStats"]
