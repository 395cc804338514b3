import threading

import pytest

from pathfinder.common.telemetry import QueryStats


def test_snapshot_of_fresh_stats() -> None:
    snap = QueryStats().snapshot()
    assert snap == {
        "requests": 0,
        "cache_hits": 0,
        "solver_runs": 0,
        "no_path": 0,
        "hit_rate": 0.0,
        "avg_solve_ms": 0.0,
    }


def test_rates_and_averages() -> None:
    stats = QueryStats()
    stats.record_solve(found=True, latency_ms=2.0)
    stats.record_solve(found=False, latency_ms=4.0)
    stats.record_request(hit=False)
    stats.record_request(hit=False)
    stats.record_request(hit=True)
    stats.record_request(hit=True)
    snap = stats.snapshot()
    assert snap["requests"] == 4
    assert snap["cache_hits"] == 2
    assert snap["hit_rate"] == 0.5
    assert snap["no_path"] == 1
    assert snap["avg_solve_ms"] == pytest.approx(3.0)


def test_negative_latency_clamped() -> None:
    stats = QueryStats()
    stats.record_solve(found=True, latency_ms=-1.0)
    assert stats.solve_ms_sum == 0.0


def test_reset() -> None:
    stats = QueryStats()
    stats.record_request(hit=True)
    stats.record_solve(found=False, latency_ms=1.0)
    stats.reset()
    assert stats.snapshot()["requests"] == 0
    assert stats.no_path == 0


def test_thread_safe_counting() -> None:
    stats = QueryStats()

    def worker() -> None:
        for _ in range(500):
            stats.record_request(hit=True)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert stats.requests == 2000
    assert stats.cache_hits == 2000
