import pytest

from tick_scheduler.metrics.performance import METRIC_KEYS, compute_metrics
from tick_scheduler.simulator.process import ProcessRecord
from tick_scheduler.simulator.round_robin import RoundRobinScheduler
from tick_scheduler.simulator.simulation import Simulation


def test_metrics_for_round_robin_scenario():
    roster = [ProcessRecord(0, 3), ProcessRecord(1, 2)]
    Simulation(RoundRobinScheduler(time_quantum=2), roster).run()

    metrics = compute_metrics(roster)
    # P0: turnaround 5, wait 2.  P1: turnaround 3, wait 1.
    assert metrics["avg_turnaround"] == pytest.approx(4.0)
    assert metrics["avg_waiting_time"] == pytest.approx(1.5)
    assert metrics["avg_normalized_turnaround"] == pytest.approx((5 / 3 + 3 / 2) / 2)
    assert metrics["max_turnaround"] == pytest.approx(5.0)
    assert metrics["p99_waiting_time"] == pytest.approx(1.99)
    assert metrics["throughput"] == pytest.approx(40.0)


def test_metrics_skip_unfinished_processes():
    done = ProcessRecord(0, 1)
    done.run_one_tick(0)
    metrics = compute_metrics([done, ProcessRecord(0, 4)])
    assert metrics["avg_turnaround"] == pytest.approx(1.0)
    assert metrics["avg_waiting_time"] == pytest.approx(0.0)


def test_metrics_empty():
    metrics = compute_metrics([])
    assert set(metrics) == set(METRIC_KEYS)
    assert all(value == 0.0 for value in metrics.values())
