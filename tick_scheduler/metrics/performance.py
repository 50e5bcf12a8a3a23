"""Performance metrics collection and reporting."""

from __future__ import annotations

from typing import Dict, Sequence

import numpy as np

from tick_scheduler.simulator.process import ProcessRecord

METRIC_KEYS = (
    "avg_turnaround",
    "avg_waiting_time",
    "avg_normalized_turnaround",
    "max_turnaround",
    "p99_waiting_time",
    "throughput",
)


def compute_metrics(roster: Sequence[ProcessRecord]) -> Dict[str, float]:
    """Summarise a finished (or partially finished) run.

    Averages are taken over completed processes only.  Throughput is
    completed processes per 100 ticks of the run's span, from the first
    arrival to the last completion.
    """
    completed = [p for p in roster if p.completion_time is not None]
    if not completed:
        return {key: 0.0 for key in METRIC_KEYS}

    turnarounds = np.array([p.turnaround_time for p in completed], dtype=float)
    waits = np.array([p.waiting_time for p in completed], dtype=float)
    services = np.array([p.service_time for p in completed], dtype=float)

    first_arrival = min(p.arrival_time for p in roster)
    last_completion = max(p.completion_time for p in completed)
    time_span = max(1, last_completion - first_arrival)

    return {
        "avg_turnaround": float(turnarounds.mean()),
        "avg_waiting_time": float(waits.mean()),
        "avg_normalized_turnaround": float((turnarounds / services).mean()),
        "max_turnaround": float(turnarounds.max()),
        "p99_waiting_time": float(np.percentile(waits, 99)),
        "throughput": (100.0 * len(completed)) / time_span,
    }
