"""Workload generation for the CPU scheduling simulator."""

from __future__ import annotations

import random
from typing import List

from tick_scheduler.simulator.process import ProcessRecord


def generate_roster(
    num_processes: int,
    seed: int = 42,
    arrival_time_range: tuple[int, int] = (0, 20),
    service_time_range: tuple[int, int] = (1, 10),
) -> List[ProcessRecord]:
    """Generate a reproducible roster of processes with random parameters.

    Uses a local Random instance seeded with *seed* so that results are
    fully deterministic regardless of external random state.

    Args:
        num_processes: Number of processes to generate.
        seed: RNG seed for reproducibility.
        arrival_time_range: Inclusive (min, max) range for arrival times.
        service_time_range: Inclusive (min, max) range for service times.

    Returns:
        A list of ProcessRecord objects sorted by arrival_time.

    Raises:
        ValueError: If num_processes is negative or a range is invalid.
    """
    if num_processes < 0:
        raise ValueError(f"num_processes must be non-negative, got {num_processes}")
    if arrival_time_range[0] < 0 or arrival_time_range[0] > arrival_time_range[1]:
        raise ValueError(f"invalid arrival_time_range {arrival_time_range}")
    if service_time_range[0] <= 0 or service_time_range[0] > service_time_range[1]:
        raise ValueError(f"invalid service_time_range {service_time_range}")

    rng = random.Random(seed)
    roster: List[ProcessRecord] = []

    for _ in range(num_processes):
        arrival = rng.randint(*arrival_time_range)
        service = rng.randint(*service_time_range)
        roster.append(ProcessRecord(arrival_time=arrival, service_time=service))

    # Stable sort keeps generation order among equal arrivals.
    roster.sort(key=lambda p: p.arrival_time)
    return roster
