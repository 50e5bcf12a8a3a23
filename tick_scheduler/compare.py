"""Comparative analysis: all four policies on the same roster."""

from __future__ import annotations

import argparse
import copy
from typing import Dict, List, Sequence

from tick_scheduler.metrics.performance import compute_metrics
from tick_scheduler.simulator.highest_response_ratio_next import HighestResponseRatioNextScheduler
from tick_scheduler.simulator.process import ProcessRecord
from tick_scheduler.simulator.round_robin import RoundRobinScheduler
from tick_scheduler.simulator.scheduler_base import SchedulerBase
from tick_scheduler.simulator.shortest_process_next import ShortestProcessNextScheduler
from tick_scheduler.simulator.shortest_remaining_time import ShortestRemainingTimeScheduler
from tick_scheduler.simulator.simulation import Simulation
from tick_scheduler.workload.generator import generate_roster
from tick_scheduler.workload.roster_file import load_roster

REPORT_KEYS = ("avg_turnaround", "avg_waiting_time", "avg_normalized_turnaround", "max_turnaround")


def run_comparison(
    roster: Sequence[ProcessRecord],
    rr_quantum: int = 2,
) -> Dict[str, Dict[str, float]]:
    """Run every policy on its own deep copy of *roster*.

    Returns:
        Metrics per policy name, in RR, SPN, SRT, HRRN order.
    """
    schedulers: List[SchedulerBase] = [
        RoundRobinScheduler(time_quantum=rr_quantum),
        ShortestProcessNextScheduler(),
        ShortestRemainingTimeScheduler(),
        HighestResponseRatioNextScheduler(),
    ]

    results: Dict[str, Dict[str, float]] = {}
    for scheduler in schedulers:
        sim = Simulation(scheduler=scheduler, roster=copy.deepcopy(list(roster)))
        results[scheduler.name] = compute_metrics(sim.run())
    return results


def print_comparison(results: Dict[str, Dict[str, float]], num_processes: int) -> None:
    """Print one row per metric with a column per policy to stdout."""
    names = list(results)

    print("\n=== Comparative Analysis: RR vs SPN vs SRT vs HRRN ===\n")
    print(f"  Roster: {num_processes} processes")
    print()
    print(f"  {'Metric':<26}" + "".join(f"  {name.upper():>8}" for name in names))
    print("  " + "-" * (26 + 10 * len(names)))

    for key in REPORT_KEYS + ("throughput",):
        print(f"  {key:<26}" + "".join(f"  {results[name][key]:>8.2f}" for name in names))
    print()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Compare RR, SPN, SRT and HRRN on one roster"
    )
    parser.add_argument(
        "--roster",
        type=str,
        default=None,
        help="Roster file with one 'arrival service' pair per line",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for roster generation",
    )
    parser.add_argument(
        "--processes",
        type=int,
        default=20,
        help="Number of processes to generate",
    )
    parser.add_argument(
        "--quantum",
        type=int,
        default=2,
        help="Round Robin time quantum",
    )
    args = parser.parse_args(argv)

    try:
        if args.roster:
            roster = load_roster(args.roster)
        else:
            roster = generate_roster(num_processes=args.processes, seed=args.seed)
        results = run_comparison(roster, rr_quantum=args.quantum)
    except (OSError, ValueError) as exc:
        parser.error(str(exc))

    print_comparison(results, len(roster))


if __name__ == "__main__":
    main()
