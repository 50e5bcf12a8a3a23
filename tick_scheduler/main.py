"""CLI entry point for the single-processor CPU scheduling simulator."""

from __future__ import annotations

import argparse
import logging
from typing import Dict, List, Sequence, Type

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

SCHEDULERS: Dict[str, Type[SchedulerBase]] = {
    "rr": RoundRobinScheduler,
    "spn": ShortestProcessNextScheduler,
    "srt": ShortestRemainingTimeScheduler,
    "hrrn": HighestResponseRatioNextScheduler,
}


def build_parser() -> argparse.ArgumentParser:
    """Construct the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Single-processor CPU Scheduling Simulator",
    )
    parser.add_argument(
        "--scheduler",
        type=str,
        choices=list(SCHEDULERS.keys()),
        default="rr",
        help="Scheduling policy (default: rr)",
    )
    parser.add_argument(
        "--quantum",
        type=int,
        default=2,
        help="Time quantum for Round Robin (default: 2)",
    )
    parser.add_argument(
        "--preemptive",
        action="store_true",
        help="Let SRT re-rank remaining times on every tick",
    )
    parser.add_argument(
        "--roster",
        type=str,
        default=None,
        help="Roster file with one 'arrival service' pair per line",
    )
    parser.add_argument(
        "--processes",
        type=int,
        default=10,
        help="Number of processes to generate when no roster file is given (default: 10)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for roster generation (default: 42)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every scheduling decision",
    )
    return parser


def make_scheduler(name: str, quantum: int, preemptive: bool = False) -> SchedulerBase:
    """Instantiate the requested scheduler."""
    if name == "rr":
        return RoundRobinScheduler(time_quantum=quantum)
    if name == "srt":
        return ShortestRemainingTimeScheduler(preemptive=preemptive)
    return SCHEDULERS[name]()


def format_timeline(sequence: Sequence[int | None]) -> str:
    """Render one roster index per tick, '-' for idle ticks."""
    return " ".join("-" if index is None else str(index) for index in sequence)


def print_results(
    roster: Sequence[ProcessRecord],
    sequence: Sequence[int | None],
    first_tick: int,
    scheduler_name: str,
) -> None:
    """Print per-process results, the timeline and summary statistics to stdout."""
    header = f"{'ID':>4}  {'Arrival':>7}  {'Service':>7}  {'Start':>5}  {'End':>5}  {'Turnaround':>10}  {'Wait':>5}"
    separator = "-" * len(header)

    print(f"\n=== Simulation Results: {scheduler_name.upper()} ===\n")
    print(header)
    print(separator)

    for index, p in enumerate(roster):
        ta = p.turnaround_time if p.turnaround_time is not None else 0
        wa = p.waiting_time if p.waiting_time is not None else 0
        print(
            f"{index:>4}  {p.arrival_time:>7}  {p.service_time:>7}  "
            f"{p.start_time:>5}  {p.completion_time:>5}  {ta:>10}  {wa:>5}"
        )

    print(separator)
    print(f"  Timeline from tick {first_tick}:")
    print(f"  {format_timeline(sequence)}")
    print(separator)

    metrics = compute_metrics(roster)
    print(f"  Avg Turnaround:            {metrics['avg_turnaround']:.2f}")
    print(f"  Avg Wait:                  {metrics['avg_waiting_time']:.2f}")
    print(f"  Avg Normalized Turnaround: {metrics['avg_normalized_turnaround']:.2f}")
    print(f"  Throughput (per 100 ticks): {metrics['throughput']:.2f}")
    print()


def load_workload(args: argparse.Namespace) -> List[ProcessRecord]:
    """Read the roster file if one was given, otherwise generate a roster."""
    if args.roster:
        return load_roster(args.roster)
    return generate_roster(num_processes=args.processes, seed=args.seed)


def main(argv: list[str] | None = None) -> None:
    """Parse arguments, run simulation, print results."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        roster = load_workload(args)
        scheduler = make_scheduler(args.scheduler, args.quantum, args.preemptive)
    except (OSError, ValueError) as exc:
        parser.error(str(exc))

    sim = Simulation(scheduler=scheduler, roster=roster)
    first_tick = sim.current_time
    completed = sim.run()
    print_results(completed, sim.run_sequence(), first_tick, args.scheduler)


if __name__ == "__main__":
    main()
