"""Highest Response Ratio Next (non-preemptive) scheduling policy."""

from __future__ import annotations

import logging
from typing import Sequence

from tick_scheduler.simulator.decision import Decision
from tick_scheduler.simulator.process import ProcessRecord
from tick_scheduler.simulator.scheduler_base import SchedulerBase
from tick_scheduler.simulator.selection import SelectionState, larger, selection_step

logger = logging.getLogger(__name__)


def response_ratio(record: ProcessRecord, current_tick: int) -> float:
    """Return ``(waiting + service) / service`` for *record* at *current_tick*.

    Waiting time is the time since arrival not spent on the processor.

    Raises:
        ValueError: If the record's service time is not positive.
    """
    if record.service_time <= 0:
        raise ValueError(f"service_time must be positive, got {record.service_time}")
    waiting = current_tick - record.arrival_time - record.time_scheduled
    return (waiting + record.service_time) / record.service_time


def highest_response_ratio_next_step(
    current_tick: int,
    roster: Sequence[ProcessRecord],
    state: SelectionState,
) -> Decision:
    """Pick the eligible process with the highest response ratio.

    Like Shortest Process Next, the choice is only made when no process
    is running.
    """
    return selection_step(current_tick, roster, state, response_ratio, larger)


class HighestResponseRatioNextScheduler(SchedulerBase):
    """Non-preemptive HRRN: favours short processes but ages long waiters."""

    name = "hrrn"

    def __init__(self) -> None:
        self.state = SelectionState()

    def step(self, current_tick: int, roster: Sequence[ProcessRecord]) -> Decision:
        decision = highest_response_ratio_next_step(current_tick, roster, self.state)
        logger.debug("hrrn tick=%d decision=%s %r", current_tick, decision.label(), self.state)
        return decision

    def reset(self) -> None:
        self.state = SelectionState()
