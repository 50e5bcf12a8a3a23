"""Shortest Process Next (non-preemptive) scheduling policy."""

from __future__ import annotations

import logging
from typing import Sequence

from tick_scheduler.simulator.decision import Decision
from tick_scheduler.simulator.process import ProcessRecord
from tick_scheduler.simulator.scheduler_base import SchedulerBase
from tick_scheduler.simulator.selection import SelectionState, selection_step, smaller

logger = logging.getLogger(__name__)


def _service_time(record: ProcessRecord, current_tick: int) -> float:
    return record.service_time


def shortest_process_next_step(
    current_tick: int,
    roster: Sequence[ProcessRecord],
    state: SelectionState,
) -> Decision:
    """Pick the eligible process with the smallest total service time.

    The choice is only made when no process is running; the selected
    process then keeps the processor until it is done.
    """
    return selection_step(current_tick, roster, state, _service_time, smaller)


class ShortestProcessNextScheduler(SchedulerBase):
    """Non-preemptive SPN using the known total service time of each process."""

    name = "spn"

    def __init__(self) -> None:
        self.state = SelectionState()

    def step(self, current_tick: int, roster: Sequence[ProcessRecord]) -> Decision:
        decision = shortest_process_next_step(current_tick, roster, self.state)
        logger.debug("spn tick=%d decision=%s %r", current_tick, decision.label(), self.state)
        return decision

    def reset(self) -> None:
        self.state = SelectionState()
