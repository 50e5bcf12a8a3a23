"""Shortest Remaining Time scheduling policy."""

from __future__ import annotations

import logging
from typing import Sequence

from tick_scheduler.simulator.decision import Decision
from tick_scheduler.simulator.process import ProcessRecord
from tick_scheduler.simulator.scheduler_base import SchedulerBase
from tick_scheduler.simulator.selection import SelectionState, selection_step, smaller

logger = logging.getLogger(__name__)


def _remaining_time(record: ProcessRecord, current_tick: int) -> float:
    return record.service_time - record.time_scheduled


def shortest_remaining_time_step(
    current_tick: int,
    roster: Sequence[ProcessRecord],
    state: SelectionState,
    preemptive: bool = False,
) -> Decision:
    """Pick the eligible process with the least remaining service time.

    By default the choice is only revisited when the running process
    completes, exactly like Shortest Process Next, so a newly arrived
    shorter process waits its turn.  With *preemptive* set, remaining
    times are compared again on every tick and a shorter process takes
    the processor immediately.
    """
    return selection_step(
        current_tick,
        roster,
        state,
        _remaining_time,
        smaller,
        reselect_every_tick=preemptive,
    )


class ShortestRemainingTimeScheduler(SchedulerBase):
    """SRT scheduler.

    Args:
        preemptive: Re-rank remaining times on every tick (default False).
    """

    name = "srt"

    def __init__(self, preemptive: bool = False) -> None:
        self.preemptive: bool = preemptive
        self.state = SelectionState()

    def step(self, current_tick: int, roster: Sequence[ProcessRecord]) -> Decision:
        decision = shortest_remaining_time_step(
            current_tick, roster, self.state, preemptive=self.preemptive
        )
        logger.debug("srt tick=%d decision=%s %r", current_tick, decision.label(), self.state)
        return decision

    def reset(self) -> None:
        self.state = SelectionState()

    def __repr__(self) -> str:
        return f"ShortestRemainingTimeScheduler(preemptive={self.preemptive})"
