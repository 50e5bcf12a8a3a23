"""Tick-based single-processor simulation engine.

This module contains no scheduling policy logic. It owns the clock and
the roster, asks the scheduler for one decision per tick and applies it.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from tick_scheduler.simulator.decision import Decision
from tick_scheduler.simulator.process import ProcessRecord, validate_roster
from tick_scheduler.simulator.scheduler_base import SchedulerBase

logger = logging.getLogger(__name__)


class Simulation:
    """Deterministic, tick-driven simulation of one processor.

    Each tick the engine:
      1. Asks the scheduler for a decision for the current tick.
      2. Records the decision in the timeline.
      3. Charges one tick of service to the chosen process, if any.
      4. Advances the clock.

    The clock starts at the earliest arrival and every integer tick is
    presented to the scheduler exactly once.  The run ends when every
    process is done or the scheduler reports ALL_DONE.

    Args:
        scheduler: The scheduling policy to use.  It should be fresh or
            reset().
        roster: The complete workload, indexed by position.
        max_ticks: Upper bound on the clock.  Defaults to the last
            arrival plus the total service time, which no policy that
            keeps the processor busy while work is available can exceed.

    Raises:
        ValueError: If a roster entry is invalid.
    """

    def __init__(
        self,
        scheduler: SchedulerBase,
        roster: Sequence[ProcessRecord],
        max_ticks: Optional[int] = None,
    ) -> None:
        validate_roster(roster)

        self._scheduler: SchedulerBase = scheduler
        self._roster: Sequence[ProcessRecord] = roster
        self._current_time: int = min((p.arrival_time for p in roster), default=0)
        if max_ticks is None:
            last_arrival = max((p.arrival_time for p in roster), default=0)
            max_ticks = last_arrival + sum(p.service_time for p in roster) + 1
        self._max_ticks: int = max_ticks
        self._finished: bool = self._all_done()
        self.timeline: List[Tuple[int, Decision]] = []

    @property
    def current_time(self) -> int:
        return self._current_time

    @property
    def finished(self) -> bool:
        return self._finished

    def _all_done(self) -> bool:
        return all(p.is_done for p in self._roster)

    def step_tick(self) -> Tuple[int, Decision, bool]:
        """Run one tick.

        Returns:
            tick: The tick that was simulated.
            decision: What the scheduler decided for it.
            done: True if the run is over.

        Raises:
            RuntimeError: If the run is already over, the clock passes
                max_ticks, or the scheduler picks a process that cannot
                run.
        """
        if self._finished:
            raise RuntimeError("Simulation already finished; no ticks left to run.")
        if self._current_time > self._max_ticks:
            raise RuntimeError(
                f"Simulation passed its bound of {self._max_ticks} ticks "
                f"under {self._scheduler!r}."
            )

        tick = self._current_time
        decision = self._scheduler.step(tick, self._roster)
        self.timeline.append((tick, decision))

        if decision.is_run:
            record = self._roster[decision.index]
            if record.run_one_tick(tick):
                logger.debug("tick=%d process %d completed", tick, decision.index)
        elif decision.is_all_done and not self._all_done():
            raise RuntimeError(
                f"{self._scheduler!r} reported all done at tick {tick} with work left."
            )

        self._current_time += 1
        self._finished = decision.is_all_done or self._all_done()
        return tick, decision, self._finished

    def run(self) -> Sequence[ProcessRecord]:
        """Execute the full simulation and return the roster.

        Returns:
            The roster, with every record done and its start_time and
            completion_time populated.
        """
        while not self._finished:
            self.step_tick()

        logger.info(
            "%r finished %d processes at tick %d",
            self._scheduler,
            len(self._roster),
            self._current_time,
        )
        return self._roster

    def run_sequence(self) -> List[Optional[int]]:
        """Return the timeline as one roster index (or None when idle) per tick."""
        return [d.index if d.is_run else None for _, d in self.timeline if not d.is_all_done]
