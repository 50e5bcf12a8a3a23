"""Abstract base class for all scheduling policies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from tick_scheduler.simulator.decision import Decision
from tick_scheduler.simulator.process import ProcessRecord


class SchedulerBase(ABC):
    """Interface that every scheduling policy must implement.

    A scheduler object owns exactly one policy state instance and is
    meant for one simulation run at a time.  The simulation engine calls
    step() once per tick, after applying the previous decision to the
    roster, and never from more than one thread at once.

    The roster is only read.  Reusing a scheduler for an unrelated
    roster requires reset() first.
    """

    #: Short name used by the CLI and in reports.
    name: str = ""

    @abstractmethod
    def step(self, current_tick: int, roster: Sequence[ProcessRecord]) -> Decision:
        """Decide which process occupies the processor for *current_tick*.

        Args:
            current_tick: The current simulation clock value.
            roster: Every process of the run, indexed by position.

        Returns:
            The decision for this tick.
        """

    @abstractmethod
    def reset(self) -> None:
        """Discard all policy state so the scheduler can start a new run."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
