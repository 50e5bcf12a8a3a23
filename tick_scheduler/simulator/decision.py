"""Scheduling decision returned by every policy once per tick."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class DecisionKind(Enum):
    """What the processor should do for one tick."""

    RUN = auto()
    IDLE = auto()
    ALL_DONE = auto()


@dataclass(frozen=True)
class Decision:
    """Outcome of a single scheduler step.

    ``index`` is the roster position of the process to run and is only
    set for RUN decisions.  Use the run() constructor and the IDLE and
    ALL_DONE constants rather than building instances by hand.
    """

    kind: DecisionKind
    index: Optional[int] = None

    def __post_init__(self) -> None:
        if self.kind is DecisionKind.RUN:
            if self.index is None or self.index < 0:
                raise ValueError(f"RUN decision needs a roster index, got {self.index}")
        elif self.index is not None:
            raise ValueError(f"{self.kind.name} decision cannot carry an index")

    @classmethod
    def run(cls, index: int) -> "Decision":
        return cls(DecisionKind.RUN, index)

    @property
    def is_run(self) -> bool:
        return self.kind is DecisionKind.RUN

    @property
    def is_idle(self) -> bool:
        return self.kind is DecisionKind.IDLE

    @property
    def is_all_done(self) -> bool:
        return self.kind is DecisionKind.ALL_DONE

    def label(self) -> str:
        """Short label for timelines: the index, '-' for idle, '*' for all done."""
        if self.kind is DecisionKind.RUN:
            return str(self.index)
        if self.kind is DecisionKind.IDLE:
            return "-"
        return "*"


IDLE = Decision(DecisionKind.IDLE)
ALL_DONE = Decision(DecisionKind.ALL_DONE)
