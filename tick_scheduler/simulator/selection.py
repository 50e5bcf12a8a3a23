"""Shared selection skeleton for the run-to-completion policies.

Shortest Process Next, Shortest Remaining Time and Highest Response
Ratio Next differ only in the key they rank eligible processes by.  All
three keep the selected process on the processor until it is done, and
choose again only then.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from tick_scheduler.simulator.decision import ALL_DONE, IDLE, Decision
from tick_scheduler.simulator.process import ProcessRecord

#: Maps (record, current_tick) to the value the policy ranks by.
KeyFn = Callable[[ProcessRecord, int], float]
#: Returns True when the first key strictly beats the second.
BetterFn = Callable[[float, float], bool]


class SelectionState:
    """Persistent state of one selection-policy run.

    Attributes:
        selected_index: Roster index of the running process, or None in
            the idle-no-candidate and all-done states.
        run_length: Ticks elapsed since selected_index was chosen.  Zero
            exactly when no process is selected.
    """

    __slots__ = ("selected_index", "run_length")

    def __init__(self) -> None:
        self.selected_index: Optional[int] = None
        self.run_length: int = 0

    def clear(self) -> None:
        self.selected_index = None
        self.run_length = 0

    def __repr__(self) -> str:
        return (
            f"SelectionState(selected_index={self.selected_index}, "
            f"run_length={self.run_length})"
        )


def pick_candidate(
    current_tick: int,
    roster: Sequence[ProcessRecord],
    key: KeyFn,
    better: BetterFn,
) -> Optional[int]:
    """Return the index of the best eligible process, or None.

    The scan starts from the first eligible index and only replaces the
    candidate on a strict improvement, so ties go to the lowest index.
    """
    best_index: Optional[int] = None
    best_key = 0.0
    for index, record in enumerate(roster):
        if not record.is_eligible(current_tick):
            continue
        record_key = key(record, current_tick)
        if best_index is None or better(record_key, best_key):
            best_index = index
            best_key = record_key
    return best_index


def selection_step(
    current_tick: int,
    roster: Sequence[ProcessRecord],
    state: SelectionState,
    key: KeyFn,
    better: BetterFn,
    reselect_every_tick: bool = False,
) -> Decision:
    """Run one tick of a run-to-completion policy, mutating *state*.

    Args:
        current_tick: The current simulation clock value.
        roster: Every process of the run, indexed by position.
        state: The policy's persistent state.
        key: Ranking key for eligible processes.
        better: Strict comparison between two keys.
        reselect_every_tick: Re-rank on every tick instead of only when
            the selected process completes.

    Returns:
        ALL_DONE when every process is done, IDLE when nothing is
        eligible, otherwise Decision.run() for the selected index.
    """
    if state.selected_index is not None and roster[state.selected_index].is_done:
        state.clear()

    if all(record.is_done for record in roster):
        state.clear()
        return ALL_DONE

    if state.run_length == 0 or reselect_every_tick:
        choice = pick_candidate(current_tick, roster, key, better)
        if choice is None:
            return IDLE
        if choice != state.selected_index:
            state.selected_index = choice
            state.run_length = 0

    state.run_length += 1
    return Decision.run(state.selected_index)


def smaller(a: float, b: float) -> bool:
    return a < b


def larger(a: float, b: float) -> bool:
    return a > b
