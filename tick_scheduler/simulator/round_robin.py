"""Round Robin scheduling policy with time-quantum preemption."""

from __future__ import annotations

import logging
from collections import deque
from typing import Sequence

from tick_scheduler.simulator.decision import IDLE, Decision
from tick_scheduler.simulator.process import ProcessRecord
from tick_scheduler.simulator.scheduler_base import SchedulerBase

logger = logging.getLogger(__name__)


def _check_quantum(quantum: int) -> None:
    if quantum <= 0:
        raise ValueError(f"time_quantum must be positive, got {quantum}")


class RoundRobinState:
    """Persistent state of one Round Robin run.

    Attributes:
        quantum: Time quantum the state was created for.
        ready_queue: Indices of arrived, unfinished processes in FIFO order.
            The head is the process currently holding the processor.
        ticks_until_preempt: Countdown to the next forced rotation, in
            ``[0, quantum]``.
    """

    __slots__ = ("quantum", "ready_queue", "ticks_until_preempt")

    def __init__(self, quantum: int) -> None:
        _check_quantum(quantum)
        self.quantum: int = quantum
        self.ready_queue: deque[int] = deque()
        self.ticks_until_preempt: int = quantum

    def __repr__(self) -> str:
        return (
            f"RoundRobinState(quantum={self.quantum}, ready_queue={list(self.ready_queue)}, "
            f"ticks_until_preempt={self.ticks_until_preempt})"
        )


def round_robin_step(
    current_tick: int,
    roster: Sequence[ProcessRecord],
    quantum: int,
    state: RoundRobinState,
) -> Decision:
    """Run one Round Robin tick, mutating *state*.

    Each tick:
      1. Admits every unfinished process whose arrival_time equals
         *current_tick*.
      2. Rotates the queue when the quantum has expired or the head is
         done: the head is popped and, unless done, requeued at the tail.
      3. Runs the head of the queue, or idles when the queue is empty.
         An idle tick zeroes the countdown so the rotation check fires
         again on the next tick.

    Returns:
        Decision.run(head) or IDLE.  Round Robin never reports ALL_DONE;
        the driver decides when the roster is finished.

    Raises:
        ValueError: If *quantum* is not positive or differs from the
            quantum *state* was created with.
    """
    _check_quantum(quantum)
    if quantum != state.quantum:
        raise ValueError(
            f"quantum {quantum} does not match the state's quantum {state.quantum}"
        )
    queue = state.ready_queue

    for index, record in enumerate(roster):
        if record.arrival_time == current_tick and not record.is_done:
            queue.append(index)

    # The rotation check is only defined for a non-empty queue.
    if queue and (state.ticks_until_preempt == 0 or roster[queue[0]].is_done):
        head = queue.popleft()
        if not roster[head].is_done:
            queue.append(head)
        state.ticks_until_preempt = quantum

    if not queue:
        state.ticks_until_preempt = 0
        return IDLE

    state.ticks_until_preempt -= 1
    return Decision.run(queue[0])


class RoundRobinScheduler(SchedulerBase):
    """Preemptive Round Robin scheduler.

    A process runs for at most *time_quantum* consecutive ticks before it
    is moved to the back of the ready queue.

    Args:
        time_quantum: Maximum consecutive ticks before preemption.
    """

    name = "rr"

    def __init__(self, time_quantum: int = 2) -> None:
        _check_quantum(time_quantum)
        self.time_quantum: int = time_quantum
        self.state = RoundRobinState(time_quantum)

    def step(self, current_tick: int, roster: Sequence[ProcessRecord]) -> Decision:
        decision = round_robin_step(current_tick, roster, self.time_quantum, self.state)
        logger.debug("rr tick=%d decision=%s %r", current_tick, decision.label(), self.state)
        return decision

    def reset(self) -> None:
        self.state = RoundRobinState(self.time_quantum)

    def __repr__(self) -> str:
        return f"RoundRobinScheduler(time_quantum={self.time_quantum})"
