"""
Tests for the Round Robin policy.

The step function is driven by hand here so each tick's state can be
inspected; end-to-end runs go through the Simulation engine.
"""

import pytest

from tick_scheduler.simulator.decision import IDLE, Decision
from tick_scheduler.simulator.process import ProcessRecord
from tick_scheduler.simulator.round_robin import (
    RoundRobinScheduler,
    RoundRobinState,
    round_robin_step,
)
from tick_scheduler.simulator.simulation import Simulation


def _roster(*pairs):
    return [ProcessRecord(arrival_time=a, service_time=s) for a, s in pairs]


def test_quantum_must_be_positive():
    with pytest.raises(ValueError):
        RoundRobinScheduler(time_quantum=0)
    with pytest.raises(ValueError):
        RoundRobinState(-1)
    with pytest.raises(ValueError):
        round_robin_step(0, _roster((0, 1)), 0, RoundRobinState(2))


def test_quantum_must_match_state():
    state = RoundRobinState(5)
    with pytest.raises(ValueError, match="does not match"):
        round_robin_step(0, _roster((0, 9)), 2, state)
    # Rejected before any state change.
    assert not state.ready_queue
    assert state.ticks_until_preempt == 5
    assert state.quantum == 5


def test_two_process_scenario():
    """quantum=2, P0(0,3), P1(1,2): P0 P0 P1 P1 P0."""
    roster = _roster((0, 3), (1, 2))
    state = RoundRobinState(2)
    sequence = []
    tick = 0
    while not all(p.is_done for p in roster):
        decision = round_robin_step(tick, roster, 2, state)
        sequence.append(decision.index)
        roster[decision.index].run_one_tick(tick)
        tick += 1

    assert sequence == [0, 0, 1, 1, 0]
    assert roster[1].completion_time == 4
    assert roster[0].completion_time == 5


def test_preempted_process_goes_behind_queue():
    roster = _roster((0, 3), (1, 2))
    state = RoundRobinState(2)
    for tick in range(2):
        decision = round_robin_step(tick, roster, 2, state)
        roster[decision.index].run_one_tick(tick)

    assert list(state.ready_queue) == [0, 1]
    assert state.ticks_until_preempt == 0

    assert round_robin_step(2, roster, 2, state) == Decision.run(1)
    assert list(state.ready_queue) == [1, 0]
    assert state.ticks_until_preempt == 1


def test_finished_head_is_dropped_not_requeued():
    roster = _roster((0, 1), (0, 2))
    state = RoundRobinState(4)
    assert round_robin_step(0, roster, 4, state) == Decision.run(0)
    roster[0].run_one_tick(0)

    assert round_robin_step(1, roster, 4, state) == Decision.run(1)
    assert list(state.ready_queue) == [1]
    assert state.ticks_until_preempt == 3


def test_idle_before_first_arrival():
    roster = _roster((3, 2))
    state = RoundRobinState(2)
    assert round_robin_step(0, roster, 2, state) is IDLE
    assert state.ticks_until_preempt == 0
    assert not state.ready_queue

    assert round_robin_step(3, roster, 2, state) == Decision.run(0)
    assert state.ticks_until_preempt == 1


def test_idle_once_queue_drains():
    roster = _roster((0, 1))
    state = RoundRobinState(2)
    round_robin_step(0, roster, 2, state)
    roster[0].run_one_tick(0)

    assert round_robin_step(1, roster, 2, state) is IDLE
    assert round_robin_step(2, roster, 2, state) is IDLE
    assert state.ticks_until_preempt == 0


def test_rotation_refires_after_idle_tick():
    """After an idle tick the countdown is zero, so the first admitted
    process is rotated behind the ones that arrived with it."""
    roster = _roster((0, 1), (2, 1), (2, 1))
    sim = Simulation(RoundRobinScheduler(time_quantum=2), roster)
    sim.run()
    assert sim.run_sequence() == [0, None, 2, 1]


def test_quantum_one_alternates():
    roster = _roster((0, 3), (0, 3))
    sim = Simulation(RoundRobinScheduler(time_quantum=1), roster)
    sim.run()
    assert sim.run_sequence() == [0, 1, 0, 1, 0, 1]


def test_large_quantum_behaves_like_fcfs():
    roster = _roster((0, 3), (1, 2), (2, 1))
    sim = Simulation(RoundRobinScheduler(time_quantum=10), roster)
    sim.run()
    assert sim.run_sequence() == [0, 0, 0, 1, 1, 2]


def test_fairness_bound():
    """No ready process waits more than (queue length - 1) * quantum ticks."""
    quantum = 2
    roster = _roster((0, 6), (0, 6), (0, 6))
    sim = Simulation(RoundRobinScheduler(time_quantum=quantum), roster)
    sim.run()
    sequence = sim.run_sequence()

    bound = (len(roster) - 1) * quantum
    for index in range(len(roster)):
        ticks = [t for t, i in enumerate(sequence) if i == index]
        gaps = [b - a - 1 for a, b in zip(ticks, ticks[1:])]
        assert max(gaps) <= bound


def test_reset_gives_fresh_state():
    scheduler = RoundRobinScheduler(time_quantum=2)
    first = _roster((0, 3), (1, 2))
    Simulation(scheduler, first).run()

    scheduler.reset()
    assert not scheduler.state.ready_queue
    assert scheduler.state.ticks_until_preempt == 2

    second = _roster((0, 3), (1, 2))
    sim = Simulation(scheduler, second)
    sim.run()
    assert sim.run_sequence() == [0, 0, 1, 1, 0]
