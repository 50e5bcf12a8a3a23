"""
Scheduling decision core and the tick driver that exercises it.
"""

from .decision import ALL_DONE, IDLE, Decision, DecisionKind
from .highest_response_ratio_next import (
    HighestResponseRatioNextScheduler,
    highest_response_ratio_next_step,
    response_ratio,
)
from .process import ProcessRecord, validate_roster
from .round_robin import RoundRobinScheduler, RoundRobinState, round_robin_step
from .scheduler_base import SchedulerBase
from .selection import SelectionState
from .shortest_process_next import ShortestProcessNextScheduler, shortest_process_next_step
from .shortest_remaining_time import ShortestRemainingTimeScheduler, shortest_remaining_time_step
from .simulation import Simulation

__all__ = [
    'ALL_DONE',
    'IDLE',
    'Decision',
    'DecisionKind',
    'HighestResponseRatioNextScheduler',
    'ProcessRecord',
    'RoundRobinScheduler',
    'RoundRobinState',
    'SchedulerBase',
    'SelectionState',
    'ShortestProcessNextScheduler',
    'ShortestRemainingTimeScheduler',
    'Simulation',
    'highest_response_ratio_next_step',
    'response_ratio',
    'round_robin_step',
    'shortest_process_next_step',
    'shortest_remaining_time_step',
    'validate_roster',
]
