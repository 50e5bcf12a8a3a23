from typing import Callable, Dict

import pytest

from tick_scheduler.simulator.highest_response_ratio_next import HighestResponseRatioNextScheduler
from tick_scheduler.simulator.round_robin import RoundRobinScheduler
from tick_scheduler.simulator.scheduler_base import SchedulerBase
from tick_scheduler.simulator.shortest_process_next import ShortestProcessNextScheduler
from tick_scheduler.simulator.shortest_remaining_time import ShortestRemainingTimeScheduler

SCHEDULER_FACTORIES: Dict[str, Callable[[], SchedulerBase]] = {
    "rr-q1": lambda: RoundRobinScheduler(time_quantum=1),
    "rr-q3": lambda: RoundRobinScheduler(time_quantum=3),
    "spn": ShortestProcessNextScheduler,
    "srt": ShortestRemainingTimeScheduler,
    "srt-preemptive": lambda: ShortestRemainingTimeScheduler(preemptive=True),
    "hrrn": HighestResponseRatioNextScheduler,
}

RUN_TO_COMPLETION = ("spn", "srt", "hrrn")


@pytest.fixture(params=sorted(SCHEDULER_FACTORIES))
def any_scheduler(request):
    """Each scheduler configuration in turn."""
    return SCHEDULER_FACTORIES[request.param]()


@pytest.fixture(params=RUN_TO_COMPLETION)
def run_to_completion_scheduler(request):
    """The policies that keep a selected process until it is done."""
    return SCHEDULER_FACTORIES[request.param]()
