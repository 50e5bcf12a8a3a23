"""Process record model for the CPU scheduling simulator."""

from __future__ import annotations

from typing import Optional, Sequence


class ProcessRecord:
    """A single simulated process in the roster.

    The roster is index-stable: a process is identified by its position,
    not by any field on this record.  Schedulers only read
    ``arrival_time``, ``service_time``, ``time_scheduled`` and
    ``is_done``; the simulation driver is the only writer, via
    run_one_tick().

    Args:
        arrival_time: Tick at which the process becomes eligible to run.
        service_time: Total ticks of processor time the process needs.
        time_scheduled: Ticks of processor time already consumed.
    """

    __slots__ = (
        "arrival_time",
        "service_time",
        "time_scheduled",
        "start_time",
        "completion_time",
    )

    def __init__(
        self,
        arrival_time: int,
        service_time: int,
        time_scheduled: int = 0,
    ) -> None:
        _check_fields(arrival_time, service_time, time_scheduled)

        self.arrival_time: int = arrival_time
        self.service_time: int = service_time
        self.time_scheduled: int = time_scheduled
        self.start_time: Optional[int] = None
        self.completion_time: Optional[int] = None

    @property
    def is_done(self) -> bool:
        """True once the process has received all the service it needs."""
        return self.time_scheduled == self.service_time

    @property
    def remaining_time(self) -> int:
        return self.service_time - self.time_scheduled

    def is_eligible(self, current_tick: int) -> bool:
        """Return True if the process has arrived and is not yet done."""
        return self.arrival_time <= current_tick and not self.is_done

    def run_one_tick(self, current_tick: int) -> bool:
        """Give this process the processor for one tick.

        Args:
            current_tick: The tick the process ran in.

        Returns:
            True if the process finished during this tick.

        Raises:
            RuntimeError: If the process is already done or has not
                arrived yet.
        """
        if self.is_done:
            raise RuntimeError(
                f"Process is already done ({self.time_scheduled}/{self.service_time}); "
                f"cannot run it at tick {current_tick}."
            )
        if current_tick < self.arrival_time:
            raise RuntimeError(
                f"Process arriving at tick {self.arrival_time} cannot run at tick {current_tick}."
            )

        if self.start_time is None:
            self.start_time = current_tick

        self.time_scheduled += 1

        if self.is_done:
            self.completion_time = current_tick + 1
            return True
        return False

    @property
    def turnaround_time(self) -> Optional[int]:
        """Time from arrival to completion, or None if not yet complete."""
        if self.completion_time is None:
            return None
        return self.completion_time - self.arrival_time

    @property
    def waiting_time(self) -> Optional[int]:
        """Time spent waiting (turnaround minus service), or None if not yet complete."""
        if self.turnaround_time is None:
            return None
        return self.turnaround_time - self.service_time

    def __repr__(self) -> str:
        return (
            f"ProcessRecord(arrival={self.arrival_time}, "
            f"service={self.service_time}, scheduled={self.time_scheduled}, "
            f"start={self.start_time}, completion={self.completion_time})"
        )


def _check_fields(arrival_time: int, service_time: int, time_scheduled: int) -> None:
    if service_time <= 0:
        raise ValueError(f"service_time must be positive, got {service_time}")
    if arrival_time < 0:
        raise ValueError(f"arrival_time must be non-negative, got {arrival_time}")
    if not 0 <= time_scheduled <= service_time:
        raise ValueError(
            f"time_scheduled must be within [0, {service_time}], got {time_scheduled}"
        )


def validate_roster(roster: Sequence[ProcessRecord]) -> None:
    """Reject a roster containing an invalid entry before a run starts.

    Records are validated on construction, but the driver owns them and
    may have mutated them since, so every field is checked again.

    Raises:
        ValueError: Naming the index of the first invalid entry.
    """
    for index, record in enumerate(roster):
        try:
            _check_fields(record.arrival_time, record.service_time, record.time_scheduled)
        except ValueError as exc:
            raise ValueError(f"Invalid roster entry {index}: {exc}") from exc
