"""Reading process rosters from plain-text files.

One process per line, ``arrival service``, separated by whitespace or a
comma.  Blank lines and ``#`` comments are ignored.  Line order is the
roster order, so the first process listed is index 0.
"""

from __future__ import annotations

from typing import Iterable, List

from tick_scheduler.simulator.process import ProcessRecord


def parse_roster(lines: Iterable[str]) -> List[ProcessRecord]:
    """Build a roster from the lines of a roster file.

    Raises:
        ValueError: On a malformed or invalid line, naming its line number.
    """
    roster: List[ProcessRecord] = []
    for lineno, raw in enumerate(lines, start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        fields = line.replace(",", " ").split()
        if len(fields) != 2:
            raise ValueError(
                f"line {lineno}: expected 'arrival service', got {raw.strip()!r}"
            )
        try:
            arrival, service = (int(f) for f in fields)
            roster.append(ProcessRecord(arrival_time=arrival, service_time=service))
        except ValueError as exc:
            raise ValueError(f"line {lineno}: {exc}") from exc
    return roster


def load_roster(path: str) -> List[ProcessRecord]:
    """Read a roster file from *path*."""
    with open(path, "r", encoding="utf-8") as f:
        return parse_roster(f)
