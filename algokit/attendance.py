"""Attendance report from a meeting join/leave log in CSV form.

Each row after the header holds a name, a status ("Joined" or "Left") and a
timestamp whose clock time reads H:MM:SS on a 12-hour clock. Consecutive rows
with the same name form one attendee. The class ends at 5:00:00 and lasts
2 hours 50 minutes.
"""

from __future__ import annotations

import argparse
import csv
import re
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import groupby, pairwise
from operator import attrgetter

JOINED = "Joined"
LEFT = "Left"
CLASS_END = 5 * 3600
CLASS_LENGTH = 2 * 3600 + 50 * 60
HEADER = "Name of Attendees\t\tTime Left/Joined \t\tPercentage of attendance in class"

_CLOCK = re.compile(r"(\d{1,2}):(\d{2}):(\d{2})")


@dataclass(frozen=True)
class AttendanceRecord:
    """One join or leave event."""

    name: str
    status: str
    hour: int
    minute: int
    second: int

    @property
    def seconds(self) -> int:
        """Clock time as seconds since 0:00:00."""
        return self.hour * 3600 + self.minute * 60 + self.second


@dataclass(frozen=True)
class AttendeeSummary:
    """Totals for one run of records with the same name."""

    name: str
    entries: int
    seconds_present: int

    @property
    def percentage(self) -> float:
        """Share of the class length spent present, in percent."""
        return 100 * self.seconds_present / CLASS_LENGTH


def parse_time(text: str) -> tuple[int, int, int]:
    """Return (hour, minute, second) of the first H:MM:SS found in ``text``."""
    match = _CLOCK.search(text)
    if match is None:
        raise ValueError(f"no H:MM:SS time in {text!r}")
    hour, minute, second = (int(part) for part in match.groups())
    return hour, minute, second


def read_records(stream: Iterable[str]) -> list[AttendanceRecord]:
    """Read records from CSV lines, skipping the header and blank rows."""
    reader = csv.reader(stream)
    next(reader, None)
    records = []
    for line_no, row in enumerate(reader, start=2):
        if not any(field.strip() for field in row):
            continue
        if len(row) < 3:
            raise ValueError(f"line {line_no}: expected name, status and time")
        hour, minute, second = parse_time(",".join(row[2:]))
        records.append(AttendanceRecord(row[0], row[1], hour, minute, second))
    return records


def summarize(records: Iterable[AttendanceRecord]) -> list[AttendeeSummary]:
    """Total the time present for each run of same-name records.

    A "Joined" followed by a "Left" counts the time between them; a run that
    ends with "Joined" counts up to the end of class, less one minute.
    """
    summaries = []
    for name, group in groupby(records, key=attrgetter("name")):
        entries = list(group)
        present = sum(
            later.seconds - earlier.seconds
            for earlier, later in pairwise(entries)
            if earlier.status == JOINED and later.status == LEFT
        )
        last = entries[-1]
        if last.status == JOINED:
            present += CLASS_END - (last.seconds + 60)
        summaries.append(AttendeeSummary(name, len(entries), present))
    return summaries


def format_report(summaries: Sequence[AttendeeSummary]) -> str:
    """Render the report table, names padded to a common width."""
    width = max((len(s.name) for s in summaries), default=0)
    lines = [HEADER]
    lines.extend(
        f"{s.name.ljust(width)}\t{s.entries} \t\t\t{s.percentage:f}" for s in summaries
    )
    return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Print the attendance report for a CSV log."""
    parser = argparse.ArgumentParser(description="Summarize class attendance.")
    parser.add_argument("path", nargs="?", default="sheet.csv", help="CSV log file")
    args = parser.parse_args(argv)
    try:
        handle = open(args.path, newline="", encoding="utf-8-sig")
    except FileNotFoundError:
        print("No file found!")
        return 1
    with handle:
        try:
            records = read_records(handle)
        except ValueError as error:
            print(error, file=sys.stderr)
            return 1
    print(format_report(summarize(records)), end="")
    return 0