"""Worked/break hour arithmetic on time-of-day values.

All values are on the same calendar day; a clock-out before the clock-in
counts as zero minutes, never as an overnight shift. Seconds are ignored.
"""

from __future__ import annotations

from datetime import time, timedelta
from typing import Optional, Union

from ..database.mysql_base import normalize_mysql_time

TimeValue = Union[str, time, timedelta, None]


def _to_minutes(value: TimeValue) -> Optional[int]:
    if value is None or value == "":
        return None
    t = normalize_mysql_time(value)
    return t.hour * 60 + t.minute


def _span_minutes(start: TimeValue, end: TimeValue) -> int:
    s = _to_minutes(start)
    e = _to_minutes(end)
    if s is None or e is None:
        return 0
    return max(e - s, 0)


def compute_worked_hours(
    clock_in: TimeValue,
    clock_out: TimeValue,
    break_start: TimeValue = None,
    break_end: TimeValue = None,
) -> float:
    """Hours between clock-in and clock-out minus the break, never negative.

    Returns 0 when either clock value is missing. The break only counts when
    both of its ends are given.
    """

    if _to_minutes(clock_in) is None or _to_minutes(clock_out) is None:
        return 0.0

    worked = _span_minutes(clock_in, clock_out)
    worked -= _span_minutes(break_start, break_end)
    return max(worked, 0) / 60


def compute_break_hours(break_start: TimeValue, break_end: TimeValue) -> float:
    return _span_minutes(break_start, break_end) / 60
