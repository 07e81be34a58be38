from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..core.constants import FULL_DAY_HOURS, WORKED_STATUSES
from .model import AttendanceRecord


@dataclass(frozen=True)
class MonthlySummary:
    employee_id: str
    year: int
    month: int
    total_days: int = 0
    total_hours: float = 0.0
    average_hours: float = 0.0
    complete_days: int = 0
    insufficient_days: int = 0
    total_overtime: float = 0.0
    total_late_minutes: int = 0

    def to_dict(self) -> dict:
        return {
            "totalDays": self.total_days,
            "totalHours": round(self.total_hours, 2),
            "averageHours": round(self.average_hours, 2),
            "completeDays": self.complete_days,
            "insufficientDays": self.insufficient_days,
            "totalOvertime": round(self.total_overtime, 2),
            "totalLateMinutes": self.total_late_minutes,
        }


def summarize_month(
    employee_id: str,
    year: int,
    month: int,
    records: Iterable[AttendanceRecord],
) -> MonthlySummary:
    """Reduce one employee's month of records.

    Only worked days (present, late, half-day) count. A worked day with zero
    hours is neither complete nor insufficient.
    """

    worked = [
        r
        for r in records
        if r.status.value in WORKED_STATUSES
        and r.employee_id == employee_id
        and r.work_date.year == year
        and r.work_date.month == month
    ]

    total_days = len(worked)
    total_hours = sum(r.total_hours for r in worked)

    return MonthlySummary(
        employee_id=employee_id,
        year=year,
        month=month,
        total_days=total_days,
        total_hours=total_hours,
        average_hours=total_hours / total_days if total_days else 0.0,
        complete_days=sum(1 for r in worked if r.total_hours >= FULL_DAY_HOURS),
        insufficient_days=sum(1 for r in worked if 0 < r.total_hours < FULL_DAY_HOURS),
        total_overtime=sum(r.overtime_hours for r in worked),
        total_late_minutes=sum(int(r.late_minutes) for r in worked),
    )
