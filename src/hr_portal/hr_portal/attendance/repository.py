from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord, DailyEntry


class AttendanceRepository(Protocol):
    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def upsert_daily(self, entry: DailyEntry) -> int:
        """Insert or overwrite the row for (employee_id, work_date).

        Must be a single atomic statement on the unique key; returns the row id.
        """

        raise NotImplementedError

    def update_by_id(self, attendance_id: int, entry: DailyEntry) -> bool:
        """Overwrite clock times, hours, status and labels of an existing row."""

        raise NotImplementedError

    def delete_by_id(self, attendance_id: int) -> bool:
        raise NotImplementedError

    def list_month(self, *, employee_id: str, year: int, month: int) -> Sequence[AttendanceRecord]:
        """Rows of one employee for a calendar month, ordered by date."""

        raise NotImplementedError
