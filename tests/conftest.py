from __future__ import annotations

from dataclasses import asdict
from datetime import date
from typing import Optional

import pytest

from src.hr_portal.hr_portal.attendance.model import AttendanceRecord, DailyEntry
from src.hr_portal.hr_portal.locations.model import WorkLocation


class InMemoryAttendance:
    """Keeps one record per (employee_id, work_date) like the unique key does."""

    def __init__(self):
        self._by_key: dict[tuple[str, date], AttendanceRecord] = {}
        self._id = 0
        self.writes = 0

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        return self._by_key.get((employee_id, work_date))

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        for rec in self._by_key.values():
            if rec.attendance_id == int(attendance_id):
                return rec
        return None

    def upsert_daily(self, entry: DailyEntry) -> int:
        self.writes += 1
        key = (entry.employee_id, entry.work_date)
        existing = self._by_key.get(key)
        if existing:
            rid = existing.attendance_id
        else:
            self._id += 1
            rid = self._id
        self._by_key[key] = AttendanceRecord(attendance_id=rid, **asdict(entry))
        return rid

    def update_by_id(self, attendance_id: int, entry: DailyEntry) -> bool:
        existing = self.get_by_id(attendance_id)
        if not existing:
            return False
        self.writes += 1
        self._by_key[(existing.employee_id, existing.work_date)] = AttendanceRecord(
            attendance_id=existing.attendance_id,
            **{**asdict(entry), "employee_id": existing.employee_id, "work_date": existing.work_date},
        )
        return True

    def delete_by_id(self, attendance_id: int) -> bool:
        existing = self.get_by_id(attendance_id)
        if not existing:
            return False
        del self._by_key[(existing.employee_id, existing.work_date)]
        return True

    def list_month(self, *, employee_id: str, year: int, month: int):
        rows = [
            r
            for r in self._by_key.values()
            if r.employee_id == employee_id and r.work_date.year == year and r.work_date.month == month
        ]
        return sorted(rows, key=lambda r: r.work_date)

    def add(self, record: AttendanceRecord) -> None:
        self._by_key[(record.employee_id, record.work_date)] = record
        self._id = max(self._id, record.attendance_id)


class InMemoryLocations:
    def __init__(self, locations: Optional[list[WorkLocation]] = None):
        self._locations = list(locations or [])
        self.active_calls = 0

    def list_all(self):
        return sorted(self._locations, key=lambda loc: loc.name)

    def list_active(self):
        self.active_calls += 1
        return [loc for loc in self._locations if loc.is_active]

    def create(self, *, name, address, latitude, longitude, radius_meters) -> int:
        location_id = len(self._locations) + 1
        self._locations.append(
            WorkLocation(
                location_id=location_id,
                name=name,
                address=address,
                latitude=latitude,
                longitude=longitude,
                radius_meters=radius_meters,
            )
        )
        return location_id


@pytest.fixture
def attendance_repo() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def office() -> WorkLocation:
    return WorkLocation(location_id=1, name="Main Office", latitude=10.0, longitude=20.0, radius_meters=100)


@pytest.fixture
def locations_repo(office) -> InMemoryLocations:
    return InMemoryLocations([office])


@pytest.fixture
def empty_locations_repo() -> InMemoryLocations:
    return InMemoryLocations([])
