from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Optional

from ..common.datetime_utils import format_clock_time, parse_clock_time
from ..common.validators import optional_non_negative, require_coordinate
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class AttendanceEvent:
    """A clock-in/out submission for one day, as sent by the client."""

    clock_in: Optional[time] = None
    clock_out: Optional[time] = None
    break_start: Optional[time] = None
    break_end: Optional[time] = None
    status: AttendanceStatus = AttendanceStatus.PRESENT
    work_from_home: bool = False
    location: Optional[str] = None
    notes: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    accuracy: Optional[float] = None

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @classmethod
    def from_payload(cls, data: dict) -> "AttendanceEvent":
        """Build an event from a camelCase JSON body.

        Raises ValidationError on unparseable times, unknown status or
        out-of-range coordinates.
        """

        def _time(key: str) -> Optional[time]:
            try:
                return parse_clock_time(data.get(key))
            except (TypeError, ValueError):
                raise ValidationError(f"{key} must be a time (HH:MM)")

        status_raw = data.get("status") or AttendanceStatus.PRESENT.value
        try:
            status = AttendanceStatus(str(status_raw).strip().lower())
        except ValueError:
            allowed = ", ".join(s.value for s in AttendanceStatus)
            raise ValidationError(f"status must be one of: {allowed}")

        lat_raw = data.get("latitude")
        lon_raw = data.get("longitude")
        latitude = longitude = None
        if lat_raw not in (None, "") and lon_raw not in (None, ""):
            latitude = require_coordinate(lat_raw, "latitude", limit=90)
            longitude = require_coordinate(lon_raw, "longitude", limit=180)

        return cls(
            clock_in=_time("clockIn"),
            clock_out=_time("clockOut"),
            break_start=_time("breakStart"),
            break_end=_time("breakEnd"),
            status=status,
            work_from_home=bool(data.get("workFromHome", False)),
            location=str(data.get("location") or "").strip() or None,
            notes=str(data.get("notes") or "").strip() or None,
            latitude=latitude,
            longitude=longitude,
            accuracy=optional_non_negative(data.get("locationAccuracy"), "locationAccuracy"),
        )


@dataclass(frozen=True)
class DailyEntry:
    """Write model: the values stored for one (employee, day)."""

    employee_id: str
    work_date: date
    clock_in: Optional[time]
    clock_out: Optional[time]
    break_start: Optional[time]
    break_end: Optional[time]
    total_hours: float
    break_hours: float
    status: AttendanceStatus
    work_from_home: bool = False
    location: Optional[str] = None
    notes: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    location_accuracy: Optional[float] = None
    is_within_geofence: bool = False
    work_location_id: Optional[int] = None
    distance_from_work: Optional[float] = None


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: the stored attendance row for one employee and day."""

    attendance_id: int
    employee_id: str
    work_date: date
    clock_in: Optional[time]
    clock_out: Optional[time]
    break_start: Optional[time]
    break_end: Optional[time]
    total_hours: float
    break_hours: float
    status: AttendanceStatus
    overtime_hours: float = 0.0
    late_minutes: int = 0
    early_leaving_minutes: int = 0
    work_from_home: bool = False
    location: Optional[str] = None
    notes: Optional[str] = None
    is_approved: bool = False
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    location_accuracy: Optional[float] = None
    is_within_geofence: bool = False
    work_location_id: Optional[int] = None
    distance_from_work: Optional[float] = None
    work_location_name: Optional[str] = None
    work_location_address: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.attendance_id,
            "employeeId": self.employee_id,
            "date": self.work_date.strftime("%Y-%m-%d"),
            "clockIn": format_clock_time(self.clock_in),
            "clockOut": format_clock_time(self.clock_out),
            "breakStart": format_clock_time(self.break_start),
            "breakEnd": format_clock_time(self.break_end),
            "totalHours": round(self.total_hours, 2),
            "breakHours": round(self.break_hours, 2),
            "overtimeHours": round(self.overtime_hours, 2),
            "lateMinutes": self.late_minutes,
            "earlyLeavingMinutes": self.early_leaving_minutes,
            "status": self.status.value,
            "workFromHome": self.work_from_home,
            "location": self.location,
            "notes": self.notes,
            "isApproved": self.is_approved,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "locationAccuracy": self.location_accuracy,
            "isWithinGeofence": self.is_within_geofence,
            "workLocationId": self.work_location_id,
            "workLocationName": self.work_location_name,
            "workLocationAddress": self.work_location_address,
            "distanceFromWork": self.distance_from_work,
        }
