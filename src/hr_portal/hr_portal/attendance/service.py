from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.logger import get_logger
from ..common.validators import optional_non_negative, require_coordinate, require_non_empty
from ..core.constants import DEFAULT_RADIUS_METERS, MAX_LOCATION_ACCURACY_METERS, MAX_STORED_ACCURACY_METERS
from ..core.enums import RejectionReason
from ..core.exceptions import NotFoundError, ValidationError
from ..geofence.model import GeofenceResult, GeoPoint, LocationCheck
from ..geofence.resolver import resolve_geofence
from ..locations.repository import WorkLocationRepository
from .hours import compute_break_hours, compute_worked_hours
from .model import AttendanceEvent, AttendanceRecord, DailyEntry
from .repository import AttendanceRepository
from .summary import MonthlySummary, summarize_month

logger = get_logger(__name__)


@dataclass(frozen=True)
class UpsertOutcome:
    """Result of a clock submission: either the stored record or a refusal."""

    accepted: bool
    record: Optional[AttendanceRecord] = None
    geofence: Optional[GeofenceResult] = None
    reason: Optional[RejectionReason] = None
    message: Optional[str] = None
    required_distance: Optional[int] = None
    accuracy: Optional[float] = None

    @classmethod
    def reject(cls, reason: RejectionReason, message: str, **kwargs) -> "UpsertOutcome":
        return cls(accepted=False, reason=reason, message=message, **kwargs)

    def to_dict(self) -> dict:
        geofence_info = self.geofence.to_dict() if self.geofence else None
        if self.accepted:
            return {
                "id": self.record.attendance_id,
                "totalHours": round(self.record.total_hours, 2),
                "breakHours": round(self.record.break_hours, 2),
                "isWithinGeofence": self.record.is_within_geofence,
                "geofenceInfo": geofence_info,
                "record": self.record.to_dict(),
            }

        data: dict = {"reason": self.reason.value}
        if geofence_info is not None:
            data["geofenceInfo"] = geofence_info
        if self.required_distance is not None:
            data["requiredDistance"] = self.required_distance
        if self.accuracy is not None:
            data["accuracy"] = self.accuracy
            data["isAccurate"] = False
        return data


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        locations: WorkLocationRepository,
        *,
        max_accuracy_meters: float = MAX_LOCATION_ACCURACY_METERS,
        default_radius_meters: int = DEFAULT_RADIUS_METERS,
        require_location: bool = False,
    ):
        self._attendance = attendance
        self._locations = locations
        self._max_accuracy = float(max_accuracy_meters)
        self._default_radius = int(default_radius_meters)
        self._require_location = bool(require_location)

    def _is_accurate(self, accuracy: Optional[float]) -> bool:
        return accuracy is None or accuracy <= self._max_accuracy

    def upsert_daily_record(self, employee_id: str, work_date: date, event: AttendanceEvent) -> UpsertOutcome:
        """Create or overwrite the single record of ``employee_id`` on ``work_date``.

        Off-site submissions (not work-from-home, coordinates given) must be
        accurate and inside an active work location, otherwise nothing is
        written and a rejected outcome is returned. Database errors propagate.
        """

        employee_id = require_non_empty(employee_id, "employeeId")

        geofence: Optional[GeofenceResult] = None
        if not event.work_from_home:
            if event.has_coordinates:
                if not self._is_accurate(event.accuracy):
                    logger.info("Rejected %s on %s: accuracy %.0fm", employee_id, work_date, event.accuracy)
                    return UpsertOutcome.reject(
                        RejectionReason.INACCURATE_LOCATION,
                        "Location accuracy is too low. Please try again in an open area.",
                        accuracy=event.accuracy,
                    )

                geofence = resolve_geofence(
                    GeoPoint(event.latitude, event.longitude),
                    self._locations.list_active(),
                )
                if not geofence.is_within_geofence:
                    return self._reject_outside(employee_id, work_date, geofence)
            elif self._require_location:
                return UpsertOutcome.reject(
                    RejectionReason.MISSING_COORDINATES,
                    "Location is required to clock in on site.",
                )

        entry = self._build_entry(employee_id, work_date, event, geofence)
        attendance_id = self._attendance.upsert_daily(entry)
        record = self._attendance.get_for_employee_and_date(employee_id, work_date)
        logger.info(
            "Attendance %s saved for %s on %s (%.2fh, %s)",
            attendance_id,
            employee_id,
            work_date,
            entry.total_hours,
            entry.status.value,
        )
        return UpsertOutcome(accepted=True, record=record, geofence=geofence)

    def _reject_outside(self, employee_id: str, work_date: date, geofence: GeofenceResult) -> UpsertOutcome:
        if geofence.closest is None:
            logger.info("Rejected %s on %s: no active work location", employee_id, work_date)
            return UpsertOutcome.reject(
                RejectionReason.OUTSIDE_GEOFENCE,
                "There is no active work location to clock in at.",
                geofence=geofence,
                required_distance=self._default_radius,
            )

        distance = geofence.closest.distance_meters
        radius = geofence.closest.location.radius_meters or self._default_radius
        logger.info(
            "Rejected %s on %s: %dm from %s (radius %dm)",
            employee_id,
            work_date,
            distance,
            geofence.closest.location.name,
            radius,
        )
        return UpsertOutcome.reject(
            RejectionReason.OUTSIDE_GEOFENCE,
            f"You are {distance}m away from the nearest work location. Please move closer to clock in.",
            geofence=geofence,
            required_distance=radius,
        )

    @staticmethod
    def _build_entry(
        employee_id: str,
        work_date: date,
        event: AttendanceEvent,
        geofence: Optional[GeofenceResult],
    ) -> DailyEntry:
        matched = geofence.matched_location if geofence else None
        return DailyEntry(
            employee_id=employee_id,
            work_date=work_date,
            clock_in=event.clock_in,
            clock_out=event.clock_out,
            break_start=event.break_start,
            break_end=event.break_end,
            total_hours=compute_worked_hours(event.clock_in, event.clock_out, event.break_start, event.break_end),
            break_hours=compute_break_hours(event.break_start, event.break_end),
            status=event.status,
            work_from_home=event.work_from_home,
            location=event.location,
            notes=event.notes,
            latitude=event.latitude,
            longitude=event.longitude,
            location_accuracy=min(event.accuracy, MAX_STORED_ACCURACY_METERS) if event.accuracy is not None else None,
            is_within_geofence=bool(geofence and geofence.is_within_geofence),
            work_location_id=matched.location_id if matched else None,
            distance_from_work=geofence.distance_meters if geofence else None,
        )

    def amend_record(self, attendance_id: int, event: AttendanceEvent) -> AttendanceRecord:
        """Edit an existing record by id. No geofence gate: this is an admin edit."""

        existing = self._attendance.get_by_id(int(attendance_id))
        if not existing:
            raise NotFoundError("Attendance record not found")

        entry = self._build_entry(existing.employee_id, existing.work_date, event, None)
        self._attendance.update_by_id(existing.attendance_id, entry)
        logger.info("Attendance %s amended (%.2fh)", existing.attendance_id, entry.total_hours)
        return self._attendance.get_by_id(existing.attendance_id)

    def delete_record(self, attendance_id: int) -> None:
        if not self._attendance.delete_by_id(int(attendance_id)):
            raise NotFoundError("Attendance record not found")
        logger.info("Attendance %s deleted", attendance_id)

    def get_month(self, employee_id: str, year: int, month: int) -> dict[str, AttendanceRecord]:
        employee_id = require_non_empty(employee_id, "employeeId")
        _check_period(year, month)
        rows = self._attendance.list_month(employee_id=employee_id, year=int(year), month=int(month))
        return {r.work_date.strftime("%Y-%m-%d"): r for r in rows}

    def monthly_summary(self, employee_id: str, year: int, month: int) -> MonthlySummary:
        employee_id = require_non_empty(employee_id, "employeeId")
        _check_period(year, month)
        rows = self._attendance.list_month(employee_id=employee_id, year=int(year), month=int(month))
        return summarize_month(employee_id, int(year), int(month), rows)

    def check_location(self, latitude, longitude, accuracy=None) -> LocationCheck:
        """Accuracy gate plus geofence evaluation, nothing is stored."""

        if latitude in (None, "") or longitude in (None, ""):
            raise ValidationError("Latitude and longitude are required")
        point = GeoPoint(
            require_coordinate(latitude, "Latitude", limit=90),
            require_coordinate(longitude, "Longitude", limit=180),
        )
        accuracy = optional_non_negative(accuracy, "Accuracy")

        if not self._is_accurate(accuracy):
            return LocationCheck(is_accurate=False, accuracy=accuracy, point=point)

        geofence = resolve_geofence(point, self._locations.list_active())
        return LocationCheck(is_accurate=True, accuracy=accuracy, point=point, geofence=geofence)


def _check_period(year: int, month: int) -> None:
    if not 1 <= int(month) <= 12:
        raise ValidationError("Month must be between 1 and 12")
    if int(year) < 1:
        raise ValidationError("Year is not valid")
