from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_RADIUS_METERS, MAX_LOCATION_ACCURACY_METERS
from .database.connection import DBConfig, DatabaseConnection
from .locations.mysql_location_repository import MySQLWorkLocationRepository
from .locations.repository import WorkLocationRepository
from .locations.service import WorkLocationService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection | None

    attendance_repo: AttendanceRepository
    locations_repo: WorkLocationRepository

    attendance_service: AttendanceService
    location_service: WorkLocationService


def wire(
    *,
    conn: DatabaseConnection | None,
    attendance_repo: AttendanceRepository,
    locations_repo: WorkLocationRepository,
    max_accuracy_meters: float = MAX_LOCATION_ACCURACY_METERS,
    default_radius_meters: int = DEFAULT_RADIUS_METERS,
    require_location: bool = False,
) -> Container:
    """Assemble services on top of the given repositories."""

    attendance_service = AttendanceService(
        attendance_repo,
        locations_repo,
        max_accuracy_meters=max_accuracy_meters,
        default_radius_meters=default_radius_meters,
        require_location=require_location,
    )
    location_service = WorkLocationService(locations_repo, default_radius_meters=default_radius_meters)

    return Container(
        conn=conn,
        attendance_repo=attendance_repo,
        locations_repo=locations_repo,
        attendance_service=attendance_service,
        location_service=location_service,
    )


def build_container(
    *,
    db_config: dict,
    max_accuracy_meters: float = MAX_LOCATION_ACCURACY_METERS,
    default_radius_meters: int = DEFAULT_RADIUS_METERS,
    require_location: bool = False,
) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))
    return wire(
        conn=conn,
        attendance_repo=MySQLAttendanceRepository(conn),
        locations_repo=MySQLWorkLocationRepository(conn),
        max_accuracy_meters=max_accuracy_meters,
        default_radius_meters=default_radius_meters,
        require_location=require_location,
    )
