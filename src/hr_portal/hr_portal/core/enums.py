from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Daily attendance status as stored in the database."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    HALF_DAY = "half-day"
    SICK = "sick"
    LEAVE = "leave"


class RejectionReason(str, Enum):
    """Why a clock event was refused before anything was written."""

    MISSING_COORDINATES = "MISSING_COORDINATES"
    INACCURATE_LOCATION = "INACCURATE_LOCATION"
    OUTSIDE_GEOFENCE = "OUTSIDE_GEOFENCE"
