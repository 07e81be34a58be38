from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..locations.model import WorkLocation


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class ClosestLocation:
    location: WorkLocation
    distance_meters: int


@dataclass(frozen=True)
class GeofenceResult:
    """Outcome of one geofence evaluation (never persisted)."""

    is_within_geofence: bool
    matched_location: Optional[WorkLocation] = None
    distance_meters: Optional[int] = None
    closest: Optional[ClosestLocation] = None

    def to_dict(self) -> dict:
        data: dict = {
            "isWithinGeofence": self.is_within_geofence,
            "distance": self.distance_meters,
            "workLocation": self.matched_location.to_dict() if self.matched_location else None,
        }
        if self.closest is not None:
            data["closestLocation"] = {
                **self.closest.location.to_dict(),
                "distance": self.closest.distance_meters,
            }
        else:
            data["closestLocation"] = None
        return data


@dataclass(frozen=True)
class LocationCheck:
    is_accurate: bool
    accuracy: Optional[float]
    point: GeoPoint
    geofence: Optional[GeofenceResult] = None

    def to_dict(self) -> dict:
        data = self.geofence.to_dict() if self.geofence else {}
        data.update(
            {
                "coordinates": {"latitude": self.point.latitude, "longitude": self.point.longitude},
                "accuracy": self.accuracy,
                "isAccurate": self.is_accurate,
            }
        )
        return data
