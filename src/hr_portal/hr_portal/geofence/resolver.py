from __future__ import annotations

from typing import Iterable, Optional

from ..locations.model import WorkLocation
from .distance import haversine_distance
from .model import ClosestLocation, GeofenceResult, GeoPoint


def resolve_geofence(point: GeoPoint, zones: Iterable[WorkLocation]) -> GeofenceResult:
    """Check ``point`` against a snapshot of work locations.

    Inactive zones are ignored. When several zones contain the point the
    closest one wins (input order breaks exact ties). When none does, the
    nearest zone is reported as ``closest``. Distances are rounded to whole
    meters; containment uses the unrounded value.
    """

    measured: list[tuple[float, WorkLocation]] = [
        (haversine_distance(point.latitude, point.longitude, z.latitude, z.longitude), z)
        for z in zones
        if z.is_active
    ]
    if not measured:
        return GeofenceResult(is_within_geofence=False)

    best_inside: Optional[tuple[float, WorkLocation]] = None
    nearest: Optional[tuple[float, WorkLocation]] = None
    for distance, zone in measured:
        if nearest is None or distance < nearest[0]:
            nearest = (distance, zone)
        if distance <= zone.radius_meters and (best_inside is None or distance < best_inside[0]):
            best_inside = (distance, zone)

    if best_inside is not None:
        return GeofenceResult(
            is_within_geofence=True,
            matched_location=best_inside[1],
            distance_meters=round(best_inside[0]),
        )

    return GeofenceResult(
        is_within_geofence=False,
        distance_meters=round(nearest[0]),
        closest=ClosestLocation(location=nearest[1], distance_meters=round(nearest[0])),
    )
