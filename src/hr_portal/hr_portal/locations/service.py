from __future__ import annotations

from typing import Optional, Sequence

from ..common.logger import get_logger
from ..common.validators import require_coordinate, require_non_empty
from ..core.constants import DEFAULT_RADIUS_METERS
from ..core.exceptions import ValidationError
from .model import WorkLocation
from .repository import WorkLocationRepository

logger = get_logger(__name__)


class WorkLocationService:
    def __init__(self, locations: WorkLocationRepository, *, default_radius_meters: int = DEFAULT_RADIUS_METERS):
        self._locations = locations
        self._default_radius = int(default_radius_meters)

    def list_locations(self) -> Sequence[WorkLocation]:
        return list(self._locations.list_all())

    def add_location(
        self,
        *,
        name: str,
        latitude,
        longitude,
        address: Optional[str] = None,
        radius_meters=None,
    ) -> int:
        name = require_non_empty(name, "Name")
        if latitude in (None, "") or longitude in (None, ""):
            raise ValidationError("Name, latitude, and longitude are required")
        lat = require_coordinate(latitude, "Latitude", limit=90)
        lon = require_coordinate(longitude, "Longitude", limit=180)

        if radius_meters in (None, ""):
            radius = self._default_radius
        else:
            try:
                radius = int(radius_meters)
            except (TypeError, ValueError):
                raise ValidationError("Radius must be a whole number of meters")
        if radius <= 0:
            raise ValidationError("Radius must be positive")

        address = address.strip() if address else None
        location_id = self._locations.create(
            name=name, address=address, latitude=lat, longitude=lon, radius_meters=radius
        )
        logger.info("Work location %s created (%s, r=%dm)", location_id, name, radius)
        return location_id
