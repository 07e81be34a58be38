from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import WorkLocation


class WorkLocationRepository(Protocol):
    def list_all(self) -> Sequence[WorkLocation]:
        raise NotImplementedError

    def list_active(self) -> Sequence[WorkLocation]:
        """Snapshot of the zones the geofence check runs against."""

        raise NotImplementedError

    def create(
        self,
        *,
        name: str,
        address: Optional[str],
        latitude: float,
        longitude: float,
        radius_meters: int,
    ) -> int:
        raise NotImplementedError
