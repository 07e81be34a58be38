from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_bool, as_float, db_cursor, fetchall
from .model import WorkLocation
from .repository import WorkLocationRepository

_COLUMNS = "id, name, address, latitude, longitude, radius_meters, is_active"


def _row_to_location(r: dict) -> WorkLocation:
    return WorkLocation(
        location_id=int(r["id"]),
        name=r["name"],
        address=r.get("address"),
        latitude=as_float(r["latitude"]),
        longitude=as_float(r["longitude"]),
        radius_meters=int(r.get("radius_meters") or 0),
        is_active=as_bool(r.get("is_active")),
    )


class MySQLWorkLocationRepository(WorkLocationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[WorkLocation]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM work_locations ORDER BY name")
            return [_row_to_location(r) for r in fetchall(cur)]

    def list_active(self) -> Sequence[WorkLocation]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM work_locations WHERE is_active = TRUE ORDER BY id")
            return [_row_to_location(r) for r in fetchall(cur)]

    def create(
        self,
        *,
        name: str,
        address: Optional[str],
        latitude: float,
        longitude: float,
        radius_meters: int,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO work_locations(name, address, latitude, longitude, radius_meters)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (name, address, latitude, longitude, int(radius_meters)),
            )
            return int(cur.lastrowid)
