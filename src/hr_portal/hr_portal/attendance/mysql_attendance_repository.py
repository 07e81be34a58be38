from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_bool, as_float, db_cursor, fetchall, fetchone, normalize_mysql_time
from .model import AttendanceRecord, DailyEntry
from .repository import AttendanceRepository

_SELECT = """
    SELECT
        a.id, a.employee_id, a.work_date,
        a.clock_in, a.clock_out, a.break_start, a.break_end,
        a.total_hours, a.break_hours, a.overtime_hours,
        a.late_minutes, a.early_leaving_minutes,
        a.status, a.work_from_home, a.location, a.notes, a.is_approved,
        a.latitude, a.longitude, a.location_accuracy,
        a.is_within_geofence, a.work_location_id, a.distance_from_work,
        wl.name AS work_location_name,
        wl.address AS work_location_address
    FROM attendance a
    LEFT JOIN work_locations wl ON wl.id = a.work_location_id
"""


def _row_to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["id"]),
        employee_id=str(r["employee_id"]),
        work_date=r["work_date"],
        clock_in=normalize_mysql_time(r.get("clock_in")),
        clock_out=normalize_mysql_time(r.get("clock_out")),
        break_start=normalize_mysql_time(r.get("break_start")),
        break_end=normalize_mysql_time(r.get("break_end")),
        total_hours=as_float(r.get("total_hours")),
        break_hours=as_float(r.get("break_hours")),
        overtime_hours=as_float(r.get("overtime_hours")),
        late_minutes=int(r.get("late_minutes") or 0),
        early_leaving_minutes=int(r.get("early_leaving_minutes") or 0),
        status=AttendanceStatus(r["status"]),
        work_from_home=as_bool(r.get("work_from_home")),
        location=r.get("location"),
        notes=r.get("notes"),
        is_approved=as_bool(r.get("is_approved")),
        latitude=as_float(r.get("latitude"), None),
        longitude=as_float(r.get("longitude"), None),
        location_accuracy=as_float(r.get("location_accuracy"), None),
        is_within_geofence=as_bool(r.get("is_within_geofence")),
        work_location_id=int(r["work_location_id"]) if r.get("work_location_id") is not None else None,
        distance_from_work=as_float(r.get("distance_from_work"), None),
        work_location_name=r.get("work_location_name"),
        work_location_address=r.get("work_location_address"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE a.employee_id=%s AND a.work_date=%s", (employee_id, work_date))
            r = fetchone(cur)
            return _row_to_record(r) if r else None

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE a.id=%s", (int(attendance_id),))
            r = fetchone(cur)
            return _row_to_record(r) if r else None

    def upsert_daily(self, entry: DailyEntry) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(
                    employee_id, work_date, clock_in, clock_out, break_start, break_end,
                    total_hours, break_hours, status, work_from_home, location, notes,
                    latitude, longitude, location_accuracy, is_within_geofence,
                    work_location_id, distance_from_work
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    clock_in=VALUES(clock_in),
                    clock_out=VALUES(clock_out),
                    break_start=VALUES(break_start),
                    break_end=VALUES(break_end),
                    total_hours=VALUES(total_hours),
                    break_hours=VALUES(break_hours),
                    status=VALUES(status),
                    work_from_home=VALUES(work_from_home),
                    location=VALUES(location),
                    notes=VALUES(notes),
                    latitude=VALUES(latitude),
                    longitude=VALUES(longitude),
                    location_accuracy=VALUES(location_accuracy),
                    is_within_geofence=VALUES(is_within_geofence),
                    work_location_id=VALUES(work_location_id),
                    distance_from_work=VALUES(distance_from_work),
                    updated_at=CURRENT_TIMESTAMP
                """,
                (
                    entry.employee_id,
                    entry.work_date,
                    entry.clock_in,
                    entry.clock_out,
                    entry.break_start,
                    entry.break_end,
                    round(entry.total_hours, 2),
                    round(entry.break_hours, 2),
                    entry.status.value,
                    entry.work_from_home,
                    entry.location,
                    entry.notes,
                    entry.latitude,
                    entry.longitude,
                    entry.location_accuracy,
                    entry.is_within_geofence,
                    entry.work_location_id,
                    entry.distance_from_work,
                ),
            )

            # On the update path lastrowid is 0; look the id up by the key.
            if cur.lastrowid:
                return int(cur.lastrowid)

            cur.execute(
                "SELECT id FROM attendance WHERE employee_id=%s AND work_date=%s",
                (entry.employee_id, entry.work_date),
            )
            r = fetchone(cur)
            return int(r["id"]) if r else 0

    def update_by_id(self, attendance_id: int, entry: DailyEntry) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance
                SET clock_in=%s, clock_out=%s, break_start=%s, break_end=%s,
                    total_hours=%s, break_hours=%s, status=%s, work_from_home=%s,
                    location=%s, notes=%s, updated_at=CURRENT_TIMESTAMP
                WHERE id=%s
                """,
                (
                    entry.clock_in,
                    entry.clock_out,
                    entry.break_start,
                    entry.break_end,
                    round(entry.total_hours, 2),
                    round(entry.break_hours, 2),
                    entry.status.value,
                    entry.work_from_home,
                    entry.location,
                    entry.notes,
                    int(attendance_id),
                ),
            )
            return cur.rowcount > 0

    def delete_by_id(self, attendance_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance WHERE id=%s", (int(attendance_id),))
            return cur.rowcount > 0

    def list_month(self, *, employee_id: str, year: int, month: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT
                + """
                WHERE a.employee_id=%s AND YEAR(a.work_date)=%s AND MONTH(a.work_date)=%s
                ORDER BY a.work_date
                """,
                (employee_id, int(year), int(month)),
            )
            return [_row_to_record(r) for r in fetchall(cur)]
