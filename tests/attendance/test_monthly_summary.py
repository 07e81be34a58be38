from datetime import date, time

from src.hr_portal.hr_portal.attendance.model import AttendanceRecord
from src.hr_portal.hr_portal.attendance.summary import summarize_month
from src.hr_portal.hr_portal.core.enums import AttendanceStatus


def _rec(rid, day, hours, status=AttendanceStatus.PRESENT, *, overtime=0.0, late=0, employee="E1", month=3):
    return AttendanceRecord(
        attendance_id=rid,
        employee_id=employee,
        work_date=date(2025, month, day),
        clock_in=time(9, 0),
        clock_out=None,
        break_start=None,
        break_end=None,
        total_hours=hours,
        break_hours=0.0,
        status=status,
        overtime_hours=overtime,
        late_minutes=late,
    )


def test_empty_month_has_no_division_by_zero():
    summary = summarize_month("E1", 2025, 3, [])

    assert summary.total_days == 0
    assert summary.average_hours == 0
    assert summary.total_hours == 0


def test_counts_complete_and_insufficient_days():
    records = [
        _rec(1, 3, 9.0),
        _rec(2, 4, 10.5, overtime=1.5),
        _rec(3, 5, 7.0, AttendanceStatus.LATE, late=25),
        _rec(4, 6, 4.0, AttendanceStatus.HALF_DAY),
        _rec(5, 7, 0.0),
    ]

    summary = summarize_month("E1", 2025, 3, records)

    assert summary.total_days == 5
    assert summary.total_hours == 30.5
    assert summary.average_hours == 30.5 / 5
    assert summary.complete_days == 2
    assert summary.insufficient_days == 2
    assert summary.total_overtime == 1.5
    assert summary.total_late_minutes == 25


def test_non_worked_statuses_are_excluded():
    records = [
        _rec(1, 3, 8.0),
        _rec(2, 4, 8.0, AttendanceStatus.SICK),
        _rec(3, 5, 0.0, AttendanceStatus.ABSENT),
        _rec(4, 6, 8.0, AttendanceStatus.LEAVE),
    ]

    summary = summarize_month("E1", 2025, 3, records)

    assert summary.total_days == 1
    assert summary.total_hours == 8.0


def test_other_months_and_employees_are_ignored():
    records = [_rec(1, 3, 8.0), _rec(2, 3, 8.0, month=4), _rec(3, 4, 8.0, employee="E2")]

    assert summarize_month("E1", 2025, 3, records).total_days == 1


def test_to_dict_uses_api_field_names():
    data = summarize_month("E1", 2025, 3, [_rec(1, 3, 8.333333)]).to_dict()

    assert data["totalHours"] == 8.33
    assert data["averageHours"] == 8.33
    assert set(data) == {
        "totalDays",
        "totalHours",
        "averageHours",
        "completeDays",
        "insufficientDays",
        "totalOvertime",
        "totalLateMinutes",
    }
