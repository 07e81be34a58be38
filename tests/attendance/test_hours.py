from datetime import time, timedelta

import pytest

from src.hr_portal.hr_portal.attendance.hours import compute_break_hours, compute_worked_hours


def test_plain_shift_without_break():
    assert compute_worked_hours("09:00", "17:30") == 8.5


def test_break_is_subtracted():
    assert compute_worked_hours("09:00", "18:00", "13:00", "13:30") == 8.5


def test_clock_out_before_clock_in_is_zero_not_overnight():
    assert compute_worked_hours("22:00", "06:00") == 0


@pytest.mark.parametrize("clock_in, clock_out", [(None, "17:00"), ("09:00", None), ("", "17:00"), (None, None)])
def test_missing_clock_value_gives_zero(clock_in, clock_out):
    assert compute_worked_hours(clock_in, clock_out) == 0


def test_half_specified_break_is_ignored():
    assert compute_worked_hours("09:00", "17:00", "12:00", None) == 8


def test_inverted_break_counts_as_no_break():
    assert compute_worked_hours("09:00", "17:00", "13:00", "12:00") == 8


def test_break_longer_than_shift_never_goes_negative():
    assert compute_worked_hours("09:00", "10:00", "08:00", "12:00") == 0


def test_accepts_time_and_mysql_timedelta_values():
    assert compute_worked_hours(time(8, 15), timedelta(hours=16, minutes=45)) == 8.5


def test_fractional_hours_keep_precision():
    assert compute_worked_hours("09:00", "09:20") == pytest.approx(0.3333, abs=1e-4)


def test_break_hours():
    assert compute_break_hours("12:00", "12:45") == 0.75
    assert compute_break_hours("12:00", None) == 0
    assert compute_break_hours("13:00", "12:00") == 0


def test_malformed_time_is_caller_error():
    with pytest.raises(ValueError):
        compute_worked_hours("nine", "17:00")
