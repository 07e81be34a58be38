"""Example: use the service layer directly (no Flask).

Controllers are a thin JSON layer; the attendance rules live in the services.
"""

import importlib
from datetime import date

from dotenv import load_dotenv

from config import get_settings_module

from src.hr_portal.hr_portal.attendance.model import AttendanceEvent
from src.hr_portal.hr_portal.common.datetime_utils import parse_clock_time
from src.hr_portal.hr_portal.container import build_container


def main():
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    event = AttendanceEvent(
        clock_in=parse_clock_time("09:00"),
        clock_out=parse_clock_time("18:00"),
        break_start=parse_clock_time("13:00"),
        break_end=parse_clock_time("13:30"),
        latitude=40.7128,
        longitude=-74.0060,
        accuracy=10,
    )
    today = date.today()
    outcome = container.attendance_service.upsert_daily_record("EMP001", today, event)
    print(outcome.to_dict() if outcome.accepted else outcome.message)
    print(container.attendance_service.monthly_summary("EMP001", today.year, today.month).to_dict())


if __name__ == "__main__":
    main()
