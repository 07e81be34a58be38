from __future__ import annotations

from functools import wraps

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.logger import get_logger
from ..common.validators import require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container
from .model import AttendanceEvent

logger = get_logger(__name__)


def json_endpoint(failure_message: str):
    """Map domain errors to JSON responses: 400 invalid, 404 missing, 500 otherwise."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except ValidationError as e:
                return jsonify({"success": False, "message": str(e)}), 400
            except NotFoundError as e:
                return jsonify({"success": False, "message": str(e)}), 404
            except Exception as e:
                logger.exception("%s", failure_message)
                return jsonify({"success": False, "message": failure_message, "error": str(e)}), 500

        return wrapper

    return decorator


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/api/attendance/<employee_id>/<int:year>/<int:month>", methods=["GET"], endpoint="attendance_month")
    @json_endpoint("Failed to fetch attendance data")
    def attendance_month(employee_id: str, year: int, month: int):
        records = service.get_month(employee_id, year, month)
        return jsonify({"success": True, "data": {day: r.to_dict() for day, r in records.items()}})

    @app.route(
        "/api/attendance/summary/<employee_id>/<int:year>/<int:month>",
        methods=["GET"],
        endpoint="attendance_summary",
    )
    @json_endpoint("Failed to fetch summary data")
    def attendance_summary(employee_id: str, year: int, month: int):
        summary = service.monthly_summary(employee_id, year, month)
        return jsonify({"success": True, "data": summary.to_dict()})

    @app.route("/api/attendance", methods=["POST"], endpoint="attendance_upsert")
    @json_endpoint("Failed to save attendance record")
    def attendance_upsert():
        data = request.get_json(silent=True) or {}
        employee_id = require_non_empty(data.get("employeeId"), "employeeId")
        try:
            work_date = parse_iso_date(str(data.get("date") or ""))
        except ValueError:
            raise ValidationError("date must be YYYY-MM-DD")

        outcome = service.upsert_daily_record(employee_id, work_date, AttendanceEvent.from_payload(data))
        if not outcome.accepted:
            return jsonify({"success": False, "message": outcome.message, "data": outcome.to_dict()}), 400

        return jsonify(
            {
                "success": True,
                "message": "Attendance record saved successfully",
                "data": outcome.to_dict(),
            }
        )

    @app.route("/api/attendance/<int:attendance_id>", methods=["PUT"], endpoint="attendance_amend")
    @json_endpoint("Failed to update attendance record")
    def attendance_amend(attendance_id: int):
        data = request.get_json(silent=True) or {}
        record = service.amend_record(attendance_id, AttendanceEvent.from_payload(data))
        return jsonify(
            {
                "success": True,
                "message": "Attendance record updated successfully",
                "data": {"totalHours": round(record.total_hours, 2), "record": record.to_dict()},
            }
        )

    @app.route("/api/attendance/<int:attendance_id>", methods=["DELETE"], endpoint="attendance_delete")
    @json_endpoint("Failed to delete attendance record")
    def attendance_delete(attendance_id: int):
        service.delete_record(attendance_id)
        return jsonify({"success": True, "message": "Attendance record deleted successfully"})

    @app.route("/api/validate-location", methods=["POST"], endpoint="validate_location")
    @json_endpoint("Failed to validate location")
    def validate_location():
        data = request.get_json(silent=True) or {}
        check = service.check_location(data.get("latitude"), data.get("longitude"), data.get("accuracy"))
        if not check.is_accurate:
            return (
                jsonify(
                    {
                        "success": False,
                        "message": "Location accuracy is too low. Please try again in an open area.",
                        "data": {"accuracy": check.accuracy, "isAccurate": False},
                    }
                ),
                400,
            )
        return jsonify({"success": True, "data": check.to_dict()})
