from __future__ import annotations

from flask import Flask, jsonify, request

from ..attendance.controller import json_endpoint
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.location_service

    @app.route("/api/work-locations", methods=["GET"], endpoint="work_locations")
    @json_endpoint("Failed to fetch work locations")
    def work_locations():
        return jsonify({"success": True, "data": [loc.to_dict() for loc in service.list_locations()]})

    @app.route("/api/work-locations", methods=["POST"], endpoint="work_locations_add")
    @json_endpoint("Failed to add work location")
    def work_locations_add():
        data = request.get_json(silent=True) or {}
        location_id = service.add_location(
            name=data.get("name"),
            address=data.get("address"),
            latitude=data.get("latitude"),
            longitude=data.get("longitude"),
            radius_meters=data.get("radiusMeters"),
        )
        return jsonify(
            {
                "success": True,
                "message": "Work location added successfully",
                "data": {"id": location_id},
            }
        )
