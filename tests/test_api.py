from __future__ import annotations

import pytest

from src.hr_portal.hr_portal.container import wire
from src.hr_portal.hr_portal.main import create_app


class BrokenAttendance:
    def list_month(self, **kwargs):
        raise RuntimeError("database unavailable")


@pytest.fixture
def client(monkeypatch, attendance_repo, locations_repo):
    monkeypatch.setenv("APP_ENV", "testing")
    container = wire(conn=None, attendance_repo=attendance_repo, locations_repo=locations_repo)
    app = create_app(container)
    return app.test_client()


def _post_attendance(client, **overrides):
    body = {
        "employeeId": "EMP001",
        "date": "2025-03-10",
        "clockIn": "09:00",
        "clockOut": "18:00",
        "breakStart": "13:00",
        "breakEnd": "13:30",
    }
    body.update(overrides)
    return client.post("/api/attendance", json=body)


def test_create_then_read_month(client):
    resp = _post_attendance(client)

    assert resp.status_code == 200
    assert resp.get_json()["data"]["totalHours"] == 8.5

    month = client.get("/api/attendance/EMP001/2025/3").get_json()
    day = month["data"]["2025-03-10"]
    assert day["clockIn"] == "09:00"
    assert day["breakHours"] == 0.5
    assert day["status"] == "present"


def test_outside_geofence_is_400_with_context(client, attendance_repo):
    resp = _post_attendance(client, latitude=10.0010792, longitude=20.0, locationAccuracy=10)

    body = resp.get_json()
    assert resp.status_code == 400
    assert body["success"] is False
    assert body["data"]["reason"] == "OUTSIDE_GEOFENCE"
    assert body["data"]["requiredDistance"] == 100
    assert body["data"]["geofenceInfo"]["distance"] == 120
    assert attendance_repo.writes == 0


def test_inaccurate_location_is_400(client):
    resp = _post_attendance(client, latitude=10.0, longitude=20.0, locationAccuracy=75)

    assert resp.status_code == 400
    assert resp.get_json()["data"]["reason"] == "INACCURATE_LOCATION"


def test_bad_input_is_400(client):
    assert _post_attendance(client, status="holiday").status_code == 400
    assert _post_attendance(client, date="10/03/2025").status_code == 400
    assert _post_attendance(client, employeeId="").status_code == 400


def test_amend_and_delete(client):
    created = _post_attendance(client).get_json()["data"]

    amended = client.put(f"/api/attendance/{created['id']}", json={"clockIn": "08:00", "clockOut": "17:00"})
    assert amended.status_code == 200
    assert amended.get_json()["data"]["totalHours"] == 9

    assert client.delete(f"/api/attendance/{created['id']}").status_code == 200
    assert client.delete(f"/api/attendance/{created['id']}").status_code == 404
    assert client.put(f"/api/attendance/{created['id']}", json={}).status_code == 404


def test_summary_for_empty_month(client):
    resp = client.get("/api/attendance/summary/EMP001/2025/2")

    assert resp.status_code == 200
    assert resp.get_json()["data"]["totalDays"] == 0
    assert resp.get_json()["data"]["averageHours"] == 0


def test_validate_location(client):
    inside = client.post("/api/validate-location", json={"latitude": 10.0, "longitude": 20.0, "accuracy": 5})
    blurry = client.post("/api/validate-location", json={"latitude": 10.0, "longitude": 20.0, "accuracy": 80})
    missing = client.post("/api/validate-location", json={"latitude": 10.0})

    assert inside.get_json()["data"]["isWithinGeofence"] is True
    assert inside.get_json()["data"]["workLocation"]["name"] == "Main Office"
    assert blurry.status_code == 400
    assert blurry.get_json()["data"]["isAccurate"] is False
    assert missing.status_code == 400


def test_work_locations(client):
    added = client.post(
        "/api/work-locations",
        json={"name": "Annex", "latitude": 10.01, "longitude": 20.01, "radiusMeters": 150},
    )
    listed = client.get("/api/work-locations").get_json()["data"]

    assert added.status_code == 200
    assert [loc["name"] for loc in listed] == ["Annex", "Main Office"]
    assert client.post("/api/work-locations", json={"name": "No coords"}).status_code == 400


def test_unexpected_errors_are_500(monkeypatch, locations_repo):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(wire(conn=None, attendance_repo=BrokenAttendance(), locations_repo=locations_repo))

    resp = app.test_client().get("/api/attendance/summary/EMP001/2025/3")

    assert resp.status_code == 500
    assert resp.get_json()["message"] == "Failed to fetch summary data"
