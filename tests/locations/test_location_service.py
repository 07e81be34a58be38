import pytest

from src.hr_portal.hr_portal.core.exceptions import ValidationError
from src.hr_portal.hr_portal.locations.service import WorkLocationService


def test_add_location_uses_default_radius(empty_locations_repo):
    svc = WorkLocationService(empty_locations_repo)

    location_id = svc.add_location(name=" Branch ", latitude="40.7589", longitude="-73.9851", address="456 Ave")

    created = svc.list_locations()[0]
    assert location_id == created.location_id
    assert created.name == "Branch"
    assert created.radius_meters == 100
    assert created.latitude == 40.7589


def test_list_is_ordered_by_name(empty_locations_repo):
    svc = WorkLocationService(empty_locations_repo)
    svc.add_location(name="Warehouse", latitude=1, longitude=1)
    svc.add_location(name="Annex", latitude=2, longitude=2, radius_meters=250)

    assert [loc.name for loc in svc.list_locations()] == ["Annex", "Warehouse"]
    assert [loc.radius_meters for loc in empty_locations_repo.list_active()] == [100, 250]


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(name="", latitude=1, longitude=1),
        dict(name="X", latitude=None, longitude=1),
        dict(name="X", latitude=1, longitude=""),
        dict(name="X", latitude=100, longitude=1),
        dict(name="X", latitude=1, longitude=1, radius_meters=0),
        dict(name="X", latitude=1, longitude=1, radius_meters="wide"),
    ],
)
def test_invalid_locations(empty_locations_repo, kwargs):
    with pytest.raises(ValidationError):
        WorkLocationService(empty_locations_repo).add_location(**kwargs)
