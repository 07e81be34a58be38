"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

EARTH_RADIUS_METERS = 6_371_000
MAX_LOCATION_ACCURACY_METERS = 50
DEFAULT_RADIUS_METERS = 100

FULL_DAY_HOURS = 9
WORKED_STATUSES = ("present", "late", "half-day")

# DECIMAL(10, 2) column limit for stored accuracy
MAX_STORED_ACCURACY_METERS = 99_999_999.99
