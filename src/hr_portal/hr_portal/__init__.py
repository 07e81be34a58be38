"""HR Portal attendance package.

This package is organized by feature modules (attendance, geofence, locations)
with a thin Flask JSON controller layer and service/repository layers.
"""
