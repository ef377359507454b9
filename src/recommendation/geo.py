"""Geographic helpers — coordinate parsing and great-circle distance."""

from __future__ import annotations

import math

EARTH_RADIUS_MILES = 3958.8

# Storage uses 0 for "no coordinate recorded".
MISSING_COORDINATE = 0.0


def parse_coordinate(value: object) -> float:
    """Parse a stored decimal-degree value.

    Absent, blank, unparseable and non-finite values all collapse to
    ``MISSING_COORDINATE`` so that location scoring never raises.
    """
    if value is None or isinstance(value, bool):
        return MISSING_COORDINATE
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return MISSING_COORDINATE
        try:
            number = float(text)
        except ValueError:
            return MISSING_COORDINATE
    else:
        return MISSING_COORDINATE
    if not math.isfinite(number):
        return MISSING_COORDINATE
    return number


def is_missing(*coordinates: float) -> bool:
    return any(c == MISSING_COORDINATE for c in coordinates)


def haversine_distance(
    lat1: float, lon1: float, lat2: float, lon2: float,
) -> float:
    """Great-circle distance between two points, in miles."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(d_lon / 2) ** 2
    )
    # rounding, or latitudes outside +/-90, can push a out of [0, 1]
    a = min(max(a, 0.0), 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_MILES * c
