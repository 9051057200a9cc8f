"""
Distance calculation using the Haversine formula.

Assumption
----------
Delivery distance is the straight-line (great-circle) distance between the
user and the venue, not a road distance.  The Earth is treated as a sphere
of mean radius 6 371 km.

Complexity: O(1) per call.
"""

import math

from .entities import Coordinate

EARTH_RADIUS_M = 6_371_000.0


def haversine_m(point_a: Coordinate, point_b: Coordinate) -> float:
    """Return the great-circle distance in **meters** between two points."""
    lat_a_r, lat_b_r = math.radians(point_a.latitude), math.radians(point_b.latitude)
    dlat = math.radians(point_b.latitude - point_a.latitude)
    dlng = math.radians(point_b.longitude - point_a.longitude)

    h = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat_a_r) * math.cos(lat_b_r) * math.sin(dlng / 2) ** 2
    )
    return EARTH_RADIUS_M * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
