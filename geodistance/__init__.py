"""
geodistance package – great-circle distances and WGS-84 bounding boxes.

Public entry points
-------------------
* `geodistance.main` – the command-line driver (`python -m geodistance.main`)
* Value types:
    - `Coordinate`
    - `BoundingBox`
* Service classes:
    - `DistanceService`
    - `NearbySearchService`
* Utility helpers:
    - `earth_radius`
    - `round_half_up`

    >>> from geodistance import Coordinate, DistanceService
    >>> DistanceService.get_distance_between_points(Coordinate(0, 0), Coordinate(0, 1))
    69.09
"""

__all__ = [
    "VERSION",
    "Coordinate",
    "BoundingBox",
    "parse_coordinate",
    # Services
    "DistanceService",
    "NearbySearchService",
    # Utilities
    "earth_radius",
    "round_half_up",
]

VERSION = "0.1.0"

from .models import Coordinate, BoundingBox, parse_coordinate  # noqa: F401,E402

from .services import (  # noqa: F401,E402
    DistanceService,
    NearbySearchService,
)

from .utils import earth_radius, round_half_up  # noqa: F401,E402
