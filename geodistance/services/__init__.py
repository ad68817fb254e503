"""
services package – the public calculators.

    from geodistance.services import DistanceService, NearbySearchService
"""

from .distance import DistanceService       # noqa: F401
from .nearby   import NearbySearchService   # noqa: F401

__all__ = [
    "DistanceService",
    "NearbySearchService",
]
