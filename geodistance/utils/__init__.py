"""
utils package – small, pure-function helpers.

We expose the geometry helpers that are used throughout the package.
"""

# Re-export the helpers for a clean import path
from .geo import deg2rad, rad2deg, earth_radius, haversine, round_half_up   # noqa: F401

__all__ = [
    "deg2rad",
    "rad2deg",
    "earth_radius",
    "haversine",
    "round_half_up",
]
