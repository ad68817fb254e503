"""
Constants shared by the geometry helpers and the front ends.
"""
import os

# Semi-axes of the WGS-84 reference ellipsoid (metres)
WGS84_A = 6378137.0     # major
WGS84_B = 6356752.3     # minor

METERS_PER_MILE = 1609.344

# Spherical model used by the haversine distance
EARTH_RADIUS_KM = 6371
KM_TO_MILES = 0.62137

# Distances are reported to the hundredth of a mile
DISTANCE_PLACES = 2


def env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}.") from None


# Box width offered by the CLI / web app when the caller gives none
DEFAULT_WIDTH_MILES = env_float("GEODISTANCE_DEFAULT_WIDTH", 10.0)


class Colours:
    """ANSI escape codes for terminal output."""

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"
    BOLD = "\033[1m"
    RESET = "\033[0m"
