import math
from decimal import Decimal, ROUND_HALF_UP, localcontext

from ..config import WGS84_A, WGS84_B


def deg2rad(degrees: float) -> float:
    return math.pi * degrees / 180.0


def rad2deg(radians: float) -> float:
    return 180.0 * radians / math.pi


def earth_radius(lat: float) -> float:
    """Earth radius (m) at latitude ``lat`` (radians) on the WGS-84 ellipsoid.

    http://en.wikipedia.org/wiki/Earth_radius
    """
    if not math.isfinite(lat):
        return math.nan
    an = WGS84_A * WGS84_A * math.cos(lat)
    bn = WGS84_B * WGS84_B * math.sin(lat)
    ad = WGS84_A * math.cos(lat)
    bd = WGS84_B * math.sin(lat)
    return math.sqrt((an * an + bn * bn) / (ad * ad + bd * bd))


def haversine(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Central angle (radians) between two lat/lon pairs given in degrees.

    Garbage in gives NaN or a meaningless angle out, never an exception.
    """
    φ1, φ2 = map(deg2rad, (lat1, lat2))
    Δφ = φ2 - φ1
    Δλ = deg2rad(lon2) - deg2rad(lon1)
    if not all(map(math.isfinite, (φ1, φ2, Δφ, Δλ))):
        return math.nan

    a = math.sin(Δφ / 2) ** 2 + math.cos(φ1) * math.cos(φ2) * math.sin(Δλ / 2) ** 2
    # float error can push a just outside [0, 1]; NaN must survive the clamp
    a = min(max(a, 0.0), 1.0)
    return 2 * math.asin(math.sqrt(a))


def round_half_up(value: float, places: int = 2) -> float:
    """Round ``value`` to ``places`` decimals, ties away from zero.

    Works on the shortest repr of the float, so 123.455 -> 123.46 even though
    the binary value sits just below the tie.
    """
    if math.isnan(value) or math.isinf(value):
        return value
    exact = Decimal(repr(value))
    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        # quantize fails once the result needs more digits than the context holds
        ctx.prec = max(ctx.prec, exact.adjusted() + places + 2)
        return float(exact.quantize(quantum, rounding=ROUND_HALF_UP))
