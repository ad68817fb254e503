import math

from ..config import METERS_PER_MILE, EARTH_RADIUS_KM, KM_TO_MILES, DISTANCE_PLACES
from ..models import Coordinate, BoundingBox
from ..utils.geo import deg2rad, rad2deg, earth_radius, haversine, round_half_up


class DistanceService:
    """Great-circle distances and WGS-84 bounding boxes around a point."""

    # ------------------------------------------------------------------
    # 1️⃣ Box around a point
    # ------------------------------------------------------------------
    @staticmethod
    def get_bounding_box(point: Coordinate, width_in_miles: float) -> BoundingBox:
        """
        Returns the min/max corners of the box around ``point``.

        ``width_in_miles`` is applied on each side of the point, so the box is
        twice that wide. The earth is treated locally as a sphere whose radius
        is the WGS-84 radius at the point's latitude. Nothing is validated: at
        the poles the parallel radius collapses and the longitudes blow up,
        and non-finite or negative inputs come back as NaN or an inverted box.
        """
        lat = deg2rad(point.latitude)
        lon = deg2rad(point.longitude)
        half_side = width_in_miles * METERS_PER_MILE

        radius = earth_radius(lat)
        # Radius of the parallel at this latitude
        pradius = radius * math.cos(lat) if math.isfinite(lat) else math.nan

        lat_min = lat - half_side / radius
        lat_max = lat + half_side / radius
        lon_min = lon - half_side / pradius
        lon_max = lon + half_side / pradius

        return BoundingBox(
            Coordinate(rad2deg(lat_min), rad2deg(lon_min)),
            Coordinate(rad2deg(lat_max), rad2deg(lon_max)),
        )

    # ------------------------------------------------------------------
    # 2️⃣ Point-to-point distance
    # ------------------------------------------------------------------
    @staticmethod
    def get_distance_between_points(start: Coordinate, end: Coordinate) -> float:
        """Haversine distance in miles, rounded half-up to two places."""
        c = haversine(start.latitude, start.longitude, end.latitude, end.longitude)
        return round_half_up(EARTH_RADIUS_KM * c * KM_TO_MILES, DISTANCE_PLACES)
