"""Value types passed between the geometry helpers and their callers."""
from typing import NamedTuple


class Coordinate(NamedTuple):
    """A point in decimal degrees. Ranges are the caller's responsibility."""

    latitude: float
    longitude: float

    def to_dict(self) -> dict:
        return {"latitude": self.latitude, "longitude": self.longitude}


class BoundingBox(NamedTuple):
    """Min/max corners of a lat/lon rectangle."""

    min_corner: Coordinate
    max_corner: Coordinate

    @property
    def min_latitude(self) -> float:
        return self.min_corner.latitude

    @property
    def max_latitude(self) -> float:
        return self.max_corner.latitude

    @property
    def min_longitude(self) -> float:
        return self.min_corner.longitude

    @property
    def max_longitude(self) -> float:
        return self.max_corner.longitude

    def contains(self, point: Coordinate) -> bool:
        """Inclusive test; boxes crossing the antimeridian are not unwrapped."""
        return (
            self.min_latitude <= point.latitude <= self.max_latitude
            and self.min_longitude <= point.longitude <= self.max_longitude
        )

    def to_extent(self) -> str:
        """``minLat,minLon,maxLat,maxLon`` as taken by station search APIs."""
        return (
            f"{self.min_latitude},{self.min_longitude},"
            f"{self.max_latitude},{self.max_longitude}"
        )

    def to_dict(self) -> dict:
        return {
            "min": self.min_corner.to_dict(),
            "max": self.max_corner.to_dict(),
        }


def parse_coordinate(text: str) -> Coordinate:
    """Parse ``"lat, lon"`` into a Coordinate.

    Raises ValueError when the text is not two comma-separated numbers.
    """
    parts = [x.strip() for x in text.split(",")]
    if len(parts) != 2:
        raise ValueError(f"Expected 'lat, lon', got {text!r}.")
    try:
        lat, lon = (float(p) for p in parts)
    except ValueError:
        raise ValueError(f"Coordinates must be numeric, got {text!r}.") from None
    return Coordinate(lat, lon)
