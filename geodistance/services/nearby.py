import logging
from typing import Optional

import pandas as pd

from ..models import Coordinate
from .distance import DistanceService

logger = logging.getLogger(__name__)


class NearbySearchService:
    """Filter a table of places down to those around a point, nearest first."""

    DISTANCE_COLUMN = "distance_miles"

    def __init__(
        self,
        width_in_miles: float,
        lat_col: str = "latitude",
        lon_col: str = "longitude",
    ):
        self.width_in_miles = width_in_miles
        self.lat_col = lat_col
        self.lon_col = lon_col

    def _check_columns(self, df: pd.DataFrame) -> None:
        missing = [c for c in (self.lat_col, self.lon_col) if c not in df.columns]
        if missing:
            raise ValueError(f"Missing coordinate column(s): {', '.join(missing)}")

    # ------------------------------------------------------------------
    # 1️⃣ Cheap rectangular pre-filter
    # ------------------------------------------------------------------
    def within_box(self, df: pd.DataFrame, center: Coordinate) -> pd.DataFrame:
        """Rows whose coordinates fall inside the box around ``center``."""
        self._check_columns(df)
        box = DistanceService.get_bounding_box(center, self.width_in_miles)
        mask = (
            df[self.lat_col].between(box.min_latitude, box.max_latitude)
            & df[self.lon_col].between(box.min_longitude, box.max_longitude)
        )
        logger.debug(
            "%d of %d rows inside %s", int(mask.sum()), len(df), box.to_extent()
        )
        return df[mask].copy()

    # ------------------------------------------------------------------
    # 2️⃣ Rank the survivors by great-circle distance
    # ------------------------------------------------------------------
    def nearest(
        self, df: pd.DataFrame, center: Coordinate, limit: Optional[int] = None
    ) -> pd.DataFrame:
        """
        Returns the rows inside the box with a ``distance_miles`` column,
        sorted ascending. Ties keep their input order.
        """
        candidates = self.within_box(df, center)
        candidates[self.DISTANCE_COLUMN] = [
            DistanceService.get_distance_between_points(center, Coordinate(lat, lon))
            for lat, lon in zip(candidates[self.lat_col], candidates[self.lon_col])
        ]
        candidates = candidates.sort_values(self.DISTANCE_COLUMN, kind="mergesort")
        if limit is not None:
            candidates = candidates.head(limit)
        return candidates
