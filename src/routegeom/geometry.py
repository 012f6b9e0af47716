"""
Coordinate type and conversion of coordinate sequences to Shapely geometries.

This module provides the validated ``Coordinate`` value used by every other
part of the package, plus map-order pair export and Shapely LineString
conversion.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple
import logging
import math

from shapely.geometry import LineString

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Coordinate:
    """A WGS84 position in decimal degrees.

    Raises:
        ValueError: If either value is not a finite number or lies outside
            its valid range.
    """

    latitude: float
    longitude: float

    def __post_init__(self):
        for name, limit in (("latitude", 90.0), ("longitude", 180.0)):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite, got {value}")
            if not -limit <= value <= limit:
                raise ValueError(
                    f"{name} {value} out of range [{-limit:g}, {limit:g}]"
                )
            # Normalize ints so equality and formatting are consistent
            object.__setattr__(self, name, float(value))


CoordinateSequence = Sequence[Coordinate]


def to_lat_lon_pairs(coords: CoordinateSequence) -> List[Tuple[float, float]]:
    """Return ``(latitude, longitude)`` tuples, the order map widgets expect."""
    return [(coord.latitude, coord.longitude) for coord in coords]


def coords_to_linestring(coords: CoordinateSequence) -> LineString:
    """
    Convert a coordinate sequence to a Shapely LineString.

    Args:
        coords: Sequence of Coordinate objects

    Returns:
        LineString holding (longitude, latitude) pairs

    Raises:
        ValueError: If coords has less than 2 points
    """
    if len(coords) < 2:
        raise ValueError("At least two positions are required to create a LineString.")

    return LineString([(coord.longitude, coord.latitude) for coord in coords])
