"""
Parsing and serialization of WKT LINESTRING text.

Coordinates are written ``longitude latitude`` on the wire (X Y order) and
held as ``Coordinate(latitude, longitude)`` in memory. An optional
``SRID=<digits>;`` prefix is accepted and discarded. The WKT grammar itself
is handled by Shapely's reader and writer.
"""

from typing import List, Optional
import logging
import math
import re

import shapely
from shapely import wkt as shapely_wkt
from shapely.errors import ShapelyError
from shapely.geometry import LineString

from .geometry import Coordinate, CoordinateSequence, coords_to_linestring

logger = logging.getLogger(__name__)

SRID_PREFIX = re.compile(r"^\s*SRID=\d+\s*;\s*", re.IGNORECASE)
LINESTRING_START = re.compile(r"^LINESTRING\s*\(", re.IGNORECASE)

EMPTY_PREVIEW = "LINESTRING()"


class MalformedGeometry(ValueError):
    """Raised when WKT text cannot be parsed into a line string.

    Attributes:
        index: 0-based position of the offending coordinate, if known
        token: The offending value as text, if known
    """

    def __init__(
        self, message: str, index: Optional[int] = None, token: Optional[str] = None
    ):
        self.index = index
        self.token = token
        super().__init__(message)


class InvalidGeometry(ValueError):
    """Raised when a coordinate sequence cannot be written as a line string."""


def strip_srid(text: str) -> str:
    """Remove a leading ``SRID=<digits>;`` prefix and surrounding whitespace."""
    return SRID_PREFIX.sub("", text or "", count=1).strip()


def is_linestring_wkt(text: str) -> bool:
    """Check whether text looks like a LINESTRING without fully parsing it."""
    return LINESTRING_START.match(strip_srid(text)) is not None


def _load_linestring(body_text: str) -> LineString:
    if not body_text:
        raise MalformedGeometry("Empty WKT text")
    if body_text.count("(") != body_text.count(")"):
        raise MalformedGeometry("Unbalanced parentheses in LINESTRING")
    if "(" in body_text and not body_text.endswith(")"):
        raise MalformedGeometry("Unexpected text after LINESTRING")

    try:
        geom = shapely_wkt.loads(body_text)
    except ShapelyError as e:
        raise MalformedGeometry(f"Invalid WKT: {e}") from e

    if not isinstance(geom, LineString):
        raise MalformedGeometry(f"Expected LINESTRING, got {geom.geom_type.upper()}")
    if geom.is_empty:
        raise MalformedGeometry("Empty LINESTRING")
    if geom.has_z or shapely.get_coordinate_dimension(geom) != 2:
        raise MalformedGeometry("LINESTRING coordinates must have exactly two values")
    if len(geom.coords) < 2:
        raise MalformedGeometry("LINESTRING needs at least two points")
    return geom


def _check_value(value: float, axis: str, limit: float, index: int) -> None:
    if not math.isfinite(value):
        raise MalformedGeometry(
            f"Non-finite {axis} in coordinate {index + 1}",
            index=index,
            token=repr(value),
        )
    if not -limit <= value <= limit:
        raise MalformedGeometry(
            f"{axis.capitalize()} {value} out of range [{-limit:g}, {limit:g}] "
            f"in coordinate {index + 1}",
            index=index,
            token=repr(value),
        )


def parse_linestring(text: str) -> List[Coordinate]:
    """
    Parse WKT LINESTRING text into a list of coordinates.

    Args:
        text: WKT such as ``SRID=4326;LINESTRING(23.721 37.983, 23.723 37.985)``

    Returns:
        List of Coordinate objects in path order, with axes swapped from the
        wire's (longitude, latitude) order

    Raises:
        MalformedGeometry: If the text is not a two-dimensional LINESTRING with
            at least two points, or any coordinate is not finite and in range
    """
    try:
        geom = _load_linestring(strip_srid(text))
        for index, (longitude, latitude) in enumerate(geom.coords):
            _check_value(longitude, "longitude", 180.0, index)
            _check_value(latitude, "latitude", 90.0, index)
    except MalformedGeometry as e:
        logger.debug(f"Rejected WKT: {e}")
        raise

    coords = [
        Coordinate(latitude=latitude, longitude=longitude)
        for longitude, latitude in geom.coords
    ]
    logger.debug(f"Parsed LINESTRING with {len(coords)} points")
    return coords


def serialize_linestring(
    coords: CoordinateSequence, precision: Optional[int] = None
) -> str:
    """
    Write coordinates as WKT LINESTRING text without an SRID prefix.

    Args:
        coords: Sequence of Coordinate objects
        precision: Maximum decimal places per value. None writes the shortest
            representation that parses back to the same float.

    Returns:
        Text of the form ``LINESTRING(lon1 lat1, lon2 lat2, ...)``

    Raises:
        InvalidGeometry: If fewer than two coordinates are given
    """
    if len(coords) < 2:
        raise InvalidGeometry(
            f"A LINESTRING needs at least two points, got {len(coords)}"
        )
    if precision is not None and precision < 0:
        raise ValueError("precision must be non-negative")

    text = shapely_wkt.dumps(
        coords_to_linestring(coords),
        trim=True,
        rounding_precision=-1 if precision is None else precision,
    )
    # Shapely writes "LINESTRING (...)"
    return "LINESTRING(" + text[text.index("(") + 1 :]
