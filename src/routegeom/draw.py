"""
Interactive route drawing session.

Each placed point is committed to an EditHistory so that placement and
clearing can be undone and redone, while the current drawing can be
measured and exported as WKT at any time.
"""

from typing import Optional, Tuple
import logging

from .geodesic import estimate_distance_meters
from .geometry import Coordinate
from .history import EditHistory, Snapshot
from .wkt import EMPTY_PREVIEW, serialize_linestring

logger = logging.getLogger(__name__)

DEFAULT_CENTER = (37.9838, 23.7275)


class DrawSession:
    """A point-placement session backed by an undo/redo history."""

    def __init__(
        self,
        history: Optional[EditHistory] = None,
        default_center: Tuple[float, float] = DEFAULT_CENTER,
    ):
        self.history = history if history is not None else EditHistory()
        self.default_center = default_center

    @property
    def points(self) -> Snapshot:
        return self.history.current()

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo

    @property
    def length_meters(self) -> int:
        """Rounded length of the current drawing; 0 until it has two points."""
        return estimate_distance_meters(self.points)

    @property
    def center(self) -> Tuple[float, float]:
        """Where a map view should center: the first point, or the default."""
        if self.points:
            first = self.points[0]
            return (first.latitude, first.longitude)
        return self.default_center

    def add_point(self, latitude: float, longitude: float) -> Snapshot:
        """
        Append a point to the current drawing.

        Raises:
            ValueError: If the position is not a valid coordinate
        """
        point = Coordinate(latitude=latitude, longitude=longitude)
        logger.debug(f"Adding point {len(self.points) + 1}: {point}")
        return self.history.commit(self.points + (point,))

    def clear(self) -> Snapshot:
        """Remove all points. Clearing is recorded, so it can be undone."""
        return self.history.commit(())

    def undo(self) -> Snapshot:
        return self.history.undo()

    def redo(self) -> Snapshot:
        return self.history.redo()

    def to_wkt(self, precision: Optional[int] = None) -> str:
        """
        Export the current drawing.

        Raises:
            InvalidGeometry: If the drawing has fewer than two points
        """
        return serialize_linestring(self.points, precision=precision)

    def preview_wkt(self, precision: Optional[int] = None) -> str:
        """Like to_wkt, but shows an empty LINESTRING for incomplete drawings."""
        if len(self.points) < 2:
            return EMPTY_PREVIEW
        return self.to_wkt(precision=precision)
