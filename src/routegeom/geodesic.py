#!/usr/bin/env python3
"""
Great-circle distance calculations over coordinate sequences.
"""

from typing import List
import logging
import math

from .geometry import Coordinate, CoordinateSequence

logger = logging.getLogger(__name__)

# Mean Earth radius in meters
EARTH_RADIUS_METERS = 6371000.0


def haversine_distance(coord1: Coordinate, coord2: Coordinate) -> float:
    """
    Calculate Haversine distance between two coordinates.

    Uses the atan2 form of the Haversine formula, which stays accurate for
    nearly antipodal points.

    Args:
        coord1: First coordinate
        coord2: Second coordinate

    Returns:
        Distance in meters
    """
    lat1, lon1 = math.radians(coord1.latitude), math.radians(coord1.longitude)
    lat2, lon2 = math.radians(coord2.latitude), math.radians(coord2.longitude)

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    )
    # Rounding can push a slightly outside [0, 1]
    a = min(max(a, 0.0), 1.0)

    return 2 * EARTH_RADIUS_METERS * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def path_length(coords: CoordinateSequence) -> float:
    """
    Sum the great-circle distances between consecutive coordinates.

    Args:
        coords: Sequence of Coordinate objects in path order

    Returns:
        Unrounded length in meters; 0.0 for fewer than two coordinates
    """
    total = 0.0
    for i in range(1, len(coords)):
        total += haversine_distance(coords[i - 1], coords[i])
    return total


def estimate_distance_meters(coords: CoordinateSequence) -> int:
    """Path length rounded to the nearest meter, as shown to users."""
    return int(round(path_length(coords)))


def calculate_cumulative_distances(coords: CoordinateSequence) -> List[float]:
    """
    Calculate cumulative distances along a coordinate sequence.

    Args:
        coords: Sequence of Coordinate objects in path order

    Returns:
        List of cumulative distances in meters, with same length as coords
    """
    if not coords:
        return []

    cumulative_distances = [0.0]
    for i in range(1, len(coords)):
        segment_distance = haversine_distance(coords[i - 1], coords[i])
        cumulative_distances.append(cumulative_distances[-1] + segment_distance)

    logger.debug(
        f"Cumulative distance over {len(coords)} points: {cumulative_distances[-1]:.1f} m"
    )
    return cumulative_distances
