#!/usr/bin/env python3
"""
GPX file loading into coordinate sequences.
"""

from typing import List, TextIO
import logging

import gpxpy
import gpxpy.gpx

from .geometry import Coordinate

logger = logging.getLogger(__name__)


def load_gpx(file_input: TextIO) -> List[Coordinate]:
    """
    Parse GPX data and concatenate all tracks/segments into one sequence.

    Route points are used when the file has no track points. Elevation is
    dropped.

    Args:
        file_input: File-like object containing GPX data

    Returns:
        List of Coordinate objects in file order

    Raises:
        gpxpy.gpx.GPXException: If the GPX data is malformed
        ValueError: If a point lies outside the valid coordinate range
    """
    gpx_data = gpxpy.parse(file_input)

    coords: List[Coordinate] = []

    for track in gpx_data.tracks:
        for segment in track.segments:
            for point in segment.points:
                coords.append(
                    Coordinate(latitude=point.latitude, longitude=point.longitude)
                )

    if not coords:
        for route in gpx_data.routes:
            for point in route.points:
                coords.append(
                    Coordinate(latitude=point.latitude, longitude=point.longitude)
                )

    logger.debug(f"Parsed {len(coords)} points from GPX data")
    return coords


def load_gpx_file(filename: str) -> List[Coordinate]:
    """
    Load and parse a GPX file.

    Raises:
        FileNotFoundError: If file doesn't exist.
        PermissionError: If file can't be read.
        gpxpy.gpx.GPXException: If GPX file is malformed.
    """
    logger.debug(f"Reading GPX file: {filename}")
    with open(filename, "r", encoding="utf-8") as f:
        return load_gpx(f)
