#!/usr/bin/env python3
"""
Routegeom - WKT line-geometry toolkit for route sharing.

This package provides a parser and serializer for WKT LINESTRING text,
great-circle length estimation, and an undo/redo history for interactively
drawn routes.
"""
import importlib.metadata

__version__ = importlib.metadata.version("routegeom")

# Import main classes for public API
from .geometry import Coordinate
from .wkt import (
    InvalidGeometry,
    MalformedGeometry,
    is_linestring_wkt,
    parse_linestring,
    serialize_linestring,
    strip_srid,
)
from .geodesic import estimate_distance_meters, haversine_distance, path_length
from .history import EditHistory
from .draw import DrawSession

__all__ = [
    "Coordinate",
    "InvalidGeometry",
    "MalformedGeometry",
    "is_linestring_wkt",
    "parse_linestring",
    "serialize_linestring",
    "strip_srid",
    "estimate_distance_meters",
    "haversine_distance",
    "path_length",
    "EditHistory",
    "DrawSession",
]
