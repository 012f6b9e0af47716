#!/usr/bin/env python3
"""
Route geometry command-line tool.
This script reads a route as WKT LINESTRING text or a GPX file, reports its
point count and great-circle length, and writes normalized WKT. It can also
run a line-oriented drawing session with undo/redo.

Requirements:
    pip install gpxpy shapely

"""

from typing import List, Optional, TextIO
import argparse
import logging
import sys

from gpxpy import gpx

from . import __version__
from .config import RouteGeomConfig
from .draw import DrawSession
from .file_utils import generate_output_filename
from .geodesic import estimate_distance_meters, path_length
from .geometry import Coordinate, to_lat_lon_pairs
from .gpx import load_gpx_file
from .wkt import InvalidGeometry, MalformedGeometry, parse_linestring, serialize_linestring

# Configure logging
logger = logging.getLogger("routegeom")

DRAW_HELP = "Commands: add LAT LON | undo | redo | clear | length | wkt | show | help | quit"


def non_negative_int(value: str) -> int:
    """argparse type for counts that cannot be negative."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {number}")
    return number


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the command-line argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Route geometry tool: WKT LINESTRING parsing, length and drawing",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "filename",
        type=str,
        nargs="?",
        help="GPX file or text file containing WKT ('-' reads WKT from stdin)",
    )
    parser.add_argument(
        "--wkt",
        type=str,
        default=None,
        help="WKT LINESTRING given inline instead of a file",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write normalized WKT to this file (default for GPX input: auto-generated from input filename)",
    )
    parser.add_argument(
        "--precision",
        type=non_negative_int,
        default=None,
        help="Maximum decimal places in written WKT (default: exact)",
    )
    parser.add_argument(
        "--center",
        type=float,
        nargs=2,
        metavar=("LAT", "LON"),
        default=None,
        help="Map center reported by an empty drawing session (default: 37.9838 23.7275)",
    )
    parser.add_argument(
        "--exact",
        action="store_true",
        help="Report unrounded distance in meters",
    )
    parser.add_argument(
        "--draw",
        action="store_true",
        help="Start an interactive drawing session reading commands from stdin",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging level (default: WARNING)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"routegeom {__version__}",
    )
    return parser


def setup_logging(config: RouteGeomConfig) -> None:
    """Setup logging configuration."""
    level = getattr(logging, config.log_level)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    # Configure the root logger so all modules inherit the configuration
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)


def format_distance(coords: List[Coordinate], config: RouteGeomConfig) -> str:
    if config.exact_distance:
        return f"{path_length(coords):.3f} m"
    return f"{estimate_distance_meters(coords)} m"


def load_coordinates(args: argparse.Namespace, stdin: TextIO) -> List[Coordinate]:
    """
    Load the route named on the command line.

    Raises:
        MalformedGeometry: If WKT input cannot be parsed
        ValueError: If a GPX point is invalid
        FileNotFoundError, PermissionError: If the file cannot be read
        gpx.GPXException: If GPX input is malformed
    """
    if args.wkt is not None:
        return parse_linestring(args.wkt)
    if args.filename == "-":
        return parse_linestring(stdin.read())
    if args.filename.lower().endswith(".gpx"):
        return load_gpx_file(args.filename)
    with open(args.filename, "r", encoding="utf-8") as f:
        return parse_linestring(f.read())


def determine_output_filename(args: argparse.Namespace) -> Optional[str]:
    """
    Determine where normalized WKT should be written, if anywhere.

    Raises:
        RuntimeError: If auto-generation fails
        ValueError: If constructed filename would be illegal
    """
    if args.output is not None:
        return args.output
    if args.filename and args.filename.lower().endswith(".gpx"):
        return generate_output_filename(args.filename)
    return None


def handle_draw_command(
    session: DrawSession, line: str, config: RouteGeomConfig
) -> Optional[str]:
    """
    Apply one drawing command to the session.

    Args:
        session: The drawing session to update
        line: Command text, e.g. ``add 37.98 23.72``
        config: Settings for distance and WKT formatting

    Returns:
        Response text to show the user, or None for ``quit``
    """
    parts = line.split()
    if not parts:
        return ""
    command, params = parts[0].lower(), parts[1:]

    if command in ("quit", "exit"):
        return None
    if command == "help":
        return DRAW_HELP
    if command == "add":
        if len(params) != 2:
            return "Usage: add LAT LON"
        try:
            points = session.add_point(float(params[0]), float(params[1]))
        except ValueError as e:
            return f"Error: {e}"
        return f"{len(points)} point(s), {format_distance(list(points), config)}"
    if command == "undo":
        if not session.can_undo:
            return "Nothing to undo"
        session.undo()
        return f"{len(session.points)} point(s)"
    if command == "redo":
        if not session.can_redo:
            return "Nothing to redo"
        session.redo()
        return f"{len(session.points)} point(s)"
    if command == "clear":
        session.clear()
        return "Cleared"
    if command == "length":
        return format_distance(list(session.points), config)
    if command == "wkt":
        return session.preview_wkt(precision=config.precision)
    if command == "show":
        if not session.points:
            return f"No points (center {session.center[0]}, {session.center[1]})"
        return "\n".join(
            f"{i + 1}: {latitude}, {longitude}"
            for i, (latitude, longitude) in enumerate(to_lat_lon_pairs(session.points))
        )
    return f"Unknown command {command!r}. {DRAW_HELP}"


def run_draw_session(
    config: RouteGeomConfig, stdin: TextIO, stdout: TextIO
) -> DrawSession:
    """Read drawing commands line by line until EOF or ``quit``."""
    session = DrawSession(default_center=config.default_center)
    print(DRAW_HELP, file=stdout)
    for line in stdin:
        response = handle_draw_command(session, line, config)
        if response is None:
            break
        if response:
            print(response, file=stdout)
    logger.info(f"Drawing session ended with {len(session.points)} points")
    return session


def main(argv: Optional[List[str]] = None) -> None:
    """
    Parses command-line arguments, loads the route, reports its length and
    writes normalized WKT.
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)
    if args.center is not None:
        try:
            Coordinate(latitude=args.center[0], longitude=args.center[1])
        except ValueError as e:
            parser.error(f"argument --center: {e}")
    config = RouteGeomConfig.from_args(args)

    setup_logging(config)

    if args.draw:
        run_draw_session(config, sys.stdin, sys.stdout)
        return

    if not args.filename and args.wkt is None:
        parser.print_help()
        sys.exit(1)

    try:
        coords = load_coordinates(args, sys.stdin)
    except MalformedGeometry as e:
        logger.error(f"Invalid WKT: {e}")
        sys.exit(1)
    except FileNotFoundError:
        logger.error(f"File not found: {args.filename}")
        sys.exit(1)
    except PermissionError:
        logger.error(f"Cannot read file (permission denied): {args.filename}")
        sys.exit(1)
    except gpx.GPXException as e:
        logger.error(f"Invalid GPX file: {e}")
        sys.exit(1)
    except ValueError as e:
        logger.error(f"Invalid coordinate: {e}")
        sys.exit(1)
    logger.info(f"Loaded route with {len(coords)} points")

    try:
        wkt_text = serialize_linestring(coords, precision=config.precision)
    except InvalidGeometry as e:
        logger.error(f"Cannot export route: {e}")
        sys.exit(1)

    print(f"Points: {len(coords)}")
    print(f"Distance: {format_distance(coords, config)}")
    print(wkt_text)

    try:
        output_filename = determine_output_filename(args)
    except (RuntimeError, ValueError) as e:
        logger.error(f"Failed to generate output filename: {e}")
        sys.exit(1)

    if output_filename is not None:
        with open(output_filename, "w", encoding="utf-8") as f:
            f.write(wkt_text + "\n")
        logger.info(f"Wrote WKT to {output_filename}")


if __name__ == "__main__":
    main()
