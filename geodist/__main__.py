import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from geodist import (
    DistanceOp,
    EmptyGeometryError,
    format_coordinate,
    parse_wkt,
)
from geodist.printer import format_location

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _read_geometry_text(value: str) -> str:
    if value.startswith("@"):
        path = Path(value[1:])
        logger.info("Reading geometry from %s", path)
        return path.read_text(encoding="utf-8")
    return value


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Minimum distance between two WKT geometries")
    parser.add_argument("first", help="WKT of the first geometry, or @path to read it from a file")
    parser.add_argument("second", help="WKT of the second geometry, or @path to read it from a file")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--locations",
        action="store_true",
        help="Also print the component and segment index of each closest point",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    first = parse_wkt(_read_geometry_text(args.first))
    second = parse_wkt(_read_geometry_text(args.second))
    logger.info("Parsed geometries %r and %r", first, second)

    op = DistanceOp(first, second)
    try:
        dist = op.distance()
    except EmptyGeometryError as exc:
        logger.error("%s", exc)
        raise SystemExit(2) from exc

    p0, p1 = op.closest_points()
    print(f"Distance: {dist:.12g}")
    print("Closest points:")
    print(f"  first: ({format_coordinate(p0)})")
    print(f"  second: ({format_coordinate(p1)})")
    if args.locations:
        loc0, loc1 = op.closest_locations()
        print("Locations:")
        print(f"  first: {format_location(loc0)}")
        print(f"  second: {format_location(loc1)}")
    logger.info(
        "Compared %d segment pair(s), pruned %d by envelope",
        op.stats.segment_comparisons,
        op.stats.envelope_prunes,
    )


if __name__ == "__main__":
    main(sys.argv[1:])
