"""Point-in-polygon classification."""

from __future__ import annotations

from enum import Enum

from .algorithms import orientation
from .geometry import Coordinate, LineString, Polygon


class Location(Enum):
    INTERIOR = "interior"
    BOUNDARY = "boundary"
    EXTERIOR = "exterior"


def locate_in_ring(coord: Coordinate, ring: LineString) -> Location:
    """Classify ``coord`` against the area enclosed by a closed ``ring``.

    Counts crossings of a ray cast from ``coord`` towards +x; a point lying
    exactly on a ring segment is reported as BOUNDARY.
    """

    if ring.is_empty or not ring.envelope.contains(coord):
        return Location.EXTERIOR

    px, py = coord[0], coord[1]
    crossings = 0
    for p1, p2 in ring.segments():
        if p1[0] < px and p2[0] < px:
            continue
        if p2[0] == px and p2[1] == py:
            return Location.BOUNDARY
        if p1[1] == py and p2[1] == py:
            if min(p1[0], p2[0]) <= px <= max(p1[0], p2[0]):
                return Location.BOUNDARY
            continue
        # half-open rule: the upper endpoint is excluded
        if (p1[1] > py and p2[1] <= py) or (p2[1] > py and p1[1] <= py):
            sign = orientation(p1, p2, coord)
            if sign == 0:
                return Location.BOUNDARY
            if p2[1] < p1[1]:
                sign = -sign
            if sign > 0:
                crossings += 1

    return Location.INTERIOR if crossings % 2 == 1 else Location.EXTERIOR


def locate(coord: Coordinate, polygon: Polygon) -> Location:
    """Classify ``coord`` as INTERIOR, BOUNDARY or EXTERIOR to ``polygon``."""

    if polygon.is_empty or not polygon.envelope.contains(coord):
        return Location.EXTERIOR

    shell_loc = locate_in_ring(coord, polygon.shell)
    if shell_loc is not Location.INTERIOR:
        return shell_loc

    for hole in polygon.holes:
        hole_loc = locate_in_ring(coord, hole)
        if hole_loc is Location.BOUNDARY:
            return Location.BOUNDARY
        if hole_loc is Location.INTERIOR:
            return Location.EXTERIOR
    return Location.INTERIOR


__all__ = ["Location", "locate", "locate_in_ring"]
