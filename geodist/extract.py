"""Flatten geometries into the polygons, lines and points they are made of."""

from __future__ import annotations

from typing import Iterator, List, Set

from .geometry import Geometry, LineString, Point, Polygon
from .model import GeometryLocation


def _leaves(geometry: Geometry) -> Iterator[Geometry]:
    """Yield each non-collection, non-empty component once, in traversal order."""

    seen: Set[int] = set()
    for node in geometry.walk():
        if node.kind == "collection" or node.is_empty:
            continue
        key = id(node)
        if key in seen:
            continue
        seen.add(key)
        yield node


def extract_polygons(geometry: Geometry) -> List[Polygon]:
    return [node for node in _leaves(geometry) if node.kind == "polygon"]  # type: ignore[misc]


def extract_lines(geometry: Geometry) -> List[LineString]:
    """Return standalone line strings plus every polygon ring as a line."""

    lines: List[LineString] = []
    seen: Set[int] = set()
    for node in _leaves(geometry):
        if node.kind == "linestring":
            candidates = [node]
        elif node.kind == "polygon":
            candidates = [ring for ring in node.rings if not ring.is_empty]  # type: ignore[attr-defined]
        else:
            continue
        for line in candidates:
            if id(line) not in seen:
                seen.add(id(line))
                lines.append(line)  # type: ignore[arg-type]
    return lines


def extract_points(geometry: Geometry) -> List[Point]:
    return [node for node in _leaves(geometry) if node.kind == "point"]  # type: ignore[misc]


def connected_element_locations(geometry: Geometry) -> List[GeometryLocation]:
    """One representative location per connected element.

    Points contribute their coordinate, lines their first coordinate and
    polygons the first vertex of their shell.
    """

    locations: List[GeometryLocation] = []
    for node in _leaves(geometry):
        if node.kind == "point":
            coord = node.coordinate  # type: ignore[attr-defined]
        elif node.kind == "linestring":
            coord = node.coordinates[0]  # type: ignore[attr-defined]
        elif node.kind == "polygon":
            coord = node.shell.coordinates[0]  # type: ignore[attr-defined]
        else:
            continue
        locations.append(GeometryLocation(node, 0, coord))
    return locations


def has_components(geometry: Geometry) -> bool:
    return next(_leaves(geometry), None) is not None


__all__ = [
    "connected_element_locations",
    "extract_lines",
    "extract_points",
    "extract_polygons",
    "has_components",
]
