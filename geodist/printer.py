from typing import Iterable

from .geometry import (
    Coordinate,
    Geometry,
    GeometryCollection,
    LinearRing,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from .model import GeometryLocation


def _num(value: float) -> str:
    if value.is_integer() and abs(value) < 1e15:
        return str(int(value))
    return repr(value)


def format_coordinate(coord: Coordinate) -> str:
    return " ".join(_num(v) for v in coord)


def _coord_list(coords: Iterable[Coordinate]) -> str:
    return "(" + ", ".join(format_coordinate(c) for c in coords) + ")"


def _body(geom: Geometry) -> str:
    if geom.is_empty and not isinstance(geom, GeometryCollection):
        return "EMPTY"
    if isinstance(geom, Point):
        return _coord_list(geom.coords)
    if isinstance(geom, LineString):
        return _coord_list(geom.coordinates)
    if isinstance(geom, Polygon):
        return "(" + ", ".join(_coord_list(r.coordinates) for r in geom.rings) + ")"
    if isinstance(geom, GeometryCollection):
        if not geom.geometries:
            return "EMPTY"
        if type(geom) is GeometryCollection:
            return "(" + ", ".join(to_wkt(g) for g in geom.geometries) + ")"
        return "(" + ", ".join(_body(g) for g in geom.geometries) + ")"
    raise ValueError(f"cannot format geometry {geom!r}")


_TAGS = (
    (MultiPoint, "MULTIPOINT"),
    (MultiLineString, "MULTILINESTRING"),
    (MultiPolygon, "MULTIPOLYGON"),
    (GeometryCollection, "GEOMETRYCOLLECTION"),
    (LinearRing, "LINEARRING"),
    (LineString, "LINESTRING"),
    (Polygon, "POLYGON"),
    (Point, "POINT"),
)


def to_wkt(geom: Geometry) -> str:
    for cls, tag in _TAGS:
        if isinstance(geom, cls):
            return f"{tag} {_body(geom)}"
    raise ValueError(f"cannot format geometry {geom!r}")


def format_location(loc: GeometryLocation) -> str:
    return f"{type(loc.component).__name__}[segment {loc.segment_index}] at ({format_coordinate(loc.coordinate)})"
