from .geometry import (
    Coordinate,
    Envelope,
    Geometry,
    GeometryCollection,
    GeometryError,
    LinearRing,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from .algorithms import (
    LineSegment,
    point_point_distance,
    point_segment_closest_point,
    point_segment_distance,
    segment_segment_closest_points,
    segment_segment_distance,
)
from .extract import (
    connected_element_locations,
    extract_lines,
    extract_points,
    extract_polygons,
)
from .locate import Location, locate
from .model import DistanceConfig, DistanceResult, EmptyGeometryError, GeometryLocation
from .config import get_distance_config, set_distance_config
from .distance import DistanceOp, closest_locations, closest_points, distance, is_within_distance
from .parser import parse_wkt
from .printer import format_coordinate, to_wkt

__all__ = [
    'Coordinate',
    'Envelope',
    'Geometry',
    'GeometryCollection',
    'GeometryError',
    'LinearRing',
    'LineString',
    'MultiLineString',
    'MultiPoint',
    'MultiPolygon',
    'Point',
    'Polygon',
    'LineSegment',
    'point_point_distance',
    'point_segment_closest_point',
    'point_segment_distance',
    'segment_segment_closest_points',
    'segment_segment_distance',
    'connected_element_locations',
    'extract_lines',
    'extract_points',
    'extract_polygons',
    'Location',
    'locate',
    'DistanceConfig',
    'DistanceResult',
    'EmptyGeometryError',
    'GeometryLocation',
    'get_distance_config',
    'set_distance_config',
    'DistanceOp',
    'closest_locations',
    'closest_points',
    'distance',
    'is_within_distance',
    'parse_wkt',
    'format_coordinate',
    'to_wkt',
]
