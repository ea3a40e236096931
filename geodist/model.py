"""Core data structures for the distance pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from .geometry import Coordinate, Geometry


class EmptyGeometryError(ValueError):
    """Raised when a distance is requested against a geometry with no components."""

    def __init__(self, index: int, geometry: Geometry):
        super().__init__(f"geometry {index} is empty: {geometry!r}")
        self.index = index
        self.geometry = geometry


@dataclass(frozen=True)
class GeometryLocation:
    """Where on a geometry component a closest point was found.

    ``segment_index`` is the index of the segment start within the component's
    coordinate sequence; it is 0 for points and for locations that are not tied
    to a segment (such as the polygon side of a containment hit).
    """

    component: Geometry
    segment_index: int
    coordinate: Coordinate

    @classmethod
    def inside(cls, polygon: Geometry, coordinate: Coordinate) -> "GeometryLocation":
        return cls(polygon, 0, coordinate)

    @property
    def is_inside_area(self) -> bool:
        return self.component.kind == "polygon"


@dataclass(frozen=True)
class DistanceResult:
    distance: float
    locations: Tuple[GeometryLocation, GeometryLocation]

    @property
    def points(self) -> Tuple[Coordinate, Coordinate]:
        return self.locations[0].coordinate, self.locations[1].coordinate


@dataclass
class DistanceConfig:
    """Tunables for :class:`geodist.distance.DistanceOp`."""

    envelope_pruning: bool = True


@dataclass
class DistanceStats:
    """Work counters collected while a distance is computed."""

    containment_tests: int = 0
    segment_comparisons: int = 0
    envelope_prunes: int = 0
    passes: List[str] = field(default_factory=list)


__all__ = [
    "DistanceConfig",
    "DistanceResult",
    "DistanceStats",
    "EmptyGeometryError",
    "GeometryLocation",
]
