"""Immutable planar geometry model consumed by the distance operation."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import ClassVar, Iterable, Iterator, List, Optional, Sequence, Tuple

import numpy as np

Coordinate = Tuple[float, ...]


class GeometryError(ValueError):
    """Raised when a geometry is constructed from invalid coordinates."""


def _as_coordinate(value: Sequence[float]) -> Coordinate:
    if len(value) < 2:
        raise GeometryError(f"coordinate needs at least x and y, got {value!r}")
    return tuple(float(v) for v in value)


def _as_coordinates(values: Iterable[Sequence[float]]) -> Tuple[Coordinate, ...]:
    coords = tuple(_as_coordinate(v) for v in values)
    if coords:
        xy = np.asarray([c[:2] for c in coords], dtype=float)
        if not np.isfinite(xy).all():
            raise GeometryError("coordinates must be finite")
    return coords


@dataclass(frozen=True)
class Envelope:
    """Axis-aligned bounding box. ``Envelope.null()`` stands for "no extent"."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def null(cls) -> "Envelope":
        return cls(math.inf, math.inf, -math.inf, -math.inf)

    @classmethod
    def of(cls, coords: Sequence[Coordinate]) -> "Envelope":
        if not coords:
            return cls.null()
        xy = np.asarray([c[:2] for c in coords], dtype=float)
        lo = xy.min(axis=0)
        hi = xy.max(axis=0)
        return cls(float(lo[0]), float(lo[1]), float(hi[0]), float(hi[1]))

    @property
    def is_null(self) -> bool:
        return self.max_x < self.min_x

    def expand(self, other: "Envelope") -> "Envelope":
        if other.is_null:
            return self
        if self.is_null:
            return other
        return Envelope(
            min(self.min_x, other.min_x),
            min(self.min_y, other.min_y),
            max(self.max_x, other.max_x),
            max(self.max_y, other.max_y),
        )

    def contains(self, coord: Coordinate) -> bool:
        if self.is_null:
            return False
        x, y = coord[0], coord[1]
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    def distance(self, other: "Envelope") -> float:
        """Gap between two boxes; 0.0 when they overlap or touch."""

        if self.is_null or other.is_null:
            return math.inf
        dx = 0.0
        if self.max_x < other.min_x:
            dx = other.min_x - self.max_x
        elif self.min_x > other.max_x:
            dx = self.min_x - other.max_x
        dy = 0.0
        if self.max_y < other.min_y:
            dy = other.min_y - self.max_y
        elif self.min_y > other.max_y:
            dy = self.min_y - other.max_y
        if dx == 0.0:
            return dy
        if dy == 0.0:
            return dx
        return math.hypot(dx, dy)


class Geometry:
    """Base of the geometry variants.

    Every variant carries a ``kind`` tag (``point``, ``linestring``,
    ``polygon`` or ``collection``) that traversal code switches on.
    """

    kind: ClassVar[str] = "geometry"

    @property
    def envelope(self) -> Envelope:
        raise NotImplementedError

    @property
    def is_empty(self) -> bool:
        raise NotImplementedError

    @property
    def coords(self) -> List[Coordinate]:
        raise NotImplementedError

    def walk(self) -> Iterator["Geometry"]:
        """Yield this geometry and, for collections, every descendant (pre-order)."""

        yield self


@dataclass(frozen=True, eq=False)
class Point(Geometry):
    kind: ClassVar[str] = "point"

    coordinate: Optional[Coordinate] = None

    def __post_init__(self) -> None:
        if self.coordinate is not None:
            coords = _as_coordinates([self.coordinate])
            object.__setattr__(self, "coordinate", coords[0])

    @property
    def x(self) -> float:
        if self.coordinate is None:
            raise GeometryError("empty point has no x")
        return self.coordinate[0]

    @property
    def y(self) -> float:
        if self.coordinate is None:
            raise GeometryError("empty point has no y")
        return self.coordinate[1]

    @property
    def envelope(self) -> Envelope:
        if self.coordinate is None:
            return Envelope.null()
        x, y = self.coordinate[0], self.coordinate[1]
        return Envelope(x, y, x, y)

    @property
    def is_empty(self) -> bool:
        return self.coordinate is None

    @property
    def coords(self) -> List[Coordinate]:
        return [] if self.coordinate is None else [self.coordinate]

    def __repr__(self) -> str:
        return f"Point({self.coordinate!r})"


@dataclass(frozen=True, eq=False)
class LineString(Geometry):
    kind: ClassVar[str] = "linestring"

    coordinates: Tuple[Coordinate, ...] = ()
    _envelope: Envelope = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        coords = _as_coordinates(self.coordinates)
        if len(coords) == 1:
            raise GeometryError("line string needs 0 or at least 2 coordinates")
        object.__setattr__(self, "coordinates", coords)
        object.__setattr__(self, "_envelope", Envelope.of(coords))

    @property
    def envelope(self) -> Envelope:
        return self._envelope

    @property
    def is_empty(self) -> bool:
        return not self.coordinates

    @property
    def coords(self) -> List[Coordinate]:
        return list(self.coordinates)

    @property
    def is_closed(self) -> bool:
        if not self.coordinates:
            return False
        first, last = self.coordinates[0], self.coordinates[-1]
        return first[0] == last[0] and first[1] == last[1]

    def segments(self) -> Iterator[Tuple[Coordinate, Coordinate]]:
        coords = self.coordinates
        for i in range(len(coords) - 1):
            yield coords[i], coords[i + 1]

    def __len__(self) -> int:
        return len(self.coordinates)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self.coordinates)} coords)"


@dataclass(frozen=True, eq=False, repr=False)
class LinearRing(LineString):
    """Closed line string used for polygon shells and holes."""

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.coordinates:
            if len(self.coordinates) < 4:
                raise GeometryError("linear ring needs at least 4 coordinates")
            if not self.is_closed:
                raise GeometryError("linear ring must be closed")


def _as_ring(value: object) -> LinearRing:
    if isinstance(value, LinearRing):
        return value
    if isinstance(value, LineString):
        return LinearRing(value.coordinates)
    return LinearRing(tuple(value))  # type: ignore[arg-type]


@dataclass(frozen=True, eq=False)
class Polygon(Geometry):
    kind: ClassVar[str] = "polygon"

    shell: LinearRing = field(default_factory=LinearRing)
    holes: Tuple[LinearRing, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "shell", _as_ring(self.shell))
        object.__setattr__(self, "holes", tuple(_as_ring(h) for h in self.holes))
        if self.shell.is_empty and any(not h.is_empty for h in self.holes):
            raise GeometryError("polygon with an empty shell cannot have holes")

    @property
    def rings(self) -> Tuple[LinearRing, ...]:
        return (self.shell,) + self.holes

    @property
    def envelope(self) -> Envelope:
        return self.shell.envelope

    @property
    def is_empty(self) -> bool:
        return self.shell.is_empty

    @property
    def coords(self) -> List[Coordinate]:
        out: List[Coordinate] = []
        for ring in self.rings:
            out.extend(ring.coordinates)
        return out

    def __repr__(self) -> str:
        return f"Polygon(shell={len(self.shell)} coords, holes={len(self.holes)})"


@dataclass(frozen=True, eq=False)
class GeometryCollection(Geometry):
    kind: ClassVar[str] = "collection"
    member_type: ClassVar[Optional[type]] = None

    geometries: Tuple[Geometry, ...] = ()

    def __post_init__(self) -> None:
        members = tuple(self.geometries)
        for member in members:
            if not isinstance(member, Geometry):
                raise GeometryError(f"collection member is not a geometry: {member!r}")
            if self.member_type is not None and not isinstance(member, self.member_type):
                raise GeometryError(
                    f"{type(self).__name__} only holds {self.member_type.__name__} members"
                )
        object.__setattr__(self, "geometries", members)

    @property
    def envelope(self) -> Envelope:
        env = Envelope.null()
        for member in self.geometries:
            env = env.expand(member.envelope)
        return env

    @property
    def is_empty(self) -> bool:
        return all(member.is_empty for member in self.geometries)

    @property
    def coords(self) -> List[Coordinate]:
        out: List[Coordinate] = []
        for member in self.geometries:
            out.extend(member.coords)
        return out

    def walk(self) -> Iterator[Geometry]:
        yield self
        for member in self.geometries:
            yield from member.walk()

    def __len__(self) -> int:
        return len(self.geometries)

    def __iter__(self) -> Iterator[Geometry]:
        return iter(self.geometries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self.geometries)} members)"


@dataclass(frozen=True, eq=False, repr=False)
class MultiPoint(GeometryCollection):
    member_type: ClassVar[Optional[type]] = Point


@dataclass(frozen=True, eq=False, repr=False)
class MultiLineString(GeometryCollection):
    member_type: ClassVar[Optional[type]] = LineString


@dataclass(frozen=True, eq=False, repr=False)
class MultiPolygon(GeometryCollection):
    member_type: ClassVar[Optional[type]] = Polygon


__all__ = [
    "Coordinate",
    "Envelope",
    "Geometry",
    "GeometryCollection",
    "GeometryError",
    "LineString",
    "LinearRing",
    "MultiLineString",
    "MultiPoint",
    "MultiPolygon",
    "Point",
    "Polygon",
]
