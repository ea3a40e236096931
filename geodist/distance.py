"""Minimum distance and closest points between two geometries.

The search runs in two stages. A containment pass first checks whether a
representative point of either input lies in or on a polygon of the other,
which proves the distance is zero. Otherwise every line and point component of
one input is compared with every line and point component of the other,
skipping pairs whose envelopes are already farther apart than the best distance
found so far.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .algorithms import (
    point_point_distance,
    point_segment_closest_point,
    point_segment_distance,
    segment_segment_closest_points,
    segment_segment_distance,
)
from .config import get_distance_config
from .extract import (
    connected_element_locations,
    extract_lines,
    extract_points,
    extract_polygons,
    has_components,
)
from .geometry import Coordinate, Geometry, LineString, Point, Polygon
from .locate import Location, locate
from .logging_utils import apply_debug_logging
from .model import (
    DistanceConfig,
    DistanceResult,
    DistanceStats,
    EmptyGeometryError,
    GeometryLocation,
)

logger = logging.getLogger(__name__)


@dataclass
class _SearchContext:
    """Running minimum and its witnesses, passed through every search step."""

    stats: DistanceStats
    min_distance: float = math.inf
    locations: Optional[Tuple[GeometryLocation, GeometryLocation]] = None

    @property
    def done(self) -> bool:
        return self.min_distance <= 0.0

    def improves(self, dist: float) -> bool:
        # strict comparison: on ties the first witness wins. The first candidate
        # is always taken so distances that overflow to inf still get witnesses.
        return self.locations is None or dist < self.min_distance

    def record(self, loc0: GeometryLocation, loc1: GeometryLocation, *, flip: bool = False) -> None:
        dist = point_point_distance(loc0.coordinate, loc1.coordinate)
        if self.improves(dist):
            self.min_distance = dist
            self.locations = (loc1, loc0) if flip else (loc0, loc1)

    def force_zero(self, loc0: GeometryLocation, loc1: GeometryLocation, *, flip: bool = False) -> None:
        self.min_distance = 0.0
        self.locations = (loc1, loc0) if flip else (loc0, loc1)


class DistanceOp:
    """Distance between two geometries, computed on first query and then cached."""

    def __init__(self, g0: Geometry, g1: Geometry, *, config: Optional[DistanceConfig] = None):
        for index, geom in enumerate((g0, g1)):
            if geom is None:
                raise TypeError(f"missing argument: geometry {index} is None")
            if not isinstance(geom, Geometry):
                raise TypeError(f"geometry {index} must be a Geometry, got {type(geom).__name__}")
        self._geoms: Tuple[Geometry, Geometry] = (g0, g1)
        self._config = config if config is not None else get_distance_config()
        self._result: Optional[DistanceResult] = None
        self.stats = DistanceStats()

    @property
    def geometries(self) -> Tuple[Geometry, Geometry]:
        return self._geoms

    @property
    def is_computed(self) -> bool:
        return self._result is not None

    def result(self) -> DistanceResult:
        if self._result is None:
            self._result = self._compute()
        return self._result

    def distance(self) -> float:
        return self.result().distance

    def closest_points(self) -> Tuple[Coordinate, Coordinate]:
        """Closest points, one per input, in input order."""

        return self.result().points

    def closest_locations(self) -> Tuple[GeometryLocation, GeometryLocation]:
        return self.result().locations

    def is_within_distance(self, limit: float) -> bool:
        if limit < 0.0:
            raise ValueError(f"distance limit must be non-negative, got {limit}")
        if self._result is None:
            self._check_not_empty()
            g0, g1 = self._geoms
            if g0.envelope.distance(g1.envelope) > limit:
                return False
        return self.distance() <= limit

    def _check_not_empty(self) -> None:
        for index, geom in enumerate(self._geoms):
            if not has_components(geom):
                raise EmptyGeometryError(index, geom)

    def _compute(self) -> DistanceResult:
        self._check_not_empty()
        ctx = _SearchContext(stats=self.stats)

        self._compute_containment_distance(ctx)
        if not ctx.done:
            self._compute_line_distance(ctx)

        assert ctx.locations is not None
        logger.info(
            "Distance computed: %.6g (%d segment comparisons, %d envelope prunes)",
            ctx.min_distance,
            self.stats.segment_comparisons,
            self.stats.envelope_prunes,
        )
        return DistanceResult(ctx.min_distance, ctx.locations)

    def _compute_containment_distance(self, ctx: _SearchContext) -> None:
        g0, g1 = self._geoms
        polys0 = extract_polygons(g0)
        polys1 = extract_polygons(g1)

        if polys1:
            self._compute_inside(connected_element_locations(g0), polys1, ctx, flip=False)
            if ctx.done:
                logger.debug("Geometry 0 touches or lies inside a polygon of geometry 1")
                return
        if polys0:
            # testing geometry 1 against geometry 0, so the witnesses come back flipped
            self._compute_inside(connected_element_locations(g1), polys0, ctx, flip=True)
            if ctx.done:
                logger.debug("Geometry 1 touches or lies inside a polygon of geometry 0")

    def _compute_inside(
        self,
        locations: Sequence[GeometryLocation],
        polygons: Sequence[Polygon],
        ctx: _SearchContext,
        *,
        flip: bool,
    ) -> None:
        ctx.stats.passes.append("containment")
        for loc in locations:
            for poly in polygons:
                ctx.stats.containment_tests += 1
                if locate(loc.coordinate, poly) is not Location.EXTERIOR:
                    ctx.force_zero(loc, GeometryLocation.inside(poly, loc.coordinate), flip=flip)
                    return

    def _compute_line_distance(self, ctx: _SearchContext) -> None:
        g0, g1 = self._geoms
        lines0 = extract_lines(g0)
        lines1 = extract_lines(g1)
        points0 = extract_points(g0)
        points1 = extract_points(g1)
        logger.debug(
            "Exhaustive search: %d/%d lines, %d/%d points",
            len(lines0),
            len(lines1),
            len(points0),
            len(points1),
        )

        self._compute_lines_lines(lines0, lines1, ctx)
        if ctx.done:
            return
        self._compute_lines_points(lines0, points1, ctx, flip=False)
        if ctx.done:
            return
        self._compute_lines_points(lines1, points0, ctx, flip=True)
        if ctx.done:
            return
        self._compute_points_points(points0, points1, ctx)

    def _pruned(self, a: Geometry, b: Geometry, ctx: _SearchContext) -> bool:
        if not self._config.envelope_pruning:
            return False
        if a.envelope.distance(b.envelope) > ctx.min_distance:
            ctx.stats.envelope_prunes += 1
            return True
        return False

    def _compute_lines_lines(
        self, lines0: List[LineString], lines1: List[LineString], ctx: _SearchContext
    ) -> None:
        ctx.stats.passes.append("lines-lines")
        for line0 in lines0:
            for line1 in lines1:
                self._line_line(line0, line1, ctx)
                if ctx.done:
                    return

    def _compute_lines_points(
        self, lines: List[LineString], points: List[Point], ctx: _SearchContext, *, flip: bool
    ) -> None:
        ctx.stats.passes.append("points-lines" if flip else "lines-points")
        for line in lines:
            for pt in points:
                self._line_point(line, pt, ctx, flip=flip)
                if ctx.done:
                    return

    def _compute_points_points(
        self, points0: List[Point], points1: List[Point], ctx: _SearchContext
    ) -> None:
        ctx.stats.passes.append("points-points")
        for pt0 in points0:
            for pt1 in points1:
                # witnesses are the two point coordinates; equal distances from
                # several candidates keep whichever pair was seen first
                ctx.record(
                    GeometryLocation(pt0, 0, pt0.coordinate),
                    GeometryLocation(pt1, 0, pt1.coordinate),
                )
                if ctx.done:
                    return

    def _line_line(self, line0: LineString, line1: LineString, ctx: _SearchContext) -> None:
        if self._pruned(line0, line1, ctx):
            return
        coords0 = line0.coordinates
        coords1 = line1.coordinates
        for i in range(len(coords0) - 1):
            a0, a1 = coords0[i], coords0[i + 1]
            for j in range(len(coords1) - 1):
                b0, b1 = coords1[j], coords1[j + 1]
                ctx.stats.segment_comparisons += 1
                if ctx.improves(segment_segment_distance(a0, a1, b0, b1)):
                    close0, close1 = segment_segment_closest_points(a0, a1, b0, b1)
                    ctx.record(GeometryLocation(line0, i, close0), GeometryLocation(line1, j, close1))
                if ctx.done:
                    return

    def _line_point(self, line: LineString, pt: Point, ctx: _SearchContext, *, flip: bool) -> None:
        if self._pruned(line, pt, ctx):
            return
        coords = line.coordinates
        coord = pt.coordinate
        assert coord is not None  # for type checkers
        for i in range(len(coords) - 1):
            a0, a1 = coords[i], coords[i + 1]
            ctx.stats.segment_comparisons += 1
            if ctx.improves(point_segment_distance(coord, a0, a1)):
                closest = point_segment_closest_point(coord, a0, a1)
                ctx.record(GeometryLocation(line, i, closest), GeometryLocation(pt, 0, coord), flip=flip)
            if ctx.done:
                return


def distance(g0: Geometry, g1: Geometry) -> float:
    """Minimum distance between ``g0`` and ``g1``."""

    return DistanceOp(g0, g1).distance()


def closest_points(g0: Geometry, g1: Geometry) -> Tuple[Coordinate, Coordinate]:
    """Closest points of ``g0`` and ``g1``, in the order the geometries were given."""

    return DistanceOp(g0, g1).closest_points()


def closest_locations(g0: Geometry, g1: Geometry) -> Tuple[GeometryLocation, GeometryLocation]:
    return DistanceOp(g0, g1).closest_locations()


def is_within_distance(g0: Geometry, g1: Geometry, limit: float) -> bool:
    return DistanceOp(g0, g1).is_within_distance(limit)


apply_debug_logging(
    globals(),
    logger=logger,
    skip={"_SearchContext", "DistanceOp._line_line", "DistanceOp._line_point", "DistanceOp._pruned"},
)

__all__ = [
    "DistanceOp",
    "closest_locations",
    "closest_points",
    "distance",
    "is_within_distance",
]
