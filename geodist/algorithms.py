"""Point and segment distance primitives.

All functions take plain coordinate tuples and only look at the first two
ordinates. They never raise for finite input: a zero-length segment is treated
as the single point it collapses to.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from fractions import Fraction
from typing import Optional, Tuple, Union

from .geometry import Coordinate

# Shewchuk's orient2d error bound (3 + 16 eps) * eps for double precision.
_ORIENT_ERRBOUND = (3.0 + 16.0 * 2.0 ** -53) * 2.0 ** -53


def _vec2(a: Coordinate, b: Coordinate) -> Tuple[float, float]:
    return b[0] - a[0], b[1] - a[1]


def _dot2(a: Tuple[float, float], b: Tuple[float, float]) -> float:
    return a[0] * b[0] + a[1] * b[1]


def _cross2(a: Tuple[float, float], b: Tuple[float, float]) -> float:
    return a[0] * b[1] - a[1] * b[0]


def _same_xy(a: Coordinate, b: Coordinate) -> bool:
    return a[0] == b[0] and a[1] == b[1]


def _in_box(p: Coordinate, a: Coordinate, b: Coordinate) -> bool:
    return (
        min(a[0], b[0]) <= p[0] <= max(a[0], b[0])
        and min(a[1], b[1]) <= p[1] <= max(a[1], b[1])
    )


def orientation(p: Coordinate, q: Coordinate, r: Coordinate) -> int:
    """Return 1 if ``r`` is left of ``p -> q``, -1 if right, 0 if collinear.

    Uses a floating point filter and falls back to exact rational arithmetic
    when the determinant is too close to zero to trust its sign.
    """

    detleft = (q[0] - p[0]) * (r[1] - p[1])
    detright = (q[1] - p[1]) * (r[0] - p[0])
    det = detleft - detright
    errbound = _ORIENT_ERRBOUND * (abs(detleft) + abs(detright))
    if det > errbound:
        return 1
    if -det > errbound:
        return -1

    px, py = Fraction(p[0]), Fraction(p[1])
    exact = (Fraction(q[0]) - px) * (Fraction(r[1]) - py) - (Fraction(q[1]) - py) * (
        Fraction(r[0]) - px
    )
    if exact > 0:
        return 1
    if exact < 0:
        return -1
    return 0


def point_point_distance(a: Coordinate, b: Coordinate) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])


def project_factor(p: Coordinate, a: Coordinate, b: Coordinate) -> float:
    """Position of the projection of ``p`` along ``a -> b`` (0 at ``a``, 1 at ``b``).

    Returns NaN when the segment is too long for its direction to be
    represented, which callers treat as "nearest endpoint".
    """

    if _same_xy(a, b):
        return 0.0
    ab = _vec2(a, b)
    ap = _vec2(a, p)
    len_sq = _dot2(ab, ab)
    if len_sq == 0.0 or math.isinf(len_sq):
        # squared length under- or overflowed; the ratio is scale free
        scale = max(abs(ab[0]), abs(ab[1]))
        ab = (ab[0] / scale, ab[1] / scale)
        ap = (ap[0] / scale, ap[1] / scale)
        len_sq = _dot2(ab, ab)
    return _dot2(ap, ab) / len_sq


def _perpendicular_distance(p: Coordinate, a: Coordinate, b: Coordinate) -> float:
    ab = _vec2(a, b)
    len_sq = _dot2(ab, ab)
    if 0.0 < len_sq < math.inf:
        s = _cross2(_vec2(p, a), ab) / len_sq
        dist = abs(s) * math.sqrt(len_sq)
        if math.isfinite(dist):
            return dist
    length = math.hypot(ab[0], ab[1])
    return abs(_cross2(_vec2(p, a), (ab[0] / length, ab[1] / length)))


def point_segment_distance(p: Coordinate, a: Coordinate, b: Coordinate) -> float:
    if _same_xy(a, b):
        return point_point_distance(p, a)
    r = project_factor(p, a, b)
    if math.isnan(r):
        return min(point_point_distance(p, a), point_point_distance(p, b))
    if r <= 0.0:
        return point_point_distance(p, a)
    if r >= 1.0:
        return point_point_distance(p, b)
    return _perpendicular_distance(p, a, b)


def point_segment_closest_point(p: Coordinate, a: Coordinate, b: Coordinate) -> Coordinate:
    """Closest point to ``p`` on segment ``a-b``.

    When the projection falls outside the segment the matching endpoint is
    returned as-is, so any extra ordinates it carries survive.
    """

    if _same_xy(a, b):
        return a
    r = project_factor(p, a, b)
    if math.isnan(r):
        return a if point_point_distance(p, a) <= point_point_distance(p, b) else b
    if r <= 0.0:
        return a
    if r >= 1.0:
        return b
    return (a[0] + r * (b[0] - a[0]), a[1] + r * (b[1] - a[1]))


def segments_intersect(a0: Coordinate, a1: Coordinate, b0: Coordinate, b1: Coordinate) -> bool:
    return segment_intersection(a0, a1, b0, b1) is not None


def segment_intersection(
    a0: Coordinate, a1: Coordinate, b0: Coordinate, b1: Coordinate
) -> Optional[Coordinate]:
    """Return one point shared by both segments, or ``None``.

    An input endpoint is preferred whenever one lies on the other segment;
    otherwise the crossing point is interpolated along ``a0 -> a1``.
    """

    if (
        max(a0[0], a1[0]) < min(b0[0], b1[0])
        or max(b0[0], b1[0]) < min(a0[0], a1[0])
        or max(a0[1], a1[1]) < min(b0[1], b1[1])
        or max(b0[1], b1[1]) < min(a0[1], a1[1])
    ):
        return None

    o_b0 = orientation(a0, a1, b0)
    o_b1 = orientation(a0, a1, b1)
    if o_b0 * o_b1 > 0:
        return None
    o_a0 = orientation(b0, b1, a0)
    o_a1 = orientation(b0, b1, a1)
    if o_a0 * o_a1 > 0:
        return None

    # touching or collinear overlap: some endpoint lies on the other segment
    if o_b0 == 0 and _in_box(b0, a0, a1):
        return b0
    if o_b1 == 0 and _in_box(b1, a0, a1):
        return b1
    if o_a0 == 0 and _in_box(a0, b0, b1):
        return a0
    if o_a1 == 0 and _in_box(a1, b0, b1):
        return a1
    if 0 in (o_b0, o_b1, o_a0, o_a1):
        # an endpoint on the other line but off the other segment
        return None

    da = _vec2(a0, a1)
    db = _vec2(b0, b1)
    ab0 = _vec2(a0, b0)
    if not math.isfinite(_cross2(da, db)):
        # the ratio of cross products is scale free
        scale = max(abs(da[0]), abs(da[1]), abs(db[0]), abs(db[1]))
        da_s = (da[0] / scale, da[1] / scale)
        db = (db[0] / scale, db[1] / scale)
        ab0 = (ab0[0] / scale, ab0[1] / scale)
        denom = _cross2(da_s, db)
    else:
        denom = _cross2(da, db)
    if denom == 0.0 or math.isnan(denom):
        return None
    t = _cross2(ab0, db) / denom
    t = min(1.0, max(0.0, t))
    return (a0[0] + t * da[0], a0[1] + t * da[1])


def segment_segment_distance(a0: Coordinate, a1: Coordinate, b0: Coordinate, b1: Coordinate) -> float:
    if _same_xy(a0, a1):
        return point_segment_distance(a0, b0, b1)
    if _same_xy(b0, b1):
        return point_segment_distance(b0, a0, a1)
    if segments_intersect(a0, a1, b0, b1):
        return 0.0
    return min(
        point_segment_distance(a0, b0, b1),
        point_segment_distance(a1, b0, b1),
        point_segment_distance(b0, a0, a1),
        point_segment_distance(b1, a0, a1),
    )


def segment_segment_closest_points(
    a0: Coordinate, a1: Coordinate, b0: Coordinate, b1: Coordinate
) -> Tuple[Coordinate, Coordinate]:
    """Closest pair of points, the first on ``a0-a1`` and the second on ``b0-b1``."""

    shared = segment_intersection(a0, a1, b0, b1)
    if shared is not None:
        return shared, shared

    candidates = (
        (point_segment_closest_point(b0, a0, a1), b0),
        (point_segment_closest_point(b1, a0, a1), b1),
        (a0, point_segment_closest_point(a0, b0, b1)),
        (a1, point_segment_closest_point(a1, b0, b1)),
    )
    best = candidates[0]
    best_dist = point_point_distance(*best)
    for pair in candidates[1:]:
        dist = point_point_distance(*pair)
        if dist < best_dist:
            best = pair
            best_dist = dist
    return best


@dataclass(frozen=True)
class LineSegment:
    """Ordered pair of coordinates; ``p0 == p1`` is a valid, degenerate segment."""

    p0: Coordinate
    p1: Coordinate

    @property
    def length(self) -> float:
        return point_point_distance(self.p0, self.p1)

    @property
    def is_degenerate(self) -> bool:
        return _same_xy(self.p0, self.p1)

    def project_factor(self, p: Coordinate) -> float:
        return project_factor(p, self.p0, self.p1)

    def closest_point(self, p: Coordinate) -> Coordinate:
        return point_segment_closest_point(p, self.p0, self.p1)

    def closest_points(self, other: "LineSegment") -> Tuple[Coordinate, Coordinate]:
        return segment_segment_closest_points(self.p0, self.p1, other.p0, other.p1)

    def distance(self, other: Union["LineSegment", Coordinate]) -> float:
        if isinstance(other, LineSegment):
            return segment_segment_distance(self.p0, self.p1, other.p0, other.p1)
        return point_segment_distance(other, self.p0, self.p1)

    def intersection(self, other: "LineSegment") -> Optional[Coordinate]:
        return segment_intersection(self.p0, self.p1, other.p0, other.p1)


__all__ = [
    "LineSegment",
    "orientation",
    "point_point_distance",
    "point_segment_closest_point",
    "point_segment_distance",
    "project_factor",
    "segment_intersection",
    "segment_segment_closest_points",
    "segment_segment_distance",
    "segments_intersect",
]
