import math

import pytest

from geodist.geometry import (
    Envelope,
    GeometryCollection,
    GeometryError,
    LinearRing,
    LineString,
    MultiPoint,
    Point,
    Polygon,
)

SQUARE = [(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)]


def test_coordinates_are_normalized_to_float_tuples():
    line = LineString([[0, 0], [3, 4]])

    assert line.coordinates == ((0.0, 0.0), (3.0, 4.0))
    assert isinstance(line.coordinates[0][0], float)
    assert Point((1, 2, 3)).coordinate == (1.0, 2.0, 3.0)


@pytest.mark.parametrize(
    'factory',
    [
        lambda: Point((math.nan, 0.0)),
        lambda: LineString([(0.0, 0.0), (math.inf, 1.0)]),
        lambda: LineString([(0.0, 0.0)]),
        lambda: LinearRing([(0, 0), (1, 0), (1, 1), (0, 1)]),
        lambda: LinearRing([(0, 0), (1, 0), (0, 0)]),
        lambda: Point((1.0,)),
        lambda: MultiPoint((LineString([(0, 0), (1, 1)]),)),
        lambda: GeometryCollection(((0.0, 0.0),)),
    ],
)
def test_invalid_geometries_are_rejected(factory):
    with pytest.raises(GeometryError):
        factory()


def test_polygon_accepts_raw_rings():
    poly = Polygon(SQUARE, holes=[[(4, 4), (6, 4), (6, 6), (4, 6), (4, 4)]])

    assert isinstance(poly.shell, LinearRing)
    assert len(poly.holes) == 1
    assert poly.rings == (poly.shell, poly.holes[0])
    assert poly.envelope == Envelope(0.0, 0.0, 10.0, 10.0)
    assert len(poly.coords) == 10


def test_empty_geometries():
    assert Point().is_empty
    assert LineString().is_empty
    assert Polygon().is_empty
    assert GeometryCollection().is_empty
    assert GeometryCollection((Point(), LineString())).is_empty
    assert Point().envelope.is_null
    assert GeometryCollection().envelope.is_null


def test_collection_walk_is_preorder():
    pt = Point((1, 1))
    line = LineString([(0, 0), (2, 2)])
    inner = GeometryCollection((line,))
    outer = GeometryCollection((pt, inner))

    assert list(outer.walk()) == [outer, pt, inner, line]
    assert outer.envelope == Envelope(0.0, 0.0, 2.0, 2.0)


@pytest.mark.parametrize(
    'a, b, expected',
    [
        (Envelope(0, 0, 1, 1), Envelope(0.5, 0.5, 2, 2), 0.0),
        (Envelope(0, 0, 1, 1), Envelope(1, 0, 2, 1), 0.0),
        (Envelope(0, 0, 1, 1), Envelope(3, 0, 4, 1), 2.0),
        (Envelope(0, 0, 1, 1), Envelope(0, -4, 1, -2), 2.0),
        (Envelope(0, 0, 1, 1), Envelope(4, 5, 6, 6), 5.0),
    ],
)
def test_envelope_distance(a, b, expected):
    assert a.distance(b) == expected
    assert b.distance(a) == expected


def test_envelope_distance_to_null_is_infinite():
    assert Envelope(0, 0, 1, 1).distance(Envelope.null()) == math.inf


def test_line_string_segments_and_closure():
    ring = LinearRing(SQUARE)

    assert ring.is_closed
    assert list(ring.segments())[0] == ((0.0, 0.0), (10.0, 0.0))
    assert len(list(ring.segments())) == 4
    assert not LineString([(0, 0), (1, 1)]).is_closed
