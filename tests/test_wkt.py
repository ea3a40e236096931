import pytest

from geodist.geometry import (
    GeometryCollection,
    LinearRing,
    LineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from geodist.lexer import tokenize
from geodist.parser import parse_wkt
from geodist.printer import format_coordinate, to_wkt


def test_tokenize_numbers_and_words():
    tokens = tokenize('point (-1.5e3 .25)')

    assert tokens == [
        ('WORD', 'POINT', 1),
        ('LPAREN', '(', 7),
        ('NUMBER', '-1.5e3', 8),
        ('NUMBER', '.25', 15),
        ('RPAREN', ')', 18),
    ]


def test_tokenize_rejects_unknown_character():
    with pytest.raises(SyntaxError) as excinfo:
        tokenize('POINT (1 2);')

    assert '[col 12]' in str(excinfo.value)


def test_parse_point_and_dimensions():
    assert parse_wkt('POINT (1 2)').coordinate == (1.0, 2.0)
    assert parse_wkt('POINT Z (1 2 3)').coordinate == (1.0, 2.0, 3.0)
    assert parse_wkt('point empty').is_empty


def test_parse_polygon_with_hole():
    geom = parse_wkt(
        'POLYGON ((0 0, 10 0, 10 10, 0 10, 0 0), (4 4, 6 4, 6 6, 4 6, 4 4))'
    )

    assert isinstance(geom, Polygon)
    assert isinstance(geom.shell, LinearRing)
    assert len(geom.holes) == 1
    assert geom.holes[0].coordinates[1] == (6.0, 4.0)


@pytest.mark.parametrize('text', ['MULTIPOINT (1 2, 3 4)', 'MULTIPOINT ((1 2), (3 4))'])
def test_parse_multipoint_both_forms(text):
    geom = parse_wkt(text)

    assert isinstance(geom, MultiPoint)
    assert [p.coordinate for p in geom] == [(1.0, 2.0), (3.0, 4.0)]


def test_parse_nested_collection():
    geom = parse_wkt(
        'GEOMETRYCOLLECTION (POINT (1 2), GEOMETRYCOLLECTION (LINESTRING (0 0, 1 1)),'
        ' MULTIPOLYGON (((0 0, 1 0, 1 1, 0 0))))'
    )

    assert isinstance(geom, GeometryCollection)
    point, inner, multi = geom.geometries
    assert isinstance(point, Point)
    assert isinstance(inner.geometries[0], LineString)
    assert isinstance(multi, MultiPolygon)


def test_parse_empty_collection():
    assert parse_wkt('GEOMETRYCOLLECTION EMPTY').is_empty


@pytest.mark.parametrize(
    'text, message',
    [
        ('CIRCLE (0 0)', 'unknown geometry type'),
        ('POINT (1 2) extra', 'unexpected trailing'),
        ('POINT (1)', 'expected NUMBER'),
        ('LINESTRING (0 0, 1 1', 'end of input'),
    ],
)
def test_parse_errors(text, message):
    with pytest.raises(SyntaxError) as excinfo:
        parse_wkt(text)

    assert message in str(excinfo.value)


@pytest.mark.parametrize(
    'text',
    [
        'POINT (1 2)',
        'LINESTRING (0 0, 2.5 1)',
        'POLYGON ((0 0, 10 0, 10 10, 0 0))',
        'MULTIPOINT ((1 2), (3 4))',
        'GEOMETRYCOLLECTION (POINT (1 2), LINESTRING (0 0, 1 1))',
        'GEOMETRYCOLLECTION EMPTY',
        'POINT EMPTY',
    ],
)
def test_to_wkt_canonical_form(text):
    assert to_wkt(parse_wkt(text)) == text


def test_format_coordinate():
    assert format_coordinate((1.0, 2.5)) == '1 2.5'
    assert format_coordinate((0.1, -3.0, 7.0)) == '0.1 -3 7'
