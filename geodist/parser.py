from typing import Callable, Dict, List, Optional

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
from .lexer import Token, tokenize

_DIMENSION_TAGS = {'Z', 'M', 'ZM'}


class Cursor:
    def __init__(self, tokens: List[Token]):
        self.toks = tokens
        self.i = 0

    def peek(self) -> Optional[Token]:
        return self.toks[self.i] if self.i < len(self.toks) else None

    def match(self, *types: str) -> Optional[Token]:
        t = self.peek()
        if t and t[0] in types:
            self.i += 1
            return t
        return None

    def match_word(self, word: str) -> bool:
        t = self.peek()
        if t and t[0] == 'WORD' and t[1] == word:
            self.i += 1
            return True
        return False

    def expect(self, *types: str) -> Token:
        t = self.peek()
        if t and t[0] in types:
            self.i += 1
            return t
        want = '|'.join(types)
        if t:
            raise SyntaxError(f'[col {t[2]}] expected {want}, got {t[0]} {t[1]!r}')
        raise SyntaxError(f'Unexpected end of input: expected {want}')


def parse_coordinate(cur: Cursor) -> Coordinate:
    values = [float(cur.expect('NUMBER')[1]), float(cur.expect('NUMBER')[1])]
    while True:
        t = cur.match('NUMBER')
        if not t:
            break
        values.append(float(t[1]))
    return tuple(values)


def _parse_list(cur: Cursor, item: Callable[[Cursor], object]) -> list:
    cur.expect('LPAREN')
    items = [item(cur)]
    while cur.match('COMMA'):
        items.append(item(cur))
    cur.expect('RPAREN')
    return items


def _is_empty(cur: Cursor) -> bool:
    return cur.match_word('EMPTY')


def parse_coordinate_list(cur: Cursor) -> List[Coordinate]:
    if _is_empty(cur):
        return []
    return _parse_list(cur, parse_coordinate)


def _parse_point_text(cur: Cursor) -> Point:
    if _is_empty(cur):
        return Point()
    coord = _parse_list(cur, parse_coordinate)
    if len(coord) != 1:
        raise SyntaxError('POINT takes exactly one coordinate')
    return Point(coord[0])


def _parse_polygon_text(cur: Cursor) -> Polygon:
    if _is_empty(cur):
        return Polygon()
    rings = _parse_list(cur, lambda c: LinearRing(parse_coordinate_list(c)))
    return Polygon(rings[0], tuple(rings[1:]))


def _parse_multipoint_member(cur: Cursor) -> Point:
    # both "MULTIPOINT (1 2, 3 4)" and "MULTIPOINT ((1 2), (3 4))" are accepted
    t = cur.peek()
    if t and t[0] == 'NUMBER':
        return Point(parse_coordinate(cur))
    return _parse_point_text(cur)


def _parse_multi(cur: Cursor, cls: type, member: Callable[[Cursor], Geometry]) -> Geometry:
    if _is_empty(cur):
        return cls(())
    return cls(tuple(_parse_list(cur, member)))


_TAGGED: Dict[str, Callable[[Cursor], Geometry]] = {
    'POINT': _parse_point_text,
    'LINESTRING': lambda cur: LineString(parse_coordinate_list(cur)),
    'LINEARRING': lambda cur: LinearRing(parse_coordinate_list(cur)),
    'POLYGON': _parse_polygon_text,
    'MULTIPOINT': lambda cur: _parse_multi(cur, MultiPoint, _parse_multipoint_member),
    'MULTILINESTRING': lambda cur: _parse_multi(
        cur, MultiLineString, lambda c: LineString(parse_coordinate_list(c))
    ),
    'MULTIPOLYGON': lambda cur: _parse_multi(cur, MultiPolygon, _parse_polygon_text),
    'GEOMETRYCOLLECTION': lambda cur: _parse_multi(cur, GeometryCollection, parse_tagged),
}


def parse_tagged(cur: Cursor) -> Geometry:
    t = cur.expect('WORD')
    handler = _TAGGED.get(t[1])
    if handler is None:
        raise SyntaxError(f'[col {t[2]}] unknown geometry type {t[1]!r}')
    nxt = cur.peek()
    if nxt and nxt[0] == 'WORD' and nxt[1] in _DIMENSION_TAGS:
        cur.i += 1
    return handler(cur)


def parse_wkt(text: str) -> Geometry:
    """Parse a Well-Known Text geometry."""

    cur = Cursor(tokenize(text))
    geom = parse_tagged(cur)
    t = cur.peek()
    if t:
        raise SyntaxError(f'[col {t[2]}] unexpected trailing {t[1]!r}')
    return geom
