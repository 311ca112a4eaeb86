"""
WKT geometry literal parser.

Recognizes the leading type keyword of a literal, extracts the body between
its outermost parentheses and hands the body to the assembler for that
kind. GEOMETRYCOLLECTION bodies are decomposed and parsed recursively.
"""

import logging
import re
from typing import Any, Callable, Dict, Tuple

from geowkter.core.errors import InvalidWKTError, MalformedStructureError
from .collection import decompose_collection
from .geometry import GeometryKind, GeometryNode
from .tokenizer import find_closing_paren, parse_coordinate, parse_coordinate_list, split_parts

logger = logging.getLogger(__name__)

_HEAD_PATTERN = re.compile(r"^\s*([A-Za-z][A-Za-z0-9_]*)\s*\(")

# Collections nested deeper than this are rejected before the interpreter stack runs out
MAX_COLLECTION_DEPTH = 100


def _parse_point(body: str) -> GeometryNode:
    return GeometryNode(GeometryKind.POINT, parse_coordinate(body))


def _parse_line_string(body: str) -> GeometryNode:
    return GeometryNode(GeometryKind.LINE_STRING, parse_coordinate_list(body))


def _parse_multi_point(body: str) -> GeometryNode:
    # Both MULTIPOINT ((1 2), (3 4)) and MULTIPOINT (1 2, 3 4) are accepted
    if body.lstrip().startswith("("):
        points = tuple(parse_coordinate(part) for part in split_parts(body))
    else:
        points = parse_coordinate_list(body)
    return GeometryNode(GeometryKind.MULTI_POINT, points)


def _parse_rings(body: str) -> Any:
    return tuple(parse_coordinate_list(ring) for ring in split_parts(body))


def _parse_polygon(body: str) -> GeometryNode:
    return GeometryNode(GeometryKind.POLYGON, _parse_rings(body))


def _parse_multi_line_string(body: str) -> GeometryNode:
    return GeometryNode(GeometryKind.MULTI_LINE_STRING, _parse_rings(body))


def _parse_multi_polygon(body: str) -> GeometryNode:
    polygons = tuple(_parse_rings(polygon) for polygon in split_parts(body))
    return GeometryNode(GeometryKind.MULTI_POLYGON, polygons)


def _parse_geometry_collection(body: str, depth: int = 0) -> GeometryNode:
    if depth >= MAX_COLLECTION_DEPTH:
        raise MalformedStructureError(
            f"GEOMETRYCOLLECTION nesting exceeds {MAX_COLLECTION_DEPTH} levels",
            fragment=body[:200],
        )
    members = tuple(
        parse_geometry(literal, _depth=depth + 1) for literal in decompose_collection(body)
    )
    return GeometryNode(GeometryKind.GEOMETRY_COLLECTION, geometries=members)


_ASSEMBLERS: Dict[GeometryKind, Callable[[str], GeometryNode]] = {
    GeometryKind.POINT: _parse_point,
    GeometryKind.LINE_STRING: _parse_line_string,
    GeometryKind.POLYGON: _parse_polygon,
    GeometryKind.MULTI_POINT: _parse_multi_point,
    GeometryKind.MULTI_LINE_STRING: _parse_multi_line_string,
    GeometryKind.MULTI_POLYGON: _parse_multi_polygon,
    GeometryKind.GEOMETRY_COLLECTION: _parse_geometry_collection,
}

_missing = set(GeometryKind) - set(_ASSEMBLERS)
if _missing:
    raise RuntimeError(f"No WKT assembler registered for: {sorted(k.value for k in _missing)}")


def split_literal(wkt: str) -> Tuple[GeometryKind, str]:
    """
    Split a WKT literal into its kind and the body between its outer parentheses.

    Args:
        wkt: A single geometry literal, e.g. ``"POINT (30 10)"``

    Returns:
        (kind, body) tuple

    Raises:
        InvalidWKTError: If the text does not have the ``TYPE(...)`` shape
        UnsupportedGeometryTypeError: If the keyword is not a supported kind
        MalformedStructureError: If the outer parentheses are unbalanced
    """
    if not isinstance(wkt, str):
        raise InvalidWKTError(f"WKT must be a string, got {type(wkt).__name__}")

    match = _HEAD_PATTERN.match(wkt)
    if not match:
        raise InvalidWKTError(f"Invalid WKT string: {wkt.strip()!r}", fragment=wkt)

    kind = GeometryKind.from_keyword(match.group(1))

    open_index = match.end() - 1
    close_index = find_closing_paren(wkt, open_index)

    trailing = wkt[close_index + 1 :].strip()
    if trailing:
        if "(" in trailing or ")" in trailing:
            raise MalformedStructureError(
                f"Unbalanced parentheses after {kind.keyword} body: {trailing!r}",
                fragment=wkt,
            )
        raise InvalidWKTError(
            f"Unexpected text after {kind.keyword} body: {trailing!r}", fragment=wkt
        )

    return kind, wkt[open_index + 1 : close_index]


def parse_geometry(wkt: str, _depth: int = 0) -> GeometryNode:
    """
    Parse one WKT geometry literal into a GeometryNode.

    Parsing is all-or-nothing: any malformed part fails the whole literal.

    Args:
        wkt: A single geometry literal; keyword case and surrounding
            whitespace are insignificant

    Returns:
        Fully populated GeometryNode

    Raises:
        InvalidWKTError: Input does not have the ``TYPE(...)`` shape
        UnsupportedGeometryTypeError: Unknown type keyword
        MalformedStructureError: Parentheses/commas cannot be decomposed, or
            collections nest deeper than ``MAX_COLLECTION_DEPTH``
        MalformedCoordinateError: A coordinate is not a pair of finite numbers

    Examples:
        >>> parse_geometry("MULTIPOINT ((30 10), (10 30))").coordinates
        ((30.0, 10.0), (10.0, 30.0))
    """
    kind, body = split_literal(wkt)
    if kind is GeometryKind.GEOMETRY_COLLECTION:
        node = _parse_geometry_collection(body, _depth)
    else:
        node = _ASSEMBLERS[kind](body)

    if node.is_collection:
        logger.debug(f"Parsed {kind.value} with {len(node.geometries)} member(s)")
    else:
        logger.debug(f"Parsed {kind.value}")

    return node
