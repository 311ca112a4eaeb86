"""
Geometry model for parsed WKT.

A parsed literal becomes a GeometryNode: a kind tag plus a payload whose
nesting is fixed by the kind. Nodes render to GeoJSON geometry objects,
back to canonical WKT, and to Shapely geometries.
"""

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple

from shapely.geometry import shape
from shapely.geometry.base import BaseGeometry

from geowkter.core.errors import GeometryError, UnsupportedGeometryTypeError

logger = logging.getLogger(__name__)

Coordinate = Tuple[float, float]
CoordinateSequence = Tuple[Coordinate, ...]


class GeometryKind(str, Enum):
    """Supported WKT geometry kinds, valued by their GeoJSON type names."""

    POINT = "Point"
    LINE_STRING = "LineString"
    POLYGON = "Polygon"
    MULTI_POINT = "MultiPoint"
    MULTI_LINE_STRING = "MultiLineString"
    MULTI_POLYGON = "MultiPolygon"
    GEOMETRY_COLLECTION = "GeometryCollection"

    @property
    def keyword(self) -> str:
        """WKT keyword for this kind, e.g. ``MULTIPOLYGON``."""
        return self.value.upper()

    @classmethod
    def from_keyword(cls, keyword: str) -> "GeometryKind":
        """
        Look up a kind by its WKT keyword, ignoring case.

        Raises:
            UnsupportedGeometryTypeError: If the keyword is not a supported kind
        """
        normalized = keyword.strip().upper()
        try:
            return _KINDS_BY_KEYWORD[normalized]
        except KeyError:
            raise UnsupportedGeometryTypeError(normalized) from None


_KINDS_BY_KEYWORD: Dict[str, GeometryKind] = {kind.keyword: kind for kind in GeometryKind}

# Nesting depth of the coordinate payload; 0 is a single (x, y) pair
COORDINATE_DEPTH: Dict[GeometryKind, int] = {
    GeometryKind.POINT: 0,
    GeometryKind.LINE_STRING: 1,
    GeometryKind.MULTI_POINT: 1,
    GeometryKind.POLYGON: 2,
    GeometryKind.MULTI_LINE_STRING: 2,
    GeometryKind.MULTI_POLYGON: 3,
}


def _freeze(payload: Any, depth: int, kind: GeometryKind) -> Any:
    """Convert a nested coordinate payload to tuples, checking its shape."""
    if depth == 0:
        if not isinstance(payload, (tuple, list)) or len(payload) != 2:
            raise GeometryError(
                f"{kind.value} coordinate must be an (x, y) pair, got {payload!r}",
                geometry_type=kind.value,
            )
        x, y = payload
        for value in (x, y):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise GeometryError(
                    f"{kind.value} coordinate values must be numbers, got {value!r}",
                    geometry_type=kind.value,
                )
            if not math.isfinite(value):
                raise GeometryError(
                    f"{kind.value} coordinate values must be finite, got {value!r}",
                    geometry_type=kind.value,
                )
        return (float(x), float(y))

    if not isinstance(payload, (tuple, list)) or not payload:
        raise GeometryError(
            f"{kind.value} payload must be a non-empty sequence at nesting depth {depth}",
            geometry_type=kind.value,
        )
    return tuple(_freeze(item, depth - 1, kind) for item in payload)


@dataclass(frozen=True)
class GeometryNode:
    """
    One parsed WKT geometry.

    Attributes:
        kind: Geometry kind
        coordinates: Nested coordinate tuples, shaped by ``COORDINATE_DEPTH``;
            None for collections
        geometries: Child nodes of a GeometryCollection; empty otherwise
    """

    kind: GeometryKind
    coordinates: Any = None
    geometries: Tuple["GeometryNode", ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Validate that the payload matches the kind."""
        kind = GeometryKind(self.kind)
        object.__setattr__(self, "kind", kind)

        if kind is GeometryKind.GEOMETRY_COLLECTION:
            if self.coordinates is not None:
                raise GeometryError(
                    "GeometryCollection carries child geometries, not coordinates",
                    geometry_type=kind.value,
                )
            children = tuple(self.geometries)
            for child in children:
                if not isinstance(child, GeometryNode):
                    raise GeometryError(
                        f"GeometryCollection member must be a GeometryNode, got {type(child).__name__}",
                        geometry_type=kind.value,
                    )
            object.__setattr__(self, "geometries", children)
            return

        if self.geometries:
            raise GeometryError(
                f"{kind.value} cannot have child geometries",
                geometry_type=kind.value,
            )
        object.__setattr__(
            self, "coordinates", _freeze(self.coordinates, COORDINATE_DEPTH[kind], kind)
        )

    @property
    def is_collection(self) -> bool:
        """Whether this node is a GeometryCollection."""
        return self.kind is GeometryKind.GEOMETRY_COLLECTION

    @property
    def __geo_interface__(self) -> Dict[str, Any]:
        return to_geojson_geometry(self)

    @property
    def wkt(self) -> str:
        """Canonical WKT text for this node."""
        return to_wkt(self)


def _coordinates_to_lists(payload: Any, depth: int) -> List[Any]:
    if depth == 0:
        return [payload[0], payload[1]]
    return [_coordinates_to_lists(item, depth - 1) for item in payload]


def to_geojson_geometry(node: GeometryNode) -> Dict[str, Any]:
    """
    Convert a GeometryNode into a GeoJSON geometry object.

    Coordinates are emitted as ``[x, y]`` lists in input order.

    Args:
        node: Parsed geometry

    Returns:
        GeoJSON geometry dictionary

    Examples:
        >>> to_geojson_geometry(GeometryNode(GeometryKind.POINT, (30.0, 10.0)))
        {'type': 'Point', 'coordinates': [30.0, 10.0]}
    """
    if node.is_collection:
        return {
            "type": node.kind.value,
            "geometries": [to_geojson_geometry(child) for child in node.geometries],
        }
    return {
        "type": node.kind.value,
        "coordinates": _coordinates_to_lists(node.coordinates, COORDINATE_DEPTH[node.kind]),
    }


def _format_number(value: float) -> str:
    if value.is_integer() and abs(value) < 1e15:
        return str(int(value))
    return repr(value)


def _format_coordinate(coordinate: Coordinate) -> str:
    return f"{_format_number(coordinate[0])} {_format_number(coordinate[1])}"


def _wkt_body(payload: Any, depth: int) -> str:
    if depth == 0:
        return _format_coordinate(payload)
    if depth == 1:
        return ", ".join(_format_coordinate(coordinate) for coordinate in payload)
    return ", ".join(f"({_wkt_body(item, depth - 1)})" for item in payload)


def to_wkt(node: GeometryNode) -> str:
    """
    Render a GeometryNode as canonical WKT.

    MultiPoint members are always written in the parenthesized form and
    integral values are written without a fractional part, so
    ``parse_geometry(to_wkt(node)) == node``.

    Args:
        node: Geometry to render

    Returns:
        WKT string such as ``POLYGON ((0 0, 1 0, 1 1, 0 0))``
    """
    if node.is_collection:
        body = ", ".join(to_wkt(child) for child in node.geometries)
    elif node.kind is GeometryKind.MULTI_POINT:
        body = ", ".join(f"({_format_coordinate(point)})" for point in node.coordinates)
    else:
        body = _wkt_body(node.coordinates, COORDINATE_DEPTH[node.kind])
    return f"{node.kind.keyword} ({body})"


def to_shapely(node: GeometryNode) -> BaseGeometry:
    """
    Convert a GeometryNode to a Shapely geometry.

    No validity repair is attempted; invalid polygons are returned as-is
    with a warning.

    Args:
        node: Parsed geometry

    Returns:
        Shapely geometry object
    """
    geometry = shape(node)
    if not geometry.is_valid:
        logger.warning(f"Converted {node.kind.value} is not a valid geometry")
    return geometry
