"""
WKT parsing module for GeoWKTer.

This module parses Well-Known Text geometry literals into geometry trees
and converts them to GeoJSON.
"""

from .collection import decompose_collection
from .geometry import (
    Coordinate,
    CoordinateSequence,
    GeometryKind,
    GeometryNode,
    to_geojson_geometry,
    to_shapely,
    to_wkt,
)
from .tokenizer import find_closing_paren, parse_coordinate, parse_coordinate_list, split_parts
from .wkt_parser import parse_geometry, split_literal
from .wkt_reader import ParsedFeature, ParsedWKT, WKTReader, parse_wkt_string, wkt_to_geojson

__all__ = [
    # Geometry
    "Coordinate",
    "CoordinateSequence",
    "GeometryKind",
    "GeometryNode",
    "to_geojson_geometry",
    "to_shapely",
    "to_wkt",
    # Tokenizing
    "parse_coordinate",
    "parse_coordinate_list",
    "find_closing_paren",
    "split_parts",
    "decompose_collection",
    # Parsing
    "parse_geometry",
    "split_literal",
    # Reading
    "ParsedFeature",
    "ParsedWKT",
    "WKTReader",
    "parse_wkt_string",
    "wkt_to_geojson",
]
