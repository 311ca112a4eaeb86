"""
Tests for the geometry model, GeoJSON assembly and WKT rendering.
"""

import json

import pytest
from shapely.geometry import GeometryCollection, Point, Polygon, shape

from geowkter.core.errors import GeometryError, UnsupportedGeometryTypeError
from geowkter.core.parsers import (
    GeometryKind,
    GeometryNode,
    parse_geometry,
    to_geojson_geometry,
    to_shapely,
    to_wkt,
)


class TestGeometryKind:
    """Tests for the kind enumeration."""

    def test_keywords(self):
        assert GeometryKind.MULTI_POLYGON.keyword == "MULTIPOLYGON"
        assert GeometryKind.GEOMETRY_COLLECTION.keyword == "GEOMETRYCOLLECTION"

    def test_from_keyword_case_insensitive(self):
        assert GeometryKind.from_keyword("linestring") == GeometryKind.LINE_STRING
        assert GeometryKind.from_keyword(" MultiPoint ") == GeometryKind.MULTI_POINT

    def test_from_keyword_unknown(self):
        with pytest.raises(UnsupportedGeometryTypeError) as exc_info:
            GeometryKind.from_keyword("triangle")
        assert exc_info.value.keyword == "TRIANGLE"

    def test_values_are_geojson_types(self):
        assert [kind.value for kind in GeometryKind] == [
            "Point",
            "LineString",
            "Polygon",
            "MultiPoint",
            "MultiLineString",
            "MultiPolygon",
            "GeometryCollection",
        ]


class TestGeometryNode:
    """Tests for payload validation on construction."""

    def test_lists_are_frozen_to_tuples(self):
        node = GeometryNode(GeometryKind.LINE_STRING, [[0, 0], [1, 1]])
        assert node.coordinates == ((0.0, 0.0), (1.0, 1.0))
        assert isinstance(node.coordinates[0][0], float)

    def test_kind_from_string(self):
        node = GeometryNode("Point", (1, 2))
        assert node.kind is GeometryKind.POINT

    def test_nodes_are_hashable_and_comparable(self):
        a = GeometryNode(GeometryKind.POINT, (1, 2))
        b = GeometryNode(GeometryKind.POINT, [1.0, 2.0])
        assert a == b
        assert len({a, b}) == 1

    def test_wrong_nesting_rejected(self):
        with pytest.raises(GeometryError):
            GeometryNode(GeometryKind.POLYGON, ((0, 0), (1, 1)))

    def test_point_needs_pair(self):
        with pytest.raises(GeometryError):
            GeometryNode(GeometryKind.POINT, (1, 2, 3))

    def test_empty_sequence_rejected(self):
        with pytest.raises(GeometryError):
            GeometryNode(GeometryKind.LINE_STRING, ())

    def test_non_numeric_rejected(self):
        with pytest.raises(GeometryError):
            GeometryNode(GeometryKind.POINT, ("1", 2))

    def test_non_finite_rejected(self):
        with pytest.raises(GeometryError):
            GeometryNode(GeometryKind.POINT, (float("nan"), 2))

    def test_collection_rejects_coordinates(self):
        with pytest.raises(GeometryError):
            GeometryNode(GeometryKind.GEOMETRY_COLLECTION, coordinates=(1, 2))

    def test_collection_rejects_non_nodes(self):
        with pytest.raises(GeometryError):
            GeometryNode(GeometryKind.GEOMETRY_COLLECTION, geometries=[{"type": "Point"}])

    def test_simple_kind_rejects_children(self):
        child = GeometryNode(GeometryKind.POINT, (1, 2))
        with pytest.raises(GeometryError):
            GeometryNode(GeometryKind.POINT, (1, 2), geometries=(child,))

    def test_is_collection(self):
        assert parse_geometry("GEOMETRYCOLLECTION(POINT(1 2))").is_collection
        assert not parse_geometry("POINT(1 2)").is_collection


class TestToGeoJSON:
    """Tests for GeoJSON geometry assembly."""

    def test_point(self):
        assert to_geojson_geometry(parse_geometry("POINT (30 10)")) == {
            "type": "Point",
            "coordinates": [30, 10],
        }

    def test_line_string(self):
        assert to_geojson_geometry(parse_geometry("LINESTRING (30 10, 10 30, 40 40)")) == {
            "type": "LineString",
            "coordinates": [[30, 10], [10, 30], [40, 40]],
        }

    def test_polygon(self):
        result = to_geojson_geometry(parse_geometry("POLYGON ((30 10, 40 40, 20 40, 10 20, 30 10))"))
        assert result == {
            "type": "Polygon",
            "coordinates": [[[30, 10], [40, 40], [20, 40], [10, 20], [30, 10]]],
        }

    def test_multi_point(self):
        assert to_geojson_geometry(parse_geometry("MULTIPOINT ((30 10), (10 30))")) == {
            "type": "MultiPoint",
            "coordinates": [[30, 10], [10, 30]],
        }

    def test_multi_line_string(self):
        result = to_geojson_geometry(parse_geometry("MULTILINESTRING ((10 10, 20 20), (40 40, 30 30))"))
        assert result == {
            "type": "MultiLineString",
            "coordinates": [[[10, 10], [20, 20]], [[40, 40], [30, 30]]],
        }

    def test_geometry_collection(self):
        result = to_geojson_geometry(
            parse_geometry("GEOMETRYCOLLECTION (POINT (40 10), LINESTRING (10 10, 20 20))")
        )
        assert result == {
            "type": "GeometryCollection",
            "geometries": [
                {"type": "Point", "coordinates": [40, 10]},
                {"type": "LineString", "coordinates": [[10, 10], [20, 20]]},
            ],
        }

    def test_coordinates_are_lists(self):
        result = to_geojson_geometry(parse_geometry("POLYGON ((0 0, 1 0, 1 1, 0 0))"))
        assert isinstance(result["coordinates"], list)
        assert isinstance(result["coordinates"][0][0], list)

    def test_json_serializable(self):
        node = parse_geometry("MULTIPOLYGON (((0 0, 1 0, 1 1, 0 0)), ((5 5, 6 5, 6 6, 5 5)))")
        decoded = json.loads(json.dumps(to_geojson_geometry(node)))
        assert decoded["coordinates"][1][0][2] == [6, 6]

    def test_geo_interface(self):
        node = parse_geometry("POINT (3 4)")
        assert node.__geo_interface__ == to_geojson_geometry(node)
        assert shape(node).equals(Point(3, 4))


class TestToWKT:
    """Tests for canonical WKT rendering."""

    def test_point(self):
        assert to_wkt(parse_geometry("point(30 10)")) == "POINT (30 10)"

    def test_fractional_values(self):
        assert to_wkt(parse_geometry("POINT(-1.5 0.1)")) == "POINT (-1.5 0.1)"

    def test_multi_point_always_parenthesized(self):
        assert to_wkt(parse_geometry("MULTIPOINT (1 2, 3 4)")) == "MULTIPOINT ((1 2), (3 4))"

    def test_multi_polygon(self):
        node = parse_geometry("MULTIPOLYGON(((0 0,4 0,4 4,0 0)),((1 1,2 1,2 2,1 1)))")
        assert node.wkt == "MULTIPOLYGON (((0 0, 4 0, 4 4, 0 0)), ((1 1, 2 1, 2 2, 1 1)))"

    def test_collection(self):
        node = parse_geometry("GEOMETRYCOLLECTION(POINT(1 2),LINESTRING(1 2,3 4))")
        assert node.wkt == "GEOMETRYCOLLECTION (POINT (1 2), LINESTRING (1 2, 3 4))"

    @pytest.mark.parametrize(
        "wkt",
        [
            "POINT (1e+20 -3.25)",
            "LINESTRING (0.1 0.2, 0.3 0.4)",
            "POLYGON ((0 0, 10 0, 10 10, 0 0), (1 1, 2 1, 2 2, 1 1))",
            "MULTIPOINT (10 40, 40 30)",
            "MULTILINESTRING ((1 1, 2 2), (3 3, 4 4))",
            "MULTIPOLYGON (((0 0, 1 0, 1 1, 0 0)), ((5 5, 6 5, 6 6, 5 5)))",
            "GEOMETRYCOLLECTION (GEOMETRYCOLLECTION (POINT (1 2)), POLYGON ((0 0, 1 1, 1 0, 0 0)))",
            "GEOMETRYCOLLECTION ()",
        ],
    )
    def test_reparse_is_identity(self, wkt):
        node = parse_geometry(wkt)
        assert parse_geometry(to_wkt(node)) == node


class TestToShapely:
    """Tests for the Shapely bridge."""

    def test_polygon(self):
        geometry = to_shapely(parse_geometry("POLYGON ((0 0, 4 0, 4 4, 0 4, 0 0))"))
        assert isinstance(geometry, Polygon)
        assert geometry.area == 16

    def test_collection(self):
        geometry = to_shapely(parse_geometry("GEOMETRYCOLLECTION (POINT (1 2), POINT (3 4))"))
        assert isinstance(geometry, GeometryCollection)
        assert len(geometry.geoms) == 2

    def test_invalid_polygon_is_returned_with_warning(self, caplog):
        bowtie = parse_geometry("POLYGON ((0 0, 1 1, 1 0, 0 1, 0 0))")
        with caplog.at_level("WARNING", logger="geowkter.core.parsers.geometry"):
            geometry = to_shapely(bowtie)
        assert not geometry.is_valid
        assert "not a valid geometry" in caplog.text
