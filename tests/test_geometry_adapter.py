from unittest import TestCase

from shapely.geometry import (
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)

from geotext.constructs.geometry import geometry_to_text, write_geometry
from geotext.writers.formats import TextFormat
from geotext.writers.wkt_writer import WktTextWriter


class TestGeometryAdapter(TestCase):
    def test_point(self):
        self.assertEqual(geometry_to_text(Point(1, 2)), "POINT(1.0 2.0)")
        self.assertEqual(geometry_to_text(Point(1, 2, 3)), "POINT Z(1.0 2.0 3.0)")

    def test_line_string(self):
        self.assertEqual(
            geometry_to_text(LineString([(1, 1), (2, 2)]), decimals=0),
            "LINESTRING(1 1,2 2)",
        )

    def test_polygon_with_hole(self):
        polygon = Polygon(
            [(0, 0), (10, 0), (10, 10), (0, 10)],
            [[(1, 1), (2, 1), (2, 2), (1, 1)]],
        )
        self.assertEqual(
            geometry_to_text(polygon, decimals=0),
            "POLYGON((0 0,10 0,10 10,0 10,0 0),(1 1,2 1,2 2,1 1))",
        )

    def test_multi_geometries(self):
        self.assertEqual(
            geometry_to_text(MultiPoint([(1, 2), (3, 4)]), decimals=0),
            "MULTIPOINT(1 2,3 4)",
        )
        self.assertEqual(
            geometry_to_text(
                MultiLineString([[(1, 1), (2, 2)], [(3, 3), (4, 4)]]), decimals=0
            ),
            "MULTILINESTRING((1 1,2 2),(3 3,4 4))",
        )
        square = Polygon([(0, 0), (1, 0), (1, 1), (0, 0)])
        self.assertEqual(
            geometry_to_text(MultiPolygon([square, square]), decimals=0),
            "MULTIPOLYGON(((0 0,1 0,1 1,0 0)),((0 0,1 0,1 1,0 0)))",
        )

    def test_geometry_collection(self):
        collection = GeometryCollection([Point(1, 2), LineString([(1, 1), (2, 2)])])
        self.assertEqual(
            geometry_to_text(collection, TextFormat.GEOJSON, decimals=0),
            '{"type":"GeometryCollection","geometries":['
            '{"type":"Point","coordinates":[1,2]},'
            '{"type":"LineString","coordinates":[[1,1],[2,2]]}]}',
        )

    def test_empty_geometries(self):
        self.assertEqual(geometry_to_text(Point()), "POINT EMPTY")
        self.assertEqual(
            geometry_to_text(LineString(), TextFormat.GEOJSON),
            '{"type":"LineString","coordinates":[]}',
        )

    def test_default_format(self):
        self.assertEqual(
            geometry_to_text(LineString([(1, 1), (2, 2)]), TextFormat.DEFAULT),
            "[[1,1],[2,2]]",
        )

    def test_unsupported_object(self):
        with self.assertRaises(TypeError):
            write_geometry(WktTextWriter(), [(1, 2)])
