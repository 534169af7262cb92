from unittest import TestCase

from shapely.geometry import LineString, Point

from geotext.codes.coords import Coords
from geotext.constructs.box import Box
from geotext.constructs.position import Position, series_coord_type
from geotext.utils.exceptions import FormatException
from geotext.writers.default_writer import DefaultTextWriter


class TestPosition(TestCase):
    def test_coord_type(self):
        self.assertIs(Position(1, 2).coord_type, Coords.XY)
        self.assertIs(Position(1, 2, 3).coord_type, Coords.XYZ)
        self.assertIs(Position(1, 2, m=3).coord_type, Coords.XYM)
        self.assertIs(Position(1, 2, 3, 4).coord_type, Coords.XYZM)

    def test_from_coords(self):
        self.assertEqual(Position.from_coords([1, 2, 3]), Position(1, 2, 3))
        self.assertEqual(Position.from_coords([1, 2, 3], Coords.XYM), Position(1, 2, m=3))
        self.assertEqual(Position.from_coords([1, 2, 3, 4]), Position(1, 2, 3, 4))
        with self.assertRaises(FormatException):
            Position.from_coords([1])

    def test_values(self):
        self.assertEqual(Position(1, 2, m=4).values, (1, 2, 4))

    def test_point_conversion(self):
        pos = Position.from_point(Point(1, 2, 3))
        self.assertEqual(pos, Position(1.0, 2.0, 3.0))
        self.assertTrue(pos.geom.equals(Point(1, 2, 3)))

    def test_write_to(self):
        writer = DefaultTextWriter()
        Position(1, 2).write_to(writer)
        self.assertEqual(writer.to_text(), "1,2")

    def test_series_coord_type(self):
        self.assertIs(series_coord_type([Position(1, 2), Position(3, 4)]), Coords.XY)
        self.assertIsNone(series_coord_type([Position(1, 2), Position(3, 4, 5)]))
        self.assertIsNone(series_coord_type([]))


class TestBox(TestCase):
    def test_from_positions(self):
        box = Box.from_positions([Position(1, 5, 3), Position(4, 2, 1)])
        self.assertEqual(box, Box(1, 2, 4, 5, min_z=1, max_z=3))
        self.assertIs(box.coord_type, Coords.XYZ)
        self.assertEqual(box.min, Position(1, 2, 1))

    def test_from_positions_empty(self):
        with self.assertRaises(ValueError):
            Box.from_positions([])

    def test_from_geometry(self):
        box = Box.from_geometry(LineString([(0, 0), (3, 4)]))
        self.assertEqual(box, Box(0, 0, 3, 4))
        with self.assertRaises(ValueError):
            Box.from_geometry(LineString())

    def test_write_to(self):
        writer = DefaultTextWriter()
        Box(1, 2, 3, 4, min_m=5, max_m=6).write_to(writer)
        self.assertEqual(writer.to_text(), "1,2,0,5,3,4,0,6")
