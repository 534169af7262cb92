from unittest import TestCase

from geotext.codes.coords import EWKB_FLAG_M, EWKB_FLAG_SRID, EWKB_FLAG_Z, Coords
from geotext.codes.geom import Geom
from geotext.utils.exceptions import FormatException


class TestCoords(TestCase):
    def test_select(self):
        self.assertIs(Coords.select(is_3d=False, is_measured=False), Coords.XY)
        self.assertIs(Coords.select(is_3d=True, is_measured=False), Coords.XYZ)
        self.assertIs(Coords.select(is_3d=False, is_measured=True), Coords.XYM)
        self.assertIs(Coords.select(is_3d=True, is_measured=True), Coords.XYZM)

    def test_attributes(self):
        self.assertEqual(Coords.XYM.coordinate_dimension, 3)
        self.assertEqual(Coords.XYM.spatial_dimension, 2)
        self.assertEqual(Coords.XYM.index_for_m, 2)
        self.assertIsNone(Coords.XYM.index_for_z)
        self.assertEqual(Coords.XYZM.index_for_m, 3)
        self.assertIsNone(Coords.XY.wkt_specifier)
        self.assertEqual(Coords.XYZM.wkt_specifier, "ZM")

    def test_from_dimension(self):
        self.assertIs(Coords.from_dimension(2), Coords.XY)
        self.assertIs(Coords.from_dimension(3), Coords.XYZ)
        self.assertIs(Coords.from_dimension(3, xyz_for_dim3=False), Coords.XYM)
        self.assertIs(Coords.from_dimension(4), Coords.XYZM)

    def test_from_dimension_invalid(self):
        with self.assertRaises(FormatException):
            Coords.from_dimension(5)

    def test_from_wkb_id(self):
        """ids of any geometry type in a group resolve to the group's coordinate type"""
        self.assertIs(Coords.from_wkb_id(1), Coords.XY)
        self.assertIs(Coords.from_wkb_id(1003), Coords.XYZ)
        self.assertIs(Coords.from_wkb_id(2007), Coords.XYM)
        self.assertIs(Coords.from_wkb_id(3002), Coords.XYZM)

    def test_from_ewkb_id(self):
        self.assertIs(Coords.from_wkb_id(EWKB_FLAG_Z | 1), Coords.XYZ)
        self.assertIs(Coords.from_wkb_id(EWKB_FLAG_M | 1), Coords.XYM)
        self.assertIs(
            Coords.from_wkb_id(EWKB_FLAG_Z | EWKB_FLAG_M | EWKB_FLAG_SRID | 3),
            Coords.XYZM,
        )

    def test_from_wkb_id_invalid(self):
        with self.assertRaises(FormatException):
            Coords.from_wkb_id(4001)


class TestGeom(TestCase):
    def test_predicates(self):
        self.assertTrue(Geom.GEOMETRY_COLLECTION.is_collection)
        self.assertFalse(Geom.MULTI_POINT.is_collection)
        self.assertTrue(Geom.MULTI_POLYGON.is_multi)
        self.assertFalse(Geom.POLYGON.is_multi)

    def test_wkb_id(self):
        self.assertEqual(Geom.POINT.wkb_id(Coords.XY), 1)
        self.assertEqual(Geom.POLYGON.wkb_id(Coords.XYZ), 1003)
        self.assertEqual(Geom.MULTI_LINE_STRING.wkb_id(Coords.XYZM), 3005)

    def test_extended_wkb_id(self):
        self.assertEqual(Geom.POINT.extended_wkb_id(Coords.XY), 1)
        self.assertEqual(
            Geom.LINE_STRING.extended_wkb_id(Coords.XYZ, has_srid=True),
            EWKB_FLAG_Z | EWKB_FLAG_SRID | 2,
        )
        self.assertEqual(
            Geom.POINT.extended_wkb_id(Coords.XYZM), EWKB_FLAG_Z | EWKB_FLAG_M | 1
        )

    def test_from_wkb_id(self):
        for geom in Geom:
            for coord_type in Coords:
                self.assertIs(Geom.from_wkb_id(geom.wkb_id(coord_type)), geom)
                self.assertIs(
                    Geom.from_wkb_id(geom.extended_wkb_id(coord_type)), geom
                )

    def test_from_wkb_id_invalid(self):
        with self.assertRaises(FormatException):
            Geom.from_wkb_id(8)

    def test_from_names(self):
        self.assertIs(Geom.from_wkt_name("linestring"), Geom.LINE_STRING)
        self.assertIs(Geom.from_wkt_name("GEOMETRYCOLLECTION"), Geom.GEOMETRY_COLLECTION)
        self.assertIs(Geom.from_geojson_name("MultiPolygon"), Geom.MULTI_POLYGON)

    def test_from_names_invalid(self):
        with self.assertRaises(FormatException):
            Geom.from_wkt_name("CIRCLE")
        with self.assertRaises(FormatException):
            Geom.from_geojson_name("multipolygon")
