from unittest import TestCase

import geopandas as gpd
import numpy as np
from shapely.geometry import LineString, Point

from geotext.constructs.box import Box
from geotext.constructs.feature import Feature, FeatureCollection
from geotext.writers.default_writer import GeoJsonConf


class TestFeature(TestCase):
    def test_to_geojson(self):
        feature = Feature(
            id="1", geometry=Point(10.123, 20.25), properties={"foo": np.int64(100)}
        )
        self.assertEqual(
            feature.to_geojson(),
            '{"type":"Feature","id":"1",'
            '"geometry":{"type":"Point","coordinates":[10.123,20.25]},'
            '"properties":{"foo":100}}',
        )

    def test_properties_are_normalized_on_creation(self):
        feature = Feature(properties={"a": (1, np.float64("nan")), 2: "b"})
        self.assertEqual(feature.properties, {"a": [1, None], "2": "b"})

    def test_empty_geometry_is_null(self):
        feature = Feature(id=7, geometry=Point())
        self.assertEqual(
            feature.to_geojson(),
            '{"type":"Feature","id":7,"geometry":null,"properties":{}}',
        )

    def test_bbox_and_custom(self):
        feature = Feature(
            geometry=Point(1, 2),
            bbox=Box(1, 2, 1, 2),
            custom={"title": "x"},
        )
        self.assertEqual(
            feature.to_geojson(decimals=0),
            '{"type":"Feature","bbox":[1,2,1,2],'
            '"geometry":{"type":"Point","coordinates":[1,2]},'
            '"properties":{},"title":"x"}',
        )
        self.assertEqual(
            feature.to_geojson(
                decimals=0, conf=GeoJsonConf(ignore_foreign_members=True)
            ),
            '{"type":"Feature","bbox":[1,2,1,2],'
            '"geometry":{"type":"Point","coordinates":[1,2]},"properties":{}}',
        )


class TestFeatureCollection(TestCase):
    def setUp(self):
        self.frame = gpd.GeoDataFrame(
            {"name": ["a", "b"], "count": [1, 2]},
            geometry=[Point(1, 2), LineString([(0, 0), (3, 4)])],
            crs="OGC:CRS84",
        )

    def test_from_geo_dataframe(self):
        collection = FeatureCollection.from_geo_dataframe(self.frame)

        self.assertEqual(len(collection), 2)
        self.assertEqual(collection[0].id, 0)
        self.assertEqual(collection[1].properties, {"name": "b", "count": 2})
        self.assertIsNone(collection.bbox)
        self.assertTrue(collection.crs.equals("OGC:CRS84"))

    def test_id_column(self):
        collection = FeatureCollection.from_geo_dataframe(self.frame, id_column="name")

        self.assertEqual([f.id for f in collection], ["a", "b"])
        self.assertEqual(collection[0].properties, {"count": 1})

    def test_missing_id_column(self):
        with self.assertRaises(ValueError):
            FeatureCollection.from_geo_dataframe(self.frame, id_column="missing")

    def test_bbox(self):
        collection = FeatureCollection.from_geo_dataframe(self.frame, bbox=True)

        self.assertEqual(collection.bbox, Box(0.0, 0.0, 3.0, 4.0))
        self.assertEqual(collection[1].bbox, Box(0.0, 0.0, 3.0, 4.0))

    def test_to_geojson(self):
        collection = FeatureCollection.from_geo_dataframe(
            self.frame, id_column="name"
        )
        self.assertEqual(
            collection.to_geojson(decimals=0),
            '{"type":"FeatureCollection","features":['
            '{"type":"Feature","id":"a","geometry":{"type":"Point","coordinates":[1,2]},'
            '"properties":{"count":1}},'
            '{"type":"Feature","id":"b","geometry":{"type":"LineString","coordinates":[[0,0],[3,4]]},'
            '"properties":{"count":2}}]}',
        )

    def test_latlon_frame_writes_latitude_first(self):
        frame = self.frame.set_crs("EPSG:4326", allow_override=True)
        collection = FeatureCollection.from_geo_dataframe(frame.iloc[[0]])
        self.assertIn('"coordinates":[2,1]', collection.to_geojson(decimals=0))

    def test_custom_members(self):
        collection = FeatureCollection(
            [Feature(id=1)], custom={"name": "fc", "features": "x"}
        )
        self.assertEqual(
            collection.to_geojson(),
            '{"type":"FeatureCollection","features":['
            '{"type":"Feature","id":1,"geometry":null,"properties":{}}],"name":"fc"}',
        )
