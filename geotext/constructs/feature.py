from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

import pandas as pd
from geopandas import GeoDataFrame
from pyproj import CRS
from shapely.geometry.base import BaseGeometry

from geotext.constructs.box import Box
from geotext.constructs.geometry import write_geometry
from geotext.constructs.properties import (
    PropertyValue,
    normalize_properties,
    to_property_value,
)
from geotext.writers.default_writer import GeoJsonConf
from geotext.writers.geojson_writer import GeoJsonTextWriter
from geotext.writers.writer_interface import FeatureWriter, GeometryWriter

log = logging.getLogger(__name__)


class Feature:
    """
    A geospatial entity with an optional identifier, a geometry and properties.

    Properties are converted once, when the feature is created, into values that can be
    written as JSON (see geotext.constructs.properties.to_property_value).

    Attributes:
        id: An optional identifier, an integer or a string
        geometry: An optional Shapely geometry
        properties: The properties of the feature
        bbox: An optional bounding box of the feature
        custom: Optional foreign members written alongside the standard members

    Examples:
        >>> from shapely.geometry import Point
        >>> from geotext.constructs.feature import Feature
        >>>
        >>> feature = Feature(id=1, geometry=Point(1, 2), properties={"name": "a"})
        >>> feature.to_geojson()
        '{"type":"Feature","id":1,"geometry":{"type":"Point","coordinates":[1,2]},"properties":{"name":"a"}}'
    """

    def __init__(
        self,
        id: Optional[Union[int, str]] = None,
        geometry: Optional[BaseGeometry] = None,
        properties: Optional[Mapping[str, Any]] = None,
        bbox: Optional[Box] = None,
        custom: Optional[Mapping[str, Any]] = None,
    ):
        self.id = id
        self.geometry = geometry
        self.properties: Dict[str, PropertyValue] = normalize_properties(properties)
        self.bbox = bbox
        self.custom = normalize_properties(custom) if custom is not None else None

    def __repr__(self):
        return f"Feature(id={self.id!r}, geometry={self.geometry}, properties={self.properties})"

    def _write_geometry(self, writer: GeometryWriter):
        write_geometry(writer, self.geometry)

    def write_features(self, writer: FeatureWriter):
        """Write this feature into a feature writer."""
        writer.feature(
            id=self.id,
            geometry=self._write_geometry if self.geometry is not None else None,
            properties=self.properties,
            bounds=self.bbox,
            custom=self.custom,
        )

    def to_geojson(
        self,
        decimals: Optional[int] = None,
        conf: Optional[GeoJsonConf] = None,
    ) -> str:
        """
        Write this feature as GeoJSON text.

        Args:
            decimals: The number of fractional digits written for coordinate values
            conf: Optional GeoJSON configuration

        Returns:
            The feature as a GeoJSON Feature object
        """
        writer = GeoJsonTextWriter(decimals=decimals, conf=conf)
        self.write_features(writer)
        return writer.to_text()


class FeatureCollection:
    """
    A collection of features, written as a GeoJSON FeatureCollection.

    Attributes:
        features: The features of the collection
        bbox: An optional bounding box of the collection
        custom: Optional foreign members written alongside the standard members
        crs: An optional CRS of the feature geometries

    Examples:
        >>> import geopandas as gpd
        >>> from shapely.geometry import Point
        >>>
        >>> frame = gpd.GeoDataFrame(
        ...     {"name": ["a", "b"]},
        ...     geometry=[Point(1, 2), Point(3, 4)],
        ...     crs="OGC:CRS84",
        ... )
        >>> collection = FeatureCollection.from_geo_dataframe(frame)
        >>> len(collection)
        2
    """

    def __init__(
        self,
        features: Iterable[Feature],
        bbox: Optional[Box] = None,
        custom: Optional[Mapping[str, Any]] = None,
        crs: Optional[CRS] = None,
    ):
        self.features: List[Feature] = list(features)
        self.bbox = bbox
        self.custom = normalize_properties(custom) if custom is not None else None
        self.crs = crs

    def __len__(self):
        return len(self.features)

    def __getitem__(self, i) -> Feature:
        return self.features[i]

    @classmethod
    def from_geo_dataframe(
        cls,
        frame: GeoDataFrame,
        id_column: Optional[str] = None,
        bbox: bool = False,
    ) -> FeatureCollection:
        """
        Create a feature collection from a GeoPandas GeoDataFrame.

        Each row becomes a feature with the row geometry and the other columns as properties.

        Args:
            frame: The GeoDataFrame to read
            id_column: An optional column holding feature identifiers. If None, the frame
                index is used and every column other than the geometry becomes a property.
            bbox: If True, the bounding box of the collection and of each non-empty geometry
                is computed. Default is False.

        Returns:
            A new FeatureCollection with the CRS of the frame
        """
        if id_column is not None and id_column not in frame.columns:
            raise ValueError(f"id column {id_column} not found in the frame")

        geometry_column = frame.geometry.name
        property_columns = [
            c for c in frame.columns if c != geometry_column and c != id_column
        ]
        ids = frame[id_column] if id_column is not None else frame.index

        features = []
        for id, (_, row) in zip(ids, frame.iterrows()):
            geom = row[geometry_column]
            if geom is None or (not isinstance(geom, BaseGeometry) and pd.isna(geom)):
                geom = None
            feature_bbox = None
            if bbox and geom is not None and not geom.is_empty:
                feature_bbox = Box.from_geometry(geom)
            features.append(
                Feature(
                    id=_feature_id(id),
                    geometry=geom,
                    properties={c: row[c] for c in property_columns},
                    bbox=feature_bbox,
                )
            )

        collection_bbox = None
        if bbox and len(frame) > 0 and not frame.geometry.is_empty.all():
            min_x, min_y, max_x, max_y = frame.total_bounds
            collection_bbox = Box(
                float(min_x), float(min_y), float(max_x), float(max_y)
            )

        log.debug(f"read {len(features)} features from a frame")
        return cls(features, bbox=collection_bbox, crs=frame.crs)

    def write_features(self, writer: FeatureWriter):
        """Write this collection into a feature writer."""

        def write_all(fw: FeatureWriter):
            for feature in self.features:
                feature.write_features(fw)

        writer.feature_collection(
            write_all,
            count=len(self.features),
            bounds=self.bbox,
            custom=self.custom,
        )

    def to_geojson(
        self,
        decimals: Optional[int] = None,
        conf: Optional[GeoJsonConf] = None,
    ) -> str:
        """
        Write this collection as GeoJSON text.

        The CRS of the collection decides the axis order of coordinates (see GeoJsonConf).

        Args:
            decimals: The number of fractional digits written for coordinate values
            conf: Optional GeoJSON configuration

        Returns:
            The collection as a GeoJSON FeatureCollection object
        """
        writer = GeoJsonTextWriter(decimals=decimals, crs=self.crs, conf=conf)
        self.write_features(writer)
        return writer.to_text()


def _feature_id(value: Any) -> Optional[Union[int, str]]:
    id = to_property_value(value)
    if id is None or isinstance(id, (int, str)):
        return id
    if isinstance(id, float) and id.is_integer():
        return int(id)
    return str(id)
