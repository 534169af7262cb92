from __future__ import annotations

import json
import math
from numbers import Integral, Real
from typing import Any, Dict, Iterable, Mapping, Optional, TextIO, Union

from pyproj import CRS

from geotext.codes.coords import Coords
from geotext.codes.geom import Geom
from geotext.constructs.box import Box
from geotext.utils.crs import crs_id, is_default_geojson_crs
from geotext.utils.keys import (
    BBOX_KEY,
    COORDINATES_KEY,
    CRS_KEY,
    DEFAULT_GEOMETRY_KEY,
    FEATURES_KEY,
    GEOMETRIES_KEY,
    ID_KEY,
    PROPERTIES_KEY,
    RESERVED_KEYS,
)
from geotext.writers.base_writer import Container
from geotext.writers.default_writer import DefaultTextWriter, GeoJsonConf
from geotext.writers.writer_interface import (
    FeatureWriter,
    WriteFeatures,
    WriteGeometries,
)


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


class GeoJsonTextWriter(DefaultTextWriter, FeatureWriter):
    """
    A writer for GeoJSON text, supporting geometries, features and feature collections.

    Geometries are written as GeoJSON geometry objects with the "coordinates" (or "geometries")
    member written by the default format rules. Features and feature collections are written
    with their "id", "bbox", "geometry" and "properties" members and any foreign members.

    Under a feature, an empty geometry is written as null. Elsewhere it is written as a
    geometry object with an empty coordinate array.

    Examples:
        >>> from geotext.constructs.position import Position
        >>> writer = GeoJsonTextWriter()
        >>> writer.line_string([Position(1, 1), Position(2, 2)])
        >>> writer.to_text()
        '{"type":"LineString","coordinates":[[1,1],[2,2]]}'

    Args:
        buffer: An optional text stream to append into
        decimals: The number of fractional digits written for coordinate values
        crs: An optional CRS of the written coordinates, used for the axis order and the
            "crs" member of feature collections
        conf: Optional GeoJSON configuration
    """

    def __init__(
        self,
        buffer: Optional[TextIO] = None,
        decimals: Optional[int] = None,
        crs: Optional[CRS] = None,
        conf: Optional[GeoJsonConf] = None,
    ):
        super().__init__(buffer=buffer, decimals=decimals, crs=crs, conf=conf)

    def _sub_writer(self) -> GeoJsonTextWriter:
        return GeoJsonTextWriter(
            buffer=self._buffer,
            decimals=self.decimals,
            crs=self.crs,
            conf=self.conf,
        )

    def _write_bbox(self, bounds: Optional[Box]):
        if bounds is not None:
            self._buffer.write(f',"{BBOX_KEY}":[')
            self._sub_writer().bounds(bounds)
            self._buffer.write("]")

    def _skips_member(self, name: Optional[str]) -> bool:
        return (
            self.conf.ignore_foreign_members
            and self._at_feature
            and (name or DEFAULT_GEOMETRY_KEY) != DEFAULT_GEOMETRY_KEY
        )

    def _write_member_name(self, name: Optional[str]):
        self._buffer.write(_quote(name or DEFAULT_GEOMETRY_KEY))
        self._buffer.write(":")

    # geometries -------------------------------------------------------------

    def begin_geometry(
        self,
        kind: Geom,
        name: Optional[str] = None,
        coord_type: Optional[Coords] = None,
        bounds: Optional[Box] = None,
    ) -> bool:
        if self._skips_member(name):
            return False
        self._next_item()
        if self._at_feature:
            self._write_member_name(name)
        self._start_container(Container.GEOMETRY)
        self._start_coord_type(coord_type)

        write = self._buffer.write
        write('{"type":"')
        write(kind.geojson_name)
        write('"')
        self._write_bbox(bounds)
        content_key = GEOMETRIES_KEY if kind.is_collection else COORDINATES_KEY
        write(f',"{content_key}":')
        return True

    def end_geometry(self):
        self._buffer.write("}")
        self._end_coord_type()
        self._end_container()

    def empty_geometry(self, kind: Geom, name: Optional[str] = None):
        if self._skips_member(name):
            return
        self._next_item()
        write = self._buffer.write
        if self._at_feature:
            self._write_member_name(name)
            write("null")
        else:
            content_key = GEOMETRIES_KEY if kind.is_collection else COORDINATES_KEY
            write('{"type":"')
            write(kind.geojson_name)
            write(f'","{content_key}":[]}}')

    # features ---------------------------------------------------------------

    def feature_collection(
        self,
        features: WriteFeatures,
        count: Optional[int] = None,
        bounds: Optional[Box] = None,
        custom: Optional[Dict[str, Any]] = None,
    ):
        if self._at_feature_collection:
            return
        self._next_item()
        self._start_container(Container.FEATURE_COLLECTION)

        write = self._buffer.write
        write('{"type":"FeatureCollection"')
        if (
            self.crs is not None
            and self.conf.print_non_default_crs
            and not is_default_geojson_crs(self.crs)
        ):
            write(f',"{CRS_KEY}":')
            write(_quote(crs_id(self.crs)))
        self._write_bbox(bounds)
        write(f',"{FEATURES_KEY}":')
        self.begin_object_array(count=count)
        features(self)
        self.end_object_array()
        if custom is not None and not self.conf.ignore_foreign_members:
            self._print_custom(custom)
        write("}")

        self._end_container()

    def feature(
        self,
        id: Optional[Union[int, str]] = None,
        geometry: Optional[WriteGeometries] = None,
        properties: Optional[Dict[str, Any]] = None,
        bounds: Optional[Box] = None,
        custom: Optional[Dict[str, Any]] = None,
    ):
        self._next_item()
        self._start_container(Container.FEATURE)

        write = self._buffer.write
        write('{"type":"Feature"')
        if id is not None:
            write(f',"{ID_KEY}":')
            if isinstance(id, int) and not isinstance(id, bool):
                write(str(id))
            else:
                write(_quote(str(id)))
        # members below are all preceded by a separator
        self._mark_item()
        self._write_bbox(bounds)
        if geometry is not None:
            geometry(self)
        else:
            write(f',"{DEFAULT_GEOMETRY_KEY}":null')
        self._print_map_entry(PROPERTIES_KEY, properties or {})
        if custom is not None and not self.conf.ignore_foreign_members:
            self._print_custom(custom)
        write("}")

        self._end_container()

    # properties -------------------------------------------------------------

    def _print_custom(self, custom: Mapping[str, Any]):
        for name, value in custom.items():
            if name in RESERVED_KEYS or (self._at_feature and name == ID_KEY):
                continue
            self._mark_item()
            self._print_map_entry(name, value)

    def _print_map_entry(self, name: str, value: Any):
        self._next_item()
        self._buffer.write(_quote(str(name)))
        self._buffer.write(":")
        self._print_any(value)

    def _print_array_item(self, value: Any):
        self._next_item()
        self._print_any(value)

    def _print_any(self, value: Any):
        if isinstance(value, Mapping):
            self._print_map(value)
        elif isinstance(value, (list, tuple)):
            self._print_array(value)
        else:
            self._print_value(value)

    def _print_map(self, values: Mapping[str, Any]):
        self._start_container(Container.PROPERTY_MAP)
        self._buffer.write("{")
        for name, value in values.items():
            self._print_map_entry(name, value)
        self._buffer.write("}")
        self._end_container()

    def _print_array(self, values: Iterable[Any]):
        self._start_container(Container.PROPERTY_ARRAY)
        self._buffer.write("[")
        for value in values:
            self._print_array_item(value)
        self._buffer.write("]")
        self._end_container()

    def _print_value(self, value: Any):
        write = self._buffer.write
        if value is None:
            write("null")
        elif isinstance(value, bool):
            write("true" if value else "false")
        elif isinstance(value, Integral):
            write(str(int(value)))
        elif isinstance(value, Real):
            value = float(value)
            write(str(value) if math.isfinite(value) else "null")
        else:
            write(_quote(str(value)))
