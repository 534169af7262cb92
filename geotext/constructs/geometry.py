from __future__ import annotations

import logging
from typing import List, Optional

from shapely.geometry import (
    GeometryCollection,
    LinearRing,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from shapely.geometry.base import BaseGeometry

from geotext.codes.coords import Coords
from geotext.codes.geom import Geom
from geotext.constructs.box import Box
from geotext.constructs.position import Position
from geotext.writers.formats import TextFormat, text_writer
from geotext.writers.writer_interface import GeometryWriter

log = logging.getLogger(__name__)

_GEOM_BY_TYPE = {
    "Point": Geom.POINT,
    "LineString": Geom.LINE_STRING,
    "LinearRing": Geom.LINE_STRING,
    "Polygon": Geom.POLYGON,
    "MultiPoint": Geom.MULTI_POINT,
    "MultiLineString": Geom.MULTI_LINE_STRING,
    "MultiPolygon": Geom.MULTI_POLYGON,
    "GeometryCollection": Geom.GEOMETRY_COLLECTION,
}


def _chain(line: LineString) -> List[Position]:
    return [Position.from_coords(c) for c in line.coords]


def _rings(polygon: Polygon) -> List[List[Position]]:
    return [_chain(polygon.exterior)] + [_chain(ring) for ring in polygon.interiors]


def write_geometry(
    writer: GeometryWriter,
    geom: BaseGeometry,
    name: Optional[str] = None,
    bounds: Optional[Box] = None,
):
    """
    Write a Shapely geometry into a geometry writer.

    Empty geometries are written with empty_geometry. Geometries with z values are written as
    XYZ coordinates, others as XY coordinates. Geometry collections are written recursively.

    Args:
        writer: The writer to write into
        geom: The Shapely geometry to write
        name: An optional name for the geometry (when applicable, like under a feature)
        bounds: An optional bounding box written with the geometry (if the writer supports it)

    Raises:
        TypeError: If the object is not a supported Shapely geometry
    """
    if not isinstance(geom, BaseGeometry) or geom.geom_type not in _GEOM_BY_TYPE:
        raise TypeError(f"cannot write an object of type {type(geom).__name__}")

    kind = _GEOM_BY_TYPE[geom.geom_type]
    if geom.is_empty:
        writer.empty_geometry(kind, name=name)
        return

    coord_type = Coords.XYZ if geom.has_z else Coords.XY

    if isinstance(geom, Point):
        writer.geometry_with_position(
            kind,
            Position.from_point(geom),
            name=name,
            coord_type=coord_type,
            bounds=bounds,
        )
    elif isinstance(geom, (LineString, LinearRing)):
        writer.geometry_with_positions_1d(
            kind, _chain(geom), name=name, coord_type=coord_type, bounds=bounds
        )
    elif isinstance(geom, Polygon):
        writer.geometry_with_positions_2d(
            kind, _rings(geom), name=name, coord_type=coord_type, bounds=bounds
        )
    elif isinstance(geom, MultiPoint):
        writer.geometry_with_positions_1d(
            kind,
            [Position.from_point(p) for p in geom.geoms],
            name=name,
            coord_type=coord_type,
            bounds=bounds,
        )
    elif isinstance(geom, MultiLineString):
        writer.geometry_with_positions_2d(
            kind,
            [_chain(line) for line in geom.geoms],
            name=name,
            coord_type=coord_type,
            bounds=bounds,
        )
    elif isinstance(geom, MultiPolygon):
        writer.geometry_with_positions_3d(
            kind,
            [_rings(polygon) for polygon in geom.geoms],
            name=name,
            coord_type=coord_type,
            bounds=bounds,
        )
    elif isinstance(geom, GeometryCollection):
        children = list(geom.geoms)

        def write_children(gw: GeometryWriter):
            for child in children:
                write_geometry(gw, child)

        writer.geometry_collection(
            write_children,
            coord_type=coord_type,
            count=len(children),
            name=name,
            bounds=bounds,
        )


def geometry_to_text(
    geom: BaseGeometry,
    fmt: TextFormat = TextFormat.WKT,
    decimals: Optional[int] = None,
) -> str:
    """
    Write a Shapely geometry as text in the given format.

    Args:
        geom: The Shapely geometry to write
        fmt: The text format. Default is TextFormat.WKT.
        decimals: The number of fractional digits written for coordinate values

    Returns:
        The geometry as text

    Examples:
        >>> from shapely.geometry import LineString
        >>> geometry_to_text(LineString([(1, 1), (2, 2)]), TextFormat.GEOJSON)
        '{"type":"LineString","coordinates":[[1,1],[2,2]]}'
    """
    log.debug(f"writing a {geom.geom_type} geometry as {fmt}")
    writer = text_writer(fmt, decimals=decimals)
    write_geometry(writer, geom)
    return writer.to_text()
