from __future__ import annotations

from enum import Enum

from geotext.codes.coords import (
    EWKB_FLAG_M,
    EWKB_FLAG_SRID,
    EWKB_FLAG_Z,
    WKB_ID_MASK,
    Coords,
)
from geotext.utils.exceptions import FormatException


class Geom(Enum):
    """
    Enumeration of geometry types.

    The types are based on the OGC Simple Feature Access standard and are compatible with WKT,
    WKB and GeoJSON geometry types.

    Attributes:
        wkt_name: The WKT keyword, ie. "POINT"
        geojson_name: The GeoJSON type name, ie. "Point"
        wkb_id_2d: The WKB type id for 2D geometries of this type (1 to 7)

    Examples:
        >>> from geotext.codes.coords import Coords
        >>> from geotext.codes.geom import Geom
        >>> Geom.POLYGON.wkt_name
        'POLYGON'
        >>> Geom.POLYGON.wkb_id(Coords.XYZ)
        1003
        >>> Geom.from_wkb_id(3006)
        <Geom.MULTI_POLYGON: ...>
    """

    POINT = ("POINT", "Point", 1)
    LINE_STRING = ("LINESTRING", "LineString", 2)
    POLYGON = ("POLYGON", "Polygon", 3)
    MULTI_POINT = ("MULTIPOINT", "MultiPoint", 4)
    MULTI_LINE_STRING = ("MULTILINESTRING", "MultiLineString", 5)
    MULTI_POLYGON = ("MULTIPOLYGON", "MultiPolygon", 6)
    GEOMETRY_COLLECTION = ("GEOMETRYCOLLECTION", "GeometryCollection", 7)

    def __init__(self, wkt_name: str, geojson_name: str, wkb_id_2d: int):
        self.wkt_name = wkt_name
        self.geojson_name = geojson_name
        self.wkb_id_2d = wkb_id_2d

    @property
    def is_collection(self) -> bool:
        """True for a collection of other geometries."""
        return self is Geom.GEOMETRY_COLLECTION

    @property
    def is_multi(self) -> bool:
        """True for multi geometries (multi point, multi line string and multi polygon)."""
        return self in (Geom.MULTI_POINT, Geom.MULTI_LINE_STRING, Geom.MULTI_POLYGON)

    def wkb_id(self, coord_type: Coords) -> int:
        """The WKB type id for this geometry type with the given coordinate type, ie. 1001 for POINT Z."""
        return coord_type.wkb_id + self.wkb_id_2d

    def extended_wkb_id(self, coord_type: Coords, has_srid: bool = False) -> int:
        """
        The Extended WKB (EWKB) type id for this geometry type.

        The 2D type id is combined with dimensionality flags 0x80000000 (z) and 0x40000000 (m),
        and with the flag 0x20000000 when an SRID follows the type id.

        Args:
            coord_type: The coordinate type of the geometry
            has_srid: If True, the SRID flag is set. Default is False.

        Returns:
            The EWKB type id
        """
        id = self.wkb_id_2d
        if coord_type.is_3d:
            id |= EWKB_FLAG_Z
        if coord_type.is_measured:
            id |= EWKB_FLAG_M
        if has_srid:
            id |= EWKB_FLAG_SRID
        return id

    @classmethod
    def from_wkb_id(cls, id: int) -> Geom:
        """
        Resolve the geometry type from a WKB or Extended WKB (EWKB) type id.

        Raises:
            FormatException: If the id does not identify a geometry type
        """
        kind = (id & WKB_ID_MASK) % 1000
        for geom in cls:
            if geom.wkb_id_2d == kind:
                return geom
        raise FormatException(f"invalid WKB id {id}")

    @classmethod
    def from_wkt_name(cls, name: str) -> Geom:
        """
        Resolve the geometry type from a WKT keyword, ie. "LINESTRING" (case insensitive).

        Raises:
            FormatException: If the keyword is unknown
        """
        upper = name.strip().upper()
        for geom in cls:
            if geom.wkt_name == upper:
                return geom
        raise FormatException(f"unknown WKT geometry type {name}")

    @classmethod
    def from_geojson_name(cls, name: str) -> Geom:
        """
        Resolve the geometry type from a GeoJSON type name, ie. "LineString".

        Raises:
            FormatException: If the name is unknown
        """
        for geom in cls:
            if geom.geojson_name == name:
                return geom
        raise FormatException(f"unknown GeoJSON geometry type {name}")
