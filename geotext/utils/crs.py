"""Coordinate Reference System (CRS) constants and helpers used by the text writers.

This module defines the standard CRS objects and the axis order rules applied when writing:
- LATLON_CRS: WGS84 geographic coordinates with the authority axis order (EPSG:4326)
- LONLAT_CRS: WGS84 geographic coordinates in longitude/latitude order (OGC:CRS84)
- XY_CRS: Web Mercator projected coordinates (EPSG:3857)
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pyproj import CRS
from pyproj.exceptions import ProjError

# WGS84 latitude/longitude coordinate system (EPSG:4326)
# The authority defines latitude as the first axis
LATLON_CRS = CRS(4326)

# WGS84 longitude/latitude coordinate system (OGC:CRS84)
# The default (and only standard) coordinate system of GeoJSON
LONLAT_CRS = CRS("OGC:CRS84")

# Web Mercator projected coordinate system (EPSG:3857)
XY_CRS = CRS(3857)


class CrsLogic(Enum):
    """
    Enumeration of rules deciding the axis order of coordinates written for a CRS.

    Values:
        AUTHORITY_BASED: Follow the axis order defined by the CRS authority, so coordinates of a
            latitude-first CRS like EPSG:4326 are written as (lat, lon)
        GEOJSON_STRICT: Always write (lon, lat) or (x, y) as required by RFC 7946
    """

    AUTHORITY_BASED = "authority_based"
    GEOJSON_STRICT = "geojson_strict"


def to_crs(crs: Any) -> CRS:
    """
    Convert any input accepted by pyproj into a pyproj CRS.

    Args:
        crs: A pyproj.CRS object, an EPSG code as a string (e.g., 'EPSG:4326'), an integer
            EPSG code, or any CRS format that pyproj.CRS() accepts

    Returns:
        The parsed CRS

    Raises:
        ValueError: If the input cannot be parsed into a valid CRS
    """
    try:
        return CRS.from_user_input(crs)
    except ProjError as e:
        raise ValueError(f"Could not parse crs: {crs}") from e


def swaps_xy(crs: CRS, logic: CrsLogic = CrsLogic.AUTHORITY_BASED) -> bool:
    """
    Check whether x and y must be swapped when writing coordinates in the given CRS.

    Positions always hold x (or longitude) first. When the authority of a CRS defines a
    northing or latitude as the first axis, the authority based logic writes y first.

    Args:
        crs: The coordinate reference system of the written data
        logic: The axis order logic to apply. Default is CrsLogic.AUTHORITY_BASED.

    Returns:
        True if y should be written before x

    Examples:
        >>> swaps_xy(LATLON_CRS)
        True
        >>> swaps_xy(LATLON_CRS, CrsLogic.GEOJSON_STRICT)
        False
        >>> swaps_xy(XY_CRS)
        False
    """
    if logic is CrsLogic.GEOJSON_STRICT:
        return False
    axes = crs.axis_info
    if not axes:
        return False
    return axes[0].direction.lower() in ("north", "south")


def is_default_geojson_crs(crs: CRS) -> bool:
    """True if the CRS is WGS84 with the longitude/latitude axis order."""
    return crs.equals(LONLAT_CRS)


def crs_id(crs: CRS) -> str:
    """
    Get a short identifier for the CRS, like "EPSG:3857".

    Falls back to the pyproj string representation when the CRS has no authority code.
    """
    authority = crs.to_authority()
    if authority is None:
        return crs.to_string()
    return ":".join(authority)
