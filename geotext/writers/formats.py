from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, TextIO

from pyproj import CRS

from geotext.writers.base_writer import BaseTextWriter
from geotext.writers.default_writer import DefaultTextWriter, GeoJsonConf
from geotext.writers.geojson_writer import GeoJsonTextWriter
from geotext.writers.wkt_writer import WktLikeTextWriter, WktTextWriter

log = logging.getLogger(__name__)


class TextFormat(Enum):
    """
    Enumeration of the text formats a writer can produce.

    Values:
        DEFAULT: Coordinates as nested arrays aligned with the GeoJSON "coordinates" member
        GEOJSON: GeoJSON geometries, features and feature collections
        WKT_LIKE: Coordinates as nested round bracket arrays aligned with WKT coordinate text
        WKT: Well-known text geometries
    """

    DEFAULT = "default"
    GEOJSON = "geojson"
    WKT_LIKE = "wkt_like"
    WKT = "wkt"


def text_writer(
    fmt: TextFormat = TextFormat.DEFAULT,
    buffer: Optional[TextIO] = None,
    decimals: Optional[int] = None,
    crs: Optional[CRS] = None,
    conf: Optional[GeoJsonConf] = None,
) -> BaseTextWriter:
    """
    Create a new text writer for the given format.

    Args:
        fmt: The text format to write. Default is TextFormat.DEFAULT.
        buffer: An optional text stream to append into
        decimals: The number of fractional digits written for coordinate values
        crs: An optional CRS of the written coordinates (default and GeoJSON formats only)
        conf: Optional GeoJSON configuration (default and GeoJSON formats only)

    Returns:
        A new writer

    Raises:
        TypeError: If the format is not a TextFormat

    Examples:
        >>> from geotext.constructs.position import Position
        >>> writer = text_writer(TextFormat.WKT, decimals=1)
        >>> writer.point(Position(10.123, 20.25))
        >>> writer.to_text()
        'POINT(10.1 20.3)'
    """
    log.debug(f"creating a {fmt} writer with decimals={decimals}")

    if fmt is TextFormat.DEFAULT:
        return DefaultTextWriter(buffer=buffer, decimals=decimals, crs=crs, conf=conf)
    elif fmt is TextFormat.GEOJSON:
        return GeoJsonTextWriter(buffer=buffer, decimals=decimals, crs=crs, conf=conf)
    elif fmt is TextFormat.WKT_LIKE:
        if crs is not None or conf is not None:
            log.debug("crs and conf are ignored by the WKT like format")
        return WktLikeTextWriter(buffer=buffer, decimals=decimals)
    elif fmt is TextFormat.WKT:
        if crs is not None or conf is not None:
            log.debug("crs and conf are ignored by the WKT format")
        return WktTextWriter(buffer=buffer, decimals=decimals)
    else:
        raise TypeError(f"unsupported text format: {fmt}")
