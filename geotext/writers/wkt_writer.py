from __future__ import annotations

from typing import Optional

from geotext.codes.coords import Coords
from geotext.codes.geom import Geom
from geotext.constructs.box import Box
from geotext.writers.base_writer import BaseTextWriter, Container


class WktLikeTextWriter(BaseTextWriter):
    """
    A writer for a text format aligned with the coordinate text of WKT.

    Coordinate values are separated by spaces, points by commas and arrays are wrapped in
    round brackets. Geometry keywords are not written and a bounding box is written as a
    pair of min and max points, so this format is not compatible with WKT for bounding boxes.

    Examples:
        * position (x, y): `10.1 20.2`
        * position (x, y, z, m): `10.1 20.2 30.3 40.4`
        * bounds (min-x, min-y, max-x, max-y): `10.1 10.1,20.2 20.2`
        * point: `10.1 20.2`
        * line string: `10.1 10.1,20.2 20.2,30.3 30.3`
        * polygon: `(35 10,45 45,15 40,10 20,35 10)`
    """

    open_bracket = "("
    close_bracket = ")"
    delimiter = " "

    def _brackets_point(self) -> bool:
        return not self._at_root_or_at_coord_array


class WktTextWriter(WktLikeTextWriter):
    """
    A writer for the Well-known text (WKT) format.

    Each geometry starts with its keyword, followed by the dimensionality specifier when
    the coordinate type has one. A bounding box has no WKT representation, so it is written
    as a closed polygon of 5 points with min and max at the corners. The two other corners get
    the midpoint of the z and m ranges, computed with true division, so without decimals an
    integer range is written with a float midpoint (`2.0` between `1` and `3`).

    Examples:
        * point: `POINT(10.1 20.2)`
        * point with z: `POINT Z(10.1 20.2 30.3)`
        * line string: `LINESTRING(10.1 10.1,20.2 20.2,30.3 30.3)`
        * polygon: `POLYGON((35 10,45 45,15 40,10 20,35 10))`
        * empty geometry: `POINT EMPTY`
        * bounds (min-x, min-y, max-x, max-y): `POLYGON((10.1 10.1,20.2 10.1,20.2 20.2,10.1 20.2,10.1 10.1))`
        * bounds with z (0, 0, 10, 10, min-z 1, max-z 3): `POLYGON Z((0 0 1,10 0 2.0,10 10 3,0 10 2.0,0 0 1))`
    """

    def begin_geometry(
        self,
        kind: Geom,
        name: Optional[str] = None,
        coord_type: Optional[Coords] = None,
        bounds: Optional[Box] = None,
    ) -> bool:
        self._next_item()
        self._start_container(Container.GEOMETRY)
        self._start_coord_type(coord_type)

        self._buffer.write(kind.wkt_name)
        if coord_type is not None and coord_type.wkt_specifier is not None:
            self._buffer.write(" ")
            self._buffer.write(coord_type.wkt_specifier)
        return True

    def end_geometry(self):
        self._end_coord_type()
        self._end_container()

    def empty_geometry(self, kind: Geom, name: Optional[str] = None):
        self._next_item()
        self._buffer.write(kind.wkt_name)
        self._buffer.write(" EMPTY")

    def coord_bounds(
        self,
        min_x: float,
        min_y: float,
        max_x: float,
        max_y: float,
        min_z: Optional[float] = None,
        min_m: Optional[float] = None,
        max_z: Optional[float] = None,
        max_m: Optional[float] = None,
    ):
        has_z = min_z is not None and max_z is not None
        has_m = min_m is not None and max_m is not None
        mid_z = (min_z + max_z) / 2 if has_z else None
        mid_m = (min_m + max_m) / 2 if has_m else None

        self.begin_geometry(Geom.POLYGON, coord_type=Coords.select(has_z, has_m))
        self.begin_coord_array()
        self.begin_coord_array()
        self.coord_point(min_x, min_y, min_z, min_m)
        self.coord_point(max_x, min_y, mid_z, mid_m)
        self.coord_point(max_x, max_y, max_z, max_m)
        self.coord_point(min_x, max_y, mid_z, mid_m)
        self.coord_point(min_x, min_y, min_z, min_m)
        self.end_coord_array()
        self.end_coord_array()
        self.end_geometry()
