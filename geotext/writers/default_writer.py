from __future__ import annotations

from typing import NamedTuple, Optional, TextIO, Tuple

from pyproj import CRS

from geotext.utils.crs import CrsLogic, swaps_xy
from geotext.utils.num import Number, format_number
from geotext.writers.base_writer import BaseTextWriter


class GeoJsonConf(NamedTuple):
    """
    Configuration options for writing GeoJSON and GeoJSON like text.

    Attributes:
        crs_logic: The axis order logic applied when a writer is given a CRS. Default is
            CrsLogic.AUTHORITY_BASED, which writes latitude first for CRSs like EPSG:4326.
        ignore_measured: If True, m values are never written. Default is False.
        ignore_foreign_members: If True, members not described by the GeoJSON specification
            (RFC 7946, section 6.1) are not written. Default is False.
        print_non_default_crs: If True, a "crs" member is written on feature collections whose
            CRS is not WGS84 lon/lat. Default is False.
        compact_nums: If True and no decimals are set, floats without a fractional part are
            written without the trailing ".0". Default is True.
    """

    crs_logic: CrsLogic = CrsLogic.AUTHORITY_BASED
    ignore_measured: bool = False
    ignore_foreign_members: bool = False
    print_non_default_crs: bool = False
    compact_nums: bool = True


class DefaultTextWriter(BaseTextWriter):
    """
    A writer for the default text format, aligned with GeoJSON coordinates.

    Coordinate values are separated by commas and arrays are wrapped in square brackets.
    Arrays are always wrapped, so the content of a geometry with arrays is written exactly
    like the "coordinates" member of a GeoJSON geometry. A single position, point geometry or
    bounding box written at the root is not wrapped.

    Examples:
        * position (x, y): `10.1,20.2`
        * position (x, y, z, m): `10.1,20.2,30.3,40.4`
        * position (x, y, m): `10.1,20.2,0,40.4` (z is written as 0 to keep m as the 4th value)
        * bounds (min-x, min-y, max-x, max-y): `10.1,10.1,20.2,20.2`
        * point: `10.1,20.2`
        * line string: `[[10.1,10.1],[20.2,20.2],[30.3,30.3]]`
        * polygon: `[[[35,10],[45,45],[15,40],[10,20],[35,10]]]`

    Args:
        buffer: An optional text stream to append into
        decimals: The number of fractional digits written for coordinate values
        crs: An optional CRS of the written coordinates. When its axis order puts latitude
            first and conf.crs_logic is authority based, x and y are swapped on output.
        conf: Optional GeoJSON configuration
    """

    def __init__(
        self,
        buffer: Optional[TextIO] = None,
        decimals: Optional[int] = None,
        crs: Optional[CRS] = None,
        conf: Optional[GeoJsonConf] = None,
    ):
        super().__init__(buffer=buffer, decimals=decimals)
        self.crs = crs
        self.conf = conf if conf is not None else GeoJsonConf()
        self._swaps = crs is not None and swaps_xy(crs, self.conf.crs_logic)

    @property
    def _swap_xy(self) -> bool:
        return self._swaps

    def _format(self, value: Number) -> str:
        return format_number(value, self.decimals, compact=self.conf.compact_nums)

    def _axes_to_print(
        self,
        z: Optional[float],
        m: Optional[float],
    ) -> Tuple[bool, bool, Number]:
        coord_type = self._expected_coord_type
        if self.conf.ignore_measured:
            print_m = False
        elif coord_type is not None:
            print_m = coord_type.is_measured
        else:
            print_m = m is not None

        # m is always the 4th value, so z is needed whenever m is written
        if coord_type is not None:
            print_z = print_m or coord_type.is_3d
        else:
            print_z = print_m or z is not None

        if coord_type is None or coord_type.is_3d:
            z_value = z if z is not None else 0
        else:
            z_value = 0
        return print_z, print_m, z_value

    def _brackets_array(self) -> bool:
        return True
