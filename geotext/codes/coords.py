from __future__ import annotations

from enum import Enum
from typing import Optional

from geotext.utils.exceptions import FormatException

# Extended WKB (EWKB) flags stored on the most significant byte of a type id
EWKB_FLAG_Z = 0x80000000
EWKB_FLAG_M = 0x40000000
EWKB_FLAG_SRID = 0x20000000

# Mask for the 3 least significant bytes of a 4 byte type id
WKB_ID_MASK = 0xFFFFFF


class Coords(Enum):
    """
    Enumeration of coordinate types by spatial dimension and whether coordinates are measured.

    Each coordinate type knows how many values a coordinate tuple holds, where the optional
    z and m values are located in a flat tuple, and how the type is identified in WKB and WKT.

    Values:
        XY: 2D coordinates as projected (x, y) or geographic (lon, lat)
        XYZ: 3D coordinates as projected (x, y, z) or geographic (lon, lat, elev)
        XYM: 2D measured coordinates as projected (x, y, m) or geographic (lon, lat, m)
        XYZM: 3D measured coordinates as projected (x, y, z, m) or geographic (lon, lat, elev, m)

    Attributes:
        coordinate_dimension: The number of coordinate values (2, 3 or 4)
        spatial_dimension: The number of spatial coordinate values (2 or 3)
        is_3d: True if coordinates contain z (or elevation)
        is_measured: True if coordinates contain m
        wkb_id: The WKB type offset for coordinates, ie. 1000 for coordinates with z
        wkt_specifier: The WKT specifier ("Z", "M" or "ZM"), None for 2D coordinates
        index_for_z: The index of z in a flat coordinate tuple, None if not 3D
        index_for_m: The index of m in a flat coordinate tuple, None if not measured

    Examples:
        >>> from geotext.codes.coords import Coords
        >>> Coords.select(is_3d=True, is_measured=False)
        <Coords.XYZ: ...>
        >>> Coords.from_dimension(3, xyz_for_dim3=False).wkt_specifier
        'M'
        >>> Coords.from_wkb_id(3001)
        <Coords.XYZM: ...>
    """

    XY = (2, 2, False, False, 0, None, None, None)
    XYZ = (3, 3, True, False, 1000, "Z", 2, None)
    XYM = (3, 2, False, True, 2000, "M", None, 2)
    XYZM = (4, 3, True, True, 3000, "ZM", 2, 3)

    def __init__(
        self,
        coordinate_dimension: int,
        spatial_dimension: int,
        is_3d: bool,
        is_measured: bool,
        wkb_id: int,
        wkt_specifier: Optional[str],
        index_for_z: Optional[int],
        index_for_m: Optional[int],
    ):
        self.coordinate_dimension = coordinate_dimension
        self.spatial_dimension = spatial_dimension
        self.is_3d = is_3d
        self.is_measured = is_measured
        self.wkb_id = wkb_id
        self.wkt_specifier = wkt_specifier
        self.index_for_z = index_for_z
        self.index_for_m = index_for_m

    @classmethod
    def select(cls, is_3d: bool, is_measured: bool) -> Coords:
        """Select a coordinate type based on whether z and m are present."""
        if is_3d:
            return cls.XYZM if is_measured else cls.XYZ
        else:
            return cls.XYM if is_measured else cls.XY

    @classmethod
    def from_dimension(
        cls,
        coordinate_dimension: int,
        xyz_for_dim3: bool = True,
    ) -> Coords:
        """
        Resolve the coordinate type from the number of values in a coordinate tuple.

        Three values are ambiguous: they may be (x, y, z) or (x, y, m), so the caller decides.

        Args:
            coordinate_dimension: The number of coordinate values (2, 3 or 4)
            xyz_for_dim3: If True, 3 values resolve to XYZ, otherwise to XYM. Default is True.

        Returns:
            The coordinate type

        Raises:
            FormatException: If the dimension is not 2, 3 or 4
        """
        if coordinate_dimension == 4:
            return cls.XYZM
        elif coordinate_dimension == 3:
            return cls.XYZ if xyz_for_dim3 else cls.XYM
        elif coordinate_dimension == 2:
            return cls.XY
        raise FormatException(f"invalid coordinate dimension {coordinate_dimension}")

    @classmethod
    def from_wkb_id(cls, id: int) -> Coords:
        """
        Resolve the coordinate type from a WKB or Extended WKB (EWKB) geometry type id.

        Expected values are 0-999 for XY, 1000-1999 for XYZ, 2000-2999 for XYM and 3000-3999
        for XYZM, so the geometry type part of the id is ignored. Only the 3 least significant
        bytes take part in this check. For ids without the ISO offset, the EWKB
        dimensionality flags 0x80000000 (z) and 0x40000000 (m) select the type.

        Args:
            id: The WKB or EWKB geometry type id

        Returns:
            The coordinate type

        Raises:
            FormatException: If the id is not a valid type id

        Examples:
            >>> Coords.from_wkb_id(1002)
            <Coords.XYZ: ...>
            >>> Coords.from_wkb_id(0x40000001)
            <Coords.XYM: ...>
        """
        id24 = id & WKB_ID_MASK
        group = (id24 // 1000) * 1000

        if group == 0:
            if id & EWKB_FLAG_Z:
                return cls.XYZM if id & EWKB_FLAG_M else cls.XYZ
            elif id & EWKB_FLAG_M:
                return cls.XYM
            return cls.XY
        elif group == 1000:
            return cls.XYZ
        elif group == 2000:
            return cls.XYM
        elif group == 3000:
            return cls.XYZM
        raise FormatException(f"invalid WKB id {id}")
