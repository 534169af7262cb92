from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, NamedTuple, Optional, Sequence, Tuple

from shapely.geometry import Point

from geotext.codes.coords import Coords

if TYPE_CHECKING:
    from geotext.writers.writer_interface import CoordinateWriter


class Position(NamedTuple):
    """
    Represents a single position with x and y, and optional z and m coordinates.

    A Position is an immutable value used to feed coordinate data into text writers. For
    geographic coordinates x is the longitude and y is the latitude.

    Attributes:
        x: The x-coordinate value (longitude in lat/lon systems, easting in projected systems)
        y: The y-coordinate value (latitude in lat/lon systems, northing in projected systems)
        z: The optional z-coordinate value (elevation)
        m: The optional measure value

    Examples:
        >>> from geotext.constructs.position import Position
        >>> pos = Position(10.1, 20.2, z=30.3)
        >>> pos.coord_type
        <Coords.XYZ: ...>
        >>> Position.from_coords([1.0, 2.0, 3.0], Coords.XYM).m
        3.0
    """

    x: float
    y: float
    z: Optional[float] = None
    m: Optional[float] = None

    @property
    def is_3d(self) -> bool:
        return self.z is not None

    @property
    def is_measured(self) -> bool:
        return self.m is not None

    @property
    def coord_type(self) -> Coords:
        return Coords.select(is_3d=self.is_3d, is_measured=self.is_measured)

    @property
    def values(self) -> Tuple[float, ...]:
        """The coordinate values in (x, y, z, m) order, omitting those this position lacks."""
        return tuple(v for v in self if v is not None)

    @property
    def geom(self) -> Point:
        """A Shapely Point of this position (m is dropped as Shapely points carry no measure)."""
        if self.z is None:
            return Point(self.x, self.y)
        return Point(self.x, self.y, self.z)

    @classmethod
    def from_coords(
        cls,
        values: Sequence[float],
        coord_type: Optional[Coords] = None,
    ) -> Position:
        """
        Create a position from a flat sequence of coordinate values.

        Args:
            values: The coordinate values, like [x, y], [x, y, z], [x, y, m] or [x, y, z, m]
            coord_type: The coordinate type of the values. If None, the type is resolved from
                the number of values and 3 values are read as (x, y, z).

        Returns:
            A new Position

        Raises:
            FormatException: If the number of values is not 2, 3 or 4 and no type is given
        """
        if coord_type is None:
            coord_type = Coords.from_dimension(len(values))
        z = values[coord_type.index_for_z] if coord_type.is_3d else None
        m = values[coord_type.index_for_m] if coord_type.is_measured else None
        return cls(values[0], values[1], z, m)

    @classmethod
    def from_point(cls, point: Point) -> Position:
        """Create a position from a Shapely Point, keeping z when the point has one."""
        return cls.from_coords(point.coords[0])

    def write_to(self, writer: CoordinateWriter):
        writer.position(self)


def series_coord_type(positions: Iterable[Position]) -> Optional[Coords]:
    """
    Get the coordinate type shared by all positions in a series.

    Args:
        positions: The positions to check

    Returns:
        The coordinate type of the positions, or None if there are no positions or
        the positions have different coordinate types
    """
    coord_type = None
    for pos in positions:
        if coord_type is None:
            coord_type = pos.coord_type
        elif pos.coord_type is not coord_type:
            return None
    return coord_type
