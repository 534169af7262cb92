from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, NamedTuple, Optional

from shapely.geometry.base import BaseGeometry

from geotext.codes.coords import Coords
from geotext.constructs.position import Position

if TYPE_CHECKING:
    from geotext.writers.writer_interface import CoordinateWriter


class Box(NamedTuple):
    """
    An axis-aligned bounding box with min and max corners.

    The optional z and m ranges are considered present only when both the min and the max
    values are given.

    Attributes:
        min_x: The minimum x-coordinate value
        min_y: The minimum y-coordinate value
        max_x: The maximum x-coordinate value
        max_y: The maximum y-coordinate value
        min_z: The optional minimum z-coordinate value
        min_m: The optional minimum m value
        max_z: The optional maximum z-coordinate value
        max_m: The optional maximum m value

    Examples:
        >>> from geotext.constructs.box import Box
        >>> box = Box(0, 0, 10, 10)
        >>> box.max
        Position(x=10, y=10, z=None, m=None)
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float
    min_z: Optional[float] = None
    min_m: Optional[float] = None
    max_z: Optional[float] = None
    max_m: Optional[float] = None

    @property
    def min(self) -> Position:
        return Position(self.min_x, self.min_y, self.min_z, self.min_m)

    @property
    def max(self) -> Position:
        return Position(self.max_x, self.max_y, self.max_z, self.max_m)

    @property
    def is_3d(self) -> bool:
        return self.min_z is not None and self.max_z is not None

    @property
    def is_measured(self) -> bool:
        return self.min_m is not None and self.max_m is not None

    @property
    def coord_type(self) -> Coords:
        return Coords.select(is_3d=self.is_3d, is_measured=self.is_measured)

    @classmethod
    def from_positions(cls, positions: Iterable[Position]) -> Box:
        """
        Create the smallest box containing all positions.

        The z and m ranges are computed only when every position carries z or m respectively.

        Raises:
            ValueError: If there are no positions
        """
        positions = list(positions)
        if not positions:
            raise ValueError("cannot compute a bounding box of zero positions")

        xs = [p.x for p in positions]
        ys = [p.y for p in positions]
        zs = [p.z for p in positions]
        ms = [p.m for p in positions]
        has_z = all(z is not None for z in zs)
        has_m = all(m is not None for m in ms)

        return cls(
            min_x=min(xs),
            min_y=min(ys),
            max_x=max(xs),
            max_y=max(ys),
            min_z=min(zs) if has_z else None,
            min_m=min(ms) if has_m else None,
            max_z=max(zs) if has_z else None,
            max_m=max(ms) if has_m else None,
        )

    @classmethod
    def from_geometry(cls, geom: BaseGeometry) -> Box:
        """
        Create a 2D box from the bounds of a Shapely geometry.

        Raises:
            ValueError: If the geometry is empty
        """
        if geom.is_empty:
            raise ValueError("cannot compute a bounding box of an empty geometry")
        min_x, min_y, max_x, max_y = geom.bounds
        return cls(min_x, min_y, max_x, max_y)

    def write_to(self, writer: CoordinateWriter):
        writer.bounds(self)
