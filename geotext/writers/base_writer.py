from __future__ import annotations

import io
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, TextIO, Tuple

from geotext.codes.coords import Coords
from geotext.codes.geom import Geom
from geotext.constructs.box import Box
from geotext.constructs.position import Position, series_coord_type
from geotext.utils.num import Number, format_number
from geotext.writers.writer_interface import GeometryWriter, WriteGeometries


class Container(Enum):
    """
    Enumeration of container kinds tracked on the nesting stack of a text writer.
    """

    ROOT = "root"
    FEATURE_COLLECTION = "feature_collection"
    FEATURE = "feature"
    OBJECT_ARRAY = "object_array"
    GEOMETRY = "geometry"
    COORD_ARRAY = "coord_array"
    PROPERTY_MAP = "property_map"
    PROPERTY_ARRAY = "property_array"


@dataclass
class Level:
    """One open container on the nesting stack and whether it has items written already."""

    container: Container
    has_items: bool = False


class BaseTextWriter(GeometryWriter):
    """
    The state machine shared by all text writers.

    Text is written in a single forward pass into an append-only buffer, so separators and
    brackets are decided at the time of each call using only the current state:

    - a stack of nesting levels, one per open container, each tracking whether an item has
      been written on it. The first item of a level is written as is, and every following
      item is preceded by a separator.
    - a stack of expected coordinate types, pushed when a geometry starts and popped when
      it ends. The top decides whether z and m are written for points.

    Subclasses define the bracket characters and the delimiter between coordinate values, and
    override the hooks called before and after geometry coordinates.

    Args:
        buffer: An optional text stream (like io.StringIO) to append into. Content it already
            contains is kept. If None, a new io.StringIO is used.
        decimals: The number of fractional digits written for every coordinate value. If None,
            numbers are written with their default string conversion.
    """

    open_bracket = "["
    close_bracket = "]"
    delimiter = ","

    def __init__(self, buffer: Optional[TextIO] = None, decimals: Optional[int] = None):
        self._buffer = buffer if buffer is not None else io.StringIO()
        self.decimals = decimals

        self._levels: List[Level] = [Level(Container.ROOT)]
        self._coord_types: List[Optional[Coords]] = []

    def to_text(self) -> str:
        return self._buffer.getvalue()

    @property
    def nesting_depth(self) -> int:
        """The number of containers open (0 when all begin calls have been ended)."""
        return len(self._levels) - 1

    @property
    def coord_type_depth(self) -> int:
        """The number of expected coordinate types pushed and not popped yet."""
        return len(self._coord_types)

    # state ------------------------------------------------------------------

    def _start_container(self, container: Container):
        self._levels.append(Level(container))

    def _end_container(self):
        self._levels.pop()

    def _start_coord_type(self, coord_type: Optional[Coords]):
        self._coord_types.append(coord_type)

    def _end_coord_type(self):
        self._coord_types.pop()

    @property
    def _expected_coord_type(self) -> Optional[Coords]:
        return self._coord_types[-1] if self._coord_types else None

    @property
    def _at_feature(self) -> bool:
        return self._levels[-1].container is Container.FEATURE

    @property
    def _at_feature_collection(self) -> bool:
        last = self._levels[-1].container
        if last is Container.FEATURE_COLLECTION:
            return True
        if last is Container.OBJECT_ARRAY and len(self._levels) >= 2:
            return self._levels[-2].container is Container.FEATURE_COLLECTION
        return False

    @property
    def _not_at_root(self) -> bool:
        return len(self._levels) > 1

    @property
    def _at_root_or_at_coord_array(self) -> bool:
        return (
            len(self._levels) == 1
            or self._levels[-1].container is Container.COORD_ARRAY
        )

    def _mark_item(self) -> bool:
        """Mark an item written on the current level, returning True if it had items before."""
        level = self._levels[-1]
        had_items = level.has_items
        level.has_items = True
        return had_items

    def _next_item(self):
        if self._mark_item():
            self._buffer.write(",")

    # points -----------------------------------------------------------------

    def _format(self, value: Number) -> str:
        return format_number(value, self.decimals)

    @property
    def _swap_xy(self) -> bool:
        return False

    def _axes_to_print(
        self,
        z: Optional[float],
        m: Optional[float],
    ) -> Tuple[bool, bool, Number]:
        """
        Decide whether z and m are written for a point, and the z value to write.

        A known expected coordinate type decides alone. Otherwise z and m are written when the
        point has them, and z is written also when only m exists so that m stays the 4th value.
        """
        coord_type = self._expected_coord_type
        if coord_type is not None:
            return coord_type.is_3d, coord_type.is_measured, z if z is not None else 0

        print_m = m is not None
        print_z = print_m or z is not None
        return print_z, print_m, z if z is not None else 0

    def _print_point(
        self,
        x: float,
        y: float,
        z: Optional[float],
        m: Optional[float],
    ):
        print_z, print_m, z_value = self._axes_to_print(z, m)
        if self._swap_xy:
            x, y = y, x

        write = self._buffer.write
        write(self._format(x))
        write(self.delimiter)
        write(self._format(y))
        if print_z:
            write(self.delimiter)
            write(self._format(z_value))
        if print_m:
            write(self.delimiter)
            write(self._format(m if m is not None else 0))

    def _brackets_point(self) -> bool:
        return self._not_at_root

    def coord_point(
        self,
        x: float,
        y: float,
        z: Optional[float] = None,
        m: Optional[float] = None,
    ):
        self._next_item()
        brackets = self._brackets_point()
        if brackets:
            self._buffer.write(self.open_bracket)
        self._print_point(x, y, z, m)
        if brackets:
            self._buffer.write(self.close_bracket)

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
        self._next_item()
        brackets = self._not_at_root
        if brackets:
            self._buffer.write(self.open_bracket)
        self._print_point(min_x, min_y, min_z, min_m)
        self._buffer.write(",")
        self._print_point(max_x, max_y, max_z, max_m)
        if brackets:
            self._buffer.write(self.close_bracket)

    # arrays -----------------------------------------------------------------

    def _brackets_array(self) -> bool:
        return self._not_at_root

    def _begin_array(self, container: Container):
        self._next_item()
        if self._brackets_array():
            self._buffer.write(self.open_bracket)
        self._start_container(container)

    def _end_array(self):
        self._end_container()
        # checked on the same level as in _begin_array
        if self._brackets_array():
            self._buffer.write(self.close_bracket)

    def begin_coord_array(self, count: Optional[int] = None):
        self._begin_array(Container.COORD_ARRAY)

    def end_coord_array(self):
        self._end_array()

    def begin_object_array(self, count: Optional[int] = None):
        self._begin_array(Container.OBJECT_ARRAY)

    def end_object_array(self):
        self._end_array()

    # coordinates ------------------------------------------------------------

    def _coord_position(self, position: Position):
        self.coord_point(position.x, position.y, position.z, position.m)

    def _coord_positions(self, positions: Iterable[Position]):
        self.begin_coord_array()
        for pos in positions:
            self._coord_position(pos)
        self.end_coord_array()

    def position(self, position: Position):
        self._start_coord_type(position.coord_type)
        self._coord_position(position)
        self._end_coord_type()

    def positions(self, positions: Iterable[Position]):
        self._coord_positions(positions)

    def bounds(self, box: Box):
        self._start_coord_type(box.coord_type)
        self.coord_bounds(*box)
        self._end_coord_type()

    # geometries -------------------------------------------------------------

    def begin_geometry(
        self,
        kind: Geom,
        name: Optional[str] = None,
        coord_type: Optional[Coords] = None,
        bounds: Optional[Box] = None,
    ) -> bool:
        self._start_coord_type(coord_type)
        return True

    def end_geometry(self):
        self._end_coord_type()

    def empty_geometry(self, kind: Geom, name: Optional[str] = None):
        pass

    def geometry_with_position(
        self,
        kind: Geom,
        position: Position,
        name: Optional[str] = None,
        coord_type: Optional[Coords] = None,
        bounds: Optional[Box] = None,
    ):
        if self.begin_geometry(kind, name=name, coord_type=coord_type, bounds=bounds):
            self._coord_position(position)
            self.end_geometry()

    def geometry_with_positions_1d(
        self,
        kind: Geom,
        positions: Iterable[Position],
        name: Optional[str] = None,
        coord_type: Optional[Coords] = None,
        bounds: Optional[Box] = None,
    ):
        if self.begin_geometry(kind, name=name, coord_type=coord_type, bounds=bounds):
            self._coord_positions(positions)
            self.end_geometry()

    def geometry_with_positions_2d(
        self,
        kind: Geom,
        positions: Iterable[Iterable[Position]],
        name: Optional[str] = None,
        coord_type: Optional[Coords] = None,
        bounds: Optional[Box] = None,
    ):
        if self.begin_geometry(kind, name=name, coord_type=coord_type, bounds=bounds):
            self.begin_coord_array()
            for series in positions:
                self._coord_positions(series)
            self.end_coord_array()
            self.end_geometry()

    def geometry_with_positions_3d(
        self,
        kind: Geom,
        positions: Iterable[Iterable[Iterable[Position]]],
        name: Optional[str] = None,
        coord_type: Optional[Coords] = None,
        bounds: Optional[Box] = None,
    ):
        if self.begin_geometry(kind, name=name, coord_type=coord_type, bounds=bounds):
            self.begin_coord_array()
            for array in positions:
                self.begin_coord_array()
                for series in array:
                    self._coord_positions(series)
                self.end_coord_array()
            self.end_coord_array()
            self.end_geometry()

    def geometry_collection(
        self,
        geometries: WriteGeometries,
        coord_type: Optional[Coords] = None,
        count: Optional[int] = None,
        name: Optional[str] = None,
        bounds: Optional[Box] = None,
    ):
        if self.begin_geometry(
            Geom.GEOMETRY_COLLECTION,
            name=name,
            coord_type=coord_type,
            bounds=bounds,
        ):
            self.begin_object_array(count=count)
            geometries(self)
            self.end_object_array()
            self.end_geometry()

    def point(self, position: Position, name: Optional[str] = None):
        self.geometry_with_position(
            Geom.POINT, position, name=name, coord_type=position.coord_type
        )

    def line_string(
        self,
        chain: Iterable[Position],
        name: Optional[str] = None,
        bounds: Optional[Box] = None,
    ):
        chain = list(chain)
        self.geometry_with_positions_1d(
            Geom.LINE_STRING,
            chain,
            name=name,
            coord_type=series_coord_type(chain),
            bounds=bounds,
        )

    def polygon(
        self,
        rings: Iterable[Iterable[Position]],
        name: Optional[str] = None,
        bounds: Optional[Box] = None,
    ):
        rings = [list(ring) for ring in rings]
        self.geometry_with_positions_2d(
            Geom.POLYGON,
            rings,
            name=name,
            coord_type=series_coord_type(p for ring in rings for p in ring),
            bounds=bounds,
        )

    def multi_point(
        self,
        points: Iterable[Position],
        name: Optional[str] = None,
        bounds: Optional[Box] = None,
    ):
        points = list(points)
        self.geometry_with_positions_1d(
            Geom.MULTI_POINT,
            points,
            name=name,
            coord_type=series_coord_type(points),
            bounds=bounds,
        )

    def multi_line_string(
        self,
        line_strings: Iterable[Iterable[Position]],
        name: Optional[str] = None,
        bounds: Optional[Box] = None,
    ):
        line_strings = [list(chain) for chain in line_strings]
        self.geometry_with_positions_2d(
            Geom.MULTI_LINE_STRING,
            line_strings,
            name=name,
            coord_type=series_coord_type(p for chain in line_strings for p in chain),
            bounds=bounds,
        )

    def multi_polygon(
        self,
        polygons: Iterable[Iterable[Iterable[Position]]],
        name: Optional[str] = None,
        bounds: Optional[Box] = None,
    ):
        polygons = [[list(ring) for ring in rings] for rings in polygons]
        self.geometry_with_positions_3d(
            Geom.MULTI_POLYGON,
            polygons,
            name=name,
            coord_type=series_coord_type(
                p for rings in polygons for ring in rings for p in ring
            ),
            bounds=bounds,
        )
