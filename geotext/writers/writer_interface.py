from __future__ import annotations

from abc import ABCMeta, abstractmethod
from typing import Any, Callable, Dict, Iterable, Optional, Union

from geotext.codes.coords import Coords
from geotext.codes.geom import Geom
from geotext.constructs.box import Box
from geotext.constructs.position import Position

WriteGeometries = Callable[["GeometryWriter"], None]
WriteFeatures = Callable[["FeatureWriter"], None]


class CoordinateWriter(metaclass=ABCMeta):
    """
    Abstract base class defining the interface to write coordinate data into some text format.

    A writer is driven through a strict sequence of calls mirroring the data being written and
    every begin call must be matched by exactly one end call. Writers do not validate the call
    sequence: unbalanced calls simply produce unbalanced text.

    Coordinate arrays can be nested, for example a polygon with two rings:

    Examples:
        >>> writer.begin_coord_array()
        >>> writer.begin_coord_array()
        >>> writer.coord_point(x=1, y=1)
        >>> writer.coord_point(x=2, y=2)
        >>> writer.end_coord_array()
        >>> writer.begin_coord_array()
        >>> writer.coord_point(x=11, y=11)
        >>> writer.end_coord_array()
        >>> writer.end_coord_array()
        >>> writer.to_text()
    """

    @abstractmethod
    def position(self, position: Position):
        """Write a single position with its own coordinate type."""

    @abstractmethod
    def positions(self, positions: Iterable[Position]):
        """Write a series of positions as a coordinate array."""

    @abstractmethod
    def bounds(self, box: Box):
        """Write a bounding box with its own coordinate type."""

    @abstractmethod
    def begin_coord_array(self, count: Optional[int] = None):
        """
        Start an array of coordinates, like a ring or a list of points.

        Args:
            count: An optional hint of the number of items in the array
        """

    @abstractmethod
    def end_coord_array(self):
        """End an array of coordinates."""

    @abstractmethod
    def coord_point(
        self,
        x: float,
        y: float,
        z: Optional[float] = None,
        m: Optional[float] = None,
    ):
        """Write the coordinates of a single point."""

    @abstractmethod
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
        """Write the coordinates of a bounding box."""

    @abstractmethod
    def to_text(self) -> str:
        """
        Get the text written so far.

        Reading the text does not change the writer, so it can be called any number of times.
        """

    def __str__(self):
        return self.to_text()


class GeometryWriter(CoordinateWriter):
    """
    Abstract base class defining the interface to write geometries into some text format.

    Geometries are written either with the shape calls (a geometry with a single position, or
    with 1, 2 or 3 dimensional sequences of positions), with the named geometry calls, or with
    the low level begin/end calls of geometries and arrays.

    Examples:
        >>> from geotext.codes.geom import Geom
        >>> from geotext.constructs.position import Position
        >>> from geotext.writers.formats import TextFormat, text_writer
        >>>
        >>> writer = text_writer(TextFormat.WKT)
        >>> writer.line_string([Position(1, 1), Position(2, 2)])
        >>> writer.to_text()
        'LINESTRING(1 1,2 2)'
    """

    @abstractmethod
    def begin_geometry(
        self,
        kind: Geom,
        name: Optional[str] = None,
        coord_type: Optional[Coords] = None,
        bounds: Optional[Box] = None,
    ) -> bool:
        """
        Start a geometry of the given kind.

        The coordinate type, when given, decides whether z and m are written for all
        coordinates of this geometry. When None, each point decides by its own values.

        Args:
            kind: The geometry type
            name: An optional name for the geometry (when applicable, like under a feature)
            coord_type: The expected coordinate type of the geometry
            bounds: An optional bounding box of the geometry. Writers may ignore it.

        Returns:
            True if the geometry was started and its content followed by end_geometry must be
            written. False if the writer skips this geometry, in which case neither content nor
            end_geometry must be written.
        """

    @abstractmethod
    def end_geometry(self):
        """End a geometry."""

    @abstractmethod
    def begin_object_array(self, count: Optional[int] = None):
        """Start an array of objects, like the child geometries of a geometry collection."""

    @abstractmethod
    def end_object_array(self):
        """End an array of objects."""

    @abstractmethod
    def empty_geometry(self, kind: Geom, name: Optional[str] = None):
        """Write an empty geometry of the given kind."""

    @abstractmethod
    def geometry_with_position(
        self,
        kind: Geom,
        position: Position,
        name: Optional[str] = None,
        coord_type: Optional[Coords] = None,
        bounds: Optional[Box] = None,
    ):
        """Write a geometry with a single position, like a point."""

    @abstractmethod
    def geometry_with_positions_1d(
        self,
        kind: Geom,
        positions: Iterable[Position],
        name: Optional[str] = None,
        coord_type: Optional[Coords] = None,
        bounds: Optional[Box] = None,
    ):
        """Write a geometry with a series of positions, like a line string or a multi point."""

    @abstractmethod
    def geometry_with_positions_2d(
        self,
        kind: Geom,
        positions: Iterable[Iterable[Position]],
        name: Optional[str] = None,
        coord_type: Optional[Coords] = None,
        bounds: Optional[Box] = None,
    ):
        """Write a geometry with an array of position series, like a polygon or a multi line string."""

    @abstractmethod
    def geometry_with_positions_3d(
        self,
        kind: Geom,
        positions: Iterable[Iterable[Iterable[Position]]],
        name: Optional[str] = None,
        coord_type: Optional[Coords] = None,
        bounds: Optional[Box] = None,
    ):
        """Write a geometry with an array of arrays of position series, like a multi polygon."""

    @abstractmethod
    def geometry_collection(
        self,
        geometries: WriteGeometries,
        coord_type: Optional[Coords] = None,
        count: Optional[int] = None,
        name: Optional[str] = None,
        bounds: Optional[Box] = None,
    ):
        """
        Write a geometry collection.

        Args:
            geometries: A function writing the child geometries into the writer given to it
            coord_type: An optional coordinate type of the collection
            count: An optional hint of the number of child geometries
            name: An optional name for the geometry (when applicable, like under a feature)
            bounds: An optional bounding box of the collection. Writers may ignore it.
        """

    @abstractmethod
    def point(self, position: Position, name: Optional[str] = None):
        pass

    @abstractmethod
    def line_string(
        self,
        chain: Iterable[Position],
        name: Optional[str] = None,
        bounds: Optional[Box] = None,
    ):
        pass

    @abstractmethod
    def polygon(
        self,
        rings: Iterable[Iterable[Position]],
        name: Optional[str] = None,
        bounds: Optional[Box] = None,
    ):
        """Write a polygon with the exterior ring first, followed by any interior rings."""

    @abstractmethod
    def multi_point(
        self,
        points: Iterable[Position],
        name: Optional[str] = None,
        bounds: Optional[Box] = None,
    ):
        pass

    @abstractmethod
    def multi_line_string(
        self,
        line_strings: Iterable[Iterable[Position]],
        name: Optional[str] = None,
        bounds: Optional[Box] = None,
    ):
        pass

    @abstractmethod
    def multi_polygon(
        self,
        polygons: Iterable[Iterable[Iterable[Position]]],
        name: Optional[str] = None,
        bounds: Optional[Box] = None,
    ):
        pass


class FeatureWriter(GeometryWriter):
    """
    Abstract base class defining the interface to write features into some text format.

    Examples:
        >>> from geotext.constructs.position import Position
        >>> from geotext.writers.geojson_writer import GeoJsonTextWriter
        >>>
        >>> writer = GeoJsonTextWriter()
        >>> writer.feature(
        ...     id="1",
        ...     geometry=lambda gw: gw.point(Position(10.123, 20.25)),
        ...     properties={"foo": 100, "bar": "this is property value"},
        ... )
        >>> writer.to_text()
        '{"type":"Feature","id":"1","geometry":{"type":"Point","coordinates":[10.123,20.25]},"properties":{"foo":100,"bar":"this is property value"}}'
    """

    @abstractmethod
    def feature_collection(
        self,
        features: WriteFeatures,
        count: Optional[int] = None,
        bounds: Optional[Box] = None,
        custom: Optional[Dict[str, Any]] = None,
    ):
        """
        Write a feature collection.

        Args:
            features: A function writing the features into the writer given to it
            count: An optional hint of the number of features
            bounds: An optional bounding box of the collection. Writers may ignore it.
            custom: Optional foreign members written alongside the standard members
        """

    @abstractmethod
    def feature(
        self,
        id: Optional[Union[int, str]] = None,
        geometry: Optional[WriteGeometries] = None,
        properties: Optional[Dict[str, Any]] = None,
        bounds: Optional[Box] = None,
        custom: Optional[Dict[str, Any]] = None,
    ):
        """
        Write a feature.

        Args:
            id: An optional identifier, written as a number for integers and as a string otherwise
            geometry: A function writing the geometry (or geometries, using names) of the feature
            properties: The properties of the feature
            bounds: An optional bounding box of the feature. Writers may ignore it.
            custom: Optional foreign members written alongside the standard members
        """
