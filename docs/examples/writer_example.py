"""
# Writer Example

An example of writing geometries and features as GeoJSON, WKT and the other text formats
"""


def main():
    """
    First, we need some coordinates.
    Positions are simple immutable values with x and y, and optional z and m values:
    """

    from geotext.constructs.position import Position

    chain = [Position(10.1, 10.1), Position(20.2, 20.2), Position(30.3, 30.3)]

    """
    Every text format has its own writer, and all writers share the same interface.
    The easiest way to get one is the `text_writer` function:
    """

    from geotext.writers.formats import TextFormat, text_writer

    for fmt in TextFormat:
        writer = text_writer(fmt)
        writer.line_string(chain)
        print(f"{fmt.name}: {writer.to_text()}")

    """
    Notice that the default format writes the same text as the "coordinates" member of GeoJSON,
    and the WKT like format writes the same text as the coordinates of WKT, without the keyword.

    Writers append text into a buffer, so several geometries can be written one after another.
    Here we write a geometry collection with a point, an empty line string and a polygon, rounding
    every coordinate value to one decimal:
    """

    from geotext.codes.geom import Geom

    def write_geometries(gw):
        gw.point(Position(10.123, 20.25, 30.5))
        gw.empty_geometry(Geom.LINE_STRING)
        gw.polygon(
            [
                [
                    Position(35, 10),
                    Position(45, 45),
                    Position(15, 40),
                    Position(10, 20),
                    Position(35, 10),
                ]
            ]
        )

    writer = text_writer(TextFormat.WKT, decimals=1)
    writer.geometry_collection(write_geometries, count=3)
    print(writer.to_text())

    """
    WKT has no bounding box type, so a WKT writer writes a bounding box as a polygon:
    """

    from geotext.constructs.box import Box

    writer = text_writer(TextFormat.WKT)
    writer.bounds(Box.from_positions(chain))
    print(writer.to_text())

    """
    Shapely geometries can be written directly:
    """

    from shapely.geometry import Point, Polygon

    from geotext.constructs.geometry import geometry_to_text

    print(geometry_to_text(Point(1, 2).buffer(1, quad_segs=2), decimals=3))
    print(geometry_to_text(Polygon(), TextFormat.GEOJSON))

    """
    Now, let's build GeoJSON features from a GeoDataFrame.
    Every row becomes a feature, the index is used as the feature id (unless an id column is given)
    and the other columns become properties:
    """

    import geopandas as gpd

    from geotext.constructs.feature import FeatureCollection

    frame = gpd.GeoDataFrame(
        {"name": ["start", "end"], "speed": [12.5, None]},
        geometry=[Point(-104.98, 39.74), Point(-105.27, 40.01)],
        crs="OGC:CRS84",
    )
    collection = FeatureCollection.from_geo_dataframe(frame, bbox=True)
    print(collection.to_geojson(decimals=2))

    """
    Missing values, like the second speed above, are written as null.

    The CRS of the frame decides the axis order. GeoJSON always expects longitude first, but
    EPSG:4326 defines latitude as the first axis. By default writers follow the authority, and
    the `GeoJsonConf` configuration can ask for strict GeoJSON instead:
    """

    from geotext.utils.crs import CrsLogic
    from geotext.writers.default_writer import GeoJsonConf

    latlon = FeatureCollection.from_geo_dataframe(frame.to_crs("EPSG:4326"))
    print(latlon.to_geojson(decimals=2))
    print(
        latlon.to_geojson(
            decimals=2, conf=GeoJsonConf(crs_logic=CrsLogic.GEOJSON_STRICT)
        )
    )


if __name__ == "__main__":
    main()
