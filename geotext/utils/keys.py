"""Standard member names used when writing GeoJSON content.

These constants define the JSON member names written by the GeoJSON writer. Members named
here are part of the GeoJSON specification (RFC 7946) and are never written as foreign members.
"""

# Member holding the object type ("Point", "Feature", "FeatureCollection", ...)
TYPE_KEY = "type"

# Member holding the bounding box of a geometry, feature or feature collection
BBOX_KEY = "bbox"

# Member holding coordinates of a geometry
COORDINATES_KEY = "coordinates"

# Member holding child geometries of a geometry collection
GEOMETRIES_KEY = "geometries"

# Default member name for the geometry of a feature
DEFAULT_GEOMETRY_KEY = "geometry"

# Member holding properties of a feature
PROPERTIES_KEY = "properties"

# Member holding features of a feature collection
FEATURES_KEY = "features"

# Member holding the identifier of a feature
ID_KEY = "id"

# Non-standard member holding the CRS identifier of a feature collection
CRS_KEY = "crs"

RESERVED_KEYS = frozenset(
    [
        TYPE_KEY,
        BBOX_KEY,
        COORDINATES_KEY,
        GEOMETRIES_KEY,
        DEFAULT_GEOMETRY_KEY,
        PROPERTIES_KEY,
        FEATURES_KEY,
    ]
)
