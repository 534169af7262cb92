class FormatException(ValueError):
    """
    Raised when a coordinate type, geometry type or code cannot be resolved.
    """
