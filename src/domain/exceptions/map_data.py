class MapDataError(ValueError):
    """Raised when a campus map file is malformed."""
