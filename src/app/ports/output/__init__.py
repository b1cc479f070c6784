from .campus_map_repository import ICampusMapRepository

__all__ = [
    "ICampusMapRepository",
]
