from .builtin_campus_map_repository import BuiltinCampusMapRepository
from .json_campus_map_repository import JsonCampusMapRepository

__all__ = [
    "BuiltinCampusMapRepository",
    "JsonCampusMapRepository",
]
