from .map_data import MapDataError
from .routing import InternalInvariantViolation, InvalidNode, NoPathFound, RoutingError

__all__ = [
    "InternalInvariantViolation",
    "InvalidNode",
    "MapDataError",
    "NoPathFound",
    "RoutingError",
]
