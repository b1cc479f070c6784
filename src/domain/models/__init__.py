from .campus import UNNAMED_WAYPOINT, CampusGraph, CampusMap, LocationRegistry, NodeId
from .route import (
    Itinerary,
    RouteOutcome,
    RouteRecord,
    RouteStatus,
    ShortestPath,
    Waypoint,
)

__all__ = [
    "UNNAMED_WAYPOINT",
    "CampusGraph",
    "CampusMap",
    "Itinerary",
    "LocationRegistry",
    "NodeId",
    "RouteOutcome",
    "RouteRecord",
    "RouteStatus",
    "ShortestPath",
    "Waypoint",
]
