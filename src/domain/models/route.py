from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .campus import UNNAMED_WAYPOINT, NodeId


class RouteStatus(str, Enum):
    FOUND = "found"
    INVALID_NODE = "invalid_node"
    NOT_FOUND = "not_found"


@dataclass(frozen=True, slots=True)
class ShortestPath:
    """Minimum-distance path between two nodes.

    leg_distances_m[i] is the weight of the edge nodes[i] -> nodes[i + 1].
    """

    distance_m: int
    nodes: tuple[NodeId, ...]
    leg_distances_m: tuple[int, ...] = ()

    @property
    def start(self) -> NodeId:
        return self.nodes[0]

    @property
    def end(self) -> NodeId:
        return self.nodes[-1]


@dataclass(frozen=True, slots=True)
class Waypoint:
    node_id: NodeId
    name: str | None = None
    leg_distance_m: int | None = None  # to the next node on the path

    @property
    def is_named(self) -> bool:
        return self.name is not None

    @property
    def label(self) -> str:
        return self.name if self.name is not None else UNNAMED_WAYPOINT


@dataclass(frozen=True, slots=True)
class Itinerary:
    start: NodeId
    end: NodeId
    start_name: str
    end_name: str
    total_distance_m: int
    path: tuple[NodeId, ...]
    leg_distances_m: tuple[int, ...] = ()
    waypoints: tuple[Waypoint, ...] = ()
    # Second-to-last node, rendered as the destination entrance.
    arrival_node: NodeId | None = None

    @property
    def summed_leg_distance_m(self) -> int:
        return sum(self.leg_distances_m)


@dataclass(frozen=True, slots=True)
class RouteRecord:
    from_name: str
    to_name: str
    distance_m: int


@dataclass(frozen=True, slots=True)
class RouteOutcome:
    status: RouteStatus
    message: str
    itinerary: Itinerary | None = None

    @property
    def ok(self) -> bool:
        return self.status is RouteStatus.FOUND

    @property
    def total_distance_m(self) -> int | None:
        return self.itinerary.total_distance_m if self.itinerary else None
