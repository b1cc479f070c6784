from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, Iterable

import networkx as nx

NodeId = Hashable

UNNAMED_WAYPOINT = "Path/Turn"


@dataclass(slots=True)
class LocationRegistry:
    """Partial mapping from node id to display name.

    Nodes without an entry are unnamed waypoints (paths, turns, intersections).
    """

    names: dict[NodeId, str] = field(default_factory=dict)
    frozen: bool = False

    def set_name(self, node_id: NodeId, name: str) -> None:
        if self.frozen:
            raise RuntimeError("Location registry is frozen")
        self.names[node_id] = name

    def name_for(self, node_id: NodeId) -> str | None:
        return self.names.get(node_id)

    def display_name(self, node_id: NodeId) -> str:
        return self.names.get(node_id, UNNAMED_WAYPOINT)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.names

    def __len__(self) -> int:
        return len(self.names)


@dataclass(slots=True)
class CampusGraph:
    """Undirected campus graph with non-negative integer weights (meters).

    Backed by a networkx MultiGraph: parallel edges between the same pair are
    kept as separate edges, each traversable in both directions.
    """

    _graph: nx.MultiGraph = field(
        default_factory=nx.MultiGraph, init=False, repr=False
    )

    def add_edge(self, u: NodeId, v: NodeId, weight: int) -> None:
        if isinstance(weight, bool) or not isinstance(weight, int):
            raise ValueError(f"Edge weight must be an integer, got {weight!r}")
        if weight < 0:
            raise ValueError(f"Edge weight must be non-negative, got {weight}")
        self._graph.add_edge(u, v, weight=weight)

    def neighbors(self, u: NodeId) -> list[tuple[NodeId, int]]:
        if u not in self._graph:
            return []
        return [
            (v, int(data["weight"]))
            for v, keyed in self._graph.adj[u].items()
            for data in keyed.values()
        ]

    def has_node(self, u: NodeId) -> bool:
        return u in self._graph

    def __contains__(self, u: object) -> bool:
        return self.has_node(u)  # type: ignore[arg-type]

    def nodes(self) -> list[NodeId]:
        return list(self._graph.nodes)

    @property
    def node_count(self) -> int:
        return self._graph.number_of_nodes()

    @property
    def edge_count(self) -> int:
        return self._graph.number_of_edges()

    @property
    def frozen(self) -> bool:
        return nx.is_frozen(self._graph)

    def freeze(self) -> None:
        nx.freeze(self._graph)


@dataclass(slots=True)
class CampusMap:
    """Authoring aggregate: the campus graph plus its location names.

    Populated once at startup by a map repository, then frozen.
    """

    graph: CampusGraph = field(default_factory=CampusGraph)
    registry: LocationRegistry = field(default_factory=LocationRegistry)
    # Shown in the "common destinations" menu, in display order.
    featured_destinations: tuple[NodeId, ...] = ()
    # node id -> {menu choice -> room node id}
    room_menus: dict[NodeId, dict[int, NodeId]] = field(default_factory=dict)

    def set_location_name(self, node_id: NodeId, name: str) -> None:
        self.registry.set_name(node_id, name)

    def add_edge(self, u: NodeId, v: NodeId, weight: int) -> None:
        self.graph.add_edge(u, v, weight)

    def add_multi_entry_dept(
        self,
        hub_id: NodeId,
        name: str,
        entrance_ids: Iterable[NodeId],
        internal_distance: int = 0,
    ) -> None:
        """Add a named hub node joined to each entrance at a fixed distance.

        Entrances are not connected to each other directly; walking from one
        door to another goes through the hub (2 * internal_distance).
        """

        self.set_location_name(hub_id, name)
        for entrance_id in entrance_ids:
            self.add_edge(hub_id, entrance_id, internal_distance)

    def freeze(self) -> CampusMap:
        self.graph.freeze()
        self.registry.frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self.graph.frozen and self.registry.frozen

    def named_locations(self) -> list[tuple[NodeId, str]]:
        return sorted(self.registry.names.items(), key=lambda item: item[0])
