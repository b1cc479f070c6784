from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass

from src.domain.exceptions import InternalInvariantViolation, InvalidNode, NoPathFound
from src.domain.models import CampusGraph, NodeId, ShortestPath


@dataclass(frozen=True, slots=True)
class DijkstraResult:
    """Settled distances and the predecessor tree of one Dijkstra run.

    prev_by_node maps a node to (predecessor, weight of the relaxed edge).
    """

    source: NodeId
    distance_by_node: dict[NodeId, int]
    prev_by_node: dict[NodeId, tuple[NodeId, int]]


def dijkstra(
    graph: CampusGraph, *, source: NodeId, target: NodeId | None = None
) -> DijkstraResult:
    """Single-source shortest distances over non-negative weights.

    Stops as soon as target is popped at its final distance; with no target
    the whole component of source is settled. Unreached nodes are absent from
    distance_by_node. Nodes at equal distance are popped in no guaranteed
    order.
    """

    dist: dict[NodeId, int] = {source: 0}
    prev: dict[NodeId, tuple[NodeId, int]] = {}

    # The counter keeps heap entries comparable without comparing node ids.
    seq = itertools.count()
    frontier: list[tuple[int, int, NodeId]] = [(0, next(seq), source)]

    while frontier:
        d, _, u = heapq.heappop(frontier)
        if d > dist[u]:
            continue  # stale entry
        if target is not None and u == target:
            break

        for v, weight in graph.neighbors(u):
            candidate = d + weight
            if v not in dist or candidate < dist[v]:
                dist[v] = candidate
                prev[v] = (u, weight)
                heapq.heappush(frontier, (candidate, next(seq), v))

    return DijkstraResult(source=source, distance_by_node=dist, prev_by_node=prev)


def reconstruct_path(
    result: DijkstraResult, *, target: NodeId
) -> tuple[list[NodeId], list[int]]:
    """Walk predecessors back from target to the source.

    Returns the nodes in source -> target order and the weight of each edge
    between consecutive nodes.
    """

    nodes: list[NodeId] = [target]
    legs: list[int] = []
    cur = target
    # A simple path has at most one edge per recorded predecessor.
    budget = len(result.prev_by_node)
    while cur != result.source:
        step = result.prev_by_node.get(cur)
        if step is None or budget == 0:
            raise InternalInvariantViolation(
                f"Predecessor chain from {target!r} does not reach {result.source!r}"
            )
        cur, weight = step
        nodes.append(cur)
        legs.append(weight)
        budget -= 1

    nodes.reverse()
    legs.reverse()
    return nodes, legs


def find_shortest_path(
    graph: CampusGraph, start: NodeId, end: NodeId
) -> ShortestPath:
    unknown = tuple(n for n in dict.fromkeys((start, end)) if not graph.has_node(n))
    if unknown:
        raise InvalidNode(unknown)

    result = dijkstra(graph, source=start, target=end)
    distance = result.distance_by_node.get(end)
    if distance is None:
        raise NoPathFound(f"No path from {start!r} to {end!r}")

    nodes, legs = reconstruct_path(result, target=end)
    return ShortestPath(
        distance_m=distance, nodes=tuple(nodes), leg_distances_m=tuple(legs)
    )
