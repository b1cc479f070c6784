from __future__ import annotations

import itertools
import random

import networkx as nx
import pytest

from src.domain.algorithms.dijkstra import (
    DijkstraResult,
    dijkstra,
    find_shortest_path,
    reconstruct_path,
)
from src.domain.exceptions import InternalInvariantViolation, InvalidNode, NoPathFound
from src.domain.models import CampusGraph, CampusMap


def _graph(edges: list[tuple[int, int, int]]) -> CampusGraph:
    g = CampusGraph()
    for u, v, w in edges:
        g.add_edge(u, v, w)
    return g


def _scenario_graph() -> CampusGraph:
    return _graph([(1, 2, 20), (2, 3, 20), (3, 4, 60), (1, 41, 30)])


def test_direct_edge_route() -> None:
    path = find_shortest_path(_scenario_graph(), 1, 41)

    assert path.distance_m == 30
    assert path.nodes == (1, 41)
    assert path.leg_distances_m == (30,)


def test_multi_hop_route() -> None:
    path = find_shortest_path(_scenario_graph(), 1, 4)

    assert path.distance_m == 100
    assert path.nodes == (1, 2, 3, 4)
    assert path.leg_distances_m == (20, 20, 60)


def test_route_is_symmetric_in_distance() -> None:
    g = _scenario_graph()
    forward = find_shortest_path(g, 1, 4)
    backward = find_shortest_path(g, 4, 1)

    assert forward.distance_m == backward.distance_m
    assert backward.nodes == tuple(reversed(forward.nodes))


def test_multi_entrance_hub_is_the_only_link_between_entrances() -> None:
    campus = CampusMap()
    campus.add_multi_entry_dept(99, "Admin Block (Main)", [49, 50], 25)

    path = find_shortest_path(campus.graph, 49, 50)

    assert path.distance_m == 50
    assert path.nodes == (49, 99, 50)


def test_start_equals_end() -> None:
    path = find_shortest_path(_scenario_graph(), 3, 3)

    assert path.distance_m == 0
    assert path.nodes == (3,)
    assert path.leg_distances_m == ()


@pytest.mark.parametrize(("start", "end"), [(1, 999), (999, 1), (500, 501)])
def test_unknown_node_raises_invalid_node(start: int, end: int) -> None:
    with pytest.raises(InvalidNode) as info:
        find_shortest_path(_scenario_graph(), start, end)

    assert all(n not in (1, 2, 3, 4, 41) for n in info.value.node_ids)


def test_disconnected_components_raise_no_path_found() -> None:
    g = _graph([(1, 2, 10), (3, 4, 10)])

    with pytest.raises(NoPathFound):
        find_shortest_path(g, 1, 4)


def test_lighter_parallel_edge_wins_and_is_reported() -> None:
    g = _graph([(1, 2, 50), (1, 2, 10), (2, 3, 5)])

    path = find_shortest_path(g, 1, 3)

    assert path.distance_m == 15
    # The leg carries the weight of the edge that was relaxed, not any
    # other edge between the same pair.
    assert path.leg_distances_m == (10, 5)


def test_stale_frontier_entries_are_skipped() -> None:
    # 3 is first reached at 100 via 1, then improved to 3 via 2.
    g = _graph([(1, 3, 100), (1, 2, 1), (2, 3, 2), (3, 4, 1)])

    result = dijkstra(g, source=1)

    assert result.distance_by_node == {1: 0, 2: 1, 3: 3, 4: 4}
    assert result.prev_by_node[3] == (2, 2)


def test_prefix_distances_are_non_decreasing_along_path() -> None:
    g = _graph([(1, 2, 0), (2, 3, 7), (3, 4, 0), (4, 5, 3), (1, 5, 50)])

    path = find_shortest_path(g, 1, 5)
    prefix = list(itertools.accumulate(path.leg_distances_m, initial=0))

    assert path.nodes == (1, 2, 3, 4, 5)
    assert prefix == sorted(prefix)
    assert prefix[-1] == path.distance_m


def test_reconstruct_path_detects_broken_chain() -> None:
    result = DijkstraResult(
        source=1, distance_by_node={1: 0, 3: 5}, prev_by_node={3: (2, 5)}
    )

    with pytest.raises(InternalInvariantViolation):
        reconstruct_path(result, target=3)


def test_reconstruct_path_detects_cycle() -> None:
    result = DijkstraResult(
        source=1,
        distance_by_node={1: 0, 2: 1, 3: 1},
        prev_by_node={2: (3, 1), 3: (2, 1)},
    )

    with pytest.raises(InternalInvariantViolation):
        reconstruct_path(result, target=3)


def _brute_force_distance(reference: nx.Graph, start: int, end: int) -> int | None:
    best: int | None = None
    for nodes in nx.all_simple_paths(reference, start, end):
        total = nx.path_weight(reference, nodes, weight="weight")
        if best is None or total < best:
            best = total
    return best


@pytest.mark.parametrize("seed", range(12))
def test_distance_matches_brute_force_on_random_graphs(seed: int) -> None:
    rng = random.Random(seed)
    nodes = list(range(1, 8))
    pairs = rng.sample(list(itertools.combinations(nodes, 2)), k=9)

    g = CampusGraph()
    # Simple graph holding the lightest edge per pair, for the oracle.
    reference = nx.Graph()
    reference.add_nodes_from(nodes)
    for u, v in pairs:
        for _ in range(rng.choice([1, 1, 2])):
            w = rng.randint(0, 40)
            g.add_edge(u, v, w)
            if not reference.has_edge(u, v) or w < reference[u][v]["weight"]:
                reference.add_edge(u, v, weight=w)

    known = sorted(g.nodes())
    for start, end in itertools.product(known, repeat=2):
        if start == end:
            continue
        expected = _brute_force_distance(reference, start, end)
        if expected is None:
            with pytest.raises(NoPathFound):
                find_shortest_path(g, start, end)
            continue

        path = find_shortest_path(g, start, end)
        assert path.distance_m == expected
        assert sum(path.leg_distances_m) == expected
        assert path.nodes[0] == start and path.nodes[-1] == end
        for (a, b), w in zip(zip(path.nodes, path.nodes[1:]), path.leg_distances_m):
            assert (b, w) in g.neighbors(a)
