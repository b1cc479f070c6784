from __future__ import annotations

import networkx as nx
import pytest

from src.domain.models import UNNAMED_WAYPOINT, CampusGraph, CampusMap, LocationRegistry


def test_add_edge_inserts_both_directions() -> None:
    g = CampusGraph()
    g.add_edge(1, 2, 20)
    g.add_edge(2, 3, 35)

    assert (2, 20) in g.neighbors(1)
    assert (1, 20) in g.neighbors(2)
    assert (3, 35) in g.neighbors(2)
    assert (2, 35) in g.neighbors(3)
    assert g.has_node(1) and 3 in g


def test_neighbors_of_unknown_node_is_empty() -> None:
    g = CampusGraph()
    g.add_edge(1, 2, 5)

    assert g.neighbors(42) == []
    assert not g.has_node(42)


def test_parallel_edges_are_kept() -> None:
    g = CampusGraph()
    g.add_edge(1, 2, 50)
    g.add_edge(2, 1, 10)

    assert sorted(g.neighbors(1)) == [(2, 10), (2, 50)]
    assert sorted(g.neighbors(2)) == [(1, 10), (1, 50)]
    assert g.edge_count == 2


def test_zero_weight_edge_is_allowed() -> None:
    g = CampusGraph()
    g.add_edge(7, 8, 0)
    assert g.neighbors(7) == [(8, 0)]


@pytest.mark.parametrize("weight", [-1, 2.5, "10", None, True])
def test_add_edge_rejects_invalid_weights(weight: object) -> None:
    g = CampusGraph()
    with pytest.raises(ValueError):
        g.add_edge(1, 2, weight)  # type: ignore[arg-type]
    assert not g.has_node(1)


def test_registry_unnamed_nodes_render_as_path_turn() -> None:
    reg = LocationRegistry()
    reg.set_name(1, "Main Gate")

    assert reg.name_for(1) == "Main Gate"
    assert reg.name_for(2) is None
    assert reg.display_name(2) == UNNAMED_WAYPOINT == "Path/Turn"
    assert 1 in reg and 2 not in reg


def test_multi_entry_dept_names_hub_and_links_each_entrance() -> None:
    campus = CampusMap()
    campus.add_multi_entry_dept(99, "Admin Block (Main)", [49, 50], 25)

    assert campus.registry.name_for(99) == "Admin Block (Main)"
    assert sorted(campus.graph.neighbors(99)) == [(49, 25), (50, 25)]
    # Entrances only meet through the hub.
    assert campus.graph.neighbors(49) == [(99, 25)]
    assert campus.graph.neighbors(50) == [(99, 25)]


def test_multi_entry_dept_defaults_to_zero_internal_distance() -> None:
    campus = CampusMap()
    campus.add_multi_entry_dept(33, "IAA", (42, 72))

    assert sorted(campus.graph.neighbors(33)) == [(42, 0), (72, 0)]


def test_frozen_map_rejects_mutation() -> None:
    campus = CampusMap()
    campus.add_edge(1, 2, 10)
    campus.set_location_name(1, "Main Gate")
    campus.freeze()

    assert campus.frozen
    with pytest.raises(nx.NetworkXError):
        campus.add_edge(2, 3, 10)
    with pytest.raises(RuntimeError):
        campus.set_location_name(2, "Somewhere")

    # Reads still work.
    assert campus.graph.neighbors(1) == [(2, 10)]


def test_named_locations_sorted_by_id() -> None:
    campus = CampusMap()
    campus.set_location_name(41, "LTC & Library")
    campus.set_location_name(1, "Main Gate")

    assert campus.named_locations() == [(1, "Main Gate"), (41, "LTC & Library")]
