from __future__ import annotations

from src.domain.models import Itinerary, LocationRegistry, ShortestPath, Waypoint

RULE = "=" * 44


def build_itinerary(registry: LocationRegistry, path: ShortestPath) -> Itinerary:
    """Turn a shortest path into named waypoints.

    Every node except the last two becomes a waypoint carrying the distance to
    the next node. The second-to-last node is the arrival point (the
    destination's entrance) and the destination itself gets no step.
    """

    nodes = path.nodes
    waypoints = tuple(
        Waypoint(
            node_id=node_id,
            name=registry.name_for(node_id),
            leg_distance_m=path.leg_distances_m[i],
        )
        for i, node_id in enumerate(nodes[:-2])
    )

    return Itinerary(
        start=path.start,
        end=path.end,
        start_name=registry.display_name(path.start),
        end_name=registry.display_name(path.end),
        total_distance_m=path.distance_m,
        path=nodes,
        leg_distances_m=path.leg_distances_m,
        waypoints=waypoints,
        arrival_node=nodes[-2] if len(nodes) >= 2 else None,
    )


def render_itinerary(itinerary: Itinerary) -> str:
    lines = [
        RULE,
        f"   ROUTE FOUND: {itinerary.total_distance_m} meters",
        RULE,
    ]

    for wp in itinerary.waypoints:
        label = f"** {wp.name} **" if wp.is_named else "(Walkway)"
        lines.append(f" [{wp.node_id}] {label}")
        lines.append("  |")
        lines.append(f"  V  {wp.leg_distance_m}m")

    if itinerary.arrival_node is None:
        lines.append(f" [{itinerary.end}] You are already at {itinerary.end_name}")
    else:
        lines.append(
            f" [{itinerary.arrival_node}] Arrived at {itinerary.end_name} Entrance"
        )

    lines.append(RULE)
    return "\n".join(lines)
