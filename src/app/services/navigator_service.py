from __future__ import annotations

import logging
from dataclasses import dataclass, field

from src.app.services.history_log import HistoryLog
from src.domain.algorithms.dijkstra import find_shortest_path
from src.domain.algorithms.itinerary import build_itinerary, render_itinerary
from src.domain.exceptions import InvalidNode, NoPathFound
from src.domain.models import CampusMap, Itinerary, NodeId, RouteOutcome, RouteStatus

logger = logging.getLogger(__name__)

INVALID_NODE_MESSAGE = "[Error] Invalid Node ID. Check your map numbers."
NO_PATH_MESSAGE = "[!] No path found."


@dataclass(frozen=True, slots=True)
class HistoryView:
    recent: str
    full_log: str

    @property
    def text(self) -> str:
        return f"{self.recent}\n\n{self.full_log}"


@dataclass(slots=True)
class NavigatorService:
    """Application service (use case) for campus route queries.

    The campus map is injected already populated; the service only reads it.
    The history log is owned by the service and written once per successful
    query.
    """

    campus_map: CampusMap
    history: HistoryLog = field(default_factory=HistoryLog)

    def calculate_itinerary(self, *, start: NodeId, end: NodeId) -> Itinerary:
        path = find_shortest_path(self.campus_map.graph, start, end)
        itinerary = build_itinerary(self.campus_map.registry, path)

        self.history.record_query(
            itinerary.start_name, itinerary.end_name, itinerary.total_distance_m
        )
        logger.info(
            "Route %s -> %s: %sm over %d nodes",
            start,
            end,
            itinerary.total_distance_m,
            len(itinerary.path),
        )
        return itinerary

    def find_route(self, start: NodeId, end: NodeId) -> RouteOutcome:
        try:
            itinerary = self.calculate_itinerary(start=start, end=end)
        except InvalidNode as exc:
            logger.info("Rejected route query: %s", exc)
            return RouteOutcome(
                status=RouteStatus.INVALID_NODE, message=INVALID_NODE_MESSAGE
            )
        except NoPathFound as exc:
            logger.info("No route: %s", exc)
            return RouteOutcome(status=RouteStatus.NOT_FOUND, message=NO_PATH_MESSAGE)

        return RouteOutcome(
            status=RouteStatus.FOUND,
            message=render_itinerary(itinerary),
            itinerary=itinerary,
        )

    def view_history(self, limit: int | None = None) -> HistoryView:
        return HistoryView(
            recent=self.history.show_recent(limit),
            full_log=self.history.show_full_log(),
        )

    def locations(self) -> list[tuple[NodeId, str]]:
        return self.campus_map.named_locations()
