from __future__ import annotations

import logging
from dataclasses import dataclass

from src.app.ports.output import ICampusMapRepository
from src.domain.models import CampusMap

logger = logging.getLogger(__name__)

# Air University campus. Ids 1-99 are outdoor areas and entrances, 100+ are
# rooms inside NCSA.

LOCATION_NAMES: dict[int, str] = {
    1: "Main Gate",
    20: "Sports Complex",
    41: "LTC & Library",
    42: "IAA East Entrance",
    43: "FMC (Medical)",
    44: "NCSA",
    45: "B-Block",
    46: "A-Block",
    47: "C-Block (Front)",
    48: "C-Block (Back)",
    49: "Admin Block (Front)",
    50: "Admin Block (Back)",
    71: "AU Deli",
    72: "AU Arena (IAA West)",
    73: "CAFE",
    74: "Sports Complex (Side)",
    75: "C-Block Parking",
    76: "Masjid",
    77: "FMC Parking",
}

# (u, v, meters)
EDGES: tuple[tuple[int, int, int], ...] = (
    # Main gate
    (1, 2, 20),
    (1, 6, 70),
    (1, 41, 30),
    # Right-hand road towards the Deli and FMC
    (2, 3, 20),
    (3, 4, 60),
    (4, 5, 20),
    (4, 71, 40),
    (5, 77, 60),
    (77, 43, 60),
    (71, 41, 40),
    (71, 13, 30),
    (13, 77, 20),
    (13, 14, 60),
    (14, 43, 20),
    # Top path: FMC -> NCSA
    (43, 15, 20),
    (15, 44, 20),
    (44, 16, 25),
    # Left-hand road and IAA
    (6, 7, 10),
    (6, 8, 40),
    (6, 42, 40),
    (42, 13, 60),
    (8, 72, 40),
    # Bottom path
    (8, 9, 10),
    (9, 10, 30),
    (10, 17, 60),
    (10, 11, 30),
    (11, 12, 40),
    (11, 19, 40),
    (19, 18, 20),
    (19, 50, 15),
    # Around the cafe
    (72, 14, 40),
    (72, 24, 5),
    (24, 73, 5),
    (24, 17, 25),
    # Lawns
    (17, 18, 30),
    (17, 44, 60),
    (18, 49, 15),
    (18, 16, 50),
    # A/B blocks
    (16, 45, 15),
    (49, 45, 40),
    (45, 46, 15),
    (46, 21, 40),
    (46, 22, 10),
    # Admin and sports complex
    (49, 50, 20),
    (50, 20, 15),
    (20, 74, 30),
    (74, 12, 10),
    # C-Block back entrance is only reachable from its parking
    (12, 75, 90),
    (75, 48, 20),
    (20, 21, 20),
    (49, 21, 15),
    (21, 47, 55),
    # Masjid
    (47, 76, 50),
    (22, 76, 55),
)

# (hub id, name, entrances, internal distance)
MULTI_ENTRY_DEPTS: tuple[tuple[int, str, tuple[int, ...], int], ...] = (
    (33, "IAA (Institute of Avionics)", (42, 72), 30),
    (99, "Admin Block (Main)", (49, 50), 25),
    (88, "C-Block", (47, 48), 25),
)

NCSA_ID = 44

# (room id, name, distance from the NCSA entrance)
NCSA_ROOMS: tuple[tuple[int, str, int], ...] = (
    (101, "NCSA-CR-01", 30),
    (102, "NCSA-CR-02", 30),
    (103, "NCSA-CR-03", 50),
    (104, "NCSA-CR-04", 60),
    (105, "MAM Memona Office", 30),
    (106, "NCSA Lab 1", 20),
    (107, "NCSA Lab 2", 55),
    (108, "HOD Office", 20),
)

FEATURED_DESTINATIONS: tuple[int, ...] = (
    1, 99, 33,
    88, 46, 45,
    44, 43, 41,
    76, 73, 71,
    20, 77, 75,
)  # fmt: skip


@dataclass(slots=True)
class BuiltinCampusMapRepository(ICampusMapRepository):
    """The Air University campus map compiled into the package."""

    def load_map(self) -> CampusMap:
        campus = CampusMap(featured_destinations=FEATURED_DESTINATIONS)

        for node_id, name in LOCATION_NAMES.items():
            campus.set_location_name(node_id, name)

        for u, v, weight in EDGES:
            campus.add_edge(u, v, weight)

        for hub_id, name, entrances, internal in MULTI_ENTRY_DEPTS:
            campus.add_multi_entry_dept(hub_id, name, entrances, internal)

        rooms: dict[int, int] = {}
        for choice, (room_id, name, distance) in enumerate(NCSA_ROOMS, start=1):
            campus.set_location_name(room_id, name)
            campus.add_edge(NCSA_ID, room_id, distance)
            rooms[choice] = room_id
        campus.room_menus[NCSA_ID] = rooms

        logger.debug(
            "Built-in campus map: %d nodes, %d edges",
            campus.graph.node_count,
            campus.graph.edge_count,
        )
        return campus.freeze()
