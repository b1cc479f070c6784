from __future__ import annotations

import logging
import os
from typing import Callable

from src.adapters.api.dependencies import build_navigator_service
from src.app.services.navigator_service import NavigatorService
from src.domain.models import CampusMap

Reader = Callable[[str], str]
Writer = Callable[[str], None]

MENU = "\n".join(
    [
        "",
        "--- AIR UNIVERSITY NAVIGATOR ---",
        "1. Find Shortest Route",
        "2. View Navigation History",
        "0. Exit",
    ]
)


def _read_int(read: Reader, write: Writer, prompt: str) -> int:
    while True:
        raw = read(prompt).strip()
        try:
            return int(raw)
        except ValueError:
            write(f"[!] Please enter a number, got {raw!r}.")


def _destinations_menu(campus: CampusMap) -> str:
    cells = [
        f"[{node_id}] {campus.registry.display_name(node_id)}"
        for node_id in campus.featured_destinations
    ]
    lines = [" ----------------------- COMMON DESTINATIONS -----------------------"]
    for i in range(0, len(cells), 3):
        lines.append("  " + "".join(f"{c:<30}" for c in cells[i : i + 3]).rstrip())
    lines.append(" -------------------------------------------------------------------")
    return "\n".join(lines)


def _pick_room(
    campus: CampusMap, building: int, read: Reader, write: Writer
) -> int:
    """Let the user narrow a destination down to a room inside it.

    Choice 0, or any choice not on the menu, keeps the main entrance.
    """

    rooms = campus.room_menus.get(building)
    if not rooms:
        return building

    name = campus.registry.display_name(building)
    write(f"\n   >>> {name.upper()} DEPARTMENT ROOMS <<<")
    write(f"   Which room in {name} are you looking for?")
    for choice, room_id in sorted(rooms.items()):
        write(f"   {choice}. {campus.registry.display_name(room_id)}")
    write("   0. Just Main Entrance")

    choice = _read_int(read, write, "   Enter Choice: ")
    return rooms.get(choice, building)


def run(service: NavigatorService, *, read: Reader = input, write: Writer = print) -> None:
    campus = service.campus_map
    try:
        while True:
            write(MENU)
            choice = _read_int(read, write, "Select Option: ")

            if choice == 0:
                return
            if choice == 1:
                write("")
                write(_destinations_menu(campus))
                start = _read_int(read, write, "Enter Start Node ID: ")
                end = _read_int(read, write, "Enter Destination Node ID: ")
                end = _pick_room(campus, end, read, write)
                write("")
                write(service.find_route(start, end).message)
            elif choice == 2:
                write("")
                write(service.view_history().text)
    except EOFError:
        # stdin closed (Ctrl-D or end of piped input)
        return


def main() -> None:
    logging.basicConfig(
        level=(os.getenv("NAVIGATOR_LOG_LEVEL") or "WARNING").strip().upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run(build_navigator_service())


if __name__ == "__main__":
    main()
