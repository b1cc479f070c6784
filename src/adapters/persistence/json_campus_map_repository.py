from __future__ import annotations

import json
import logging
import math
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from src.app.ports.output import ICampusMapRepository
from src.domain.exceptions import MapDataError
from src.domain.models import CampusMap

logger = logging.getLogger(__name__)

_INT_KEY = re.compile(r"-?\d+")


def _int_value(raw: Any, what: str) -> int:
    # Ints, or digit strings since JSON object keys are always strings.
    if isinstance(raw, bool):
        raise MapDataError(f"Invalid {what}: {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str) and _INT_KEY.fullmatch(raw.strip()):
        return int(raw.strip())
    raise MapDataError(f"Invalid {what}: {raw!r}")


def _node_id(raw: Any) -> int:
    return _int_value(raw, "node id")


def _distance(raw: Any) -> int:
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise MapDataError(f"Invalid distance: {raw!r}")
    if not math.isfinite(raw) or raw != int(raw) or raw < 0:
        raise MapDataError(f"Distance must be a non-negative integer: {raw!r}")
    return int(raw)


def _section(doc: dict[str, Any], key: str, kind: type, default: Any) -> Any:
    value = doc.get(key)
    if value is None:
        return default
    if not isinstance(value, kind):
        raise MapDataError(f"'{key}' must be a JSON {kind.__name__}, got {value!r}")
    return value


@dataclass(slots=True)
class JsonCampusMapRepository(ICampusMapRepository):
    """Loads a campus map from a JSON document.

    Layout:
      {
        "locations": {"1": "Main Gate", ...},
        "edges": [[1, 2, 20], ...],
        "multi_entry": [
          {"hub": 99, "name": "Admin Block", "entrances": [49, 50],
           "internal_distance": 25}
        ],
        "featured": [1, 99],
        "room_menus": {"44": {"1": 101, "2": 102}}
      }

    Only "edges" is required.

    Env vars:
      - CAMPUS_MAP_PATH: path to the JSON file
    """

    path: str | Path | None = None

    def _path(self) -> Path:
        value = self.path or os.getenv("CAMPUS_MAP_PATH")
        if not value:
            raise RuntimeError("Campus map path not configured (set CAMPUS_MAP_PATH)")
        return Path(value)

    def load_map(self) -> CampusMap:
        path = self._path()
        with path.open("r", encoding="utf-8") as fp:
            try:
                doc = json.load(fp)
            except json.JSONDecodeError as exc:
                raise MapDataError(f"{path}: invalid JSON ({exc})") from exc

        if not isinstance(doc, dict) or not isinstance(doc.get("edges"), list):
            raise MapDataError(f"{path}: expected an object with an 'edges' list")

        locations = _section(doc, "locations", dict, {})
        multi_entry = _section(doc, "multi_entry", list, [])
        featured = _section(doc, "featured", list, [])
        room_menus = _section(doc, "room_menus", dict, {})

        campus = CampusMap(featured_destinations=tuple(_node_id(n) for n in featured))

        for raw_id, name in locations.items():
            if not isinstance(name, str) or not name.strip():
                raise MapDataError(f"Invalid name for node {raw_id!r}: {name!r}")
            campus.set_location_name(_node_id(raw_id), name.strip())

        for entry in doc["edges"]:
            if not isinstance(entry, (list, tuple)) or len(entry) != 3:
                raise MapDataError(f"Edge must be [u, v, meters]: {entry!r}")
            u, v, weight = entry
            campus.add_edge(_node_id(u), _node_id(v), _distance(weight))

        for dept in multi_entry:
            if not isinstance(dept, dict) or not isinstance(dept.get("entrances"), list):
                raise MapDataError(f"Invalid multi-entry entry: {dept!r}")
            try:
                hub = _node_id(dept["hub"])
                name = str(dept["name"])
            except KeyError as exc:
                raise MapDataError(f"Invalid multi-entry entry: {dept!r}") from exc
            entrances = [_node_id(e) for e in dept["entrances"]]
            internal = _distance(dept.get("internal_distance", 0))
            campus.add_multi_entry_dept(hub, name, entrances, internal)

        for raw_id, choices in room_menus.items():
            if not isinstance(choices, dict):
                raise MapDataError(f"Room menu for {raw_id!r} must be an object")
            campus.room_menus[_node_id(raw_id)] = {
                _int_value(choice, "menu choice"): _node_id(room)
                for choice, room in choices.items()
            }

        self._check_references(campus)

        logger.debug(
            "Loaded campus map from %s: %d nodes, %d edges",
            path,
            campus.graph.node_count,
            campus.graph.edge_count,
        )
        return campus.freeze()

    def _check_references(self, campus: CampusMap) -> None:
        """Featured destinations and menu rooms must be routable nodes."""

        referenced = list(campus.featured_destinations)
        for building, rooms in campus.room_menus.items():
            referenced.append(building)
            referenced.extend(rooms.values())

        unknown = sorted({n for n in referenced if not campus.graph.has_node(n)})
        if unknown:
            raise MapDataError(f"Unknown node id(s) referenced: {unknown}")
