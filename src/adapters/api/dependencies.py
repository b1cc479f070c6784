from __future__ import annotations

import os
import threading
from functools import lru_cache

from src.adapters.persistence import BuiltinCampusMapRepository, JsonCampusMapRepository
from src.app.ports.output import ICampusMapRepository
from src.app.services.history_log import HistoryLog
from src.app.services.navigator_service import NavigatorService


def get_campus_map_repository() -> ICampusMapRepository:
    if os.getenv("CAMPUS_MAP_PATH"):
        return JsonCampusMapRepository()
    return BuiltinCampusMapRepository()


def build_navigator_service() -> NavigatorService:
    campus = get_campus_map_repository().load_map()

    history = HistoryLog()
    # Allow tuning via env without changing code.
    if os.getenv("NAVIGATOR_RECENT_LIMIT"):
        history.recent_limit = int(os.environ["NAVIGATOR_RECENT_LIMIT"])

    return NavigatorService(campus_map=campus, history=history)


_service_lock = threading.Lock()


@lru_cache(maxsize=1)
def _shared_navigator_service() -> NavigatorService:
    return build_navigator_service()


def get_navigator_service() -> NavigatorService:
    # One service per process: the history lives as long as the app does.
    # The lock keeps concurrent first requests from building two services.
    with _service_lock:
        return _shared_navigator_service()
