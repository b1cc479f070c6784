from __future__ import annotations

import threading
from dataclasses import dataclass, field

from src.domain.models import RouteRecord

DEFAULT_RECENT_LIMIT = 5


@dataclass(slots=True)
class HistoryLog:
    """In-memory navigation history for the lifetime of the process.

    Two views over the same successful queries:
      - recent: "from -> to" strings, most recent first (a stack)
      - records: every RouteRecord in chronological order

    Append-only: no eviction, no deduplication, no persistence.
    """

    recent_limit: int = DEFAULT_RECENT_LIMIT

    _records: list[RouteRecord] = field(default_factory=list, init=False)
    _recent: list[str] = field(default_factory=list, init=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False)

    def record_query(self, from_name: str, to_name: str, distance_m: int) -> RouteRecord:
        record = RouteRecord(from_name=from_name, to_name=to_name, distance_m=distance_m)
        with self._lock:
            self._records.append(record)
            self._recent.append(f"{from_name} -> {to_name}")
        return record

    def recent(self, limit: int | None = None) -> list[str]:
        n = self.recent_limit if limit is None else limit
        if n <= 0:
            return []
        with self._lock:
            return list(reversed(self._recent[-n:]))

    def records(self) -> tuple[RouteRecord, ...]:
        with self._lock:
            return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def show_recent(self, limit: int | None = None) -> str:
        entries = self.recent(limit)
        if not entries:
            return "[!] No recent searches found."

        lines = ["--- Recently Visited ---"]
        lines.extend(f"{i}. {entry}" for i, entry in enumerate(entries, start=1))
        lines.append("-" * 24)
        return "\n".join(lines)

    def show_full_log(self) -> str:
        records = self.records()
        if not records:
            return "[!] History log is empty."

        lines = ["--- Full Route History ---"]
        lines.extend(
            f"Route: {r.from_name} to {r.to_name} | Distance: {r.distance_m}m"
            for r in records
        )
        lines.append("-" * 26)
        return "\n".join(lines)
