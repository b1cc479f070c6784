from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models import CampusMap


class ICampusMapRepository(ABC):
    """Port for loading the static campus map (nodes, edges, names)."""

    @abstractmethod
    def load_map(self) -> CampusMap:
        """Build the map once and return it frozen."""
