from __future__ import annotations

from typing import Hashable


class RoutingError(Exception):
    """Base exception for route calculation failures."""


class InvalidNode(RoutingError):
    """Raised when the start or destination is not a node of the campus graph."""

    def __init__(self, node_ids: tuple[Hashable, ...]) -> None:
        self.node_ids = node_ids
        joined = ", ".join(str(n) for n in node_ids)
        super().__init__(f"Unknown node id(s): {joined}")


class NoPathFound(RoutingError):
    """Raised when no feasible path exists for the given request."""


class InternalInvariantViolation(RoutingError):
    """Raised when the predecessor chain does not lead back to the start.

    Means a corrupted graph or an algorithm bug, never a user error.
    """
