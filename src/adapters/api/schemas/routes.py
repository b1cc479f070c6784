from __future__ import annotations

from pydantic import BaseModel, Field


class RouteRequestSchema(BaseModel):
    start: int
    end: int


class WaypointSchema(BaseModel):
    node_id: int
    name: str | None = None
    leg_distance_m: int | None = None


class ItinerarySchema(BaseModel):
    start: int
    end: int
    start_name: str
    end_name: str
    total_distance_m: int = Field(..., ge=0)
    path: list[int]
    leg_distances_m: list[int] = []
    waypoints: list[WaypointSchema] = []
    arrival_node: int | None = None
    text: str


class RouteRecordSchema(BaseModel):
    from_name: str
    to_name: str
    distance_m: int


class HistorySchema(BaseModel):
    recent: list[str] = []
    records: list[RouteRecordSchema] = []


class LocationSchema(BaseModel):
    node_id: int
    name: str
    featured: bool = False
    rooms: dict[int, int] | None = None
