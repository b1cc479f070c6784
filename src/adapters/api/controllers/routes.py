from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from src.adapters.api.dependencies import get_navigator_service
from src.adapters.api.schemas.routes import (
    ItinerarySchema,
    LocationSchema,
    RouteRequestSchema,
    WaypointSchema,
)
from src.app.services.navigator_service import NavigatorService
from src.domain.algorithms.itinerary import render_itinerary
from src.domain.exceptions import InvalidNode, NoPathFound
from src.domain.models import Itinerary

router = APIRouter(tags=["routes"])


def _itinerary_to_schema(itinerary: Itinerary) -> ItinerarySchema:
    return ItinerarySchema(
        start=itinerary.start,
        end=itinerary.end,
        start_name=itinerary.start_name,
        end_name=itinerary.end_name,
        total_distance_m=itinerary.total_distance_m,
        path=list(itinerary.path),
        leg_distances_m=list(itinerary.leg_distances_m),
        waypoints=[
            WaypointSchema(
                node_id=wp.node_id, name=wp.name, leg_distance_m=wp.leg_distance_m
            )
            for wp in itinerary.waypoints
        ],
        arrival_node=itinerary.arrival_node,
        text=render_itinerary(itinerary),
    )


@router.post("/routes", response_model=ItinerarySchema)
def find_route(
    req: RouteRequestSchema,
    service: NavigatorService = Depends(get_navigator_service),
) -> ItinerarySchema:
    try:
        itinerary = service.calculate_itinerary(start=req.start, end=req.end)
    except InvalidNode as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except NoPathFound as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return _itinerary_to_schema(itinerary)


@router.get("/locations", response_model=list[LocationSchema])
def list_locations(
    service: NavigatorService = Depends(get_navigator_service),
) -> list[LocationSchema]:
    campus = service.campus_map
    featured = set(campus.featured_destinations)
    return [
        LocationSchema(
            node_id=node_id,
            name=name,
            featured=node_id in featured,
            rooms=campus.room_menus.get(node_id),
        )
        for node_id, name in service.locations()
    ]
