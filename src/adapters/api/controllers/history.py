from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from src.adapters.api.dependencies import get_navigator_service
from src.adapters.api.schemas.routes import HistorySchema, RouteRecordSchema
from src.app.services.navigator_service import NavigatorService

router = APIRouter(tags=["history"])


@router.get("/history", response_model=HistorySchema)
def view_history(
    limit: int | None = Query(default=None, ge=1),
    service: NavigatorService = Depends(get_navigator_service),
) -> HistorySchema:
    return HistorySchema(
        recent=service.history.recent(limit),
        records=[
            RouteRecordSchema(
                from_name=r.from_name, to_name=r.to_name, distance_m=r.distance_m
            )
            for r in service.history.records()
        ],
    )
