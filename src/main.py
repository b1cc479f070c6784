from __future__ import annotations

import logging
import os

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.adapters.api.controllers.history import router as history_router
from src.adapters.api.controllers.routes import router as routes_router
from src.domain.exceptions import MapDataError

logger = logging.getLogger(__name__)

app = FastAPI(title="Campus Navigator")
app.include_router(routes_router)
app.include_router(history_router)

# Map loading problems are configuration errors an operator has to see; the
# detail of anything else (e.g. a broken predecessor chain) stays hidden.
CONFIG_ERRORS: tuple[type[Exception], ...] = (FileNotFoundError, MapDataError)


def _reveal_errors() -> bool:
    raw = (os.getenv("NAVIGATOR_REVEAL_ERRORS") or "").strip().lower()
    return raw in {"1", "true", "yes", "on"}


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return unexpected failures as JSON instead of a plain-text 500."""

    logger.exception("Unhandled exception", extra={"path": str(request.url.path)})

    if _reveal_errors() or isinstance(exc, CONFIG_ERRORS):
        detail = str(exc) or exc.__class__.__name__
    else:
        detail = "Internal Server Error"

    return JSONResponse(status_code=500, content={"detail": detail})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
