from __future__ import annotations

import logging
import os
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from geopath.adapters.api.controllers.pathfinding import router as pathfinding_router
from geopath.domain.exceptions import GeocodingError, RoutingError

logger = logging.getLogger("uvicorn.error")

app = FastAPI(title="geopath", version="1.0.0")
app.include_router(pathfinding_router)


def _env_bool(name: str) -> bool:
    return (os.getenv(name) or "").strip().lower() in {"1", "true", "yes", "on"}


@app.exception_handler(GeocodingError)
async def geocoding_exception_handler(
    request: Request, exc: GeocodingError
) -> JSONResponse:
    # The lookup provider failed or had no match; the request itself was fine.
    return JSONResponse(status_code=502, content={"detail": str(exc)})


@app.exception_handler(RoutingError)
async def routing_exception_handler(request: Request, exc: RoutingError) -> JSONResponse:
    logger.error("Routing failed on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": str(exc)})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Ensure API errors are JSON so clients can always display them."""

    logger.exception("Unhandled exception", extra={"path": str(request.url.path)})

    if _env_bool("GEOPATH_REVEAL_ERRORS"):
        detail = str(exc) or exc.__class__.__name__
    else:
        detail = "Internal Server Error"

    return JSONResponse(status_code=500, content={"detail": detail})


@app.get("/")
def index() -> dict[str, Any]:
    return {
        "message": "geopath API is running",
        "version": app.version,
        "endpoints": {
            "pathfinding": "/api/pathfinding",
            "algorithms": "/api/pathfinding/algorithms",
            "current_location": "/api/pathfinding/current-location",
        },
    }


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
