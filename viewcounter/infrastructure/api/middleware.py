"""Cross-origin headers, pre-flight replies and error → JSON mapping."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response

from viewcounter.domain.errors import ViewCounterError

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


async def view_counter_error_handler(request: Request, exc: ViewCounterError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def cors_middleware(request: Request, call_next) -> Response:
    """Answer pre-flight probes directly and stamp CORS headers on everything else."""
    if request.method == "OPTIONS":
        response = Response(status_code=200, media_type="application/json")
    else:
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            response = JSONResponse(status_code=500, content={"error": "Internal server error"})
    response.headers.update(CORS_HEADERS)
    return response


def install(app: FastAPI) -> None:
    app.add_exception_handler(ViewCounterError, view_counter_error_handler)
    app.middleware("http")(cors_middleware)
