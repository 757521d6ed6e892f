"""HTTP Middleware — CORS header stamping and request logging.

Invariants:
    - Every response passing through the app carries the three CORS headers
    - Every request is logged once with method, path, status and duration

Design Decisions:
    - Custom header middleware over Starlette's CORSMiddleware: the relay must
      send all three headers on every response (not only on preflights) and
      answer OPTIONS with an empty 200 from the route itself
"""

import logging
import time

from fastapi import FastAPI, Request

from iqc_proxy.config import Settings

logger = logging.getLogger(__name__)

ALLOW_METHODS = "GET, POST, OPTIONS"
ALLOW_HEADERS = "Content-Type, Authorization"


def cors_headers(settings: Settings) -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": settings.cors_allow_origin,
        "Access-Control-Allow-Methods": ALLOW_METHODS,
        "Access-Control-Allow-Headers": ALLOW_HEADERS,
    }


def register_middleware(app: FastAPI) -> None:
    """Register middleware; the last registered runs outermost."""

    @app.middleware("http")
    async def add_cors_headers(request: Request, call_next):
        response = await call_next(request)
        response.headers.update(cors_headers(request.app.state.settings))
        return response

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        logger.info(
            f"{request.method} {request.url.path}",
            extra={"method": request.method, "path": request.url.path},
        )
        response = await call_next(request)
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code}",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": round((time.perf_counter() - started) * 1000, 1),
            },
        )
        return response
