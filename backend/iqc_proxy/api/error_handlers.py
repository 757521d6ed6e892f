"""Error Handlers — global exception handlers for the relay API.

Invariants:
    - ProxyError → 500 {success: false, error: <action message>, details}
    - Unmatched route → 404 {success: false, error, available_endpoints}
    - Other framework HTTP errors (405) → {success: false, error: <detail>}
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Three-layer handler: domain (ProxyError), framework (HTTPException), catch-all (Exception)
    - Extracted from main.py to keep the app factory small
    - Catch-all stamps CORS headers itself: Starlette serves it outside the
      user middleware stack
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from iqc_proxy.api.middleware import cors_headers
from iqc_proxy.core.domain_types import AVAILABLE_ENDPOINTS
from iqc_proxy.core.errors import ProxyError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_proxy_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_proxy_error_handler(app: FastAPI) -> None:
    """Register relay failure handler."""

    @app.exception_handler(ProxyError)
    async def proxy_error_handler(request: Request, exc: ProxyError):
        """Handle all relay configuration/upstream errors."""
        action = exc.context.action
        logger.error(
            f"{exc.error_message}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "action": action.value if action else None,
                "upstream_status": exc.context.upstream_status,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register framework HTTP error handler (404, 405)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            logger.warning(
                f"Endpoint not found: {request.url.path}",
                extra={"path": request.url.path, "method": request.method},
            )
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content=_build_not_found_response(),
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "error": exc.detail},
            headers=exc.headers,
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "error": "Internal server error"},
            headers=cors_headers(request.app.state.settings),
        )


def _build_not_found_response() -> dict:
    return {
        "success": False,
        "error": "Endpoint not found",
        "available_endpoints": list(AVAILABLE_ENDPOINTS),
    }
