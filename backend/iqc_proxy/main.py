"""IQC Proxy — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Settings built once and stored on app.state; handlers never read os.environ
    - Global error handlers map ProxyError → {success: false, ...} JSON responses
    - Every response carries the CORS headers (api/middleware.py)

Design Decisions:
    - create_app(settings) factory: tests build isolated apps with their own
      settings; the module-level `app` serves production (uvicorn iqc_proxy.main:app)
    - Lifespan over @app.on_event: FastAPI recommended pattern
"""

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from iqc_proxy.api.error_handlers import register_error_handlers
from iqc_proxy.api.middleware import register_middleware
from iqc_proxy.api.routes import health, relay
from iqc_proxy.config import Settings, get_settings
from iqc_proxy.core.domain_types import AVAILABLE_ENDPOINTS
from iqc_proxy.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format, settings.runtime_env)
    logger.info(
        "Configuration: port=%s environment=%s upstream=%s cors_origin=%s",
        settings.listen_port,
        settings.runtime_env,
        "set" if settings.upstream_base_url else "not set",
        settings.cors_allow_origin,
    )
    logger.info("IQC Proxy started")
    logger.info("Available endpoints: %s", ", ".join(AVAILABLE_ENDPOINTS))
    yield
    logger.info("IQC Proxy shutting down")


def create_app(
    settings: Settings | None = None,
    upstream_transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Build the relay application around one Settings instance."""
    settings = settings or get_settings()
    app = FastAPI(
        title="IQC Proxy", version=settings.app_version, lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.upstream_transport = upstream_transport

    register_middleware(app)

    # Routes — explicit registration
    app.include_router(health.router)
    app.include_router(relay.router)

    register_error_handlers(app)
    return app


app = create_app()
