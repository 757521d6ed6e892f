"""Health Check — liveness endpoint for the hosting platform.

Invariants:
    - GET /health always returns 200 if the process is up
    - Computed from local process state only, never calls the upstream
"""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Request, status

from iqc_proxy.core.domain_types import HEALTH_ROUTE

router = APIRouter(tags=["health"])

PROCESS_STARTED_AT = time.monotonic()


@router.get(HEALTH_ROUTE, status_code=status.HTTP_200_OK)
async def health_check(request: Request):
    """Basic liveness check. Returns 200 if the process is up."""
    settings = request.app.state.settings
    return {
        "status": "OK",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime": time.monotonic() - PROCESS_STARTED_AT,
        "environment": settings.runtime_env,
        "version": settings.app_version,
    }
