"""Relay Routes — /api/iqc and /api/config, one handler registered per action.

Invariants:
    - OPTIONS returns 200 with an empty body and never reaches the upstream
    - GET and POST relay; the inbound body is ignored
    - Success body is the upstream bytes, served as application/json
    - Failures propagate as ProxyError to the global handler (api/error_handlers.py)
"""

from fastapi import APIRouter, Depends, Request, Response

from iqc_proxy.core.domain_types import RelayAction
from iqc_proxy.services.relay import RelayService

router = APIRouter(tags=["relay"])

RELAY_METHODS = ["GET", "POST", "OPTIONS"]


def get_relay_service(request: Request) -> RelayService:
    return RelayService(
        request.app.state.settings,
        transport=request.app.state.upstream_transport,
    )


def _make_relay_endpoint(action: RelayAction):
    async def relay_endpoint(
        request: Request,
        service: RelayService = Depends(get_relay_service),
    ) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=200)
        payload = await service.relay(action)
        return Response(content=payload, media_type="application/json")

    relay_endpoint.__name__ = f"relay_{action.value}"
    relay_endpoint.__doc__ = f"Relay `action={action.value}` to the upstream service."
    return relay_endpoint


for _action in RelayAction:
    router.add_api_route(
        _action.route,
        _make_relay_endpoint(_action),
        methods=RELAY_METHODS,
    )
