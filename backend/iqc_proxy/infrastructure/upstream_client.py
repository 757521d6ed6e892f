"""Upstream Client — one outbound GET to the script service per relay call.

Invariants:
    - One request per fetch(), plus any redirect hops; no retries, no caching
    - Redirects followed: an Apps Script /exec URL always answers 302 to
      script.googleusercontent.com
    - The only query parameter added is `action` (existing base URL query kept)
    - Non-2xx → UpstreamStatusError; timeout → UpstreamTimeoutError;
      transport failure → UpstreamTransportError; non-JSON body → UpstreamPayloadError
    - JSON check is strict: NaN/Infinity and over-deep nesting are rejected
    - Successful payload returned as the raw bytes received

Design Decisions:
    - Fresh httpx.AsyncClient per fetch: no connection state survives a failed
      call, so one broken upstream response cannot poison the next request
    - transport parameter exists for tests and custom mounts; production uses
      httpx's default transport
"""

import json
import logging

import httpx

from iqc_proxy.core.domain_types import RelayAction, RelayPayload
from iqc_proxy.core.errors import (
    UpstreamPayloadError,
    UpstreamStatusError,
    UpstreamTimeoutError,
    UpstreamTransportError,
)

logger = logging.getLogger(__name__)


class UpstreamClient:
    """Fetches action payloads from the upstream script service."""

    def __init__(
        self,
        base_url: str,
        user_agent: str,
        timeout_seconds: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url
        self.user_agent = user_agent
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    async def fetch(self, action: RelayAction) -> RelayPayload:
        """GET {base_url}?action=<action> and return the validated JSON body."""
        async with httpx.AsyncClient(
            timeout=self.timeout_seconds,
            transport=self._transport,
            follow_redirects=True,
        ) as client:
            response = await self._send(client, action)

        if not response.is_success:
            raise UpstreamStatusError(response.status_code)

        payload = RelayPayload(response.content)
        _ensure_json(payload)
        return payload

    async def _send(
        self, client: httpx.AsyncClient, action: RelayAction,
    ) -> httpx.Response:
        try:
            url = httpx.URL(self.base_url).copy_merge_params(
                {"action": action.value},
            )
            return await client.get(url, headers={"User-Agent": self.user_agent})
        except httpx.TimeoutException:
            raise UpstreamTimeoutError(self.timeout_seconds)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise UpstreamTransportError(str(e) or type(e).__name__)


def _reject_constant(name: str):
    raise ValueError(f"Non-standard JSON constant: {name}")


def _ensure_json(payload: RelayPayload) -> None:
    """Parse once to reject non-JSON bodies; the parsed value is discarded."""
    try:
        json.loads(payload, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        raise UpstreamPayloadError(str(e))
