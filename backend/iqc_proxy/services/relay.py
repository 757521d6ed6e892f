"""Relay Service — one parameterized relay shared by every action route.

Invariants:
    - Missing upstream URL → ConfigurationError before any network call
    - Exactly one UpstreamClient.fetch() per relay() call
    - Every ProxyError leaving relay() carries the action in its context
    - No state survives between calls

Design Decisions:
    - One service, action as argument: the /api/iqc and /api/config handlers
      differed only by the action string (ADR: collapse near-duplicate handlers)
    - Errors raised, not returned: the global ProxyError handler owns the
      envelope so routes stay thin
"""

import logging

import httpx

from iqc_proxy.config import Settings
from iqc_proxy.core.domain_types import RelayAction, RelayPayload
from iqc_proxy.core.errors import ProxyError
from iqc_proxy.infrastructure.upstream_client import UpstreamClient

logger = logging.getLogger(__name__)


class RelayService:
    """Relays an action to the upstream script service."""

    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = settings
        self._transport = transport

    async def relay(self, action: RelayAction) -> RelayPayload:
        try:
            client = self._build_client()
            logger.info(
                f"Fetching {action.description} from upstream",
                extra={"action": action.value},
            )
            payload = await client.fetch(action)
        except ProxyError as e:
            e.context.action = action
            raise
        logger.info(
            f"Successfully fetched {action.description}",
            extra={"action": action.value},
        )
        return payload

    def _build_client(self) -> UpstreamClient:
        resolved = self.settings.resolve_upstream_url()
        if resolved.is_err:
            raise resolved.error
        return UpstreamClient(
            resolved.value,
            user_agent=self.settings.upstream_user_agent,
            timeout_seconds=self.settings.upstream_timeout_seconds,
            transport=self._transport,
        )
