"""Domain Types — the relay's two actions and its opaque payload.

Invariants:
    - Exactly two actions exist; each owns its route and its failure message
    - RelayPayload is raw upstream bytes, never decoded into a typed model

Design Decisions:
    - str Enum: the value is the literal `action` query parameter sent upstream
    - NewType over bytes: zero runtime cost, keeps the pass-through explicit
      (ADR: upstream schema is owned by the script service, not by us)
"""

from enum import Enum
from typing import NewType


RelayPayload = NewType("RelayPayload", bytes)


class RelayAction(str, Enum):
    """Upstream actions — value is sent as `?action=<value>`."""
    API = "api"
    GET_CONFIG = "getConfig"

    @property
    def route(self) -> str:
        return _ROUTES[self]

    @property
    def failure_message(self) -> str:
        return _FAILURE_MESSAGES[self]

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_ROUTES = {
    RelayAction.API: "/api/iqc",
    RelayAction.GET_CONFIG: "/api/config",
}

_FAILURE_MESSAGES = {
    RelayAction.API: "Failed to fetch IQC data",
    RelayAction.GET_CONFIG: "Failed to fetch config",
}

_DESCRIPTIONS = {
    RelayAction.API: "IQC data",
    RelayAction.GET_CONFIG: "config",
}

HEALTH_ROUTE = "/health"

AVAILABLE_ENDPOINTS = [HEALTH_ROUTE] + [a.route for a in RelayAction]
