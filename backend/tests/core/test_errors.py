"""Error Hierarchy — verifies codes, messages and the failure envelope.

Tests:
    - Each subclass carries its code, category and 500 status
    - to_response() uses the action's failure message once context is set
    - UpstreamStatusError details contain the status code
"""

from iqc_proxy.core.domain_types import RelayAction
from iqc_proxy.core.errors import (
    DEFAULT_FAILURE_MESSAGE,
    ConfigurationError,
    ErrorCategory,
    ErrorSeverity,
    ProxyError,
    UpstreamPayloadError,
    UpstreamStatusError,
    UpstreamTimeoutError,
    UpstreamTransportError,
)


def test_all_errors_are_proxy_errors_with_500():
    errors = [
        ConfigurationError("UPSTREAM_BASE_URL"),
        UpstreamStatusError(503),
        UpstreamTimeoutError(30.0),
        UpstreamTransportError("connection refused"),
        UpstreamPayloadError("Expecting value"),
    ]
    for err in errors:
        assert isinstance(err, ProxyError)
        assert err.http_status == 500


def test_configuration_error_mentions_setting():
    err = ConfigurationError("UPSTREAM_BASE_URL")
    assert err.message == "UPSTREAM_BASE_URL not configured"
    assert err.code == "CONFIGURATION_ERROR"
    assert err.category == ErrorCategory.CONFIGURATION
    assert err.severity == ErrorSeverity.CRITICAL


def test_status_error_details_contain_status_code():
    err = UpstreamStatusError(503)
    assert err.message == "Upstream error: 503"
    assert err.status_code == 503
    assert err.context.upstream_status == 503


def test_timeout_error_formats_seconds():
    assert UpstreamTimeoutError(30.0).message == "Upstream timeout after 30s"
    assert UpstreamTimeoutError(0.5).category == ErrorCategory.TIMEOUT


def test_envelope_without_action_uses_default_message():
    body = UpstreamTransportError("boom").to_response()
    assert body == {
        "success": False,
        "error": DEFAULT_FAILURE_MESSAGE,
        "details": "Upstream request failed: boom",
    }


def test_envelope_uses_action_failure_message():
    err = UpstreamStatusError(404)
    err.context.action = RelayAction.GET_CONFIG
    assert err.to_response() == {
        "success": False,
        "error": "Failed to fetch config",
        "details": "Upstream error: 404",
    }


def test_contexts_are_not_shared_between_instances():
    first = UpstreamPayloadError("a")
    second = UpstreamPayloadError("b")
    first.context.action = RelayAction.API
    assert second.context.action is None
