"""Result — verifies ok/err construction and wrong-side access."""

import pytest

from iqc_proxy.core.result import Result


def test_ok_exposes_value():
    result = Result.ok("https://example.test/exec")
    assert result.is_ok
    assert not result.is_err
    assert result.value == "https://example.test/exec"


def test_err_exposes_error():
    result = Result.err("missing")
    assert result.is_err
    assert not result.is_ok
    assert result.error == "missing"


def test_ok_accessing_error_raises():
    with pytest.raises(ValueError, match="Called error on Result.ok"):
        _ = Result.ok(1).error


def test_err_accessing_value_raises():
    with pytest.raises(ValueError, match="Called value on Result.err"):
        _ = Result.err("boom").value


def test_ok_with_none_value_is_still_ok():
    assert Result.ok(None).is_ok
