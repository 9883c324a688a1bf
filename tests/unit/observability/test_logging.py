"""Unit tests for observability logging."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from gatepass_access.observability.correlation import CorrelationContext, RequestContext
from gatepass_access.observability.logging import (
    DEFAULT_SENSITIVE_FIELDS,
    CorrelationProcessor,
    JsonLoggerFactory,
    SensitiveFieldsFilter,
    get_logger,
)


@pytest.fixture()
def _restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    CorrelationContext.clear()
    yield
    CorrelationContext.clear()
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


def _last_json_line(text: str) -> dict:
    lines = [line for line in text.splitlines() if line.strip()]
    return json.loads(lines[-1])


# ---------------------------------------------------------------------------
# SensitiveFieldsFilter
# ---------------------------------------------------------------------------


class TestSensitiveFieldsFilter:
    def test_redacts_known_sensitive_key(self) -> None:
        f = SensitiveFieldsFilter()
        result = f.redact({"password": "s3cr3t", "principal_id": "u1"})
        assert result["password"] == SensitiveFieldsFilter.REDACTED
        assert result["principal_id"] == "u1"

    def test_redacts_all_default_sensitive_fields(self) -> None:
        f = SensitiveFieldsFilter()
        result = f.redact({field: "value" for field in DEFAULT_SENSITIVE_FIELDS})
        assert set(result.values()) == {SensitiveFieldsFilter.REDACTED}

    def test_case_insensitive_key_matching(self) -> None:
        result = SensitiveFieldsFilter().redact({"Authorization": "Bearer x"})
        assert result["Authorization"] == SensitiveFieldsFilter.REDACTED

    def test_custom_sensitive_fields(self) -> None:
        f = SensitiveFieldsFilter(frozenset({"feature"}))
        result = f.redact({"feature": "gatePass.approve", "password": "p"})
        assert result["feature"] == SensitiveFieldsFilter.REDACTED
        assert result["password"] == "p"

    def test_redact_deep_nested(self) -> None:
        result = SensitiveFieldsFilter().redact_deep({"headers": {"token": "abc", "host": "x"}})
        assert result["headers"]["token"] == SensitiveFieldsFilter.REDACTED
        assert result["headers"]["host"] == "x"

    def test_redact_does_not_modify_original(self) -> None:
        data = {"secret": "s"}
        SensitiveFieldsFilter().redact_deep(data)
        assert data == {"secret": "s"}


# ---------------------------------------------------------------------------
# CorrelationProcessor
# ---------------------------------------------------------------------------


class TestCorrelationProcessor:
    def setup_method(self) -> None:
        CorrelationContext.clear()

    def teardown_method(self) -> None:
        CorrelationContext.clear()

    def test_no_context_leaves_event_alone(self) -> None:
        assert CorrelationProcessor()(None, "info", {"event": "x"}) == {"event": "x"}

    def test_injects_correlation_and_user(self) -> None:
        CorrelationContext.set(RequestContext(correlation_id="cid-1", user_id="u1"))
        event = CorrelationProcessor()(None, "info", {"event": "x"})
        assert event["correlation_id"] == "cid-1"
        assert event["user_id"] == "u1"

    def test_bound_values_win(self) -> None:
        CorrelationContext.set(RequestContext(correlation_id="cid-1"))
        event = CorrelationProcessor()(None, "info", {"event": "x", "correlation_id": "bound"})
        assert event["correlation_id"] == "bound"
        assert "user_id" not in event


# ---------------------------------------------------------------------------
# JsonLoggerFactory
# ---------------------------------------------------------------------------


@pytest.mark.usefixtures("_restore_logging")
class TestJsonLoggerFactory:
    def test_renders_json_with_level_and_logger(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure("INFO")
        get_logger("gatepass.test.json").info("authorization_decision", principal_id="u1", allowed=True)
        record = _last_json_line(capsys.readouterr().err)
        assert record["event"] == "authorization_decision"
        assert record["principal_id"] == "u1"
        assert record["allowed"] is True
        assert record["level"] == "info"
        assert record["logger"] == "gatepass.test.json"
        assert "timestamp" in record

    def test_redacts_sensitive_values(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(logging.INFO)
        get_logger("gatepass.test.redact").info("login", token="abc")
        assert _last_json_line(capsys.readouterr().err)["token"] == SensitiveFieldsFilter.REDACTED

    def test_includes_correlation_context(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure("INFO")
        CorrelationContext.set_from_headers({"X-Request-ID": "req-9"}, user_id="u7")
        get_logger("gatepass.test.corr").info("permissions_resolved")
        record = _last_json_line(capsys.readouterr().err)
        assert record["correlation_id"] == "req-9"
        assert record["user_id"] == "u7"

    def test_level_filters_debug(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure("warning")
        get_logger("gatepass.test.level").debug("noise")
        assert "noise" not in capsys.readouterr().err

    def test_console_renderer(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure("INFO", json=False)
        get_logger("gatepass.test.console").info("access_service_ready")
        assert "access_service_ready" in capsys.readouterr().err


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        log = get_logger("gatepass.test.bind", component="gate")
        assert log is not None
        assert hasattr(log, "info")
