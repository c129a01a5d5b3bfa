"""
Tests for shared configuration, errors and logging.
"""

import json
import httpx
import pytest
import structlog

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))

from shared.config import StreamRulesConfig, DEFAULT_RULES_URL
from shared.errors import ConfigurationError, TransportError, ErrorResponse
from shared.logging import configure_logging, get_logger, set_operation_id, get_operation_id, clear_context
from shared.test_helpers import create_mock_response, rule_test_environment


class TestConfig:
    """Test cases for StreamRulesConfig."""

    def test_defaults(self, monkeypatch):
        """Test default configuration."""
        for key in rule_test_environment.get_mock_config():
            monkeypatch.delenv(key, raising=False)

        config = StreamRulesConfig(_env_file=None)

        assert config.rules_url == DEFAULT_RULES_URL
        assert config.bearer_token is None
        assert config.request_timeout == 10.0

    def test_environment_overrides(self, monkeypatch):
        """Test that STREAM_RULES_ variables are read."""
        for key, value in rule_test_environment.get_mock_config().items():
            monkeypatch.setenv(key, value)

        config = StreamRulesConfig(_env_file=None)

        assert config.env == "test"
        assert config.rules_url == "https://api.example.test/2/tweets/search/stream/rules"
        assert config.bearer_token.get_secret_value() == "test-bearer-token"
        assert config.request_timeout == 5.0

    def test_token_hidden_in_repr(self):
        """Test that the bearer token is not rendered."""
        config = StreamRulesConfig(_env_file=None, bearer_token="very-secret")

        assert "very-secret" not in repr(config)


class TestErrors:
    """Test cases for error types."""

    def test_to_response(self):
        """Test conversion to the error payload."""
        error = ConfigurationError(details={"hint": "bind first"})

        response = error.to_response("op-1")

        assert isinstance(response, ErrorResponse)
        assert response.operation_id == "op-1"
        assert response.code == "CONFIGURATION_ERROR"
        assert response.details == {"hint": "bind first"}

    def test_transport_error_from_status_error(self):
        """Test translation of a problem-details response."""
        response = create_mock_response(
            "GET",
            {"title": "Too Many Requests", "detail": "Too Many Requests", "type": "about:blank"},
            status_code=429
        )
        with pytest.raises(httpx.HTTPStatusError) as exc_info:
            response.raise_for_status()

        error = TransportError.from_status_error(exc_info.value)

        assert error.status_code == 429
        assert error.message == "Too Many Requests: Too Many Requests (429)"
        assert error.details["type"] == "about:blank"


class TestLogging:
    """Test cases for structured logging."""

    def teardown_method(self):
        clear_context()
        structlog.reset_defaults()

    def test_operation_id_context(self):
        """Test that operation ids are generated and cleared."""
        operation_id = set_operation_id()

        assert get_operation_id() == operation_id

        clear_context()
        assert get_operation_id() is None

    def test_configured_logger_emits_json(self, caplog):
        """Test that events are rendered as JSON with correlation context."""
        configure_logging("stream_rules", "info")
        set_operation_id("op-42")

        with caplog.at_level("INFO", logger="stream_rules"):
            get_logger("stream_rules.test").info("Rules listed", count=3)

        event = json.loads(caplog.records[-1].getMessage())
        assert event["event"] == "Rules listed"
        assert event["count"] == 3
        assert event["operation_id"] == "op-42"
        assert event["service"] == "stream_rules"
