"""Tests for the HTTP API, settings and logging setup."""

import logging

import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient
from pydantic import ValidationError

from miller_notation import parse_notation
from miller_notation.api import ParseResponse, create_app, result_to_response
from miller_notation.config import Settings, get_settings
from miller_notation.logging_config import PACKAGE_LOGGER, setup_logging

ORIGIN = "http://localhost:3000"


@pytest.fixture
def client():
    app = create_app(Settings(allowed_origin=ORIGIN))
    return TestClient(app)


class TestParseEndpoint:
    """Tests for POST /api/parse."""

    def test_plane(self, client):
        response = client.post("/api/parse", json={"input": "(100)"})
        assert response.status_code == 200
        assert response.json() == {
            "type": "plane",
            "indices": [1.0, 0.0, 0.0],
            "intercept": [1.0, 0.5, 0.5],
        }

    def test_direction(self, client):
        response = client.post("/api/parse", json={"input": " [111] "})
        assert response.status_code == 200
        data = response.json()
        assert data["type"] == "direction"
        assert data["indices"] == [1, 1, 1]
        assert data["intercept"] is None

    def test_negative_index(self, client):
        response = client.post("/api/parse", json={"input": "(1-10)"})
        assert response.json()["intercept"] == [1.0, -1.0, 0.5]

    @pytest.mark.parametrize('text', ["100", "{100}"])
    def test_invalid_format(self, client, text):
        response = client.post("/api/parse", json={"input": text})
        assert response.status_code == 400
        assert response.json()["detail"].startswith("Invalid format.")

    @pytest.mark.parametrize('text', ["()", "[]"])
    def test_no_valid_indices(self, client, text):
        response = client.post("/api/parse", json={"input": text})
        assert response.status_code == 400
        assert response.json() == {"detail": "No valid indices found"}

    def test_missing_input_is_empty_string(self, client):
        response = client.post("/api/parse", json={})
        assert response.status_code == 400
        assert response.json()["detail"].startswith("Invalid format.")

    def test_malformed_json(self, client):
        response = client.post(
            "/api/parse",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json() == {"detail": "Error parsing JSON"}

    def test_non_string_input(self, client):
        response = client.post("/api/parse", json={"input": 100})
        assert response.status_code == 400
        assert response.json() == {"detail": "Error parsing JSON"}

    @pytest.mark.parametrize('method', ["get", "put", "delete"])
    def test_other_methods_rejected(self, client, method):
        response = client.request(method.upper(), "/api/parse")
        assert response.status_code == 405

    def test_logs_rejected_input(self, client, caplog):
        with caplog.at_level(logging.INFO, logger=PACKAGE_LOGGER):
            client.post("/api/parse", json={"input": "{100}"})
        assert "invalid_format" in caplog.text


class TestCors:
    """Tests for CORS handling."""

    def test_preflight(self, client):
        response = client.options(
            "/api/parse",
            headers={
                "Origin": ORIGIN,
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Content-Type",
            },
        )
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == ORIGIN
        assert "POST" in response.headers["access-control-allow-methods"]

    def test_bare_options_short_circuits(self, client):
        response = client.options("/api/parse")
        assert response.status_code == 200
        assert response.content == b""

    def test_allowed_origin_on_post(self, client):
        response = client.post(
            "/api/parse", json={"input": "[111]"}, headers={"Origin": ORIGIN}
        )
        assert response.headers["access-control-allow-origin"] == ORIGIN

    def test_other_origin_not_allowed(self, client):
        response = client.post(
            "/api/parse", json={"input": "[111]"}, headers={"Origin": "http://evil.example"}
        )
        assert "access-control-allow-origin" not in response.headers


class TestHealth:

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestResultToResponse:
    """Tests for mapping parse results to the wire schema."""

    def test_plane(self):
        response = result_to_response(parse_notation("(110)"))
        assert isinstance(response, ParseResponse)
        assert response.type == "plane"
        assert response.intercept == [1.0, 1.0, 0.5]

    def test_direction(self):
        response = result_to_response(parse_notation("[001]"))
        assert response.type == "direction"
        assert response.intercept is None

    def test_failure_is_client_error(self):
        with pytest.raises(HTTPException) as exc_info:
            result_to_response(parse_notation("()"))
        assert exc_info.value.status_code == 400
        assert exc_info.value.detail == "No valid indices found"


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch):
        for name in ("MILLER_HOST", "MILLER_PORT", "MILLER_ALLOWED_ORIGIN", "MILLER_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)
        assert settings.port == 8081
        assert settings.allowed_origin == ORIGIN
        assert settings.log_level == "INFO"

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("MILLER_PORT", "9000")
        monkeypatch.setenv("MILLER_LOG_LEVEL", "debug")
        settings = Settings(_env_file=None)
        assert settings.port == 9000
        assert settings.log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError, match="Unknown log level"):
            Settings(_env_file=None, log_level="chatty")

    def test_invalid_port(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, port=0)

    def test_get_settings_cached(self):
        get_settings.cache_clear()
        assert get_settings() is get_settings()
        get_settings.cache_clear()


class TestLogging:

    def test_setup_logging_idempotent(self):
        logger = setup_logging("DEBUG")
        handler_count = len(logger.handlers)
        setup_logging("WARNING")
        assert len(logger.handlers) == handler_count
        assert logger.level == logging.WARNING
