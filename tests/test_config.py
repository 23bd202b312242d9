"""
Tests for configuration and server startup

Tests cover:
- Environment parsing
- Startup banner
- Binding the configured port
"""

import logging
import socket
import threading
import time

import httpx
import pytest
from fastapi.testclient import TestClient
from unittest.mock import patch

from snarx_mcp import server
from snarx_mcp.config import Settings, get_settings


@pytest.fixture
def clean_env(monkeypatch):
    """Remove configuration overrides from the environment."""
    for name in ("PORT", "HOST", "APP_ENV", "NODE_ENV", "LOG_LEVEL", "COMPRESSION_MIN_SIZE"):
        monkeypatch.delenv(name, raising=False)


def _free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


# ============================================================================
# Settings Tests
# ============================================================================

def test_settings_defaults(clean_env):
    settings = get_settings()
    assert settings == Settings(
        host="0.0.0.0",
        port=3000,
        environment="development",
        log_level="INFO",
        compression_min_size=1000,
    )


def test_settings_from_env(clean_env, monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = get_settings()
    assert settings.port == 8080
    assert settings.host == "127.0.0.1"
    assert settings.environment == "production"
    assert settings.log_level == "DEBUG"


def test_invalid_port_raises(clean_env, monkeypatch):
    monkeypatch.setenv("PORT", "not-a-port")
    with pytest.raises(ValueError, match="PORT"):
        get_settings()


def test_invalid_log_level_raises(clean_env, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "LOUD")
    with pytest.raises(ValueError, match="LOG_LEVEL"):
        get_settings()


# ============================================================================
# Startup Tests
# ============================================================================

def test_startup_banner_logged(caplog):
    caplog.set_level(logging.INFO, logger="snarx_mcp.server")
    banner_app = server.create_app(Settings(port=4321, environment="staging"))

    with TestClient(banner_app) as banner_client:
        assert banner_client.get("/").status_code == 200

    assert "Snarx MCP Server iniciado exitosamente!" in caplog.text
    assert "http://localhost:4321/mcp/tools" in caplog.text
    assert "Environment: staging" in caplog.text


def test_main_runs_configured_server(clean_env, monkeypatch):
    monkeypatch.setenv("PORT", "5050")
    with patch("snarx_mcp.server.build_server") as mock_build:
        server.main()

    settings = mock_build.call_args.args[0]
    assert settings.port == 5050
    mock_build.return_value.run.assert_called_once()


def test_server_binds_configured_port(clean_env, monkeypatch):
    """Setting PORT before start binds the listener to that port."""
    port = _free_port()
    monkeypatch.setenv("PORT", str(port))
    monkeypatch.setenv("HOST", "127.0.0.1")

    uvicorn_server = server.build_server()
    thread = threading.Thread(target=uvicorn_server.run, daemon=True)
    thread.start()
    try:
        deadline = time.monotonic() + 10
        while not uvicorn_server.started and time.monotonic() < deadline:
            time.sleep(0.05)
        assert uvicorn_server.started

        with httpx.Client(trust_env=False) as http:
            response = http.get(f"http://127.0.0.1:{port}/")
        assert response.status_code == 200
        assert response.json()["author"] == "Snarx.io"
    finally:
        uvicorn_server.should_exit = True
        thread.join(timeout=10)
