import json
import logging

import pytest
from fastapi import Request
from fastapi.exceptions import RequestValidationError

from media_relay.api import health
from media_relay.config.settings import Config, StaticConfig
from media_relay.core.logging import logger
from media_relay.main import validation_error_handler


@pytest.mark.asyncio
async def test_health_check(client):
    """Test public health endpoint"""
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_root_serves_index_file(client, monkeypatch, tmp_path):
    index_file = tmp_path / "index.html"
    index_file.write_text("<html><body>relay</body></html>", encoding="utf-8")
    monkeypatch.setattr(health, "config", Config(static=StaticConfig(index_file=str(index_file))))

    response = await client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "relay" in response.text


@pytest.mark.asyncio
async def test_root_without_index_file(client, monkeypatch, tmp_path):
    missing = tmp_path / "missing.html"
    monkeypatch.setattr(health, "config", Config(static=StaticConfig(index_file=str(missing))))

    response = await client.get("/")

    assert response.status_code == 404
    assert response.json() == {"error": "Front-end entry file not found"}


@pytest.mark.asyncio
async def test_request_id_is_generated(client):
    response = await client.get("/health")
    assert response.headers["x-request-id"]


@pytest.mark.asyncio
async def test_request_id_is_echoed(client):
    response = await client.get("/health", headers={"X-Request-ID": "abc123"})
    assert response.headers["x-request-id"] == "abc123"


@pytest.mark.asyncio
async def test_cors_allows_any_origin(client):
    response = await client.get("/health", headers={"Origin": "https://frontend.example"})
    assert response.headers["access-control-allow-origin"] == "*"


@pytest.mark.asyncio
async def test_cors_preflight(client):
    response = await client.options(
        "/api/transcribe",
        headers={
            "Origin": "https://frontend.example",
            "Access-Control-Request-Method": "POST",
        },
    )
    assert response.status_code == 200
    assert "POST" in response.headers["access-control-allow-methods"]


@pytest.mark.asyncio
async def test_validation_errors_use_error_payload(monkeypatch, caplog):
    monkeypatch.setattr(logger, "propagate", True)
    caplog.set_level(logging.WARNING, logger="media_relay")
    request = Request({"type": "http", "method": "GET", "path": "/api/video-download", "headers": [], "query_string": b""})
    exc = RequestValidationError([{"type": "missing", "loc": ("query", "url"), "msg": "Field required", "input": None}])

    response = await validation_error_handler(request, exc)

    assert response.status_code == 400
    body = json.loads(response.body)
    assert body["error"] == "Invalid request"
    assert "Field required" in body["message"]
    assert "Rejected request" in caplog.text
