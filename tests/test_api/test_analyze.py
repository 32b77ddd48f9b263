"""Tests for the /api/analyze transport and its status mapping."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from etymon.llm.router import Dispatcher


@pytest.fixture
def client():
    from etymon.main import app

    with TestClient(app) as c:
        yield c


@pytest.fixture
def upstream(make_transport):
    """Point the shared dispatcher at a RecordingTransport built by the test."""
    patches = []

    def _install(status_code: int = 200, json_body=None, text: str | None = None):
        transport = make_transport(status_code, json_body, text)
        p = patch("etymon.llm.router._dispatcher", Dispatcher(transport=transport))
        p.start()
        patches.append(p)
        return transport

    yield _install
    for p in patches:
        p.stop()


def _body(**overrides) -> dict:
    body = {
        "provider": "gemini",
        "model": "gemini-2.0-flash",
        "apiKey": "test-key",
        "prompt": "Analyze: serendipity",
    }
    body.update(overrides)
    return body


class TestAnalyzeSuccess:

    def test_returns_canonical_result(self, client, upstream, gemini_envelope):
        upstream(json_body=gemini_envelope('Here you go: {"translation":"hi","keywords":[{"word":"x"}]}'))

        response = client.post("/api/analyze", json=_body())

        assert response.status_code == 200
        assert response.json() == {
            "translation": "hi",
            "keywords": [{"word": "x", "phonetic": "", "roots": "", "origin": "", "meaning": ""}],
        }


class TestAnalyzeErrors:
    """Classified errors map to 400/500 with a {"message"} body."""

    def test_missing_api_key(self, client, upstream):
        transport = upstream(json_body={})

        response = client.post("/api/analyze", json=_body(apiKey=None))

        assert response.status_code == 400
        assert response.json() == {"message": "API key is required"}
        assert transport.requests == []

    def test_missing_prompt(self, client, upstream):
        upstream(json_body={})

        body = _body()
        del body["prompt"]
        response = client.post("/api/analyze", json=body)

        assert response.status_code == 400
        assert response.json() == {"message": "Prompt is required"}

    def test_unknown_provider(self, client, upstream):
        transport = upstream(json_body={})

        response = client.post("/api/analyze", json=_body(provider="claude"))

        assert response.status_code == 400
        assert response.json() == {"message": "Unknown provider: claude"}
        assert transport.requests == []

    def test_provider_error(self, client, upstream):
        upstream(403, json_body={"error": {"message": "bad key"}})

        response = client.post("/api/analyze", json=_body())

        assert response.status_code == 500
        assert response.json() == {"message": "bad key"}

    def test_parse_error(self, client, upstream, chat_envelope):
        upstream(json_body=chat_envelope("no json here"))

        response = client.post("/api/analyze", json=_body(provider="deepseek"))

        assert response.status_code == 500
        assert response.json() == {"message": "Could not parse AI response as JSON"}

    def test_unexpected_error(self, client):
        broken = MagicMock()
        broken.dispatch = AsyncMock(side_effect=RuntimeError("boom"))
        with patch("etymon.llm.router._dispatcher", broken):
            response = client.post("/api/analyze", json=_body())

        assert response.status_code == 500
        assert response.json() == {"message": "boom"}

    def test_non_string_api_key_rejected(self, client, upstream):
        transport = upstream(json_body={})

        response = client.post("/api/analyze", json=_body(apiKey=123))

        assert response.status_code == 400
        assert "message" in response.json()
        assert transport.requests == []

    def test_malformed_body(self, client):
        response = client.post(
            "/api/analyze",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert "message" in response.json()


class TestTransportPlumbing:

    def test_get_not_allowed(self, client):
        response = client.get("/api/analyze")
        assert response.status_code == 405
        assert "message" in response.json()

    def test_cors_preflight(self, client):
        response = client.options(
            "/api/analyze",
            headers={
                "Origin": "https://example.com",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Content-Type",
            },
        )
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"

    def test_list_providers(self, client):
        response = client.get("/api/providers")
        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == ["gemini", "deepseek", "openrouter"]
