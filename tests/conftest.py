"""Shared test fixtures for the Etymon test suite."""

from __future__ import annotations

import json
from collections.abc import Callable

import httpx
import pytest

from etymon.llm.router import Dispatcher
from etymon.models.schemas import AnalysisRequest


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    @property
    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def make_transport():
    """Build a RecordingTransport that answers with a fixed status and body."""

    def _make(status_code: int = 200, json_body=None, text: str | None = None):
        def handler(request: httpx.Request) -> httpx.Response:
            if text is not None:
                return httpx.Response(status_code, text=text)
            return httpx.Response(status_code, json=json_body)

        return RecordingTransport(handler)

    return _make


@pytest.fixture
def make_dispatcher(make_transport):
    """Build a Dispatcher wired to a RecordingTransport; returns both."""

    def _make(status_code: int = 200, json_body=None, text: str | None = None):
        transport = make_transport(status_code, json_body, text)
        return Dispatcher(transport=transport), transport

    return _make


@pytest.fixture
def sample_completion():
    """Return a well-formed completion text as a model would write it."""
    return json.dumps(
        {
            "translation": "仁慈的捐助者",
            "keywords": [
                {
                    "word": "benevolent",
                    "phonetic": "/bəˈnev.əl.ənt/",
                    "roots": "bene (well) + volent (wishing)",
                    "origin": "Latin benevolentem",
                    "meaning": "well-meaning and kindly",
                }
            ],
        },
        ensure_ascii=False,
    )


@pytest.fixture
def gemini_envelope():
    """Wrap completion text in a Gemini generateContent response."""

    def _wrap(text: str) -> dict:
        return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}

    return _wrap


@pytest.fixture
def chat_envelope():
    """Wrap completion text in an OpenAI-style chat-completions response."""

    def _wrap(text: str) -> dict:
        return {
            "id": "chatcmpl-123",
            "choices": [{"index": 0, "message": {"role": "assistant", "content": text}}],
        }

    return _wrap


@pytest.fixture
def make_request():
    """Build an AnalysisRequest with sensible defaults."""

    def _make(**overrides) -> AnalysisRequest:
        fields = {
            "provider_id": "gemini",
            "model_id": "gemini-2.0-flash",
            "credential": "test-key",
            "prompt": "Analyze: The benevolent benefactor",
        }
        fields.update(overrides)
        return AnalysisRequest(**fields)

    return _make
