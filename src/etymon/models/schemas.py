"""Pydantic schemas for the analysis request, the canonical result and API bodies."""

from __future__ import annotations

from pydantic import BaseModel, Field

MAX_KEYWORDS = 5


# ── Requests ──────────────────────────────────────────────────────────────────


class AnalysisRequest(BaseModel):
    """One dispatch worth of input. Built once per call and never mutated."""

    provider_id: str
    model_id: str
    credential: str
    prompt: str

    model_config = {"frozen": True}


class AnalyzeRequestBody(BaseModel):
    """Decoded ``POST /api/analyze`` body.

    Fields are optional here so that a missing key reaches the dispatcher and
    fails with its own classified error instead of a schema error.
    """

    provider: str | None = None
    model: str | None = None
    apiKey: str | None = None
    prompt: str | None = None

    def to_request(self) -> AnalysisRequest:
        return AnalysisRequest(
            provider_id=self.provider or "",
            model_id=self.model or "",
            credential=self.apiKey or "",
            prompt=self.prompt or "",
        )


# ── Canonical result ──────────────────────────────────────────────────────────


class KeywordEntry(BaseModel):
    word: str = ""
    phonetic: str = ""
    roots: str = ""
    origin: str = ""
    meaning: str = ""


class AnalysisResult(BaseModel):
    translation: str = ""
    keywords: list[KeywordEntry] = Field(default_factory=list, max_length=MAX_KEYWORDS)


# ── Misc API bodies ───────────────────────────────────────────────────────────


class ErrorResponse(BaseModel):
    message: str


class ProviderInfo(BaseModel):
    id: str
    name: str
    endpoint: str
