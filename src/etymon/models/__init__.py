"""Data models - Pydantic schemas for requests, results and API bodies."""

from etymon.models.schemas import (
    AnalysisRequest,
    AnalysisResult,
    AnalyzeRequestBody,
    ErrorResponse,
    KeywordEntry,
    ProviderInfo,
)

__all__ = [
    "AnalysisRequest",
    "AnalysisResult",
    "AnalyzeRequestBody",
    "ErrorResponse",
    "KeywordEntry",
    "ProviderInfo",
]
