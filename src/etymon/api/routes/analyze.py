"""Analysis API routes - the HTTP face of the dispatcher."""

from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from etymon.llm import (
    AnalysisError,
    ParseError,
    ProviderCallError,
    UnknownProviderError,
    ValidationError,
    get_dispatcher,
)
from etymon.models.schemas import (
    AnalysisResult,
    AnalyzeRequestBody,
    ErrorResponse,
    ProviderInfo,
)

logger = logging.getLogger(__name__)

router = APIRouter()

# Error kind → HTTP status
ERROR_STATUS: dict[type[AnalysisError], int] = {
    ValidationError: 400,
    UnknownProviderError: 400,
    ProviderCallError: 500,
    ParseError: 500,
}


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(message=message).model_dump())


@router.post(
    "/analyze",
    response_model=AnalysisResult,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def analyze(body: AnalyzeRequestBody):
    """Run one etymology analysis through the requested provider."""
    try:
        return await get_dispatcher().dispatch(body.to_request())
    except AnalysisError as exc:
        status_code = ERROR_STATUS.get(type(exc), 500)
        if status_code >= 500:
            logger.error("Analysis failed: provider=%s, error=%s", body.provider, exc.message)
        return error_response(exc.message, status_code)
    except Exception as exc:
        logger.exception("Unexpected analysis failure: provider=%s", body.provider)
        return error_response(str(exc) or "Internal server error", 500)


@router.get("/providers", response_model=list[ProviderInfo])
async def list_providers():
    """Return the registered LLM providers."""
    return get_dispatcher().providers()
