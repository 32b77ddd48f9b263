"""Dispatcher - validates a request, picks the provider adapter, normalizes the reply."""

from __future__ import annotations

import logging

import httpx

from etymon.llm.base import ProviderAdapter
from etymon.llm.errors import UnknownProviderError, ValidationError
from etymon.llm.normalizer import normalize
from etymon.llm.providers import PROVIDER_SPECS
from etymon.models.schemas import AnalysisRequest, AnalysisResult, ProviderInfo

logger = logging.getLogger(__name__)

# Singleton instance
_dispatcher: Dispatcher | None = None


class Dispatcher:
    """Runs one analysis request through exactly one provider.

    Failures propagate unchanged in stage order (validation, provider
    lookup, provider call, parse).  There is no fallback to another provider.
    """

    def __init__(
        self,
        adapters: dict[str, ProviderAdapter] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        if adapters is None:
            adapters = {
                kind.value: ProviderAdapter(spec, transport=transport)
                for kind, spec in PROVIDER_SPECS.items()
            }
        self.adapters = adapters

    def providers(self) -> list[ProviderInfo]:
        """Describe every registered provider."""
        return [
            ProviderInfo(id=provider_id, name=adapter.name, endpoint=adapter.spec.endpoint)
            for provider_id, adapter in self.adapters.items()
        ]

    def select(self, provider_id: str) -> ProviderAdapter:
        """Look up the adapter for *provider_id* by exact match."""
        adapter = self.adapters.get(provider_id)
        if adapter is None:
            raise UnknownProviderError(f"Unknown provider: {provider_id}")
        return adapter

    @staticmethod
    def validate(request: AnalysisRequest) -> None:
        if not request.credential:
            raise ValidationError("API key is required")
        if not request.prompt:
            raise ValidationError("Prompt is required")

    async def dispatch(self, request: AnalysisRequest) -> AnalysisResult:
        """Validate, invoke the selected provider and normalize its text."""
        self.validate(request)
        adapter = self.select(request.provider_id)

        logger.info(
            "Dispatch: provider=%s, model=%s, prompt_chars=%d",
            request.provider_id,
            request.model_id,
            len(request.prompt),
        )

        raw = await adapter.invoke(request.credential, request.model_id, request.prompt)
        result = normalize(raw)

        logger.info(
            "Dispatch complete: provider=%s, keywords=%d",
            request.provider_id,
            len(result.keywords),
        )
        return result


def get_dispatcher() -> Dispatcher:
    """Get or create the singleton dispatcher."""
    global _dispatcher
    if _dispatcher is None:
        _dispatcher = Dispatcher()
    return _dispatcher


async def dispatch(request: AnalysisRequest) -> AnalysisResult:
    """Dispatch *request* through the shared dispatcher."""
    return await get_dispatcher().dispatch(request)
