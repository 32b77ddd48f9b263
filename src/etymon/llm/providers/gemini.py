"""Google Gemini ``generateContent`` provider (API key as query parameter)."""

from __future__ import annotations

from typing import Any

from etymon.llm.base import (
    MAX_OUTPUT_TOKENS,
    SYSTEM_INSTRUCTION,
    TEMPERATURE,
    AuthStyle,
    ProviderKind,
    ProviderSpec,
    dig,
)


def build_body(model_id: str, prompt: str) -> dict[str, Any]:
    # model_id travels in the URL path, not the body
    return {
        "systemInstruction": {"parts": [{"text": SYSTEM_INSTRUCTION}]},
        "contents": [{"parts": [{"text": prompt}]}],
        "generationConfig": {
            "temperature": TEMPERATURE,
            "maxOutputTokens": MAX_OUTPUT_TOKENS,
        },
    }


def extract_text(data: Any) -> Any:
    return dig(data, "candidates", 0, "content", "parts", 0, "text")


GEMINI = ProviderSpec(
    kind=ProviderKind.GEMINI,
    name="Gemini",
    endpoint="https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent",
    auth=AuthStyle.QUERY_KEY,
    build_body=build_body,
    extract_text=extract_text,
)
