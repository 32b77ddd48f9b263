"""OpenRouter chat-completions provider (Claude and friends).

Same envelope as DeepSeek, plus the two attribution headers OpenRouter uses
to identify the calling application.
"""

from __future__ import annotations

from typing import Any

from etymon.llm.base import (
    MAX_OUTPUT_TOKENS,
    TEMPERATURE,
    AuthStyle,
    ProviderKind,
    ProviderSpec,
    chat_messages,
)
from etymon.llm.providers.deepseek import extract_chat_text

APP_REFERER = "https://english-collector.vercel.app"
APP_TITLE = "English Collector"

SYSTEM_INSTRUCTION = (
    "You are a helpful assistant that analyzes English text and provides "
    "etymology information. Always respond with valid JSON only, no markdown code blocks."
)


def build_body(model_id: str, prompt: str) -> dict[str, Any]:
    return {
        "model": model_id,
        "messages": chat_messages(prompt, system=SYSTEM_INSTRUCTION),
        "temperature": TEMPERATURE,
        "max_tokens": MAX_OUTPUT_TOKENS,
    }


OPENROUTER = ProviderSpec(
    kind=ProviderKind.OPENROUTER,
    name="OpenRouter",
    endpoint="https://openrouter.ai/api/v1/chat/completions",
    auth=AuthStyle.BEARER,
    build_body=build_body,
    extract_text=extract_chat_text,
    extra_headers={"HTTP-Referer": APP_REFERER, "X-Title": APP_TITLE},
    error_fallback="{name} error {status}",
)
