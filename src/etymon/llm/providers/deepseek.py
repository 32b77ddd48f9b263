"""DeepSeek chat-completions provider (OpenAI-compatible, Bearer auth)."""

from __future__ import annotations

from typing import Any

from etymon.llm.base import (
    MAX_OUTPUT_TOKENS,
    TEMPERATURE,
    AuthStyle,
    ProviderKind,
    ProviderSpec,
    chat_messages,
    dig,
)


def build_body(model_id: str, prompt: str) -> dict[str, Any]:
    return {
        "model": model_id,
        "messages": chat_messages(prompt),
        "temperature": TEMPERATURE,
        "max_tokens": MAX_OUTPUT_TOKENS,
    }


def extract_chat_text(data: Any) -> Any:
    """Read ``choices[0].message.content`` from an OpenAI-style envelope."""
    return dig(data, "choices", 0, "message", "content")


DEEPSEEK = ProviderSpec(
    kind=ProviderKind.DEEPSEEK,
    name="DeepSeek",
    endpoint="https://api.deepseek.com/v1/chat/completions",
    auth=AuthStyle.BEARER,
    build_body=build_body,
    extract_text=extract_chat_text,
)
