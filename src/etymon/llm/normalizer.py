"""Turn raw completion text from any provider into an :class:`AnalysisResult`.

Locating JSON is deliberately loose (providers wrap it in fences and prose);
shaping the result is strict and total, so consumers never null-check.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from etymon.llm.errors import ParseError
from etymon.models.schemas import MAX_KEYWORDS, AnalysisResult, KeywordEntry

logger = logging.getLogger(__name__)

_FENCE_JSON_RE = re.compile(r"^```json\s*", re.IGNORECASE)
_FENCE_OPEN_RE = re.compile(r"^```\s*")
_FENCE_CLOSE_RE = re.compile(r"\s*```\Z")
# Greedy: first "{" through last "}".  Nesting is not checked.
_JSON_SPAN_RE = re.compile(r"\{[\s\S]*\}")

KEYWORD_FIELDS = ("word", "phonetic", "roots", "origin", "meaning")


def strip_fences(text: str) -> str:
    """Trim whitespace and drop a leading ```json / ``` and a trailing ``` marker."""
    cleaned = text.strip()
    cleaned = _FENCE_JSON_RE.sub("", cleaned)
    cleaned = _FENCE_OPEN_RE.sub("", cleaned)
    return _FENCE_CLOSE_RE.sub("", cleaned)


def _as_text(value: Any) -> str:
    """Falsy values become ``""``; other non-strings are rendered as JSON."""
    if not value:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"Unexpected token {name} in JSON")


def coerce_keyword(item: Any) -> KeywordEntry:
    if not isinstance(item, dict):
        return KeywordEntry()
    return KeywordEntry(**{name: _as_text(item.get(name)) for name in KEYWORD_FIELDS})


def coerce_result(parsed: dict[str, Any]) -> AnalysisResult:
    """Repair a parsed object into the canonical shape. Never raises."""
    keywords = parsed.get("keywords")
    if not isinstance(keywords, list):
        keywords = []

    return AnalysisResult(
        translation=_as_text(parsed.get("translation")),
        keywords=[coerce_keyword(item) for item in keywords[:MAX_KEYWORDS]],
    )


def normalize(raw_text: str) -> AnalysisResult:
    """Recover the canonical result from provider text.

    Raises:
        ParseError: if no ``{...}`` span exists or the span is not valid JSON.
    """
    cleaned = strip_fences(raw_text)

    match = _JSON_SPAN_RE.search(cleaned)
    if not match:
        logger.warning("No JSON object in provider response: %s...", cleaned[:200])
        raise ParseError("Could not parse AI response as JSON")

    try:
        parsed = json.loads(match.group(0), parse_constant=_reject_constant)
    except ValueError as exc:
        logger.warning("Invalid JSON in provider response: %s", exc)
        raise ParseError(f"Failed to parse AI response: {exc}") from exc

    return coerce_result(parsed)
