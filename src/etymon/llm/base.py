"""Provider adapter: one generic HTTP caller driven by per-vendor specs.

Each vendor is described by a :class:`ProviderSpec` record (endpoint, auth
convention, request builder, text extractor).  :class:`ProviderAdapter`
executes any spec, so adding a provider is a pure data addition under
``etymon.llm.providers``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import httpx

from etymon.llm.errors import ProviderCallError

logger = logging.getLogger(__name__)

# Fixed sampling configuration shared by every provider
TEMPERATURE = 0.3
MAX_OUTPUT_TOKENS = 2048

SYSTEM_INSTRUCTION = (
    "You are a helpful assistant that analyzes English text and provides "
    "etymology information. Always respond with valid JSON only, no markdown."
)


class ProviderKind(str, Enum):
    """Closed set of supported LLM vendors, keyed by their public identifier."""

    GEMINI = "gemini"
    DEEPSEEK = "deepseek"
    OPENROUTER = "openrouter"


class AuthStyle(str, Enum):
    QUERY_KEY = "query_key"  # ?key=<credential>
    BEARER = "bearer"  # Authorization: Bearer <credential>


@dataclass(frozen=True)
class ProviderSpec:
    """Everything that differs between vendors.

    ``endpoint`` may contain a ``{model}`` placeholder.  ``error_fallback`` is
    formatted with ``name`` and ``status`` when an error body has no message.
    """

    kind: ProviderKind
    name: str
    endpoint: str
    auth: AuthStyle
    build_body: Callable[[str, str], dict[str, Any]]
    extract_text: Callable[[Any], Any]
    extra_headers: dict[str, str] = field(default_factory=dict)
    error_fallback: str = "{name} API request failed"


def dig(data: Any, *path: str | int) -> Any:
    """Walk *path* through nested dicts/lists, returning ``None`` on any miss."""
    current = data
    for key in path:
        if isinstance(key, int):
            if not isinstance(current, list) or not -len(current) <= key < len(current):
                return None
        elif not isinstance(current, dict) or key not in current:
            return None
        current = current[key]
    return current


def chat_messages(prompt: str, system: str = SYSTEM_INSTRUCTION) -> list[dict[str, str]]:
    """Build an OpenAI-style system + user message pair."""
    return [
        {"role": "system", "content": system},
        {"role": "user", "content": prompt},
    ]


class ProviderAdapter:
    """Calls one vendor endpoint and returns the raw completion text.

    Performs exactly one outbound request per :meth:`invoke`; no retries and
    no timeout override beyond the httpx default.
    """

    def __init__(self, spec: ProviderSpec, transport: httpx.AsyncBaseTransport | None = None):
        self.spec = spec
        self._transport = transport

    @property
    def name(self) -> str:
        return self.spec.name

    def build_request(
        self, credential: str, model_id: str, prompt: str
    ) -> tuple[str, dict[str, str], dict[str, str], dict[str, Any]]:
        """Return ``(url, params, headers, body)`` for one completion call."""
        spec = self.spec
        url = spec.endpoint.format(model=model_id)
        params: dict[str, str] = {}
        headers: dict[str, str] = {"Content-Type": "application/json"}

        if spec.auth is AuthStyle.QUERY_KEY:
            params["key"] = credential
        else:
            headers["Authorization"] = f"Bearer {credential}"
        headers.update(spec.extra_headers)

        return url, params, headers, spec.build_body(model_id, prompt)

    async def invoke(self, credential: str, model_id: str, prompt: str) -> str:
        """Send the prompt upstream and return the completion text.

        Raises:
            ProviderCallError: on transport failure, a non-success status, or a
                success envelope without extractable text.
        """
        url, params, headers, body = self.build_request(credential, model_id, prompt)

        logger.info("Provider request: provider=%s, model=%s", self.spec.kind.value, model_id)

        # Non-ASCII credentials and control characters in model ids fail while
        # httpx encodes the request, before anything is sent.
        try:
            async with httpx.AsyncClient(transport=self._transport, follow_redirects=True) as client:
                response = await client.post(url, params=params or None, headers=headers, json=body)
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as exc:
            raise ProviderCallError(f"{self.name} API request failed: {exc}") from exc

        if not response.is_success:
            raise ProviderCallError(self._error_message(response))

        try:
            data = response.json()
        except ValueError:
            data = None

        text = self.spec.extract_text(data)
        if not text or not isinstance(text, str):
            raise ProviderCallError(f"No response from {self.name}")
        return text

    def _error_message(self, response: httpx.Response) -> str:
        """Pull ``error.message`` from an error body, else the vendor fallback."""
        try:
            data = response.json()
        except ValueError:
            data = None

        message = dig(data, "error", "message")
        if message and isinstance(message, str):
            return message
        return self.spec.error_fallback.format(name=self.name, status=response.status_code)
