"""LLM provider specs.

Every supported vendor is a :class:`~etymon.llm.base.ProviderSpec` record
executed by the generic :class:`~etymon.llm.base.ProviderAdapter`:

- GEMINI     — Google Gemini ``generateContent`` (key in query string)
- DEEPSEEK   — DeepSeek chat completions (Bearer auth)
- OPENROUTER — OpenRouter chat completions (Bearer + attribution headers)
"""

from etymon.llm.base import ProviderKind, ProviderSpec
from etymon.llm.providers.deepseek import DEEPSEEK
from etymon.llm.providers.gemini import GEMINI
from etymon.llm.providers.openrouter import OPENROUTER

PROVIDER_SPECS: dict[ProviderKind, ProviderSpec] = {
    spec.kind: spec for spec in (GEMINI, DEEPSEEK, OPENROUTER)
}

__all__ = ["DEEPSEEK", "GEMINI", "OPENROUTER", "PROVIDER_SPECS"]
