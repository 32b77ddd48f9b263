"""Provider dispatch and response normalization pipeline."""

from etymon.llm.base import ProviderAdapter, ProviderKind, ProviderSpec
from etymon.llm.errors import (
    AnalysisError,
    ParseError,
    ProviderCallError,
    UnknownProviderError,
    ValidationError,
)
from etymon.llm.normalizer import normalize
from etymon.llm.router import Dispatcher, dispatch, get_dispatcher

__all__ = [
    "AnalysisError",
    "Dispatcher",
    "ParseError",
    "ProviderAdapter",
    "ProviderCallError",
    "ProviderKind",
    "ProviderSpec",
    "UnknownProviderError",
    "ValidationError",
    "dispatch",
    "get_dispatcher",
    "normalize",
]
