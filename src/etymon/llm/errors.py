"""Classified failures raised by the dispatch pipeline.

Every stage fails fast with one of these. The transport layer maps the
class to a status code; the core never formats HTTP responses itself.
"""

from __future__ import annotations


class AnalysisError(Exception):
    """Base class for all pipeline failures. Carries a human-readable message."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AnalysisError):
    """A required request field (credential or prompt) is missing."""


class UnknownProviderError(AnalysisError):
    """The provider identifier is not in the registered set."""


class ProviderCallError(AnalysisError):
    """The upstream call failed or its envelope held no extractable text."""


class ParseError(AnalysisError):
    """No JSON object could be recovered from the completion text."""
