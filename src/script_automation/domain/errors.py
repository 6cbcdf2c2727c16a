"""
Failure taxonomy for script generation.
Raised inside the generation client, converted to GenerationFailure values at its boundary.
"""

from typing import Optional

from script_automation.domain.models import FailureKind, GenerationFailure


class ScriptGenerationError(Exception):
    """Base class; every subclass carries the FailureKind it maps to."""

    kind: FailureKind = FailureKind.TRANSPORT

    def to_failure(self) -> GenerationFailure:
        return GenerationFailure(kind=self.kind, detail=str(self))


class ValidationError(ScriptGenerationError):
    """Empty or whitespace-only topic. Detected before any network activity."""

    kind = FailureKind.VALIDATION


class ConfigurationError(ScriptGenerationError):
    """Provider credential missing or rejected as invalid."""

    kind = FailureKind.CONFIGURATION


class TransportError(ScriptGenerationError):
    """Network unreachable, timeout or non-success HTTP status."""

    kind = FailureKind.TRANSPORT

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ProviderProtocolError(ScriptGenerationError):
    """Response received but not in the expected envelope shape."""

    kind = FailureKind.PROVIDER_PROTOCOL


class EmptyResponseError(ScriptGenerationError):
    """Well-formed response with no usable text (safety block, empty completion)."""

    kind = FailureKind.EMPTY_RESPONSE

    def __init__(self, message: str, finish_reason: Optional[str] = None):
        super().__init__(message)
        self.finish_reason = finish_reason
