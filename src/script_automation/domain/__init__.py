"""Domain models and value objects."""

from script_automation.domain.models import (
    DurationClass,
    FailureKind,
    GenerationFailure,
    GenerationRequest,
    GenerationResult,
    ScriptText,
    VideoStyle,
)
from script_automation.domain.errors import (
    ConfigurationError,
    EmptyResponseError,
    ProviderProtocolError,
    ScriptGenerationError,
    TransportError,
    ValidationError,
)

__all__ = [
    "DurationClass",
    "FailureKind",
    "GenerationFailure",
    "GenerationRequest",
    "GenerationResult",
    "ScriptText",
    "VideoStyle",
    "ConfigurationError",
    "EmptyResponseError",
    "ProviderProtocolError",
    "ScriptGenerationError",
    "TransportError",
    "ValidationError",
]
