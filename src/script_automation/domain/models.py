"""Domain models – transient value objects for one generation cycle."""

import logging
import unicodedata
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

logger = logging.getLogger(__name__)


def _normalize_tag(value: object) -> str:
    """Lowercase, trim and strip accents so 'Médio ' matches 'medio'."""
    text = str(value).strip().lower()
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


class VideoStyle(Enum):
    """Tone of the narration."""

    INFORMATIVE = "informative"
    EDUCATIONAL = "educational"
    ENTERTAINMENT = "entertainment"
    TUTORIAL = "tutorial"
    STORYTELLING = "storytelling"

    @classmethod
    def default(cls) -> "VideoStyle":
        return cls.INFORMATIVE

    @classmethod
    def parse(cls, value: object) -> "VideoStyle":
        """Accept enum members, English tags and the Portuguese form values; unknown -> default."""
        if isinstance(value, cls):
            return value
        if value is not None:
            member = _STYLE_ALIASES.get(_normalize_tag(value))
            if member is not None:
                return member
        logger.warning("Unknown video style %r, using %s", value, cls.default().value)
        return cls.default()


_STYLE_ALIASES = {
    "informative": VideoStyle.INFORMATIVE,
    "informativo": VideoStyle.INFORMATIVE,
    "educational": VideoStyle.EDUCATIONAL,
    "educacional": VideoStyle.EDUCATIONAL,
    "entertainment": VideoStyle.ENTERTAINMENT,
    "entretenimento": VideoStyle.ENTERTAINMENT,
    "tutorial": VideoStyle.TUTORIAL,
    "storytelling": VideoStyle.STORYTELLING,
}


class DurationClass(Enum):
    """Coarse target length. Not enforced on the generated text."""

    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"

    @classmethod
    def default(cls) -> "DurationClass":
        return cls.SHORT

    @classmethod
    def parse(cls, value: object) -> "DurationClass":
        """Accept enum members, English tags and curto/medio/longo; unknown -> default."""
        if isinstance(value, cls):
            return value
        if value is not None:
            member = _DURATION_ALIASES.get(_normalize_tag(value))
            if member is not None:
                return member
        logger.warning("Unknown duration class %r, using %s", value, cls.default().value)
        return cls.default()

    @property
    def minutes(self) -> str:
        return _DURATION_MINUTES[self]


_DURATION_ALIASES = {
    "short": DurationClass.SHORT,
    "curto": DurationClass.SHORT,
    "medium": DurationClass.MEDIUM,
    "medio": DurationClass.MEDIUM,
    "long": DurationClass.LONG,
    "longo": DurationClass.LONG,
}

_DURATION_MINUTES = {
    DurationClass.SHORT: "2-4 minutos",
    DurationClass.MEDIUM: "5-8 minutos",
    DurationClass.LONG: "10 minutos ou mais",
}


class FailureKind(Enum):
    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    TRANSPORT = "transport"
    PROVIDER_PROTOCOL = "provider_protocol"
    EMPTY_RESPONSE = "empty_response"


@dataclass(frozen=True)
class GenerationRequest:
    """What the user asked for. Build with create() so the invariants hold."""

    topic: str
    style: VideoStyle = VideoStyle.INFORMATIVE
    duration: DurationClass = DurationClass.SHORT

    def __post_init__(self):
        from script_automation.domain.errors import ValidationError

        if not (self.topic or "").strip():
            raise ValidationError("Topic is empty")

    @classmethod
    def create(
        cls,
        topic: Optional[str],
        style: object = None,
        duration: object = None,
    ) -> "GenerationRequest":
        return cls(
            topic=(topic or "").strip(),
            style=VideoStyle.parse(style),
            duration=DurationClass.parse(duration),
        )


@dataclass(frozen=True)
class ScriptText:
    """Successful outcome: the trimmed narration script."""

    text: str
    ok = True

    def __post_init__(self):
        if not self.text:
            raise ValueError("ScriptText must not be empty")


@dataclass(frozen=True)
class GenerationFailure:
    """Failed outcome. detail is for logs, never for display."""

    kind: FailureKind
    detail: str = ""
    ok = False


GenerationResult = Union[ScriptText, GenerationFailure]
