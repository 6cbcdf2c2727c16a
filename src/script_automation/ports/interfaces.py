"""
Port interfaces (SOLID – Dependency Inversion).
Implement these in adapters; application layer depends only on these abstractions.
The clipboard and scheduler ports belong to the presentation side; the core never touches them.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable

from script_automation.domain.models import GenerationResult


class IScriptGenerator(ABC):
    """Generative text provider: one prompt in, one script or failure out."""

    @abstractmethod
    async def generate(self, prompt: str) -> GenerationResult:
        """Run one generation call. Never raises for provider/transport failures."""
        pass


class IClipboard(ABC):
    """Copy-to-clipboard capability."""

    @abstractmethod
    def copy(self, text: str) -> None:
        """Copy text; raise on failure."""
        pass


class IScheduler(ABC):
    """Schedule-after-delay capability (e.g. resetting 'copied' feedback)."""

    @abstractmethod
    def call_later(self, delay: float, callback: Callable[[], Any]) -> None:
        """Run callback once after delay seconds."""
        pass
