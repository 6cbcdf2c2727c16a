"""
Script pipeline – single responsibility: validate input → build prompt → generate → expose UI state.
Depends only on port interfaces (SOLID – Dependency Inversion).
Owns the per-user state a front end renders: busy, script, error, copied.
"""

import asyncio
import logging
from typing import Optional

from script_automation import config
from script_automation.application.prompts import build_prompt
from script_automation.domain.errors import ValidationError
from script_automation.domain.models import GenerationRequest, GenerationResult
from script_automation.ports.interfaces import IClipboard, IScheduler, IScriptGenerator

logger = logging.getLogger(__name__)

TOPIC_REQUIRED_MESSAGE = "Por favor, insira um tópico para o vídeo."
GENERATION_FAILED_MESSAGE = (
    "Falha ao gerar o roteiro. Verifique sua chave de API e tente novamente."
)
COPY_FAILED_MESSAGE = "Falha ao copiar o roteiro."


class ScriptPipeline:
    """
    Orchestrates one generation cycle at a time for a single user.
    All dependencies are injected (ports); no concrete implementations here.
    """

    def __init__(
        self,
        *,
        script_generator: IScriptGenerator,
        clipboard: Optional[IClipboard] = None,
        scheduler: Optional[IScheduler] = None,
        copied_reset_delay: Optional[float] = None,
    ):
        self._generator = script_generator
        self._clipboard = clipboard
        self._scheduler = scheduler
        self._copied_reset_delay = (
            copied_reset_delay if copied_reset_delay is not None else config.COPIED_RESET_DELAY
        )

        self.busy = False
        self.script: Optional[str] = None
        self.error: Optional[str] = None
        self.copied = False

        self._pending: Optional[asyncio.Future] = None
        self._cancel_requested = False

    async def generate_script(
        self,
        topic: Optional[str],
        style: object = None,
        duration: object = None,
    ) -> Optional[GenerationResult]:
        """
        Run one cycle. Returns the result, or None when the trigger was ignored
        (a cycle is already outstanding) or the cycle was cancelled.
        """
        if self.busy:
            logger.info("Generation already in progress; ignoring trigger")
            return None

        try:
            request = GenerationRequest.create(topic, style, duration)
        except ValidationError as e:
            self.error = TOPIC_REQUIRED_MESSAGE
            return e.to_failure()

        self.busy = True
        self.error = None
        self.script = None
        self.copied = False
        self._cancel_requested = False

        prompt = build_prompt(request)
        logger.info(
            "Generating script: style=%s duration=%s topic=%r",
            request.style.value,
            request.duration.value,
            request.topic[:60],
        )
        self._pending = asyncio.ensure_future(self._generator.generate(prompt))
        try:
            result = await self._pending
        except asyncio.CancelledError:
            if not self._cancel_requested:
                raise
            logger.info("Generation cancelled; result discarded")
            return None
        finally:
            self._pending = None
            self.busy = False

        if self._cancel_requested:
            logger.info("Generation cancelled after completion; result discarded")
            return None

        if result.ok:
            self.script = result.text
        else:
            logger.error("Script generation failed [%s]: %s", result.kind.value, result.detail)
            self.error = GENERATION_FAILED_MESSAGE
        return result

    def cancel(self) -> bool:
        """Best-effort abort of the outstanding cycle. Returns False if nothing was running."""
        if self._pending is None:
            return False
        self._cancel_requested = True
        self._pending.cancel()
        return True

    def copy_script(self) -> bool:
        """Copy the current script; 'copied' resets after the configured delay."""
        if not self.script or self._clipboard is None:
            return False
        try:
            self._clipboard.copy(self.script)
        except Exception as e:
            logger.error("Failed to copy script: %s", e)
            self.error = COPY_FAILED_MESSAGE
            return False

        self.copied = True
        if self._scheduler is not None:
            self._scheduler.call_later(self._copied_reset_delay, self._reset_copied)
        return True

    def _reset_copied(self) -> None:
        self.copied = False
