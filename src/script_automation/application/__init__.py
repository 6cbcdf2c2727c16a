"""Application layer – prompt construction and pipeline orchestration."""

from script_automation.application.pipeline import ScriptPipeline
from script_automation.application.prompts import build_prompt

__all__ = ["ScriptPipeline", "build_prompt"]
