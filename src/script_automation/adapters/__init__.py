"""
Adapters – concrete implementations of ports.
Gemini for generation, platform clipboard and asyncio timers for the presentation side.
Pass overrides to swap any of them (tests, other front ends).
"""

from script_automation.adapters.gemini import GeminiScriptGenerator
from script_automation.adapters.clipboard import SystemClipboard
from script_automation.adapters.scheduler import AsyncioScheduler


def default_adapters(**overrides):
    """
    Build default adapter instances (use package config).
    Overrides: script_generator=..., clipboard=..., scheduler=... for testing.
    """
    defaults = {
        "script_generator": GeminiScriptGenerator(),
        "clipboard": SystemClipboard(),
        "scheduler": AsyncioScheduler(),
    }
    defaults.update(overrides)
    return defaults
