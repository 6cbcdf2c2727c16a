"""Ports (interfaces) – depend on these, implement in adapters."""

from script_automation.ports.interfaces import (
    IScriptGenerator,
    IClipboard,
    IScheduler,
)

__all__ = [
    "IScriptGenerator",
    "IClipboard",
    "IScheduler",
]
