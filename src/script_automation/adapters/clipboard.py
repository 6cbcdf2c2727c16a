"""IClipboard adapter using the platform clipboard command."""

import shutil
import subprocess
from typing import List, Optional, Sequence

from script_automation.ports.interfaces import IClipboard

# Tried in order; first one found on PATH wins
CLIPBOARD_COMMANDS = (
    ("pbcopy",),
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
    ("clip",),
)


class ClipboardError(RuntimeError):
    """No clipboard command available, or the command failed."""


class SystemClipboard(IClipboard):
    """Pipes text into pbcopy / wl-copy / xclip / xsel / clip."""

    def __init__(self, commands: Optional[Sequence[Sequence[str]]] = None):
        self._commands = [list(c) for c in (commands or CLIPBOARD_COMMANDS)]

    def _find_command(self) -> Optional[List[str]]:
        for command in self._commands:
            if shutil.which(command[0]):
                return command
        return None

    def copy(self, text: str) -> None:
        command = self._find_command()
        if command is None:
            raise ClipboardError("No clipboard command available (install xclip or wl-clipboard)")
        try:
            subprocess.run(command, input=text.encode("utf-8"), check=True, timeout=5)
        except (subprocess.SubprocessError, OSError) as e:
            raise ClipboardError(f"{command[0]} failed: {e}") from e
