"""IScheduler adapter: event-loop timer, thread timer when no loop is running."""

import asyncio
import threading
from typing import Any, Callable

from script_automation.ports.interfaces import IScheduler


class AsyncioScheduler(IScheduler):
    """Runs callbacks on the event loop, or on a daemon timer thread outside one."""

    def call_later(self, delay: float, callback: Callable[[], Any]) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            timer = threading.Timer(delay, callback)
            timer.daemon = True
            timer.start()
            return
        loop.call_later(delay, callback)
