"""
Delay-coalescing timer.

Each call cancels the pending one and restarts the delay, so a burst of
calls runs the callback once, with the arguments of the last call.
"""
from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_DELAY_SECONDS = 0.3


class Debouncer:
    def __init__(self, callback: Callable[..., Any], delay: float = DEFAULT_DELAY_SECONDS) -> None:
        self.callback = callback
        self.delay = delay
        self._task: asyncio.Task | None = None

    @property
    def pending(self) -> bool:
        return self._task is not None and not self._task.done()

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        self.cancel()
        self._task = asyncio.get_running_loop().create_task(self._run(args, kwargs))

    def cancel(self) -> None:
        if self.pending:
            self._task.cancel()
        self._task = None

    async def wait(self) -> None:
        """Wait for the scheduled call, if any, to finish."""
        if self._task is not None:
            try:
                await self._task
            except asyncio.CancelledError:
                pass

    async def _run(self, args: tuple, kwargs: dict) -> None:
        await asyncio.sleep(self.delay)
        try:
            result = self.callback(*args, **kwargs)
            if inspect.isawaitable(result):
                await result
        except Exception:
            logger.exception("Debounced callback %r failed", self.callback)
