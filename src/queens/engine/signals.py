from __future__ import annotations

import threading

from loguru import logger

from queens.constants import PAUSE_POLL_INTERVAL


class ControlSignals:
    """Pause / cancel token handed to a single engine run.

    The engine calls :meth:`checkpoint` before it tests each column. While the
    token is paused the checkpoint waits on an event (re-checking at most every
    ``poll_interval`` seconds); :meth:`resume` and :meth:`cancel` wake it at
    once. Once cancelled a token stays cancelled.
    """

    def __init__(self, poll_interval: float = PAUSE_POLL_INTERVAL) -> None:
        if poll_interval <= 0:
            raise ValueError("poll_interval must be positive")
        self.poll_interval = float(poll_interval)
        self._running = threading.Event()
        self._running.set()
        self._cancelled = threading.Event()

    @property
    def paused(self) -> bool:
        return not self._running.is_set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def pause(self) -> None:
        if not self.cancelled:
            self._running.clear()

    def resume(self) -> None:
        self._running.set()

    def cancel(self) -> None:
        self._cancelled.set()
        # Wake a checkpoint that is blocked on pause so it can observe the cancel.
        self._running.set()

    def checkpoint(self) -> bool:
        """Block while paused; return ``False`` when the run must unwind."""
        if self.cancelled:
            return False
        if not self._running.is_set():
            logger.trace("checkpoint suspended")
            while not self._running.wait(self.poll_interval):
                pass
            logger.trace("checkpoint released")
        return not self.cancelled
