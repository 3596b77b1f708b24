"""
cancellation.py — Cooperative Cancellation Token
================================================
An explicit token handed to one controller run.  It is polled only at
suspension points between steps, never inside a primitive.

Built on two threading.Event objects so a background run can block in
its delay or while paused and still be woken the instant cancel() is
called from another thread.
"""

import threading
from typing import Optional


class CancellationToken:

    def __init__(self):
        self._cancelled = threading.Event()
        self._released  = threading.Event()
        self._released.set()

    # -- control side --
    def cancel(self) -> None:
        self._cancelled.set()
        self._released.set()         # wake a paused waiter so it can exit

    def hold(self) -> None:
        self._released.clear()

    def release(self) -> None:
        self._released.set()

    # -- run side --
    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    @property
    def held(self) -> bool:
        return not self._released.is_set()

    def sleep(self, seconds: float) -> bool:
        """Wait out a delay.  Returns True if cancelled before or during it."""
        if seconds <= 0:
            return self.cancelled
        return self._cancelled.wait(seconds)

    def wait_released(self, timeout: Optional[float] = None) -> bool:
        """Block while held.  Returns True once released and not cancelled."""
        self._released.wait(timeout)
        return self._released.is_set() and not self.cancelled
