# scheduler.py
from typing import Callable, Optional
import logging

from .config import TICK_MS

logger = logging.getLogger(__name__)


class TickScheduler:
    """
    Runs ``on_tick`` once every ``period_ms`` while armed.

    The pending tick is a single handle: the due time of the next tick, or
    None when nothing is scheduled. ``start`` replaces any existing handle and
    ``cancel`` drops it synchronously, so at most one timer is ever active and
    no stale tick can run after a cancel.
    """

    def __init__(self, on_tick: Callable[[], None], period_ms: int = TICK_MS):
        self.period_ms = period_ms
        self._on_tick = on_tick
        self._due_ms: Optional[int] = None

    @property
    def active(self) -> bool:
        return self._due_ms is not None

    def start(self, now_ms: int) -> None:
        """Arm the timer; the first tick fires one period after ``now_ms``."""
        self.cancel()
        self._due_ms = now_ms + self.period_ms

    def cancel(self) -> None:
        self._due_ms = None

    def poll(self, now_ms: int) -> bool:
        """Run the tick if it is due. Return True when a tick ran."""
        if self._due_ms is None or now_ms < self._due_ms:
            return False  # not time to move yet

        due = self._due_ms
        self._on_tick()

        # The tick may have cancelled (or restarted) us; only re-arm our own handle.
        if self._due_ms == due:
            self._due_ms = due + self.period_ms
            if self._due_ms <= now_ms:
                # Stalled for more than a period: drop the missed ticks.
                logger.debug("Tick late by %d ms", now_ms - due)
                self._due_ms = now_ms + self.period_ms
        return True
