from __future__ import annotations

import logging
from dataclasses import dataclass, field
from threading import Event
from typing import Callable

logger = logging.getLogger(__name__)


class CancelToken:
    def __init__(self) -> None:
        self._event = Event()

    def cancel(self) -> None:
        self._event.set()

    def is_cancelled(self) -> bool:
        return self._event.is_set()


@dataclass
class _ManualTimer:
    interval: float
    callback: Callable[[], None]
    next_due: float
    order: int
    active: bool = True

    def cancel(self) -> None:
        self.active = False


@dataclass
class ManualScheduler:
    """
    Deterministic scheduler driven by ``advance``.

    Used in tests and headless runs in place of a real event-loop timer.
    Callbacks fire in due-time order; timers sharing a due time fire in
    registration order.
    """

    now: float = 0.0
    _timers: list[_ManualTimer] = field(default_factory=list)

    def schedule_repeating(self, interval_seconds: float, callback: Callable[[], None]) -> _ManualTimer:
        if interval_seconds <= 0:
            raise ValueError("Timer interval must be positive.")
        timer = _ManualTimer(
            interval=float(interval_seconds),
            callback=callback,
            next_due=self.now + float(interval_seconds),
            order=len(self._timers),
        )
        self._timers.append(timer)
        return timer

    @property
    def pending(self) -> int:
        return sum(1 for t in self._timers if t.active)

    def advance(self, seconds: float) -> int:
        """Move the clock forward, firing every callback that falls due. Returns the number fired."""
        target = self.now + float(seconds)
        fired = 0
        while True:
            due = [t for t in self._timers if t.active and t.next_due <= target]
            if not due:
                break
            timer = min(due, key=lambda t: (t.next_due, t.order))
            self.now = timer.next_due
            timer.next_due += timer.interval
            timer.callback()
            fired += 1
        self.now = target
        self._timers = [t for t in self._timers if t.active]
        return fired


__all__ = ["CancelToken", "ManualScheduler"]
