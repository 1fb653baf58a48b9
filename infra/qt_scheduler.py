# infra/qt_scheduler.py
from __future__ import annotations

import logging
from typing import Callable

from PySide6.QtCore import QObject, QTimer

logger = logging.getLogger(__name__)


class _QtTimerHandle:
    def __init__(self, timer: QTimer) -> None:
        self._timer = timer

    @property
    def active(self) -> bool:
        return self._timer.isActive()

    def cancel(self) -> None:
        if self._timer.isActive():
            self._timer.stop()
        self._timer.deleteLater()


class QtTimerScheduler:
    """Runs repeating callbacks on the Qt event loop of the calling thread."""

    def __init__(self, parent: QObject | None = None) -> None:
        self._parent = parent

    def schedule_repeating(self, interval_seconds: float, callback: Callable[[], None]) -> _QtTimerHandle:
        if interval_seconds <= 0:
            raise ValueError("Timer interval must be positive.")
        timer = QTimer(self._parent)
        timer.setInterval(int(round(interval_seconds * 1000)))
        timer.timeout.connect(callback)
        timer.start()
        logger.debug("Qt timer started every %dms", timer.interval())
        return _QtTimerHandle(timer)


__all__ = ["QtTimerScheduler"]
