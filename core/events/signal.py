from __future__ import annotations

from threading import RLock
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class Signal(Generic[T]):
    """
    Minimal framework-agnostic signal/slot primitive.
    Store and simulation notifications go through it so the core never needs Qt.
    """

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._subscribers: list[Callable[[T], None]] = []
        self._lock: RLock = RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._subscribers)

    def connect(self, callback: Callable[[T], None]) -> None:
        with self._lock:
            if callback not in self._subscribers:
                self._subscribers.append(callback)

    def disconnect(self, callback: Callable[[T], None]) -> None:
        with self._lock:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

    def disconnect_all(self) -> None:
        with self._lock:
            self._subscribers.clear()

    def emit(self, payload: T) -> None:
        with self._lock:
            subscribers = list(self._subscribers)
        stale_callbacks: list[Callable[[T], None]] = []
        for callback in subscribers:
            try:
                callback(payload)
            except RuntimeError as exc:
                # Qt slots can outlive their QObject:
                # "Internal C++ object (...) already deleted."
                msg = str(exc).lower()
                if "already deleted" in msg or "has been deleted" in msg:
                    stale_callbacks.append(callback)
                    continue
                raise
            except ReferenceError:
                stale_callbacks.append(callback)
        if stale_callbacks:
            with self._lock:
                for callback in stale_callbacks:
                    if callback in self._subscribers:
                        self._subscribers.remove(callback)


__all__ = ["Signal"]
