# core/interfaces.py
"""Narrow collaborator contracts the core depends on.

Presentation glue (translations, screen-reader output, analytics storage,
file saving, timers) lives outside the core and is injected through these
protocols. Every collaborator is optional: the null implementations in
``core.services.common.collaborators`` keep the core fully functional.
"""
from __future__ import annotations

from typing import Any, Callable, Mapping, Protocol, runtime_checkable


@runtime_checkable
class Translator(Protocol):
    current_language: str

    def translate(self, key: str) -> str: ...


@runtime_checkable
class Announcer(Protocol):
    def announce(self, text: str) -> None: ...

    def speak(self, text: str) -> None: ...


@runtime_checkable
class AnalyticsSink(Protocol):
    def track(self, event_type: str, data: Mapping[str, Any] | None = None) -> None: ...


@runtime_checkable
class FileSaver(Protocol):
    def save(self, filename: str, payload: bytes) -> None: ...


class ScheduledHandle(Protocol):
    def cancel(self) -> None: ...

    @property
    def active(self) -> bool: ...


class Scheduler(Protocol):
    def schedule_repeating(self, interval_seconds: float, callback: Callable[[], None]) -> ScheduledHandle: ...


__all__ = [
    "Translator",
    "Announcer",
    "AnalyticsSink",
    "FileSaver",
    "ScheduledHandle",
    "Scheduler",
]
