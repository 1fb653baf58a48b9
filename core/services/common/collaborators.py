from __future__ import annotations

from typing import Any, Mapping


class NullTranslator:
    """Returns keys unchanged; enough for headless use and tests."""

    current_language = "en"

    def translate(self, key: str) -> str:
        return key


class NullAnnouncer:
    def announce(self, text: str) -> None:
        return None

    def speak(self, text: str) -> None:
        return None


class NullAnalytics:
    def track(self, event_type: str, data: Mapping[str, Any] | None = None) -> None:
        return None


__all__ = ["NullTranslator", "NullAnnouncer", "NullAnalytics"]
