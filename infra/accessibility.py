# infra/accessibility.py
from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class LoggingAnnouncer:
    """
    Headless stand-in for screen-reader and speech output.

    Messages are logged and kept, newest last, so callers and tests can see
    what would have been read out.
    """

    def __init__(self, *, voice_enabled: bool = False) -> None:
        self.voice_enabled = voice_enabled
        self.announcements: list[str] = []
        self.spoken: list[str] = []

    def announce(self, text: str) -> None:
        self.announcements.append(text)
        logger.info("Announcement: %s", text)

    def speak(self, text: str) -> None:
        if not self.voice_enabled:
            return
        self.spoken.append(text)
        logger.info("Speech: %s", text)


__all__ = ["LoggingAnnouncer"]
