# infra/analytics.py
from __future__ import annotations

import json
import logging
import re
import uuid
from collections import Counter
from dataclasses import asdict, dataclass, replace
from datetime import datetime, timedelta, timezone
from pathlib import Path
from threading import Lock
from typing import Any, Callable, Mapping

logger = logging.getLogger(__name__)

EVENT_TYPES = ("page_view", "interaction", "search", "export", "filter", "error")
MAX_EVENTS = 1000
MAX_STRING_LENGTH = 100
TOP_LIMIT = 10

_SENSITIVE_KEY_PARTS = (
    "email",
    "phone",
    "address",
    "name",
    "ssn",
    "id",
    "password",
    "token",
    "key",
    "secret",
    "auth",
)
_EMAIL_PATTERN = re.compile(r"\b[\w.-]+@[\w.-]+\.\w+\b")
_PHONE_PATTERN = re.compile(r"\b\d{3}-?\d{3}-?\d{4}\b")
_SSN_PATTERN = re.compile(r"\b\d{3}-?\d{2}-?\d{4}\b")
_DIGITS = re.compile(r"\d+")


@dataclass(frozen=True)
class AnalyticsPreferences:
    enabled: bool = True
    retention_days: int = 30


@dataclass(frozen=True)
class AnalyticsEvent:
    type: str
    data: dict[str, Any]
    timestamp: datetime
    session_id: str


@dataclass(frozen=True)
class UsageInsights:
    total_events: int
    events_by_type: dict[str, int]
    top_pages: list[tuple[str, int]]
    top_searches: list[tuple[str, int]]
    error_rate: float
    session_duration: timedelta


def _is_sensitive_key(key: object) -> bool:
    lowered = str(key or "").lower()
    return any(part in lowered for part in _SENSITIVE_KEY_PARTS)


def sanitize_text(value: str) -> str:
    text = _EMAIL_PATTERN.sub("[email]", str(value))
    text = _PHONE_PATTERN.sub("[phone]", text)
    text = _SSN_PATTERN.sub("[ssn]", text)
    return text[:MAX_STRING_LENGTH]


def sanitize_data(data: Mapping[str, Any] | None) -> dict[str, Any]:
    """
    Strip anything that could identify a person.

    Keys that look sensitive are dropped, strings are masked and truncated,
    numbers and booleans pass through, lists keep their sanitized strings and
    scalars. Anything else (nested mappings, objects) is dropped.
    """
    out: dict[str, Any] = {}
    for key, value in (data or {}).items():
        if _is_sensitive_key(key):
            continue
        if isinstance(value, str):
            out[str(key)] = sanitize_text(value)
        elif isinstance(value, (bool, int, float)):
            out[str(key)] = value
        elif isinstance(value, (list, tuple)):
            out[str(key)] = [sanitize_text(v) if isinstance(v, str) else v for v in value]
    return out


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class UsageAnalytics:
    """
    In-process, privacy-respecting usage log.

    Events live only in memory; the opt-out preference and retention window
    are the only things persisted (when a preferences path is given).
    """

    def __init__(
        self,
        preferences_path: str | Path | None = None,
        *,
        clock: Callable[[], datetime] = _utc_now,
        max_events: int = MAX_EVENTS,
    ) -> None:
        self._preferences_path = Path(preferences_path) if preferences_path else None
        self._clock = clock
        self._max_events = max_events
        self._lock = Lock()
        self._events: list[AnalyticsEvent] = []
        self._session_id = f"session_{int(clock().timestamp() * 1000)}_{uuid.uuid4().hex[:9]}"
        self._preferences = self._load_preferences()

    @property
    def session_id(self) -> str:
        return self._session_id

    @property
    def preferences(self) -> AnalyticsPreferences:
        return self._preferences

    @property
    def events(self) -> tuple[AnalyticsEvent, ...]:
        with self._lock:
            return tuple(self._events)

    # --------------------------------------------------------------
    # Preferences
    # --------------------------------------------------------------
    def set_preferences(self, *, enabled: bool | None = None, retention_days: int | None = None) -> AnalyticsPreferences:
        changes: dict[str, Any] = {}
        if enabled is not None:
            changes["enabled"] = bool(enabled)
        if retention_days is not None:
            changes["retention_days"] = max(1, int(retention_days))
        self._preferences = replace(self._preferences, **changes)
        self._save_preferences()
        if not self._preferences.enabled:
            self.clear()
        else:
            with self._lock:
                self._prune()
        return self._preferences

    def _load_preferences(self) -> AnalyticsPreferences:
        if self._preferences_path is None or not self._preferences_path.exists():
            return AnalyticsPreferences()
        try:
            raw = json.loads(self._preferences_path.read_text(encoding="utf-8"))
            return AnalyticsPreferences(
                enabled=bool(raw.get("enabled", True)),
                retention_days=max(1, int(raw.get("retention_days", 30))),
            )
        except (OSError, ValueError, TypeError, AttributeError):
            logger.warning("Failed to parse analytics preferences at %s; using defaults", self._preferences_path)
            return AnalyticsPreferences()

    def _save_preferences(self) -> None:
        if self._preferences_path is None:
            return
        try:
            self._preferences_path.parent.mkdir(parents=True, exist_ok=True)
            self._preferences_path.write_text(json.dumps(asdict(self._preferences)), encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not save analytics preferences: %s", exc)

    # --------------------------------------------------------------
    # Recording
    # --------------------------------------------------------------
    def track(self, event_type: str, data: Mapping[str, Any] | None = None) -> None:
        if not self._preferences.enabled:
            return
        if event_type not in EVENT_TYPES:
            logger.debug("Dropping analytics event of unknown type %r", event_type)
            return
        event = AnalyticsEvent(
            type=event_type,
            data=sanitize_data(data),
            timestamp=self._clock(),
            session_id=self._session_id,
        )
        with self._lock:
            self._events.append(event)
            self._prune()

    def _prune(self) -> None:
        cutoff = self._clock() - timedelta(days=self._preferences.retention_days)
        kept = [e for e in self._events if e.timestamp > cutoff]
        if len(kept) > self._max_events:
            kept = kept[-self._max_events:]
        self._events = kept

    def clear(self) -> None:
        with self._lock:
            self._events = []

    # --------------------------------------------------------------
    # Reading
    # --------------------------------------------------------------
    def insights(self) -> UsageInsights:
        if not self._preferences.enabled:
            return UsageInsights(0, {}, [], [], 0.0, timedelta(0))
        events = self.events

        by_type = Counter(e.type for e in events)
        pages = Counter(str(e.data.get("page") or "unknown") for e in events if e.type == "page_view")
        searches = Counter(
            str(e.data["query"]) for e in events if e.type == "search" and e.data.get("query")
        )
        error_rate = by_type.get("error", 0) / len(events) * 100 if events else 0.0

        session = [e.timestamp for e in events if e.session_id == self._session_id]
        duration = max(session) - min(session) if len(session) > 1 else timedelta(0)

        return UsageInsights(
            total_events=len(events),
            events_by_type=dict(by_type),
            top_pages=pages.most_common(TOP_LIMIT),
            top_searches=searches.most_common(TOP_LIMIT),
            error_rate=error_rate,
            session_duration=duration,
        )

    def export_json(self) -> str:
        """Anonymized dump: digits in session ids are masked."""
        if not self._preferences.enabled:
            return "[]"
        rows = [
            {
                "type": e.type,
                "data": e.data,
                "timestamp": e.timestamp.isoformat(),
                "sessionId": _DIGITS.sub("X", e.session_id),
            }
            for e in self.events
        ]
        return json.dumps(rows, indent=2)


__all__ = [
    "EVENT_TYPES",
    "AnalyticsPreferences",
    "AnalyticsEvent",
    "UsageInsights",
    "UsageAnalytics",
    "sanitize_data",
    "sanitize_text",
]
