from __future__ import annotations

from typing import TYPE_CHECKING

from core.events.domain_events import DomainEvents

if TYPE_CHECKING:
    from core.services.records.store import RecordStore


class ServiceBase:
    def __init__(self, store: "RecordStore", events: DomainEvents | None = None):
        self._store = store
        self._events = events or store.events

    @property
    def store(self) -> "RecordStore":
        return self._store


__all__ = ["ServiceBase"]
