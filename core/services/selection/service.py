from __future__ import annotations

import logging

from core.services.common.base import ServiceBase
from core.services.selection.comparison import ComparisonRow, comparison_rows

logger = logging.getLogger(__name__)

COMPARE = "compare"
WATCHLIST = "watchlist"


def toggle(ids: frozenset[str], item_id: str) -> frozenset[str]:
    """Add when absent, remove when present."""
    return ids ^ {item_id}


class SelectionService(ServiceBase):
    """
    Comparison set and watchlist of record ids.

    Both are plain id sets, independent of record contents. Insertion order
    is remembered so the comparison table lists items as they were picked.
    """

    def __init__(self, store, events=None) -> None:
        super().__init__(store, events)
        self._compare: dict[str, None] = {}
        self._watchlist: dict[str, None] = {}

    @property
    def compare_set(self) -> frozenset[str]:
        return frozenset(self._compare)

    @property
    def watchlist(self) -> frozenset[str]:
        return frozenset(self._watchlist)

    def toggle_compare(self, item_id: str) -> bool:
        return self._toggle(self._compare, item_id, COMPARE)

    def toggle_watch(self, item_id: str) -> bool:
        return self._toggle(self._watchlist, item_id, WATCHLIST)

    def is_compared(self, item_id: str) -> bool:
        return item_id in self._compare

    def is_watched(self, item_id: str) -> bool:
        return item_id in self._watchlist

    def clear_compare(self) -> None:
        if self._compare:
            self._compare.clear()
            self._events.selection_changed.emit(COMPARE)

    def comparison(self) -> list[ComparisonRow]:
        return comparison_rows(list(self._compare), self._store)

    def _toggle(self, bucket: dict[str, None], item_id: str, name: str) -> bool:
        """Returns True when the id is now selected."""
        if item_id in bucket:
            del bucket[item_id]
            selected = False
        else:
            bucket[item_id] = None
            selected = True
        logger.debug("%s %s %s", name, "added" if selected else "removed", item_id)
        self._events.selection_changed.emit(name)
        return selected


__all__ = ["SelectionService", "toggle", "COMPARE", "WATCHLIST"]
