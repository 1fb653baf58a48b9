from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Optional

ALL = "All"


def is_all(value: Any) -> bool:
    """True for the match-everything sentinel (``ALL``, None or blank)."""
    if value is None:
        return True
    text = getattr(value, "value", value)
    return str(text).strip() in ("", ALL)


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


@dataclass(frozen=True)
class SortSpec:
    key: str
    direction: SortDirection = SortDirection.ASC

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESC

    def toggled(self, key: str) -> "SortSpec":
        """Header-click semantics: same key flips direction, a new key starts ascending."""
        if key == self.key:
            return SortSpec(key, self.direction.flipped())
        return SortSpec(key, SortDirection.ASC)


def toggle_sort(current: Optional[SortSpec], key: str) -> SortSpec:
    if current is None:
        return SortSpec(key, SortDirection.ASC)
    return current.toggled(key)


@dataclass(frozen=True)
class QueryFilters:
    department: Any = ALL
    region: Any = ALL
    status: Any = ALL
    category: Any = ALL

    def active(self) -> dict[str, Any]:
        return {
            name: getattr(self, name)
            for name in ("department", "region", "status", "category")
            if not is_all(getattr(self, name))
        }

    def with_value(self, name: str, value: Any) -> "QueryFilters":
        return replace(self, **{name: ALL if is_all(value) else value})


@dataclass(frozen=True)
class QueryCriteria:
    search: str = ""
    filters: QueryFilters = field(default_factory=QueryFilters)
    sort: Optional[SortSpec] = None


__all__ = [
    "ALL",
    "is_all",
    "SortDirection",
    "SortSpec",
    "toggle_sort",
    "QueryFilters",
    "QueryCriteria",
]
