from __future__ import annotations

import locale
import logging
import unicodedata
from dataclasses import fields
from datetime import date
from enum import Enum
from numbers import Number
from typing import Any, Iterable, Optional, Sequence, TypeVar

from core.domain import Budget, EntityKind, Expenditure, Project
from core.services.query.models import QueryCriteria, QueryFilters, SortSpec, is_all

logger = logging.getLogger(__name__)

R = TypeVar("R")

RECORD_TYPES: dict[EntityKind, type] = {
    EntityKind.BUDGET: Budget,
    EntityKind.PROJECT: Project,
    EntityKind.EXPENDITURE: Expenditure,
}

SEARCH_FIELDS: dict[EntityKind, tuple[str, ...]] = {
    EntityKind.BUDGET: ("department", "category"),
    EntityKind.PROJECT: ("name", "department"),
    EntityKind.EXPENDITURE: ("description", "department"),
}

FILTER_FIELDS: dict[EntityKind, tuple[str, ...]] = {
    EntityKind.BUDGET: ("department", "region", "category"),
    EntityKind.PROJECT: ("department", "region", "status"),
    EntityKind.EXPENDITURE: ("department", "region", "category"),
}


def sortable_fields(kind: EntityKind) -> tuple[str, ...]:
    return tuple(f.name for f in fields(RECORD_TYPES[kind]))


# ------------------------------------------------------------------
# Step 1: search
# ------------------------------------------------------------------

def matches_search(record: Any, kind: EntityKind, needle: str) -> bool:
    if not needle:
        return True
    return any(needle in str(getattr(record, name, "") or "").lower() for name in SEARCH_FIELDS[kind])


def apply_search(records: Iterable[R], kind: EntityKind, text: str) -> list[R]:
    needle = (text or "").lower()
    return [r for r in records if matches_search(r, kind, needle)]


# ------------------------------------------------------------------
# Step 2: filters
# ------------------------------------------------------------------

def _as_token(value: Any) -> str:
    return str(getattr(value, "value", value))


def apply_filters(
    records: Iterable[R],
    kind: EntityKind,
    filters: QueryFilters,
    projects: Sequence[Project] = (),
) -> list[R]:
    data = list(records)
    for name, wanted in filters.active().items():
        if name not in FILTER_FIELDS[kind]:
            continue
        token = _as_token(wanted)
        if kind is EntityKind.EXPENDITURE and name == "region":
            in_region = {p.id for p in projects if p.region == token}
            data = [e for e in data if not e.project_id or e.project_id in in_region]
        else:
            data = [r for r in data if _as_token(getattr(r, name)) == token]
    return data


# ------------------------------------------------------------------
# Step 3: sort
# ------------------------------------------------------------------

def _collation_key(text: str) -> tuple[str, str, str]:
    # Accents and case only break ties between otherwise equal letters.
    folded = text.casefold()
    base = "".join(c for c in unicodedata.normalize("NFKD", folded) if not unicodedata.combining(c))
    try:
        secondary = locale.strxfrm(folded)
    except (ValueError, OSError):
        secondary = folded
    return base, secondary, text


def _sort_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return _collation_key(str(value.value))
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (Number, date)):
        return value
    return _collation_key(str(value))


def sort_records(records: Iterable[R], kind: EntityKind, sort: Optional[SortSpec]) -> list[R]:
    data = list(records)
    if sort is None or not sort.key:
        return data
    if sort.key not in sortable_fields(kind):
        logger.warning("Ignoring unknown sort key %r for %s", sort.key, kind.value)
        return data

    # Records without a value keep their relative order after the rest.
    present = [r for r in data if getattr(r, sort.key) is not None]
    missing = [r for r in data if getattr(r, sort.key) is None]
    try:
        ordered = sorted(present, key=lambda r: _sort_value(getattr(r, sort.key)), reverse=sort.descending)
    except TypeError:
        logger.warning("Sort key %r mixes incomparable values; falling back to text order", sort.key)
        ordered = sorted(present, key=lambda r: _collation_key(str(getattr(r, sort.key))), reverse=sort.descending)
    return ordered + missing


def order_expenditures(records: Iterable[Expenditure]) -> list[Expenditure]:
    return sorted(records, key=lambda e: e.date, reverse=True)


# ------------------------------------------------------------------
# Whole pipeline
# ------------------------------------------------------------------

def run_query(
    records: Iterable[R],
    kind: EntityKind,
    criteria: QueryCriteria,
    projects: Sequence[Project] = (),
) -> list[R]:
    data = apply_search(records, kind, criteria.search)
    data = apply_filters(data, kind, criteria.filters, projects=projects)
    data = sort_records(data, kind, criteria.sort)
    if kind is EntityKind.EXPENDITURE:
        data = order_expenditures(data)
    return data


__all__ = [
    "SEARCH_FIELDS",
    "FILTER_FIELDS",
    "sortable_fields",
    "matches_search",
    "apply_search",
    "apply_filters",
    "sort_records",
    "order_expenditures",
    "run_query",
]
