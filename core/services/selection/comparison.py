from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Union

from core.domain import Budget, EntityKind, Project
from core.services.common.numeric import percent_of
from core.services.records.store import RecordStore


@dataclass(frozen=True)
class BudgetComparison:
    budget: Budget
    kind: EntityKind = EntityKind.BUDGET


@dataclass(frozen=True)
class ProjectComparison:
    project: Project
    kind: EntityKind = EntityKind.PROJECT


ComparisonItem = Union[BudgetComparison, ProjectComparison]


@dataclass(frozen=True)
class ComparisonRow:
    id: str
    kind: EntityKind
    display_name: str
    capacity: float
    consumed: float
    utilization: Optional[float]
    progress: Optional[float] = None

    @property
    def is_over_capacity(self) -> bool:
        return self.consumed > self.capacity


def resolve_item(item_id: str, store: RecordStore) -> Optional[ComparisonItem]:
    budget = store.find_budget(item_id)
    if budget is not None:
        return BudgetComparison(budget)
    project = store.find_project(item_id)
    if project is not None:
        return ProjectComparison(project)
    return None


def resolve_items(item_ids: Iterable[str], store: RecordStore) -> list[ComparisonItem]:
    """Resolve ids in the given order; stale ids are dropped."""
    items: list[ComparisonItem] = []
    for item_id in item_ids:
        item = resolve_item(item_id, store)
        if item is not None:
            items.append(item)
    return items


def project_item(item: ComparisonItem) -> ComparisonRow:
    if isinstance(item, BudgetComparison):
        b = item.budget
        return ComparisonRow(
            id=b.id,
            kind=EntityKind.BUDGET,
            display_name=b.department,
            capacity=b.allocated,
            consumed=b.spent,
            utilization=percent_of(b.spent, b.allocated),
        )
    if isinstance(item, ProjectComparison):
        p = item.project
        return ComparisonRow(
            id=p.id,
            kind=EntityKind.PROJECT,
            display_name=p.name,
            capacity=p.budget,
            consumed=p.spent,
            utilization=percent_of(p.spent, p.budget),
            progress=p.progress,
        )
    raise TypeError(f"Unsupported comparison item: {type(item).__name__}")


def comparison_rows(item_ids: Iterable[str], store: RecordStore) -> list[ComparisonRow]:
    return [project_item(item) for item in resolve_items(item_ids, store)]


__all__ = [
    "BudgetComparison",
    "ProjectComparison",
    "ComparisonItem",
    "ComparisonRow",
    "resolve_item",
    "resolve_items",
    "project_item",
    "comparison_rows",
]
