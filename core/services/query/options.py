from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from core.domain import Budget, Project, ProjectStatus
from core.services.query.models import ALL

# Display order used by the status filter.
STATUS_ORDER = (
    ProjectStatus.ON_TRACK,
    ProjectStatus.DELAYED,
    ProjectStatus.AT_RISK,
    ProjectStatus.COMPLETED,
)


@dataclass(frozen=True)
class FilterOptions:
    departments: tuple[str, ...]
    regions: tuple[str, ...]
    categories: tuple[str, ...]
    statuses: tuple[str, ...]


def build_filter_options(budgets: Sequence[Budget], projects: Sequence[Project]) -> FilterOptions:
    departments = sorted({b.department for b in budgets})
    regions = sorted({b.region for b in budgets} | {p.region for p in projects})
    categories = sorted({b.category for b in budgets})
    return FilterOptions(
        departments=(ALL, *departments),
        regions=(ALL, *regions),
        categories=(ALL, *categories),
        statuses=(ALL, *(s.value for s in STATUS_ORDER)),
    )


__all__ = ["FilterOptions", "STATUS_ORDER", "build_filter_options"]
