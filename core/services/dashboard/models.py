from __future__ import annotations

from dataclasses import dataclass
from typing import List

from core.domain import Budget, Expenditure, IrregularityReport, Project
from core.services.metrics.models import DashboardMetrics
from core.services.query.options import FilterOptions
from core.services.selection.comparison import ComparisonRow

PAGES = ("overview", "budgets", "projects", "expenditures", "reports", "compare")


@dataclass
class DashboardData:
    metrics: DashboardMetrics
    budgets: List[Budget]
    projects: List[Project]
    expenditures: List[Expenditure]
    reports: List[IrregularityReport]
    comparison: List[ComparisonRow]
    watchlist: List[str]
    filter_options: FilterOptions


__all__ = ["DashboardData", "PAGES"]
