from .comparison import (
    BudgetComparison,
    ComparisonItem,
    ComparisonRow,
    ProjectComparison,
    comparison_rows,
    project_item,
    resolve_items,
)
from .service import COMPARE, WATCHLIST, SelectionService, toggle

__all__ = [
    "SelectionService",
    "toggle",
    "COMPARE",
    "WATCHLIST",
    "BudgetComparison",
    "ProjectComparison",
    "ComparisonItem",
    "ComparisonRow",
    "comparison_rows",
    "project_item",
    "resolve_items",
]
