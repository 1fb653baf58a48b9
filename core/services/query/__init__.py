from .models import ALL, QueryCriteria, QueryFilters, SortDirection, SortSpec, is_all, toggle_sort
from .options import FilterOptions, build_filter_options
from .pipeline import (
    FILTER_FIELDS,
    SEARCH_FIELDS,
    apply_filters,
    apply_search,
    order_expenditures,
    run_query,
    sort_records,
    sortable_fields,
)
from .service import QueryService

__all__ = [
    "ALL",
    "is_all",
    "QueryCriteria",
    "QueryFilters",
    "SortDirection",
    "SortSpec",
    "toggle_sort",
    "FilterOptions",
    "build_filter_options",
    "SEARCH_FIELDS",
    "FILTER_FIELDS",
    "apply_search",
    "apply_filters",
    "sort_records",
    "order_expenditures",
    "run_query",
    "sortable_fields",
    "QueryService",
]
