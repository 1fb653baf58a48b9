from __future__ import annotations

from core.domain import Budget, EntityKind, Expenditure, Project
from core.services.common.base import ServiceBase
from core.services.query.models import QueryCriteria
from core.services.query.options import FilterOptions, build_filter_options
from core.services.query.pipeline import run_query


class QueryService(ServiceBase):
    """Runs the search/filter/sort pipeline over fresh store snapshots."""

    def budgets(self, criteria: QueryCriteria | None = None) -> list[Budget]:
        return run_query(self._store.get_budgets(), EntityKind.BUDGET, criteria or QueryCriteria())

    def projects(self, criteria: QueryCriteria | None = None) -> list[Project]:
        return run_query(self._store.get_projects(), EntityKind.PROJECT, criteria or QueryCriteria())

    def expenditures(self, criteria: QueryCriteria | None = None) -> list[Expenditure]:
        return run_query(
            self._store.get_expenditures(),
            EntityKind.EXPENDITURE,
            criteria or QueryCriteria(),
            projects=self._store.get_projects(),
        )

    def view(self, kind: EntityKind, criteria: QueryCriteria | None = None) -> list:
        if kind is EntityKind.BUDGET:
            return self.budgets(criteria)
        if kind is EntityKind.PROJECT:
            return self.projects(criteria)
        if kind is EntityKind.EXPENDITURE:
            return self.expenditures(criteria)
        return list(self._store.get_reports())

    def filter_options(self) -> FilterOptions:
        return build_filter_options(self._store.get_budgets(), self._store.get_projects())


__all__ = ["QueryService"]
