from __future__ import annotations

from core.domain import Budget, Project
from core.services.common.base import ServiceBase
from core.services.metrics import calculations as calc
from core.services.metrics.models import DashboardMetrics


class MetricsAggregator(ServiceBase):
    """
    Derived statistics over the current store contents.

    Nothing is cached: every call reads fresh snapshots, so results always
    reflect the latest tick and repeated calls on unchanged state agree.
    """

    def total_allocated(self) -> float:
        return calc.total_allocated(self._store.get_budgets())

    def total_spent(self) -> float:
        return calc.total_spent(self._store.get_budgets())

    def overall_utilization(self) -> float | None:
        return calc.overall_utilization(self._store.get_budgets())

    def budget_utilization(self, budget: Budget) -> float | None:
        return calc.budget_utilization(budget)

    def project_utilization(self, project: Project) -> float | None:
        return calc.project_utilization(project)

    def status_counts(self):
        return calc.status_counts(self._store.get_projects())

    def report_status_counts(self):
        return calc.report_status_counts(self._store.get_reports())

    def transparency_index(self) -> int:
        return calc.transparency_index(self._store.get_budgets(), self._store.get_reports())

    def snapshot(self) -> DashboardMetrics:
        budgets = self._store.get_budgets()
        projects = self._store.get_projects()
        reports = self._store.get_reports()
        utilization = calc.overall_utilization(budgets)
        index = calc.transparency_index(budgets, reports)
        return DashboardMetrics(
            total_allocated=calc.total_allocated(budgets),
            total_spent=calc.total_spent(budgets),
            overall_utilization=utilization,
            utilization_band=calc.utilization_band(utilization),
            status_counts=calc.status_counts(projects),
            report_status_counts=calc.report_status_counts(reports),
            transparency_index=index,
            transparency_band=calc.transparency_band(index),
            overspent_budget_ids=calc.overspent_budget_ids(budgets),
        )


__all__ = ["MetricsAggregator"]
