"""Pure metric functions over record snapshots."""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Sequence

from core.domain import Budget, IrregularityReport, Project, ProjectStatus, ReportStatus
from core.services.common.numeric import clamp, percent_of, round_half_up
from core.services.metrics.models import HealthBand

TARGET_UTILIZATION = 60.0
BUDGET_WEIGHT = 0.6
RESOLUTION_WEIGHT = 0.4
NEUTRAL_RESOLUTION_RATIO = 0.5


def total_allocated(budgets: Iterable[Budget]) -> float:
    return float(sum(b.allocated for b in budgets))


def total_spent(budgets: Iterable[Budget]) -> float:
    return float(sum(b.spent for b in budgets))


def overall_utilization(budgets: Sequence[Budget]) -> Optional[float]:
    return percent_of(total_spent(budgets), total_allocated(budgets))


def budget_utilization(budget: Budget) -> Optional[float]:
    return percent_of(budget.spent, budget.allocated)


def project_utilization(project: Project) -> Optional[float]:
    return percent_of(project.spent, project.budget)


def status_counts(projects: Iterable[Project]) -> Mapping[ProjectStatus, int]:
    counts = {status: 0 for status in ProjectStatus}
    for project in projects:
        counts[project.status] += 1
    return MappingProxyType(counts)


def report_status_counts(reports: Iterable[IrregularityReport]) -> Mapping[ReportStatus, int]:
    counts = {status: 0 for status in ReportStatus}
    for report in reports:
        counts[report.status] += 1
    return MappingProxyType(counts)


def overspent_budget_ids(budgets: Iterable[Budget]) -> tuple[str, ...]:
    return tuple(b.id for b in budgets if b.allocated > 0 and b.spent > b.allocated)


def transparency_index(budgets: Sequence[Budget], reports: Sequence[IrregularityReport]) -> int:
    """
    Fixed heuristic blending budget execution and report handling.

    Budgets score best at 60% utilization; the mean absolute distance from
    that target is turned into a 0..1 norm. Reports contribute the share that
    is resolved, 0.5 when there are none. Result = round((0.6*norm + 0.4*ratio) * 100).
    """
    utilizations = [u for u in (budget_utilization(b) for b in budgets) if u is not None]
    if utilizations:
        avg_deviation = sum(abs(u - TARGET_UTILIZATION) for u in utilizations) / len(utilizations)
        norm = max(0.0, 100.0 - avg_deviation) / 100.0
    else:
        norm = 0.0

    if reports:
        resolved = sum(1 for r in reports if r.status == ReportStatus.RESOLVED)
        resolution_ratio = resolved / len(reports)
    else:
        resolution_ratio = NEUTRAL_RESOLUTION_RATIO

    score = (BUDGET_WEIGHT * norm + RESOLUTION_WEIGHT * resolution_ratio) * 100.0
    return int(clamp(round_half_up(score), 0, 100))


def utilization_band(utilization: Optional[float]) -> Optional[HealthBand]:
    if utilization is None:
        return None
    if utilization > 90:
        return HealthBand.CRITICAL
    if utilization > 70:
        return HealthBand.WARNING
    return HealthBand.HEALTHY


def transparency_band(index: int) -> HealthBand:
    if index > 70:
        return HealthBand.HEALTHY
    if index > 50:
        return HealthBand.WARNING
    return HealthBand.CRITICAL


__all__ = [
    "total_allocated",
    "total_spent",
    "overall_utilization",
    "budget_utilization",
    "project_utilization",
    "status_counts",
    "report_status_counts",
    "overspent_budget_ids",
    "transparency_index",
    "utilization_band",
    "transparency_band",
]
