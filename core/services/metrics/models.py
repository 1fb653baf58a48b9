from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from core.domain import ProjectStatus, ReportStatus


class HealthBand(str, Enum):
    HEALTHY = "HEALTHY"
    WARNING = "WARNING"
    CRITICAL = "CRITICAL"


@dataclass(frozen=True)
class DashboardMetrics:
    total_allocated: float
    total_spent: float
    overall_utilization: Optional[float]   # None when not computable
    utilization_band: Optional[HealthBand]
    status_counts: Mapping[ProjectStatus, int]
    report_status_counts: Mapping[ReportStatus, int]
    transparency_index: int
    transparency_band: HealthBand
    overspent_budget_ids: tuple[str, ...]


__all__ = ["HealthBand", "DashboardMetrics"]
