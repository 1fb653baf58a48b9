from .calculations import (
    budget_utilization,
    overall_utilization,
    project_utilization,
    transparency_index,
)
from .models import DashboardMetrics, HealthBand
from .service import MetricsAggregator

__all__ = [
    "MetricsAggregator",
    "DashboardMetrics",
    "HealthBand",
    "budget_utilization",
    "project_utilization",
    "overall_utilization",
    "transparency_index",
]
