from .records import RecordStore, seed_records
from .simulation import ManualScheduler, SimulationParameters, SimulationTicker, TickResult
from .metrics import DashboardMetrics, HealthBand, MetricsAggregator
from .query import QueryCriteria, QueryFilters, QueryService, SortDirection, SortSpec
from .selection import ComparisonRow, SelectionService
from .irregularity import ReportDraft, ReportWorkflow, WorkflowState
from .dashboard import DashboardData, DashboardService

__all__ = [
    "RecordStore",
    "seed_records",
    "SimulationTicker",
    "SimulationParameters",
    "ManualScheduler",
    "TickResult",
    "MetricsAggregator",
    "DashboardMetrics",
    "HealthBand",
    "QueryService",
    "QueryCriteria",
    "QueryFilters",
    "SortSpec",
    "SortDirection",
    "SelectionService",
    "ComparisonRow",
    "ReportWorkflow",
    "ReportDraft",
    "WorkflowState",
    "DashboardService",
    "DashboardData",
]
