from .models import ReportDraft, WorkflowState
from .templates import budget_concern, project_concern, transaction_review
from .workflow import ReportWorkflow

__all__ = [
    "ReportWorkflow",
    "ReportDraft",
    "WorkflowState",
    "budget_concern",
    "project_concern",
    "transaction_review",
]
