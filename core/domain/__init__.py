from core.domain.budget import Budget
from core.domain.enums import EntityKind, ProjectStatus, ReportStatus, ReportType, Severity
from core.domain.expenditure import Expenditure
from core.domain.identifiers import generate_id
from core.domain.project import Project
from core.domain.report import IrregularityReport

__all__ = [
    "generate_id",
    "EntityKind",
    "ProjectStatus",
    "ReportType",
    "Severity",
    "ReportStatus",
    "Budget",
    "Project",
    "Expenditure",
    "IrregularityReport",
]
