from __future__ import annotations

from enum import Enum


class ProjectStatus(str, Enum):
    ON_TRACK = "ON_TRACK"
    DELAYED = "DELAYED"
    COMPLETED = "COMPLETED"
    AT_RISK = "AT_RISK"

    @property
    def translation_key(self) -> str:
        return "status." + self.value.lower().replace("_", "-")


class ReportType(str, Enum):
    SPENDING_CONCERN = "SPENDING_CONCERN"
    FRAUD_SUSPICION = "FRAUD_SUSPICION"
    DELAY_JUSTIFICATION = "DELAY_JUSTIFICATION"
    MISALLOCATION = "MISALLOCATION"
    QUALITY_ISSUE = "QUALITY_ISSUE"

    @property
    def translation_key(self) -> str:
        return "report.type." + self.value.lower().replace("_", "-")


class Severity(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"

    @property
    def translation_key(self) -> str:
        return "severity." + self.value.lower()


class ReportStatus(str, Enum):
    SUBMITTED = "SUBMITTED"
    UNDER_REVIEW = "UNDER_REVIEW"
    RESOLVED = "RESOLVED"

    @property
    def translation_key(self) -> str:
        return "report.status." + self.value.lower().replace("_", "-")


class EntityKind(str, Enum):
    BUDGET = "budgets"
    PROJECT = "projects"
    EXPENDITURE = "expenditures"
    REPORT = "reports"


__all__ = ["ProjectStatus", "ReportType", "Severity", "ReportStatus", "EntityKind"]
