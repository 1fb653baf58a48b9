from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Optional

from core.domain import ReportType, Severity


class WorkflowState(str, Enum):
    DRAFTING = "DRAFTING"
    PENDING_CONFIRMATION = "PENDING_CONFIRMATION"
    STORED = "STORED"


@dataclass
class ReportDraft:
    type: ReportType = ReportType.SPENDING_CONCERN
    severity: Severity = Severity.MEDIUM
    subject: str = ""
    description: str = ""
    department: Optional[str] = None
    project_id: Optional[str] = None
    reference: Optional[str] = None

    @classmethod
    def field_names(cls) -> frozenset[str]:
        return frozenset(f.name for f in fields(cls))

    @property
    def is_complete(self) -> bool:
        return bool((self.subject or "").strip()) and bool((self.description or "").strip())


__all__ = ["WorkflowState", "ReportDraft"]
