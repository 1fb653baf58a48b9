from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from core.domain.enums import ReportStatus, ReportType, Severity
from core.domain.identifiers import generate_id
from core.exceptions import ValidationError


@dataclass(frozen=True)
class IrregularityReport:
    id: str
    type: ReportType
    subject: str
    description: str
    severity: Severity
    status: ReportStatus = ReportStatus.SUBMITTED
    department: Optional[str] = None
    project_id: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    reference: Optional[str] = None

    @staticmethod
    def create(
        subject: str,
        description: str,
        type: ReportType = ReportType.SPENDING_CONCERN,
        severity: Severity = Severity.MEDIUM,
        status: ReportStatus = ReportStatus.SUBMITTED,
        department: Optional[str] = None,
        project_id: Optional[str] = None,
        created_at: datetime | None = None,
        reference: Optional[str] = None,
        id: str | None = None,
    ) -> "IrregularityReport":
        if not subject or not subject.strip():
            raise ValidationError("Report subject cannot be empty.", code="REPORT_SUBJECT_EMPTY")
        if not description or not description.strip():
            raise ValidationError("Report description cannot be empty.", code="REPORT_DESCRIPTION_EMPTY")
        return IrregularityReport(
            id=id or generate_id("r-"),
            type=ReportType(type),
            subject=subject.strip(),
            description=description.strip(),
            severity=Severity(severity),
            status=ReportStatus(status),
            department=(department or "").strip() or None,
            project_id=(project_id or "").strip() or None,
            created_at=created_at or datetime.now(timezone.utc),
            reference=(reference or "").strip() or None,
        )


__all__ = ["IrregularityReport"]
