from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Optional

from core.domain.enums import ProjectStatus
from core.domain.identifiers import generate_id
from core.exceptions import ValidationError


def _clamp_percent(value: float) -> float:
    return min(max(float(value), 0.0), 100.0)


@dataclass(frozen=True)
class Project:
    id: str
    name: str
    department: str
    budget: float
    spent: float
    status: ProjectStatus
    progress: float
    start_date: Optional[date]
    end_date: Optional[date]
    region: str
    description: str
    updated_at: datetime
    risk: float

    @property
    def is_completed(self) -> bool:
        return self.status == ProjectStatus.COMPLETED

    @staticmethod
    def create(
        name: str,
        department: str,
        budget: float,
        spent: float = 0.0,
        status: ProjectStatus = ProjectStatus.ON_TRACK,
        progress: float = 0.0,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        region: str = "National",
        description: str = "",
        updated_at: datetime | None = None,
        risk: float = 0.0,
        id: str | None = None,
    ) -> "Project":
        if not name or not name.strip():
            raise ValidationError("Project name cannot be empty.", code="PROJECT_NAME_EMPTY")
        if budget is None or budget <= 0:
            raise ValidationError("Project budget must be greater than zero.", code="PROJECT_BUDGET_INVALID")
        if spent < 0:
            raise ValidationError("Project spend cannot be negative.", code="PROJECT_SPENT_NEGATIVE")
        if start_date and end_date and end_date < start_date:
            raise ValidationError("Project end date is before its start date.", code="PROJECT_INVALID_DATES")

        progress = _clamp_percent(progress)
        status = ProjectStatus(status)
        if status == ProjectStatus.COMPLETED and progress < 100.0:
            raise ValidationError(
                "A project can only be completed once progress reaches 100%.",
                code="PROJECT_COMPLETED_EARLY",
            )
        if progress >= 100.0:
            status = ProjectStatus.COMPLETED

        return Project(
            id=id or generate_id(),
            name=name.strip(),
            department=department.strip(),
            budget=float(budget),
            spent=float(spent),
            status=status,
            progress=progress,
            start_date=start_date,
            end_date=end_date,
            region=region.strip(),
            description=description.strip(),
            updated_at=updated_at or datetime.now(timezone.utc),
            risk=_clamp_percent(risk),
        )


__all__ = ["Project"]
