from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from core.domain.identifiers import generate_id
from core.exceptions import ValidationError


@dataclass(frozen=True)
class Expenditure:
    id: str
    project_id: Optional[str]
    department: str
    description: str
    amount: float
    date: datetime
    category: str

    @staticmethod
    def create(
        department: str,
        description: str,
        amount: float,
        category: str,
        project_id: Optional[str] = None,
        date: datetime | None = None,
        id: str | None = None,
    ) -> "Expenditure":
        if amount is None or amount <= 0:
            raise ValidationError(
                "Expenditure amount must be greater than zero.",
                code="EXPENDITURE_AMOUNT_INVALID",
            )
        return Expenditure(
            id=id or generate_id(),
            project_id=project_id or None,
            department=department.strip(),
            description=description.strip(),
            amount=float(amount),
            date=date or datetime.now(timezone.utc),
            category=category.strip(),
        )


__all__ = ["Expenditure"]
