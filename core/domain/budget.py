from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from core.domain.identifiers import generate_id
from core.exceptions import ValidationError


@dataclass(frozen=True)
class Budget:
    id: str
    department: str
    category: str
    allocated: float
    spent: float
    region: str
    last_updated: datetime

    @property
    def is_overspent(self) -> bool:
        return self.spent > self.allocated

    @staticmethod
    def create(
        department: str,
        category: str,
        allocated: float,
        spent: float = 0.0,
        region: str = "National",
        last_updated: datetime | None = None,
        id: str | None = None,
    ) -> "Budget":
        if allocated is None or allocated <= 0:
            raise ValidationError(
                "Budget allocation must be greater than zero.",
                code="BUDGET_ALLOCATION_INVALID",
            )
        if spent < 0:
            raise ValidationError("Budget spend cannot be negative.", code="BUDGET_SPENT_NEGATIVE")
        return Budget(
            id=id or generate_id(),
            department=department.strip(),
            category=category.strip(),
            allocated=float(allocated),
            spent=float(spent),
            region=region.strip(),
            last_updated=last_updated or datetime.now(timezone.utc),
        )


__all__ = ["Budget"]
