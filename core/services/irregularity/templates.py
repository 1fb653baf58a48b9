"""Draft defaults for the "report issue" shortcuts on budget, project and transaction rows."""
from __future__ import annotations

from typing import Any

from core.domain import Budget, Expenditure, Project


def budget_concern(budget: Budget) -> dict[str, Any]:
    return {
        "department": budget.department,
        "subject": f"Budget Concern: {budget.department}",
    }


def project_concern(project: Project) -> dict[str, Any]:
    return {
        "project_id": project.id,
        "department": project.department,
        "subject": f"Project Concern: {project.name}",
    }


def transaction_review(expenditure: Expenditure) -> dict[str, Any]:
    return {
        "department": expenditure.department,
        "project_id": expenditure.project_id,
        "subject": f"Transaction Review: {expenditure.description}",
    }


__all__ = ["budget_concern", "project_concern", "transaction_review"]
