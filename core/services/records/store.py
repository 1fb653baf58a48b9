from __future__ import annotations

import logging
import random
from datetime import datetime
from typing import Callable, Iterable, Optional

from core.domain import Budget, Expenditure, IrregularityReport, Project
from core.events.domain_events import DomainEvents
from core.exceptions import ValidationError
from core.services.records.seed import seed_records

logger = logging.getLogger(__name__)

BudgetTransform = Callable[[tuple[Budget, ...]], Iterable[Budget]]
ProjectTransform = Callable[[tuple[Project, ...]], Iterable[Project]]


class RecordStore:
    """
    Sole owner of the four record collections.

    Reads hand out tuples of frozen records, so callers can never write into
    the store. Budgets and projects change only through whole-collection
    transforms; reports only grow at the front.
    """

    def __init__(
        self,
        budgets: Iterable[Budget] = (),
        projects: Iterable[Project] = (),
        expenditures: Iterable[Expenditure] = (),
        reports: Iterable[IrregularityReport] = (),
        events: DomainEvents | None = None,
    ) -> None:
        self._budgets: tuple[Budget, ...] = tuple(budgets)
        self._projects: tuple[Project, ...] = tuple(projects)
        self._expenditures: tuple[Expenditure, ...] = tuple(expenditures)
        self._reports: tuple[IrregularityReport, ...] = tuple(reports)
        self.events = events if events is not None else DomainEvents()
        self._ensure_unique_ids(self._budgets, "budget")
        self._ensure_unique_ids(self._projects, "project")
        self._ensure_unique_ids(self._expenditures, "expenditure")

    @classmethod
    def seeded(
        cls,
        rng: random.Random | None = None,
        now: datetime | None = None,
        events: DomainEvents | None = None,
    ) -> "RecordStore":
        budgets, projects, expenditures = seed_records(rng=rng, now=now)
        logger.info(
            "Seeded store with %d budgets, %d projects, %d expenditures",
            len(budgets),
            len(projects),
            len(expenditures),
        )
        return cls(budgets=budgets, projects=projects, expenditures=expenditures, events=events)

    # --------------------------------------------------------------
    # Snapshots
    # --------------------------------------------------------------

    def get_budgets(self) -> tuple[Budget, ...]:
        return self._budgets

    def get_projects(self) -> tuple[Project, ...]:
        return self._projects

    def get_expenditures(self) -> tuple[Expenditure, ...]:
        return self._expenditures

    def get_reports(self) -> tuple[IrregularityReport, ...]:
        return self._reports

    # --------------------------------------------------------------
    # Lookups (weak references resolve to None)
    # --------------------------------------------------------------

    def find_budget(self, budget_id: str | None) -> Optional[Budget]:
        if not budget_id:
            return None
        return next((b for b in self._budgets if b.id == budget_id), None)

    def find_project(self, project_id: str | None) -> Optional[Project]:
        if not project_id:
            return None
        return next((p for p in self._projects if p.id == project_id), None)

    def project_for(self, record: Expenditure | IrregularityReport) -> Optional[Project]:
        return self.find_project(getattr(record, "project_id", None))

    # --------------------------------------------------------------
    # Mutations
    # --------------------------------------------------------------

    def update_budgets(self, fn: BudgetTransform) -> tuple[Budget, ...]:
        before = self._budgets
        after = tuple(fn(before))
        self._check_records(after, Budget)
        self._ensure_unique_ids(after, "budget")
        self._budgets = after
        changed = _changed_ids(before, after)
        if changed:
            logger.debug("Budgets replaced; %d changed", len(changed))
            self.events.budgets_changed.emit(changed)
        return after

    def update_projects(self, fn: ProjectTransform) -> tuple[Project, ...]:
        before = self._projects
        after = tuple(fn(before))
        self._check_records(after, Project)
        self._ensure_unique_ids(after, "project")
        self._projects = after
        changed = _changed_ids(before, after)
        if changed:
            logger.debug("Projects replaced; %d changed", len(changed))
            self.events.projects_changed.emit(changed)
        return after

    def append_report(self, report: IrregularityReport) -> None:
        if not isinstance(report, IrregularityReport):
            raise ValidationError("Only irregularity reports can be appended.", code="REPORT_TYPE_INVALID")
        self._reports = (report,) + self._reports
        logger.info("Stored report %s (%s)", report.id, report.type.value)
        self.events.reports_changed.emit(report.id)

    # --------------------------------------------------------------
    # Helpers
    # --------------------------------------------------------------

    @staticmethod
    def _check_records(records: tuple, expected: type) -> None:
        for record in records:
            if not isinstance(record, expected):
                raise ValidationError(
                    f"Transform produced {type(record).__name__}, expected {expected.__name__}.",
                    code="STORE_RECORD_TYPE_INVALID",
                )

    @staticmethod
    def _ensure_unique_ids(records: tuple, label: str) -> None:
        seen: set[str] = set()
        for record in records:
            if record.id in seen:
                raise ValidationError(f"Duplicate {label} id: {record.id}", code="STORE_DUPLICATE_ID")
            seen.add(record.id)


def _changed_ids(before: tuple, after: tuple) -> tuple[str, ...]:
    previous = {record.id: record for record in before}
    changed = [record.id for record in after if previous.get(record.id) != record]
    current = {record.id for record in after}
    changed.extend(record_id for record_id in previous if record_id not in current)
    return tuple(changed)


__all__ = ["RecordStore"]
