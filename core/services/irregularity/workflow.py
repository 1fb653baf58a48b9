from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Optional

from core.domain import IrregularityReport, ReportStatus, ReportType, Severity
from core.exceptions import ValidationError
from core.interfaces import Announcer, Translator
from core.services.common.clock import Clock, utc_now
from core.services.common.collaborators import NullAnnouncer, NullTranslator
from core.services.irregularity.models import ReportDraft, WorkflowState
from core.services.records.store import RecordStore

logger = logging.getLogger(__name__)


class ReportWorkflow:
    """
    Draft -> confirmation -> stored report.

    Failed validation is a rejected transition (methods return False/None),
    never an exception, so the caller can fix the draft and try again.
    """

    def __init__(
        self,
        store: RecordStore,
        clock: Clock = utc_now,
        announcer: Announcer | None = None,
        translator: Translator | None = None,
    ) -> None:
        self._store = store
        self._clock = clock
        self._announcer = announcer or NullAnnouncer()
        self._translator = translator or NullTranslator()
        self._state = WorkflowState.DRAFTING
        self._draft = ReportDraft()
        self._last_report: IrregularityReport | None = None

    @property
    def state(self) -> WorkflowState:
        return self._state

    @property
    def draft(self) -> ReportDraft:
        return replace(self._draft)

    @property
    def last_report(self) -> IrregularityReport | None:
        return self._last_report

    def open_draft(self, **defaults: Any) -> ReportDraft:
        self._draft = self._merged(ReportDraft(), defaults)
        self._state = WorkflowState.DRAFTING
        return self.draft

    def update_draft(self, **changes: Any) -> ReportDraft:
        if self._state is not WorkflowState.DRAFTING:
            logger.debug("Ignoring draft edit while %s", self._state.value)
            return self.draft
        self._draft = self._merged(self._draft, changes)
        return self.draft

    def request_submit(self) -> bool:
        if self._state is not WorkflowState.DRAFTING:
            return False
        if not self._draft.is_complete:
            logger.info("Report submission blocked: subject and description are required")
            return False
        self._state = WorkflowState.PENDING_CONFIRMATION
        return True

    def cancel_confirm(self) -> bool:
        if self._state is not WorkflowState.PENDING_CONFIRMATION:
            return False
        self._state = WorkflowState.DRAFTING
        return True

    def confirm(self) -> Optional[IrregularityReport]:
        if self._state is not WorkflowState.PENDING_CONFIRMATION:
            return None
        draft = self._draft
        try:
            report = IrregularityReport.create(
                type=draft.type,
                subject=draft.subject,
                description=draft.description,
                severity=draft.severity,
                status=ReportStatus.SUBMITTED,
                department=draft.department,
                project_id=draft.project_id,
                reference=draft.reference,
                created_at=self._clock(),
            )
        except ValidationError as exc:
            logger.warning("Report confirmation rejected: %s", exc)
            self._state = WorkflowState.DRAFTING
            return None

        self._state = WorkflowState.STORED
        self._store.append_report(report)
        self._last_report = report
        self._announcer.announce(self._translator.translate("report.submitted"))

        self._draft = ReportDraft()
        self._state = WorkflowState.DRAFTING
        return report

    @staticmethod
    def _merged(base: ReportDraft, changes: dict[str, Any]) -> ReportDraft:
        unknown = set(changes) - ReportDraft.field_names()
        if unknown:
            raise ValidationError(
                f"Unknown report draft field(s): {', '.join(sorted(unknown))}",
                code="REPORT_DRAFT_FIELD_UNKNOWN",
            )
        values = dict(changes)
        if values.get("type") is not None:
            values["type"] = ReportType(values["type"])
        elif "type" in values:
            values["type"] = base.type
        if values.get("severity") is not None:
            values["severity"] = Severity(values["severity"])
        elif "severity" in values:
            values["severity"] = base.severity
        return replace(base, **values)


__all__ = ["ReportWorkflow"]
