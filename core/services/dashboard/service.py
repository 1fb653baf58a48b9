# core/services/dashboard/service.py
from __future__ import annotations

import logging
from typing import Any, Optional

from core.domain import Budget, EntityKind, Expenditure, Project
from core.exceptions import DomainError, ValidationError
from core.interfaces import AnalyticsSink, FileSaver
from core.reporting.contexts import ExportArtifact
from core.reporting.exporters import export_excel, export_json
from core.services.common.collaborators import NullAnalytics
from core.services.dashboard.models import PAGES, DashboardData
from core.services.irregularity import (
    ReportDraft,
    ReportWorkflow,
    budget_concern,
    project_concern,
    transaction_review,
)
from core.services.metrics.service import MetricsAggregator
from core.services.query.models import QueryCriteria, SortSpec, toggle_sort
from core.services.query.pipeline import FILTER_FIELDS
from core.services.query.service import QueryService
from core.services.selection.service import SelectionService

logger = logging.getLogger(__name__)

_QUERYABLE = (EntityKind.BUDGET, EntityKind.PROJECT, EntityKind.EXPENDITURE)
_EXPORTERS = {"json": export_json, "xlsx": export_excel}


class DashboardService:
    """
    What the presentation layer talks to.

    Holds the current search/filter/sort criteria per record list, forwards
    to the query, metrics, selection and report workflow services, and
    reports usage events to the analytics sink.
    """

    def __init__(
        self,
        query: QueryService,
        metrics: MetricsAggregator,
        selection: SelectionService,
        workflow: ReportWorkflow,
        analytics: AnalyticsSink | None = None,
        saver: FileSaver | None = None,
    ):
        self._query = query
        self._metrics = metrics
        self._selection = selection
        self._workflow = workflow
        self._analytics = analytics or NullAnalytics()
        self._saver = saver
        self._criteria: dict[EntityKind, QueryCriteria] = {k: QueryCriteria() for k in _QUERYABLE}

    # --------------------------------------------------------------
    # Criteria
    # --------------------------------------------------------------
    def criteria(self, kind: EntityKind | str) -> QueryCriteria:
        return self._criteria[self._queryable(kind)]

    def set_search(self, kind: EntityKind | str, text: str) -> list:
        kind = self._queryable(kind)
        current = self._criteria[kind]
        self._criteria[kind] = QueryCriteria(search=text or "", filters=current.filters, sort=current.sort)
        results = self.results(kind)
        if (text or "").strip():
            self._analytics.track("search", {"query": text, "kind": kind.value, "results": len(results)})
        return results

    def set_filter(self, kind: EntityKind | str, name: str, value: Any) -> list:
        kind = self._queryable(kind)
        if name not in FILTER_FIELDS[kind]:
            raise ValidationError(
                f"'{name}' is not a filter for {kind.value}.",
                code="FILTER_FIELD_UNKNOWN",
            )
        current = self._criteria[kind]
        filters = current.filters.with_value(name, value)
        self._criteria[kind] = QueryCriteria(search=current.search, filters=filters, sort=current.sort)
        self._analytics.track(
            "filter",
            {"kind": kind.value, "filter": name, "value": str(getattr(value, "value", value))},
        )
        return self.results(kind)

    def toggle_sort(self, kind: EntityKind | str, key: str) -> SortSpec:
        kind = self._queryable(kind)
        current = self._criteria[kind]
        sort = toggle_sort(current.sort, key)
        self._criteria[kind] = QueryCriteria(search=current.search, filters=current.filters, sort=sort)
        return sort

    def reset_criteria(self, kind: EntityKind | str) -> None:
        self._criteria[self._queryable(kind)] = QueryCriteria()

    def results(self, kind: EntityKind | str) -> list:
        kind = EntityKind(kind)
        if kind is EntityKind.REPORT:
            return self._query.view(kind)
        return self._query.view(kind, self._criteria[kind])

    # --------------------------------------------------------------
    # Pages
    # --------------------------------------------------------------
    def view_page(self, page: str) -> None:
        if page not in PAGES:
            logger.warning("Unknown dashboard page %r", page)
        self._analytics.track("page_view", {"page": page})

    def load(self) -> DashboardData:
        return DashboardData(
            metrics=self._metrics.snapshot(),
            budgets=self.results(EntityKind.BUDGET),
            projects=self.results(EntityKind.PROJECT),
            expenditures=self.results(EntityKind.EXPENDITURE),
            reports=self.results(EntityKind.REPORT),
            comparison=self._selection.comparison(),
            watchlist=sorted(self._selection.watchlist),
            filter_options=self._query.filter_options(),
        )

    # --------------------------------------------------------------
    # Selection
    # --------------------------------------------------------------
    def toggle_compare(self, item_id: str) -> bool:
        selected = self._selection.toggle_compare(item_id)
        self._analytics.track("interaction", {"action": "compare", "selected": selected})
        return selected

    def toggle_watch(self, item_id: str) -> bool:
        selected = self._selection.toggle_watch(item_id)
        self._analytics.track("interaction", {"action": "watch", "selected": selected})
        return selected

    # --------------------------------------------------------------
    # Reports
    # --------------------------------------------------------------
    def open_report(self, record: Budget | Project | Expenditure | None = None, **defaults: Any) -> ReportDraft:
        """Start a report draft, prefilled from the row it was opened on."""
        prefill: dict[str, Any] = {}
        if isinstance(record, Budget):
            prefill = budget_concern(record)
        elif isinstance(record, Project):
            prefill = project_concern(record)
        elif isinstance(record, Expenditure):
            prefill = transaction_review(record)
        prefill.update(defaults)
        return self._workflow.open_draft(**prefill)

    @property
    def workflow(self) -> ReportWorkflow:
        return self._workflow

    # --------------------------------------------------------------
    # Export
    # --------------------------------------------------------------
    def export(self, kind: EntityKind | str, fmt: str = "json") -> Optional[ExportArtifact]:
        """
        Export the current filtered view of ``kind``.

        Failures are logged and reported to analytics as an ``error`` event;
        the caller gets None.
        """
        try:
            exporter = _EXPORTERS.get(fmt)
            if exporter is None:
                raise ValidationError(f"Unknown export format '{fmt}'.", code="EXPORT_FORMAT_UNSUPPORTED")
            kind = self._exportable(kind)
            records = self.results(kind)
            artifact = exporter(kind, records)
            if self._saver is not None:
                self._saver.save(artifact.filename, artifact.payload)
        except (DomainError, OSError) as exc:
            logger.error("Export of %s as %s failed: %s", getattr(kind, "value", kind), fmt, exc)
            self._analytics.track(
                "error",
                {"action": "export", "code": getattr(exc, "code", type(exc).__name__)},
            )
            return None
        logger.info("Exported %d %s row(s) to %s", artifact.row_count, kind.value, artifact.filename)
        self._analytics.track("export", {"kind": kind.value, "format": fmt, "rows": artifact.row_count})
        return artifact

    @staticmethod
    def _exportable(kind: EntityKind | str) -> EntityKind:
        try:
            return EntityKind(kind)
        except ValueError:
            raise ValidationError(f"Export is not available for '{kind}'.", code="EXPORT_KIND_UNSUPPORTED") from None

    @staticmethod
    def _queryable(kind: EntityKind | str) -> EntityKind:
        try:
            resolved = EntityKind(kind)
        except ValueError:
            resolved = None
        if resolved not in _QUERYABLE:
            raise ValidationError(f"'{kind}' has no search or filters.", code="QUERY_KIND_UNSUPPORTED")
        return resolved


__all__ = ["DashboardService"]
