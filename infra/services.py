from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Any

from core.events.domain_events import DomainEvents
from core.interfaces import FileSaver, Scheduler
from core.services.common.clock import Clock, utc_now
from core.services.dashboard import DashboardService
from core.services.irregularity import ReportWorkflow
from core.services.metrics import MetricsAggregator
from core.services.query import QueryService
from core.services.records import RecordStore
from core.services.selection import SelectionService
from core.services.simulation import ManualScheduler, SimulationTicker
from infra.accessibility import LoggingAnnouncer
from infra.analytics import UsageAnalytics
from infra.config import SimulationSettings
from infra.i18n import CatalogTranslator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServiceGraph:
    events: DomainEvents
    store: RecordStore
    ticker: SimulationTicker
    metrics: MetricsAggregator
    query_service: QueryService
    selection_service: SelectionService
    report_workflow: ReportWorkflow
    dashboard_service: DashboardService
    translator: CatalogTranslator
    announcer: LoggingAnnouncer
    analytics: UsageAnalytics

    def as_dict(self) -> dict[str, Any]:
        return {
            "events": self.events,
            "store": self.store,
            "ticker": self.ticker,
            "metrics": self.metrics,
            "query_service": self.query_service,
            "selection_service": self.selection_service,
            "report_workflow": self.report_workflow,
            "dashboard_service": self.dashboard_service,
            "translator": self.translator,
            "announcer": self.announcer,
            "analytics": self.analytics,
        }


def build_service_graph(
    settings: SimulationSettings | None = None,
    *,
    scheduler: Scheduler | None = None,
    clock: Clock = utc_now,
    saver: FileSaver | None = None,
    analytics: UsageAnalytics | None = None,
    events: DomainEvents | None = None,
) -> ServiceGraph:
    """
    Wire the whole core together.

    Without a scheduler the ticker gets a ``ManualScheduler``; a Qt shell
    passes ``infra.qt_scheduler.QtTimerScheduler()`` instead. The ticker is
    built but not started.
    """
    settings = settings or SimulationSettings.from_env()
    events = events or DomainEvents()
    rng = random.Random(settings.seed)

    store = RecordStore.seeded(rng=rng, now=clock(), events=events)
    translator = CatalogTranslator(settings.language)
    announcer = LoggingAnnouncer()
    analytics = analytics or UsageAnalytics()

    ticker = SimulationTicker(
        store,
        scheduler or ManualScheduler(),
        rng=rng,
        clock=clock,
        params=settings.to_parameters(),
    )
    metrics = MetricsAggregator(store)
    query_service = QueryService(store)
    selection_service = SelectionService(store)
    report_workflow = ReportWorkflow(store, clock=clock, announcer=announcer, translator=translator)
    dashboard_service = DashboardService(
        query_service,
        metrics,
        selection_service,
        report_workflow,
        analytics=analytics,
        saver=saver,
    )
    logger.info("Service graph built (seed=%s, language=%s)", settings.seed, translator.current_language)

    return ServiceGraph(
        events=events,
        store=store,
        ticker=ticker,
        metrics=metrics,
        query_service=query_service,
        selection_service=selection_service,
        report_workflow=report_workflow,
        dashboard_service=dashboard_service,
        translator=translator,
        announcer=announcer,
        analytics=analytics,
    )


def build_service_dict(**kwargs: Any) -> dict[str, Any]:
    return build_service_graph(**kwargs).as_dict()
