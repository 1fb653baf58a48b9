# tests/conftest.py
import random
from datetime import datetime, timezone

import pytest

from core.events.domain_events import DomainEvents
from core.services.dashboard import DashboardService
from core.services.irregularity import ReportWorkflow
from core.services.metrics import MetricsAggregator
from core.services.query import QueryService
from core.services.records import RecordStore
from core.services.selection import SelectionService
from core.services.simulation import ManualScheduler
from infra.accessibility import LoggingAnnouncer
from infra.analytics import UsageAnalytics
from infra.i18n import CatalogTranslator

FIXED_NOW = datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, now: datetime = FIXED_NOW) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def events():
    # isolated registry so tests never see each other's subscribers
    return DomainEvents()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def store(rng, clock, events):
    return RecordStore.seeded(rng=rng, now=clock(), events=events)


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def services(store, clock, tmp_path):
    announcer = LoggingAnnouncer()
    translator = CatalogTranslator("en")
    analytics = UsageAnalytics(tmp_path / "analytics-preferences.json", clock=clock)
    query_service = QueryService(store)
    metrics = MetricsAggregator(store)
    selection_service = SelectionService(store)
    report_workflow = ReportWorkflow(store, clock=clock, announcer=announcer, translator=translator)
    dashboard_service = DashboardService(
        query_service,
        metrics,
        selection_service,
        report_workflow,
        analytics=analytics,
    )
    return {
        "store": store,
        "query_service": query_service,
        "metrics": metrics,
        "selection_service": selection_service,
        "report_workflow": report_workflow,
        "dashboard_service": dashboard_service,
        "announcer": announcer,
        "translator": translator,
        "analytics": analytics,
    }
