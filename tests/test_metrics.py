from dataclasses import replace

import pytest

from core.domain import Budget, IrregularityReport, Project, ProjectStatus, ReportStatus
from core.services.metrics import HealthBand, MetricsAggregator
from core.services.metrics import calculations as calc
from core.services.records import RecordStore


def _budget(allocated, spent, id):
    return Budget.create("Health", "Public Services", allocated=allocated, spent=spent, id=id)


def _report(status):
    return IrregularityReport.create(subject="s", description="d", status=status)


def test_budget_utilization_scenario():
    budget = _budget(50_000_000, 21_500_000, "b1")
    assert calc.budget_utilization(budget) == pytest.approx(43.0)


def test_utilization_is_not_computable_without_allocation():
    broken = replace(_budget(10, 5, "b1"), allocated=0)
    assert calc.budget_utilization(broken) is None
    assert calc.overall_utilization([]) is None
    assert calc.overall_utilization([broken]) is None
    assert calc.utilization_band(None) is None


def test_seeded_totals(store):
    metrics = MetricsAggregator(store)

    assert metrics.total_allocated() == 330_000_000
    assert metrics.total_spent() == 190_100_000
    assert metrics.overall_utilization() == pytest.approx(190_100_000 / 330_000_000 * 100)


def test_status_counts_include_every_status(store):
    counts = MetricsAggregator(store).status_counts()

    assert set(counts) == set(ProjectStatus)
    assert counts[ProjectStatus.ON_TRACK] == 6
    assert counts[ProjectStatus.DELAYED] == 2
    assert counts[ProjectStatus.AT_RISK] == 1
    assert counts[ProjectStatus.COMPLETED] == 0
    assert sum(counts.values()) == len(store.get_projects())


def test_transparency_index_without_reports_uses_neutral_ratio():
    # both budgets exactly on target -> norm 1.0
    budgets = [_budget(100, 60, "a"), _budget(200, 120, "b")]
    assert calc.transparency_index(budgets, []) == 80


def test_transparency_index_resolution_ratio():
    budgets = [_budget(100, 60, "a")]
    reports = [_report(ReportStatus.RESOLVED), _report(ReportStatus.SUBMITTED)]
    assert calc.transparency_index(budgets, reports) == 80

    all_resolved = [_report(ReportStatus.RESOLVED)]
    assert calc.transparency_index(budgets, all_resolved) == 100


def test_transparency_index_deviation_and_rounding():
    # |43 - 60| = 17 -> norm 0.83 -> 0.6*0.83 + 0.2 = 0.698 -> 69.8 -> 70
    budgets = [_budget(50_000_000, 21_500_000, "b1")]
    assert calc.transparency_index(budgets, []) == 70


def test_transparency_index_is_bounded_with_extreme_overspend():
    budgets = [_budget(100, 10_000, "a")]
    index = calc.transparency_index(budgets, [])
    assert isinstance(index, int)
    assert index == 20


def test_transparency_index_skips_uncomputable_budgets():
    broken = replace(_budget(10, 5, "x"), allocated=0)
    assert calc.transparency_index([broken], []) == 20
    assert calc.transparency_index([broken, _budget(100, 60, "a")], []) == 80


def test_health_bands():
    assert calc.utilization_band(91) is HealthBand.CRITICAL
    assert calc.utilization_band(90) is HealthBand.WARNING
    assert calc.utilization_band(70) is HealthBand.HEALTHY
    assert calc.transparency_band(71) is HealthBand.HEALTHY
    assert calc.transparency_band(51) is HealthBand.WARNING
    assert calc.transparency_band(50) is HealthBand.CRITICAL


def test_snapshot_reflects_latest_store_state(events):
    store = RecordStore(
        budgets=[_budget(100, 50, "a"), _budget(100, 120, "b")],
        projects=[Project.create("Clinic", "Health", budget=10, status=ProjectStatus.DELAYED, id="p")],
        events=events,
    )
    metrics = MetricsAggregator(store)

    first = metrics.snapshot()
    assert first.overall_utilization == pytest.approx(85.0)
    assert first.utilization_band is HealthBand.WARNING
    assert first.overspent_budget_ids == ("b",)
    assert first.status_counts[ProjectStatus.DELAYED] == 1

    store.append_report(_report(ReportStatus.RESOLVED))
    second = metrics.snapshot()
    assert second.report_status_counts[ReportStatus.RESOLVED] == 1
    assert (first.transparency_index, second.transparency_index) == (59, 79)
    assert metrics.snapshot() == second
