import random
from dataclasses import replace

import pytest

from core.domain import Budget, IrregularityReport
from core.exceptions import ValidationError
from core.services.records import RecordStore
from core.services.records.seed import EXPENDITURES_PER_PROJECT


def test_seeded_store_has_fixed_sample_set(store, clock):
    budgets = store.get_budgets()
    projects = store.get_projects()
    expenditures = store.get_expenditures()

    assert [b.id for b in budgets] == [f"b{i}" for i in range(1, 9)]
    assert [p.id for p in projects] == [f"p{i}" for i in range(1, 10)]
    assert len(expenditures) == len(projects) * EXPENDITURES_PER_PROJECT
    assert store.get_reports() == ()

    health = store.find_budget("b1")
    assert (health.department, health.allocated, health.spent) == ("Health", 50_000_000, 21_500_000)
    assert all(b.last_updated == clock.now for b in budgets)


def test_seeded_expenditures_are_reproducible_and_in_range(clock, events):
    first = RecordStore.seeded(rng=random.Random(7), now=clock(), events=events).get_expenditures()
    second = RecordStore.seeded(rng=random.Random(7), now=clock(), events=events).get_expenditures()

    assert first == second
    for tx in first:
        assert 20_000 <= tx.amount <= 220_000
        assert tx.date <= clock.now
        assert tx.category in ("Procurement", "Labor", "Logistics")


def test_snapshots_are_tuples_of_frozen_records(store):
    assert isinstance(store.get_budgets(), tuple)
    assert isinstance(store.get_projects(), tuple)


def test_update_budgets_replaces_atomically_and_emits_changed_ids(store, events):
    seen = []
    events.budgets_changed.connect(seen.append)

    store.update_budgets(lambda rows: [replace(b, spent=b.spent + 1) if b.id == "b2" else b for b in rows])

    assert store.find_budget("b2").spent == 28_900_001
    assert seen == [("b2",)]


def test_update_without_changes_emits_nothing(store, events):
    seen = []
    events.projects_changed.connect(seen.append)

    store.update_projects(lambda rows: rows)

    assert seen == []


def test_failed_transform_leaves_collection_untouched(store):
    before = store.get_budgets()

    with pytest.raises(ValidationError) as exc:
        store.update_budgets(lambda rows: list(rows) + [rows[0]])
    assert exc.value.code == "STORE_DUPLICATE_ID"

    with pytest.raises(ValidationError) as exc_type:
        store.update_budgets(lambda rows: ["not a budget"])
    assert exc_type.value.code == "STORE_RECORD_TYPE_INVALID"

    assert store.get_budgets() is before


def test_append_report_prepends_and_emits(store, events):
    seen = []
    events.reports_changed.connect(seen.append)
    first = IrregularityReport.create(subject="A", description="first")
    second = IrregularityReport.create(subject="B", description="second")

    store.append_report(first)
    store.append_report(second)

    assert [r.id for r in store.get_reports()] == [second.id, first.id]
    assert seen == [first.id, second.id]


def test_weak_references_resolve_to_none(store):
    tx = store.get_expenditures()[0]
    assert store.project_for(tx).id == tx.project_id

    orphan = replace(tx, project_id="p404")
    assert store.project_for(orphan) is None
    assert store.find_project(None) is None
    assert store.find_budget("missing") is None


def test_duplicate_ids_are_rejected_at_construction():
    budget = Budget.create("Health", "Public Services", allocated=10, id="b1")
    with pytest.raises(ValidationError):
        RecordStore(budgets=[budget, budget])


def test_stores_without_injected_events_do_not_share_subscribers():
    first, second = RecordStore(), RecordStore()
    seen = []
    first.events.reports_changed.connect(seen.append)

    second.append_report(IrregularityReport.create(subject="B", description="second"))

    assert first.events is not second.events
    assert seen == []
