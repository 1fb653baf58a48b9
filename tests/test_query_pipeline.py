from core.domain import Budget, EntityKind, Expenditure, Project, ProjectStatus
from core.services.query import (
    ALL,
    QueryCriteria,
    QueryFilters,
    QueryService,
    SortDirection,
    SortSpec,
    build_filter_options,
    run_query,
    sort_records,
    toggle_sort,
)


def _projects():
    return [
        Project.create("Clinic A", "Health", budget=12_000_000, id="h12"),
        Project.create("Clinic B", "Health", budget=9_000_000, id="h9"),
        Project.create("Highway", "Transport", budget=30_000_000, id="t30"),
    ]


def test_filter_then_sort_descending_scenario():
    criteria = QueryCriteria(
        filters=QueryFilters(department="Health"),
        sort=SortSpec("budget", SortDirection.DESC),
    )

    result = run_query(_projects(), EntityKind.PROJECT, criteria)

    assert [p.budget for p in result] == [12_000_000, 9_000_000]


def test_empty_criteria_keeps_insertion_order():
    projects = _projects()
    assert run_query(projects, EntityKind.PROJECT, QueryCriteria()) == projects


def test_search_is_case_insensitive_and_field_scoped(store):
    service = QueryService(store)

    assert [p.id for p in service.projects(QueryCriteria(search="CLINIC"))] == ["p1"]
    assert [b.id for b in service.budgets(QueryCriteria(search="infra"))] == ["b3", "b5"]
    # descriptions are not searched for projects
    assert service.projects(QueryCriteria(search="microgrid")) == []


def test_query_is_idempotent_and_a_subset(store):
    service = QueryService(store)
    criteria = QueryCriteria(search="a", filters=QueryFilters(region="National"), sort=SortSpec("spent"))

    first = service.projects(criteria)
    assert service.projects(criteria) == first
    assert set(p.id for p in first) <= set(p.id for p in store.get_projects())


def test_filters_are_conjunctive_and_all_is_neutral(store):
    service = QueryService(store)

    rural_health = service.projects(QueryCriteria(filters=QueryFilters(department="Health", region="Rural")))
    assert [p.id for p in rural_health] == ["p1"]

    everything = service.projects(QueryCriteria(filters=QueryFilters(department=ALL, region=None)))
    assert len(everything) == len(store.get_projects())

    delayed = service.projects(QueryCriteria(filters=QueryFilters(status=ProjectStatus.DELAYED)))
    assert [p.id for p in delayed] == ["p2", "p7"]
    assert service.projects(QueryCriteria(filters=QueryFilters(status="DELAYED"))) == delayed


def test_filters_not_applicable_to_kind_are_ignored(store):
    service = QueryService(store)
    # budgets have no status
    assert len(service.budgets(QueryCriteria(filters=QueryFilters(status="DELAYED")))) == 8


def test_descending_is_reverse_of_ascending_for_distinct_keys(store):
    service = QueryService(store)
    asc = service.budgets(QueryCriteria(sort=SortSpec("allocated")))
    desc = service.budgets(QueryCriteria(sort=SortSpec("allocated", SortDirection.DESC)))

    assert desc == list(reversed(asc))
    assert [b.allocated for b in asc] == sorted(b.allocated for b in store.get_budgets())


def test_sort_is_stable_for_equal_keys(store):
    service = QueryService(store)
    by_category = service.budgets(QueryCriteria(sort=SortSpec("category")))
    public = [b.id for b in by_category if b.category == "Public Services"]
    security = [b.id for b in by_category if b.category == "Security"]

    assert public == ["b1", "b2"]
    assert security == ["b7", "b8"]


def test_text_sort_ignores_case():
    budgets = [
        Budget.create("beta", "x", allocated=1, id="1"),
        Budget.create("Alpha", "x", allocated=1, id="2"),
        Budget.create("gamma", "x", allocated=1, id="3"),
    ]
    ordered = sort_records(budgets, EntityKind.BUDGET, SortSpec("department"))
    assert [b.department for b in ordered] == ["Alpha", "beta", "gamma"]


def test_text_sort_places_accented_names_by_base_letter():
    budgets = [
        Budget.create("Health", "x", allocated=1, id="1"),
        Budget.create("Éducation", "x", allocated=1, id="2"),
        Budget.create("Zoning", "x", allocated=1, id="3"),
    ]

    ascending = sort_records(budgets, EntityKind.BUDGET, SortSpec("department"))
    descending = sort_records(budgets, EntityKind.BUDGET, SortSpec("department", SortDirection.DESC))

    assert [b.department for b in ascending] == ["Éducation", "Health", "Zoning"]
    assert [b.department for b in descending] == ["Zoning", "Health", "Éducation"]


def test_unknown_sort_key_is_ignored(store, caplog):
    budgets = list(store.get_budgets())
    with caplog.at_level("WARNING"):
        assert sort_records(budgets, EntityKind.BUDGET, SortSpec("nope")) == budgets
    assert "unknown sort key" in caplog.text


def test_expenditures_end_date_descending(store):
    result = QueryService(store).expenditures(QueryCriteria(sort=SortSpec("amount")))
    dates = [e.date for e in result]
    assert dates == sorted(dates, reverse=True)


def test_expenditure_region_filter_follows_project_reference(store, clock):
    orphan = Expenditure.create("Health", "Unlinked", amount=5, category="Labor", id="x1", date=clock())
    dangling = Expenditure.create(
        "Health", "Dangling", amount=5, category="Labor", project_id="p404", id="x2", date=clock()
    )
    records = list(store.get_expenditures()) + [orphan, dangling]
    criteria = QueryCriteria(filters=QueryFilters(region="Coastal"))

    result = run_query(records, EntityKind.EXPENDITURE, criteria, projects=store.get_projects())

    ids = {e.id for e in result}
    assert "x1" in ids
    assert "x2" not in ids
    assert {e.project_id for e in result if e.project_id} == {"p8"}


def test_toggle_sort_header_semantics():
    first = toggle_sort(None, "budget")
    assert first == SortSpec("budget", SortDirection.ASC)
    flipped = toggle_sort(first, "budget")
    assert flipped.descending
    assert toggle_sort(flipped, "name") == SortSpec("name", SortDirection.ASC)


def test_filter_options_are_all_prefixed_and_sorted(store):
    options = build_filter_options(store.get_budgets(), store.get_projects())

    assert options.departments[0] == ALL
    assert list(options.departments[1:]) == sorted(options.departments[1:])
    assert options.regions == (ALL, "Coastal", "National", "Rural")
    assert options.categories == (ALL, "Economic", "Infrastructure", "Public Services", "Security")
    assert options.statuses == (ALL, "ON_TRACK", "DELAYED", "AT_RISK", "COMPLETED")


def test_view_of_reports_is_unfiltered(store):
    assert QueryService(store).view(EntityKind.REPORT) == []
