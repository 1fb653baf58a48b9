import json
from io import BytesIO

import pytest
from openpyxl import load_workbook

from core.domain import EntityKind
from core.exceptions import ValidationError
from core.reporting.exporters import camel_case, export_excel, export_json, record_to_row


def test_camel_case_keys():
    assert camel_case("last_updated") == "lastUpdated"
    assert camel_case("project_id") == "projectId"
    assert camel_case("spent") == "spent"


def test_json_export_of_budgets(store):
    artifact = export_json(EntityKind.BUDGET, store.get_budgets())

    assert artifact.filename == "budgets-export.json"
    assert artifact.media_type == "application/json"
    assert artifact.row_count == 8

    text = artifact.payload.decode("utf-8")
    assert text.startswith("[\n  {")
    rows = json.loads(text)
    assert rows[0]["department"] == "Health"
    assert rows[0]["lastUpdated"].startswith("2025-01-15T12:00:00")


def test_json_export_of_projects_uses_enum_values(store):
    artifact = export_json("projects", store.get_projects())
    rows = json.loads(artifact.payload)

    assert artifact.filename == "projects-export.json"
    assert rows[1]["status"] == "DELAYED"
    assert rows[0]["startDate"] == "2024-01-15"
    assert "updatedAt" in rows[0]


def test_export_of_an_empty_view(store):
    artifact = export_json(EntityKind.PROJECT, [])
    assert json.loads(artifact.payload) == []
    assert artifact.row_count == 0


def test_unsupported_kinds_and_records_are_rejected(store):
    with pytest.raises(ValidationError) as exc_kind:
        export_json(EntityKind.EXPENDITURE, store.get_expenditures())
    assert exc_kind.value.code == "EXPORT_KIND_UNSUPPORTED"

    with pytest.raises(ValidationError) as exc_unknown:
        export_json("invoices", [])
    assert exc_unknown.value.code == "EXPORT_KIND_UNSUPPORTED"

    with pytest.raises(ValidationError) as exc_record:
        export_json(EntityKind.BUDGET, store.get_projects())
    assert exc_record.value.code == "EXPORT_RECORD_INVALID"


def test_record_to_row_requires_a_dataclass():
    with pytest.raises(ValidationError):
        record_to_row({"id": "b1"})


def test_excel_export_has_header_and_rows(store):
    artifact = export_excel(EntityKind.BUDGET, store.get_budgets())

    assert artifact.filename == "budgets-export.xlsx"
    wb = load_workbook(BytesIO(artifact.payload))
    ws = wb["Budgets"]
    header = [c.value for c in ws[1]]
    assert header[:3] == ["id", "department", "category"]
    assert ws.max_row == 9
    assert ws["B2"].value == "Health"
    assert ws["B1"].font.bold
    assert wb["Export"]["B2"].value == 8
