import pytest

from core.domain import ReportStatus, ReportType, Severity
from core.exceptions import ValidationError
from core.services.irregularity import (
    ReportWorkflow,
    WorkflowState,
    budget_concern,
    project_concern,
    transaction_review,
)


@pytest.fixture
def workflow(services):
    return services["report_workflow"]


def test_open_draft_defaults(workflow):
    draft = workflow.open_draft()

    assert workflow.state is WorkflowState.DRAFTING
    assert draft.type is ReportType.SPENDING_CONCERN
    assert draft.severity is Severity.MEDIUM
    assert draft.subject == ""


def test_empty_description_blocks_submission(workflow, store):
    workflow.open_draft(subject="Budget Concern: Health")

    assert workflow.request_submit() is False
    assert workflow.state is WorkflowState.DRAFTING
    assert workflow.confirm() is None
    assert len(store.get_reports()) == 0


def test_whitespace_only_fields_are_blank(workflow):
    workflow.open_draft(subject="  ", description="\t")
    assert workflow.request_submit() is False


def test_confirm_stores_report_and_announces(services, store, clock):
    workflow = services["report_workflow"]
    workflow.open_draft(subject="Overspend", description="Invoices look inflated", severity="HIGH")

    assert workflow.request_submit() is True
    assert workflow.state is WorkflowState.PENDING_CONFIRMATION
    report = workflow.confirm()

    assert report is not None
    assert store.get_reports()[0] == report
    assert report.status is ReportStatus.SUBMITTED
    assert report.severity is Severity.HIGH
    assert report.created_at == clock.now
    assert workflow.state is WorkflowState.DRAFTING
    assert workflow.draft.subject == ""
    assert services["announcer"].announcements == ["Report submitted successfully"]


def test_each_confirmation_gets_a_fresh_id(workflow, store):
    for _ in range(2):
        workflow.open_draft(subject="s", description="d")
        workflow.request_submit()
        workflow.confirm()

    ids = [r.id for r in store.get_reports()]
    assert len(set(ids)) == 2


def test_cancel_confirm_keeps_the_draft(workflow):
    workflow.open_draft(subject="s", description="d")
    workflow.request_submit()

    assert workflow.cancel_confirm() is True
    assert workflow.state is WorkflowState.DRAFTING
    assert workflow.draft.description == "d"
    assert workflow.cancel_confirm() is False


def test_confirm_outside_pending_is_a_no_op(workflow, store):
    workflow.open_draft(subject="s", description="d")
    assert workflow.confirm() is None
    assert store.get_reports() == ()


def test_update_draft_rejects_unknown_fields(workflow):
    workflow.open_draft()
    workflow.update_draft(description="More detail", type="FRAUD_SUSPICION")
    assert workflow.draft.type is ReportType.FRAUD_SUSPICION

    with pytest.raises(ValidationError) as exc:
        workflow.update_draft(colour="red")
    assert exc.value.code == "REPORT_DRAFT_FIELD_UNKNOWN"


def test_draft_templates(store):
    budget = store.find_budget("b1")
    project = store.find_project("p2")
    tx = store.get_expenditures()[0]

    assert budget_concern(budget)["subject"] == "Budget Concern: Health"
    assert project_concern(project) == {
        "project_id": "p2",
        "department": "Transport",
        "subject": "Project Concern: Highway Modernization",
    }
    assert transaction_review(tx)["subject"] == f"Transaction Review: {tx.description}"


def test_workflow_without_collaborators(store):
    workflow = ReportWorkflow(store)
    workflow.open_draft(subject="s", description="d")
    workflow.request_submit()
    assert workflow.confirm() is not None
