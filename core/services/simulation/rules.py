"""Pure per-record tick rules; all randomness arrives through draw objects."""
from __future__ import annotations

from dataclasses import replace
from datetime import datetime

from core.domain import Budget, Project, ProjectStatus
from core.services.common.numeric import clamp, round_half_up
from core.services.simulation.models import BudgetDraw, ProjectDraw, SimulationParameters

_ESCALATING = (ProjectStatus.DELAYED, ProjectStatus.AT_RISK)


def advance_project(
    project: Project,
    draw: ProjectDraw,
    now: datetime,
    params: SimulationParameters = SimulationParameters(),
) -> Project:
    if not draw.selected or project.progress >= 100:
        return project

    raw_progress = project.progress + draw.increment
    extra_spend = round_half_up(project.budget * (draw.increment / 100.0) * draw.spend_factor)
    # Seeded spend may already exceed budget; the tick never lowers it.
    spent = max(project.spent, min(project.budget, project.spent + extra_spend))
    status = ProjectStatus.COMPLETED if raw_progress >= 100 else project.status

    # Risk follows the status the project had going into the tick and always
    # lands in [risk_floor, risk_ceiling].
    if project.status in _ESCALATING:
        risk = min(params.risk_ceiling, project.risk + max(0.0, draw.risk_delta))
    else:
        risk = project.risk + draw.risk_delta
    risk = clamp(risk, params.risk_floor, params.risk_ceiling)

    return replace(
        project,
        progress=clamp(raw_progress),
        spent=float(spent),
        status=status,
        risk=risk,
        updated_at=now,
    )


def advance_budget(
    budget: Budget,
    draw: BudgetDraw,
    now: datetime,
    params: SimulationParameters = SimulationParameters(),
) -> Budget:
    if not draw.selected:
        return budget
    delta = round_half_up(budget.allocated * draw.spend_fraction)
    cap = budget.allocated * params.budget_overspend_cap
    spent = max(budget.spent, min(cap, budget.spent + delta))
    return replace(budget, spent=float(spent), last_updated=now)


__all__ = ["advance_project", "advance_budget"]
