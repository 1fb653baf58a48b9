from __future__ import annotations

import random

from core.domain import Budget, Project, ProjectStatus
from core.services.simulation.models import BudgetDraw, ProjectDraw, SimulationParameters


class RandomDraws:
    """
    Turns a ``random.Random`` into tick draws.

    Every project consumes its selection draw even when it is skipped, so a
    seeded source replays identically whatever the record contents are.
    """

    def __init__(self, rng: random.Random, params: SimulationParameters) -> None:
        self._rng = rng
        self._params = params

    def for_project(self, project: Project) -> ProjectDraw:
        p = self._params
        selected = self._rng.random() < p.project_update_probability
        if not selected or project.progress >= 100:
            return ProjectDraw(selected=False)
        increment = self._rng.random() * p.max_progress_increment
        spend_factor = p.spend_factor_min + self._rng.random() * p.spend_factor_span
        if project.status in (ProjectStatus.DELAYED, ProjectStatus.AT_RISK):
            risk_delta = self._rng.random() * p.risk_growth_max
        else:
            risk_delta = self._rng.random() * (2 * p.risk_jitter) - p.risk_jitter
        return ProjectDraw(
            selected=True,
            increment=increment,
            spend_factor=spend_factor,
            risk_delta=risk_delta,
        )

    def for_budget(self, budget: Budget) -> BudgetDraw:
        p = self._params
        if self._rng.random() >= p.budget_update_probability:
            return BudgetDraw(selected=False)
        return BudgetDraw(selected=True, spend_fraction=p.budget_spend_rate * self._rng.random())


__all__ = ["RandomDraws"]
