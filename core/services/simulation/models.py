from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SimulationParameters:
    interval_seconds: float = 5.0
    project_update_probability: float = 0.20
    budget_update_probability: float = 0.15
    max_progress_increment: float = 4.0
    spend_factor_min: float = 0.8
    spend_factor_span: float = 0.4
    budget_spend_rate: float = 0.0005 * 50
    budget_overspend_cap: float = 1.15
    risk_ceiling: float = 90.0
    risk_floor: float = 10.0
    risk_growth_max: float = 3.0
    risk_jitter: float = 2.0


@dataclass(frozen=True)
class ProjectDraw:
    """Random values consumed by one project in one tick."""
    selected: bool
    increment: float = 0.0
    spend_factor: float = 1.0
    risk_delta: float = 0.0


@dataclass(frozen=True)
class BudgetDraw:
    selected: bool
    spend_fraction: float = 0.0


@dataclass(frozen=True)
class TickResult:
    tick: int
    budget_ids: tuple[str, ...]
    project_ids: tuple[str, ...]
    completed_project_ids: tuple[str, ...]

    @property
    def changed(self) -> bool:
        return bool(self.budget_ids or self.project_ids)


__all__ = ["SimulationParameters", "ProjectDraw", "BudgetDraw", "TickResult"]
