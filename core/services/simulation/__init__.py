from .draws import RandomDraws
from .models import BudgetDraw, ProjectDraw, SimulationParameters, TickResult
from .rules import advance_budget, advance_project
from .scheduler import CancelToken, ManualScheduler
from .ticker import SimulationTicker

__all__ = [
    "SimulationTicker",
    "SimulationParameters",
    "TickResult",
    "ProjectDraw",
    "BudgetDraw",
    "RandomDraws",
    "ManualScheduler",
    "CancelToken",
    "advance_project",
    "advance_budget",
]
