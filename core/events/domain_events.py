""" Change notifications for records, selections and simulation ticks """
from __future__ import annotations

from typing import Any

from core.events.signal import Signal


class DomainEvents:
    def __init__(self) -> None:
        self.budgets_changed: Signal[tuple[str, ...]] = Signal("budgets_changed")    # changed budget ids
        self.projects_changed: Signal[tuple[str, ...]] = Signal("projects_changed")  # changed project ids
        self.reports_changed: Signal[str] = Signal("reports_changed")                # new report id
        self.selection_changed: Signal[str] = Signal("selection_changed")            # "compare" | "watchlist"
        self.simulation_ticked: Signal[Any] = Signal("simulation_ticked")            # TickResult

    def signals(self) -> list[Signal]:
        return [
            self.budgets_changed,
            self.projects_changed,
            self.reports_changed,
            self.selection_changed,
            self.simulation_ticked,
        ]

