from __future__ import annotations

import logging
import random

from core.exceptions import BusinessRuleError
from core.interfaces import ScheduledHandle, Scheduler
from core.services.common.clock import Clock, utc_now
from core.services.records.store import RecordStore
from core.services.simulation.draws import RandomDraws
from core.services.simulation.models import SimulationParameters, TickResult
from core.services.simulation.rules import advance_budget, advance_project
from core.services.simulation.scheduler import CancelToken

logger = logging.getLogger(__name__)


class SimulationTicker:
    """
    Periodically mutates budgets and projects so the dashboard looks live.

    The ticker owns nothing but its timer: every change goes through the
    store's whole-collection transforms, budgets first, then projects.
    Once ``stop`` returns no further tick touches the store.
    """

    def __init__(
        self,
        store: RecordStore,
        scheduler: Scheduler,
        rng: random.Random | None = None,
        clock: Clock = utc_now,
        params: SimulationParameters | None = None,
    ) -> None:
        self._store = store
        self._scheduler = scheduler
        self._params = params or SimulationParameters()
        self._draws = RandomDraws(rng or random.Random(), self._params)
        self._clock = clock
        self._token = CancelToken()
        self._handle: ScheduledHandle | None = None
        self._ticks = 0

    @property
    def is_running(self) -> bool:
        return self._handle is not None and not self._token.is_cancelled()

    @property
    def is_stopped(self) -> bool:
        return self._token.is_cancelled()

    @property
    def tick_count(self) -> int:
        return self._ticks

    @property
    def params(self) -> SimulationParameters:
        return self._params

    def start(self) -> None:
        if self._token.is_cancelled():
            raise BusinessRuleError("A stopped simulation cannot be restarted.", code="TICKER_STOPPED")
        if self._handle is not None:
            return
        self._handle = self._scheduler.schedule_repeating(self._params.interval_seconds, self._on_timer)
        logger.info("Simulation started (interval %.1fs)", self._params.interval_seconds)

    def stop(self) -> None:
        if self._token.is_cancelled():
            return
        self._token.cancel()
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        logger.info("Simulation stopped after %d tick(s)", self._ticks)

    def tick(self) -> TickResult | None:
        """Apply one tick now. Returns None once the ticker is stopped."""
        if self._token.is_cancelled():
            return None

        now = self._clock()
        budgets_before = {b.id: b for b in self._store.get_budgets()}
        budgets = self._store.update_budgets(
            lambda rows: [advance_budget(b, self._draws.for_budget(b), now, self._params) for b in rows]
        )
        projects_before = {p.id: p for p in self._store.get_projects()}
        projects = self._store.update_projects(
            lambda rows: [advance_project(p, self._draws.for_project(p), now, self._params) for p in rows]
        )

        self._ticks += 1
        result = TickResult(
            tick=self._ticks,
            budget_ids=tuple(b.id for b in budgets if budgets_before.get(b.id) != b),
            project_ids=tuple(p.id for p in projects if projects_before.get(p.id) != p),
            completed_project_ids=tuple(
                p.id for p in projects if p.is_completed and p.id in projects_before and not projects_before[p.id].is_completed
            ),
        )
        for project_id in result.completed_project_ids:
            logger.info("Project %s reached 100%% and is now completed", project_id)
        logger.debug(
            "Tick %d: %d budget(s), %d project(s) updated",
            result.tick,
            len(result.budget_ids),
            len(result.project_ids),
        )
        self._store.events.simulation_ticked.emit(result)
        return result

    def _on_timer(self) -> None:
        self.tick()


__all__ = ["SimulationTicker"]
