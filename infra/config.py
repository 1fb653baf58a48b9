# infra/config.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Callable, Mapping, Optional

from core.services.simulation.models import SimulationParameters

logger = logging.getLogger(__name__)

ENV_PREFIX = "GOVTRACK_"


@dataclass(frozen=True)
class SimulationSettings:
    interval_seconds: float = 5.0
    project_update_probability: float = 0.20
    budget_update_probability: float = 0.15
    seed: Optional[int] = None
    language: str = "en"

    def to_parameters(self) -> SimulationParameters:
        return replace(
            SimulationParameters(),
            interval_seconds=self.interval_seconds,
            project_update_probability=self.project_update_probability,
            budget_update_probability=self.budget_update_probability,
        )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "SimulationSettings":
        """
        Defaults overridden by GOVTRACK_* variables.

        GOVTRACK_TICK_INTERVAL, GOVTRACK_PROJECT_UPDATE_PROBABILITY,
        GOVTRACK_BUDGET_UPDATE_PROBABILITY, GOVTRACK_SEED, GOVTRACK_LANGUAGE.
        Invalid values are logged and the default is kept.
        """
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            interval_seconds=_read(env, "TICK_INTERVAL", float, _positive, defaults.interval_seconds),
            project_update_probability=_read(
                env, "PROJECT_UPDATE_PROBABILITY", float, _probability, defaults.project_update_probability
            ),
            budget_update_probability=_read(
                env, "BUDGET_UPDATE_PROBABILITY", float, _probability, defaults.budget_update_probability
            ),
            seed=_read(env, "SEED", int, lambda v: True, defaults.seed),
            language=_read(env, "LANGUAGE", str, lambda v: bool(v), defaults.language),
        )


def _positive(value: float) -> bool:
    return value > 0


def _probability(value: float) -> bool:
    return 0.0 <= value <= 1.0


def _read(env: Mapping[str, str], name: str, cast: Callable, valid: Callable, default):
    raw = (env.get(ENV_PREFIX + name) or "").strip()
    if not raw:
        return default
    try:
        value = cast(raw)
    except ValueError:
        logger.warning("Ignoring %s%s=%r: not a valid %s", ENV_PREFIX, name, raw, cast.__name__)
        return default
    if not valid(value):
        logger.warning("Ignoring %s%s=%r: out of range", ENV_PREFIX, name, raw)
        return default
    return value


__all__ = ["SimulationSettings", "ENV_PREFIX"]
