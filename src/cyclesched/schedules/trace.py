from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from cyclesched.schedules.base import HyperparameterSchedule
from cyclesched.types import FloatArray, IntArray


@dataclass(frozen=True)
class ScheduleTrace:
    """Values a schedule emits over a run of consecutive ``step()`` calls."""

    steps: IntArray
    learning_rates: FloatArray
    momenta: FloatArray | None = None

    def as_dict(self) -> dict[str, list[float] | list[int] | None]:
        return {
            "steps": self.steps.tolist(),
            "learning_rates": self.learning_rates.tolist(),
            "momenta": None if self.momenta is None else self.momenta.tolist(),
        }


def schedule_trace(schedule: HyperparameterSchedule, n_steps: int) -> ScheduleTrace:
    """Evaluate steps ``1..n_steps`` without advancing ``schedule``."""

    if n_steps < 1:
        raise ValueError("n_steps must be >= 1")

    steps = np.arange(1, n_steps + 1, dtype=np.int64)
    lrs = np.zeros(n_steps, dtype=np.float64)
    momenta = np.zeros(n_steps, dtype=np.float64)
    has_momentum = True

    for i, step in enumerate(steps):
        update = schedule.value_at(int(step))
        lrs[i] = update.learning_rate
        if update.momentum is None:
            has_momentum = False
        else:
            momenta[i] = update.momentum

    return ScheduleTrace(steps=steps, learning_rates=lrs, momenta=momenta if has_momentum else None)
