from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class HyperparameterUpdate:
    """Values a schedule emits for one optimizer step.

    ``momentum`` is None for schedules that only drive the learning rate.
    """

    step: int
    learning_rate: float
    momentum: float | None = None


class HyperparameterSchedule(Protocol):
    """Step-driven schedule API consumed by ``ScheduledOptimizer``.

    One ``step()`` call per optimizer update, in lockstep with the optimizer.
    """

    @property
    def step_num(self) -> int:
        """Number of ``step()`` calls made so far."""

    @property
    def lr(self) -> float:
        """Learning rate computed by the most recent ``step()``."""

    def current(self) -> HyperparameterUpdate:
        """Values at the current step without advancing."""

    def step(self) -> HyperparameterUpdate:
        """Advance the counter by one and recompute the values."""

    def value_at(self, step_num: int) -> HyperparameterUpdate:
        """Closed-form values at ``step_num`` without mutating the schedule."""
