from __future__ import annotations

import math
from typing import TYPE_CHECKING

from cyclesched.errors import ScheduleConfigError
from cyclesched.schedules.base import HyperparameterUpdate
from cyclesched.utils.checks import require_finite, require_positive, require_positive_int

if TYPE_CHECKING:
    from cyclesched.config.schemas import CosineAnnealingConfig


def cosine_annealing(step: int, max_step: int, base_lr: float, eta_min: float) -> float:
    """Closed-form cosine decay; periodic in ``step`` with period ``2 * max_step``."""

    return eta_min + (base_lr - eta_min) * (1.0 + math.cos(math.pi * step / max_step)) / 2.0


class CosineSchedule:
    """Cosine annealing from ``base_lr`` toward ``eta_min`` over ``max_step`` steps.

    There is no clamp: stepping past ``max_step`` follows the cosine back up.
    """

    def __init__(self, base_lr: float, max_step: int, eta_min: float = 0.0) -> None:
        self._base_lr = require_positive("base_lr", base_lr)
        self._max_step = require_positive_int("max_step", max_step)
        self._eta_min = require_finite("eta_min", eta_min)
        if self._eta_min < 0.0:
            raise ScheduleConfigError(f"eta_min must be >= 0, received {self._eta_min}")
        if self._eta_min > self._base_lr:
            raise ScheduleConfigError(
                f"eta_min must be <= base_lr, received eta_min={self._eta_min} base_lr={self._base_lr}"
            )

        self._step_num = 0
        self._lr = self._base_lr

    @classmethod
    def from_config(cls, config: CosineAnnealingConfig) -> CosineSchedule:
        return cls(base_lr=config.base_lr, max_step=config.max_step, eta_min=config.eta_min)

    @property
    def base_lr(self) -> float:
        return self._base_lr

    @property
    def eta_min(self) -> float:
        return self._eta_min

    @property
    def max_step(self) -> int:
        return self._max_step

    @property
    def step_num(self) -> int:
        return self._step_num

    @property
    def lr(self) -> float:
        return self._lr

    def value_at(self, step_num: int) -> HyperparameterUpdate:
        if step_num < 0:
            raise ValueError("step_num must be non-negative")
        lr = cosine_annealing(step_num, self._max_step, self._base_lr, self._eta_min)
        return HyperparameterUpdate(step=step_num, learning_rate=lr)

    def current(self) -> HyperparameterUpdate:
        return HyperparameterUpdate(step=self._step_num, learning_rate=self._lr)

    def step(self) -> HyperparameterUpdate:
        self._step_num += 1
        self._lr = cosine_annealing(self._step_num, self._max_step, self._base_lr, self._eta_min)
        return self.current()

    def __repr__(self) -> str:
        return (
            f"CosineSchedule(base_lr={self._base_lr!r}, max_step={self._max_step!r}, "
            f"eta_min={self._eta_min!r}, step_num={self._step_num})"
        )
