from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from cyclesched.errors import ScheduleConfigError
from cyclesched.schedules.base import HyperparameterUpdate
from cyclesched.schedules.interpolation import cosine_interpolate
from cyclesched.types import PERCENT_START
from cyclesched.utils.checks import require_in_range, require_positive, require_positive_int

if TYPE_CHECKING:
    from cyclesched.config.schemas import OneCycleConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Phase:
    """One monotone cosine ramp of the one-cycle policy.

    The phase covers steps ``(start_step, end_step]`` where ``start_step`` is the
    previous phase's ``end_step`` (0 for the first phase).
    """

    end_step: int
    start_lr: float
    end_lr: float
    start_momentum: float
    end_momentum: float


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def build_phases(
    max_lr: float,
    min_lr: float,
    max_momentum: float,
    min_momentum: float,
    total_steps: int,
    percent_start: float = PERCENT_START,
) -> tuple[Phase, Phase]:
    """Warmup then annealing phases; momentum moves inversely to the learning rate."""

    warmup = Phase(
        end_step=_round_half_away(percent_start * total_steps - 1.0),
        start_lr=min_lr,
        end_lr=max_lr,
        start_momentum=max_momentum,
        end_momentum=min_momentum,
    )
    annealing = Phase(
        end_step=total_steps - 1,
        start_lr=max_lr,
        end_lr=min_lr,
        start_momentum=min_momentum,
        end_momentum=max_momentum,
    )
    return warmup, annealing


class PhaseSchedule:
    """One-cycle learning-rate and momentum schedule.

    The learning rate ramps ``max_lr / div_factor -> max_lr`` over the first
    ``percent_start`` of ``total_steps`` and back down over the rest, each ramp a
    half cosine. Momentum follows the mirror image between ``max_momentum`` and
    ``max_momentum / div_factor``.

    The last phase ends at step ``total_steps - 1``. Any later step is clamped to
    the final phase's end values (``min_lr``, ``max_momentum``) and the counter
    keeps counting. Calling ``step()`` more than ``total_steps`` times does not
    raise: ``exhausted`` turns True and a single warning is logged.
    """

    def __init__(
        self,
        max_lr: float,
        max_momentum: float,
        div_factor: float,
        total_steps: int,
        *,
        percent_start: float = PERCENT_START,
    ) -> None:
        self._max_lr = require_positive("max_lr", max_lr)
        self._max_momentum = require_in_range("max_momentum", max_momentum, 0.0, 1.0)
        div_factor = require_positive("div_factor", div_factor)
        if div_factor <= 1.0:
            raise ScheduleConfigError(f"div_factor must be > 1 so that min < max, received {div_factor}")
        self._div_factor = div_factor
        self._total_steps = require_positive_int("total_steps", total_steps)
        self._percent_start = require_in_range(
            "percent_start", percent_start, 0.0, 1.0, include_low=False
        )

        self._min_lr = self._max_lr / div_factor
        self._min_momentum = self._max_momentum / div_factor
        self._phases = build_phases(
            max_lr=self._max_lr,
            min_lr=self._min_lr,
            max_momentum=self._max_momentum,
            min_momentum=self._min_momentum,
            total_steps=self._total_steps,
            percent_start=self._percent_start,
        )

        warmup_end = self._phases[0].end_step
        if warmup_end < 1 or warmup_end >= self._total_steps - 1:
            raise ScheduleConfigError(
                f"total_steps={self._total_steps} is too small for two non-degenerate phases "
                f"(warmup would end at step {warmup_end})"
            )

        self._step_num = 0
        self._lr = self._min_lr
        self._momentum = self._max_momentum
        self._exhausted = False

    @classmethod
    def from_config(cls, config: OneCycleConfig) -> PhaseSchedule:
        return cls(
            max_lr=config.max_lr,
            max_momentum=config.max_momentum,
            div_factor=config.div_factor,
            total_steps=config.total_steps,
            percent_start=config.percent_start,
        )

    @property
    def phases(self) -> tuple[Phase, ...]:
        return self._phases

    @property
    def total_steps(self) -> int:
        return self._total_steps

    @property
    def div_factor(self) -> float:
        return self._div_factor

    @property
    def max_lr(self) -> float:
        return self._max_lr

    @property
    def min_lr(self) -> float:
        return self._min_lr

    @property
    def max_momentum(self) -> float:
        return self._max_momentum

    @property
    def min_momentum(self) -> float:
        return self._min_momentum

    @property
    def step_num(self) -> int:
        return self._step_num

    @property
    def lr(self) -> float:
        return self._lr

    @property
    def momentum(self) -> float:
        return self._momentum

    @property
    def exhausted(self) -> bool:
        """True once ``step()`` has been called more than ``total_steps`` times."""

        return self._exhausted

    def _locate(self, step_num: int) -> tuple[Phase, int] | None:
        start_step = 0
        for phase in self._phases:
            if step_num <= phase.end_step:
                return phase, start_step
            start_step = phase.end_step
        return None

    def _evaluate(self, step_num: int) -> tuple[float, float]:
        located = self._locate(step_num)
        if located is None:
            last = self._phases[-1]
            return last.end_lr, last.end_momentum

        phase, start_step = located
        pct = (step_num - start_step) / (phase.end_step - start_step)
        return (
            cosine_interpolate(phase.start_lr, phase.end_lr, pct),
            cosine_interpolate(phase.start_momentum, phase.end_momentum, pct),
        )

    def value_at(self, step_num: int) -> HyperparameterUpdate:
        """Values the schedule holds after ``step_num`` calls to ``step()``."""

        if step_num < 0:
            raise ValueError("step_num must be non-negative")
        lr, momentum = self._evaluate(step_num)
        return HyperparameterUpdate(step=step_num, learning_rate=lr, momentum=momentum)

    def current(self) -> HyperparameterUpdate:
        return HyperparameterUpdate(step=self._step_num, learning_rate=self._lr, momentum=self._momentum)

    def step(self) -> HyperparameterUpdate:
        """Advance one optimizer step; the caller applies the returned values."""

        self._step_num += 1
        self._lr, self._momentum = self._evaluate(self._step_num)

        if self._step_num > self._total_steps and not self._exhausted:
            self._exhausted = True
            logger.warning(
                "one-cycle schedule stepped past total_steps=%d; holding lr=%g momentum=%g",
                self._total_steps,
                self._lr,
                self._momentum,
            )
        return self.current()

    def __repr__(self) -> str:
        return (
            f"PhaseSchedule(max_lr={self._max_lr!r}, max_momentum={self._max_momentum!r}, "
            f"div_factor={self._div_factor!r}, total_steps={self._total_steps!r}, "
            f"step_num={self._step_num})"
        )
