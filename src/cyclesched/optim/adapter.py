from __future__ import annotations

from collections.abc import MutableMapping, Sequence
from typing import Any, Protocol, runtime_checkable

from cyclesched.errors import OptimizerInterfaceError
from cyclesched.schedules.base import HyperparameterSchedule, HyperparameterUpdate


@runtime_checkable
class LearningRateTarget(Protocol):
    """Optimizer side of the contract for learning-rate-only schedules."""

    def set_learning_rate(self, value: float) -> None:
        """Overwrite the current learning rate."""


@runtime_checkable
class MomentumTarget(LearningRateTarget, Protocol):
    """Optimizer that also exposes a momentum-like coefficient (e.g. Adam beta1)."""

    def set_momentum(self, value: float) -> None:
        """Overwrite the momentum / first-moment decay coefficient."""


def apply_update(optimizer: LearningRateTarget, update: HyperparameterUpdate) -> None:
    """Write one schedule update into ``optimizer``."""

    if not isinstance(optimizer, LearningRateTarget):
        raise OptimizerInterfaceError(
            f"{type(optimizer).__name__} does not expose set_learning_rate(value)"
        )
    if update.momentum is not None and not isinstance(optimizer, MomentumTarget):
        raise OptimizerInterfaceError(
            f"{type(optimizer).__name__} does not expose set_momentum(value) required by this schedule"
        )

    optimizer.set_learning_rate(update.learning_rate)
    if update.momentum is not None:
        optimizer.set_momentum(update.momentum)  # type: ignore[attr-defined]


class ParamGroupAdapter:
    """Expose a torch-style ``param_groups`` optimizer through ``MomentumTarget``.

    Only single-group optimizers are accepted. Momentum goes to ``betas[0]`` for
    the Adam family and to ``momentum`` otherwise.
    """

    def __init__(self, optimizer: Any) -> None:
        groups = getattr(optimizer, "param_groups", None)
        if not isinstance(groups, Sequence) or not groups:
            raise OptimizerInterfaceError(f"{type(optimizer).__name__} has no param_groups")
        if len(groups) != 1:
            raise OptimizerInterfaceError(f"expected exactly one param group, found {len(groups)}")
        if not isinstance(groups[0], MutableMapping):
            raise OptimizerInterfaceError("param group must be a mutable mapping")
        self.optimizer = optimizer

    @property
    def group(self) -> MutableMapping[str, Any]:
        return self.optimizer.param_groups[0]

    def set_learning_rate(self, value: float) -> None:
        self.group["lr"] = value

    def set_momentum(self, value: float) -> None:
        group = self.group
        if "betas" in group:
            group["betas"] = (value, *tuple(group["betas"])[1:])
        elif "momentum" in group:
            group["momentum"] = value
        else:
            raise OptimizerInterfaceError("param group has neither 'betas' nor 'momentum'")


class ScheduledOptimizer:
    """Keep a schedule and an optimizer in lockstep.

    The schedule's initial values are written on construction; each ``step()``
    advances the schedule once and applies the result.
    """

    def __init__(self, schedule: HyperparameterSchedule, optimizer: LearningRateTarget) -> None:
        self.schedule = schedule
        self.optimizer = optimizer
        apply_update(optimizer, schedule.current())

    def step(self) -> HyperparameterUpdate:
        update = self.schedule.step()
        apply_update(self.optimizer, update)
        return update
