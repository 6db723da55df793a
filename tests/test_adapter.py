from __future__ import annotations

from types import SimpleNamespace

import pytest

from cyclesched.errors import OptimizerInterfaceError
from cyclesched.optim.adapter import ParamGroupAdapter, ScheduledOptimizer, apply_update
from cyclesched.schedules.base import HyperparameterUpdate
from cyclesched.schedules.cosine import CosineSchedule
from cyclesched.schedules.one_cycle import PhaseSchedule


class RecordingOptimizer:
    def __init__(self) -> None:
        self.learning_rates: list[float] = []
        self.momenta: list[float] = []

    def set_learning_rate(self, value: float) -> None:
        self.learning_rates.append(value)

    def set_momentum(self, value: float) -> None:
        self.momenta.append(value)


class LearningRateOnlyOptimizer:
    def __init__(self) -> None:
        self.lr = 0.0

    def set_learning_rate(self, value: float) -> None:
        self.lr = value


def test_apply_update_writes_both_values() -> None:
    optimizer = RecordingOptimizer()
    apply_update(optimizer, HyperparameterUpdate(step=3, learning_rate=0.01, momentum=0.85))

    assert optimizer.learning_rates == [0.01]
    assert optimizer.momenta == [0.85]


def test_learning_rate_only_optimizer_accepts_cosine_updates() -> None:
    optimizer = LearningRateOnlyOptimizer()
    driver = ScheduledOptimizer(CosineSchedule(base_lr=1.0e-3, max_step=10), optimizer)
    assert optimizer.lr == 1.0e-3

    update = driver.step()
    assert optimizer.lr == update.learning_rate


def test_momentum_update_requires_set_momentum() -> None:
    with pytest.raises(OptimizerInterfaceError, match="set_momentum"):
        apply_update(LearningRateOnlyOptimizer(), HyperparameterUpdate(step=1, learning_rate=0.1, momentum=0.9))


def test_apply_update_rejects_objects_without_mutators() -> None:
    with pytest.raises(OptimizerInterfaceError):
        apply_update(object(), HyperparameterUpdate(step=1, learning_rate=0.1))  # type: ignore[arg-type]


def test_scheduled_optimizer_keeps_lockstep() -> None:
    schedule = PhaseSchedule(max_lr=1.0e-3, max_momentum=0.9, div_factor=25.0, total_steps=10)
    optimizer = RecordingOptimizer()
    driver = ScheduledOptimizer(schedule, optimizer)

    for _ in range(10):
        driver.step()

    assert schedule.step_num == 10
    assert len(optimizer.learning_rates) == 11
    assert optimizer.learning_rates[0] == schedule.min_lr
    assert optimizer.momenta[0] == 0.9
    assert optimizer.learning_rates[-1] == schedule.lr
    assert optimizer.momenta[-1] == schedule.momentum


def test_param_group_adapter_sets_adam_beta1() -> None:
    optimizer = SimpleNamespace(param_groups=[{"lr": 0.1, "betas": (0.9, 0.999), "weight_decay": 0.01}])
    adapter = ParamGroupAdapter(optimizer)
    ScheduledOptimizer(PhaseSchedule(max_lr=1.0e-3, max_momentum=0.95, div_factor=25.0, total_steps=20), adapter).step()

    group = optimizer.param_groups[0]
    assert 4.0e-5 < group["lr"] < 1.0e-3
    assert group["betas"][1] == 0.999
    assert 0.038 < group["betas"][0] < 0.95
    assert group["weight_decay"] == 0.01


def test_param_group_adapter_sets_sgd_momentum() -> None:
    optimizer = SimpleNamespace(param_groups=[{"lr": 0.1, "momentum": 0.0}])
    adapter = ParamGroupAdapter(optimizer)
    adapter.set_momentum(0.8)
    adapter.set_learning_rate(0.05)

    assert optimizer.param_groups[0] == {"lr": 0.05, "momentum": 0.8}


def test_param_group_adapter_without_momentum_slot() -> None:
    adapter = ParamGroupAdapter(SimpleNamespace(param_groups=[{"lr": 0.1}]))
    with pytest.raises(OptimizerInterfaceError):
        adapter.set_momentum(0.9)


@pytest.mark.parametrize("groups", [[], [{"lr": 0.1}, {"lr": 0.2}], None])
def test_param_group_adapter_requires_single_group(groups: object) -> None:
    with pytest.raises(OptimizerInterfaceError):
        ParamGroupAdapter(SimpleNamespace(param_groups=groups))
