from __future__ import annotations

from typing import overload

from cyclesched.config.schemas import CosineAnnealingConfig, OneCycleConfig
from cyclesched.schedules.cosine import CosineSchedule
from cyclesched.schedules.one_cycle import PhaseSchedule


@overload
def build_schedule(config: OneCycleConfig) -> PhaseSchedule: ...


@overload
def build_schedule(config: CosineAnnealingConfig) -> CosineSchedule: ...


def build_schedule(config: OneCycleConfig | CosineAnnealingConfig) -> PhaseSchedule | CosineSchedule:
    """Instantiate the schedule described by a validated config."""

    if isinstance(config, OneCycleConfig):
        return PhaseSchedule.from_config(config)
    if isinstance(config, CosineAnnealingConfig):
        return CosineSchedule.from_config(config)
    raise TypeError(f"unsupported schedule config: {type(config).__name__}")
