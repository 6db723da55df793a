"""One-cycle and cosine-annealing hyperparameter schedules."""

from cyclesched.config.factory import build_schedule
from cyclesched.config.schemas import CosineAnnealingConfig, OneCycleConfig
from cyclesched.errors import OptimizerInterfaceError, ScheduleConfigError
from cyclesched.optim.adapter import ParamGroupAdapter, ScheduledOptimizer, apply_update
from cyclesched.schedules.base import HyperparameterUpdate
from cyclesched.schedules.cosine import CosineSchedule
from cyclesched.schedules.interpolation import cosine_interpolate
from cyclesched.schedules.one_cycle import Phase, PhaseSchedule

__all__ = [
    "CosineAnnealingConfig",
    "CosineSchedule",
    "HyperparameterUpdate",
    "OneCycleConfig",
    "OptimizerInterfaceError",
    "ParamGroupAdapter",
    "Phase",
    "PhaseSchedule",
    "ScheduleConfigError",
    "ScheduledOptimizer",
    "apply_update",
    "build_schedule",
    "cosine_interpolate",
]
