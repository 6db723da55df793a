from cyclesched.schedules.base import HyperparameterSchedule, HyperparameterUpdate
from cyclesched.schedules.cosine import CosineSchedule, cosine_annealing
from cyclesched.schedules.interpolation import cosine_interpolate
from cyclesched.schedules.one_cycle import Phase, PhaseSchedule, build_phases
from cyclesched.schedules.trace import ScheduleTrace, schedule_trace

__all__ = [
    "CosineSchedule",
    "HyperparameterSchedule",
    "HyperparameterUpdate",
    "Phase",
    "PhaseSchedule",
    "ScheduleTrace",
    "build_phases",
    "cosine_annealing",
    "cosine_interpolate",
    "schedule_trace",
]
