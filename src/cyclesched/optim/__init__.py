from cyclesched.optim.adapter import (
    LearningRateTarget,
    MomentumTarget,
    ParamGroupAdapter,
    ScheduledOptimizer,
    apply_update,
)

__all__ = [
    "LearningRateTarget",
    "MomentumTarget",
    "ParamGroupAdapter",
    "ScheduledOptimizer",
    "apply_update",
]
