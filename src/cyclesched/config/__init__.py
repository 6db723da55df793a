from cyclesched.config.factory import build_schedule
from cyclesched.config.presets import (
    cosine_small_config,
    one_cycle_long_config,
    one_cycle_small_config,
)
from cyclesched.config.schemas import CosineAnnealingConfig, OneCycleConfig

__all__ = [
    "CosineAnnealingConfig",
    "OneCycleConfig",
    "build_schedule",
    "cosine_small_config",
    "one_cycle_long_config",
    "one_cycle_small_config",
]
