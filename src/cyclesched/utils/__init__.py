from cyclesched.utils.checks import (
    require_finite,
    require_in_range,
    require_positive,
    require_positive_int,
)
from cyclesched.utils.io import ensure_dir, save_json
from cyclesched.utils.logging import configure_logging, log_event

__all__ = [
    "configure_logging",
    "ensure_dir",
    "log_event",
    "require_finite",
    "require_in_range",
    "require_positive",
    "require_positive_int",
    "save_json",
]
