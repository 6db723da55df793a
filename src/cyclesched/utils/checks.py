from __future__ import annotations

import math
from numbers import Integral

from cyclesched.errors import ScheduleConfigError


def require_positive_int(name: str, value: object) -> int:
    """Raise a clear error unless ``value`` is an integer >= 1."""

    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ScheduleConfigError(f"{name} must be an integer, received {type(value).__name__}")
    if value < 1:
        raise ScheduleConfigError(f"{name} must be >= 1, received {value}")
    return int(value)


def require_finite(name: str, value: float) -> float:
    """Guard against NaN/Inf hyperparameters."""

    value = float(value)
    if not math.isfinite(value):
        raise ScheduleConfigError(f"{name} must be finite, received {value}")
    return value


def require_positive(name: str, value: float) -> float:
    value = require_finite(name, value)
    if value <= 0.0:
        raise ScheduleConfigError(f"{name} must be > 0, received {value}")
    return value


def require_in_range(
    name: str,
    value: float,
    low: float,
    high: float,
    *,
    include_low: bool = True,
    include_high: bool = False,
) -> float:
    """Raise unless ``value`` lies in the interval described by the bounds."""

    value = require_finite(name, value)
    above = value >= low if include_low else value > low
    below = value <= high if include_high else value < high
    if not (above and below):
        left = "[" if include_low else "("
        right = "]" if include_high else ")"
        raise ScheduleConfigError(f"{name} must lie in {left}{low}, {high}{right}, received {value}")
    return value
