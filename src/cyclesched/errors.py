from __future__ import annotations


class ScheduleConfigError(ValueError):
    """Raised when a schedule is constructed with unusable hyperparameters."""


class OptimizerInterfaceError(TypeError):
    """Raised when an optimizer does not expose the mutators a schedule needs."""
