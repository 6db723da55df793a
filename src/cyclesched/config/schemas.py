from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from cyclesched.types import PERCENT_START


class OneCycleConfig(BaseModel):
    """One-cycle learning-rate and momentum policy."""

    model_config = ConfigDict(extra="forbid")

    kind: Literal["one_cycle"] = "one_cycle"
    max_lr: float = Field(gt=0.0)
    max_momentum: float = Field(default=0.95, ge=0.0, lt=1.0)
    div_factor: float = Field(default=25.0, gt=1.0)
    total_steps: int = Field(ge=1)
    percent_start: float = Field(default=PERCENT_START, gt=0.0, lt=1.0)


class CosineAnnealingConfig(BaseModel):
    """Cosine-annealed learning rate with no momentum component."""

    model_config = ConfigDict(extra="forbid")

    kind: Literal["cosine"] = "cosine"
    base_lr: float = Field(gt=0.0)
    max_step: int = Field(ge=1)
    eta_min: float = Field(default=0.0, ge=0.0)

    @model_validator(mode="after")
    def _check_eta_bounds(self) -> CosineAnnealingConfig:
        if self.eta_min > self.base_lr:
            raise ValueError("eta_min must be <= base_lr")
        return self
