from __future__ import annotations

from cyclesched.config.schemas import CosineAnnealingConfig, OneCycleConfig


def one_cycle_small_config(total_steps: int = 10) -> OneCycleConfig:
    """Small AdamW-style one-cycle run (beta1 as momentum)."""

    return OneCycleConfig(
        max_lr=1.0e-3,
        max_momentum=0.9,
        div_factor=25.0,
        total_steps=total_steps,
    )


def one_cycle_long_config(total_steps: int = 10_000) -> OneCycleConfig:
    """Full-length one-cycle run with the conventional 0.95 momentum ceiling."""

    return OneCycleConfig(
        max_lr=3.0e-3,
        max_momentum=0.95,
        div_factor=25.0,
        total_steps=total_steps,
    )


def cosine_small_config(max_step: int = 10) -> CosineAnnealingConfig:
    return CosineAnnealingConfig(base_lr=1.0e-3, max_step=max_step, eta_min=1.0e-6)
