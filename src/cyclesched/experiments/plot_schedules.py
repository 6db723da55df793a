from __future__ import annotations

import argparse
import logging
from pathlib import Path

import matplotlib.pyplot as plt

from cyclesched.config.factory import build_schedule
from cyclesched.config.presets import (
    cosine_small_config,
    one_cycle_long_config,
    one_cycle_small_config,
)
from cyclesched.config.schemas import CosineAnnealingConfig, OneCycleConfig
from cyclesched.schedules.trace import ScheduleTrace, schedule_trace
from cyclesched.utils.io import save_json
from cyclesched.utils.logging import configure_logging, log_event

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Plot one-cycle / cosine-annealing schedules")
    parser.add_argument("--schedule", choices=("one_cycle", "cosine"), default="one_cycle")
    parser.add_argument("--mode", choices=("small", "long"), default="small")
    parser.add_argument("--steps", type=int, default=None, help="step budget (total_steps / max_step)")
    parser.add_argument(
        "--extra-steps",
        type=int,
        default=0,
        help="evaluate this many steps past the budget",
    )
    parser.add_argument("--output-dir", type=Path, default=Path("results/schedules"))
    return parser.parse_args(argv)


def resolve_config(args: argparse.Namespace) -> OneCycleConfig | CosineAnnealingConfig:
    if args.schedule == "cosine":
        return cosine_small_config() if args.steps is None else cosine_small_config(max_step=args.steps)
    if args.mode == "long":
        return one_cycle_long_config() if args.steps is None else one_cycle_long_config(total_steps=args.steps)
    return one_cycle_small_config() if args.steps is None else one_cycle_small_config(total_steps=args.steps)


def plot_trace(trace: ScheduleTrace, title: str, path: Path) -> None:
    n_rows = 1 if trace.momenta is None else 2
    fig, axes = plt.subplots(n_rows, 1, figsize=(6.0, 2.6 * n_rows), sharex=True, squeeze=False)

    ax_lr = axes[0, 0]
    ax_lr.plot(trace.steps, trace.learning_rates, "o-", ms=2, lw=1.0)
    ax_lr.set_ylabel("Learning rate")
    ax_lr.set_title(title)
    ax_lr.grid(alpha=0.3)

    if trace.momenta is not None:
        ax_m = axes[1, 0]
        ax_m.plot(trace.steps, trace.momenta, "o-", ms=2, lw=1.0, color="tab:orange")
        ax_m.set_ylabel("Momentum")
        ax_m.grid(alpha=0.3)

    axes[-1, 0].set_xlabel("Step")
    fig.tight_layout()
    fig.savefig(path, dpi=150)
    plt.close(fig)


def main(argv: list[str] | None = None) -> None:
    configure_logging()
    args = parse_args(argv)

    config = resolve_config(args)
    schedule = build_schedule(config)
    budget = config.total_steps if isinstance(config, OneCycleConfig) else config.max_step
    trace = schedule_trace(schedule, n_steps=budget + max(0, args.extra_steps))

    output_dir: Path = args.output_dir
    output_dir.mkdir(parents=True, exist_ok=True)
    plot_trace(trace, title=f"{args.schedule} schedule ({budget} steps)", path=output_dir / f"{args.schedule}.png")

    payload = {
        "schedule": args.schedule,
        "config": config.model_dump(),
        "trace": trace.as_dict(),
    }
    save_json(output_dir / f"{args.schedule}_trace.json", payload)
    log_event(
        logger,
        "schedule_plotted",
        schedule=args.schedule,
        steps=int(trace.steps[-1]),
        peak_lr=float(trace.learning_rates.max()),
        final_lr=float(trace.learning_rates[-1]),
        output_dir=str(output_dir),
    )


if __name__ == "__main__":
    main()
