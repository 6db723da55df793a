from __future__ import annotations

from cyclesched.config.factory import build_schedule
from cyclesched.config.presets import cosine_small_config, one_cycle_small_config

if __name__ == "__main__":
    one_cycle = build_schedule(one_cycle_small_config())
    cosine = build_schedule(cosine_small_config())

    print("step  one-cycle lr  momentum   cosine lr")
    for _ in range(11):
        oc = one_cycle.step()
        cos = cosine.step()
        print(f"{oc.step:>4}  {oc.learning_rate:.6e}  {oc.momentum:.6f}  {cos.learning_rate:.6e}")
