from __future__ import annotations

import math


def cosine_interpolate(start: float, end: float, pct: float) -> float:
    """Half-cosine ramp from ``start`` (pct=0) to ``end`` (pct=1).

    ``pct`` is not clamped; values slightly outside [0, 1] stay well defined.
    """

    cos_term = math.cos(pct * math.pi) + 1.0
    return end + (start - end) / 2.0 * cos_term
