"""Scale interpolation math.

A single progress value ``x`` in ``[0, 1]`` is split into ``n`` sequential
phases with :func:`divide_scale`; each phase ramps 0 -> 1 while the previous
ones hold at 1 and the following ones hold at 0. The per-tick increment comes
from :func:`update_value`, which switches between two rates on either side of
the ``div`` threshold.
"""
from __future__ import annotations

import math


def inverse(n: int) -> float:
    return 1.0 / n


def max_scale(x: float, i: int, n: int) -> float:
    return max(0.0, x - i * inverse(n))


def divide_scale(x: float, i: int, n: int) -> float:
    return min(inverse(n), max_scale(x, i, n)) * n


def phases(x: float, n: int) -> list[float]:
    return [divide_scale(x, i, n) for i in range(n)]


def scale_factor(x: float, div: float) -> float:
    """0.0 below ``div``, 1.0 from ``div`` on.

    Clamped to the two bands: a refold can undershoot zero by a rounding
    error, and a negative factor would reverse the step.
    """
    return min(1.0, max(0.0, float(math.floor(x / div))))


def mirror_value(x: float, a: int, b: int, div: float) -> float:
    factor = scale_factor(x, div)
    return (1 - factor) * inverse(a) + factor * inverse(b)


def update_value(
    x: float, direction: float, a: int, b: int, gap: float, div: float,
) -> float:
    return mirror_value(x, a, b, div) * direction * gap
