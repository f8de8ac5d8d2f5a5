"""src/expsmooth/modeling/initial_state.py

Starting trend and seasonal offsets for additive Holt-Winters.

Both functions expect at least two complete cycles (len(y) >= 2 * period);
the caller validates that before getting here.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np


def initial_seasonal_components(y: Sequence[float], period: int) -> list[float]:
    """
    Average deviation of each slot from its cycle mean, over all complete cycles.
    """
    arr = np.asarray(y, dtype=float)
    n_cycles = arr.size // period
    cycles = arr[: n_cycles * period].reshape(n_cycles, period)
    deviations = cycles - cycles.mean(axis=1, keepdims=True)
    return [float(v) for v in deviations.mean(axis=0)]


def initial_trend(y: Sequence[float], period: int) -> float:
    """Mean per-step slope between the first two cycles."""
    arr = np.asarray(y, dtype=float)
    slopes = (arr[period : 2 * period] - arr[:period]) / period
    return float(slopes.mean())
