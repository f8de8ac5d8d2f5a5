"""src/expsmooth/modeling/evaluation.py

Forecast accuracy scores against a held-out window.

All four metrics take the actual and forecast sequences in that order,
reject mismatched lengths, and poll the cancellation context before every
per-element accumulation.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

import numpy as np

from expsmooth.common.context import Context, ensure_context
from expsmooth.common.errors import LengthMismatchError, ValidationError

logger = logging.getLogger(__name__)


class ErrorType(str, Enum):
    MAE = "mae"
    SSE = "sse"
    RMSE = "rmse"
    MAPE = "mape"

    @classmethod
    def parse(cls, value: "ErrorType | str") -> "ErrorType":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValidationError(
                f"unknown error metric {value!r}; expected one of {[e.value for e in cls]}"
            ) from None


@dataclass(frozen=True)
class ErrorOptions:
    """
    Options for the accuracy metrics.

    No options are recognised yet. New fields (e.g. a weighting scheme)
    must default to the current behaviour.
    """


@dataclass(frozen=True)
class AccuracyScores:
    mae: float
    sse: float
    rmse: float
    mape: float

    def get(self, kind: ErrorType | str) -> float:
        return float(getattr(self, ErrorType.parse(kind).value))

    def as_dict(self) -> dict[str, float]:
        # Keep stable column names for CSV exports
        return {"MAE": float(self.mae), "SSE": float(self.sse), "RMSE": float(self.rmse), "MAPE": float(self.mape)}


def _paired_errors(actual: Iterable[float], forecast: Iterable[float]) -> tuple[np.ndarray, np.ndarray]:
    a = np.asarray(list(actual), dtype=float)
    f = np.asarray(list(forecast), dtype=float)
    if a.size != f.size:
        raise LengthMismatchError(f"actual has {a.size} values but forecast has {f.size}")
    if a.size == 0:
        raise ValidationError("cannot score empty sequences")
    return a, a - f


def _accumulate(values: np.ndarray, ctx: Context) -> float:
    total = 0.0
    for v in values:
        ctx.check()
        total += float(v)
    return total


def mean_absolute_error(
    actual: Iterable[float],
    forecast: Iterable[float],
    *,
    ctx: Context | None = None,
    options: ErrorOptions | None = None,
) -> float:
    _, err = _paired_errors(actual, forecast)
    return _accumulate(np.abs(err), ensure_context(ctx)) / err.size


def sum_of_squared_errors(
    actual: Iterable[float],
    forecast: Iterable[float],
    *,
    ctx: Context | None = None,
    options: ErrorOptions | None = None,
) -> float:
    _, err = _paired_errors(actual, forecast)
    return _accumulate(err**2, ensure_context(ctx))


def root_mean_squared_error(
    actual: Iterable[float],
    forecast: Iterable[float],
    *,
    ctx: Context | None = None,
    options: ErrorOptions | None = None,
) -> float:
    _, err = _paired_errors(actual, forecast)
    return math.sqrt(_accumulate(err**2, ensure_context(ctx)) / err.size)


def mean_absolute_percentage_error(
    actual: Iterable[float],
    forecast: Iterable[float],
    *,
    ctx: Context | None = None,
    options: ErrorOptions | None = None,
) -> float:
    """MAPE in percent. A zero actual makes the score infinite."""
    a, err = _paired_errors(actual, forecast)
    if np.any(a == 0.0):
        logger.warning("MAPE is undefined for zero actuals; returning inf")
        ensure_context(ctx).check()
        return math.inf
    ratios = np.abs(err) / np.abs(a)
    return _accumulate(ratios, ensure_context(ctx)) / err.size * 100.0


def compute_scores(
    actual: Iterable[float],
    forecast: Iterable[float],
    *,
    ctx: Context | None = None,
    options: ErrorOptions | None = None,
) -> AccuracyScores:
    a = list(actual)
    f = list(forecast)
    opts = options or ErrorOptions()
    return AccuracyScores(
        mae=mean_absolute_error(a, f, ctx=ctx, options=opts),
        sse=sum_of_squared_errors(a, f, ctx=ctx, options=opts),
        rmse=root_mean_squared_error(a, f, ctx=ctx, options=opts),
        mape=mean_absolute_percentage_error(a, f, ctx=ctx, options=opts),
    )
