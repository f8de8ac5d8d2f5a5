"""src/expsmooth/modeling/holt_winters.py

Additive Holt-Winters (triple exponential smoothing).

Recursion over the training slice y, t = 1 .. len(y)-1, p = period:

    level_t  = alpha * (y_t - s[t % p]) + (1 - alpha) * (level + trend)
    trend_t  = beta * (level_t - level) + (1 - beta) * trend
    s[t % p] = gamma * (y_t - level - trend) + (1 - gamma) * s[t % p]

with level_0 = y_0 and trend / seasonals seeded from the whole training
slice. Forecasts m steps past the last training point use the final state:

    yhat_m = level + m * trend + s[(m - 1) % p]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

import numpy as np
import pandas as pd

from expsmooth.common.context import Context, ensure_context
from expsmooth.common.errors import TrainingWindowError
from expsmooth.modeling.base import (
    FitOptions,
    FittedState,
    SmoothingModel,
    check_horizon,
    check_period,
    check_smoothing_parameters,
    resolve_range,
    split_train_test,
)
from expsmooth.modeling.evaluation import AccuracyScores, ErrorOptions, ErrorType, compute_scores
from expsmooth.modeling.initial_state import initial_seasonal_components, initial_trend
from expsmooth.reporting.tables import (
    holdout_table,
    one_row_table,
    render_sections,
    scores_table,
    seasonal_table,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HoltWintersState(FittedState):
    """Everything a successful fit produced. Never mutated afterwards."""
    period: int
    alpha: float
    beta: float
    gamma: float
    level: float
    trend: float
    seasonal_components: tuple[float, ...]
    initial_level: float
    initial_trend: float
    initial_seasonal_components: tuple[float, ...]
    train_values: tuple[float, ...]
    test_values: tuple[float, ...]
    forecast_values: tuple[float, ...]
    scores: AccuracyScores
    error_metric: ErrorType = ErrorType.MAE


def steady_state_forecast(
    level: float,
    trend: float,
    seasonals: Iterable[float],
    steps: int,
    *,
    ctx: Context,
) -> np.ndarray:
    """level + m*trend + s[(m-1) % p] for m = 1..steps, seasonals never re-estimated."""
    s = tuple(seasonals)
    period = len(s)
    out = np.empty(steps, dtype=float)
    for m in range(1, steps + 1):
        ctx.check()
        out[m - 1] = level + m * trend + s[(m - 1) % period]
    return out


class HoltWintersModel(SmoothingModel):
    """
    Holt-Winters model bound to one input series.

    Usage:
        model = HoltWintersModel(series).fit(FitOptions(alpha=0.45, beta=0.03, gamma=0.73, period=12,
                                                        train_range=TrainRange(end=71)))
        model.predict(24)
    """

    _state: HoltWintersState | None

    def fit(self, options: FitOptions, *, ctx: Context | None = None) -> "HoltWintersModel":
        ctx = ensure_context(ctx)

        # Validation (no state touched until the very end)
        start, end = resolve_range(self.data, options.train_range)
        check_smoothing_parameters(alpha=options.alpha, beta=options.beta, gamma=options.gamma)
        period = check_period(options.period)
        error_metric = ErrorType.parse(options.error_metric)
        train, test = split_train_test(self.data, start, end)
        if len(train) < 2 * period:
            raise TrainingWindowError(
                f"training slice has {len(train)} values; need at least {2 * period} (two full cycles of period {period})"
            )

        alpha, beta, gamma = float(options.alpha), float(options.beta), float(options.gamma)
        y = train.to_numpy(dtype=float)

        seasonals = initial_seasonal_components(y, period)
        init_seasonals = tuple(seasonals)
        trend = initial_trend(y, period)
        init_trend = trend
        level = init_level = float(y[0])

        logger.debug(
            "Fitting Holt-Winters on %d points (range %d..%d), alpha=%s beta=%s gamma=%s period=%d",
            y.size, start, end, alpha, beta, gamma, period,
        )

        for t in range(y.size):
            ctx.check()
            if t == 0:
                continue
            xt = y[t]
            slot = t % period
            prev_level, level = level, alpha * (xt - seasonals[slot]) + (1 - alpha) * (level + trend)
            prev_trend, trend = trend, beta * (level - prev_level) + (1 - beta) * trend
            seasonals[slot] = gamma * (xt - prev_level - prev_trend) + (1 - gamma) * seasonals[slot]

        fcast = steady_state_forecast(level, trend, seasonals, len(test), ctx=ctx)
        scores = compute_scores(test.to_numpy(), fcast, ctx=ctx, options=ErrorOptions())

        self._state = HoltWintersState(
            period=period,
            alpha=alpha,
            beta=beta,
            gamma=gamma,
            level=float(level),
            trend=float(trend),
            seasonal_components=tuple(float(s) for s in seasonals),
            initial_level=init_level,
            initial_trend=float(init_trend),
            initial_seasonal_components=init_seasonals,
            train_values=tuple(float(v) for v in y),
            test_values=tuple(float(v) for v in test),
            forecast_values=tuple(float(v) for v in fcast),
            scores=scores,
            error_metric=error_metric,
        )
        logger.info(
            "Holt-Winters fitted: level=%.4f trend=%.4f %s=%.4f",
            level, trend, error_metric.value.upper(), self._state.score,
        )
        return self

    def predict(self, h: int, *, ctx: Context | None = None) -> pd.Series:
        steps = check_horizon(h)
        st = self.state
        values = steady_state_forecast(st.level, st.trend, st.seasonal_components, steps, ctx=ensure_context(ctx))
        return pd.Series(values, name="Prediction", dtype=float)

    def summary(self) -> str:
        st = self.state
        return render_sections(
            [
                ("Smoothing constants", one_row_table({"Alpha": st.alpha, "Beta": st.beta, "Gamma": st.gamma, "Period": st.period})),
                (
                    "Components",
                    one_row_table(
                        {
                            "Initial Smoothing Level": st.initial_level,
                            "Initial Trend Level": st.initial_trend,
                            "Smoothing Level": st.level,
                            "Trend Level": st.trend,
                        }
                    ),
                ),
                ("Seasonal components", seasonal_table(st.initial_seasonal_components, st.seasonal_components)),
                ("Accuracy (held-out window)", scores_table(st.scores.as_dict())),
                ("Held-out actual vs. forecast", holdout_table(st.test_series, st.forecast_series)),
            ]
        )
