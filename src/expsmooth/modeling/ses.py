"""src/expsmooth/modeling/ses.py"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
import pandas as pd

from expsmooth.common.context import Context, ensure_context
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
from expsmooth.reporting.tables import holdout_table, one_row_table, render_sections, scores_table

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SesState(FittedState):
    alpha: float
    level: float
    initial_level: float
    train_values: tuple[float, ...]
    test_values: tuple[float, ...]
    forecast_values: tuple[float, ...]
    scores: AccuracyScores
    error_metric: ErrorType = ErrorType.MAE


class SimpleExponentialSmoothingModel(SmoothingModel):
    """
    Level-only exponential smoothing; forecasts are flat at the final level.

    Accepts the same FitOptions as HoltWintersModel. Only alpha and
    train_range drive the fit, but beta/gamma/period are still checked.
    """

    _state: SesState | None

    def fit(self, options: FitOptions, *, ctx: Context | None = None) -> "SimpleExponentialSmoothingModel":
        ctx = ensure_context(ctx)

        start, end = resolve_range(self.data, options.train_range)
        check_smoothing_parameters(alpha=options.alpha, beta=options.beta, gamma=options.gamma)
        check_period(options.period)
        error_metric = ErrorType.parse(options.error_metric)
        train, test = split_train_test(self.data, start, end)

        alpha = float(options.alpha)
        y = train.to_numpy(dtype=float)
        level = init_level = float(y[0])
        for t in range(y.size):
            ctx.check()
            if t == 0:
                continue
            level = alpha * y[t] + (1 - alpha) * level

        fcast = np.empty(len(test), dtype=float)
        for i in range(fcast.size):
            ctx.check()
            fcast[i] = level
        scores = compute_scores(test.to_numpy(), fcast, ctx=ctx, options=ErrorOptions())

        self._state = SesState(
            alpha=alpha,
            level=float(level),
            initial_level=init_level,
            train_values=tuple(float(v) for v in y),
            test_values=tuple(float(v) for v in test),
            forecast_values=tuple(float(v) for v in fcast),
            scores=scores,
            error_metric=error_metric,
        )
        logger.info("SES fitted: level=%.4f %s=%.4f", level, error_metric.value.upper(), self._state.score)
        return self

    def predict(self, h: int, *, ctx: Context | None = None) -> pd.Series:
        steps = check_horizon(h)
        st = self.state
        ctx = ensure_context(ctx)
        values = np.empty(steps, dtype=float)
        for i in range(values.size):
            ctx.check()
            values[i] = st.level
        return pd.Series(values, name="Prediction", dtype=float)

    def summary(self) -> str:
        st = self.state
        return render_sections(
            [
                ("Smoothing constants", one_row_table({"Alpha": st.alpha})),
                ("Components", one_row_table({"Initial Smoothing Level": st.initial_level, "Smoothing Level": st.level})),
                ("Accuracy (held-out window)", scores_table(st.scores.as_dict())),
                ("Held-out actual vs. forecast", holdout_table(st.test_series, st.forecast_series)),
            ]
        )
