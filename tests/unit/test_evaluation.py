"""tests/unit/test_evaluation.py"""

from __future__ import annotations

import math

import numpy as np
import pytest

from expsmooth.common.context import Context
from expsmooth.common.errors import CancelledError, LengthMismatchError, ValidationError
from expsmooth.modeling.evaluation import (
    AccuracyScores,
    ErrorType,
    compute_scores,
    mean_absolute_error,
    mean_absolute_percentage_error,
    root_mean_squared_error,
    sum_of_squared_errors,
)


def test_mae_basic() -> None:
    actual = [1.0, 2.0, 3.0]
    forecast = [2.0, 2.0, 1.0]  # abs err: [1,0,2]
    assert abs(mean_absolute_error(actual, forecast) - 1.0) < 1e-12


def test_sse_basic() -> None:
    actual = [1.0, 2.0, 3.0]
    forecast = [1.0, 4.0, 0.0]  # err: [0,-2,3]
    assert sum_of_squared_errors(actual, forecast) == pytest.approx(13.0)


def test_rmse_basic() -> None:
    actual = np.array([1.0, 2.0, 3.0])
    forecast = np.array([1.0, 2.0, 4.0])
    # MSE = 1/3
    assert abs(root_mean_squared_error(actual, forecast) - math.sqrt(1.0 / 3.0)) < 1e-12


def test_mape_is_in_percent() -> None:
    actual = [100.0, 200.0]
    forecast = [110.0, 190.0]
    # (10/100 + 10/200) / 2 * 100
    assert mean_absolute_percentage_error(actual, forecast) == pytest.approx(7.5)


def test_mape_zero_actual_is_inf() -> None:
    assert math.isinf(mean_absolute_percentage_error([0.0, 1.0], [1.0, 1.0]))


@pytest.mark.parametrize(
    "metric",
    [mean_absolute_error, sum_of_squared_errors, root_mean_squared_error, mean_absolute_percentage_error],
)
def test_length_mismatch_rejected(metric) -> None:
    with pytest.raises(LengthMismatchError):
        metric([1.0, 2.0, 3.0], [1.0, 2.0])


def test_empty_inputs_rejected() -> None:
    with pytest.raises(ValidationError):
        mean_absolute_error([], [])


def test_sse_equals_rmse_squared_times_n() -> None:
    rng = np.random.default_rng(7)
    actual = rng.normal(50.0, 10.0, size=37)
    forecast = actual + rng.normal(0.0, 3.0, size=37)

    sse = sum_of_squared_errors(actual, forecast)
    rmse = root_mean_squared_error(actual, forecast)
    assert sse == pytest.approx(rmse**2 * actual.size, rel=1e-12)


def test_cancelled_context_aborts_metric() -> None:
    ctx = Context()
    ctx.cancel()
    with pytest.raises(CancelledError):
        mean_absolute_error([1.0, 2.0], [1.0, 2.0], ctx=ctx)


def test_compute_scores_pack() -> None:
    scores = compute_scores([10.0, 20.0, 30.0], [12.0, 18.0, 30.0])
    assert scores.mae == pytest.approx(4.0 / 3.0)
    assert scores.sse == pytest.approx(8.0)
    assert scores.rmse == pytest.approx(math.sqrt(8.0 / 3.0))
    assert scores.mape == pytest.approx((0.2 + 0.1 + 0.0) / 3.0 * 100.0)
    assert set(scores.as_dict()) == {"MAE", "SSE", "RMSE", "MAPE"}


def test_scores_lookup_by_error_type() -> None:
    scores = AccuracyScores(mae=1.0, sse=2.0, rmse=3.0, mape=4.0)
    assert scores.get(ErrorType.RMSE) == 3.0
    assert scores.get("MAPE") == 4.0


def test_error_type_parse_rejects_unknown() -> None:
    assert ErrorType.parse(" Sse ") is ErrorType.SSE
    with pytest.raises(ValidationError):
        ErrorType.parse("smape")
