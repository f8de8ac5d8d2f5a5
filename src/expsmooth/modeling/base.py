"""src/expsmooth/modeling/base.py"""

from __future__ import annotations

import numbers
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol

import pandas as pd

from expsmooth.common.context import Context
from expsmooth.common.errors import (
    DataTypeSelectionError,
    EmptyRangeError,
    HeldOutWindowError,
    HorizonError,
    NotFittedError,
    PeriodError,
    RangeError,
    SmoothingParameterError,
)
from expsmooth.modeling.evaluation import AccuracyScores, ErrorType
from expsmooth.reporting.describe import DescribeOptions, describe_series

MIN_TEST_POINTS = 3


class DataType(Enum):
    """Which stored series describe() should report on."""
    TRAIN = 0
    TEST = 1
    MAIN = 2


@dataclass(frozen=True)
class TrainRange:
    """
    Positional training range with an INCLUSIVE end.

    None means "from the first" / "to the last" observation. Negative
    values count from the end, as in Python indexing.
    """
    start: int | None = None
    end: int | None = None

    def limits(self, length: int) -> tuple[int, int]:
        if length <= 0:
            raise RangeError("series is empty")

        def _norm(v: int | None, default: int, label: str) -> int:
            if v is None:
                return default
            i = int(v)
            if i < 0:
                i += length
            if i < 0 or i >= length:
                raise RangeError(f"range {label} {v} out of bounds for series of length {length}")
            return i

        start = _norm(self.start, 0, "start")
        end = _norm(self.end, length - 1, "end")
        if start > end:
            raise RangeError(f"range start {start} is after end {end}")
        return start, end


@dataclass(frozen=True)
class FitOptions:
    """Parameters for fit(), shared by every model variant."""
    alpha: float
    beta: float = 0.0
    gamma: float = 0.0
    period: int = 1
    error_metric: ErrorType = ErrorType.MAE
    train_range: TrainRange = field(default_factory=TrainRange)


class ForecastModel(Protocol):
    """Minimal interface every forecasting variant implements."""
    data: pd.Series

    @property
    def is_fitted(self) -> bool: ...

    @property
    def state(self) -> Any: ...

    def fit(self, options: FitOptions, *, ctx: Context | None = None) -> "ForecastModel": ...

    def predict(self, h: int, *, ctx: Context | None = None) -> pd.Series: ...

    def summary(self) -> str: ...

    def describe(
        self,
        data_type: DataType,
        *,
        ctx: Context | None = None,
        options: DescribeOptions | None = None,
    ) -> pd.Series: ...


class FittedState:
    """
    Read accessors shared by the frozen state dataclasses.

    Subclasses store the slices as tuples; every *_series access builds a
    fresh Series, so callers cannot edit what summary()/describe() report.
    """
    train_values: tuple[float, ...]
    test_values: tuple[float, ...]
    forecast_values: tuple[float, ...]
    scores: AccuracyScores
    error_metric: ErrorType

    @property
    def train_series(self) -> pd.Series:
        return pd.Series(self.train_values, name="Train Data", dtype=float)

    @property
    def test_series(self) -> pd.Series:
        return pd.Series(self.test_values, name="Test Data", dtype=float)

    @property
    def forecast_series(self) -> pd.Series:
        return pd.Series(self.forecast_values, name="Forecast Data", dtype=float)

    @property
    def mae(self) -> float:
        return self.scores.mae

    @property
    def sse(self) -> float:
        return self.scores.sse

    @property
    def rmse(self) -> float:
        return self.scores.rmse

    @property
    def mape(self) -> float:
        return self.scores.mape

    @property
    def score(self) -> float:
        """The metric selected by FitOptions.error_metric."""
        return self.scores.get(self.error_metric)


class SmoothingModel:
    """Owned input series plus the last committed state; subclasses add fit/predict/summary."""

    def __init__(self, series, *, name: str | None = None) -> None:
        self.data = as_float_series(series, name=name)
        if self.data.name is None:
            self.data.name = "Complete Data"
        self._state: Any = None

    @property
    def is_fitted(self) -> bool:
        return self._state is not None

    @property
    def state(self) -> Any:
        if self._state is None:
            raise NotFittedError(f"{type(self).__name__} has not been fitted; call fit() first")
        return self._state

    def describe(
        self,
        data_type: DataType,
        *,
        ctx: Context | None = None,
        options: DescribeOptions | None = None,
    ) -> pd.Series:
        if data_type is DataType.MAIN:
            data = self.data
        elif data_type is DataType.TRAIN:
            data = self.state.train_series
        elif data_type is DataType.TEST:
            data = self.state.test_series
        else:
            raise DataTypeSelectionError(f"unrecognised data type selection specified: {data_type!r}")
        return describe_series(data, ctx=ctx, options=options)


# ---------------- shared fit helpers ----------------
def as_float_series(data, name: str | None = None) -> pd.Series:
    """Owned float copy of the input, positionally indexed."""
    s = pd.Series(data, dtype=float, copy=True)
    s = s.reset_index(drop=True)
    if name is not None:
        s.name = name
    return s


def check_smoothing_parameters(**params: float) -> None:
    for label, value in params.items():
        v = float(value)
        if not (0.0 <= v <= 1.0):
            raise SmoothingParameterError(f"{label} must be between [0,1], got {value}")


def check_period(period: int) -> int:
    p = int(period)
    if p < 1:
        raise PeriodError(f"period must be >= 1, got {period}")
    return p


def check_horizon(h: int) -> int:
    if isinstance(h, bool) or not isinstance(h, numbers.Integral):
        raise HorizonError(f"value of h must be a whole number of steps, got {h!r}")
    if h <= 0:
        raise HorizonError(f"value of h must be greater than 0, got {h}")
    return int(h)


def resolve_range(series: pd.Series, train_range: TrainRange) -> tuple[int, int]:
    start, end = train_range.limits(len(series))
    if end - start < 1:
        raise EmptyRangeError("no values in series range")
    return start, end


def split_train_test(
    series: pd.Series,
    start: int,
    end: int,
    *,
    min_test: int = MIN_TEST_POINTS,
) -> tuple[pd.Series, pd.Series]:
    """Owned copies of train = [start, end] and test = everything after end."""
    values = series.to_numpy(dtype=float)
    test_values = values[end + 1 :]
    if test_values.size < min_test:
        raise HeldOutWindowError(
            f"there should be a minimum of {min_test} data left as testing data, got {test_values.size}"
        )

    train = pd.Series(values[start : end + 1].copy(), name="Train Data", dtype=float)
    test = pd.Series(test_values.copy(), name="Test Data", dtype=float)
    return train, test
