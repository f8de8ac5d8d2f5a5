"""src/expsmooth/modeling/__init__.py"""

from .base import MIN_TEST_POINTS, DataType, FitOptions, FittedState, ForecastModel, SmoothingModel, TrainRange
from .evaluation import (
    AccuracyScores,
    ErrorOptions,
    ErrorType,
    compute_scores,
    mean_absolute_error,
    mean_absolute_percentage_error,
    root_mean_squared_error,
    sum_of_squared_errors,
)
from .holt_winters import HoltWintersModel, HoltWintersState
from .initial_state import initial_seasonal_components, initial_trend
from .registry import MODEL_KINDS, build_model
from .ses import SesState, SimpleExponentialSmoothingModel

__all__ = [
    "DataType",
    "FitOptions",
    "ForecastModel",
    "FittedState",
    "SmoothingModel",
    "MIN_TEST_POINTS",
    "TrainRange",
    "AccuracyScores",
    "ErrorOptions",
    "ErrorType",
    "compute_scores",
    "mean_absolute_error",
    "sum_of_squared_errors",
    "root_mean_squared_error",
    "mean_absolute_percentage_error",
    "initial_seasonal_components",
    "initial_trend",
    "HoltWintersModel",
    "HoltWintersState",
    "SimpleExponentialSmoothingModel",
    "SesState",
    "MODEL_KINDS",
    "build_model",
]
