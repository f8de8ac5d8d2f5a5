"""src/expsmooth/__init__.py"""

from .common.context import Context
from .common.errors import (
    CancelledError,
    DataTypeSelectionError,
    ForecastError,
    NotFittedError,
    ValidationError,
)
from .modeling import (
    DataType,
    ErrorType,
    FitOptions,
    HoltWintersModel,
    SimpleExponentialSmoothingModel,
    TrainRange,
    build_model,
)

__all__ = [
    "Context",
    "ForecastError",
    "ValidationError",
    "CancelledError",
    "NotFittedError",
    "DataTypeSelectionError",
    "DataType",
    "ErrorType",
    "FitOptions",
    "TrainRange",
    "HoltWintersModel",
    "SimpleExponentialSmoothingModel",
    "build_model",
]
