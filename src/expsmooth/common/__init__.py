"""src/expsmooth/common/__init__.py"""

from .config import AppConfig, load_config
from .context import Context, ensure_context
from .errors import (
    CancelledError,
    DataTypeSelectionError,
    EmptyRangeError,
    ForecastError,
    HeldOutWindowError,
    HorizonError,
    LengthMismatchError,
    NotFittedError,
    PeriodError,
    RangeError,
    SmoothingParameterError,
    TrainingWindowError,
    ValidationError,
)
from .logging import setup_logging

__all__ = [
    "AppConfig",
    "load_config",
    "setup_logging",
    "Context",
    "ensure_context",
    # errors
    "ForecastError",
    "ValidationError",
    "RangeError",
    "EmptyRangeError",
    "SmoothingParameterError",
    "PeriodError",
    "HeldOutWindowError",
    "TrainingWindowError",
    "HorizonError",
    "LengthMismatchError",
    "CancelledError",
    "NotFittedError",
    "DataTypeSelectionError",
]
