"""src/expsmooth/common/errors.py"""

from __future__ import annotations


class ForecastError(Exception):
    """Base class for every recoverable error raised by expsmooth."""


class ValidationError(ForecastError, ValueError):
    """Bad input detected before any computation. Fix the arguments and retry."""


class RangeError(ValidationError):
    """Training range cannot be resolved against the series."""


class EmptyRangeError(ValidationError):
    """Training range holds fewer than two observations."""


class SmoothingParameterError(ValidationError):
    """alpha, beta or gamma outside [0, 1]."""


class PeriodError(ValidationError):
    """Seasonal period below 1."""


class HeldOutWindowError(ValidationError):
    """Held-out window too short to score a forecast."""


class TrainingWindowError(ValidationError):
    """Training slice too short to estimate the initial state."""


class HorizonError(ValidationError):
    """Forecast horizon must be a positive number of steps."""


class LengthMismatchError(ValidationError):
    """Actual and forecast sequences differ in length."""


class CancelledError(ForecastError):
    """The caller's context was cancelled (or its deadline passed)."""


class NotFittedError(ForecastError, RuntimeError):
    """A read operation was attempted on a model that was never fitted."""


class DataTypeSelectionError(RuntimeError):
    """Unknown data selector passed to describe(). Programmer error, not a ForecastError."""
