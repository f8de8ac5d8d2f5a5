"""src/expsmooth/validation/__init__.py"""

from __future__ import annotations

from .checks import CheckResult, check_finite, check_min_length, check_not_empty, check_series

__all__ = [
    "CheckResult",
    "check_not_empty",
    "check_finite",
    "check_min_length",
    "check_series",
]
