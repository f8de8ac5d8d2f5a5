"""src/expsmooth/modeling/registry.py"""

from __future__ import annotations

from typing import Callable

from expsmooth.modeling.base import ForecastModel
from expsmooth.modeling.holt_winters import HoltWintersModel
from expsmooth.modeling.ses import SimpleExponentialSmoothingModel

MODEL_KINDS: dict[str, Callable[..., ForecastModel]] = {
    "holt_winters": HoltWintersModel,
    "ses": SimpleExponentialSmoothingModel,
}


def build_model(kind: str, series, *, name: str | None = None) -> ForecastModel:
    """Instantiate an unfitted model of the given kind bound to `series`."""
    key = str(kind).strip().lower()
    if key not in MODEL_KINDS:
        raise ValueError(f"Unknown model kind {kind!r}; expected one of {sorted(MODEL_KINDS)}")
    return MODEL_KINDS[key](series, name=name)
