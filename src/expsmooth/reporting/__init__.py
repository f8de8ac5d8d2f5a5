"""src/expsmooth/reporting/__init__.py"""

from __future__ import annotations

from .describe import DescribeOptions, describe_series
from .plots import plot_fit_and_forecast
from .tables import holdout_table, one_row_table, render_sections, scores_table, seasonal_table

__all__ = [
    "DescribeOptions",
    "describe_series",
    "plot_fit_and_forecast",
    "one_row_table",
    "seasonal_table",
    "scores_table",
    "holdout_table",
    "render_sections",
]
