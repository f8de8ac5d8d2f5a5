"""src/expsmooth/reporting/describe.py"""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from expsmooth.common.context import Context, ensure_context


@dataclass(frozen=True)
class DescribeOptions:
    percentiles: tuple[float, ...] = (0.25, 0.5, 0.75)


def describe_series(
    series: pd.Series,
    *,
    ctx: Context | None = None,
    options: DescribeOptions | None = None,
) -> pd.Series:
    """count / mean / std / min / percentiles / max of a float series."""
    ensure_context(ctx).check()
    opts = options or DescribeOptions()
    out = pd.to_numeric(series, errors="coerce").describe(percentiles=list(opts.percentiles))
    out.name = series.name
    return out
