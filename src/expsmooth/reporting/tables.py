"""src/expsmooth/reporting/tables.py"""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence

import numpy as np
import pandas as pd


def one_row_table(values: Mapping[str, float]) -> pd.DataFrame:
    """Scalars side by side, e.g. {"Alpha": 0.45, "Beta": 0.03}."""
    return pd.DataFrame({k: [float(v)] for k, v in values.items()})


def seasonal_table(initial: Sequence[float], final: Sequence[float]) -> pd.DataFrame:
    """
    Initial vs. fitted seasonal offsets, one row per slot.

    Both sequences hold one value per seasonal slot (same length).
    """
    return pd.DataFrame(
        {
            "Slot": np.arange(len(final), dtype=int),
            "Initial Seasonal Components": np.asarray(initial, dtype=float),
            "Seasonal Components": np.asarray(final, dtype=float),
        }
    )


def scores_table(scores: Mapping[str, float]) -> pd.DataFrame:
    return one_row_table(scores)


def holdout_table(actual: pd.Series, forecast: pd.Series) -> pd.DataFrame:
    """
    Held-out actuals next to the forecast made for them.

    Output columns:
        Step, Actual, Forecast, Error
    """
    a = np.asarray(actual, dtype=float)
    f = np.asarray(forecast, dtype=float)
    return pd.DataFrame(
        {
            "Step": np.arange(1, a.size + 1, dtype=int),
            "Actual": a,
            "Forecast": f,
            "Error": a - f,
        }
    )


def render_sections(sections: Iterable[tuple[str, pd.DataFrame]]) -> str:
    """Plain-text report: a title line then the table, per section."""
    blocks: list[str] = []
    for title, df in sections:
        blocks.append(f"{title}\n{df.to_string(index=False)}")
    return "\n\n".join(blocks)
