"""src/expsmooth/io/readers.py"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pandas as pd


def read_csv(path: Path, *, dtype: dict[str, Any] | None = None) -> pd.DataFrame:
    if not path.exists():
        raise FileNotFoundError(f"Missing file:\n{path}")
    return pd.read_csv(path, dtype=dtype)


def read_series_csv(path: Path, *, value_col: str = "value", name: str | None = None) -> pd.Series:
    """
    Load one numeric column as a float series in file order.

    Supports common column variants when value_col is absent:
      - value / Value / y / Number
    Non-numeric cells become NaN (caught later by validation).
    """
    df = read_csv(Path(path))
    df.columns = [str(c).strip() for c in df.columns]

    col = value_col
    if col not in df.columns:
        for candidate in ["value", "Value", "y", "Number"]:
            if candidate in df.columns:
                col = candidate
                break
        else:
            raise KeyError(f"Series column {value_col!r} not found. Found columns: {list(df.columns)}")

    s = pd.to_numeric(df[col], errors="coerce").astype(float).reset_index(drop=True)
    s.name = name or col
    return s
