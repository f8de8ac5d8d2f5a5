"""src/expsmooth/io/writers.py"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import joblib
import pandas as pd


def ensure_parent_dir(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def write_csv(df: pd.DataFrame, path: Path, *, index: bool = False) -> Path:
    """Write DataFrame to CSV (ensures parent folder exists)."""
    ensure_parent_dir(path)
    df.to_csv(path, index=index)
    return path


def write_forecast_artifact(prediction: pd.Series, path: Path, *, start_step: int) -> Path:
    """
    Forecast CSV with columns Step, Forecast.
    Step continues the 0-based positions of the observed series.
    """
    out = pd.DataFrame(
        {
            "Step": range(int(start_step), int(start_step) + len(prediction)),
            "Forecast": prediction.to_numpy(dtype=float),
        }
    )
    return write_csv(out, path, index=False)


def save_model(payload: dict[str, Any], path: Path) -> Path:
    ensure_parent_dir(path)
    joblib.dump(payload, path)
    return path


def load_model(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Missing model artifact:\n{path}")
    return joblib.load(path)
