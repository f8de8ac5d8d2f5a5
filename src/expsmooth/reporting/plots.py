"""src/expsmooth/reporting/plots.py"""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd


def _ensure_dir(p: Path) -> None:
    p.mkdir(parents=True, exist_ok=True)


def plot_fit_and_forecast(
    series: pd.Series,
    *,
    holdout_forecast: pd.Series,
    prediction: pd.Series,
    train_end: int,
    out_path: Path,
    title: str | None = None,
) -> Path:
    """
    One PNG with the observed series, the held-out forecast (starting right
    after train_end) and the future prediction (starting after the last
    observation). X axis is the 0-based position.
    """
    _ensure_dir(out_path.parent)

    n = len(series)
    x_obs = np.arange(n)
    x_hold = np.arange(train_end + 1, train_end + 1 + len(holdout_forecast))
    x_pred = np.arange(n, n + len(prediction))

    plt.figure()
    plt.plot(x_obs, series.to_numpy(dtype=float), label=str(series.name or "Observed"))
    plt.plot(x_hold, holdout_forecast.to_numpy(dtype=float), linestyle="--", label="Held-out forecast")
    plt.plot(x_pred, prediction.to_numpy(dtype=float), label="Prediction")
    plt.axvline(train_end, color="grey", linewidth=0.8)
    plt.title(title or "Exponential smoothing fit")
    plt.xlabel("Step")
    plt.ylabel("Value")
    plt.legend()
    plt.savefig(out_path, dpi=150, bbox_inches="tight")
    plt.close()
    return out_path
