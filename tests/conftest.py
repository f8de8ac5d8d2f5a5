"""tests/conftest.py"""

from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest
import yaml

# 72 training points + 12 held out; period 12
SEASONAL_84 = [
    30, 21, 29, 31, 40, 48, 53, 47, 37, 39, 31, 29, 17, 9, 20, 24, 27, 35, 41, 38,
    27, 31, 27, 26, 21, 13, 21, 18, 33, 35, 40, 36, 22, 24, 21, 20, 17, 14, 17, 19,
    26, 29, 40, 31, 20, 24, 18, 26, 17, 9, 17, 21, 28, 32, 46, 33, 23, 28, 22, 27,
    18, 8, 17, 21, 31, 34, 44, 38, 31, 30, 26, 32, 45, 34, 30, 27, 25, 22, 28, 33,
    42, 32, 40, 52,
]


@pytest.fixture
def seasonal_series() -> pd.Series:
    return pd.Series(SEASONAL_84, name="simple data", dtype=float)


@pytest.fixture
def linear_series() -> pd.Series:
    return pd.Series([1, 2, 3, 4, 5, 6, 7, 8, 9, 10], name="simple data", dtype=float)


def write_project(root: Path, *, model: dict | None = None, forecast: dict | None = None) -> Path:
    """
    Lay out a minimal project under `root`:
        configs/config.yaml
        data/raw/example_series.csv
    Returns the config path.
    """
    (root / "configs").mkdir(parents=True, exist_ok=True)
    (root / "data" / "raw").mkdir(parents=True, exist_ok=True)

    pd.DataFrame({"step": range(len(SEASONAL_84)), "value": SEASONAL_84}).to_csv(
        root / "data" / "raw" / "example_series.csv", index=False
    )

    raw = {
        "paths": {
            "series_csv": "data/raw/example_series.csv",
            "forecasts_dir": "artifacts/forecasts",
            "metrics_dir": "artifacts/metrics",
            "figures_dir": "artifacts/figures",
            "models_dir": "artifacts/models",
        },
        "logging": {"level": "WARNING"},
        "series": {"value_col": "value", "name": "simple data"},
        "model": model
        or {
            "kind": "holt_winters",
            "alpha": 0.45,
            "beta": 0.03,
            "gamma": 0.73,
            "period": 12,
            "error_metric": "rmse",
            "train_end": 71,
        },
        "forecast": forecast or {"horizon": 24, "export_figures": False, "save_model": True},
    }
    cfg_path = root / "configs" / "config.yaml"
    with cfg_path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(raw, f)
    return cfg_path


@pytest.fixture
def project_config(tmp_path: Path) -> Path:
    return write_project(tmp_path)


@pytest.fixture
def make_project():
    return write_project
