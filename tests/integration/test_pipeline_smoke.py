"""tests/integration/test_pipeline_smoke.py"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pandas as pd
import pytest
from typer.testing import CliRunner

from expsmooth.cli import app
from expsmooth.common.config import load_config
from expsmooth.common.context import Context
from expsmooth.common.errors import CancelledError, HeldOutWindowError
from expsmooth.io.writers import load_model
from expsmooth.pipelines.run_forecast import run_forecast


def test_pipeline_smoke_fit_predict_export(project_config: Path) -> None:
    cfg = load_config(project_config)
    artifacts = run_forecast(cfg)

    assert artifacts.forecast_csv.exists(), f"missing {artifacts.forecast_csv}"
    assert artifacts.holdout_csv.exists(), f"missing {artifacts.holdout_csv}"
    assert artifacts.metrics_csv.exists(), f"missing {artifacts.metrics_csv}"
    assert artifacts.figure_path is None

    f = pd.read_csv(artifacts.forecast_csv)
    assert len(f) == 24
    assert f["Step"].tolist() == list(range(84, 108))
    assert np.isfinite(f["Forecast"]).all()

    h = pd.read_csv(artifacts.holdout_csv)
    assert len(h) == 12
    assert {"Step", "Actual", "Forecast", "Error"}.issubset(h.columns)

    m = pd.read_csv(artifacts.metrics_csv)
    assert m.loc[0, "Model"] == "holt_winters"
    assert m.loc[0, "Train_Points"] == 72
    for col in ("MAE", "SSE", "RMSE", "MAPE"):
        assert m.loc[0, col] >= 0.0

    payload = load_model(artifacts.model_path)
    assert payload["model_name"] == "holt_winters"
    assert len(payload["state"].seasonal_components) == 12
    assert payload["state"].rmse == pytest.approx(m.loc[0, "RMSE"])


def test_pipeline_exports_figure(tmp_path: Path, make_project) -> None:
    cfg = load_config(make_project(tmp_path, forecast={"horizon": 6, "export_figures": True, "save_model": False}))
    artifacts = run_forecast(cfg)

    assert artifacts.model_path is None
    assert artifacts.figure_path is not None and artifacts.figure_path.exists()


def test_pipeline_runs_ses(tmp_path: Path, make_project) -> None:
    cfg = load_config(make_project(tmp_path, model={"kind": "ses", "alpha": 0.3, "train_end": 71}))
    artifacts = run_forecast(cfg)

    f = pd.read_csv(artifacts.forecast_csv)
    assert f["Forecast"].nunique() == 1


def test_pipeline_propagates_validation_errors(tmp_path: Path, make_project) -> None:
    cfg = load_config(make_project(tmp_path, model={"kind": "holt_winters", "alpha": 0.5, "period": 12, "train_end": 82}))
    with pytest.raises(HeldOutWindowError):
        run_forecast(cfg)
    assert not (tmp_path / "artifacts" / "forecasts" / "forecast.csv").exists()


def test_pipeline_honours_cancellation(project_config: Path) -> None:
    ctx = Context()
    ctx.cancel()
    with pytest.raises(CancelledError):
        run_forecast(load_config(project_config), ctx=ctx)


def test_cli_summary_and_describe(project_config: Path) -> None:
    runner = CliRunner()

    res = runner.invoke(app, ["summary", "--config-path", str(project_config)])
    assert res.exit_code == 0, res.output
    assert "Seasonal Components" in res.output
    assert "RMSE" in res.output

    res = runner.invoke(app, ["describe", "--config-path", str(project_config), "--data", "train"])
    assert res.exit_code == 0, res.output
    assert "count" in res.output
    assert "72" in res.output

    res = runner.invoke(app, ["describe", "--config-path", str(project_config), "--data", "bogus"])
    assert res.exit_code != 0


def test_cli_forecast(project_config: Path) -> None:
    res = CliRunner().invoke(app, ["forecast", "--config-path", str(project_config)])
    assert res.exit_code == 0, res.output
    assert (project_config.parent.parent / "artifacts" / "forecasts" / "forecast.csv").exists()
