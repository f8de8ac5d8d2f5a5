"""src/expsmooth/pipelines/run_forecast.py"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pandas as pd

from expsmooth.common.config import AppConfig
from expsmooth.common.context import Context, ensure_context
from expsmooth.io.readers import read_series_csv
from expsmooth.io.writers import save_model, write_csv, write_forecast_artifact
from expsmooth.modeling.base import FitOptions, ForecastModel, TrainRange
from expsmooth.modeling.evaluation import ErrorType
from expsmooth.modeling.registry import build_model
from expsmooth.reporting.plots import plot_fit_and_forecast
from expsmooth.reporting.tables import holdout_table
from expsmooth.validation.checks import check_series

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunArtifacts:
    forecast_csv: Path
    holdout_csv: Path
    metrics_csv: Path
    model_path: Path | None
    figure_path: Path | None


def _optional_int(x: Any) -> int | None:
    return None if x is None or x == "" else int(x)


def fit_options_from_config(cfg: AppConfig) -> FitOptions:
    m = cfg.model
    return FitOptions(
        alpha=float(m.get("alpha", 0.5)),
        beta=float(m.get("beta", 0.0)),
        gamma=float(m.get("gamma", 0.0)),
        period=int(m.get("period", 1)),
        error_metric=ErrorType.parse(m.get("error_metric", "mae")),
        train_range=TrainRange(start=_optional_int(m.get("train_start")), end=_optional_int(m.get("train_end"))),
    )


def load_series(cfg: AppConfig) -> pd.Series:
    series_csv = cfg.paths.get("series_csv")
    if series_csv is None:
        raise ValueError("Missing paths.series_csv in config")
    s = read_series_csv(
        series_csv,
        value_col=str(cfg.series.get("value_col", "value")),
        name=cfg.series.get("name"),
    )
    check_series(s, min_len=2).raise_if_failed()
    return s


def fit_from_config(cfg: AppConfig, *, ctx: Context | None = None) -> ForecastModel:
    """Read the configured series and fit the configured model kind on it."""
    series = load_series(cfg)
    kind = str(cfg.model.get("kind", "holt_winters"))
    options = fit_options_from_config(cfg)
    logger.info("Fitting %s on %s (%d observations)", kind, series.name, len(series))
    try:
        return build_model(kind, series).fit(options, ctx=ctx)
    except Exception:
        logger.exception("Fit failed for model kind %s", kind)
        raise


def run_forecast(cfg: AppConfig, *, ctx: Context | None = None) -> RunArtifacts:
    """
    Full run:
      1) fit the configured model on the configured series
      2) score the held-out window (done inside fit)
      3) predict `forecast.horizon` steps past the last observation
      4) export forecast / held-out / metrics CSVs (+ optional model and figure)
    """
    ctx = ensure_context(ctx)
    horizon = int(cfg.forecast.get("horizon", 12))

    model = fit_from_config(cfg, ctx=ctx)
    state = model.state
    prediction = model.predict(horizon, ctx=ctx)

    forecasts_dir = cfg.paths.get("forecasts_dir", cfg.resolve("artifacts/forecasts"))
    metrics_dir = cfg.paths.get("metrics_dir", cfg.resolve("artifacts/metrics"))

    n_obs = len(model.data)
    forecast_csv = write_forecast_artifact(prediction, forecasts_dir / "forecast.csv", start_step=n_obs)
    holdout_csv = write_csv(holdout_table(state.test_series, state.forecast_series), forecasts_dir / "holdout.csv")

    kind = str(cfg.model.get("kind", "holt_winters"))
    metrics_row = {"Model": kind, "Train_Points": len(state.train_series), "Test_Points": len(state.test_series)}
    metrics_row.update(state.scores.as_dict())
    metrics_csv = write_csv(pd.DataFrame([metrics_row]), metrics_dir / "metrics.csv")

    model_path = None
    if bool(cfg.forecast.get("save_model", False)):
        models_dir = cfg.paths.get("models_dir", cfg.resolve("artifacts/models"))
        model_path = save_model({"model_name": kind, "state": state}, models_dir / f"{kind}.joblib")

    figure_path = None
    if bool(cfg.forecast.get("export_figures", False)):
        figures_dir = cfg.paths.get("figures_dir", cfg.resolve("artifacts/figures"))
        train_end = n_obs - len(state.test_series) - 1
        try:
            figure_path = plot_fit_and_forecast(
                model.data,
                holdout_forecast=state.forecast_series,
                prediction=prediction,
                train_end=train_end,
                out_path=figures_dir / f"{kind}_forecast.png",
                title=f"{model.data.name} | {kind}",
            )
        except Exception:
            logger.exception("Failed plotting forecast figure")

    logger.info("Forecasting complete.")
    logger.info("Saved forecast: %s", forecast_csv)
    logger.info("Saved held-out comparison: %s", holdout_csv)
    logger.info("Saved metrics: %s", metrics_csv)
    if model_path is not None:
        logger.info("Saved model to: %s", model_path)

    return RunArtifacts(
        forecast_csv=forecast_csv,
        holdout_csv=holdout_csv,
        metrics_csv=metrics_csv,
        model_path=model_path,
        figure_path=figure_path,
    )
