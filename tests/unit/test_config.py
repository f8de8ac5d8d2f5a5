"""tests/unit/test_config.py"""

from __future__ import annotations

from pathlib import Path

import pytest

from expsmooth.common.config import load_config
from expsmooth.modeling.base import TrainRange
from expsmooth.modeling.evaluation import ErrorType
from expsmooth.modeling.holt_winters import HoltWintersModel
from expsmooth.modeling.registry import build_model
from expsmooth.modeling.ses import SimpleExponentialSmoothingModel
from expsmooth.pipelines.run_forecast import fit_options_from_config


def test_load_config_resolves_paths_against_project_root(project_config: Path) -> None:
    cfg = load_config(project_config)
    root = project_config.parent.parent.resolve()
    assert cfg.project_root == root
    assert cfg.paths["series_csv"] == root / "data" / "raw" / "example_series.csv"


def test_load_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "configs" / "nope.yaml")


def test_fit_options_from_config(project_config: Path) -> None:
    opts = fit_options_from_config(load_config(project_config))
    assert (opts.alpha, opts.beta, opts.gamma, opts.period) == (0.45, 0.03, 0.73, 12)
    assert opts.error_metric is ErrorType.RMSE
    assert opts.train_range == TrainRange(start=None, end=71)


def test_ensure_directories_creates_outputs(project_config: Path) -> None:
    cfg = load_config(project_config)
    cfg.ensure_directories()
    assert (cfg.project_root / "artifacts" / "forecasts").is_dir()
    assert (cfg.project_root / "data" / "raw").is_dir()


def test_model_kind_from_config(tmp_path: Path, make_project) -> None:
    cfg = load_config(make_project(tmp_path, model={"kind": "ses", "alpha": 0.2, "train_end": 71}))
    assert cfg.model["kind"] == "ses"
    assert fit_options_from_config(cfg).period == 1


def test_build_model_registry() -> None:
    assert isinstance(build_model("holt_winters", [1.0, 2.0]), HoltWintersModel)
    assert isinstance(build_model(" SES ", [1.0, 2.0]), SimpleExponentialSmoothingModel)
    with pytest.raises(ValueError):
        build_model("arima", [1.0, 2.0])
