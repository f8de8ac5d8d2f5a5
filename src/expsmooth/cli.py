"""src/expsmooth/cli.py"""

from __future__ import annotations

import typer
from rich import print

from expsmooth.common.config import load_config
from expsmooth.common.logging import setup_logging
from expsmooth.modeling.base import DataType
from expsmooth.pipelines.run_forecast import fit_from_config, run_forecast

app = typer.Typer(help="Exponential-smoothing (Holt-Winters) forecasting CLI")

DEFAULT_CONFIG = "configs/config.yaml"

_DATA_TYPES = {"train": DataType.TRAIN, "test": DataType.TEST, "main": DataType.MAIN}


@app.command()
def init(config_path: str = typer.Option(DEFAULT_CONFIG, help="Path to YAML config")) -> None:
    """Create expected directories from config (artifacts/, etc.)."""
    cfg = load_config(config_path)
    setup_logging(cfg)

    created = cfg.ensure_directories()
    print("[bold green]Init complete.[/bold green]")
    if created:
        print("Created directories:")
        for p in created:
            print(f"  - {p}")
    else:
        print("No directories needed (already exist).")


@app.command()
def forecast(config_path: str = typer.Option(DEFAULT_CONFIG, help="Path to YAML config")) -> None:
    """Fit, score the held-out window, predict and export artifacts."""
    cfg = load_config(config_path)
    setup_logging(cfg)
    cfg.ensure_directories()
    artifacts = run_forecast(cfg)
    print(f"Forecast written to {artifacts.forecast_csv}")
    print("[bold green]Forecasting complete.[/bold green]")


@app.command()
def summary(config_path: str = typer.Option(DEFAULT_CONFIG, help="Path to YAML config")) -> None:
    """Fit the configured model and print its summary tables."""
    cfg = load_config(config_path)
    setup_logging(cfg)
    model = fit_from_config(cfg)
    typer.echo(model.summary())


@app.command()
def describe(
    config_path: str = typer.Option(DEFAULT_CONFIG, help="Path to YAML config"),
    data: str = typer.Option("main", help="Which series to describe: train | test | main"),
) -> None:
    """Descriptive statistics of the train, test or full series."""
    key = data.strip().lower()
    if key not in _DATA_TYPES:
        raise typer.BadParameter(f"expected one of {sorted(_DATA_TYPES)}", param_hint="--data")
    cfg = load_config(config_path)
    setup_logging(cfg)
    model = fit_from_config(cfg)
    typer.echo(model.describe(_DATA_TYPES[key]).to_string())


if __name__ == "__main__":
    app()
