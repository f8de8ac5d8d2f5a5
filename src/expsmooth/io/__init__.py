"""src/expsmooth/io/__init__.py"""
from .readers import read_csv, read_series_csv
from .writers import ensure_parent_dir, load_model, save_model, write_csv, write_forecast_artifact

__all__ = [
    "read_csv",
    "read_series_csv",
    "ensure_parent_dir",
    "write_csv",
    "write_forecast_artifact",
    "save_model",
    "load_model",
]
