"""src/expsmooth/pipelines/__init__.py"""

from .run_forecast import RunArtifacts, fit_from_config, fit_options_from_config, load_series, run_forecast

__all__ = [
    "RunArtifacts",
    "fit_from_config",
    "fit_options_from_config",
    "load_series",
    "run_forecast",
]
