"""src/expsmooth/common/logging.py"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from expsmooth.common.config import AppConfig

PACKAGE_LOGGER = "expsmooth"
DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# fit/predict loops run at DEBUG; keep plotting backends out of that output
_NOISY_LOGGERS = ("matplotlib", "PIL")


def setup_logging(cfg: AppConfig) -> logging.Logger:
    """
    Configure root handlers from the `logging:` config block and return the
    `expsmooth` package logger.

    Keys: level (default INFO), file (optional, relative to the project root),
    format, max_bytes, backup_count.
    """
    level_str = str(cfg.logging.get("level", "INFO")).upper()
    level = getattr(logging, level_str, logging.INFO)
    fmt = str(cfg.logging.get("format", DEFAULT_FORMAT))

    handlers: list[logging.Handler] = []

    console = logging.StreamHandler()
    console.setLevel(level)
    handlers.append(console)

    log_file = cfg.logging.get("file")
    if log_file:
        lf = (cfg.project_root / Path(log_file)).resolve()
        lf.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            lf,
            maxBytes=int(cfg.logging.get("max_bytes", 2_000_000)),
            backupCount=int(cfg.logging.get("backup_count", 3)),
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        handlers.append(file_handler)

    logging.basicConfig(level=level, format=fmt, handlers=handlers, force=True)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    package_logger.debug("Logging configured (level=%s, file=%s)", level_str, log_file or "-")
    return package_logger
