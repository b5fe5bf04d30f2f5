"""Package logging: handlers live on the ``grid_matrix`` logger only.

Module loggers obtained through :func:`get_logger` stay at ``NOTSET`` and
inherit the package level, so :func:`config_loader.set_log_level` takes
effect on loggers created before the call.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from grid_matrix.src.utils import config_loader

_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def _has_file_handler(logger: logging.Logger, file_path: Path) -> bool:
    target = os.path.abspath(file_path)
    return any(
        isinstance(h, logging.FileHandler) and h.baseFilename == target
        for h in logger.handlers
    )


def configure_package_logger(file_path: str | None = None) -> logging.Logger:
    """Attach the stream handler (and ``file_path`` handler) to the package logger."""
    package_logger = logging.getLogger(config_loader.PACKAGE_LOGGER)
    formatter = logging.Formatter(_FORMAT)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
        package_logger.setLevel(config_loader.LOG_LEVEL)
    if file_path:
        path = Path(file_path)
        if not _has_file_handler(package_logger, path):
            path.parent.mkdir(parents=True, exist_ok=True)
            f_handler = logging.FileHandler(path, encoding="utf-8")
            f_handler.setFormatter(formatter)
            package_logger.addHandler(f_handler)
    return package_logger


def get_logger(name: str, file_path: str | None = None) -> logging.Logger:
    """Return the logger for ``name``, a module inside the package."""
    configure_package_logger(file_path)
    return logging.getLogger(name)
