"""Loads YAML/JSON configuration files and global matrix settings."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


def load_config(path: str) -> Dict[str, Any]:
    """Load a YAML or JSON configuration file."""
    path_p = Path(path)
    with open(path_p, "r", encoding="utf-8") as f:
        if path_p.suffix in {".yaml", ".yml"}:
            return yaml.safe_load(f) or {}
        if path_p.suffix == ".json":
            return json.load(f)
        raise ValueError(f"Unsupported config format: {path_p.suffix or path_p.name}")


def load_matrix_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Return the package's matrix configuration."""
    if path is None:
        path = Path(__file__).resolve().parents[2] / "configs" / "matrix_config.yaml"
    if path.exists():
        return load_config(str(path))
    return {}


PACKAGE_LOGGER = "grid_matrix"

MATRIX_CONFIG: Dict[str, Any] = load_matrix_config()
STRICT_FILLS: bool = bool(MATRIX_CONFIG.get("strict_fills", False))
LOG_LEVEL: str = str(MATRIX_CONFIG.get("log_level", "WARNING")).upper()


def apply_config(config: Dict[str, Any]) -> None:
    """Replace the active settings with those found in ``config``."""
    set_strict_fills(bool(config.get("strict_fills", False)))
    set_log_level(str(config.get("log_level", "WARNING")))


def set_strict_fills(value: bool) -> None:
    """Enable or disable validate-then-write region and line fills."""
    global STRICT_FILLS
    STRICT_FILLS = value
    MATRIX_CONFIG["strict_fills"] = value


def set_log_level(value: str) -> None:
    """Override the level of every package logger."""
    global LOG_LEVEL
    LOG_LEVEL = value.upper()
    MATRIX_CONFIG["log_level"] = LOG_LEVEL
    logging.getLogger(PACKAGE_LOGGER).setLevel(LOG_LEVEL)


def print_runtime_config() -> None:
    """Print a summary of the current runtime configuration."""
    info = {
        "strict_fills": STRICT_FILLS,
        "log_level": LOG_LEVEL,
    }
    print("Runtime configuration:")
    for k, v in info.items():
        print(f"  {k}: {v}")
