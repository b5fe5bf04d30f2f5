"""Configuration, logging and conversion helpers."""

from .config_loader import load_config, load_matrix_config
from .logger import configure_package_logger, get_logger

__all__ = ["load_config", "load_matrix_config", "configure_package_logger", "get_logger"]
