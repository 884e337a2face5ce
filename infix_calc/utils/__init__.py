"""Utility helpers for infix-calc."""

from .config_loader import CalculatorConfig, ConfigError, load_calculator_config
from .logger import configure_logging, get_logger

__all__ = [
    "CalculatorConfig",
    "ConfigError",
    "load_calculator_config",
    "configure_logging",
    "get_logger",
]
