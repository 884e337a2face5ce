"""YAML-backed runtime settings for the calculator service and CLI."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml


@dataclass
class ServerSettings:
    host: str = "0.0.0.0"
    port: int = 8080
    cors_allow_origins: List[str] = field(default_factory=lambda: ["*"])
    stats_window_seconds: int = 300


@dataclass
class EngineSettings:
    max_expression_length: int = 1000
    normalize_unicode: bool = False


@dataclass
class LoggingSettings:
    level: str = "INFO"
    json_format: bool = True


@dataclass
class CalculatorConfig:
    version: str = "1.0.0"
    server: ServerSettings = field(default_factory=ServerSettings)
    engine: EngineSettings = field(default_factory=EngineSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)


class ConfigError(RuntimeError):
    """Raised when configuration files cannot be loaded or validated."""


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise ConfigError("Configuration file not found: {}".format(path))
    try:
        with path.open("r", encoding="utf-8") as handle:
            loaded = yaml.safe_load(handle) or {}
    except yaml.YAMLError as exc:
        raise ConfigError("Invalid YAML in {}: {}".format(path, exc)) from exc
    if not isinstance(loaded, dict):
        raise ConfigError("Configuration root must be a mapping in {}".format(path))
    return loaded


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError("'{}' must be a mapping".format(name))
    return section


def _require_bool(data: Dict[str, Any], key: str, default: bool, section: str) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError("'{}.{}' must be true or false, got {!r}".format(section, key, value))
    return value


def parse_log_level(value: str) -> str:
    """Normalizes a level name, raising ``ConfigError`` when logging does not know it."""
    level = str(value).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError("Unknown log level '{}'".format(level))
    return level


def _parse_server(data: Dict[str, Any]) -> ServerSettings:
    defaults = ServerSettings()
    origins = data.get("cors_allow_origins", defaults.cors_allow_origins)
    if isinstance(origins, str):
        origins = [origins]
    if not isinstance(origins, list):
        raise ConfigError("'server.cors_allow_origins' must be a list of origins")
    port = int(data.get("port", defaults.port))
    if not 0 < port < 65536:
        raise ConfigError("'server.port' must be between 1 and 65535, got {}".format(port))
    window = int(data.get("stats_window_seconds", defaults.stats_window_seconds))
    if window <= 0:
        raise ConfigError("'server.stats_window_seconds' must be positive, got {}".format(window))
    return ServerSettings(
        host=str(data.get("host", defaults.host)),
        port=port,
        cors_allow_origins=[str(origin) for origin in origins],
        stats_window_seconds=window,
    )


def _parse_engine(data: Dict[str, Any]) -> EngineSettings:
    max_length = int(data.get("max_expression_length", EngineSettings.max_expression_length))
    if max_length <= 0:
        raise ConfigError("'engine.max_expression_length' must be positive")
    return EngineSettings(
        max_expression_length=max_length,
        normalize_unicode=_require_bool(data, "normalize_unicode", False, "engine"),
    )


def _parse_logging(data: Dict[str, Any]) -> LoggingSettings:
    return LoggingSettings(
        level=parse_log_level(data.get("level", LoggingSettings.level)),
        json_format=_require_bool(data, "json_format", True, "logging"),
    )


def load_calculator_config(path: Optional[str] = None) -> CalculatorConfig:
    """Loads calculator settings from YAML.

    Args:
        path: YAML file to read. ``None`` returns the built-in defaults.

    Returns:
        Parsed configuration.

    Raises:
        ConfigError: If the file is missing, malformed, or holds invalid values.
    """
    if path is None:
        return CalculatorConfig()

    data = _load_yaml(Path(path))
    try:
        return CalculatorConfig(
            version=str(data.get("version", "1.0.0")),
            server=_parse_server(_section(data, "server")),
            engine=_parse_engine(_section(data, "engine")),
            logging=_parse_logging(_section(data, "logging")),
        )
    except (TypeError, ValueError) as exc:
        raise ConfigError("Invalid value in {}: {}".format(path, exc)) from exc
