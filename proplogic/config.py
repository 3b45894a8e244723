"""
Configuration for the truthtable front end.

Values are resolved in increasing order of precedence:
1. ``TruthTableConfig`` defaults
2. a YAML file (``--config`` or ``TRUTHTABLE_CONFIG``)
3. ``TRUTHTABLE_LOG_LEVEL``
4. command-line flags (applied by the CLI)

Example YAML::

    row_separator: ";"
    true_glyph: "1"
    false_glyph: "0"
    minterm: true
    log_level: INFO
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .errors import ConfigError

ENV_CONFIG_PATH = "TRUTHTABLE_CONFIG"
ENV_LOG_LEVEL = "TRUTHTABLE_LOG_LEVEL"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class TruthTableConfig:
    """Presentation and parsing options."""

    row_separator: str = ","
    true_glyph: str = "T"
    false_glyph: str = "F"
    minterm: bool = False
    log_level: str = "WARNING"

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)


def _validate(values: Dict[str, Any], source: str) -> Dict[str, Any]:
    known = {f.name: f for f in fields(TruthTableConfig)}
    for key, value in values.items():
        if key not in known:
            raise ConfigError(f"Unknown configuration key {key!r} in {source}")
        expected = bool if key == "minterm" else str
        if not isinstance(value, expected):
            raise ConfigError(f"Configuration key {key!r} in {source} must be of type {expected.__name__}")

    if "row_separator" in values and not values["row_separator"]:
        raise ConfigError(f"row_separator must not be empty in {source}")
    if "log_level" in values:
        level = values["log_level"].upper()
        if level not in _LOG_LEVELS:
            raise ConfigError(f"Invalid log_level {values['log_level']!r} in {source}")
        values = {**values, "log_level": level}
    return values


def load_config(path: Path, base: Optional[TruthTableConfig] = None) -> TruthTableConfig:
    """
    Load configuration overrides from a YAML file.

    Args:
        path: YAML file containing a mapping of TruthTableConfig fields.
        base: Config to apply the overrides to (defaults if omitted).

    Raises:
        ConfigError: If the file is missing, unreadable, unparseable or has bad keys/values.
    """
    base = base or TruthTableConfig()
    if not path.exists():
        raise ConfigError(f"Configuration file not found at: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Error parsing YAML file: {path}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read configuration file: {path}") from e

    if data is None:
        return base
    if not isinstance(data, dict):
        raise ConfigError(f"Malformed configuration file: expected a mapping in {path}")

    return replace(base, **_validate(data, str(path)))


def resolve_config(
    path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> TruthTableConfig:
    """Resolve defaults, the YAML file and environment overrides into one config."""
    environ = os.environ if environ is None else environ
    config = TruthTableConfig()

    if path is None and environ.get(ENV_CONFIG_PATH):
        path = Path(environ[ENV_CONFIG_PATH])
    if path is not None:
        config = load_config(path, config)

    level = environ.get(ENV_LOG_LEVEL)
    if level:
        config = replace(config, **_validate({"log_level": level}, ENV_LOG_LEVEL))

    return config
