"""Configuration for the mint command-line tool.

Settings are assembled from, in decreasing precedence: CLI flags,
environment variables, an optional YAML file, and defaults.

YAML file example:

    when: always
    escape_input: false
    strip_ansi: false
    newline: true
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from mint.parser import When

log = logging.getLogger(__name__)

ENV_WHEN = "MINT_WHEN"
ENV_CONFIG = "MINT_CONFIG"

CONFIG_KEYS = {
    "when": str,
    "escape_input": bool,
    "strip_ansi": bool,
    "newline": bool,
}

WHEN_VALUES = [w.value for w in When]


class ConfigError(Exception):
    """Raised when a configuration file or value is invalid."""

    pass


@dataclass
class MintConfig:
    """Full configuration assembled from CLI flags, env, and defaults."""

    when: When = When.AUTO
    escape_input: bool = False
    strip_ansi: bool = False
    newline: bool = True

    # File the YAML settings came from, if any
    source: Optional[Path] = None

    def __post_init__(self) -> None:
        if not isinstance(self.when, When):
            self.when = parse_when(self.when)
        if self.source is not None:
            self.source = Path(self.source)


def parse_when(value: str, source: str = "<unknown>") -> When:
    """Convert ``auto``, ``always`` or ``never`` to a ``When``."""
    try:
        return When(str(value).strip().lower())
    except ValueError:
        raise ConfigError(
            f"{source}: invalid 'when' value {value!r} "
            f"(expected one of: {', '.join(WHEN_VALUES)})"
        ) from None


def validate_config_data(data: Any, source: str = "<unknown>") -> list[str]:
    """Validate config file data. Returns list of error messages (empty = valid)."""
    if not isinstance(data, dict):
        return [f"{source}: expecting a mapping at the top level (got {type(data).__name__})"]

    errors = []

    for key, val in data.items():
        if key not in CONFIG_KEYS:
            errors.append(f"{source}: unknown key '{key}'")
            continue

        expected = CONFIG_KEYS[key]
        if not isinstance(val, expected):
            errors.append(
                f"{source}: '{key}' should be {expected.__name__}, got {type(val).__name__}"
            )
        elif key == "when" and val.strip().lower() not in WHEN_VALUES:
            errors.append(
                f"{source}: invalid 'when' value {val!r} "
                f"(expected one of: {', '.join(WHEN_VALUES)})"
            )

    return errors


def load_config_file(path: Path) -> dict[str, Any]:
    """Load and validate a YAML config file, returning its settings."""
    path = Path(path)

    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    # An empty file is an empty config
    if data is None:
        data = {}

    errors = validate_config_data(data, source=str(path))
    if errors:
        raise ConfigError("Config validation failed:\n  " + "\n  ".join(errors))

    log.debug("Loaded config from %s: %s", path, data)
    return data


def load_config(
    path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
    **overrides: Any,
) -> MintConfig:
    """Build a ``MintConfig`` from a YAML file, the environment and overrides.

    ``path`` defaults to ``$MINT_CONFIG`` when set. Overrides which are
    ``None`` are ignored so that unset CLI flags don't mask lower layers.
    """
    environ = environ if environ is not None else os.environ
    settings: dict[str, Any] = {}

    if path is None and environ.get(ENV_CONFIG):
        path = Path(environ[ENV_CONFIG])

    if path is not None:
        settings.update(load_config_file(path))
        settings["source"] = Path(path)

    if environ.get(ENV_WHEN):
        settings["when"] = parse_when(environ[ENV_WHEN], source=ENV_WHEN)

    known = {f.name for f in fields(MintConfig)}
    for key, val in overrides.items():
        if key not in known:
            raise ConfigError(f"Unknown setting '{key}'")
        if val is not None:
            settings[key] = val

    if "when" in settings and not isinstance(settings["when"], When):
        settings["when"] = parse_when(settings["when"], source=str(path))

    return MintConfig(**settings)
