"""Configuration loading for the statement CLI.

Settings come from three layers, later ones winning: built-in defaults, the
YAML config file, then ``STATEMENTCLI_*`` environment variables. Every value
goes through the same per-setting parser whichever layer it came from, so a
size may be written as ``5242880``, ``"5 MiB"`` or ``"512k"`` in either place.
"""

from __future__ import annotations

import codecs
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Mapping

import yaml

from . import paths
from .exceptions import ConfigurationError

OUTPUT_FORMATS = ("table", "json", "csv")

DEFAULT_ENCODINGS = ("utf-8-sig", "cp1250")
DEFAULT_MAX_FILE_SIZE = 5 * 1024 * 1024

_SIZE_RE = re.compile(r"^(\d+)\s*([kmg]i?b?|b)?$", re.IGNORECASE)
_SIZE_UNITS = {"": 1, "b": 1, "k": 1024, "m": 1024**2, "g": 1024**3}


@dataclass(frozen=True, slots=True)
class InputSettings:
    """How statement files are read before parsing."""

    encodings: tuple[str, ...] = DEFAULT_ENCODINGS
    max_file_size: int = DEFAULT_MAX_FILE_SIZE


@dataclass(frozen=True, slots=True)
class OutputSettings:
    """How parse results are rendered."""

    format: str = "table"
    show_skipped: bool = True


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Top-level application configuration."""

    source_path: Path
    input: InputSettings = InputSettings()
    output: OutputSettings = OutputSettings()


def parse_encodings(value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        value = value.split(",")
    if not isinstance(value, (list, tuple)):
        raise ValueError("expected a list of encodings")
    encodings = tuple(str(name).strip() for name in value if str(name).strip())
    if not encodings:
        raise ValueError("at least one encoding is required")
    for name in encodings:
        try:
            codecs.lookup(name)
        except LookupError as exc:
            raise ValueError(f"unknown encoding '{name}'") from exc
    return encodings


def parse_size(value: Any) -> int:
    """Return a byte count from ``1024``, ``"512k"``, ``"5 MiB"`` and similar."""

    if isinstance(value, bool):
        raise ValueError("expected a size in bytes")
    if isinstance(value, int):
        size = value
    else:
        match = _SIZE_RE.match(str(value).strip())
        if not match:
            raise ValueError("expected a size such as 1048576 or '5 MiB'")
        unit = (match.group(2) or "")[:1].lower()
        size = int(match.group(1)) * _SIZE_UNITS[unit]
    if size <= 0:
        raise ValueError("size must be positive")
    return size


def parse_format(value: Any) -> str:
    fmt = str(value).strip().lower()
    if fmt not in OUTPUT_FORMATS:
        raise ValueError(f"expected one of {', '.join(OUTPUT_FORMATS)}")
    return fmt


def parse_flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    lowered = str(value).strip().lower()
    if lowered in {"1", "true", "yes", "on"}:
        return True
    if lowered in {"0", "false", "no", "off"}:
        return False
    raise ValueError("expected boolean (true/false)")


# (section, key) -> (environment variable, parser)
SETTINGS: dict[tuple[str, str], tuple[str, Callable[[Any], Any]]] = {
    ("input", "encodings"): ("STATEMENTCLI_INPUT_ENCODINGS", parse_encodings),
    ("input", "max_file_size"): ("STATEMENTCLI_INPUT_MAX_FILE_SIZE", parse_size),
    ("output", "format"): ("STATEMENTCLI_OUTPUT_FORMAT", parse_format),
    ("output", "show_skipped"): ("STATEMENTCLI_OUTPUT_SHOW_SKIPPED", parse_flag),
}


def load_config(
    config_path: str | Path | None = None,
    env: Mapping[str, str] | None = None,
) -> AppConfig:
    """Load configuration from defaults, YAML file, and env overrides."""
    env = dict(os.environ if env is None else env)
    source_path = paths.resolve_path(config_path) if config_path else paths.default_config_path(env=env)
    file_data = _read_config_file(source_path)

    sections: dict[str, dict[str, Any]] = {"input": {}, "output": {}}
    for (section, key), (env_key, parser) in SETTINGS.items():
        if env_key in env:
            raw, origin = env[env_key], f"Environment override {env_key}"
        elif key in file_data.get(section, {}):
            raw, origin = file_data[section][key], f"{section}.{key} in {source_path}"
        else:
            continue
        try:
            sections[section][key] = parser(raw)
        except ValueError as exc:
            raise ConfigurationError(f"{origin} has invalid value '{raw}': {exc}") from exc

    return AppConfig(
        source_path=source_path,
        input=InputSettings(**sections["input"]),
        output=OutputSettings(**sections["output"]),
    )


def _read_config_file(path: Path) -> dict[str, dict[str, Any]]:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Config file at {path} is not valid YAML: {exc}") from exc
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"Config file at {path} must define a mapping root object.")

    unknown = sorted(set(data) - {section for section, _ in SETTINGS})
    if unknown:
        raise ConfigurationError(f"Config file at {path} has unknown sections: {', '.join(unknown)}")
    for section, values in data.items():
        if values is None:
            data[section] = {}
        elif not isinstance(values, Mapping):
            raise ConfigurationError(f"Config section '{section}' in {path} must be a mapping.")
    return dict(data)
