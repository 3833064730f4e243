# Copyright 2026 uiderive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the ``.uiderive.yaml`` project configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".uiderive.yaml"


class ConfigError(Exception):
    """Raised when a configuration file is invalid or cannot be loaded."""


@dataclass
class ProjectConfig:
    """The parsed configuration of a uiderive project.

    Attributes:
        build_directory: Relative path (from the project root) for generated modules.
        source_directories: Relative paths of the import roots scanned for aggregates.
        marker: Name of the annotation marker callable.
        exclude: Glob patterns, relative to the project root, of files to skip.
    """

    build_directory: str
    source_directories: list[str] = field(default_factory=lambda: ["."])
    marker: str = "ui"
    exclude: list[str] = field(default_factory=list)


def load_config(path: Path) -> ProjectConfig:
    """Load and parse a project configuration file.

    Args:
        path: Path to the `.uiderive.yaml` file.

    Returns:
        A ProjectConfig instance populated from the file.

    Raises:
        ConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file: {exc}") from exc

    return parse_config(text, source_label=str(path))


def parse_config(text: str, source_label: str = "<string>") -> ProjectConfig:
    """Parse configuration YAML text into a ProjectConfig.

    Args:
        text: Raw YAML content.
        source_label: Human-readable label used in error messages (e.g. the file path).

    Raises:
        ConfigError: If the YAML is invalid, a field has the wrong type, a
            required field is missing or an unknown field is present.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: config must be a YAML mapping")

    unknown = sorted(str(key) for key in data if key not in _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"{source_label}: unknown field '{unknown[0]}'")

    config = ProjectConfig(build_directory=_require_string(data, "build-directory", source_label))
    if "source-directories" in data:
        config.source_directories = _string_list(data, "source-directories", source_label)
        if not config.source_directories:
            raise ConfigError(f"{source_label}: 'source-directories' must not be empty")
    if "marker" in data:
        config.marker = _require_string(data, "marker", source_label)
        if not config.marker.isidentifier():
            raise ConfigError(f"{source_label}: 'marker' must be a Python identifier")
    if "exclude" in data:
        config.exclude = _string_list(data, "exclude", source_label)
    return config


def dump_config(config: ProjectConfig) -> str:
    """Render a configuration as YAML text."""
    data = {
        "build-directory": config.build_directory,
        "source-directories": config.source_directories,
        "marker": config.marker,
        "exclude": config.exclude,
    }
    return yaml.safe_dump(data, sort_keys=False)


# ################
# Implementation
# ################

_KNOWN_KEYS = frozenset({"build-directory", "source-directories", "marker", "exclude"})


def _require_string(mapping: dict[str, object], key: str, source_label: str) -> str:
    """Extract a required string field from a mapping, raising ConfigError if missing."""
    if key not in mapping:
        raise ConfigError(f"{source_label}: missing required field '{key}'")
    value = mapping[key]
    if not isinstance(value, str):
        raise ConfigError(f"{source_label}: '{key}' must be a string")
    return value


def _string_list(mapping: dict[str, object], key: str, source_label: str) -> list[str]:
    value = mapping[key]
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{source_label}: '{key}' must be a list of strings")
    return list(value)
