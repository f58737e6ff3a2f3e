# Copyright 2026 rbxapi Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the rbxapi tool configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from rbxapi.export.properties import DEFAULT_EXCLUDED_TAGS

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".rbxapi.yaml"

PARSER_MODES = ("strict", "fast")


class ConfigError(Exception):
    """Raised when a configuration file is invalid or cannot be loaded."""


@dataclass
class ToolConfig:
    """The parsed rbxapi configuration.

    Attributes:
        parser: Which parser reads dumps: ``strict`` stops at the first error,
            ``fast`` skips malformed lines.
        exclude_tags: Tags whose properties are left out of property tables.
    """

    parser: str = "strict"
    exclude_tags: list[str] = field(default_factory=lambda: sorted(DEFAULT_EXCLUDED_TAGS))


def load_config(path: Path) -> ToolConfig:
    """Load and parse an rbxapi configuration file.

    Args:
        path: Path to the `.rbxapi.yaml` file.

    Returns:
        A ToolConfig instance populated from the file.  Absent fields keep
        their defaults.

    Raises:
        ConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file: {exc}") from exc

    return _parse_config(text, source_label=str(path))


# ################
# Implementation
# ################


def _parse_config(text: str, source_label: str = "<string>") -> ToolConfig:
    """Parse config YAML text into a ToolConfig.

    Raises:
        ConfigError: If the YAML is invalid or a field has the wrong shape.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return ToolConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: config must be a YAML mapping")

    unknown = sorted(set(data) - {"parser", "exclude-tags"})
    if unknown:
        raise ConfigError(f"{source_label}: unknown field(s): {', '.join(map(str, unknown))}")

    config = ToolConfig()
    if "parser" in data:
        parser = data["parser"]
        if parser not in PARSER_MODES:
            raise ConfigError(f"{source_label}: 'parser' must be one of {', '.join(PARSER_MODES)}, got {parser!r}")
        config.parser = parser

    if "exclude-tags" in data:
        tags = data["exclude-tags"]
        if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
            raise ConfigError(f"{source_label}: 'exclude-tags' must be a list of strings")
        config.exclude_tags = tags

    return config
