# Copyright 2026 rbxapi Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the .rbxapi.yaml configuration loader."""

from pathlib import Path

import pytest

from rbxapi.cli.config import ConfigError, ToolConfig, load_config

# ###############
# Helpers
# ###############


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / ".rbxapi.yaml"
    path.write_text(content, encoding="utf-8")
    return path


# ###############
# Valid Configurations
# ###############


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    config = load_config(_write(tmp_path, ""))
    assert config == ToolConfig()
    assert config.parser == "strict"
    assert config.exclude_tags == ["deprecated", "hidden", "readonly"]


def test_parser_mode(tmp_path: Path) -> None:
    assert load_config(_write(tmp_path, "parser: fast\n")).parser == "fast"


def test_exclude_tags(tmp_path: Path) -> None:
    config = load_config(_write(tmp_path, "exclude-tags:\n  - RobloxScriptSecurity\n  - hidden\n"))
    assert config.exclude_tags == ["RobloxScriptSecurity", "hidden"]
    assert config.parser == "strict"


def test_empty_exclude_tags(tmp_path: Path) -> None:
    assert load_config(_write(tmp_path, "exclude-tags: []\n")).exclude_tags == []


# ###############
# Invalid Configurations
# ###############


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Config file not found"):
        load_config(tmp_path / "missing.yaml")


def test_invalid_yaml(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config(_write(tmp_path, "parser: [fast\n"))


def test_top_level_must_be_a_mapping(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="must be a YAML mapping"):
        load_config(_write(tmp_path, "- strict\n"))


def test_unknown_field(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="unknown field\\(s\\): colour"):
        load_config(_write(tmp_path, "colour: blue\n"))


def test_unknown_parser_mode(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="'parser' must be one of strict, fast"):
        load_config(_write(tmp_path, "parser: lenient\n"))


@pytest.mark.parametrize("value", ["readonly", "[1, 2]", "{a: b}"])
def test_exclude_tags_must_be_list_of_strings(tmp_path: Path, value: str) -> None:
    with pytest.raises(ConfigError, match="'exclude-tags' must be a list of strings"):
        load_config(_write(tmp_path, f"exclude-tags: {value}\n"))
