# Copyright 2026 Scoop Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the configuration module."""

from pathlib import Path

import pytest

from scoop.config import CONFIG_FILE_NAME, ConfigError, ScoopConfig, find_config, load_config

# ###############
# Helpers
# ###############


def _write_config(tmp_path: Path, content: str) -> Path:
    """Write a config file and return its path."""
    config_file = tmp_path / CONFIG_FILE_NAME
    config_file.write_text(content, encoding="utf-8")
    return config_file


# ###############
# Normal Cases
# ###############


def test_defaults() -> None:
    config = ScoopConfig()
    assert config.output_format == "text"
    assert config.fail_on_error is True
    assert config.prompt == "> "


def test_empty_file_yields_defaults(tmp_path: Path) -> None:
    assert load_config(_write_config(tmp_path, "")) == ScoopConfig()


def test_all_fields(tmp_path: Path) -> None:
    content = """\
output-format: json
fail-on-error: false
prompt: "scoop> "
"""
    config = load_config(_write_config(tmp_path, content))
    assert config.output_format == "json"
    assert config.fail_on_error is False
    assert config.prompt == "scoop> "


def test_find_config_without_file_returns_defaults(tmp_path: Path) -> None:
    assert find_config(tmp_path) == ScoopConfig()


def test_find_config_loads_file(tmp_path: Path) -> None:
    _write_config(tmp_path, "output-format: json\n")
    assert find_config(tmp_path).output_format == "json"


# ###############
# Error Cases
# ###############


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "missing.yaml")


def test_invalid_yaml_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config(_write_config(tmp_path, "output-format: [unclosed\n"))


def test_non_mapping_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="mapping"):
        load_config(_write_config(tmp_path, "- text\n- json\n"))


def test_unknown_format_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Invalid config"):
        load_config(_write_config(tmp_path, "output-format: xml\n"))


def test_unknown_key_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Invalid config"):
        load_config(_write_config(tmp_path, "colour: true\n"))


def test_find_config_propagates_errors(tmp_path: Path) -> None:
    _write_config(tmp_path, "fail-on-error: maybe\n")
    with pytest.raises(ConfigError):
        find_config(tmp_path)


def test_undecodable_file_raises(tmp_path: Path) -> None:
    config_file = tmp_path / CONFIG_FILE_NAME
    config_file.write_bytes(b"prompt: \xff\n")
    with pytest.raises(ConfigError, match="Cannot read config file"):
        load_config(config_file)
