# Copyright 2026 Scoop Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML loader for the optional Scoop configuration file."""

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".scoop.yaml"


class ConfigError(Exception):
    """Raised when the configuration file cannot be read or is invalid."""


class ScoopConfig(BaseModel):
    """Settings for the command-line front end.

    Attributes:
        output_format: How token listings are printed, ``text`` or ``json``.
        fail_on_error: Whether a scan that reported diagnostics exits non-zero.
        prompt: Prompt shown by the interactive REPL.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    output_format: Literal["text", "json"] = Field(alias="output-format", default="text")
    fail_on_error: bool = Field(alias="fail-on-error", default=True)
    prompt: str = "> "


def load_config(path: Path) -> ScoopConfig:
    """Load and validate a configuration file.

    An empty file yields the default configuration.

    Args:
        path: Path to the ``.scoop.yaml`` file.

    Returns:
        A validated ScoopConfig instance.

    Raises:
        ConfigError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read config file '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in config file '{path}': {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: config must be a YAML mapping")

    try:
        return ScoopConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config file '{path}': {exc}") from exc


def find_config(directory: Path) -> ScoopConfig:
    """Load ``.scoop.yaml`` from ``directory``, or return defaults if there is none.

    Raises:
        ConfigError: If the file exists but is invalid.
    """
    path = directory / CONFIG_FILE_NAME
    if not path.exists():
        return ScoopConfig()
    return load_config(path)
