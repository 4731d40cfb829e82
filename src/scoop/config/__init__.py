# Copyright 2026 Scoop Contributors
# SPDX-License-Identifier: Apache-2.0

"""Configuration for the Scoop command-line front end."""

from scoop.config.settings import (
    CONFIG_FILE_NAME,
    ConfigError,
    ScoopConfig,
    find_config,
    load_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "ConfigError",
    "ScoopConfig",
    "find_config",
    "load_config",
]
