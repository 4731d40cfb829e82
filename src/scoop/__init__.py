# Copyright 2026 Scoop Contributors
# SPDX-License-Identifier: Apache-2.0

"""Scoop: lexical front end for the Scoop scripting language."""

__version__ = "0.1.0"
