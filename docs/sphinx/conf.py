# Copyright 2026 Scoop Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for the Scoop API reference.

Build with ``uv run sphinx-build docs/sphinx docs/_build``.
"""

import sys
from pathlib import Path

# The package uses a src/ layout; autodoc imports it from there.
sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from scoop import __version__  # noqa: E402

project = "Scoop"
author = "Scoop Contributors"
release = __version__

extensions: list[str] = ["sphinx.ext.autodoc", "sphinx.ext.napoleon"]

autodoc_member_order = "bysource"
autodoc_default_options = {"members": True, "show-inheritance": True}
napoleon_google_docstring = True

html_theme = "alabaster"
