# Copyright 2026 rbxapi Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for rbxapi documentation."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

project = "rbxapi"
author = "rbxapi Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc", "sphinx.ext.napoleon"]

# Docstrings are Google style. Pydantic internals are left out of model pages.
napoleon_google_docstring = True
napoleon_numpy_docstring = False
autodoc_member_order = "bysource"
autodoc_typehints = "description"
autodoc_default_options = {
    "members": True,
    "show-inheritance": True,
    "exclude-members": "model_config, model_fields, model_computed_fields",
}

html_theme = "alabaster"
