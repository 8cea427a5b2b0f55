# Copyright 2026 ProtoRust Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for the ProtoRust API documentation."""

import pathlib
import sys

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[2] / "src"))

project = "ProtoRust"
author = "ProtoRust Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc", "sphinx.ext.napoleon"]
autodoc_typehints = "description"

html_theme = "alabaster"
