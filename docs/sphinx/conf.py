# Copyright 2026 UMLGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for UMLGraph documentation."""

project = "UMLGraph"
author = "UMLGraph Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc", "sphinx.ext.napoleon"]

html_theme = "alabaster"
