# Copyright 2026 EJS Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for EJS documentation."""

project = "EJS"
author = "EJS Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc", "sphinx.ext.napoleon"]

html_theme = "alabaster"
