"""Sphinx configuration."""

project = "eschermerge"
author = "eschermerge developers"
copyright = "2025, eschermerge developers"
extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx_click",
    "myst_parser",
]
autodoc_typehints = "description"
html_theme = "furo"
