"""Sphinx configuration for build123-tubeframe documentation."""

import os
import sys

# Add source to path
sys.path.insert(0, os.path.abspath("../src"))

# Project information
project = "build123-tubeframe"
copyright = "2025, build123-tubeframe contributors"
author = "build123-tubeframe contributors"
release = "0.1.0"

# General configuration
extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
    "sphinx.ext.intersphinx",
    "sphinx_rtd_theme",
]

templates_path = ["_templates"]
exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]

html_theme = "sphinx_rtd_theme"
html_static_path = ["_static"]

# Google style docstrings
napoleon_google_docstring = True
napoleon_numpy_docstring = False
napoleon_include_init_with_doc = True
napoleon_use_param = True
napoleon_use_rtype = True

autodoc_default_options = {
    "members": True,
    "member-order": "bysource",
    "undoc-members": True,
    "imported-members": False,
}
autodoc_mock_imports = ["build123d", "ocp_vscode", "OCP"]
autodoc_inherit_docstrings = False

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "build123d": ("https://build123d.readthedocs.io/en/latest/", None),
}
