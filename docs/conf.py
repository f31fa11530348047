"""Sphinx configuration for the Hockeyboard project documentation."""

import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(__file__, "..", "..")))

from hockeyboard import __version__  # noqa: E402

project = "Hockeyboard Field Hockey Scoreboard"
author = "WelshDragon"
version = release = __version__

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.autosummary",
    "sphinx.ext.napoleon",
]

autosummary_generate = True
autodoc_mock_imports = ["pygame"]
autodoc_typehints = "description"
napoleon_numpy_docstring = True

exclude_patterns = ["_build"]
html_theme = "sphinx_rtd_theme"
