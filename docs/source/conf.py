import os
import sys

sys.path.insert(0, os.path.abspath("../../src"))

import pkgdocs  # noqa: E402

project = "pkgdocs"
copyright = "2025, pkgdocs developers"
author = "pkgdocs developers"
release = pkgdocs.__version__

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "myst_parser",
    "sphinx.ext.autosummary",
    "sphinx_click",
]

source_suffix = {".md": "markdown", ".rst": "restructuredtext"}
root_doc = "index"

# docstrings are numpy style
napoleon_google_docstring = False
napoleon_numpy_docstring = True

autosummary_generate = True

autodoc_default_options = {
    "members": True,
    "undoc-members": False,
    "show-inheritance": True,
}

autodoc_member_order = "bysource"

templates_path = ["_templates"]
exclude_patterns = []

html_theme = "sphinx_rtd_theme"
html_static_path = []
