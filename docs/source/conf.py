from __future__ import annotations

import sys
from pathlib import Path

# -----------------------------------------------------------------------------
# Paths
# -----------------------------------------------------------------------------

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT))

__version__: str = "unknown"
try:
    from padepy import __version__ as _padepy_version
except ImportError:  # pragma: no cover
    pass
else:
    __version__ = _padepy_version

# -----------------------------------------------------------------------------
# Project information
# -----------------------------------------------------------------------------

project = "padepy"
author = "padepy developers"
copyright = f"2026, {author}"
version = release = __version__

# -----------------------------------------------------------------------------
# General configuration
# -----------------------------------------------------------------------------

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.doctest",
    "sphinx.ext.intersphinx",
    "sphinx.ext.napoleon",
    "autoapi.extension",
    "myst_parser",
    "sphinx_autodoc_typehints",
    "sphinx_copybutton",
]

templates_path = ["_templates"]
exclude_patterns: list[str] = ["_build", "**/.ipynb_checkpoints"]

language = "en"

source_suffix = {
    ".rst": "restructuredtext",
    ".md": "markdown",
}

# -----------------------------------------------------------------------------
# MyST (Markdown)
# -----------------------------------------------------------------------------

myst_enable_extensions = ["colon_fence", "deflist", "dollarmath"]
myst_heading_anchors = 3

# -----------------------------------------------------------------------------
# Napoleon (NumPy-style docstrings)
# -----------------------------------------------------------------------------

napoleon_numpy_docstring = True
napoleon_include_init_with_doc = False
napoleon_include_private_with_doc = False
napoleon_attr_annotations = True

suppress_warnings = ["toc.not_included", "ref.duplicate"]

# -----------------------------------------------------------------------------
# autodoc / AutoAPI
# -----------------------------------------------------------------------------

autodoc_typehints = "none"
always_document_param_types = True
typehints_document_rtype = True

autoapi_type = "python"
autoapi_dirs = [str(ROOT / "padepy")]
autoapi_root = "autoapi"

# The benchmark runner is a script, not API.
autoapi_ignore = ["*benchmark*"]
autoapi_add_toctree_entry = False
autoapi_keep_files = True
autoapi_own_page_level = "module"
autoapi_options = [
    "members",
    "undoc-members",
    "show-module-summary",
    "show-inheritance",
]

# -----------------------------------------------------------------------------
# Intersphinx
# -----------------------------------------------------------------------------

intersphinx_mapping = {
    "python": ("https://docs.python.org/3/", None),
    "numpy": ("https://numpy.org/doc/stable/", None),
    "numba": ("https://numba.readthedocs.io/en/stable/", None),
    "pandas": ("https://pandas.pydata.org/docs/", None),
}

# -----------------------------------------------------------------------------
# HTML output
# -----------------------------------------------------------------------------

html_theme = "pydata_sphinx_theme"
html_title = "padepy documentation"
html_theme_options = {
    "logo": {"text": "padepy"},
    "search_bar_text": "Search the docs...",
}
