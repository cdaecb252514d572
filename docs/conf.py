"""Configuration file for the Sphinx documentation builder."""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(project_root))

# -- Project information -----------------------------------------------------

project = "LLM JSON Generator"
copyright = "2025, LLM JSON Generator contributors"
author = "LLM JSON Generator contributors"
release = "0.1.0"

# -- General configuration ---------------------------------------------------

extensions = [
    "myst_parser",
    "autoapi.extension",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
    "sphinx_autodoc_typehints",
    "sphinx_design",
]

exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]

myst_enable_extensions = ["colon_fence", "deflist"]

# -- AutoAPI configuration --------------------------------------------------

autoapi_type = "python"
autoapi_dirs = ["../src/llm_json_generator"]
autoapi_root = "api"
autoapi_python_class_content = "class"
autoapi_member_order = "groupwise"
autoapi_options = ["members", "show-inheritance", "show-module-summary"]
autoapi_keep_files = False


def autoapi_skip_member(app, what, name, obj, skip, options):  # type: ignore[no-untyped-def]
    """Skip private members and pydantic field attributes of config models."""
    if name.startswith("_"):
        return True
    if what == "attribute" and name.endswith(("model_config", "model_fields")):
        return True
    return skip


def setup(app):  # type: ignore[no-untyped-def]
    """Sphinx setup function."""
    app.connect("autoapi-skip-member", autoapi_skip_member)


# -- HTML output configuration ----------------------------------------------

html_theme = "sphinx_rtd_theme"
html_title = f"{project} v{release}"

# Google-style docstrings
napoleon_google_docstring = True
napoleon_numpy_docstring = False
napoleon_use_param = True
napoleon_use_rtype = True

typehints_fully_qualified = False
always_document_param_types = True
