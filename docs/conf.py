# Sphinx configuration for trigger-codegen

import os
import sys
sys.path.insert(0, os.path.abspath('../src'))

from trigger_codegen import __version__  # noqa: E402

project = 'trigger-codegen'
author = 'trigger-codegen contributors'
copyright = f'2026, {author}'
version = release = __version__

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.napoleon',
    'sphinx.ext.viewcode',
    'sphinx.ext.intersphinx',
    'sphinx_autodoc_typehints',
]

exclude_patterns = ['_build']

html_theme = 'sphinx_rtd_theme'
html_title = f'trigger-codegen {release}'

# Pydantic models and settings expose their machinery as class attributes.
autodoc_default_options = {
    'members': True,
    'undoc-members': True,
    'show-inheritance': True,
    'exclude-members': 'model_config, model_fields, model_computed_fields, model_post_init',
}
autodoc_member_order = 'bysource'
autodoc_typehints = 'description'
typehints_fully_qualified = False

# Docstrings use Google-style "Raises:" sections.
napoleon_google_docstring = True
napoleon_numpy_docstring = False
napoleon_use_rtype = False

intersphinx_mapping = {
    'python': ('https://docs.python.org/3', None),
    'pydantic': ('https://docs.pydantic.dev/latest', None),
}
