# Configuration file for the Sphinx documentation builder.

import os
import sys
sys.path.insert(0, os.path.abspath('..'))

project = 'pdfappend'
author = 'Qoorp'
release = __import__('pdfappend').__version__

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.viewcode',
    'sphinx.ext.napoleon',
]

templates_path = ['_templates']
exclude_patterns = [
    '_build',
    'Thumbs.db',
    '.DS_Store',
    'examples',
    'tests',
]

html_theme = 'sphinx_rtd_theme'
html_static_path = ['_static']
