import datetime

import markstyle

# -- Project information -----------------------------------------------------

project = "Markstyle"
copyright = f"{datetime.date.today().year}, Markstyle authors"
author = "Markstyle authors"
release = version = markstyle.__version__


# -- General configuration ---------------------------------------------------

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.intersphinx",
    "sphinx.ext.githubpages",
]

intersphinx_mapping = {
    "python": ("https://docs.python.org/3/", None),
}
nitpick_ignore_regex = [(r"py:class", r"(.*\.)?(Key|_[^.]*)")]
autodoc_typehints_format = "short"
autodoc_member_order = "bysource"

# -- Options for HTML output -------------------------------------------------

html_theme = "furo"
html_theme_options = {
    "source_repository": "https://github.com/markstyle/markstyle",
    "source_branch": "main",
    "source_directory": "docs/source",
}
