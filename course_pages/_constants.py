"""Common literal values used across course_pages.

These constants keep builder defaults, recognised document extensions and the
default output location in one place so the loader, checker, exporter and
tests agree on them. Intended for internal use within the course_pages
package.

Examples
--------
>>> from course_pages import _constants
>>> ".md" in _constants.DOC_EXTENSIONS
True
>>> _constants.DEFAULT_EXPORT_PATH.name
'config.ts'
"""

from pathlib import Path

DEFAULT_LANG = "en-US"
DEFAULT_DOCS_BRANCH = "main"
DEFAULT_SIDEBAR_DEPTH = 2
DOC_EXTENSIONS = (".md", ".html")
DEFAULT_EXPORT_PATH = Path("src/.vuepress/config.ts")
GITHUB_URL = "https://github.com"
GITHUB_RAW_URL = "https://raw.githubusercontent.com"
