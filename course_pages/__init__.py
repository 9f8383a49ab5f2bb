"""Navigation metadata and tooling for the Microcontrollers course site.

This package declares the course site's configuration (title, sidebar,
repository links) as immutable dataclasses, and exposes the CLI used to export
it for the site builder and to check its sidebar links.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``SITE``: The course configuration handed to the site builder.

Examples
--------
>>> from course_pages import SITE
>>> SITE.theme.docs_dir
'src'
"""

from __future__ import annotations

from .cli import app, main
from .course import SITE, build_course_config

__all__ = ["SITE", "app", "build_course_config", "main"]
