"""Cyclopts CLI entrypoint for exporting and checking the course navigation.

The ``course-pages`` console script defined here renders the site builder's
configuration file, lints the sidebar against a docs checkout or the upstream
repository, and prints the navigation tree with the links the theme derives
for each document. Without ``--config`` every command works on the built-in
course configuration from :mod:`course_pages.course`.

Examples
--------
Write ``src/.vuepress/config.ts`` for the built-in course:

>>> from course_pages.cli import main
>>> main()  # doctest: +SKIP

Check a YAML configuration against a local checkout:

>>> from course_pages.cli import app
>>> app(
...     ["check", "--config", "config/site.yaml", "--docs-root", "src"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DEFAULT_EXPORT_PATH
from .config import SidebarGroup, SidebarLink, load_site_config
from .course import SITE
from .exporter import VuePressConfigExporter
from .links import edit_url, repository_url
from .validation import RemoteDocumentChecker, check_sidebar

if typ.TYPE_CHECKING:
    from .config import SiteConfig

app = App(name="course-pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]

ConfigOption = typ.Annotated[
    Path | None,
    Parameter(
        help="Path to a YAML site config (defaults to the built-in course)",
        env_var="INPUT_CONFIG",
    ),
]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:
            return str(path)
    return str(path)


def _resolve_site(config: Path | None) -> SiteConfig:
    return SITE if config is None else load_site_config(config)


@app.command(help="Render the site builder configuration file.")
def export(
    *,
    config: ConfigOption = None,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Where to write the file", env_var="INPUT_OUTPUT"),
    ] = None,
    fmt: typ.Annotated[
        typ.Literal["ts", "json"],
        Parameter(name="--format", help="Output format"),
    ] = "ts",
) -> None:
    """Render the builder configuration and write it to ``output``.

    Parameters
    ----------
    config : Path or None, optional
        YAML site configuration; the built-in course when ``None``.
    output : Path or None, optional
        Destination file. Defaults to ``src/.vuepress/config.ts``, or
        ``src/.vuepress/config.json`` for the JSON format.
    fmt : {"ts", "json"}, optional
        ``ts`` writes a ``defineUserConfig`` module, ``json`` the plain
        option mapping.
    """
    site = _resolve_site(config)
    if output is None:
        output = DEFAULT_EXPORT_PATH.with_suffix(f".{fmt}")
    written = VuePressConfigExporter(site).run(output, fmt)
    print(f"wrote {_format_path(written)}")


@app.command(help="Check sidebar links for malformed, duplicate or missing documents.")
def check(
    *,
    config: ConfigOption = None,
    docs_root: typ.Annotated[
        Path | None,
        Parameter(
            help="Local docs directory to resolve links against",
            env_var="INPUT_DOCS_ROOT",
        ),
    ] = None,
    remote: typ.Annotated[
        bool, Parameter(help="Also confirm documents exist upstream")
    ] = False,
) -> None:
    """Lint the sidebar and exit with status 1 when issues are found.

    Parameters
    ----------
    config : Path or None, optional
        YAML site configuration; the built-in course when ``None``.
    docs_root : Path or None, optional
        Directory holding the documents. Links are only checked for existence
        when it is supplied.
    remote : bool, optional
        Send a ``HEAD`` request for each document on the docs branch.

    Raises
    ------
    SystemExit
        With status 1 when at least one issue is reported.
    """
    site = _resolve_site(config)
    issues = check_sidebar(site, docs_root)
    if remote:
        issues.extend(RemoteDocumentChecker(site).check())
    for issue in issues:
        print(issue)
    if issues:
        raise SystemExit(1)
    count = sum(1 for _ in site.iter_links())
    print(f"sidebar ok ({count} documents)")


@app.command(help="Print the sidebar tree with edit links.")
def nav(*, config: ConfigOption = None) -> None:
    """Print the sidebar in navigation order."""
    site = _resolve_site(config)
    theme = site.theme
    print(site.title)
    repo = repository_url(theme)
    if repo:
        print(f"repo: {repo}")
    for entry in theme.sidebar:
        match entry:
            case SidebarLink():
                print(_format_leaf(site, entry, indent=""))
            case SidebarGroup(is_placeholder=True):
                print(f"- {entry.text} (placeholder)")
            case SidebarGroup():
                print(f"- {entry.text}")
                for child in entry.children:
                    print(_format_leaf(site, child, indent="  "))


def _format_leaf(site: SiteConfig, leaf: SidebarLink, *, indent: str) -> str:
    line = f"{indent}- {leaf.text}: {leaf.link}"
    url = edit_url(site.theme, leaf)
    return f"{line} ({url})" if url else line


def main() -> None:
    """Invoke the Cyclopts application that powers the ``course-pages`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
