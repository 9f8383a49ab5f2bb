"""Derive repository links for sidebar documents.

The default theme shows a repository link in the navbar and, for each page,
"edit this page" and source links built from ``repo``, ``docsBranch`` and
``docsDir``. These helpers compute the same URLs so tooling can check or
display them.

Examples
--------
>>> from course_pages.course import SITE
>>> from course_pages.config import SidebarLink
>>> leaf = SidebarLink("mbed", "/03-blinky/mbed.md")
>>> edit_url(SITE.theme, leaf)
'https://github.com/sillevl/course-microcontrollers/edit/master/src/03-blinky/mbed.md'
"""

from __future__ import annotations

import posixpath
import typing as typ

from ._constants import GITHUB_RAW_URL, GITHUB_URL

if typ.TYPE_CHECKING:
    from .config import SidebarLink, ThemeConfig


def _repo_slug(theme: ThemeConfig) -> str:
    """Return ``owner/name`` for the theme repository, or an empty string."""
    repo = theme.repo.strip().rstrip("/")
    if repo.startswith(f"{GITHUB_URL}/"):
        return repo.removeprefix(f"{GITHUB_URL}/")
    if "://" in repo:
        return ""
    return repo


def repository_url(theme: ThemeConfig) -> str | None:
    """Return the repository URL, expanding ``owner/name`` shorthands."""
    repo = theme.repo.strip().rstrip("/")
    if not repo:
        return None
    if "://" in repo:
        return repo
    return f"{GITHUB_URL}/{repo}"


def target_path(link: str) -> str:
    """Return ``link`` without any fragment or query suffix."""
    return link.split("#", 1)[0].split("?", 1)[0]


def document_path(theme: ThemeConfig, leaf: SidebarLink) -> str:
    """Return the repository-relative POSIX path of the leaf's document."""
    relative = target_path(leaf.link).lstrip("/")
    docs_dir = theme.docs_dir.strip("/")
    return posixpath.join(docs_dir, relative) if docs_dir else relative


def _github_url(theme: ThemeConfig, leaf: SidebarLink, action: str) -> str | None:
    slug = _repo_slug(theme)
    if not slug:
        return None
    return f"{GITHUB_URL}/{slug}/{action}/{theme.docs_branch}/{document_path(theme, leaf)}"


def source_url(theme: ThemeConfig, leaf: SidebarLink) -> str | None:
    """Return the GitHub ``blob`` URL for the leaf's document."""
    return _github_url(theme, leaf, "blob")


def edit_url(theme: ThemeConfig, leaf: SidebarLink) -> str | None:
    """Return the GitHub ``edit`` URL the theme uses for "edit this page"."""
    return _github_url(theme, leaf, "edit")


def raw_url(theme: ThemeConfig, leaf: SidebarLink) -> str | None:
    """Return the raw content URL for the leaf's document on ``docs_branch``."""
    slug = _repo_slug(theme)
    if not slug:
        return None
    branch = theme.docs_branch
    ref_segment = branch if branch.startswith("refs/") else f"refs/heads/{branch}"
    return f"{GITHUB_RAW_URL}/{slug}/{ref_segment}/{document_path(theme, leaf)}"


__all__ = [
    "document_path",
    "edit_url",
    "raw_url",
    "repository_url",
    "source_url",
    "target_path",
]
