"""Lint the sidebar of a :class:`~course_pages.config.SiteConfig`.

The configuration itself never validates its link targets; the site builder
reports dangling paths at build time. This module lets maintainers catch the
same defects earlier:

* :func:`check_sidebar` inspects every sidebar leaf for malformed paths,
  unsupported document extensions and duplicate targets, and, given a docs
  checkout, for documents that do not exist.
* :class:`RemoteDocumentChecker` asks the upstream repository whether each
  document exists on the configured docs branch.

Empty groups are placeholders and never produce issues.

Examples
--------
>>> from course_pages.course import SITE
>>> check_sidebar(SITE)
[]
"""

from __future__ import annotations

import dataclasses as dc
import posixpath
import typing as typ

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ._constants import DOC_EXTENSIONS
from .links import raw_url, target_path

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import SidebarLink, SiteConfig

INVALID_PATH = "invalid-path"
UNSUPPORTED_EXTENSION = "unsupported-extension"
DUPLICATE_LINK = "duplicate-link"
MISSING_DOCUMENT = "missing-document"
UNREACHABLE_DOCUMENT = "unreachable-document"


@dc.dataclass(frozen=True, slots=True)
class SidebarIssue:
    """A defect found on a single sidebar leaf.

    Attributes
    ----------
    code : str
        Machine-readable issue category (for example ``"duplicate-link"``).
    text : str
        Label of the offending sidebar entry.
    link : str
        Target path of the offending entry.
    message : str
        Human-readable explanation.
    """

    code: str
    text: str
    link: str
    message: str

    def __str__(self) -> str:
        return f"{self.code}: {self.text} -> {self.link or '<empty>'}: {self.message}"


def _check_format(leaf: SidebarLink) -> SidebarIssue | None:
    target = target_path(leaf.link)
    if not target or not target.startswith("/"):
        return SidebarIssue(
            INVALID_PATH,
            leaf.text,
            leaf.link,
            "link must be a non-empty path starting with '/'",
        )
    if not target.lower().endswith(DOC_EXTENSIONS):
        expected = ", ".join(DOC_EXTENSIONS)
        return SidebarIssue(
            UNSUPPORTED_EXTENSION,
            leaf.text,
            leaf.link,
            f"link must end in one of: {expected}",
        )
    return None


def _check_exists(leaf: SidebarLink, docs_root: Path) -> SidebarIssue | None:
    relative = posixpath.normpath(target_path(leaf.link).lstrip("/"))
    if relative.startswith("../") or relative == "..":
        return SidebarIssue(
            INVALID_PATH, leaf.text, leaf.link, "link escapes the docs root"
        )
    candidate = docs_root / relative
    if candidate.is_file():
        return None
    return SidebarIssue(
        MISSING_DOCUMENT,
        leaf.text,
        leaf.link,
        f"no document at {candidate.as_posix()}",
    )


def check_sidebar(site: SiteConfig, docs_root: Path | None = None) -> list[SidebarIssue]:
    """Return every issue found on the sidebar leaves of ``site``.

    Parameters
    ----------
    site : SiteConfig
        Configuration whose sidebar should be inspected.
    docs_root : Path, optional
        Directory holding the documents (the checkout's ``docs_dir``). When
        given, each leaf target must name an existing file beneath it.

    Returns
    -------
    list[SidebarIssue]
        Issues in sidebar order; empty when the sidebar is sound.
    """
    issues: list[SidebarIssue] = []
    seen: dict[str, str] = {}
    for leaf in site.iter_links():
        issue = _check_format(leaf)
        if issue:
            issues.append(issue)
            continue
        target = target_path(leaf.link)
        if target in seen:
            issues.append(
                SidebarIssue(
                    DUPLICATE_LINK,
                    leaf.text,
                    leaf.link,
                    f"target already used by '{seen[target]}'",
                )
            )
            continue
        seen[target] = leaf.text
        if docs_root is not None:
            missing = _check_exists(leaf, docs_root)
            if missing:
                issues.append(missing)
    return issues


class RemoteDocumentChecker:
    """Confirm that sidebar documents exist in the upstream repository."""

    def __init__(
        self,
        site: SiteConfig,
        *,
        session: requests.Session | None = None,
        timeout: float = 15,
    ) -> None:
        """Initialize the checker.

        Parameters
        ----------
        site : SiteConfig
            Configuration naming the repository, branch and docs directory.
        session : requests.Session, optional
            Session to issue requests with. When ``None`` a session with retry
            handling is created for each :meth:`check` call and closed after.
        timeout : float, optional
            Per-request timeout in seconds.
        """
        self.site = site
        self.session = session
        self.timeout = timeout

    def check(self) -> list[SidebarIssue]:
        """Issue a ``HEAD`` request per document and report unreachable ones."""
        session = self.session or _build_session()
        try:
            return [
                issue
                for leaf in self.site.iter_links()
                if (issue := self._check_leaf(session, leaf)) is not None
            ]
        finally:
            if self.session is None:
                session.close()

    def _check_leaf(
        self, session: requests.Session, leaf: SidebarLink
    ) -> SidebarIssue | None:
        url = raw_url(self.site.theme, leaf)
        if not url:
            return SidebarIssue(
                UNREACHABLE_DOCUMENT, leaf.text, leaf.link, "no repository configured"
            )
        try:
            resp = session.head(url, timeout=self.timeout, allow_redirects=True)
            resp.raise_for_status()
        except requests.RequestException as exc:
            return SidebarIssue(UNREACHABLE_DOCUMENT, leaf.text, leaf.link, str(exc))
        return None


def _build_session() -> requests.Session:
    """Return a session that retries transient upstream failures."""
    session = requests.Session()
    retry = Retry(
        total=5,
        read=5,
        connect=3,
        backoff_factor=0.5,
        status_forcelist=(500, 502, 503, 504),
        allowed_methods=("GET", "HEAD"),
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


__all__ = [
    "DUPLICATE_LINK",
    "INVALID_PATH",
    "MISSING_DOCUMENT",
    "UNREACHABLE_DOCUMENT",
    "UNSUPPORTED_EXTENSION",
    "RemoteDocumentChecker",
    "SidebarIssue",
    "check_sidebar",
]
