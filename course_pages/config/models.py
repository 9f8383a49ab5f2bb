"""Typed dataclasses describing the course site configuration."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from .._constants import DEFAULT_DOCS_BRANCH, DEFAULT_SIDEBAR_DEPTH


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class NavLink:
    """Navbar link shown in the site header."""

    text: str
    link: str


@dc.dataclass(frozen=True, slots=True)
class SidebarLink:
    """Sidebar entry that links directly to a document."""

    kind: typ.ClassVar[str] = "link"

    text: str
    link: str


@dc.dataclass(frozen=True, slots=True)
class SidebarGroup:
    """Labelled sidebar entry holding zero or more document links.

    A group is never navigable itself. Groups without children reserve a slot
    in the navigation for chapters that have not been written yet.
    """

    kind: typ.ClassVar[str] = "group"

    text: str
    children: tuple[SidebarLink, ...] = ()

    @property
    def is_placeholder(self) -> bool:
        """Return ``True`` when the group has no children."""
        return not self.children


SidebarEntry = SidebarLink | SidebarGroup


@dc.dataclass(frozen=True, slots=True)
class ThemeConfig:
    """Options handed to the default theme of the site builder."""

    logo: str = ""
    navbar: tuple[NavLink, ...] = ()
    repo: str = ""
    docs_dir: str = ""
    docs_branch: str = DEFAULT_DOCS_BRANCH
    sidebar_depth: int = DEFAULT_SIDEBAR_DEPTH
    sidebar: tuple[SidebarEntry, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class SiteConfig:
    """Site-level metadata together with the theme configuration."""

    lang: str
    title: str
    description: str
    theme: ThemeConfig

    def iter_links(self) -> typ.Iterator[SidebarLink]:
        """Yield every sidebar document link in navigation order."""
        for entry in self.theme.sidebar:
            match entry:
                case SidebarLink():
                    yield entry
                case SidebarGroup(children=children):
                    yield from children


__all__ = [
    "NavLink",
    "SidebarEntry",
    "SidebarGroup",
    "SidebarLink",
    "SiteConfig",
    "SiteConfigError",
    "ThemeConfig",
]
