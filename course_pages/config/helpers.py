"""Utility helpers shared by the course site configuration loader."""

from __future__ import annotations

import collections.abc as cabc
import re
import typing as typ

from .._constants import DEFAULT_DOCS_BRANCH, DEFAULT_SIDEBAR_DEPTH
from .models import (
    NavLink,
    SidebarEntry,
    SidebarGroup,
    SidebarLink,
    SiteConfigError,
    ThemeConfig,
)

LANG_PATTERN = re.compile(r"^[A-Za-z]{2,3}(?:-[A-Za-z0-9]{2,8})*$")


def _require_text(payload: typ.Mapping[str, typ.Any], where: str) -> str:
    """Return the ``text`` value of ``payload``, rejecting blank labels."""
    text = payload.get("text")
    if not isinstance(text, str) or not text.strip():
        msg = f"{where} is missing a 'text' label."
        raise SiteConfigError(msg)
    return text


def _require_link(value: object, where: str) -> str:
    """Return ``value`` as a link target, rejecting non-string values."""
    if not isinstance(value, str):
        msg = f"{where} has a non-string 'link': {value!r}."
        raise SiteConfigError(msg)
    return value


def _optional_str(value: object | None, default: str = "") -> str:
    """Return ``value`` as a string, or ``default`` when unset."""
    if value is None:
        return default
    return str(value)


def _require_mapping(value: object, where: str) -> typ.Mapping[str, typ.Any]:
    if not isinstance(value, cabc.Mapping):
        msg = f"{where} must be a mapping, got {type(value).__name__}."
        raise SiteConfigError(msg)
    return value


def _require_sequence(value: object, where: str) -> list[typ.Any]:
    if value is None:
        return []
    if isinstance(value, str) or not isinstance(value, cabc.Sequence):
        msg = f"{where} must be a list, got {type(value).__name__}."
        raise SiteConfigError(msg)
    return list(value)


def _build_sidebar_link(payload: object, where: str) -> SidebarLink:
    """Build a leaf entry, rejecting groups nested below a group."""
    mapping = _require_mapping(payload, where)
    text = _require_text(mapping, where)
    if "link" not in mapping:
        msg = f"{where} ('{text}') is a group; groups cannot be nested."
        raise SiteConfigError(msg)
    if "children" in mapping:
        msg = f"{where} ('{text}') declares both 'link' and 'children'."
        raise SiteConfigError(msg)
    return SidebarLink(text=text, link=_require_link(mapping["link"], where))


def _build_sidebar_entry(payload: object, where: str) -> SidebarEntry:
    """Build a sidebar leaf or group from a builder-shaped mapping."""
    mapping = _require_mapping(payload, where)
    if "link" in mapping:
        return _build_sidebar_link(mapping, where)
    text = _require_text(mapping, where)
    children_raw = _require_sequence(mapping.get("children"), f"{where}.children")
    children = tuple(
        _build_sidebar_link(child, f"{where}.children[{index}]")
        for index, child in enumerate(children_raw)
    )
    return SidebarGroup(text=text, children=children)


def _build_sidebar(value: object) -> tuple[SidebarEntry, ...]:
    """Build the ordered sidebar tuple from the ``sidebar`` option."""
    entries = _require_sequence(value, "theme.sidebar")
    return tuple(
        _build_sidebar_entry(entry, f"theme.sidebar[{index}]")
        for index, entry in enumerate(entries)
    )


def _build_navbar(value: object) -> tuple[NavLink, ...]:
    """Build navbar links from the ``navbar`` option."""
    navbar: list[NavLink] = []
    for index, entry in enumerate(_require_sequence(value, "theme.navbar")):
        where = f"theme.navbar[{index}]"
        mapping = _require_mapping(entry, where)
        text = _require_text(mapping, where)
        navbar.append(NavLink(text=text, link=_require_link(mapping.get("link"), where)))
    return tuple(navbar)


def _parse_sidebar_depth(value: object) -> int:
    """Return a validated sidebar depth, defaulting when unset."""
    if value is None:
        return DEFAULT_SIDEBAR_DEPTH
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        msg = f"theme.sidebarDepth must be a non-negative integer, got {value!r}."
        raise SiteConfigError(msg)
    return value


def _validate_lang(value: str) -> str:
    """Return ``value`` when it looks like a locale identifier such as ``en-US``."""
    if not LANG_PATTERN.match(value):
        msg = f"'{value}' is not a valid locale identifier."
        raise SiteConfigError(msg)
    return value


def _build_theme_config(payload: typ.Mapping[str, typ.Any]) -> ThemeConfig:
    """Build a ThemeConfig instance from the provided mapping payload."""
    return ThemeConfig(
        logo=_optional_str(payload.get("logo")),
        navbar=_build_navbar(payload.get("navbar")),
        repo=_optional_str(payload.get("repo")),
        docs_dir=_optional_str(payload.get("docsDir")),
        docs_branch=_optional_str(payload.get("docsBranch"), DEFAULT_DOCS_BRANCH),
        sidebar_depth=_parse_sidebar_depth(payload.get("sidebarDepth")),
        sidebar=_build_sidebar(payload.get("sidebar")),
    )


__all__ = [
    "LANG_PATTERN",
    "_build_navbar",
    "_build_sidebar",
    "_build_sidebar_entry",
    "_build_theme_config",
    "_optional_str",
    "_parse_sidebar_depth",
    "_require_mapping",
    "_validate_lang",
]
