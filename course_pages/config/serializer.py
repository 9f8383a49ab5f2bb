"""Convert a :class:`SiteConfig` to the builder's option shape and back.

The mapping mirrors the option names the site builder expects
(``docsDir``, ``docsBranch``, ``sidebarDepth``) so it can be written as JSON
and fed to the builder, or re-parsed into an equal :class:`SiteConfig`.

Examples
--------
>>> from course_pages.config.serializer import dumps, loads
>>> from course_pages.course import SITE
>>> loads(dumps(SITE)) == SITE
True
"""

from __future__ import annotations

import json
import typing as typ

from .loader import site_config_from_mapping
from .models import SidebarGroup, SidebarLink

if typ.TYPE_CHECKING:
    from .models import SidebarEntry, SiteConfig, ThemeConfig


def _entry_to_mapping(entry: SidebarEntry) -> dict[str, typ.Any]:
    match entry:
        case SidebarLink(text=text, link=link):
            return {"text": text, "link": link}
        case SidebarGroup(text=text, children=children) if children:
            return {
                "text": text,
                "children": [_entry_to_mapping(child) for child in children],
            }
        case SidebarGroup(text=text):
            return {"text": text}
    msg = f"Unsupported sidebar entry: {entry!r}"
    raise TypeError(msg)


def _theme_to_mapping(theme: ThemeConfig) -> dict[str, typ.Any]:
    return {
        "logo": theme.logo,
        "navbar": [{"text": nav.text, "link": nav.link} for nav in theme.navbar],
        "repo": theme.repo,
        "docsDir": theme.docs_dir,
        "docsBranch": theme.docs_branch,
        "sidebarDepth": theme.sidebar_depth,
        "sidebar": [_entry_to_mapping(entry) for entry in theme.sidebar],
    }


def to_mapping(site: SiteConfig) -> dict[str, typ.Any]:
    """Return ``site`` as a plain mapping in the builder's option shape."""
    return {
        "lang": site.lang,
        "title": site.title,
        "description": site.description,
        "theme": _theme_to_mapping(site.theme),
    }


def dumps(site: SiteConfig, *, indent: int = 2) -> str:
    """Serialize ``site`` to JSON text, keeping non-ASCII labels readable."""
    return json.dumps(to_mapping(site), indent=indent, ensure_ascii=False) + "\n"


def loads(text: str) -> SiteConfig:
    """Parse JSON produced by :func:`dumps` back into a :class:`SiteConfig`."""
    payload = json.loads(text)
    if not isinstance(payload, dict):
        msg = "Top-level JSON structure must be an object."
        raise TypeError(msg)
    return site_config_from_mapping(payload)


__all__ = ["dumps", "loads", "to_mapping"]
