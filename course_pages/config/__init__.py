"""Load, validate and serialize the course site configuration.

This subpackage holds the strongly typed dataclasses (:class:`SiteConfig`,
:class:`ThemeConfig`, :class:`SidebarLink`, :class:`SidebarGroup`) describing
the navigation metadata handed to the site builder, together with the loader
that parses YAML or builder-shaped mappings and the serializer that writes the
same shape back out.

Examples
--------
>>> from pathlib import Path
>>> from course_pages.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> [entry.text for entry in site.theme.sidebar][:2]  # doctest: +SKIP
['Introduction', 'Microcontrollers']
"""

from .loader import load_site_config, site_config_from_mapping
from .models import (
    NavLink,
    SidebarEntry,
    SidebarGroup,
    SidebarLink,
    SiteConfig,
    SiteConfigError,
    ThemeConfig,
)
from .serializer import dumps, loads, to_mapping

__all__ = [
    "NavLink",
    "SidebarEntry",
    "SidebarGroup",
    "SidebarLink",
    "SiteConfig",
    "SiteConfigError",
    "ThemeConfig",
    "dumps",
    "load_site_config",
    "loads",
    "site_config_from_mapping",
    "to_mapping",
]
