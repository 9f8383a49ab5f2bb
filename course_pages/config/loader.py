"""Load site configuration YAML or builder-shaped mappings into dataclasses."""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML

from .._constants import DEFAULT_LANG
from .helpers import (
    _build_theme_config,
    _optional_str,
    _require_mapping,
    _validate_lang,
)
from .models import SiteConfig

if typ.TYPE_CHECKING:
    from pathlib import Path


def site_config_from_mapping(payload: typ.Mapping[str, typ.Any]) -> SiteConfig:
    """Build a :class:`SiteConfig` from a mapping shaped like the builder options.

    Parameters
    ----------
    payload : Mapping[str, Any]
        Mapping with ``lang``, ``title``, ``description`` and a ``theme``
        mapping using the builder's camelCase option names (``docsDir``,
        ``docsBranch``, ``sidebarDepth``).

    Returns
    -------
    SiteConfig
        Immutable configuration with builder defaults applied for any theme
        option that is absent.

    Raises
    ------
    SiteConfigError
        If an entry has the wrong shape: a sidebar entry without ``text``, a
        nested group, a leaf that also declares children, an invalid locale or
        a negative ``sidebarDepth``.
    """
    theme_raw = payload.get("theme")
    theme_payload = {} if theme_raw is None else _require_mapping(theme_raw, "theme")
    lang = _validate_lang(_optional_str(payload.get("lang"), DEFAULT_LANG))
    return SiteConfig(
        lang=lang,
        title=_optional_str(payload.get("title")),
        description=_optional_str(payload.get("description")),
        theme=_build_theme_config(theme_payload),
    )


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the site and its sidebar.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yaml``).

    Returns
    -------
    SiteConfig
        Parsed site configuration.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If sections or entries are malformed.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from course_pages.config import load_site_config
    >>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> site.theme.sidebar[0].text  # doctest: +SKIP
    'Introduction'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    return site_config_from_mapping(loaded)


__all__ = ["load_site_config", "site_config_from_mapping"]
