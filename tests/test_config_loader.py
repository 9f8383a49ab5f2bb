"""Unit tests for loading site configuration from YAML and mappings.

These tests cover :func:`course_pages.config.load_site_config` and
:func:`course_pages.config.site_config_from_mapping`: the bundled
``config/site.yaml`` must describe the same site as the built-in course,
builder defaults apply to absent options, and malformed entries raise
:class:`~course_pages.config.SiteConfigError`.

Usage
-----
Run ``pytest tests/test_config_loader.py -v``. Only pytest's ``tmp_path``
fixture is required.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest

from course_pages.config import (
    SidebarGroup,
    SidebarLink,
    SiteConfigError,
    load_site_config,
    site_config_from_mapping,
)
from course_pages.course import SITE

REPO_ROOT = Path(__file__).resolve().parents[1]


def _site_payload(sidebar: list[typ.Any]) -> dict[str, typ.Any]:
    """Return a minimal builder-shaped payload wrapping ``sidebar``."""
    return {"title": "Fixture", "theme": {"sidebar": sidebar}}


def test_bundled_yaml_matches_builtin_course() -> None:
    """The bundled YAML should describe exactly the built-in course."""
    loaded = load_site_config(REPO_ROOT / "config" / "site.yaml")
    assert loaded == SITE, "config/site.yaml drifted from course_pages.course"


def test_defaults_apply_to_absent_options() -> None:
    """Absent theme options should take the builder defaults."""
    site = site_config_from_mapping({"title": "Bare"})
    assert site.lang == "en-US"
    assert site.description == ""
    assert site.theme.docs_branch == "main"
    assert site.theme.sidebar_depth == 2
    assert site.theme.sidebar == ()
    assert site.theme.navbar == ()


def test_group_without_children_key_is_placeholder() -> None:
    """A mapping with only ``text`` should become an empty group."""
    site = site_config_from_mapping(_site_payload([{"text": "GPIO"}]))
    assert site.theme.sidebar == (SidebarGroup("GPIO"),)


def test_navbar_entries_are_parsed() -> None:
    """Navbar mappings should become ordered NavLink entries."""
    site = site_config_from_mapping(
        {"theme": {"navbar": [{"text": "Home", "link": "/"}]}}
    )
    assert [(nav.text, nav.link) for nav in site.theme.navbar] == [("Home", "/")]


def test_values_are_kept_verbatim() -> None:
    """The loader should not rewrite labels, links or ``docsDir``."""
    site = site_config_from_mapping(
        {
            "title": " Padded ",
            "theme": {
                "docsDir": "src/",
                "sidebar": [{"text": " Intro ", "link": "/README.md"}],
            },
        }
    )
    assert site.title == " Padded "
    assert site.theme.docs_dir == "src/"
    assert site.theme.sidebar == (SidebarLink(" Intro ", "/README.md"),)


@pytest.mark.parametrize(
    ("sidebar", "fragment"),
    [
        ([{"link": "/README.md"}], "missing a 'text'"),
        ([{"text": "  ", "link": "/README.md"}], "missing a 'text'"),
        (["/README.md"], "must be a mapping"),
        (
            [{"text": "Both", "link": "/a.md", "children": []}],
            "both 'link' and 'children'",
        ),
        (
            [{"text": "Outer", "children": [{"text": "Inner", "children": []}]}],
            "groups cannot be nested",
        ),
        ([{"text": "Bad", "link": 42}], "non-string 'link'"),
        ([{"text": "Group", "children": "oops"}], "must be a list"),
    ],
)
def test_malformed_sidebar_entries_are_rejected(
    sidebar: list[typ.Any], fragment: str
) -> None:
    """Malformed sidebar entries should raise SiteConfigError."""
    with pytest.raises(SiteConfigError, match=fragment):
        site_config_from_mapping(_site_payload(sidebar))


def test_error_names_entry_position() -> None:
    """Errors should point at the offending sidebar position."""
    sidebar = [{"text": "Ok", "link": "/a.md"}, {"text": "Group", "children": [{}]}]
    with pytest.raises(SiteConfigError, match=r"theme\.sidebar\[1\]\.children\[0\]"):
        site_config_from_mapping(_site_payload(sidebar))


@pytest.mark.parametrize("lang", ["english", "e", "en_US", ""])
def test_invalid_locale_is_rejected(lang: str) -> None:
    """Locale codes should look like ``en`` or ``en-US``."""
    with pytest.raises(SiteConfigError, match="locale"):
        site_config_from_mapping({"lang": lang})


@pytest.mark.parametrize("depth", [-1, "2", True])
def test_invalid_sidebar_depth_is_rejected(depth: object) -> None:
    """``sidebarDepth`` should be a non-negative integer."""
    with pytest.raises(SiteConfigError, match="sidebarDepth"):
        site_config_from_mapping({"theme": {"sidebarDepth": depth}})


def test_missing_file_raises(tmp_path: Path) -> None:
    """Loading a missing file should raise FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_site_config(tmp_path / "absent.yaml")


def test_non_mapping_yaml_raises(tmp_path: Path) -> None:
    """A YAML list at the top level should raise TypeError."""
    path = tmp_path / "site.yaml"
    path.write_text("- text: Introduction\n", encoding="utf-8")
    with pytest.raises(TypeError):
        load_site_config(path)


def test_yaml_leaf_and_group(tmp_path: Path) -> None:
    """A small YAML file should load leaves and groups in order."""
    path = tmp_path / "site.yaml"
    path.write_text(
        """
lang: nl-BE
title: Cursus
theme:
  repo: owner/course
  docsDir: docs
  sidebar:
    - text: Start
      link: /README.md
    - text: Deel 1
      children:
        - text: Les 1
          link: /01/README.md
        """.strip()
        + "\n",
        encoding="utf-8",
    )
    site = load_site_config(path)
    assert site.lang == "nl-BE"
    assert site.theme.sidebar == (
        SidebarLink("Start", "/README.md"),
        SidebarGroup("Deel 1", (SidebarLink("Les 1", "/01/README.md"),)),
    )
