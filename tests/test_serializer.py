"""Unit tests for converting site configuration to the builder shape.

The serializer must emit the option names the site builder expects, keep
placeholder groups as bare ``{text}`` entries, and round-trip any valid
configuration back to an equal value.
"""

from __future__ import annotations

import json

import pytest

from course_pages.config import (
    NavLink,
    SidebarGroup,
    SidebarLink,
    SiteConfig,
    ThemeConfig,
    dumps,
    loads,
    to_mapping,
)
from course_pages.course import SITE


def test_mapping_uses_builder_option_names() -> None:
    """Theme keys should use the builder's camelCase names."""
    theme = to_mapping(SITE)["theme"]
    assert list(theme) == [
        "logo",
        "navbar",
        "repo",
        "docsDir",
        "docsBranch",
        "sidebarDepth",
        "sidebar",
    ]
    assert theme["docsDir"] == "src"
    assert theme["docsBranch"] == "master"
    assert theme["sidebarDepth"] == 1


def test_mapping_matches_authored_entries() -> None:
    """Leaves, groups and placeholders should keep their authored shape."""
    sidebar = to_mapping(SITE)["theme"]["sidebar"]
    assert sidebar[0] == {"text": "Introduction", "link": "/README.md"}
    assert sidebar[3] == {
        "text": "Blinky",
        "children": [
            {"text": "Blinky", "link": "/03-blinky/README.md"},
            {"text": "Blinky improved", "link": "/03-blinky/blinky-improved.md"},
            {"text": "mbed", "link": "/03-blinky/mbed.md"},
        ],
    }
    assert sidebar[4] == {"text": "GPIO"}


def test_json_keeps_non_ascii_labels() -> None:
    """Labels such as 'I²C' should be written verbatim."""
    text = dumps(SITE)
    assert '"I²C"' in text
    assert json.loads(text)["title"] == "Microcontrollers"


def test_round_trip_is_identity() -> None:
    """Re-parsing serialized output should produce an equal value."""
    assert loads(dumps(SITE)) == SITE
    assert dumps(loads(dumps(SITE))) == dumps(SITE)


def test_round_trip_with_navbar_and_defaults() -> None:
    """Navbar entries and non-course options should round-trip too."""
    site = SiteConfig(
        lang="de",
        title="Kurs",
        description="",
        theme=ThemeConfig(
            navbar=(NavLink("GitHub", "https://github.com/owner/kurs"),),
            sidebar=(SidebarGroup("Leer"), SidebarLink("Start", "/index.html")),
        ),
    )
    assert loads(dumps(site)) == site


def test_round_trip_keeps_padding_and_slashes() -> None:
    """Padded labels and a slash-suffixed ``docs_dir`` should survive re-parsing."""
    site = SiteConfig(
        lang="en",
        title="T ",
        description=" padded ",
        theme=ThemeConfig(
            repo="owner/course ",
            docs_dir="src/",
            sidebar=(
                SidebarLink(" Intro", "/README.md"),
                SidebarGroup("Group ", (SidebarLink("Child ", "/child.md"),)),
            ),
        ),
    )
    assert loads(dumps(site)) == site


def test_loads_rejects_non_object_json() -> None:
    """A JSON array at the top level should raise TypeError."""
    with pytest.raises(TypeError):
        loads("[]")
