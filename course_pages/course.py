"""Navigation metadata for the Microcontrollers course site.

:func:`build_course_config` returns the configuration the site builder
consumes: site metadata, default-theme options and the ordered sidebar. The
module-level :data:`SITE` is its result, built once at import time.

Chapters that have not been written yet appear as groups without children so
their slot in the navigation is reserved.

Examples
--------
>>> from course_pages.course import SITE
>>> SITE.title
'Microcontrollers'
>>> [entry.text for entry in SITE.theme.sidebar][:4]
['Introduction', 'Microcontrollers', 'Programming', 'Blinky']
"""

from __future__ import annotations

from .config import SidebarGroup, SidebarLink, SiteConfig, ThemeConfig

PLACEHOLDER_CHAPTERS = (
    "GPIO",
    "UART",
    "Interrupts",
    "Timers",
    "I²C",
    "SPI",
    "Analog to Digital",
    "Digital to Analog",
)


def build_course_config() -> SiteConfig:
    """Return the site configuration for the Microcontrollers course."""
    sidebar = (
        SidebarLink("Introduction", "/README.md"),
        SidebarLink("Microcontrollers", "/01-microcontrollers/README.md"),
        SidebarLink("Programming", "/02-programming/README.md"),
        SidebarGroup(
            "Blinky",
            children=(
                SidebarLink("Blinky", "/03-blinky/README.md"),
                SidebarLink("Blinky improved", "/03-blinky/blinky-improved.md"),
                SidebarLink("mbed", "/03-blinky/mbed.md"),
            ),
        ),
        *(SidebarGroup(chapter) for chapter in PLACEHOLDER_CHAPTERS),
    )
    return SiteConfig(
        lang="en-US",
        title="Microcontrollers",
        description=(
            "Microcontrollers Course for VIVES University of Applied Sciences "
            "(Bachelor Degree)"
        ),
        theme=ThemeConfig(
            logo="",
            navbar=(),
            repo="sillevl/course-microcontrollers",
            docs_dir="src",
            docs_branch="master",
            sidebar_depth=1,
            sidebar=sidebar,
        ),
    )


SITE = build_course_config()

__all__ = ["PLACEHOLDER_CHAPTERS", "SITE", "build_course_config"]
