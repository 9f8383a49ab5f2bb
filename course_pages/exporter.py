"""Render the site builder's entry-point configuration file.

:class:`VuePressConfigExporter` turns a :class:`~course_pages.config.SiteConfig`
into the ``.vuepress/config.ts`` module the builder loads (a
``defineUserConfig`` call wrapping ``defaultTheme`` options) or into the
equivalent JSON document.

Example
-------
>>> from pathlib import Path
>>> from course_pages.course import SITE
>>> from course_pages.exporter import VuePressConfigExporter
>>> exporter = VuePressConfigExporter(SITE)
>>> exporter.render_typescript().splitlines()[0]
"import { defaultTheme, defineUserConfig } from 'vuepress'"
>>> exporter.run(Path("src/.vuepress/config.ts"))  # doctest: +SKIP
PosixPath('src/.vuepress/config.ts')
"""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from .config import dumps

if typ.TYPE_CHECKING:
    from .config import SiteConfig

EXPORT_FORMATS = ("ts", "json")


def _js_literal(value: object) -> str:
    """Return ``value`` as a JavaScript literal, keeping non-ASCII text."""
    return json.dumps(value, ensure_ascii=False)


class VuePressConfigExporter:
    """Write the builder configuration for a site."""

    def __init__(self, site: SiteConfig, *, templates_dir: Path | None = None) -> None:
        """Initialize the exporter.

        Parameters
        ----------
        site : SiteConfig
            Configuration to export.
        templates_dir : Path, optional
            Directory containing the Jinja templates. Defaults to the
            ``course_pages/templates`` directory when ``None``.
        """
        self.site = site
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["js"] = _js_literal
        self.template = self.env.get_template("vuepress_config.ts.jinja")

    def render_typescript(self) -> str:
        """Return the ``config.ts`` module text."""
        return self.template.render(site=self.site, theme=self.site.theme)

    def render_json(self) -> str:
        """Return the configuration as a JSON document."""
        return dumps(self.site)

    def run(self, output_path: Path, fmt: str = "ts") -> Path:
        """Render the configuration in ``fmt`` and write it to ``output_path``.

        Raises
        ------
        ValueError
            If ``fmt`` is not one of ``"ts"`` or ``"json"``.
        """
        match fmt:
            case "ts":
                text = self.render_typescript()
            case "json":
                text = self.render_json()
            case _:
                known = ", ".join(EXPORT_FORMATS)
                msg = f"Unknown export format '{fmt}'. Known formats: {known}"
                raise ValueError(msg)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text, encoding="utf-8")
        return output_path


__all__ = ["EXPORT_FORMATS", "VuePressConfigExporter"]
