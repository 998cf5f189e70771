"""Template rendering engine for the theme.

This module uses Jinja2 to render the theme's layouts and partials, which
ship inside the package. Rendered fragments are returned as Markup so they
can be nested into other templates without being escaped again.

Key class:
- TemplateEngine: Loads the packaged templates and renders them.
"""

from __future__ import annotations

import functools
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape
from markupsafe import Markup

from .html_utils import root_relative

__all__ = ["TEMPLATES_ROOT", "TemplateEngine", "default_engine"]

TEMPLATES_ROOT = Path(__file__).parent


class TemplateEngine:
    """Template rendering engine using Jinja2.

    Attributes:
        template_dir: Directory holding the layouts/ and partials/ folders.
        env: Jinja2 environment.
    """

    def __init__(self, template_dir: Path = TEMPLATES_ROOT):
        """Initialize the template engine.

        Args:
            template_dir: Directory with layouts/ and partials/ folders.
        """
        self.template_dir = template_dir
        self.env = Environment(
            loader=FileSystemLoader(
                [
                    template_dir / "layouts",
                    template_dir / "partials",
                ]
            ),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=False,
        )
        self._install_globals()

    def _install_globals(self) -> None:
        """Install global helpers in the Jinja environment."""
        self.env.globals["root_relative"] = root_relative

    def render(self, name: str, **context: Any) -> Markup:
        """Render a template to a markup fragment.

        Args:
            name: Template file name, e.g. "head.html.jinja".
            **context: Variables to make available in the template.

        Returns:
            Markup-safe rendered HTML.
        """
        template = self.env.get_template(name)
        return Markup(template.render(**context))


@functools.lru_cache(maxsize=None)
def default_engine() -> TemplateEngine:
    """Return the shared engine over the packaged templates."""
    return TemplateEngine()
