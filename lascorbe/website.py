"""Publishing entry point.

This module renders every page of the site with a theme. It performs no
I/O: the result maps output paths to HTML documents and the caller decides
where to write them.

Key functions:
- publish: Build a context from content, install plugins, render the site.
- render_site: Render every location of an existing context.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from .content import Page, Section
from .context import PublishingContext
from .plugins import code_highlight
from .protocols import Location, Plugin
from .site import LASCORBE, SectionID, Site
from .theme import Theme

logger = logging.getLogger(__name__)


class RenderError(Exception):
    """Error while rendering a location, with the location's path.

    Attributes:
        location_path: Site-relative path of the location being rendered.
        message: Human-readable error message.
        original_error: The original exception that was caught.
    """

    def __init__(
        self,
        location_path: str,
        message: str,
        original_error: Exception | None = None,
    ):
        self.location_path = location_path
        self.message = message
        self.original_error = original_error
        super().__init__(f"/{location_path}: {message}")


def output_path(location: Location) -> str:
    """Return the output file of a location, e.g. "posts/hello/index.html"."""
    path = location.path.strip("/")
    return f"{path}/index.html" if path else "index.html"


def _render(location: Location, make: Callable[..., str | None], *args: Any) -> str | None:
    try:
        return make(*args)
    except Exception as exc:
        raise RenderError(
            location.path, f"{type(exc).__name__}: {exc}", exc
        ) from exc


def render_site(context: PublishingContext, theme: Theme) -> dict[str, str]:
    """Render every location of a context.

    Args:
        context: Content of the publishing run.
        theme: Theme whose HTML factory renders each page kind.

    Returns:
        Mapping of output path to HTML document, index first.

    Raises:
        RenderError: If any location fails to render.
    """
    factory = theme.html_factory
    documents: dict[str, str] = {}

    def add(location: Location, html: str | None) -> None:
        if html is None:
            return
        target = output_path(location)
        if target in documents:
            raise RenderError(location.path, f"duplicate output path {target}")
        documents[target] = html

    add(context.index, _render(context.index, factory.make_index_html, context))
    for section_id in SectionID:
        section = context.section(section_id)
        add(section, _render(section, factory.make_section_html, section, context))
        for item in section.items:
            add(item, _render(item, factory.make_item_html, item, context))
    for page in context.pages.values():
        add(page, _render(page, factory.make_page_html, page, context))

    tag_list_page = context.tag_list_page()
    add(
        tag_list_page,
        _render(tag_list_page, factory.make_tag_list_html, tag_list_page, context),
    )
    for details in context.tag_details_pages():
        add(details, _render(details, factory.make_tag_details_html, details, context))

    logger.info("Rendered %d documents for %s", len(documents), context.site.url)
    return documents


def publish(
    site: Site = LASCORBE,
    theme: Theme | None = None,
    sections: Iterable[Section] = (),
    pages: Iterable[Page] = (),
    plugins: Iterable[Plugin] | None = None,
) -> dict[str, str]:
    """Publish a site: install plugins, then render every page.

    Args:
        site: Site configuration.
        theme: Theme to render with; the blog theme by default.
        sections: Sections with their items.
        pages: Standalone pages.
        plugins: Plugins installed before rendering; code highlighting with
            the "la-" class prefix by default.

    Returns:
        Mapping of output path to HTML document, followed by the files
        plugins contribute, e.g. "highlight.css".

    Raises:
        RenderError: If a location fails to render or two outputs share a
            path.
    """
    installed = [code_highlight()] if plugins is None else list(plugins)
    context = PublishingContext(site, sections=sections, pages=pages)
    for plugin in installed:
        logger.debug("Installing plugin %s", plugin.name)
        plugin.install(context)
    documents = render_site(context, theme or Theme.blog())
    for plugin in installed:
        for path, content in plugin.assets().items():
            if path in documents:
                raise RenderError(path, f"duplicate output path {path}")
            documents[path] = content
    return documents
