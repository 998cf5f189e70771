"""Theme assembly.

BlogTheme wires the template functions of ``nodes`` into one document per
page kind. Every document has the same shape: the site language, the head
of the location being rendered, and a body grid of sidebar, main content
and footer.
"""

from __future__ import annotations

import logging

from markupsafe import Markup

from . import nodes
from .content import Item, Page, Section, TagDetailsPage, TagListPage
from .context import PublishingContext
from .protocols import HTMLFactory, Location
from .site import SectionID
from .templates import default_engine
from .utils import capitalize_words

logger = logging.getLogger(__name__)

INDEX_TITLE = "Latest Posts"


class BlogTheme:
    """HTML factory of the blog, one method per page kind."""

    def make_index_html(self, context: PublishingContext) -> str:
        return self._document(
            context,
            context.index,
            nodes.posts(context.all_items(), context.site, title=INDEX_TITLE),
        )

    def make_section_html(self, section: Section, context: PublishingContext) -> str:
        return self._document(
            context,
            section,
            nodes.page_content(Markup("<h1>{}</h1>").format(section.title)),
            selected=section.id,
        )

    def make_item_html(self, item: Item, context: PublishingContext) -> str:
        return self._document(
            context,
            item,
            nodes.post(item, context.site),
            selected=item.section_id,
        )

    def make_page_html(self, page: Page, context: PublishingContext) -> str:
        return self._document(context, page, nodes.page(page, context.site))

    def make_tag_list_html(self, page: TagListPage, context: PublishingContext) -> str:
        return self._document(
            context,
            page,
            nodes.page_content(nodes.tag_list(page, context.site)),
        )

    def make_tag_details_html(
        self, page: TagDetailsPage, context: PublishingContext
    ) -> str:
        """Render the posts of one tag, newest first."""
        title = f"{capitalize_words(page.tag.string)} posts"
        return self._document(
            context,
            page,
            nodes.posts(
                context.items(tagged_with=page.tag), context.site, title=title
            ),
        )

    def _document(
        self,
        context: PublishingContext,
        location: Location,
        main: Markup,
        selected: SectionID | None = None,
    ) -> str:
        """Assemble a complete HTML document.

        Args:
            context: Publishing context providing the site.
            location: Location whose metadata fills the head.
            main: Main column content.
            selected: Section highlighted in the sidebar.

        Returns:
            The rendered HTML document.
        """
        site = context.site
        logger.debug("Rendering /%s", location.path)
        document = default_engine().render(
            "document.html.jinja",
            language=site.language.value,
            head=nodes.head(location, site),
            body=nodes.grid(
                nodes.sidebar(site, selected=selected),
                main,
                nodes.footer(site),
            ),
        )
        return str(document)


class Theme:
    """A named theme wrapping an HTML factory.

    Attributes:
        html_factory: Object providing the make_*_html methods.
    """

    def __init__(self, html_factory: HTMLFactory):
        self.html_factory = html_factory

    @classmethod
    def blog(cls) -> Theme:
        return cls(BlogTheme())
