"""Publishing context for one site-generation run.

The context holds the site and its content for the duration of a single
publish call and answers the queries the theme needs: all items, items
with a tag, the set of known tags. Plugins may swap content bodies through
``replace_items``/``replace_pages`` before rendering starts.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import replace

from .collections import ItemCollection, SortOrder
from .content import Index, Item, Page, Section, Tag, TagDetailsPage, TagListPage
from .site import SectionID, Site

logger = logging.getLogger(__name__)


class PublishingContext:
    """Content and queries available to a theme while rendering.

    Attributes:
        site: Site configuration.
        index: Home page location.
        sections: Sections keyed by id, in declaration order.
        pages: Standalone pages keyed by path.
    """

    def __init__(
        self,
        site: Site,
        sections: Iterable[Section] = (),
        pages: Iterable[Page] = (),
        index: Index | None = None,
    ):
        self.site = site
        self.index = index or Index()
        self.sections: dict[SectionID, Section] = {}
        for section in sections:
            if section.id in self.sections:
                raise ValueError(f"Duplicate section: {section.id.value}")
            self.sections[section.id] = section
        self.pages: dict[str, Page] = {}
        for page in pages:
            if page.path in self.pages:
                raise ValueError(f"Duplicate page path: {page.path}")
            self.pages[page.path] = page

    def section(self, section_id: SectionID) -> Section:
        """Return a section, creating an empty one for unknown ids."""
        return self.sections.get(section_id) or Section(section_id)

    @property
    def _items(self) -> ItemCollection:
        return ItemCollection(
            item for section in self.sections.values() for item in section.items
        )

    def all_items(
        self, sorted_by: str = "date", order: SortOrder = SortOrder.DESCENDING
    ) -> ItemCollection:
        """Return the items of every section, sorted.

        Args:
            sorted_by: Item attribute to sort on.
            order: Sort direction.

        Returns:
            Sorted ItemCollection.
        """
        return self._items.sorted(by=sorted_by, order=order)

    def items(
        self,
        tagged_with: Tag | str,
        sorted_by: str = "date",
        order: SortOrder = SortOrder.DESCENDING,
    ) -> ItemCollection:
        """Return the items carrying a tag, sorted.

        Args:
            tagged_with: Tag, or tag label, to filter on.
            sorted_by: Item attribute to sort on.
            order: Sort direction.

        Returns:
            Sorted ItemCollection containing only tagged items.
        """
        return self._items.with_tag(tagged_with).sorted(by=sorted_by, order=order)

    @property
    def all_tags(self) -> frozenset[Tag]:
        return frozenset(tag for item in self._items for tag in item.tags)

    def tag_list_page(self) -> TagListPage:
        return TagListPage(tags=self.all_tags)

    def tag_details_pages(self) -> list[TagDetailsPage]:
        return [TagDetailsPage(tag) for tag in self.tag_list_page().sorted_tags()]

    def replace_items(self, transform: Callable[[Item], Item]) -> None:
        """Replace every item with the result of ``transform``.

        Args:
            transform: Function returning the new version of an item.
        """
        for section_id, section in self.sections.items():
            items = tuple(transform(item) for item in section.items)
            self.sections[section_id] = replace(section, items=items)
        logger.debug("Replaced items in %d sections", len(self.sections))

    def replace_pages(self, transform: Callable[[Page], Page]) -> None:
        """Replace every standalone page with the result of ``transform``."""
        self.pages = {path: transform(page) for path, page in self.pages.items()}
