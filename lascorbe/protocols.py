"""Protocol definitions for the theme.

These protocols describe what the template functions and the publish step
depend on, so content types and plugins stay interchangeable.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .content import Item, Page, Section, TagDetailsPage, TagListPage
    from .context import PublishingContext


@runtime_checkable
class Location(Protocol):
    """Anything that is published at a path and described in the page head.

    Attributes:
        path: Site-relative path without a leading slash ("" for the index).
        title: Title shown in the head; may be empty.
        description: Description for meta tags; may be empty.
        image_path: Optional social image, relative to the site root.
    """

    path: str
    title: str
    description: str
    image_path: str | None


@runtime_checkable
class Plugin(Protocol):
    """Protocol for publishing plugins.

    A plugin is installed once per publishing run, before any rendering,
    and may replace the content held by the context.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return a human-readable plugin name."""
        ...

    @abstractmethod
    def install(self, context: PublishingContext) -> None:
        """Install the plugin into a publishing context.

        Args:
            context: Context of the current publishing run.
        """
        ...

    @abstractmethod
    def assets(self) -> dict[str, str]:
        """Return extra files to publish, keyed by site-relative path."""
        ...


@runtime_checkable
class HTMLFactory(Protocol):
    """Protocol for themes: one rendering method per page kind.

    Each method returns a complete HTML document for its location.
    """

    @abstractmethod
    def make_index_html(self, context: PublishingContext) -> str: ...

    @abstractmethod
    def make_section_html(self, section: Section, context: PublishingContext) -> str: ...

    @abstractmethod
    def make_item_html(self, item: Item, context: PublishingContext) -> str: ...

    @abstractmethod
    def make_page_html(self, page: Page, context: PublishingContext) -> str: ...

    @abstractmethod
    def make_tag_list_html(
        self, page: TagListPage, context: PublishingContext
    ) -> str | None: ...

    @abstractmethod
    def make_tag_details_html(
        self, page: TagDetailsPage, context: PublishingContext
    ) -> str | None: ...
