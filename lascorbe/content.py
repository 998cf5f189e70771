"""Content model for the blog.

Every type here is an immutable record describing content that was already
rendered to HTML. The theme only reads these objects; plugins that need to
change a body build a new record with ``with_body``.

Key classes:
- Tag: A label attached to posts.
- Item: A single dated post.
- Page: A standalone page such as "About".
- Section: A named group of items.
- Index: The home page location.
- TagListPage: The page listing every known tag.
- TagDetailsPage: The page listing the posts of one tag.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import datetime

from .site import ItemMetadata, SectionID
from .utils import normalize_tag


@dataclass(frozen=True, order=True)
class Tag:
    """A label used to group and filter items.

    Attributes:
        string: The label as written by the author.
    """

    string: str

    @property
    def normalized_string(self) -> str:
        """Return the URL slug of the tag."""
        return normalize_tag(self.string)

    def __str__(self) -> str:
        return self.string


@dataclass(frozen=True)
class Item:
    """A single timestamped post.

    Attributes:
        section_id: Section the post belongs to.
        path: Site-relative path, e.g. "posts/hello-world".
        title: Post title.
        date: Publish date.
        body: Rendered HTML body.
        tags: Ordered tags of the post.
        metadata: Description and reading time.
        image_path: Optional social image for the post.
    """

    section_id: SectionID
    path: str
    title: str
    date: datetime
    body: str = ""
    tags: tuple[Tag, ...] = ()
    metadata: ItemMetadata = field(default_factory=ItemMetadata)
    image_path: str | None = None

    @property
    def description(self) -> str:
        return self.metadata.description

    def with_body(self, body: str) -> Item:
        return dataclasses.replace(self, body=body)


@dataclass(frozen=True)
class Page:
    """A standalone, non-timestamped page."""

    path: str
    title: str
    body: str = ""
    description: str = ""
    image_path: str | None = None

    def with_body(self, body: str) -> Page:
        return dataclasses.replace(self, body=body)


@dataclass(frozen=True)
class Section:
    """A named grouping of items.

    Attributes:
        id: Stable section key.
        title: Heading of the section page; defaults to the capitalized id.
        items: Items of the section, in source order.
        description: Optional description for the head.
        image_path: Optional social image.
    """

    id: SectionID
    title: str = ""
    items: tuple[Item, ...] = ()
    description: str = ""
    image_path: str | None = None

    def __post_init__(self) -> None:
        if not self.title:
            object.__setattr__(self, "title", self.id.value.capitalize())

    @property
    def path(self) -> str:
        return self.id.value


@dataclass(frozen=True)
class Index:
    """The home page. Its empty title and description fall back to the site's."""

    title: str = ""
    description: str = ""
    path: str = ""
    image_path: str | None = None


@dataclass(frozen=True)
class TagListPage:
    """Synthetic page whose content is the set of all known tags."""

    tags: frozenset[Tag] = frozenset()
    title: str = "Tags"
    description: str = ""
    path: str = "tags"
    image_path: str | None = None

    def sorted_tags(self) -> list[Tag]:
        """Return one tag per slug in alphabetical order, case-insensitively.

        Tags sharing a slug, like "iOS" and "ios", are published on the same
        page; the first one in sort order represents them.
        """
        by_slug: dict[str, Tag] = {}
        for tag in sorted(self.tags, key=lambda tag: (tag.string.lower(), tag.string)):
            by_slug.setdefault(tag.normalized_string, tag)
        return list(by_slug.values())


@dataclass(frozen=True)
class TagDetailsPage:
    """Synthetic page listing the items of one tag."""

    tag: Tag
    description: str = ""
    image_path: str | None = None

    @property
    def title(self) -> str:
        return self.tag.string

    @property
    def path(self) -> str:
        return f"tags/{self.tag.normalized_string}"
