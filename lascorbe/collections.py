from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from enum import Enum
from operator import attrgetter

from .content import Item, Tag
from .site import SectionID


class SortOrder(Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


class ItemCollection(Sequence[Item]):
    """Lightweight helper for querying the items of a publishing run."""

    def __init__(self, items: Iterable[Item]):
        self._items = list(items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, item):
        return self._items[item]

    def in_section(self, section_id: SectionID) -> ItemCollection:
        return ItemCollection(i for i in self._items if i.section_id == section_id)

    def with_tag(self, tag: Tag | str) -> ItemCollection:
        """Return the items carrying a tag, matched by slug.

        "iOS" and "ios" share the slug "ios", so either finds both.
        """
        slug = (tag if isinstance(tag, Tag) else Tag(tag)).normalized_string
        return ItemCollection(
            i for i in self._items if any(t.normalized_string == slug for t in i.tags)
        )

    def sorted(
        self, by: str = "date", order: SortOrder = SortOrder.DESCENDING
    ) -> ItemCollection:
        """Sort items by one of their attributes.

        The sort is stable: items with equal keys keep their source order
        whichever direction is requested.

        Args:
            by: Item attribute to sort on, "date" by default.
            order: Sort direction, newest first by default.

        Returns:
            A new ItemCollection with sorted items.
        """
        return ItemCollection(
            sorted(
                self._items,
                key=attrgetter(by),
                reverse=order is SortOrder.DESCENDING,
            )
        )

    def latest(self, count: int = 5) -> ItemCollection:
        return ItemCollection(self.sorted()[:count])

    def __repr__(self) -> str:  # pragma: no cover - for debugging
        return f"ItemCollection({len(self._items)} items)"
