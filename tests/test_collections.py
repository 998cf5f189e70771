from datetime import datetime

from lascorbe.collections import ItemCollection, SortOrder
from lascorbe.content import Item, Tag
from lascorbe.site import SectionID


def _item(title, day, section=SectionID.POSTS, tags=()):
    return Item(
        section_id=section,
        path=f"{section.value}/{title.lower()}",
        title=title,
        date=datetime(2024, 1, day),
        tags=tuple(Tag(t) for t in tags),
    )


def test_item_collection_filters_and_latest():
    items = ItemCollection(
        [
            _item("A", 2),
            _item("B", 3, tags=["python"]),
            _item("C", 1, section=SectionID.ABOUT, tags=["python"]),
        ]
    )
    assert len(items) == 3
    assert [i.title for i in items.in_section(SectionID.POSTS)] == ["A", "B"]
    assert [i.title for i in items.with_tag("python")] == ["B", "C"]
    assert [i.title for i in items.with_tag(Tag("python"))] == ["B", "C"]
    assert [i.title for i in items.with_tag("Python")] == ["B", "C"]
    assert [i.title for i in items.latest(2)] == ["B", "A"]


def test_sorting_directions():
    items = ItemCollection([_item("A", 1), _item("C", 3), _item("B", 2)])
    assert [i.title for i in items.sorted()] == ["C", "B", "A"]
    ascending = items.sorted(order=SortOrder.ASCENDING)
    assert [i.title for i in ascending] == ["A", "B", "C"]
    by_title = items.sorted(by="title", order=SortOrder.ASCENDING)
    assert [i.title for i in by_title] == ["A", "B", "C"]


def test_sorting_is_stable_on_equal_dates():
    items = ItemCollection([_item("First", 1), _item("Second", 1), _item("Third", 1)])
    assert [i.title for i in items.sorted()] == ["First", "Second", "Third"]
    ascending = items.sorted(order=SortOrder.ASCENDING)
    assert [i.title for i in ascending] == ["First", "Second", "Third"]
