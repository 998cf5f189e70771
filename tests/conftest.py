from datetime import datetime

import pytest
from bs4 import BeautifulSoup

from lascorbe.content import Item, Tag
from lascorbe.site import ItemMetadata, Language, SectionID, Site, SocialMedia


@pytest.fixture
def site():
    return Site(
        name="Bar",
        url="https://example.com",
        description="A site about things",
        language=Language.ENGLISH,
        social_media=(SocialMedia.github("bar"),),
        twitter_handle="bar",
    )


@pytest.fixture
def make_item():
    def factory(
        title="Hello",
        day=1,
        tags=(),
        path=None,
        body="<p>Hi</p>",
        description="A post",
        image_path=None,
    ):
        slug = title.lower().replace(" ", "-")
        return Item(
            section_id=SectionID.POSTS,
            path=path or f"posts/{slug}",
            title=title,
            date=datetime(2020, 1, day),
            body=body,
            tags=tuple(Tag(t) for t in tags),
            metadata=ItemMetadata(description=description, time_to_read="5 min"),
            image_path=image_path,
        )

    return factory


@pytest.fixture
def soup():
    def parse(markup):
        return BeautifulSoup(str(markup), "html.parser")

    return parse
