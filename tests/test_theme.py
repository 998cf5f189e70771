from lascorbe.content import Page, Section, Tag, TagDetailsPage
from lascorbe.context import PublishingContext
from lascorbe.protocols import HTMLFactory
from lascorbe.site import SectionID
from lascorbe.theme import BlogTheme, Theme


def _context(site, items, pages=()):
    return PublishingContext(
        site,
        sections=[Section(SectionID.POSTS, items=tuple(items)), Section(SectionID.ABOUT)],
        pages=pages,
    )


def test_index_orders_posts_newest_first(site, make_item, soup):
    items = [make_item("Day 1", day=1), make_item("Day 3", day=3), make_item("Day 2", day=2)]
    html = BlogTheme().make_index_html(_context(site, items))
    doc = soup(html)
    titles = [h.get_text() for h in doc.select("h2.mini-post-title")]
    assert titles == ["Day 3", "Day 2", "Day 1"]
    assert doc.select_one("h1.content-subhead").get_text() == "Latest Posts"
    assert doc.title.string == "Bar"


def test_documents_share_layout(site, make_item, soup):
    html = BlogTheme().make_index_html(_context(site, [make_item()]))
    assert html.startswith("<!DOCTYPE html>")
    doc = soup(html)
    assert doc.html["lang"] == "en"
    assert doc.head is not None
    grid = doc.body.select_one("div#layout.pure-g")
    children = grid.find_all(recursive=False)
    assert children[0]["class"][0] == "sidebar"
    assert children[1]["class"][0] == "content"
    assert children[2].name == "footer"


def test_rendering_is_idempotent(site, make_item):
    theme = BlogTheme()
    item = make_item(tags=["Swift"])
    context = _context(site, [item])
    assert theme.make_item_html(item, context) == theme.make_item_html(item, context)
    assert theme.make_index_html(context) == theme.make_index_html(context)


def test_item_page_uses_item_head_and_selects_section(site, make_item, soup):
    item = make_item(title="Hello", image_path="cover.png")
    doc = soup(BlogTheme().make_item_html(item, _context(site, [item])))
    assert doc.title.string == "Hello | Bar"
    assert doc.find("meta", attrs={"name": "twitter:card"})["content"] == "summary_large_image"
    assert doc.find("meta", attrs={"name": "description"})["content"] == "A post"
    active = doc.select_one("a.pure-button-active")
    assert active["href"] == "/posts"
    assert doc.select_one("h2.post-title").get_text() == "Hello"


def test_section_page_shows_title(site, soup):
    context = _context(site, [])
    doc = soup(BlogTheme().make_section_html(context.section(SectionID.POSTS), context))
    assert doc.select_one("div.content h1").get_text() == "Posts"
    assert doc.title.string == "Posts | Bar"


def test_page_html(site, soup):
    about = Page(path="uses", title="Uses", body="<p>Tools</p>")
    context = _context(site, [], pages=[about])
    doc = soup(BlogTheme().make_page_html(about, context))
    assert doc.select_one("h1.content-subhead").get_text() == "Uses"
    assert doc.select_one("div.post-description-text p").get_text() == "Tools"


def test_tag_list_html_lists_all_tags(site, make_item, soup):
    items = [make_item("A", tags=["Swift", "iOS"]), make_item("B", tags=["Swift"])]
    context = _context(site, items)
    doc = soup(BlogTheme().make_tag_list_html(context.tag_list_page(), context))
    links = doc.select("div.content div.mini-post-tags a")
    assert [a.get_text() for a in links] == ["iOS", "Swift"]
    assert doc.title.string == "Tags | Bar"


def test_tag_details_filters_and_sorts(site, make_item, soup):
    items = [
        make_item("Old", day=1, tags=["iOS"]),
        make_item("Other", day=2, tags=["Android"]),
        make_item("New", day=3, tags=["iOS", "Swift"]),
    ]
    context = _context(site, items)
    page = TagDetailsPage(Tag("iOS"))
    doc = soup(BlogTheme().make_tag_details_html(page, context))
    assert doc.select_one("h1.content-subhead").get_text() == "Ios posts"
    assert [h.get_text() for h in doc.select("h2.mini-post-title")] == ["New", "Old"]
    assert doc.find("link", rel="canonical")["href"] == "https://example.com/tags/ios"


def test_theme_wraps_blog_factory():
    theme = Theme.blog()
    assert isinstance(theme.html_factory, BlogTheme)
    assert isinstance(theme.html_factory, HTMLFactory)
