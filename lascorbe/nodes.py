"""Template functions of the blog theme.

Each function maps a content object and the site to a Markup fragment.
They are pure: no I/O, no shared state, and rendering the same input twice
gives identical markup. Larger fragments come from the packaged Jinja
partials; the small wrappers are built directly with Markup.

Key functions:
- head: The <head> element for a location.
- page, post, post_excerpt: Body fragments for pages, posts and list entries.
- tag_list, tag_list_post: Tag links for excerpts and full posts.
- posts: A titled list of post excerpts.
- sidebar, footer, grid, page_content: Layout pieces.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from markupsafe import Markup

from .content import Item, Page, Tag, TagListPage
from .html_utils import encode_query_url, join_root_url, root_relative
from .protocols import Location
from .site import SectionID, Site
from .templates import default_engine
from .utils import date_and_reading_time


@dataclass(frozen=True)
class StylesheetLink:
    href: str
    integrity: str | None = None
    crossorigin: str | None = None


@dataclass(frozen=True)
class IconLink:
    rel: str
    href: str
    type: str | None = None
    sizes: str | None = None


PINNED_STYLESHEET = StylesheetLink(
    href="https://unpkg.com/purecss@1.0.1/build/pure-min.css",
    integrity="sha384-oAOxQR6DkCoMliIh8yFnu25d7Eq/PHS21PClpwjOTeU2jRSq11vu66rf90/cZr47",
    crossorigin="anonymous",
)

STYLESHEETS = (
    "https://unpkg.com/purecss@1.0.1/build/grids-responsive-min.css",
    "/Pure/styles.css",
    "/FontAwesomeCSS/all.css",
)

ICON_LINKS = (
    IconLink("icon", "/favicon-32x32.png", "image/png", "32x32"),
    IconLink("icon", "/favicon-16x16.png", "image/png", "16x16"),
    IconLink("apple-touch-icon", "/apple-touch-icon.png", "image/png", "180x180"),
    IconLink("manifest", "/site.webmanifest"),
)

TITLE_SEPARATOR = " | "
TWITTER_CARD_SUMMARY = "summary"
TWITTER_CARD_LARGE_IMAGE = "summary_large_image"


def head(
    location: Location,
    site: Site,
    stylesheet_paths: Iterable[str] = STYLESHEETS,
    title_separator: str = TITLE_SEPARATOR,
    rss_feed_title: str | None = None,
) -> Markup:
    """Render the <head> element for a location.

    The title is the location title followed by the site name, or just the
    site name when the location has no title. An empty description falls
    back to the site description. The Twitter card is the large-image
    variant only when the location itself has an image.

    Args:
        location: Page, item, section or other location being rendered.
        site: Site configuration.
        stylesheet_paths: Stylesheets linked after the pinned Pure CSS.
        title_separator: Text between location title and site name.
        rss_feed_title: Title of the feed link; defaults to "Subscribe to <name>".

    Returns:
        Markup of the complete <head> element.
    """
    if location.title:
        title = f"{location.title}{title_separator}{site.name}"
    else:
        title = site.name

    description = location.description or site.description

    if location.image_path is None:
        twitter_card = TWITTER_CARD_SUMMARY
    else:
        twitter_card = TWITTER_CARD_LARGE_IMAGE

    rss_feed_url = root_relative(site.rss_feed_path) if site.rss_feed_path else None
    image_path = location.image_path or site.image_path
    social_image_url = site.url_for(image_path) if image_path else None

    return default_engine().render(
        "head.html.jinja",
        site=site,
        canonical_url=site.url_for(location),
        title=title,
        description=description,
        twitter_card=twitter_card,
        rss_feed_url=rss_feed_url,
        rss_feed_title=rss_feed_title or f"Subscribe to {site.name}",
        social_image_url=social_image_url,
        pinned_stylesheet=PINNED_STYLESHEET,
        stylesheets=tuple(stylesheet_paths),
        icons=ICON_LINKS,
    )


def icon(classes: str) -> Markup:
    """Render a Font Awesome icon."""
    return Markup('<i class="{}"></i>').format(classes)


def grid(*nodes: Markup) -> Markup:
    return Markup('<div id="layout" class="pure-g">\n{}\n</div>').format(
        Markup("\n").join(nodes)
    )


def page_content(*nodes: Markup) -> Markup:
    """Wrap fragments in the main content column."""
    return Markup(
        '<div class="content pure-u-1 pure-u-md-3-4 pure-u-xl-6-10">\n{}\n</div>'
    ).format(Markup("\n").join(nodes))


def page(page: Page, site: Site) -> Markup:
    return page_content(
        default_engine().render("page.html.jinja", page=page, body=Markup(page.body))
    )


def twitter_share_url(item: Item, site: Site) -> str:
    """Build the percent-encoded tweet intent URL for a post.

    Args:
        item: Post being shared.
        site: Site whose URL and Twitter handle are used.

    Returns:
        Tweet intent URL, safe to use as an href.
    """
    item_url = join_root_url(site.url, item.path)
    via = f"via={site.twitter_handle}&" if site.twitter_handle else ""
    intent = f"https://twitter.com/intent/tweet?{via}text={item.title}&url={item_url}"
    return encode_query_url(intent)


def post(item: Item, site: Site) -> Markup:
    """Render a full post: title, meta line, tags, body and share link.

    The share link is only rendered when the site enables it.
    """
    share_url = twitter_share_url(item, site) if site.share_on_twitter else None
    return page_content(
        default_engine().render(
            "post.html.jinja",
            item=item,
            meta=date_and_reading_time(item),
            tags=tag_list_post(item, site),
            body=Markup(item.body),
            share_url=share_url,
            share_icon=icon("fab fa-twitter"),
        )
    )


def post_excerpt(item: Item, site: Site) -> Markup:
    """Render the clickable summary card of a post used in list views."""
    return default_engine().render(
        "post_excerpt.html.jinja",
        item=item,
        meta=date_and_reading_time(item),
        tags=tag_list(item, site),
    )


def _tags_of(target: Item | TagListPage | Iterable[Tag | str]) -> list[Tag]:
    if isinstance(target, Item):
        return list(target.tags)
    if isinstance(target, TagListPage):
        return target.sorted_tags()
    return [tag if isinstance(tag, Tag) else Tag(tag) for tag in target]


def tag_list(target: Item | TagListPage | Iterable[Tag | str], site: Site) -> Markup:
    """Render tag links as used on excerpts and the tag list page.

    Args:
        target: An item, the tag list page, or a sequence of tags.
        site: Site used to resolve tag paths.

    Returns:
        A div of links, one per tag, in input order.
    """
    return default_engine().render(
        "tag_list.html.jinja",
        site=site,
        tags=_tags_of(target),
        container_class="mini-post-tags",
        link_class="mini-post-category",
    )


def tag_list_post(target: Item | Iterable[Tag | str], site: Site) -> Markup:
    """Render tag links as used on full post pages."""
    return default_engine().render(
        "tag_list.html.jinja",
        site=site,
        tags=_tags_of(target),
        container_class="post-tags",
        link_class="post-category",
    )


def posts(items: Iterable[Item], site: Site, title: str) -> Markup:
    """Render a titled list of post excerpts, in the given order."""
    return page_content(
        default_engine().render(
            "posts.html.jinja",
            title=title,
            excerpts=[post_excerpt(item, site) for item in items],
        )
    )


def sidebar(site: Site, selected: SectionID | None = None) -> Markup:
    """Render the navigation sidebar.

    Args:
        site: Site configuration.
        selected: Section highlighted in the navigation, if any.

    Returns:
        Sidebar markup with brand, navigation and social links.
    """
    nav_links = [
        {
            "title": section_id.value.capitalize(),
            "href": root_relative(section_id.value),
            "selected": section_id is selected,
        }
        for section_id in SectionID
    ]
    nav_links.append({"title": "Tags", "href": "/tags", "selected": False})
    return default_engine().render("sidebar.html.jinja", site=site, nav_links=nav_links)


def footer(site: Site) -> Markup:
    rss_feed_url = root_relative(site.rss_feed_path) if site.rss_feed_path else None
    return default_engine().render(
        "footer.html.jinja", site=site, rss_feed_url=rss_feed_url
    )
