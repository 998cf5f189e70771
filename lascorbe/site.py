"""Site metadata for the blog.

Key classes:
- Site: Immutable site configuration, created once at startup.
- SocialMedia: A link to one of the author's profiles.
- SectionID: Stable keys of the content sections.
- ItemMetadata: Extra fields every post carries.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from .html_utils import join_root_url

if TYPE_CHECKING:
    from .content import Tag
    from .protocols import Location


class Language(Enum):
    """Languages a site can be written in; the value is the HTML lang code."""

    ENGLISH = "en"
    SPANISH = "es"
    FRENCH = "fr"
    GERMAN = "de"

    @classmethod
    def from_code(cls, code: str) -> Language:
        for language in cls:
            if language.value == code.lower():
                return language
        raise ValueError(f"Unknown language code: {code!r}")


class SectionID(Enum):
    """Content sections of the blog."""

    POSTS = "posts"
    ABOUT = "about"


@dataclass(frozen=True)
class ItemMetadata:
    """Per-post metadata on top of the common item fields.

    Attributes:
        description: Short summary shown in excerpts and meta tags.
        time_to_read: Human-readable reading estimate, e.g. "5 min".
    """

    description: str = ""
    time_to_read: str = ""


@dataclass(frozen=True)
class SocialMedia:
    """A social profile rendered as an icon link in the sidebar.

    Attributes:
        name: Display name, used as the link title.
        url: Profile or contact URL.
        icon: Font Awesome classes for the icon.
    """

    name: str
    url: str
    icon: str

    @classmethod
    def email(cls, address: str) -> SocialMedia:
        return cls("Email", f"mailto:{address}", "fas fa-envelope")

    @classmethod
    def github(cls, handle: str) -> SocialMedia:
        return cls("GitHub", f"https://github.com/{handle}", "fab fa-github")

    @classmethod
    def twitter(cls, handle: str) -> SocialMedia:
        return cls("Twitter", f"https://twitter.com/{handle}", "fab fa-twitter")

    @classmethod
    def linkedin(cls, handle: str) -> SocialMedia:
        return cls(
            "LinkedIn", f"https://www.linkedin.com/in/{handle}", "fab fa-linkedin"
        )


@dataclass(frozen=True)
class Site:
    """Immutable configuration of the website.

    Attributes:
        name: Site name, appended to every page title.
        url: Absolute base URL, without trailing slash.
        description: Fallback description for pages without one.
        language: Document language.
        image_path: Optional default social image, relative to the site root.
        social_media: Profiles linked from the sidebar.
        twitter_handle: Account credited in share links.
        rss_feed_path: Feed path advertised in the head, or None for no link.
        share_on_twitter: Whether post pages get a "share on Twitter" link.
    """

    name: str
    url: str
    description: str
    language: Language = Language.ENGLISH
    image_path: str | None = None
    social_media: tuple[SocialMedia, ...] = ()
    twitter_handle: str = ""
    rss_feed_path: str | None = "feed.rss"
    share_on_twitter: bool = True

    def url_for(self, target: Location | str) -> str:
        """Return the absolute URL of a location or a site-relative path.

        Args:
            target: Anything with a ``path`` attribute, or a path string.

        Returns:
            Absolute URL under the site's base URL.
        """
        path = target if isinstance(target, str) else target.path
        if path.startswith(("http://", "https://", "//")):
            return path
        return join_root_url(self.url, f"/{path.lstrip('/')}")

    def path_for(self, tag: Tag) -> str:
        """Return the root-relative path of a tag's details page."""
        return f"/tags/{tag.normalized_string}"


LASCORBE = Site(
    name="Luis Ascorbe",
    url="https://lascorbe.com",
    description="Software Developer. Tech Lead. Speaker. Conference Organizer.",
    language=Language.ENGLISH,
    image_path=None,
    social_media=(
        SocialMedia.email("hello@lascorbe.com"),
        SocialMedia.github("lascorbe"),
        SocialMedia.twitter("lascorbe"),
        SocialMedia.linkedin("lascorbe"),
    ),
    twitter_handle="lascorbe",
)
