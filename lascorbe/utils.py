"""Utility functions for the theme.

Key functions:
    normalize_tag: Convert a tag label into a URL slug.
    format_date: Format a publish date for display.
    date_and_reading_time: The meta line shown under post titles.
    capitalize_words: Title-case a label for headings.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .content import Item

READING_TIME_SEPARATOR = " · ⏱ "
WORD_RE = re.compile(r"[^\W_]+(?:'[^\W_]+)*")


def normalize_tag(label: str) -> str:
    """Convert a tag label into a URL slug.

    Lowercases the label, turns whitespace into hyphens and drops any
    character that is not a letter, a digit or a hyphen. Labels with no
    such character get "tag-" followed by their hex code points, so the
    slug is never empty.

    Args:
        label: Tag label as written by the author.

    Returns:
        URL-friendly slug.

    Examples:
        >>> normalize_tag("Swift UI")
        'swift-ui'

        >>> normalize_tag("C++")
        'c'

        >>> normalize_tag("++")
        'tag-2b2b'
    """
    label = label.strip()
    chars = []
    for char in label.lower():
        if char.isspace():
            chars.append("-")
        elif char.isalnum() or char == "-":
            chars.append(char)
    if not chars:
        return "tag-" + "".join(f"{ord(char):x}" for char in label)
    return "".join(chars)


def format_date(value: date | datetime) -> str:
    """Format a date like "January 5, 2020".

    Args:
        value: Date or datetime to format.

    Returns:
        Long-form date string.
    """
    return f"{value:%B} {value.day}, {value.year}"


def date_and_reading_time(item: Item) -> str:
    """Return the "date · ⏱ reading time" line of a post.

    Args:
        item: Post whose date and metadata are displayed.

    Returns:
        Meta line text.
    """
    return f"{format_date(item.date)}{READING_TIME_SEPARATOR}{item.metadata.time_to_read}"


def capitalize_words(text: str) -> str:
    """Capitalize every word, lowercasing the rest.

    Words are runs of letters and digits, so a hyphen starts a new word;
    an apostrophe between letters does not.

    Examples:
        >>> capitalize_words("iOS tips")
        'Ios Tips'

        >>> capitalize_words("swift-ui")
        'Swift-Ui'
    """
    return WORD_RE.sub(lambda match: match.group(0).capitalize(), text)
