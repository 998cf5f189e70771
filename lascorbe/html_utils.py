"""URL helpers for the theme.

Functions:
    join_root_url: Join a base URL with a path.
    root_relative: Turn a site path into a root-relative href.
    encode_query_url: Percent-encode a URL the way browsers expect in a query.
"""

from __future__ import annotations

from urllib.parse import quote

# Characters allowed unescaped in a URL query, besides ASCII letters and digits
_QUERY_ALLOWED = "!$&'()*+,-./:;=?@_~"

# URL prefixes that are already absolute
_ABSOLUTE_PREFIXES = (
    "http://",
    "https://",
    "//",
    "mailto:",
    "tel:",
    "#",
)


def join_root_url(root_url: str, path: str) -> str:
    """Safely join a root URL and a path, avoiding double slashes.

    Args:
        root_url: Base URL (e.g., https://example.com/blog).
        path: Path beginning with or without a leading slash.

    Returns:
        Combined URL with proper slash handling.

    Examples:
        >>> join_root_url('https://example.com', '/about')
        'https://example.com/about'

        >>> join_root_url('https://example.com/', 'about')
        'https://example.com/about'
    """
    if not root_url:
        return path
    base = root_url.rstrip("/")
    suffix = path if path.startswith("/") else f"/{path}"
    return f"{base}{suffix}"


def root_relative(path: str) -> str:
    """Return a root-relative href for a site path.

    Examples:
        >>> root_relative('posts/hello')
        '/posts/hello'

        >>> root_relative('https://example.com/x')
        'https://example.com/x'
    """
    if path.startswith(_ABSOLUTE_PREFIXES):
        return path
    return f"/{path.lstrip('/')}"


def encode_query_url(url: str) -> str:
    """Percent-encode every character not allowed in a URL query.

    Reserved separators (``?``, ``&``, ``=``, ``/``, ``:``) are kept, so a
    pre-formatted URL stays structurally intact while spaces and non-ASCII
    text are escaped.

    Examples:
        >>> encode_query_url('https://x.com/?text=Hello world')
        'https://x.com/?text=Hello%20world'
    """
    return quote(url, safe=_QUERY_ALLOWED)
