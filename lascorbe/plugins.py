"""Publishing plugins.

Key classes:
- CodeHighlightPlugin: Highlights code blocks in item and page bodies.

Bodies arrive as HTML in which fenced code blocks look like
``<pre><code class="language-swift">...</code></pre>``. The plugin replaces
each such block with Pygments output whose token classes carry a prefix,
so the site stylesheet can target them without clashing with Pure CSS.
"""

from __future__ import annotations

import html
import logging
import re

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from .context import PublishingContext

logger = logging.getLogger(__name__)

CODE_BLOCK_RE = re.compile(
    r'<pre><code class="language-(?P<lang>[\w+#.-]+)">(?P<code>.*?)</code></pre>',
    re.DOTALL,
)

DEFAULT_CLASS_PREFIX = "la-"
STYLESHEET_PATH = "highlight.css"


class CodeHighlightPlugin:
    """Syntax highlighting for code blocks in rendered bodies.

    Attributes:
        class_prefix: Prefix added to every token CSS class.
        formatter: Pygments formatter used for every block.
    """

    def __init__(self, class_prefix: str = DEFAULT_CLASS_PREFIX, style: str = "default"):
        """Initialize the plugin.

        Args:
            class_prefix: Prefix for token classes, e.g. "la-".
            style: Pygments style used by ``stylesheet``.
        """
        self.class_prefix = class_prefix
        self.formatter = HtmlFormatter(
            cssclass="highlight", classprefix=class_prefix, style=style
        )

    @property
    def name(self) -> str:
        return "Code highlighting"

    def highlight(self, body: str) -> str:
        """Highlight every recognised code block of an HTML body.

        Blocks in languages Pygments does not know are left untouched.

        Args:
            body: Rendered HTML body.

        Returns:
            HTML with highlighted code blocks.
        """

        def repl(match: re.Match) -> str:
            lang = match.group("lang")
            try:
                lexer = get_lexer_by_name(lang, stripall=True)
            except ClassNotFound:
                logger.warning("No highlighter for language %r; leaving block as is", lang)
                return match.group(0)
            code = html.unescape(match.group("code"))
            return highlight(code, lexer, self.formatter)

        return CODE_BLOCK_RE.sub(repl, body)

    def stylesheet(self) -> str:
        """Return CSS rules for the prefixed token classes.

        Returns:
            CSS string scoped to the .highlight class.
        """
        return self.formatter.get_style_defs(".highlight")

    def assets(self) -> dict[str, str]:
        """Publish the token stylesheet next to the pages."""
        return {STYLESHEET_PATH: self.stylesheet()}

    def install(self, context: PublishingContext) -> None:
        """Highlight the bodies of all items and pages of a context."""
        context.replace_items(lambda item: item.with_body(self.highlight(item.body)))
        context.replace_pages(lambda page: page.with_body(self.highlight(page.body)))
        logger.debug("Installed %s with class prefix %r", self.name, self.class_prefix)


def code_highlight(class_prefix: str = DEFAULT_CLASS_PREFIX) -> CodeHighlightPlugin:
    """Return a code highlighting plugin using the given class prefix."""
    return CodeHighlightPlugin(class_prefix=class_prefix)
