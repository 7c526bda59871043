"""Permissive markup parsing and tree flattening.

Wraps BeautifulSoup's ``html.parser`` tree builder, which tolerates
unclosed, unknown and misnested tags. The tree is walked with an explicit
stack so arbitrarily deep nesting never hits the recursion limit.
"""

import logging
import warnings
from dataclasses import dataclass, field
from typing import Optional

from bs4 import (
    BeautifulSoup,
    MarkupResemblesLocatorWarning,
    ParserRejectedMarkup,
    XMLParsedAsHTMLWarning,
)
from bs4.element import NavigableString, PageElement, PreformattedString, Tag

logger = logging.getLogger(__name__)

PARSER = "html.parser"

# Elements whose edges separate words even when the source has no
# whitespace between them (e.g. "<li>a</li><li>b</li>").
BLOCK_TAGS = frozenset((
    "p", "div", "br", "hr", "h1", "h2", "h3", "h4", "h5", "h6",
    "li", "tr", "td", "th", "blockquote", "pre", "table", "ul", "ol",
    "dl", "dt", "dd", "section", "article", "header", "footer", "nav",
    "main", "aside", "figure", "figcaption",
))

_BLOCK_END = object()


@dataclass
class Flattened:
    """Every element of a tree plus its text content in document order."""
    elements: list[Tag] = field(default_factory=list)
    pieces: list[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        return "".join(self.pieces)


def parse_fragment(markup: str) -> BeautifulSoup:
    """Parse ``markup`` into a tree.

    If the parser rejects the markup outright, the whole input becomes a
    single text node so callers still get its content back.
    """
    with warnings.catch_warnings():
        # Short inputs like "notes.txt" trigger a hint that is meaningless here.
        warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
        # Pasted fragments sometimes carry an XML declaration; html.parser copes.
        warnings.simplefilter("ignore", XMLParsedAsHTMLWarning)
        try:
            return BeautifulSoup(markup, PARSER)
        except ParserRejectedMarkup as e:
            logger.warning("Markup rejected by parser, treating as text: %s", e)
            soup = BeautifulSoup("", PARSER)
            soup.append(NavigableString(markup))
            return soup


def text_of(node: PageElement) -> Optional[str]:
    """Return the text a node contributes to the document's text content.

    Script and style bodies count as text; comments, CDATA sections,
    doctypes, declarations and processing instructions do not.
    """
    if isinstance(node, NavigableString) and not isinstance(node, PreformattedString):
        return str(node)
    return None


def style_of(tag: Tag) -> Optional[str]:
    """Return the raw ``style`` attribute of ``tag``, if any."""
    style = tag.get("style")
    if isinstance(style, list):
        return " ".join(style)
    return style


def flatten(root: Tag) -> Flattened:
    """Collect the elements and text of ``root`` in a single pass."""
    result = Flattened()
    stack: list = list(reversed(root.contents))

    while stack:
        node = stack.pop()
        if node is _BLOCK_END:
            result.pieces.append(" ")
            continue

        if isinstance(node, Tag):
            result.elements.append(node)
            if node.name.lower() in BLOCK_TAGS:
                result.pieces.append(" ")
                stack.append(_BLOCK_END)
            stack.extend(reversed(node.contents))
            continue

        text = text_of(node)
        if text:
            result.pieces.append(text)

    return result
