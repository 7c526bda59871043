"""Formatting detection and removal.

Turns rich text (HTML fragments, inline styles, pasted plain text) into a
single line of plain text and reports which formatting categories were
stripped along the way.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from bs4.element import Tag

from .markup import flatten, parse_fragment, style_of
from .normalizer import normalize_whitespace, trim
from .rules import DETECTION_RULES, STRUCTURE, DetectionRule
from .styles import parse_inline_style

logger = logging.getLogger(__name__)

# Any of these in the raw input means the markup itself could explain a
# difference between input and output.
STRUCTURE_MARKERS = ("<", "&nbsp;", "\n\n")


@dataclass(frozen=True)
class FormatResult:
    """Plain text plus the sorted, de-duplicated categories that were removed."""
    plain_text: str
    categories: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {"plainText": self.plain_text, "categories": list(self.categories)}


def has_structure_markers(text: str) -> bool:
    return any(marker in text for marker in STRUCTURE_MARKERS)


class Formatter:
    """Strip all formatting from rich text.

    Holds only the (immutable) rule list, so one instance can be shared
    freely between callers.
    """

    def __init__(self, rules: Optional[Iterable[DetectionRule]] = None):
        """Initialize formatter.

        Args:
            rules: Detection rules to evaluate against every element.
                   Defaults to DETECTION_RULES.
        """
        self._rules = tuple(rules) if rules is not None else tuple(DETECTION_RULES)

    @property
    def rules(self) -> tuple[DetectionRule, ...]:
        return self._rules

    def format(self, text: str) -> FormatResult:
        """Remove all formatting from ``text``.

        Never raises for string input: markup the parser cannot make sense
        of is kept as literal text.

        Args:
            text: Raw input, HTML fragment or plain text.

        Returns:
            FormatResult with the normalized plain text and detected categories.
        """
        if not text:
            return FormatResult(plain_text="")

        flat = flatten(parse_fragment(text))
        detected: set[str] = set()
        for element in flat.elements:
            detected.update(self._detect(element))

        plain_text = normalize_whitespace(flat.text)

        if not detected and plain_text != trim(text) and has_structure_markers(text):
            detected.add(STRUCTURE)

        categories = tuple(sorted(detected))
        if categories:
            logger.debug("Removed formatting: %s", ", ".join(categories))
        return FormatResult(plain_text=plain_text, categories=categories)

    def _detect(self, tag: Tag) -> list[str]:
        """Labels of every rule that fires for a single element."""
        name = tag.name.lower()
        style = parse_inline_style(style_of(tag))
        return [rule.label for rule in self._rules if rule.matches(name, style)]


_default_formatter = Formatter()


def format_text(text: str) -> FormatResult:
    """Convenience function using the shared default Formatter."""
    return _default_formatter.format(text)


def remove_formatting(text: str) -> str:
    """Return only the plain text of ``text``."""
    return _default_formatter.format(text).plain_text
