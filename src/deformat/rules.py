"""Formatting categories and the rules that detect them.

Each rule pairs a category label with a predicate over an element's
lower-cased tag name and its parsed inline style. The formatter evaluates
every rule against every element, so adding a category only means adding
a rule here.
"""

from dataclasses import dataclass
from typing import Callable

StyleMap = dict[str, str]
Predicate = Callable[[str, StyleMap], bool]

BOLD = "Bold"
ITALIC = "Italic"
UNDERLINE = "Underline"
STRIKETHROUGH = "Strikethrough"
TEXT_COLOR = "Text color"
BACKGROUND_COLOR = "Background color/Highlight"
FONT_SIZE = "Font size"
FONT_FAMILY = "Font family"
BULLET_POINTS = "Bullet points"
NUMBERED_LIST = "Numbered list"
LINKS = "Links"
HEADERS = "Headers"
TEXT_ALIGNMENT = "Text alignment"
LINE_HEIGHT = "Line height"
LETTER_SPACING = "Letter spacing"
TEXT_TRANSFORM = "Text transform"

# Reported only when no named rule fired but the markup still changed the text.
STRUCTURE = "HTML/Structure formatting"


def tag_in(*names: str) -> Predicate:
    """Match elements whose tag is one of ``names``."""
    wanted = frozenset(names)
    return lambda tag, style: tag in wanted


def declares(*properties: str) -> Predicate:
    """Match elements whose style declares any of ``properties``."""
    return lambda tag, style: any(prop in style for prop in properties)


def declares_nonempty(*properties: str) -> Predicate:
    """Match elements whose style gives any of ``properties`` a non-empty value."""
    return lambda tag, style: any(style.get(prop) for prop in properties)


def declares_value(prop: str, keyword: str) -> Predicate:
    """Match elements whose ``prop`` value contains ``keyword``.

    ``text-decoration: underline line-through`` carries two keywords, so
    this is a containment check rather than equality.
    """
    return lambda tag, style: keyword in style.get(prop, "")


def any_of(*predicates: Predicate) -> Predicate:
    return lambda tag, style: any(p(tag, style) for p in predicates)


@dataclass(frozen=True)
class DetectionRule:
    """A category label and the predicate that triggers it."""
    label: str
    predicate: Predicate

    def matches(self, tag: str, style: StyleMap) -> bool:
        return self.predicate(tag, style)


# "Is or contains a <ul>" reduces to a tag check because every element of
# the tree is visited.
DETECTION_RULES: list[DetectionRule] = [
    DetectionRule(BOLD, any_of(tag_in("b", "strong"), declares("font-weight"))),
    DetectionRule(ITALIC, any_of(tag_in("i", "em"), declares_value("font-style", "italic"))),
    DetectionRule(UNDERLINE, any_of(tag_in("u"), declares_value("text-decoration", "underline"))),
    DetectionRule(
        STRIKETHROUGH,
        any_of(tag_in("s", "strike", "del"), declares_value("text-decoration", "line-through")),
    ),
    DetectionRule(TEXT_COLOR, declares_nonempty("color")),
    DetectionRule(BACKGROUND_COLOR, declares_nonempty("background-color", "background")),
    DetectionRule(FONT_SIZE, declares("font-size")),
    DetectionRule(FONT_FAMILY, declares("font-family")),
    DetectionRule(BULLET_POINTS, tag_in("ul")),
    DetectionRule(NUMBERED_LIST, tag_in("ol")),
    DetectionRule(LINKS, tag_in("a")),
    DetectionRule(HEADERS, tag_in("h1", "h2", "h3", "h4", "h5", "h6")),
    DetectionRule(TEXT_ALIGNMENT, declares("text-align")),
    DetectionRule(LINE_HEIGHT, declares("line-height")),
    DetectionRule(LETTER_SPACING, declares("letter-spacing")),
    DetectionRule(TEXT_TRANSFORM, declares("text-transform")),
]

ALL_CATEGORIES = tuple(sorted([rule.label for rule in DETECTION_RULES] + [STRUCTURE]))
