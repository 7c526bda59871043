"""Strip all formatting from rich text and report what was removed."""

from .clipboard import ClipboardPayload, read_payload
from .formatter import FormatResult, Formatter, format_text, remove_formatting
from .rules import ALL_CATEGORIES, DETECTION_RULES, STRUCTURE, DetectionRule

__all__ = [
    "ALL_CATEGORIES",
    "ClipboardPayload",
    "DETECTION_RULES",
    "DetectionRule",
    "FormatResult",
    "Formatter",
    "STRUCTURE",
    "format_text",
    "read_payload",
    "remove_formatting",
]
