"""Inline style attribute parsing."""

from typing import Optional


def parse_inline_style(style: Optional[str]) -> dict[str, str]:
    """Parse a ``style`` attribute into a property -> value mapping.

    Declarations are split on ``;`` and then on the first ``:``. Property
    names and values are lower-cased and stripped. Chunks without a colon
    or without a property name are skipped; a later declaration of the same
    property replaces an earlier one, as in CSS.

    >>> parse_inline_style("Color: RED; font-size:14px")
    {'color': 'red', 'font-size': '14px'}
    """
    declarations: dict[str, str] = {}
    if not style:
        return declarations

    for chunk in style.split(";"):
        prop, sep, value = chunk.partition(":")
        if not sep:
            continue
        prop = prop.strip().lower()
        if not prop:
            continue
        declarations[prop] = value.strip().lower()

    return declarations
