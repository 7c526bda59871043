"""Whitespace canonicalization for extracted text."""

import re

# The ECMAScript \s set. Python's own \s differs slightly (it includes the
# \x1c-\x1f separators and \x85, and excludes the BOM), and the output must
# match what a browser-side textContent cleanup produces.
WHITESPACE_CHARS = (
    "\t\n\v\f\r "
    "\u00a0"  # no-break space (&nbsp;)
    "\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005"
    "\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029"  # line / paragraph separator
    "\u202f\u205f\u3000"
    "\ufeff"  # byte order mark
)

_WHITESPACE_RUN = re.compile("[" + re.escape(WHITESPACE_CHARS) + "]+")


def collapse_whitespace(text: str) -> str:
    """Replace every whitespace run with a single space."""
    return _WHITESPACE_RUN.sub(" ", text)


def trim(text: str) -> str:
    """Strip leading and trailing whitespace from the same character set."""
    return text.strip(WHITESPACE_CHARS)


def normalize_whitespace(text: str) -> str:
    """Collapse multiple whitespace to single space and strip."""
    return trim(collapse_whitespace(text))
