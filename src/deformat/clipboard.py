"""Paste payload selection.

A clipboard usually offers the same content in several flavours. The
markup flavour carries the formatting that the formatter reports on, so it
wins over the plain-text flavour whenever both are present.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class ClipboardPayload:
    """The flavours of one paste."""
    html: Optional[str] = None
    plain: Optional[str] = None

    def select(self) -> str:
        """Return the HTML flavour if non-empty, else the plain flavour."""
        return self.html or self.plain or ""


def _read_flavour(path: Optional[Path], flavour: str) -> Optional[str]:
    if path is None:
        return None
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.warning("Could not read %s payload from %s: %s", flavour, path, e)
        return None


def read_payload(html_path: Optional[Path] = None, text_path: Optional[Path] = None) -> ClipboardPayload:
    """Build a payload from files holding each flavour.

    An unreadable file counts as a missing flavour.
    """
    return ClipboardPayload(
        html=_read_flavour(html_path, "html"),
        plain=_read_flavour(text_path, "plain"),
    )
