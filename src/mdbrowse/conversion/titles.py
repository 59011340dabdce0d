"""Title derivation for normalized documents."""

from __future__ import annotations

import re
from typing import Optional
from urllib.parse import urlparse

UNTITLED = "Untitled"

_HEADING_RE = re.compile(r"^#\s+(.+)$", re.MULTILINE)


def extract_markdown_title(markdown: str) -> Optional[str]:
    """Text of the first level-one ATX heading, or None."""
    match = _HEADING_RE.search(markdown)
    if not match:
        return None
    return match.group(1).strip() or None


def hostname_title(url: str) -> str:
    """
    Fallback title for a URL: its hostname.

    Falls back to the URL itself, then to ``Untitled``; never empty.
    """
    try:
        hostname = urlparse(url).hostname
    except ValueError:
        hostname = None
    return hostname or url.strip() or UNTITLED
