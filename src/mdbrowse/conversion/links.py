"""Rewrite relative Markdown references to absolute URLs."""

from __future__ import annotations

import logging
import re
from urllib.parse import urljoin, urlparse

logger = logging.getLogger(__name__)

IMAGE_EXEMPT_PREFIXES = ("http://", "https://", "data:")
LINK_EXEMPT_PREFIXES = IMAGE_EXEMPT_PREFIXES + ("#", "mailto:")

IMAGE_RE = re.compile(r"!\[([^\]]*)\]\(([^)]+)\)")
LINK_RE = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")


def is_absolute_base(base_url: str) -> bool:
    """Check that a URL can serve as a resolution base (scheme and host)."""
    try:
        parsed = urlparse(base_url)
    except ValueError:
        return False
    return bool(parsed.scheme and parsed.netloc)


def resolve_url(base_url: str, relative: str) -> str:
    """
    Resolve a reference against a base URL.

    Returns:
        The absolute URL, or ``relative`` unchanged when it cannot be resolved
    """
    try:
        return urljoin(base_url, relative)
    except ValueError:
        return relative


def resolve_references(markdown: str, base_url: str) -> str:
    """
    Make relative image and link targets in Markdown absolute.

    Images keep ``http(s)://`` and ``data:`` targets; links additionally
    keep ``#fragment`` and ``mailto:`` targets. Anything else is resolved
    with standard URL joining. Already absolute documents are returned
    unchanged, so the operation is idempotent.

    Args:
        markdown: Markdown text
        base_url: Absolute URL the document was fetched from

    Returns:
        Markdown with absolute references (input unchanged if the base
        URL is not absolute)
    """
    if not is_absolute_base(base_url):
        logger.debug(f"Not resolving references against non-absolute base {base_url!r}")
        return markdown

    def replace_image(match: re.Match[str]) -> str:
        alt, path = match.group(1), match.group(2)
        if path.startswith(IMAGE_EXEMPT_PREFIXES):
            return match.group(0)
        return f"![{alt}]({resolve_url(base_url, path)})"

    def replace_link(match: re.Match[str]) -> str:
        text, path = match.group(1), match.group(2)
        if path.startswith(LINK_EXEMPT_PREFIXES):
            return match.group(0)
        return f"[{text}]({resolve_url(base_url, path)})"

    markdown = IMAGE_RE.sub(replace_image, markdown)
    return LINK_RE.sub(replace_link, markdown)
