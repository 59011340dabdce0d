"""Render sitemap and sitemap index XML as a Markdown listing."""

from __future__ import annotations

import html
import logging
import re
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlparse

logger = logging.getLogger(__name__)

URL_BLOCK_RE = re.compile(r"<url\b.*?</url>", re.IGNORECASE | re.DOTALL)
SITEMAP_BLOCK_RE = re.compile(r"<sitemap\b.*?</sitemap>", re.IGNORECASE | re.DOTALL)
_CDATA_RE = re.compile(r"^<!\[CDATA\[(.*)\]\]>$", re.DOTALL)

NO_ENTRIES_PLACEHOLDER = "_No sitemap entries found._"


@dataclass(frozen=True)
class SitemapEntry:
    """
    One ``<url>`` or ``<sitemap>`` entry of a sitemap file.

    Index entries (``<sitemap>``) only ever carry ``location`` and
    ``last_modified``.
    """

    location: str
    last_modified: Optional[str] = None
    change_frequency: Optional[str] = None
    priority: Optional[str] = None

    def metadata(self) -> list[str]:
        """Present optional fields as ``name: value`` in display order."""
        fields = [
            ("lastmod", self.last_modified),
            ("changefreq", self.change_frequency),
            ("priority", self.priority),
        ]
        return [f"{name}: {value}" for name, value in fields if value]

    def to_markdown(self) -> str:
        """Render the entry as one Markdown list line."""
        line = f"- [{self.location}]({self.location})"
        meta = self.metadata()
        if meta:
            line += f" — {' · '.join(meta)}"
        return line


@dataclass(frozen=True)
class SitemapDocument:
    """Markdown rendering of a sitemap together with its title."""

    markdown: str
    title: str


def extract_tag_value(block: str, tag: str) -> Optional[str]:
    """
    Return the trimmed text of the first ``<tag>...</tag>`` in a block.

    CDATA wrappers are removed and XML entities unescaped.

    Returns:
        The value, or None when the tag is missing or empty
    """
    pattern = rf"<{re.escape(tag)}[^>]*>(.*?)</{re.escape(tag)}>"
    match = re.search(pattern, block, re.IGNORECASE | re.DOTALL)
    if not match:
        return None
    value = match.group(1).strip()
    cdata = _CDATA_RE.match(value)
    if cdata:
        value = cdata.group(1).strip()
    else:
        value = html.unescape(value)
    return value or None


def parse_url_entry(block: str) -> Optional[SitemapEntry]:
    """Parse a ``<url>`` block; None when it has no ``<loc>``."""
    location = extract_tag_value(block, "loc")
    if not location:
        return None
    return SitemapEntry(
        location=location,
        last_modified=extract_tag_value(block, "lastmod"),
        change_frequency=extract_tag_value(block, "changefreq"),
        priority=extract_tag_value(block, "priority"),
    )


def parse_sitemap_entry(block: str) -> Optional[SitemapEntry]:
    """Parse a ``<sitemap>`` index block; None when it has no ``<loc>``."""
    location = extract_tag_value(block, "loc")
    if not location:
        return None
    return SitemapEntry(location=location, last_modified=extract_tag_value(block, "lastmod"))


def sitemap_title(base_url: str) -> str:
    """Title for a sitemap listing: ``Sitemap - host`` or plain ``Sitemap``."""
    try:
        hostname = urlparse(base_url).hostname or ""
    except ValueError:
        hostname = ""
    return f"Sitemap - {hostname}" if hostname else "Sitemap"


def render_sitemap_markdown(xml: str, base_url: str) -> SitemapDocument:
    """
    Convert sitemap XML into a Markdown list of links.

    ``<url>`` blocks win over ``<sitemap>`` blocks. The header counts the
    blocks found; blocks without a ``<loc>`` are left out of the list.

    Args:
        xml: Sitemap or sitemap index XML text
        base_url: URL the sitemap was fetched from (used for the title)

    Returns:
        SitemapDocument with the Markdown listing and title
    """
    title = sitemap_title(base_url)
    lines = [f"# {title}"]

    url_blocks = URL_BLOCK_RE.findall(xml)
    sitemap_blocks = SITEMAP_BLOCK_RE.findall(xml) if not url_blocks else []

    if url_blocks:
        lines.append(f"\nFound {len(url_blocks)} URLs:\n")
        entries = [parse_url_entry(block) for block in url_blocks]
    elif sitemap_blocks:
        lines.append(f"\nFound {len(sitemap_blocks)} sitemaps:\n")
        entries = [parse_sitemap_entry(block) for block in sitemap_blocks]
    else:
        lines.append(f"\n{NO_ENTRIES_PLACEHOLDER}\n")
        entries = []

    skipped = 0
    for entry in entries:
        if entry is None:
            skipped += 1
            continue
        lines.append(entry.to_markdown())

    if skipped:
        logger.debug(f"Skipped {skipped} sitemap entries without <loc> in {base_url}")

    return SitemapDocument(markdown="\n".join(lines), title=title)
