"""Main content extraction from HTML pages."""

from __future__ import annotations

import html as html_lib
import logging
import re
from typing import Optional

logger = logging.getLogger(__name__)

# Regions removed before the content container is chosen, in order.
# HTML comments are stripped right after <noscript>.
LEADING_REMOVE_TAGS = ("head", "script", "style", "noscript")
TRAILING_REMOVE_TAGS = ("nav", "footer", "aside", "form", "iframe")

# Content containers, first match wins
CONTENT_TAGS = ("main", "article", "body")

COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)
EMPTY_ANCHOR_RE = re.compile(r"<a\b[^>]*>\s*</a\s*>", re.IGNORECASE)
TITLE_RE = re.compile(r"<title[^>]*>([^<]+)</title>", re.IGNORECASE)


def _region_pattern(tag: str) -> re.Pattern[str]:
    """Match a whole element, contents included, across lines."""
    return re.compile(rf"<{tag}\b.*?</{tag}\s*>", re.IGNORECASE | re.DOTALL)


def _container_pattern(tag: str) -> re.Pattern[str]:
    """Match an element and capture its inner HTML."""
    return re.compile(rf"<{tag}\b[^>]*>(.*?)</{tag}\s*>", re.IGNORECASE | re.DOTALL)


def extract_html_title(html: str) -> Optional[str]:
    """
    Return the document ``<title>`` text, entity-unescaped and stripped.

    Returns:
        The title, or None when the page has no non-empty title
    """
    match = TITLE_RE.search(html)
    if not match:
        return None
    title = html_lib.unescape(match.group(1)).strip()
    return title or None


class MainContentExtractor:
    """
    Extracts main content from HTML documents without building a DOM.

    Non-content regions (head, scripts, navigation, footers, forms, ...)
    are removed with independent non-greedy patterns, then the output is
    narrowed to the first ``<main>``, ``<article>`` or ``<body>``
    container. Unclosed tags are simply left in place.

    Example:
        extractor = MainContentExtractor()
        content = extractor.extract("<html><body><main>Hi</main></body></html>")
    """

    def __init__(
        self,
        remove_tags: Optional[list[str]] = None,
        content_tags: Optional[list[str]] = None,
    ):
        """
        Initialize the content extractor.

        Args:
            remove_tags: Extra element names to strip (extends defaults)
            content_tags: Container names to narrow to (overrides defaults)
        """
        self._remove_patterns = [_region_pattern(tag) for tag in LEADING_REMOVE_TAGS]
        self._remove_patterns.append(COMMENT_RE)
        self._remove_patterns.extend(_region_pattern(tag) for tag in TRAILING_REMOVE_TAGS)
        if remove_tags:
            self._remove_patterns.extend(_region_pattern(tag) for tag in remove_tags)
        self._remove_patterns.append(EMPTY_ANCHOR_RE)

        self._content_patterns = [_container_pattern(tag) for tag in (content_tags or CONTENT_TAGS)]

    def clean(self, html: str) -> str:
        """Remove non-content regions from HTML."""
        for pattern in self._remove_patterns:
            html = pattern.sub("", html)
        return html

    def narrow(self, html: str) -> str:
        """Return the inner HTML of the first content container present."""
        for pattern in self._content_patterns:
            match = pattern.search(html)
            if match:
                return match.group(1)
        return html

    def extract(self, html: str) -> str:
        """
        Extract main content from HTML.

        Args:
            html: Decoded HTML text

        Returns:
            Cleaned HTML fragment (still HTML)
        """
        content = self.narrow(self.clean(html))
        if not content.strip():
            logger.debug("No content left after HTML cleanup")
        return content
