"""HTML to Markdown conversion."""

from __future__ import annotations

import functools
import logging

import html2text
from bs4 import BeautifulSoup

from .normalizer import normalize_markdown

logger = logging.getLogger(__name__)


class HtmlToMarkdown:
    """
    Converts HTML content to clean Markdown.

    Uses html2text for the structural translation and
    :func:`normalize_markdown` for the post-processing. Settings are fixed
    at construction; every call gets its own html2text parser, so one
    instance can be shared between concurrent requests.

    Example:
        converter = HtmlToMarkdown()
        markdown = converter.convert(html_string, "https://docs.example.com/page")
    """

    def __init__(
        self,
        body_width: int = 0,
        inline_links: bool = True,
        wrap_links: bool = False,
        ignore_images: bool = False,
        ignore_tables: bool = False,
        protect_links: bool = False,
        unicode_snob: bool = True,
        escape_snob: bool = False,
        mark_code: bool = True,
    ):
        """
        Initialize the Markdown converter.

        Args:
            body_width: Max line width (0 = no wrapping)
            inline_links: Use inline [text](url) vs reference style
            wrap_links: Wrap long links
            ignore_images: Skip image conversion
            ignore_tables: Skip table conversion
            protect_links: Prevent link mangling
            unicode_snob: Use Unicode chars where possible
            escape_snob: Escape every special Markdown char
            mark_code: Mark code blocks (turned into fences afterwards)
        """
        self._options = {
            "body_width": body_width,
            "inline_links": inline_links,
            "wrap_links": wrap_links,
            "protect_links": protect_links,
            "ignore_images": ignore_images,
            "ignore_tables": ignore_tables,
            "unicode_snob": unicode_snob,
            "escape_snob": escape_snob,
            "mark_code": mark_code,
            "default_image_alt": "",
            "single_line_break": False,
        }

    def _build_parser(self, url: str) -> html2text.HTML2Text:
        parser = html2text.HTML2Text(baseurl=url)
        for name, value in self._options.items():
            setattr(parser, name, value)
        return parser

    def convert(self, html: str, url: str = "") -> str:
        """
        Convert HTML to Markdown.

        Args:
            html: HTML content string
            url: Source URL for resolving relative links

        Returns:
            Markdown string
        """
        if not html or not html.strip():
            return ""

        try:
            markdown = self._build_parser(url).handle(html)
        except Exception as e:
            logger.warning(f"Failed to convert HTML to Markdown, falling back to plain text: {e}")
            soup = BeautifulSoup(html, "html.parser")
            markdown = soup.get_text(separator="\n")

        return normalize_markdown(markdown)


@functools.lru_cache(maxsize=None)
def get_default_converter() -> HtmlToMarkdown:
    """Return the shared, lazily created converter."""
    return HtmlToMarkdown()
