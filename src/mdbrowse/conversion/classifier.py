"""Decide what kind of document a response body holds."""

from __future__ import annotations

from enum import Enum

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap"

MARKDOWN_CONTENT_TYPES = ("text/markdown", "text/x-markdown")

_XML_PREFIXES = ("<?xml", "<urlset", "<sitemapindex")
_HTML_PREFIXES = ("<!", "<html")


class DocumentKind(str, Enum):
    """Kinds of document the normalization pipeline distinguishes."""

    SITEMAP = "sitemap"
    MARKDOWN = "markdown"
    HTML = "html"


def is_sitemap_xml(content_type: str, text: str) -> bool:
    """
    Check whether a response is a sitemap or sitemap index.

    The body must look like XML (by Content-Type or by its leading tag)
    and must mention the sitemaps.org namespace.
    """
    if not text:
        return False
    trimmed = text.strip()
    is_xml = "xml" in content_type or trimmed.startswith(_XML_PREFIXES)
    if not is_xml:
        return False
    return SITEMAP_NAMESPACE in trimmed


def is_native_markdown(content_type: str, text: str) -> bool:
    """
    Check whether a response was served as Markdown.

    ``text/plain`` counts as Markdown unless the body starts like an
    HTML document.
    """
    if any(md_type in content_type for md_type in MARKDOWN_CONTENT_TYPES):
        return True
    if "text/plain" in content_type:
        return not text.strip().startswith(_HTML_PREFIXES)
    return False


def classify_document(content_type: str | None, text: str | None) -> DocumentKind:
    """
    Classify a decoded response body.

    Sitemap detection runs first, then Markdown detection; anything else
    is handled as HTML.

    Args:
        content_type: Content-Type header value
        text: Decoded response body

    Returns:
        The detected DocumentKind
    """
    content_type = (content_type or "").lower()
    text = text or ""
    if is_sitemap_xml(content_type, text):
        return DocumentKind.SITEMAP
    if is_native_markdown(content_type, text):
        return DocumentKind.MARKDOWN
    return DocumentKind.HTML
