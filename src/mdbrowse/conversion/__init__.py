"""Content normalization: classification, extraction, conversion, rendering."""

from .charset import decode_body, get_charset
from .classifier import DocumentKind, classify_document
from .extractor import MainContentExtractor, extract_html_title
from .frontmatter import ParsedMarkdown, parse_frontmatter
from .links import resolve_references, resolve_url
from .markdown import HtmlToMarkdown, get_default_converter
from .normalizer import normalize_markdown
from .protocols import MarkdownConverter, MarkdownRenderer
from .render import MarkdownToHtml, get_default_renderer, render_markdown
from .sitemap import SitemapDocument, SitemapEntry, render_sitemap_markdown
from .titles import extract_markdown_title, hostname_title

__all__ = [
    # Protocols
    "MarkdownConverter",
    "MarkdownRenderer",
    # Leaf operations
    "decode_body",
    "get_charset",
    "DocumentKind",
    "classify_document",
    "extract_html_title",
    "extract_markdown_title",
    "hostname_title",
    "normalize_markdown",
    "ParsedMarkdown",
    "parse_frontmatter",
    "resolve_references",
    "resolve_url",
    "render_markdown",
    # Sitemaps
    "SitemapDocument",
    "SitemapEntry",
    "render_sitemap_markdown",
    # Implementations
    "MainContentExtractor",
    "HtmlToMarkdown",
    "get_default_converter",
    "MarkdownToHtml",
    "get_default_renderer",
]
