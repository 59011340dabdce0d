"""
mdbrowse - Fetch any URL and normalize it into a Markdown document.

Usage:
    from mdbrowse import PageFetcher, render_markdown

    async with PageFetcher() as fetcher:
        page = await fetcher.fetch("https://example.com")

    print(page.title)
    html = render_markdown(page.markdown, page.url)
"""

__version__ = "1.0.0"

from .conversion import (
    DocumentKind,
    HtmlToMarkdown,
    MainContentExtractor,
    MarkdownToHtml,
    classify_document,
    decode_body,
    normalize_markdown,
    parse_frontmatter,
    render_markdown,
    render_sitemap_markdown,
    resolve_references,
)
from .core.fetcher import PageFetcher, fetch_blocking, fetch_page, normalize_response
from .http import AsyncHttpClient, HttpResponse
from .models.config import ConversionConfig, MdbrowseConfig, NetworkConfig, ServerConfig
from .models.events import EventType, FetchEvent
from .models.page import FetchRequest, PageContent

__all__ = [
    "__version__",
    # Core
    "PageFetcher",
    "fetch_page",
    "fetch_blocking",
    "normalize_response",
    # Models
    "FetchRequest",
    "PageContent",
    "HttpResponse",
    "AsyncHttpClient",
    # Config
    "MdbrowseConfig",
    "NetworkConfig",
    "ConversionConfig",
    "ServerConfig",
    # Events
    "EventType",
    "FetchEvent",
    # Conversion
    "DocumentKind",
    "classify_document",
    "decode_body",
    "MainContentExtractor",
    "HtmlToMarkdown",
    "MarkdownToHtml",
    "normalize_markdown",
    "parse_frontmatter",
    "render_markdown",
    "render_sitemap_markdown",
    "resolve_references",
]
