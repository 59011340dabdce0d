"""PageFetcher: fetch a URL and normalize it into a PageContent document."""

from __future__ import annotations

import asyncio
import logging
from types import TracebackType
from typing import Union

from ..conversion.extractor import MainContentExtractor
from ..conversion.protocols import MarkdownConverter
from ..conversion.titles import hostname_title
from ..http import AsyncHttpClient, HttpClient, HttpResponse
from ..models.config import MdbrowseConfig
from ..models.page import FetchRequest, PageContent
from ..pipeline.base import EventEmitter, FetchPipeline, PageContext
from ..pipeline.base import FetchStep as FetchStepProtocol
from ..pipeline.steps import ClassifyStep, ConvertStep, FetchStep, MarkdownStep, SitemapStep

logger = logging.getLogger(__name__)


def normalization_steps(
    extractor: MainContentExtractor | None = None,
    converter: MarkdownConverter | None = None,
) -> list[FetchStepProtocol]:
    """
    Steps that turn a fetched response into a document.

    Sitemap, Markdown and HTML handling are tried in that order; the
    first step that recognizes the document finishes the pipeline.
    """
    return [
        ClassifyStep(),
        SitemapStep(),
        MarkdownStep(),
        ConvertStep(extractor=extractor, converter=converter),
    ]


def to_page_content(ctx: PageContext) -> PageContent:
    """Build the response document from a finished pipeline context."""
    if ctx.error is not None:
        return PageContent.from_error(ctx.error)

    return PageContent(
        url=ctx.base_url,
        markdown=ctx.markdown,
        raw_html=ctx.raw_html,
        title=ctx.title or hostname_title(ctx.base_url),
        was_markdown=ctx.was_markdown,
    )


async def normalize_response(
    response: HttpResponse,
    *,
    auto_convert: bool = True,
    emit: EventEmitter | None = None,
) -> PageContent:
    """
    Normalize an already fetched response into a document.

    Args:
        response: Response envelope (content type, body, final URL)
        auto_convert: Convert HTML responses to Markdown
        emit: Optional callback for emitting events

    Returns:
        The normalized PageContent
    """
    ctx = PageContext(
        url=response.url,
        auto_convert=auto_convert,
        final_url=response.url,
        status_code=response.status_code,
        content_type=response.content_type or "",
        content=response.content,
        headers=dict(response.headers),
    )
    ctx = await FetchPipeline(steps=normalization_steps()).run(ctx, emit)
    return to_page_content(ctx)


class PageFetcher:
    """
    Primary API: fetch URLs and return normalized documents.

    Owns an :class:`AsyncHttpClient` unless one is injected. Each call to
    :meth:`fetch` runs an independent pipeline, so concurrent fetches need
    no coordination.

    Example:
        async with PageFetcher() as fetcher:
            page = await fetcher.fetch("https://example.com/README.md")
            print(page.title, page.was_markdown)
    """

    def __init__(
        self,
        config: MdbrowseConfig | None = None,
        http_client: HttpClient | None = None,
    ):
        """
        Initialize the PageFetcher.

        Args:
            config: Configuration (defaults if None)
            http_client: Transport to use instead of an owned AsyncHttpClient
        """
        self.config = config or MdbrowseConfig()
        self._http_client = http_client
        self._owned_client: AsyncHttpClient | None = None
        self._pipeline: FetchPipeline | None = None

    async def __aenter__(self) -> PageFetcher:
        """Enter async context and initialize components."""
        if self._http_client is None:
            network = self.config.network
            self._owned_client = AsyncHttpClient(
                user_agent=network.user_agent,
                proxy=network.proxy,
                default_timeout=network.timeout,
                max_content_size=int(network.max_content_size),
            )
            await self._owned_client.__aenter__()
            self._http_client = self._owned_client

        steps: list[FetchStepProtocol] = [FetchStep(http_client=self._http_client)]
        steps.extend(normalization_steps())
        self._pipeline = FetchPipeline(steps=steps)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit async context and close the owned client."""
        if self._owned_client is not None:
            await self._owned_client.__aexit__(exc_type, exc_val, exc_tb)
            self._owned_client = None
            self._http_client = None
        self._pipeline = None

    def build_request(self, url: str) -> FetchRequest:
        """Create a request for a URL using the configured defaults."""
        return FetchRequest(
            url=url,
            send_accept_md=self.config.conversion.send_accept_md,
            auto_convert=self.config.conversion.auto_convert,
        )

    async def fetch(
        self,
        request: Union[FetchRequest, str],
        emit: EventEmitter | None = None,
    ) -> PageContent:
        """
        Fetch a URL and normalize the response.

        Transport failures do not raise; they come back as an error
        document (``page.error`` set, title ``Error``).

        Args:
            request: FetchRequest or bare URL (config defaults apply)
            emit: Optional callback for emitting events

        Returns:
            The normalized PageContent

        Raises:
            pydantic.ValidationError: If a bare URL is blank
        """
        if self._pipeline is None:
            raise RuntimeError("PageFetcher not initialized. Use 'async with' context manager.")

        if isinstance(request, str):
            request = self.build_request(request)

        ctx = await self._pipeline.execute(
            request.url,
            emit,
            send_accept_md=request.send_accept_md,
            auto_convert=request.auto_convert,
        )
        if ctx.error is not None:
            logger.error(f"Failed to load {request.url}: {ctx.error}")
        else:
            logger.info(f"Loaded {ctx.base_url} ({ctx.kind.value if ctx.kind else 'unknown'})")
        return to_page_content(ctx)


async def fetch_page(
    request: Union[FetchRequest, str],
    config: MdbrowseConfig | None = None,
    emit: EventEmitter | None = None,
) -> PageContent:
    """Fetch a single page with a short-lived PageFetcher."""
    async with PageFetcher(config) as fetcher:
        return await fetcher.fetch(request, emit)


def fetch_blocking(
    request: Union[FetchRequest, str],
    config: MdbrowseConfig | None = None,
    emit: EventEmitter | None = None,
) -> PageContent:
    """
    Blocking fetch for sync code that can't use async/await.

    WARNING: Do not call from within an existing event loop (e.g., Jupyter,
    asyncio-based frameworks). Use the async PageFetcher API instead.

    Example:
        page = fetch_blocking("https://example.com")
        print(page.markdown)
    """
    # Detect if we're already in an async context
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(fetch_page(request, config, emit))
    raise RuntimeError("fetch_blocking() called from async context. Use 'async with PageFetcher()' instead.")
