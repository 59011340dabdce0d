"""Base classes for the fetch-and-normalize pipeline."""

from dataclasses import dataclass, field
from typing import Callable, Optional, Protocol, runtime_checkable

from ..conversion.classifier import DocumentKind
from ..models.events import EventType, FetchEvent

# Type alias for event emitter function
EventEmitter = Callable[[FetchEvent], None]


@dataclass
class PageContext:
    """
    Context object passed through pipeline steps.

    Contains all state for processing a single page, accumulated
    as it moves through the pipeline.

    Attributes:
        url: The requested URL
        final_url: URL after redirects (base for relative references)
        content: Raw response body
        content_type: Content-Type header value
        text: Decoded response body
        kind: Document classification
        markdown: Normalized Markdown body
        raw_html: Decoded HTML source (HTML documents only)
        title: Document title
        was_markdown: True when no HTML conversion was needed
        is_done: If True, remaining steps are skipped
        error: Error message if an exception occurred
        failed_step: Name of the step that raised
    """

    url: str
    send_accept_md: bool = True
    auto_convert: bool = True

    # Response (filled by the fetch step)
    final_url: Optional[str] = None
    status_code: Optional[int] = None
    content_type: str = ""
    content: Optional[bytes] = None
    headers: dict = field(default_factory=dict)

    # Normalization results
    text: Optional[str] = None
    kind: Optional[DocumentKind] = None
    markdown: str = ""
    raw_html: str = ""
    title: str = ""
    was_markdown: bool = False

    # Status
    is_done: bool = False
    error: Optional[str] = None
    failed_step: Optional[str] = None

    @property
    def base_url(self) -> str:
        """URL relative references resolve against."""
        return self.final_url or self.url


@runtime_checkable
class FetchStep(Protocol):
    """
    Protocol for pipeline steps.

    Each step receives a PageContext, processes it, and returns
    the (possibly modified) context.

    Error Handling Contract:
    - When a step produced the final document: set ctx.is_done = True
    - For content problems: degrade to a best-effort result, never raise
    - For transport failures: raise an exception
    - The pipeline will catch exceptions and set ctx.error

    Example implementation:
        class UppercaseTitleStep:
            name = "uppercase_title"

            async def execute(
                self,
                ctx: PageContext,
                emit: Optional[EventEmitter] = None
            ) -> PageContext:
                ctx.title = ctx.title.upper()
                return ctx
    """

    name: str

    async def execute(
        self,
        ctx: PageContext,
        emit: Optional[EventEmitter] = None,
    ) -> PageContext:
        """
        Execute this pipeline step.

        Args:
            ctx: The page context with accumulated state
            emit: Optional callback to emit events

        Returns:
            The (possibly modified) page context
        """
        ...


@dataclass
class FetchPipeline:
    """
    Pipeline for processing a single page through multiple steps.

    Steps are executed in order. If a step sets ctx.is_done = True,
    remaining steps are skipped. If a step raises an exception, the
    error is captured in ctx.error and processing stops.

    Example:
        pipeline = FetchPipeline(steps=[
            FetchStep(http_client),
            ClassifyStep(),
            SitemapStep(),
            MarkdownStep(),
            ConvertStep(),
        ])

        ctx = await pipeline.execute("https://example.com", emit=log_event)
        if ctx.error:
            logger.error(f"Failed: {ctx.error}")
    """

    steps: list[FetchStep]

    async def execute(
        self,
        url: str,
        emit: Optional[EventEmitter] = None,
        *,
        send_accept_md: bool = True,
        auto_convert: bool = True,
    ) -> PageContext:
        """
        Execute the pipeline for a URL.

        Args:
            url: The URL to process
            emit: Optional callback for emitting events
            send_accept_md: Advertise Markdown in the Accept header
            auto_convert: Convert HTML responses to Markdown

        Returns:
            PageContext with final state (check error for status)
        """
        ctx = PageContext(url=url, send_accept_md=send_accept_md, auto_convert=auto_convert)
        return await self.run(ctx, emit)

    async def run(
        self,
        ctx: PageContext,
        emit: Optional[EventEmitter] = None,
    ) -> PageContext:
        """
        Run the steps over an existing context.

        Used directly when the response is already available and only
        the normalization steps are needed.
        """
        for step in self.steps:
            if ctx.is_done:
                break

            try:
                ctx = await step.execute(ctx, emit)
            except Exception as e:
                ctx.error = str(e) or type(e).__name__
                ctx.failed_step = step.name
                ctx.is_done = True

                # Emit failure event
                if emit:
                    emit(
                        FetchEvent(
                            type=EventType.FETCH_FAILED,
                            url=ctx.url,
                            error=ctx.error,
                            message=f"{step.name} failed",
                        )
                    )
                break

        return ctx

    def add_step(self, step: FetchStep) -> "FetchPipeline":
        """
        Add a step to the pipeline (fluent API).

        Args:
            step: The step to add

        Returns:
            Self for chaining
        """
        self.steps.append(step)
        return self
