"""Pipeline step for HTML to Markdown conversion."""

import logging
from typing import Optional

from ...conversion.extractor import MainContentExtractor, extract_html_title
from ...conversion.markdown import get_default_converter
from ...conversion.protocols import MarkdownConverter
from ...conversion.titles import hostname_title
from ...models.events import EventType, FetchEvent
from ..base import EventEmitter, PageContext

logger = logging.getLogger(__name__)


class ConvertStep:
    """
    Pipeline step that converts HTML to Markdown.

    Extracts the main content region from the HTML and converts it to
    Markdown. With ``ctx.auto_convert`` off, the raw HTML is returned
    as the document body instead. The title is taken from ``<title>``
    either way.

    Example:
        step = ConvertStep()
        ctx = await step.execute(ctx, emit=callback)
        # ctx.markdown now contains the converted content
    """

    name = "convert"

    def __init__(
        self,
        extractor: Optional[MainContentExtractor] = None,
        converter: Optional[MarkdownConverter] = None,
    ):
        """
        Initialize the convert step.

        Args:
            extractor: Content extractor (uses default if None)
            converter: Markdown converter (uses the shared default if None)
        """
        self._extractor = extractor or MainContentExtractor()
        self._converter = converter or get_default_converter()

    async def execute(
        self,
        ctx: PageContext,
        emit: Optional[EventEmitter] = None,
    ) -> PageContext:
        """
        Convert HTML content to Markdown.

        Reads from ctx.text, writes ctx.markdown, ctx.raw_html and ctx.title.

        Args:
            ctx: Page context with decoded HTML
            emit: Optional event emitter

        Returns:
            Updated context with markdown content
        """
        html = ctx.text or ""
        ctx.raw_html = html
        ctx.was_markdown = False
        ctx.title = extract_html_title(html) or hostname_title(ctx.base_url)

        if ctx.auto_convert:
            extracted_html = self._extractor.extract(html)
            ctx.markdown = self._converter.convert(extracted_html, ctx.base_url)
            logger.debug(f"Converted {ctx.base_url} to {len(ctx.markdown)} chars of Markdown")

            if emit:
                emit(
                    FetchEvent(
                        type=EventType.PAGE_CONVERTED,
                        url=ctx.base_url,
                        message=f"Converted to {len(ctx.markdown)} chars of Markdown",
                    )
                )
        else:
            ctx.markdown = html

        ctx.is_done = True
        return ctx
