"""Pipeline step that renders sitemap documents."""

import logging
from typing import Optional

from ...conversion.classifier import DocumentKind
from ...conversion.sitemap import render_sitemap_markdown
from ...models.events import EventType, FetchEvent
from ..base import EventEmitter, PageContext

logger = logging.getLogger(__name__)


class SitemapStep:
    """
    Pipeline step that turns sitemap XML into a Markdown link listing.

    Sitemaps count as native Markdown and never keep their raw source.
    Finishes the pipeline for sitemap documents; other kinds pass through.
    """

    name = "sitemap"

    async def execute(
        self,
        ctx: PageContext,
        emit: Optional[EventEmitter] = None,
    ) -> PageContext:
        if ctx.kind != DocumentKind.SITEMAP:
            return ctx

        document = render_sitemap_markdown(ctx.text or "", ctx.base_url)
        ctx.markdown = document.markdown
        ctx.title = document.title
        ctx.raw_html = ""
        ctx.was_markdown = True
        ctx.is_done = True

        if emit:
            emit(
                FetchEvent(
                    type=EventType.SITEMAP_RENDERED,
                    url=ctx.base_url,
                    message=f"Rendered sitemap as {len(ctx.markdown)} chars of Markdown",
                )
            )
        return ctx
