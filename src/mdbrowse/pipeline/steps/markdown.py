"""Pipeline step that passes native Markdown through."""

from typing import Optional

from ...conversion.classifier import DocumentKind
from ...conversion.titles import extract_markdown_title, hostname_title
from ..base import EventEmitter, PageContext


class MarkdownStep:
    """
    Pipeline step for documents served as Markdown.

    The body is kept verbatim; the title comes from the first ``# ``
    heading, else the hostname.
    """

    name = "markdown"

    async def execute(
        self,
        ctx: PageContext,
        emit: Optional[EventEmitter] = None,
    ) -> PageContext:
        if ctx.kind != DocumentKind.MARKDOWN:
            return ctx

        ctx.markdown = ctx.text or ""
        ctx.raw_html = ""
        ctx.title = extract_markdown_title(ctx.markdown) or hostname_title(ctx.base_url)
        ctx.was_markdown = True
        ctx.is_done = True
        return ctx
