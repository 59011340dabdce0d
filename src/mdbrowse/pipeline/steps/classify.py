"""Pipeline step that decodes the body and classifies the document."""

import logging
from typing import Optional

from ...conversion.charset import decode_body
from ...conversion.classifier import classify_document
from ...models.events import EventType, FetchEvent
from ..base import EventEmitter, PageContext

logger = logging.getLogger(__name__)


class ClassifyStep:
    """
    Pipeline step that decodes ctx.content and sets ctx.text and ctx.kind.

    Never fails: undecodable bytes fall back to UTF-8 with replacement
    and unrecognized documents are classified as HTML.
    """

    name = "classify"

    async def execute(
        self,
        ctx: PageContext,
        emit: Optional[EventEmitter] = None,
    ) -> PageContext:
        if ctx.text is None:
            ctx.text = decode_body(ctx.content or b"", ctx.content_type)

        ctx.kind = classify_document(ctx.content_type, ctx.text)
        logger.debug(f"Classified {ctx.base_url} as {ctx.kind.value} (Content-Type: {ctx.content_type!r})")

        if emit:
            emit(
                FetchEvent(
                    type=EventType.DOCUMENT_CLASSIFIED,
                    url=ctx.base_url,
                    content_type=ctx.content_type,
                    kind=ctx.kind.value,
                )
            )
        return ctx
