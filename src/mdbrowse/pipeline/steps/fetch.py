"""FetchStep - HTTP fetching pipeline step."""

import logging
from typing import Optional

from ...http.protocols import HttpClient
from ...models.events import EventType, FetchEvent
from ...models.page import accept_header
from ..base import EventEmitter, PageContext

logger = logging.getLogger(__name__)


class FetchStep:
    """
    Pipeline step that fetches page content via HTTP.

    Populates:
        ctx.content: Raw response body
        ctx.final_url: URL after redirects
        ctx.status_code: HTTP status code
        ctx.content_type: Content-Type header value

    Every HTTP status is accepted; error pages are normalized like any
    other page. Network errors, timeouts and oversized bodies raise.

    Example:
        async with AsyncHttpClient() as http_client:
            ctx = await FetchStep(http_client).execute(PageContext(url=url))
    """

    name = "fetch"

    def __init__(self, http_client: HttpClient, timeout: Optional[float] = None) -> None:
        """
        Initialize the fetch step.

        Args:
            http_client: HTTP client implementing HttpClient protocol
            timeout: Request timeout in seconds (client default if None)
        """
        self._client = http_client
        self._timeout = timeout

    async def execute(
        self,
        ctx: PageContext,
        emit: Optional[EventEmitter] = None,
    ) -> PageContext:
        """
        Execute the fetch step.

        Args:
            ctx: Page context with URL to fetch
            emit: Optional callback to emit events

        Returns:
            PageContext with the response fields populated
        """
        url = ctx.url
        logger.info(f"Fetching: {url}")

        if emit:
            emit(
                FetchEvent(
                    type=EventType.FETCH_STARTED,
                    url=url,
                    message=f"Fetching {url}",
                )
            )

        try:
            response = await self._client.get(
                url,
                timeout=self._timeout,
                headers={"Accept": accept_header(ctx.send_accept_md)},
            )
        except Exception as e:
            logger.error(f"Fetch error for {url}: {e!r}")
            # Re-raise to let pipeline handle it
            raise

        ctx.final_url = response.url or url
        ctx.status_code = response.status_code
        ctx.content_type = response.content_type or ""
        ctx.content = response.content
        ctx.headers = dict(response.headers)

        logger.debug(f"Fetched {ctx.final_url}: HTTP {response.status_code}, {len(response.content)} bytes")

        if emit:
            emit(
                FetchEvent(
                    type=EventType.FETCH_COMPLETED,
                    url=ctx.final_url,
                    status_code=response.status_code,
                    bytes_downloaded=len(response.content),
                    content_type=ctx.content_type,
                    message=f"Fetched {len(response.content)} bytes",
                )
            )

        return ctx
