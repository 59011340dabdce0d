"""Async HTTP client for single page fetches."""

from __future__ import annotations

import logging
from types import TracebackType

import aiohttp

from .protocols import HttpResponse

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "MDBrowser/1.0 (Web Markdown Browser)"


class AsyncHttpClient:
    """
    Async HTTP client used as the fetch transport.

    Features:
    - Transparent redirect following (the final URL is reported back)
    - Content size limits to prevent memory exhaustion
    - Timeout controls

    There is no retry loop: a failed request raises
    immediately and the caller turns it into an error document.

    Example:
        async with AsyncHttpClient() as client:
            response = await client.get("https://example.com")
            print(response.url, response.content_type)
    """

    MAX_CONTENT_SIZE = 50 * 1024 * 1024  # 50 MB

    def __init__(
        self,
        user_agent: str | None = None,
        proxy: str | None = None,
        default_timeout: float = 30.0,
        max_content_size: int = MAX_CONTENT_SIZE,
    ) -> None:
        """
        Initialize the HTTP client.

        Args:
            user_agent: Custom User-Agent string
            proxy: Proxy URL (http:// or socks5://)
            default_timeout: Default request timeout in seconds
            max_content_size: Maximum response size in bytes
        """
        self._user_agent = user_agent or DEFAULT_USER_AGENT
        self._proxy = proxy
        self._default_timeout = default_timeout
        self._max_content_size = max_content_size

        self._session: aiohttp.ClientSession | None = None

    async def __aenter__(self) -> AsyncHttpClient:
        """Enter async context and create session."""
        self._session = aiohttp.ClientSession(
            headers={"User-Agent": self._user_agent},
        )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit async context and close session."""
        if self._session:
            await self._session.close()
            self._session = None

    async def get(
        self,
        url: str,
        *,
        timeout: float | None = None,
        headers: dict[str, str] | None = None,
    ) -> HttpResponse:
        """
        Perform an HTTP GET request.

        Args:
            url: The URL to fetch
            timeout: Request timeout in seconds (uses default if None)
            headers: Optional additional headers

        Returns:
            HttpResponse with status, content, and headers

        Raises:
            aiohttp.ClientError: On network errors
            asyncio.TimeoutError: When the request exceeds the timeout
            ValueError: On content size exceeded
        """
        if self._session is None:
            raise RuntimeError("Client not initialized. Use 'async with' context manager.")

        timeout_val = timeout or self._default_timeout

        async with self._session.get(
            url,
            timeout=aiohttp.ClientTimeout(total=timeout_val),
            headers=headers,
            proxy=self._proxy,
            allow_redirects=True,
        ) as response:
            # Check Content-Length if available
            content_length = response.headers.get("Content-Length")
            if content_length and content_length.isdigit() and int(content_length) > self._max_content_size:
                raise ValueError(f"Content too large: {content_length} bytes")

            # Read content with size limit
            content = b""
            async for chunk in response.content.iter_chunked(8192):
                content += chunk
                if len(content) > self._max_content_size:
                    raise ValueError(f"Content size limit exceeded: >{self._max_content_size} bytes")

            final_url = str(response.url)
            if final_url != url:
                logger.debug(f"Redirected {url} -> {final_url}")

            return HttpResponse(
                status_code=response.status,
                content=content,
                content_type=response.headers.get("Content-Type", ""),
                url=final_url,
                headers=dict(response.headers),
            )
