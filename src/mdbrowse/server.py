"""JSON API: fetch a URL as a normalized document, render Markdown to HTML."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from typing import Any, Optional

from aiohttp import web
from pydantic import ValidationError

from .conversion.frontmatter import parse_frontmatter
from .conversion.render import render_markdown
from .core.fetcher import PageFetcher
from .http.protocols import HttpClient
from .models.config import MdbrowseConfig
from .models.page import FetchRequest

logger = logging.getLogger(__name__)

FETCHER_KEY = web.AppKey("fetcher", PageFetcher)

URL_REQUIRED = "URL is required"


async def _read_json(request: web.Request) -> Optional[dict[str, Any]]:
    """Request body as a JSON object, or None when it is not one."""
    try:
        body = await request.json()
    except ValueError:
        return None
    return body if isinstance(body, dict) else None


async def handle_fetch(request: web.Request) -> web.Response:
    """
    POST /api/fetch

    Body: ``{"url": ..., "sendAcceptMd": true, "autoConvert": true}``.
    Answers 400 without a usable URL, 500 with the error document when
    the fetch failed, 200 with the page document otherwise.
    """
    body = await _read_json(request)
    if not body or not body.get("url"):
        return web.json_response({"error": URL_REQUIRED}, status=400)

    try:
        fetch_request = FetchRequest.model_validate(body)
    except ValidationError as e:
        logger.debug(f"Rejected fetch request {body!r}: {e}")
        return web.json_response({"error": URL_REQUIRED}, status=400)

    page = await request.app[FETCHER_KEY].fetch(fetch_request)
    return web.json_response(page.to_wire(), status=500 if page.is_error else 200)


async def handle_render(request: web.Request) -> web.Response:
    """
    POST /api/render

    Body: ``{"markdown": ..., "baseUrl": ...}``. Returns the rendered
    HTML and the parsed frontmatter (null when there is none).
    """
    body = await _read_json(request)
    if body is None or not isinstance(body.get("markdown"), str):
        return web.json_response({"error": "Markdown is required"}, status=400)

    markdown = body["markdown"]
    base_url = body.get("baseUrl") or ""
    if not isinstance(base_url, str):
        return web.json_response({"error": "baseUrl must be a string"}, status=400)

    return web.json_response(
        {
            "html": render_markdown(markdown, base_url),
            "frontmatter": parse_frontmatter(markdown).frontmatter,
        }
    )


async def _fetcher_context(app: web.Application) -> AsyncIterator[None]:
    async with app[FETCHER_KEY]:
        yield


def create_app(
    config: MdbrowseConfig | None = None,
    http_client: HttpClient | None = None,
) -> web.Application:
    """
    Build the aiohttp application.

    Args:
        config: Configuration (defaults if None)
        http_client: Transport override, mainly for tests

    Returns:
        The configured web.Application
    """
    app = web.Application()
    app[FETCHER_KEY] = PageFetcher(config, http_client=http_client)
    app.cleanup_ctx.append(_fetcher_context)
    app.router.add_post("/api/fetch", handle_fetch)
    app.router.add_post("/api/render", handle_render)
    return app


def run_server(config: MdbrowseConfig | None = None) -> None:
    """Serve the API until interrupted."""
    config = config or MdbrowseConfig()
    logger.info(f"Serving on http://{config.server.host}:{config.server.port}")
    web.run_app(
        create_app(config),
        host=config.server.host,
        port=config.server.port,
        print=None,
    )
