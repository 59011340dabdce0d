"""Tests for the JSON API."""

from unittest.mock import AsyncMock

import aiohttp
import pytest
from aiohttp import test_utils

from mdbrowse import HttpResponse
from mdbrowse.models.page import HTML_ACCEPT
from mdbrowse.server import create_app

HTML_PAGE = "<html><head><title>T</title></head><body><main><h1>Hi</h1></main></body></html>"


def make_client(body: bytes = HTML_PAGE.encode(), content_type: str = "text/html"):
    client = AsyncMock()
    client.get.return_value = HttpResponse(200, body, content_type, "https://example.com/")
    return client


def api_client(transport=None) -> test_utils.TestClient:
    app = create_app(http_client=transport or make_client())
    return test_utils.TestClient(test_utils.TestServer(app))


class TestFetchEndpoint:
    """Tests for POST /api/fetch."""

    @pytest.mark.asyncio
    async def test_fetch_html(self):
        """Test a successful fetch with camelCase wire fields."""
        async with api_client() as client:
            resp = await client.post("/api/fetch", json={"url": "https://example.com/"})
            data = await resp.json()

        assert resp.status == 200
        assert data["title"] == "T"
        assert "# Hi" in data["markdown"]
        assert data["rawHtml"] == HTML_PAGE
        assert data["wasMarkdown"] is False
        assert data["url"] == "https://example.com/"
        assert "error" not in data

    @pytest.mark.asyncio
    async def test_fetch_options(self):
        """Test that request options reach the transport."""
        transport = make_client()

        async with api_client(transport) as client:
            resp = await client.post(
                "/api/fetch",
                json={"url": "https://example.com/", "sendAcceptMd": False, "autoConvert": False},
            )
            data = await resp.json()

        assert resp.status == 200
        assert data["markdown"] == HTML_PAGE
        assert transport.get.await_args.kwargs["headers"] == {"Accept": HTML_ACCEPT}

    @pytest.mark.asyncio
    async def test_missing_url(self):
        """Test that requests without a URL are rejected."""
        async with api_client() as client:
            resp = await client.post("/api/fetch", json={"sendAcceptMd": True})
            data = await resp.json()

        assert resp.status == 400
        assert data == {"error": "URL is required"}

    @pytest.mark.asyncio
    async def test_blank_url(self):
        """Test that a whitespace URL is rejected."""
        async with api_client() as client:
            resp = await client.post("/api/fetch", json={"url": "   "})

        assert resp.status == 400

    @pytest.mark.asyncio
    async def test_invalid_json(self):
        """Test that a non-JSON body is rejected."""
        async with api_client() as client:
            resp = await client.post("/api/fetch", data="not json")

        assert resp.status == 400

    @pytest.mark.asyncio
    async def test_fetch_failure(self):
        """Test that transport failures answer 500 with the error document."""
        transport = AsyncMock()
        transport.get.side_effect = aiohttp.ClientConnectionError("Connection refused")

        async with api_client(transport) as client:
            resp = await client.post("/api/fetch", json={"url": "https://down.example.com"})
            data = await resp.json()

        assert resp.status == 500
        assert data["error"] == "Connection refused"
        assert data["title"] == "Error"
        assert data["markdown"].startswith("# Error Loading Page")


class TestRenderEndpoint:
    """Tests for POST /api/render."""

    @pytest.mark.asyncio
    async def test_render(self):
        """Test rendering with frontmatter and relative links."""
        markdown = "---\ntitle: Doc\ntags:\n  - a\n---\n\n[Next](next)"

        async with api_client() as client:
            resp = await client.post(
                "/api/render",
                json={"markdown": markdown, "baseUrl": "https://example.com/docs/page"},
            )
            data = await resp.json()

        assert resp.status == 200
        assert data["frontmatter"] == {"title": "Doc", "tags": ["a"]}
        assert 'href="https://example.com/docs/next"' in data["html"]
        assert "title: Doc" not in data["html"]

    @pytest.mark.asyncio
    async def test_render_without_frontmatter(self):
        """Test that frontmatter is null when absent."""
        async with api_client() as client:
            resp = await client.post("/api/render", json={"markdown": "# Hi"})
            data = await resp.json()

        assert resp.status == 200
        assert data["frontmatter"] is None
        assert "<h1>Hi</h1>" in data["html"]

    @pytest.mark.asyncio
    async def test_render_requires_markdown(self):
        """Test that a missing markdown field is rejected."""
        async with api_client() as client:
            resp = await client.post("/api/render", json={"baseUrl": "https://example.com"})

        assert resp.status == 400
