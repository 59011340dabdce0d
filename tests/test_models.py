"""Tests for request, document and configuration models."""

import pytest
from pydantic import ValidationError

from mdbrowse import FetchRequest, MdbrowseConfig, PageContent
from mdbrowse.http import DEFAULT_USER_AGENT
from mdbrowse.models.config import ByteSize, NetworkConfig, ServerConfig
from mdbrowse.models.page import HTML_ACCEPT, MARKDOWN_ACCEPT, accept_header


class TestFetchRequest:
    """Tests for FetchRequest."""

    def test_defaults(self):
        """Test default request options."""
        request = FetchRequest(url="https://example.com")
        assert request.send_accept_md is True
        assert request.auto_convert is True
        assert accept_header(request.send_accept_md) == MARKDOWN_ACCEPT

    def test_wire_names(self):
        """Test camelCase input."""
        request = FetchRequest.model_validate(
            {"url": " https://example.com ", "sendAcceptMd": False, "autoConvert": False, "extra": 1}
        )
        assert request.url == "https://example.com"
        assert request.send_accept_md is False
        assert request.auto_convert is False
        assert accept_header(request.send_accept_md) == HTML_ACCEPT

    def test_python_names(self):
        """Test snake_case input."""
        request = FetchRequest(url="https://example.com", send_accept_md=False)
        assert request.send_accept_md is False

    def test_blank_url(self):
        """Test that blank URLs are rejected."""
        with pytest.raises(ValidationError, match="URL is required"):
            FetchRequest(url="  ")


class TestPageContent:
    """Tests for PageContent."""

    def test_wire_format(self):
        """Test camelCase output without an error field."""
        page = PageContent(
            url="https://example.com/",
            markdown="# Hi",
            raw_html="<h1>Hi</h1>",
            title="Hi",
            was_markdown=False,
        )

        assert page.to_wire() == {
            "url": "https://example.com/",
            "markdown": "# Hi",
            "rawHtml": "<h1>Hi</h1>",
            "title": "Hi",
            "wasMarkdown": False,
        }

    def test_error_document(self):
        """Test the failure document."""
        page = PageContent.from_error("timed out")

        assert page.is_error
        assert page.title == "Error"
        assert page.url == ""
        assert page.raw_html == ""
        assert page.was_markdown is False
        assert page.markdown == "# Error Loading Page\n\nFailed to load the URL.\n\n**Error:** timed out"
        assert page.to_wire()["error"] == "timed out"

    def test_title_required(self):
        """Test that documents always have a title."""
        with pytest.raises(ValidationError):
            PageContent(url="https://example.com", title="")


class TestByteSize:
    """Tests for ByteSize parsing."""

    def test_units(self):
        assert ByteSize._parse("200kb") == 200 * 1024
        assert ByteSize._parse("5MB") == 5 * 1024 * 1024
        assert ByteSize._parse("1.5gb") == int(1.5 * 1024**3)
        assert ByteSize._parse(1024) == 1024
        assert ByteSize._parse("2048") == 2048

    def test_invalid(self):
        with pytest.raises(ValueError):
            ByteSize._parse("lots")


class TestMdbrowseConfig:
    """Tests for MdbrowseConfig."""

    def test_defaults(self):
        """Test default configuration values."""
        config = MdbrowseConfig()
        assert config.network.user_agent == DEFAULT_USER_AGENT
        assert config.network.timeout == 30
        assert config.network.max_content_size == 50 * 1024 * 1024
        assert config.conversion.send_accept_md is True
        assert config.conversion.auto_convert is True
        assert config.server.host == "127.0.0.1"
        assert config.server.port == 8080
        assert config.log_level == "INFO"

    def test_from_yaml(self):
        """Test loading YAML configuration."""
        config = MdbrowseConfig.from_yaml(
            """
network:
  timeout: 10
  max_content_size: 5mb
conversion:
  auto_convert: false
server:
  port: 9000
log_level: DEBUG
"""
        )
        assert config.network.timeout == 10
        assert config.network.max_content_size == 5 * 1024 * 1024
        assert config.conversion.auto_convert is False
        assert config.server.port == 9000
        assert config.log_level == "DEBUG"

    def test_empty_yaml(self):
        """Test that an empty file gives the defaults."""
        assert MdbrowseConfig.from_yaml("") == MdbrowseConfig()

    def test_yaml_file(self, tmp_path):
        """Test loading from a file written with to_yaml."""
        path = tmp_path / "mdbrowse.yaml"
        path.write_text(MdbrowseConfig(server=ServerConfig(port=9001)).to_yaml(), encoding="utf-8")

        assert MdbrowseConfig.from_yaml_file(path).server.port == 9001

    def test_unknown_keys_rejected(self):
        """Test that typos in configuration are errors."""
        with pytest.raises(ValidationError):
            MdbrowseConfig.from_yaml("network:\n  timout: 5\n")

    def test_invalid_values(self):
        """Test field constraints."""
        with pytest.raises(ValidationError):
            NetworkConfig(timeout=0)
        with pytest.raises(ValidationError):
            ServerConfig(port=70000)
        with pytest.raises(ValidationError):
            MdbrowseConfig(log_level="LOUD")
