"""Request and document models exchanged at the fetch boundary."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

MARKDOWN_ACCEPT = "text/markdown, text/x-markdown, text/plain, text/html, */*"
HTML_ACCEPT = "text/html, */*"

ERROR_TITLE = "Error"


def accept_header(send_accept_md: bool) -> str:
    """Accept header advertising Markdown support, or HTML only."""
    return MARKDOWN_ACCEPT if send_accept_md else HTML_ACCEPT


class FetchRequest(BaseModel):
    """
    A request to fetch and normalize one URL.

    Accepts both snake_case and the camelCase wire names:
        FetchRequest.model_validate({"url": "https://example.com", "sendAcceptMd": False})
    """

    url: str = Field(..., description="URL to fetch")
    send_accept_md: bool = Field(
        True,
        alias="sendAcceptMd",
        description="Advertise Markdown in the Accept header",
    )
    auto_convert: bool = Field(
        True,
        alias="autoConvert",
        description="Convert HTML responses to Markdown",
    )

    model_config = {"populate_by_name": True, "extra": "ignore"}

    @field_validator("url")
    @classmethod
    def _url_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("URL is required")
        return value


class PageContent(BaseModel):
    """
    The normalized document produced for a fetched URL.

    ``raw_html`` is empty for native Markdown and sitemaps. ``title`` is
    never empty. ``error`` is only set on failure documents.
    """

    url: str = Field("", description="Final URL after redirects")
    markdown: str = Field("", description="Markdown body")
    raw_html: str = Field("", alias="rawHtml", description="Decoded HTML source")
    title: str = Field(..., min_length=1, description="Document title")
    was_markdown: bool = Field(
        False,
        alias="wasMarkdown",
        description="True when no HTML conversion was needed",
    )
    error: Optional[str] = Field(None, description="Error message for failed fetches")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_error(cls, message: str) -> "PageContent":
        """Build the failure document shown in place of a page."""
        return cls(
            error=message,
            url="",
            markdown=f"# Error Loading Page\n\nFailed to load the URL.\n\n**Error:** {message}",
            raw_html="",
            title=ERROR_TITLE,
            was_markdown=False,
        )

    @property
    def is_error(self) -> bool:
        """Check if this is a failure document."""
        return self.error is not None

    def to_wire(self) -> dict:
        """Serialize with the camelCase wire names, omitting an unset error."""
        return self.model_dump(by_alias=True, exclude_none=True)
