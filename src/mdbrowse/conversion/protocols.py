"""Protocol definitions for the external conversion engines."""

from typing import Protocol


class MarkdownConverter(Protocol):
    """
    Protocol for converting HTML to Markdown.

    Implementations convert cleaned HTML fragments (headings, lists,
    emphasis, links, tables, code blocks) to Markdown format.
    """

    def convert(self, html: str, url: str = "") -> str:
        """
        Convert HTML to Markdown.

        Args:
            html: HTML content string
            url: Source URL (for resolving relative links)

        Returns:
            Markdown string
        """
        ...


class MarkdownRenderer(Protocol):
    """Protocol for rendering Markdown text to HTML."""

    def render(self, markdown: str) -> str:
        """
        Render Markdown to HTML.

        Args:
            markdown: Markdown source

        Returns:
            HTML fragment
        """
        ...
