"""Markdown to HTML rendering for display."""

from __future__ import annotations

import functools
import logging
import re
from typing import Any

import markdown as markdown_lib
from markdown.extensions import Extension
from markdown.preprocessors import Preprocessor

from .frontmatter import parse_frontmatter
from .links import resolve_references
from .protocols import MarkdownRenderer

logger = logging.getLogger(__name__)

_LIST_START_RE = re.compile(r"^ {0,3}(?:[*+-]|1[.)])[ \t]+\S")


class ListInterruptPreprocessor(Preprocessor):
    """Insert a blank line where a list starts right under a paragraph line."""

    def run(self, lines: list[str]) -> list[str]:
        result: list[str] = []
        in_list = False
        for line in lines:
            if _LIST_START_RE.match(line):
                if result and result[-1].strip() and not in_list:
                    result.append("")
                in_list = True
            elif not line.strip():
                in_list = False
            result.append(line)
        return result


class ListInterruptExtension(Extension):
    """Let lists interrupt paragraphs the way GitHub renders them."""

    def extendMarkdown(self, md: markdown_lib.Markdown) -> None:
        # After fenced_code (25) so fenced blocks are already stashed
        md.preprocessors.register(ListInterruptPreprocessor(md), "list_interrupt", 15)


# GitHub-flavoured extras: tables, fenced code, ~~strike~~, task lists and
# lists that start directly under a paragraph.
# Newlines inside a paragraph stay soft (no nl2br).
DEFAULT_EXTENSIONS = (
    "tables",
    "fenced_code",
    "sane_lists",
    "pymdownx.tilde",
    "pymdownx.tasklist",
    ListInterruptExtension(),
)

DEFAULT_EXTENSION_CONFIGS: dict[str, dict[str, Any]] = {
    "pymdownx.tilde": {"subscript": False},
}

_FRAGMENT_HREF_RE = re.compile(r'href="#([^"]*)"')


class MarkdownToHtml:
    """
    Renders Markdown to HTML with Python-Markdown.

    Example:
        renderer = MarkdownToHtml()
        html = renderer.render("# Title\\n\\n| a | b |\\n|---|---|\\n| 1 | 2 |")
    """

    def __init__(
        self,
        extensions: tuple[str | Extension, ...] = DEFAULT_EXTENSIONS,
        extension_configs: dict[str, dict[str, Any]] | None = None,
    ):
        self._extensions = list(extensions)
        self._extension_configs = extension_configs or DEFAULT_EXTENSION_CONFIGS

    def render(self, markdown: str) -> str:
        """Render Markdown text to an HTML fragment."""
        # A fresh Markdown instance per call; instances carry per-document state
        return markdown_lib.markdown(
            markdown,
            extensions=self._extensions,
            extension_configs=self._extension_configs,
            output_format="html",
        )


@functools.lru_cache(maxsize=None)
def get_default_renderer() -> MarkdownToHtml:
    """Return the shared, lazily created renderer."""
    return MarkdownToHtml()


def anchor_fragment_links(html: str, base_url: str) -> str:
    """
    Point ``href="#x"`` links at ``{base_url}#x``.

    The base URL's own fragment is dropped first; an empty base leaves the
    HTML unchanged.
    """
    base = base_url.split("#")[0]
    if not base:
        return html
    return _FRAGMENT_HREF_RE.sub(lambda match: f'href="{base}#{match.group(1)}"', html)


def render_markdown(markdown: str, base_url: str, renderer: MarkdownRenderer | None = None) -> str:
    """
    Render a fetched Markdown document for display outside its page.

    Steps: drop frontmatter, resolve relative references, render to
    HTML, then anchor in-page fragment links to the page URL.

    Args:
        markdown: Markdown document (may start with frontmatter)
        base_url: URL the document was fetched from
        renderer: Renderer to use (shared default if None)

    Returns:
        HTML fragment
    """
    content = parse_frontmatter(markdown).content
    content = resolve_references(content, base_url)
    html = (renderer or get_default_renderer()).render(content)
    logger.debug(f"Rendered {len(content)} chars of Markdown to {len(html)} chars of HTML")
    return anchor_fragment_links(html, base_url)
