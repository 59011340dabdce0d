"""Parse the leading ``---`` metadata block of a Markdown document."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

FrontmatterValue = Union[str, list[str]]

DELIMITER = "---"
_CLOSING = "\n---"
_ARRAY_MARKERS = ("", "|", ">")


@dataclass(frozen=True)
class ParsedMarkdown:
    """
    Markdown split into its frontmatter and body.

    Attributes:
        frontmatter: Key/value mapping, or None when the document has no
            well-formed frontmatter block
        content: The Markdown that follows the block
    """

    frontmatter: Optional[dict[str, FrontmatterValue]]
    content: str


def unquote(value: str) -> str:
    """Strip one pair of matching single or double quotes."""
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def parse_frontmatter_block(block: str) -> dict[str, FrontmatterValue]:
    """
    Parse the restricted YAML subset found between the delimiters.

    Supported lines:
        key: value        scalar (quotes stripped)
        key:              starts a list, as do ``key: |`` and ``key: >``
        - item            list item of the list being collected
        # comment         ignored, as are blank lines

    A later line for the same key replaces the earlier value. A list
    marker with no items yields an empty list; any other line is ignored.
    """
    frontmatter: dict[str, FrontmatterValue] = {}
    current_key: Optional[str] = None
    current_items: Optional[list[str]] = None

    for line in block.split("\n"):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        if stripped.startswith("- "):
            if current_key is not None and current_items is not None:
                current_items.append(unquote(stripped[2:].strip()))
            continue

        colon = stripped.find(":")
        if colon <= 0:
            continue

        key = stripped[:colon].strip()
        value = stripped[colon + 1 :].strip()

        if current_key is not None and current_items is not None:
            frontmatter[current_key] = current_items

        if value in _ARRAY_MARKERS:
            current_key = key
            current_items = []
        else:
            frontmatter[key] = unquote(value)
            current_key = None
            current_items = None

    if current_key is not None and current_items is not None:
        frontmatter[current_key] = current_items

    return frontmatter


def parse_frontmatter(markdown: str) -> ParsedMarkdown:
    """
    Split a Markdown document into frontmatter and content.

    Documents that do not start with ``---`` or whose block is never
    closed are returned unchanged with ``frontmatter=None``.

    Args:
        markdown: Markdown text, possibly starting with a frontmatter block

    Returns:
        ParsedMarkdown with the parsed mapping and the trimmed body
    """
    trimmed = markdown.strip()
    if not trimmed.startswith(DELIMITER):
        return ParsedMarkdown(frontmatter=None, content=markdown)

    end = trimmed.find(_CLOSING, len(DELIMITER))
    if end == -1:
        return ParsedMarkdown(frontmatter=None, content=markdown)

    block = trimmed[len(DELIMITER) + 1 : end].strip()
    content = trimmed[end + len(_CLOSING) :].strip()
    return ParsedMarkdown(frontmatter=parse_frontmatter_block(block), content=content)
