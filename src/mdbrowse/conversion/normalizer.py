"""Post-processing of converter output into clean Markdown."""

from __future__ import annotations

import re
import textwrap

_EXCESSIVE_BLANK_LINES_RE = re.compile(r"\n{3,}")
_FENCE_RE = re.compile(r"^\s*(```|~~~)")
_LIST_ITEM_RE = re.compile(r"^\s*(?:[*+-]|\d+\.)\s")

# html2text marks <pre> blocks with [code]...[/code] and indents them
_MARKED_CODE_RE = re.compile(r"\[code\]\n?(.*?)\n?[ \t]*\[/code\]", re.DOTALL)

# Backslash escapes that cannot start Markdown syntax where they appear
_WORD_UNDERSCORE_RE = re.compile(r"(?<=\w)\\_(?=\w)")
_INLINE_DOT_RE = re.compile(r"(?<=[^\s\d])\\\.")
_INLINE_SIGN_RE = re.compile(r"(?<=\S)\\([-+#])")
_BANG_RE = re.compile(r"\\!(?!\[)")


def _fence_marked_code(match: re.Match[str]) -> str:
    code = textwrap.dedent(match.group(1)).strip("\n")
    return f"\n```\n{code}\n```\n"


def _unescape_stray(line: str) -> str:
    line = _WORD_UNDERSCORE_RE.sub("_", line)
    line = _INLINE_DOT_RE.sub(".", line)
    line = _INLINE_SIGN_RE.sub(r"\1", line)
    return _BANG_RE.sub("!", line)


def _is_list_item(line: str) -> bool:
    return bool(_LIST_ITEM_RE.match(line))


def normalize_markdown(markdown: str) -> str:
    """
    Clean up Markdown produced by the HTML converter.

    Fix-ups:
    - Normalize line endings and non-breaking spaces
    - Turn ``[code]`` marked blocks into fenced code blocks
    - Drop backslash escapes that protect nothing (``snake\\_case``)
    - Re-indent html2text list blocks (flush left, four spaces per level)
      and remove blank lines between items
    - Remove trailing whitespace on each line
    - Collapse 3+ newlines into a single blank line
    - Trim leading and trailing whitespace

    Fenced code is left alone apart from trailing whitespace.

    Args:
        markdown: Converter output

    Returns:
        Cleaned Markdown text
    """
    if not markdown:
        return ""

    text = markdown.replace("\r\n", "\n").replace("\r", "\n").replace("\u00a0", " ")
    text = _MARKED_CODE_RE.sub(_fence_marked_code, text)

    lines = text.split("\n")
    cleaned: list[str] = []
    in_fence = False
    list_indents: list[int] = []
    list_shift = 0
    for index, raw_line in enumerate(lines):
        line = raw_line.rstrip()

        if _FENCE_RE.match(line):
            in_fence = not in_fence
            cleaned.append(line)
            continue
        if in_fence:
            cleaned.append(line)
            continue

        # html2text indents list items two spaces per level; renderers
        # expect top-level items flush left and four spaces per level
        indent = len(line) - len(line.lstrip(" "))
        if _is_list_item(line) and (list_indents or indent < 4):
            while list_indents and list_indents[-1] > indent:
                list_indents.pop()
            if not list_indents or list_indents[-1] < indent:
                list_indents.append(indent)
            list_shift = 4 * (len(list_indents) - 1) - indent
        elif line and indent == 0:
            list_indents = []
            list_shift = 0
        if list_shift and line:
            line = " " * max(indent + list_shift, 0) + line.lstrip(" ")

        # Tighten loose lists
        if (
            not line
            and cleaned
            and _is_list_item(cleaned[-1])
            and index + 1 < len(lines)
            and _is_list_item(lines[index + 1])
        ):
            continue

        cleaned.append(_unescape_stray(line))

    text = "\n".join(cleaned)
    text = _EXCESSIVE_BLANK_LINES_RE.sub("\n\n", text)
    return text.strip()
