"""Tests for frontmatter parsing."""

from mdbrowse.conversion import parse_frontmatter
from mdbrowse.conversion.frontmatter import parse_frontmatter_block, unquote


class TestParseFrontmatter:
    """Tests for parse_frontmatter."""

    def test_scalars_and_lists(self):
        """Test a typical frontmatter block."""
        markdown = """---
title: Getting Started
author: "Ada"
tags:
  - intro
  - 'setup'
---

# Getting Started

Body text."""

        parsed = parse_frontmatter(markdown)

        assert parsed.frontmatter == {
            "title": "Getting Started",
            "author": "Ada",
            "tags": ["intro", "setup"],
        }
        assert parsed.content == "# Getting Started\n\nBody text."

    def test_no_frontmatter(self):
        """Test that documents without frontmatter are returned unchanged."""
        markdown = "# Title\n\n---\n\nText"

        parsed = parse_frontmatter(markdown)

        assert parsed.frontmatter is None
        assert parsed.content == markdown

    def test_unclosed_block(self):
        """Test that an unclosed block is not frontmatter."""
        markdown = "---\ntitle: Oops\n\n# Body"

        parsed = parse_frontmatter(markdown)

        assert parsed.frontmatter is None
        assert parsed.content == markdown

    def test_leading_whitespace_allowed(self):
        """Test that the document is trimmed before parsing."""
        parsed = parse_frontmatter("\n\n---\nkey: value\n---\nBody\n")

        assert parsed.frontmatter == {"key": "value"}
        assert parsed.content == "Body"

    def test_empty_block(self):
        """Test an empty frontmatter block."""
        parsed = parse_frontmatter("---\n---\nBody")

        assert parsed.frontmatter == {}
        assert parsed.content == "Body"


class TestParseFrontmatterBlock:
    """Tests for the restricted YAML subset."""

    def test_comments_and_blank_lines_ignored(self):
        """Test that comments and blank lines are skipped."""
        block = "# comment\n\nname: value\n  # indented comment"

        assert parse_frontmatter_block(block) == {"name": "value"}

    def test_block_markers_start_lists(self):
        """Test that '|' and '>' start a list like a bare key."""
        block = "a: |\n- one\nb: >\n- two\n- three"

        assert parse_frontmatter_block(block) == {"a": ["one"], "b": ["two", "three"]}

    def test_marker_without_items(self):
        """Test that a list with no items is empty."""
        assert parse_frontmatter_block("tags:\ntitle: x") == {"tags": [], "title": "x"}
        assert parse_frontmatter_block("tags:") == {"tags": []}

    def test_orphan_items_ignored(self):
        """Test that list items outside a list are dropped."""
        assert parse_frontmatter_block("- stray\ntitle: x\n- also stray") == {"title": "x"}

    def test_value_keeps_later_colons(self):
        """Test that only the first colon separates key and value."""
        assert parse_frontmatter_block("url: https://example.com:8080/x") == {
            "url": "https://example.com:8080/x"
        }

    def test_later_key_wins(self):
        """Test that repeated keys replace earlier values."""
        assert parse_frontmatter_block("a: 1\na: 2") == {"a": "2"}

    def test_lines_without_key_ignored(self):
        """Test that lines with no key are dropped."""
        assert parse_frontmatter_block(": value\njust text\nk: v") == {"k": "v"}


class TestUnquote:
    """Tests for unquote."""

    def test_matching_quotes(self):
        """Test that a matching pair is stripped."""
        assert unquote('"double"') == "double"
        assert unquote("'single'") == "single"

    def test_unmatched_quotes_kept(self):
        """Test that unmatched quotes are left alone."""
        assert unquote("\"mixed'") == "\"mixed'"
        assert unquote('"') == '"'
        assert unquote("plain") == "plain"
