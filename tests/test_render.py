"""Tests for Markdown to HTML rendering."""

from mdbrowse.conversion import MarkdownToHtml, render_markdown
from mdbrowse.conversion.render import anchor_fragment_links

PAGE = "https://example.com/docs/page"


class TestMarkdownToHtml:
    """Tests for MarkdownToHtml."""

    def test_headings_and_paragraphs(self):
        """Test basic rendering."""
        html = MarkdownToHtml().render("# Title\n\nSome *text*.")

        assert "<h1>Title</h1>" in html
        assert "<em>text</em>" in html

    def test_tables(self):
        """Test table rendering."""
        html = MarkdownToHtml().render("| a | b |\n|---|---|\n| 1 | 2 |")

        assert "<table>" in html
        assert "<td>1</td>" in html

    def test_fenced_code(self):
        """Test fenced code rendering."""
        html = MarkdownToHtml().render("```\nprint('hi')\n```")

        assert "<pre><code>" in html
        assert "print(" in html

    def test_strikethrough(self):
        """Test ~~strikethrough~~ rendering."""
        html = MarkdownToHtml().render("This is ~~gone~~.")

        assert "<del>gone</del>" in html

    def test_task_lists(self):
        """Test task list rendering."""
        html = MarkdownToHtml().render("- [x] done\n- [ ] todo")

        assert "checkbox" in html
        assert "done" in html

    def test_list_directly_after_paragraph(self):
        """Test that a list needs no blank line above it."""
        html = MarkdownToHtml().render("Intro:\n- a\n- b")

        assert "<p>Intro:</p>" in html
        assert "<ul>" in html
        assert "<li>a</li>" in html
        assert "<li>b</li>" in html

    def test_ordered_list_after_paragraph_starts_at_one(self):
        """Test that only a list starting at 1 interrupts a paragraph."""
        assert "<ol>" in MarkdownToHtml().render("Steps:\n1. first\n2. second")
        assert "<ol" not in MarkdownToHtml().render("It happened in\n2024. Then more.")

    def test_list_marker_inside_fence_untouched(self):
        """Test that fenced code is not split."""
        html = MarkdownToHtml().render("```\nx\n- y\n```")

        assert "<li>" not in html
        assert "x\n- y" in html

    def test_nested_list(self):
        """Test four-space nested lists."""
        html = MarkdownToHtml().render("* a\n    * b\n* c")

        assert html.count("<ul>") == 2

    def test_soft_line_breaks(self):
        """Test that single newlines do not become <br>."""
        html = MarkdownToHtml().render("line one\nline two")

        assert "<br" not in html


class TestRenderMarkdown:
    """Tests for render_markdown."""

    def test_frontmatter_is_dropped(self):
        """Test that frontmatter never reaches the HTML."""
        html = render_markdown("---\ntitle: Hidden\n---\n\nVisible", PAGE)

        assert "Hidden" not in html
        assert "<p>Visible</p>" in html

    def test_relative_references_resolved(self):
        """Test that links and images point at the source site."""
        html = render_markdown("[Next](next) ![Logo](/logo.png)", PAGE)

        assert 'href="https://example.com/docs/next"' in html
        assert 'src="https://example.com/logo.png"' in html

    def test_fragment_links_anchored(self):
        """Test that in-page links point at the page URL."""
        html = render_markdown("[Install](#install)", PAGE + "#top")

        assert 'href="https://example.com/docs/page#install"' in html

    def test_without_base_url(self):
        """Test rendering with no base URL."""
        html = render_markdown("[Install](#install) [Next](next)", "")

        assert 'href="#install"' in html
        assert 'href="next"' in html


class TestAnchorFragmentLinks:
    """Tests for anchor_fragment_links."""

    def test_rewrites_fragments_only(self):
        """Test that only fragment hrefs change."""
        html = '<a href="#a">A</a> <a href="https://example.com/x">X</a>'

        assert anchor_fragment_links(html, PAGE) == (
            f'<a href="{PAGE}#a">A</a> <a href="https://example.com/x">X</a>'
        )

    def test_empty_base(self):
        """Test that an empty base leaves the HTML unchanged."""
        html = '<a href="#a">A</a>'

        assert anchor_fragment_links(html, "") == html


class TestRendererInjection:
    """Tests for custom renderers."""

    def test_custom_renderer(self):
        """Test that render_markdown accepts any renderer."""

        class UpperRenderer:
            def render(self, markdown: str) -> str:
                return f'<p>{markdown.upper()}</p><a href="#x">x</a>'

        html = render_markdown("---\nk: v\n---\nhello", PAGE, renderer=UpperRenderer())

        assert html == f'<p>HELLO</p><a href="{PAGE}#x">x</a>'
