"""Tests for main content extraction."""

from mdbrowse.conversion import MainContentExtractor
from mdbrowse.conversion.extractor import extract_html_title


class TestMainContentExtractor:
    """Tests for MainContentExtractor."""

    def test_prefers_main(self):
        """Test that <main> wins over <article> and <body>."""
        extractor = MainContentExtractor()
        html = """<html><head><title>T</title></head><body>
            <nav>Navigation</nav>
            <article><p>Teaser</p></article>
            <main><p>Hi</p></main>
            <footer>Footer</footer>
        </body></html>"""

        assert extractor.extract(html) == "<p>Hi</p>"

    def test_falls_back_to_article(self):
        """Test extraction from an article tag."""
        extractor = MainContentExtractor()
        html = "<html><body><aside>Ads</aside><article><h1>Post</h1></article></body></html>"

        assert extractor.extract(html) == "<h1>Post</h1>"

    def test_falls_back_to_body(self):
        """Test extraction from the body."""
        extractor = MainContentExtractor()
        html = "<html><body><p>Text</p><form><input name='q'></form></body></html>"

        assert extractor.extract(html) == "<p>Text</p>"

    def test_removes_scripts_styles_and_comments(self):
        """Test removal of non-content regions."""
        extractor = MainContentExtractor()
        html = """<body>
            <script>var x = "<p>not content</p>";</script>
            <style>p { color: red; }</style>
            <noscript>Enable JS</noscript>
            <!-- a comment -->
            <iframe src="https://ads.example.com"></iframe>
            <p>Kept</p>
        </body>"""

        result = extractor.extract(html)

        assert "<p>Kept</p>" in result
        assert "not content" not in result
        assert "color: red" not in result
        assert "Enable JS" not in result
        assert "a comment" not in result
        assert "iframe" not in result

    def test_removes_empty_anchors(self):
        """Test that anchors without text are dropped."""
        extractor = MainContentExtractor()
        html = '<body><a href="#top"> </a><p>x</p><a href="/a">A</a></body>'

        assert extractor.extract(html) == '<p>x</p><a href="/a">A</a>'

    def test_header_tag_is_not_head(self):
        """Test that <header> is not mistaken for <head>."""
        extractor = MainContentExtractor()
        html = "<body><header><h1>Site</h1></header><p>Body</p></body>"

        result = extractor.extract(html)

        assert "<h1>Site</h1>" in result
        assert "<p>Body</p>" in result

    def test_fragment_without_containers(self):
        """Test that fragments are returned cleaned."""
        extractor = MainContentExtractor()

        assert extractor.extract("<p>One</p><nav>Menu</nav>") == "<p>One</p>"

    def test_custom_remove_tags(self):
        """Test extending the removed regions."""
        extractor = MainContentExtractor(remove_tags=["header"])
        html = "<body><header>Site</header><p>Body</p></body>"

        assert extractor.extract(html) == "<p>Body</p>"

    def test_custom_content_tags(self):
        """Test narrowing to other containers."""
        extractor = MainContentExtractor(content_tags=["section", "body"])
        html = "<body><p>Intro</p><section><p>Core</p></section></body>"

        assert extractor.extract(html) == "<p>Core</p>"
        assert extractor.extract("<body><p>Only</p></body>") == "<p>Only</p>"


class TestExtractHtmlTitle:
    """Tests for extract_html_title."""

    def test_title_is_unescaped(self):
        """Test entity decoding and trimming."""
        assert extract_html_title("<head><title> A &amp; B </title></head>") == "A & B"

    def test_missing_title(self):
        """Test pages without a usable title."""
        assert extract_html_title("<p>No title</p>") is None
        assert extract_html_title("<title>   </title>") is None
