"""Tests for markdown rendering and sanitization."""

from __future__ import annotations

from macrowiki.markdown import assign_heading_ids, render_markdown, sanitize_html
from macrowiki.toc import extract_headings


class TestRenderMarkdown:
    """Tests for render_markdown function."""

    def test_headings_get_ids(self) -> None:
        """Headings carry the anchor the ToC links to."""
        html = render_markdown("# Hello World\n\nSome *text*.")

        assert '<h1 id="hello-world">Hello World</h1>' in html
        assert "<em>text</em>" in html

    def test_ids_match_extracted_headings(self) -> None:
        """Every ToC anchor exists as a heading id in the page."""
        text = "# Intro\n\n## Setup Steps\n\ntext\n\n# Intro\n\n### Setup Steps\n"
        html = render_markdown(text)

        for heading in extract_headings(text):
            assert f'id="{heading.anchor}"' in html

    def test_hard_line_breaks(self) -> None:
        """Single newlines inside a paragraph become line breaks."""
        assert "<br" in render_markdown("line one\nline two")

    def test_raw_html_is_not_rendered(self) -> None:
        """Script tags in page text never reach the output as markup."""
        html = render_markdown("<script>alert(1)</script>\n\nafter")

        assert "<script" not in html
        assert "after" in html

    def test_inline_math(self) -> None:
        """Dollar-delimited math is kept for MathJax."""
        assert 'class="math"' in render_markdown("energy $E=mc^2$ here")

    def test_tables(self) -> None:
        """Pipe tables render as HTML tables."""
        html = render_markdown("| a | b |\n|---|---|\n| 1 | 2 |\n")

        assert "<table>" in html
        assert "<td>1</td>" in html


class TestSanitizeHtml:
    """Tests for sanitize_html function."""

    def test_strips_script(self) -> None:
        """Script elements are removed."""
        assert "<script" not in sanitize_html("<p>hi</p><script>alert(1)</script>")

    def test_drops_javascript_links(self) -> None:
        """Only safe link protocols survive."""
        assert "javascript" not in sanitize_html('<a href="javascript:alert(1)">x</a>')

    def test_keeps_safe_markup(self) -> None:
        """Ordinary formatting passes through."""
        html = '<p><strong>bold</strong> <a href="https://example.com">link</a></p>'
        assert sanitize_html(html) == html

    def test_drops_event_handlers(self) -> None:
        """Attributes outside the allow list are removed."""
        assert "onclick" not in sanitize_html('<p onclick="steal()">x</p>')


class TestAssignHeadingIds:
    """Tests for assign_heading_ids function."""

    def test_deduplicates(self) -> None:
        """Repeated heading texts get suffixed ids across levels."""
        html = assign_heading_ids("<h2>Intro</h2><p>x</p><h3>Intro</h3>")

        assert '<h2 id="intro">Intro</h2>' in html
        assert '<h3 id="intro-1">Intro</h3>' in html

    def test_replaces_existing_ids(self) -> None:
        """Ids always come from the heading text."""
        assert assign_heading_ids('<h1 id="old">New Name</h1>') == '<h1 id="new-name">New Name</h1>'

    def test_inline_markup_in_heading(self) -> None:
        """Only the heading text feeds the id."""
        assert 'id="hello-world"' in assign_heading_ids("<h1>Hello <em>world</em></h1>")
