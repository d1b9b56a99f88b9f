"""Tests for heading extraction and ToC rendering."""

from __future__ import annotations

import re

import pytest

from macrowiki.schemas import HeadingEntry, OutlineNode, TocMarkup
from macrowiki.toc import (
    AnchorRegistry,
    build_tree,
    count_headings,
    default_heading_id,
    extract_headings,
    generate_toc,
    render_toc,
)


def make_headings(levels: list[int]) -> list[HeadingEntry]:
    """Headings titled A, B, C, ... at the given levels."""
    return [
        HeadingEntry(level=level, title=chr(ord("A") + idx), anchor=chr(ord("a") + idx))
        for idx, level in enumerate(levels)
    ]


def max_list_depth(markup: str) -> int:
    depth = deepest = 0
    for tag in re.findall(r"</?ol>", markup):
        depth += -1 if tag.startswith("</") else 1
        deepest = max(deepest, depth)
    return deepest


def tree_depth(node: OutlineNode) -> int:
    if not node.children:
        return 0
    return 1 + max(tree_depth(child) for child in node.children)


class TestDefaultHeadingId:
    """Tests for default_heading_id function."""

    def test_slugifies_title(self) -> None:
        """Lower-cases, dashes spaces and drops other characters."""
        assert default_heading_id(3, "Hello, World!") == ("Hello, World!", "hello-world")

    def test_keeps_digits_and_dashes(self) -> None:
        """Digits and existing dashes survive."""
        assert default_heading_id(1, "Step 2 - Setup") == ("Step 2 - Setup", "step-2---setup")


class TestAnchorRegistry:
    """Tests for AnchorRegistry deduplication."""

    def test_suffixes_repeats(self) -> None:
        """Repeats get an increasing numeric suffix."""
        registry = AnchorRegistry()
        assert [registry.claim("a") for _ in range(3)] == ["a", "a-1", "a-2"]

    def test_first_occurrence_never_suffixed(self) -> None:
        """Distinct anchors are returned unchanged."""
        registry = AnchorRegistry()
        assert [registry.claim(anchor) for anchor in ("a", "b", "c")] == ["a", "b", "c"]

    def test_skips_suffix_taken_by_literal_anchor(self) -> None:
        """A generated suffix never collides with an anchor already claimed."""
        registry = AnchorRegistry()
        claimed = [registry.claim(anchor) for anchor in ("a", "a-1", "a", "a-1")]
        assert claimed == ["a", "a-1", "a-2", "a-1-1"]
        assert len(set(claimed)) == len(claimed)

    def test_registries_are_independent(self) -> None:
        """State does not leak between documents."""
        AnchorRegistry().claim("a")
        assert AnchorRegistry().claim("a") == "a"


class TestExtractHeadings:
    """Tests for extract_headings function."""

    def test_deduplicates_anchors(self) -> None:
        """Repeated titles get monotonic suffixes."""
        headings = extract_headings("# A\n## A\n# A")

        assert [h.anchor for h in headings] == ["a", "a-1", "a-2"]
        assert [h.level for h in headings] == [1, 2, 1]
        assert [h.title for h in headings] == ["A", "A", "A"]

    def test_skips_non_heading_lines(self) -> None:
        """Lines not starting with # are ignored."""
        text = "intro\n\n# Title\nbody text # not a heading\n"
        headings = extract_headings(text)

        assert headings == [HeadingEntry(level=1, title="Title", anchor="title")]

    def test_strips_surrounding_whitespace(self) -> None:
        """Indentation and trailing spaces are trimmed."""
        headings = extract_headings("   ##   Indented Title  \r\n")

        assert headings == [HeadingEntry(level=2, title="Indented Title", anchor="indented-title")]

    def test_marker_without_space(self) -> None:
        """A marker run directly followed by text is still a heading."""
        assert extract_headings("###Compact")[0] == HeadingEntry(level=3, title="Compact", anchor="compact")

    def test_empty_title(self) -> None:
        """A bare marker yields an empty title and anchor."""
        headings = extract_headings("#\n##")

        assert [(h.level, h.title, h.anchor) for h in headings] == [(1, "", ""), (2, "", "-1")]

    def test_custom_id_generator(self) -> None:
        """The generator supplies display titles and raw anchors."""
        headings = extract_headings("# a\n## b", lambda level, title: (title.upper(), f"h{level}"))

        assert [(h.title, h.anchor) for h in headings] == [("A", "h1"), ("B", "h2")]

    def test_custom_generator_is_deduplicated(self) -> None:
        """Deduplication applies to whatever the generator returns."""
        headings = extract_headings("# a\n# b", lambda level, title: (title, "same"))

        assert [h.anchor for h in headings] == ["same", "same-1"]

    def test_empty_text(self) -> None:
        """No text, no headings."""
        assert extract_headings("") == []


class TestBuildTree:
    """Tests for build_tree function."""

    def test_skipped_level_nests_under_previous(self) -> None:
        """An h3 right after an h1 becomes the h1's child."""
        root = build_tree(make_headings([1, 3, 1, 2]))

        assert root.level == 0
        assert [child.title for child in root.children] == ["A", "C"]
        first, second = root.children
        assert [(c.title, c.level) for c in first.children] == [("B", 3)]
        assert [(c.title, c.level) for c in second.children] == [("D", 2)]

    def test_siblings_share_parent(self) -> None:
        """Headings of equal level are siblings in document order."""
        root = build_tree(make_headings([1, 2, 2]))

        assert [child.title for child in root.children[0].children] == ["B", "C"]

    def test_shallower_heading_climbs_out(self) -> None:
        """A lower level after a deeper one returns to the right ancestor."""
        root = build_tree(make_headings([1, 2, 3, 2]))

        section = root.children[0]
        assert [child.title for child in section.children] == ["B", "D"]
        assert [child.title for child in section.children[0].children] == ["C"]

    def test_document_starting_deep(self) -> None:
        """Top-level headings need not be level 1."""
        root = build_tree(make_headings([2, 1]))

        assert [child.title for child in root.children] == ["A", "B"]

    def test_empty(self) -> None:
        """No headings gives a childless root."""
        assert build_tree([]) == OutlineNode()

    def test_count_headings(self) -> None:
        """Every heading becomes exactly one node."""
        assert count_headings(build_tree(make_headings([1, 3, 1, 2, 2, 4]))) == 6


class TestRenderToc:
    """Tests for render_toc and generate_toc."""

    def test_default_markup(self) -> None:
        """Default markup is nested ordered lists."""
        expected = (
            "<ol>\n"
            "<li>\n<a href=\"#a\">A</a>\n"
            "<ol>\n<li>\n<a href=\"#b\">B</a>\n</li>\n</ol>\n"
            "</li>\n"
            "<li>\n<a href=\"#c\">C</a>\n</li>\n"
            "</ol>\n"
        )
        assert generate_toc("# A\n## B\n# C") == expected

    def test_custom_markup(self) -> None:
        """All four delimiters come from the markup settings."""
        markup = TocMarkup(item_open="[", item_close="]", list_open="(", list_close=")")
        rendered = render_toc(build_tree(make_headings([1, 3, 1, 2])), markup)

        assert rendered == (
            '([<a href="#a">A</a>\n([<a href="#b">B</a>\n])]'
            '[<a href="#c">C</a>\n([<a href="#d">D</a>\n])])'
        )

    def test_no_headings_renders_empty(self) -> None:
        """A page without headings has no ToC."""
        assert generate_toc("just text") == ""

    def test_escapes_titles(self) -> None:
        """Titles are HTML-escaped in link text."""
        rendered = generate_toc("# a <b> & c")

        assert '<a href="#a-b--c">a &lt;b&gt; &amp; c</a>' in rendered

    @pytest.mark.parametrize(
        "text",
        [
            "# A\n## A\n# A",
            "# One\n### Three\n# One\n## Two\n#### Four\n",
            "## Start\n# Top\n### Deep\n###### Deeper",
        ],
    )
    def test_depth_and_anchor_coverage(self, text: str) -> None:
        """Nesting depth follows the tree and every anchor appears once."""
        headings = extract_headings(text)
        root = build_tree(headings)
        rendered = render_toc(root)

        assert max_list_depth(rendered) == tree_depth(root)
        for heading in headings:
            assert rendered.count(f'href="#{heading.anchor}"') == 1
