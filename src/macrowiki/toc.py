"""Extract headings from raw page text and render them as a nested ToC."""

from __future__ import annotations

import html
import re
from typing import Callable, Iterable

from macrowiki.schemas.toc import HeadingEntry, OutlineNode, TocMarkup
from macrowiki.utils.logging_config import get_logger

logger = get_logger(__name__)

HeadingIdGenerator = Callable[[int, str], tuple[str, str]]

_NON_ID_CHARS_RE = re.compile(r"[^a-zA-Z0-9-]+")
_HEADING_MARKER = "#"


def default_heading_id(level: int, title: str) -> tuple[str, str]:
    """Approximate the id a markdown renderer gives a heading.

    Returns the title unchanged for display together with the raw anchor.
    """
    anchor = title.lower().replace(" ", "-")
    return title, _NON_ID_CHARS_RE.sub("", anchor)


class AnchorRegistry:
    """Per-document anchor deduplication.

    The first use of an anchor is kept as is; the k-th repeat becomes
    ``anchor-k``. A suffix already handed out (for example by a heading
    literally titled ``a-1``) is skipped. Never share a registry between
    documents.
    """

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}
        self._claimed: set[str] = set()

    def claim(self, candidate: str) -> str:
        seen = self._counts.get(candidate, 0)
        anchor = f"{candidate}-{seen}" if seen else candidate
        while anchor in self._claimed:
            seen += 1
            anchor = f"{candidate}-{seen}"
        self._counts[candidate] = seen + 1
        self._claimed.add(anchor)
        return anchor


def extract_headings(
    text: str,
    id_generator: HeadingIdGenerator = default_heading_id,
) -> list[HeadingEntry]:
    """Collect ATX heading lines in document order.

    A line is a heading when, after stripping, it starts with one or more
    ``#``. The number of markers is the level and the stripped remainder is
    the title.
    """
    registry = AnchorRegistry()
    headings: list[HeadingEntry] = []
    for raw_line in text.splitlines():
        line = raw_line.strip()
        level = len(line) - len(line.lstrip(_HEADING_MARKER))
        if level == 0:
            continue

        title, candidate = id_generator(level, line[level:].strip())
        heading = HeadingEntry(level=level, title=title, anchor=registry.claim(candidate))
        headings.append(heading)
        logger.debug("h%d id=%r", heading.level, heading.anchor)

    return headings


def build_tree(headings: Iterable[HeadingEntry]) -> OutlineNode:
    """Nest a flat heading list under a synthetic level-0 root.

    Skipped levels are tolerated: a heading becomes the child of the closest
    preceding heading with a strictly lower level.
    """
    root = OutlineNode()
    stack: list[OutlineNode] = [root]
    for heading in headings:
        while len(stack) > 1 and stack[-1].level >= heading.level:
            stack.pop()

        node = OutlineNode(title=heading.title, anchor=heading.anchor, level=heading.level)
        stack[-1].children.append(node)
        stack.append(node)

    return root


def render_toc(root: OutlineNode, markup: TocMarkup | None = None) -> str:
    """Render the root's children as nested list markup.

    Returns an empty string when the tree has no headings.
    """
    if not root.children:
        return ""
    markup = markup or TocMarkup()
    parts: list[str] = []
    _render_children(parts, root.children, markup)
    return "".join(parts)


def _render_children(parts: list[str], nodes: list[OutlineNode], markup: TocMarkup) -> None:
    parts.append(markup.list_open)
    for node in nodes:
        _render_node(parts, node, markup)
    parts.append(markup.list_close)


def _render_node(parts: list[str], node: OutlineNode, markup: TocMarkup) -> None:
    parts.append(markup.item_open)
    parts.append(
        f'<a href="#{html.escape(node.anchor, quote=True)}">{html.escape(node.title, quote=False)}</a>\n'
    )
    if node.children:
        _render_children(parts, node.children, markup)
    parts.append(markup.item_close)


def generate_toc(
    text: str,
    markup: TocMarkup | None = None,
    id_generator: HeadingIdGenerator = default_heading_id,
) -> str:
    """Extract headings from ``text`` and render them as a ToC."""
    return render_toc(build_tree(extract_headings(text, id_generator)), markup)


def count_headings(node: OutlineNode) -> int:
    """Count the non-root nodes below ``node``."""
    total = 0
    for child in node.children:
        total += 1
        total += count_headings(child)
    return total
