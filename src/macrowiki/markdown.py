"""Render page markdown into sanitized HTML with linkable headings."""

from __future__ import annotations

from functools import lru_cache

import bleach
import mistune

from macrowiki.exceptions import RenderError
from macrowiki.toc import AnchorRegistry, default_heading_id

try:
    from bs4 import BeautifulSoup
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML post-processing (pip install beautifulsoup4)."
    ) from exc


_HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]

_ALLOWED_TAGS = frozenset(bleach.sanitizer.ALLOWED_TAGS) | {
    "p",
    "br",
    "hr",
    "div",
    "span",
    "del",
    "sup",
    "sub",
    "pre",
    "code",
    "kbd",
    "img",
    "table",
    "thead",
    "tbody",
    "tfoot",
    "tr",
    "th",
    "td",
    *_HEADING_TAGS,
}

_ALLOWED_ATTRIBUTES: dict[str, list[str]] = {
    "a": ["href", "title", "rel"],
    "abbr": ["title"],
    "acronym": ["title"],
    "img": ["src", "alt", "title"],
    "code": ["class"],
    "span": ["class"],
    "div": ["class"],
    "th": ["align"],
    "td": ["align"],
    **{tag: ["id"] for tag in _HEADING_TAGS},
}

_ALLOWED_PROTOCOLS = frozenset({"http", "https", "mailto"})


@lru_cache(maxsize=1)
def _get_markdown() -> mistune.Markdown:
    # Raw HTML in page bodies is escaped rather than passed through.
    return mistune.create_markdown(
        escape=True,
        hard_wrap=True,
        plugins=["table", "strikethrough", "url", "math"],
    )


def render_markdown(text: str) -> str:
    """Convert markdown ``text`` to sanitized HTML with heading ids."""
    try:
        html = _get_markdown()(text)
    except Exception as exc:
        raise RenderError(f"Markdown rendering failed: {exc}") from exc
    return assign_heading_ids(sanitize_html(html))


def sanitize_html(html: str) -> str:
    """Strip tags and attributes outside the user-content allow list."""
    return bleach.clean(
        html,
        tags=_ALLOWED_TAGS,
        attributes=_ALLOWED_ATTRIBUTES,
        protocols=_ALLOWED_PROTOCOLS,
        strip=True,
    )


def assign_heading_ids(html: str) -> str:
    """Give every heading the anchor the table of contents links to.

    Ids come from the heading text and are deduplicated in document order, so
    they match :func:`macrowiki.toc.extract_headings` for ATX headings.
    """
    soup = BeautifulSoup(html, "html.parser")
    registry = AnchorRegistry()
    for heading in soup.find_all(_HEADING_TAGS):
        level = int(heading.name[1])  # "h2" -> 2
        _, candidate = default_heading_id(level, heading.get_text().strip())
        heading["id"] = registry.claim(candidate)
    return str(soup)
