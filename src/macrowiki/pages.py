"""Rendering pipeline for stored pages."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from macrowiki.config import MACROWIKI_MACRO_STYLE
from macrowiki.macros import MacroExpander
from macrowiki.markdown import render_markdown
from macrowiki.schemas import Page, RenderedPage, TocMarkup
from macrowiki.toc import HeadingIdGenerator, default_heading_id, generate_toc


@dataclass
class RenderOptions:
    """Options for page rendering.

    Attributes:
        expand_macros: If True, rewrite macro tokens before markdown rendering.
        include_toc: If True, build a table of contents from the headings.
        macro_style: Macro name to delimiter mapping.
        toc_markup: Delimiters used for the ToC lists and items.
    """

    expand_macros: bool = True
    include_toc: bool = True
    macro_style: Mapping[str, str] = field(default_factory=lambda: dict(MACROWIKI_MACRO_STYLE))
    toc_markup: TocMarkup = field(default_factory=TocMarkup)


def render_page(page: Page, options: RenderOptions | None = None) -> RenderedPage:
    """Render a page body to HTML and build its table of contents.

    The ToC is read from the raw body. When macros are expanded, their tokens
    are dropped from heading titles before slugging so every ToC link matches
    the id of the rendered heading.
    """
    opts = options or RenderOptions()

    body = page.body
    id_generator: HeadingIdGenerator = default_heading_id
    if opts.expand_macros:
        expander = MacroExpander(opts.macro_style)
        body = expander.expand(body)
        id_generator = _macro_free_heading_id(expander)

    toc = generate_toc(page.body, opts.toc_markup, id_generator) if opts.include_toc else ""

    return RenderedPage(
        title=page.title,
        body=page.body,
        rendered_body=render_markdown(body),
        toc=toc,
    )


def _macro_free_heading_id(expander: MacroExpander) -> HeadingIdGenerator:
    def heading_id(level: int, title: str) -> tuple[str, str]:
        return default_heading_id(level, expander.strip_tokens(title))

    return heading_id
