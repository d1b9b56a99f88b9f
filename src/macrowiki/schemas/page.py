"""Wiki page models."""

from __future__ import annotations

from pydantic import BaseModel


class Page(BaseModel):
    """A stored wiki page."""

    title: str
    body: str = ""


class RenderedPage(BaseModel):
    """Page ready for templating.

    Attributes:
        title: Page title.
        body: Raw page text as stored.
        rendered_body: Sanitized HTML of the macro-expanded body.
        toc: Table-of-contents markup, empty when the page has no headings.
    """

    title: str
    body: str
    rendered_body: str
    toc: str = ""
