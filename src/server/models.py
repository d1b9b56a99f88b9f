"""Pydantic models for the JSON API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from server.server_config import MAX_PAGE_SIZE_CHARS


class PreviewRequest(BaseModel):
    """Request model for the /api/preview endpoint.

    Attributes
    ----------
    body : str
        Raw page text to render.
    expand_macros : bool
        Rewrite macro tokens before markdown rendering.
    include_toc : bool
        Build a table of contents from the headings.

    """

    body: str = Field(..., max_length=MAX_PAGE_SIZE_CHARS, description="Raw page text")
    expand_macros: bool = Field(default=True, description="Expand inline macros")
    include_toc: bool = Field(default=True, description="Render a table of contents")


class PreviewResponse(BaseModel):
    """Rendered page fragments returned by /api/preview."""

    rendered_body: str
    toc: str
