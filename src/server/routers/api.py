"""JSON API endpoints."""

from __future__ import annotations

import asyncio
from dataclasses import replace

from fastapi import APIRouter, Request

from macrowiki.pages import render_page
from macrowiki.schemas import Page
from server.models import PreviewRequest, PreviewResponse

router = APIRouter()


@router.post("/api/preview", response_model=PreviewResponse)
async def api_preview(request: Request, preview_request: PreviewRequest) -> PreviewResponse:
    """Render an unsaved page body.

    **Parameters**

    - **preview_request** (`PreviewRequest`): raw body and rendering switches

    **Returns**

    - **PreviewResponse**: sanitized HTML body and table-of-contents markup

    """
    options = replace(
        request.app.state.render_options,
        expand_macros=preview_request.expand_macros,
        include_toc=preview_request.include_toc,
    )
    rendered = await asyncio.to_thread(
        render_page, Page(title="preview", body=preview_request.body), options
    )
    return PreviewResponse(rendered_body=rendered.rendered_body, toc=rendered.toc)
