"""HTML page endpoints."""

from __future__ import annotations

import asyncio

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from macrowiki.exceptions import PageNotFoundError
from macrowiki.pages import render_page
from macrowiki.schemas import Page
from macrowiki.storage import PageStore, validate_title
from macrowiki.utils.logging_config import get_logger
from server.form_types import StrForm
from server.server_config import TEMPLATES_DIR

logger = get_logger(__name__)

router = APIRouter()
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def _store(request: Request) -> PageStore:
    return request.app.state.store


def _require_editing(request: Request) -> None:
    if not request.app.state.enable_editing:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Editing is disabled")


@router.get("/")
async def root(request: Request) -> RedirectResponse:
    """Redirect to the front page."""
    return RedirectResponse(f"/view/{request.app.state.front_page}", status_code=status.HTTP_302_FOUND)


@router.get("/index", response_class=HTMLResponse)
async def page_index(request: Request) -> HTMLResponse:
    """List every stored page."""
    titles = await asyncio.to_thread(_store(request).list_pages)
    return templates.TemplateResponse(request, "index.html", {"titles": titles})


@router.get("/view/{title:path}", response_model=None)
async def view_page(request: Request, title: str) -> HTMLResponse | RedirectResponse:
    """Render a stored page with its table of contents."""
    validate_title(title)
    try:
        page = await asyncio.to_thread(_store(request).load, title)
    except PageNotFoundError:
        if request.app.state.enable_editing:
            return RedirectResponse(f"/edit/{title}", status_code=status.HTTP_302_FOUND)
        raise

    rendered = await asyncio.to_thread(render_page, page, request.app.state.render_options)
    logger.info("Rendered page", extra={"title": title, "has_toc": bool(rendered.toc)})
    return templates.TemplateResponse(request, "view.html", {"page": rendered})


@router.get("/edit/{title:path}", response_class=HTMLResponse)
async def edit_page(request: Request, title: str) -> HTMLResponse:
    """Show the edit form, empty for a new page."""
    _require_editing(request)
    validate_title(title)
    try:
        page = await asyncio.to_thread(_store(request).load, title)
    except PageNotFoundError:
        page = Page(title=title)
    return templates.TemplateResponse(request, "edit.html", {"page": page})


@router.post("/save/{title:path}")
async def save_page(request: Request, title: str, body: StrForm) -> RedirectResponse:
    """Store the submitted body and show the page."""
    _require_editing(request)
    validate_title(title)
    await asyncio.to_thread(_store(request).save, Page(title=title, body=body))
    return RedirectResponse(f"/view/{title}", status_code=status.HTTP_302_FOUND)
