"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles

from macrowiki.config import (
    MACROWIKI_ENABLE_EDITING,
    MACROWIKI_FRONT_PAGE,
    MACROWIKI_STORAGE_PATH,
)
from macrowiki.exceptions import InvalidPageTitleError, PageNotFoundError, StorageError
from macrowiki.pages import RenderOptions
from macrowiki.storage import PageStore
from macrowiki.utils.logging_config import get_logger
from server.routers import api, pages
from server.server_config import STATIC_DIR

logger = get_logger(__name__)


def create_app(
    store: PageStore | None = None,
    *,
    enable_editing: bool = MACROWIKI_ENABLE_EDITING,
    front_page: str = MACROWIKI_FRONT_PAGE,
    render_options: RenderOptions | None = None,
) -> FastAPI:
    """Build the wiki application around a page store."""
    app = FastAPI(title="macrowiki", docs_url=None, redoc_url=None)
    app.state.store = store or PageStore(MACROWIKI_STORAGE_PATH)
    app.state.enable_editing = enable_editing
    app.state.front_page = front_page
    app.state.render_options = render_options or RenderOptions()

    app.include_router(pages.router)
    app.include_router(api.router)
    if STATIC_DIR.is_dir():
        app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    @app.exception_handler(PageNotFoundError)
    @app.exception_handler(InvalidPageTitleError)
    async def not_found_handler(request: Request, exc: StorageError) -> PlainTextResponse:
        return PlainTextResponse(str(exc), status_code=status.HTTP_404_NOT_FOUND)

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError) -> PlainTextResponse:
        logger.error("Storage failure", extra={"path": request.url.path, "error": str(exc)})
        return PlainTextResponse(str(exc), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return app


app = create_app()
