"""File-backed page storage."""

from __future__ import annotations

import re
from pathlib import Path

from macrowiki.exceptions import InvalidPageTitleError, PageNotFoundError, StorageError
from macrowiki.schemas.page import Page
from macrowiki.utils.logging_config import get_logger

logger = get_logger(__name__)

_VALID_TITLE_RE = re.compile(r"^[^/.]+(?:/[^/.]+)*$")
_PAGE_SUFFIX = ".txt"
_PAGE_FILE_MODE = 0o600


def validate_title(title: str) -> str:
    """Return ``title`` if it is usable as a storage key.

    Titles are ``/``-separated segments; no segment may contain a dot, so a
    title can never point outside the storage root.

    Raises:
        InvalidPageTitleError: If the title is empty or malformed.
    """
    if not _VALID_TITLE_RE.fullmatch(title):
        raise InvalidPageTitleError(f"Invalid page title: {title!r}")
    return title


class PageStore:
    """Pages stored as ``<root>/<title>.txt``."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def path_for(self, title: str) -> Path:
        return self.root / f"{validate_title(title)}{_PAGE_SUFFIX}"

    def exists(self, title: str) -> bool:
        return self.path_for(title).is_file()

    def load(self, title: str) -> Page:
        """Read a page.

        Raises:
            InvalidPageTitleError: If the title is malformed.
            PageNotFoundError: If no page is stored under ``title``.
            StorageError: If the file cannot be read.
        """
        path = self.path_for(title)
        try:
            body = path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise PageNotFoundError(f"Page {title!r} not found") from exc
        except OSError as exc:
            raise StorageError(f"Failed to read page {title!r}: {exc}") from exc
        return Page(title=title, body=body)

    def save(self, page: Page) -> Path:
        """Write a page, creating parent directories for nested titles."""
        path = self.path_for(page.title)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(page.body, encoding="utf-8")
            path.chmod(_PAGE_FILE_MODE)
        except OSError as exc:
            raise StorageError(f"Failed to write page {page.title!r}: {exc}") from exc
        logger.info("Saved page", extra={"title": page.title, "bytes": len(page.body.encode("utf-8"))})
        return path

    def list_pages(self) -> list[str]:
        """List every stored page title, recursing into subdirectories."""
        if not self.root.is_dir():
            return []
        titles = []
        for path in self.root.rglob(f"*{_PAGE_SUFFIX}"):
            if not path.is_file():
                continue
            title = path.relative_to(self.root).with_suffix("").as_posix()
            if _VALID_TITLE_RE.fullmatch(title):
                titles.append(title)
        return sorted(titles)
