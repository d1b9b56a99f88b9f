"""macrowiki: a minimal personal wiki with inline macro markup."""

from macrowiki.exceptions import (
    ConfigurationError,
    InvalidPageTitleError,
    MacroStyleError,
    MacrowikiError,
    PageNotFoundError,
    RenderError,
    StorageError,
)
from macrowiki.macros import MacroExpander, expand_macros
from macrowiki.pages import RenderOptions, render_page
from macrowiki.schemas import HeadingEntry, OutlineNode, Page, RenderedPage, TocMarkup
from macrowiki.storage import PageStore
from macrowiki.toc import build_tree, extract_headings, generate_toc, render_toc

__all__ = [
    "ConfigurationError",
    "HeadingEntry",
    "InvalidPageTitleError",
    "MacroExpander",
    "MacroStyleError",
    "MacrowikiError",
    "OutlineNode",
    "Page",
    "PageNotFoundError",
    "PageStore",
    "RenderError",
    "RenderOptions",
    "RenderedPage",
    "StorageError",
    "TocMarkup",
    "build_tree",
    "expand_macros",
    "extract_headings",
    "generate_toc",
    "render_page",
    "render_toc",
]
