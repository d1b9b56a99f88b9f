"""Shared schemas for macrowiki."""

from macrowiki.schemas.macros import InsertionEvent, MacroToken
from macrowiki.schemas.page import Page, RenderedPage
from macrowiki.schemas.toc import HeadingEntry, OutlineNode, TocMarkup

__all__ = [
    "HeadingEntry",
    "InsertionEvent",
    "MacroToken",
    "OutlineNode",
    "Page",
    "RenderedPage",
    "TocMarkup",
]
