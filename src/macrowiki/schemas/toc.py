"""Heading and outline models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HeadingEntry(BaseModel):
    """A heading line found in raw page text."""

    level: int = Field(..., ge=1)
    title: str
    anchor: str


class OutlineNode(BaseModel):
    """A node of the table-of-contents tree.

    The root node has level 0 and holds the top-level headings.
    """

    title: str = ""
    anchor: str = ""
    level: int = Field(default=0, ge=0)
    children: list["OutlineNode"] = Field(default_factory=list)


class TocMarkup(BaseModel):
    """Delimiters wrapped around each ToC item and each nesting level."""

    item_open: str = "<li>\n"
    item_close: str = "</li>\n"
    list_open: str = "<ol>\n"
    list_close: str = "</ol>\n"
