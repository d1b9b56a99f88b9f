"""Backward cursor seeks over immutable text."""

from __future__ import annotations


def seek_word_backwards(text: str, pos: int) -> int:
    """Return the cursor position after vim's ``b`` motion from ``pos``.

    Skips whitespace backwards, then the word before it, and lands on that
    word's first character. Returns 0 when the start of the text is reached.
    """
    pos -= 1
    while pos >= 0 and text[pos].isspace():
        pos -= 1
    while pos >= 0 and not text[pos].isspace():
        pos -= 1
    return pos + 1


def seek_non_space_backwards(text: str, pos: int) -> int:
    """Return the index of the last non-space character before ``pos``, or -1."""
    pos -= 1
    while pos >= 0 and text[pos].isspace():
        pos -= 1
    return pos
