"""Expand inline macro annotations into markdown emphasis.

A macro is written right after the words it styles: ``some words .i2`` becomes
``*some words*``. The number is how many words back the macro reaches and
defaults to one. Styles map a macro name to the delimiter placed on both sides
of the span. Stacking several macros on the same run (``bold italic .b2 .i2``)
is not supported.
"""

from __future__ import annotations

from typing import Mapping

from macrowiki.config import MACROWIKI_MACRO_STYLE
from macrowiki.cursor import seek_non_space_backwards, seek_word_backwards
from macrowiki.exceptions import MacroStyleError
from macrowiki.schemas.macros import InsertionEvent, MacroToken
from macrowiki.utils.logging_config import get_logger

logger = get_logger(__name__)

_MACRO_PREFIX = "."


class MacroExpander:
    """Rewrites macro tokens in text according to a style mapping."""

    def __init__(self, style: Mapping[str, str]) -> None:
        for name, delimiter in style.items():
            if not isinstance(name, str) or not name.isalpha():
                raise MacroStyleError(f"Macro name must be one or more letters, got {name!r}")
            if not isinstance(delimiter, str):
                raise MacroStyleError(f"Delimiter for macro {name!r} must be a string")
        self.style: dict[str, str] = dict(style)

    def expand(self, text: str) -> str:
        """Replace every known macro token with delimiters around its span.

        Recognized tokens are always removed together with the whitespace in
        front of them, even when their span is empty and no delimiters are
        inserted.
        """
        tokens = self.find_macro_entries(text)
        if not tokens:
            return text

        events = self.insertion_events(text, tokens)
        skip_from = [begin for begin, _ in _elided_regions(text, tokens)]

        parts: list[str] = []
        cursor = event_idx = token_idx = 0
        while True:
            while event_idx < len(events) and events[event_idx].position <= cursor:
                parts.append(events[event_idx].text)
                event_idx += 1

            if token_idx < len(tokens) and skip_from[token_idx] <= cursor < tokens[token_idx].end:
                cursor = tokens[token_idx].end
                token_idx += 1
                continue

            if cursor >= len(text):
                break

            parts.append(text[cursor])
            cursor += 1

        return "".join(parts)

    def strip_tokens(self, text: str) -> str:
        """Remove known macro tokens without inserting any delimiters."""
        return MacroExpander(dict.fromkeys(self.style, "")).expand(text)

    def insertion_events(self, text: str, tokens: list[MacroToken]) -> list[InsertionEvent]:
        """Compute the sorted delimiter insertions for ``tokens``.

        A span made up only of text that is elided anyway (other tokens and
        the whitespace before them) gets no delimiters.
        """
        regions = _elided_regions(text, tokens)
        events: list[InsertionEvent] = []
        for idx, token in enumerate(tokens):
            span_start = token.start
            for _ in range(token.degree):
                if span_start == 0:
                    break
                span_start = seek_word_backwards(text, span_start)

            span_end = seek_non_space_backwards(text, token.start) + 1
            # Degree 0 yields an inverted span; treat it like an empty one.
            if span_start >= span_end or _is_elided(span_start, span_end, regions):
                continue

            delimiter = self.style[token.name]
            events.append(InsertionEvent(span_start, -idx - 1, delimiter))
            events.append(InsertionEvent(span_end, idx + 1, delimiter))

        events.sort()
        return events

    def find_macro_entries(self, text: str) -> list[MacroToken]:
        """List the known ``.name[digits]`` tokens in order of appearance."""
        tokens: list[MacroToken] = []
        size = len(text)
        pos = 0
        while pos < size:
            if text[pos] != _MACRO_PREFIX:
                pos += 1
                continue

            name_end = pos + 1
            while name_end < size and text[name_end].isalpha():
                name_end += 1

            name = text[pos + 1 : name_end]
            if name not in self.style:
                pos += 1
                continue

            degree_end = name_end
            while degree_end < size and text[degree_end].isdigit():
                degree_end += 1

            degree = 1
            if degree_end != name_end:
                degree_str = text[name_end:degree_end]
                try:
                    degree = int(degree_str)
                except ValueError:
                    logger.warning(
                        "Known macro with invalid degree, skipping",
                        extra={"macro": name, "degree": degree_str, "offset": pos},
                    )
                    pos += 1
                    continue

            tokens.append(MacroToken(name=name, degree=degree, start=pos, end=degree_end))
            pos = degree_end

        return tokens


def _elided_regions(text: str, tokens: list[MacroToken]) -> list[tuple[int, int]]:
    """Ranges removed from the output: each token plus the whitespace before it."""
    return [(seek_non_space_backwards(text, token.start) + 1, token.end) for token in tokens]


def _is_elided(start: int, end: int, regions: list[tuple[int, int]]) -> bool:
    pos = start
    for begin, stop in regions:
        if stop <= pos:
            continue
        if begin > pos:
            break
        pos = stop
        if pos >= end:
            return True
    return pos >= end


def expand_macros(text: str, style: Mapping[str, str] | None = None) -> str:
    """Expand macros in ``text`` with ``style`` or the configured style."""
    return MacroExpander(MACROWIKI_MACRO_STYLE if style is None else style).expand(text)
