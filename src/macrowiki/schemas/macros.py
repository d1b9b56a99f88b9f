"""Records produced while scanning macro tokens."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MacroToken:
    """A recognized ``.name[digits]`` occurrence.

    Attributes:
        name: Macro name, a key of the active style.
        degree: Number of words the macro reaches backwards over.
        start: Offset of the leading ``.``.
        end: Offset just past the last consumed digit (or name letter).
    """

    name: str
    degree: int
    start: int
    end: int


@dataclass(frozen=True, order=True)
class InsertionEvent:
    """A delimiter to insert before the character at ``position``.

    Events sort by ``(position, tie_break)``. Opens carry negative keys and
    closes positive ones, so at a shared position every open comes first.
    """

    position: int
    tie_break: int
    text: str
