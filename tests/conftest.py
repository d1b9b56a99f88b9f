"""Test setup for macrowiki."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from macrowiki.storage import PageStore  # noqa: E402


@pytest.fixture
def store(tmp_path: Path) -> PageStore:
    """Page store rooted in a temporary directory."""
    return PageStore(tmp_path / "data")


@pytest.fixture
def italic_style() -> dict[str, str]:
    """Single-macro style used by most expansion tests."""
    return {"i": "*"}
