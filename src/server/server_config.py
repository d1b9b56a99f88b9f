"""Server-only configuration."""

from __future__ import annotations

import os
from pathlib import Path

SERVER_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = SERVER_DIR / "templates"
STATIC_DIR = SERVER_DIR / "static"

DEFAULT_HOST = "0.0.0.0"  # noqa: S104
DEFAULT_PORT = 8080

MAX_PAGE_SIZE_KB = int(os.getenv("MACROWIKI_MAX_PAGE_SIZE_KB", "512"))
MAX_PAGE_SIZE_CHARS = MAX_PAGE_SIZE_KB * 1024
