"""Local configuration for macrowiki."""

from __future__ import annotations

import json
import os
from pathlib import Path

from macrowiki.exceptions import ConfigurationError

DEFAULT_STORAGE_DIR = "data"
DEFAULT_FRONT_PAGE = "FrontPage"
DEFAULT_LOG_LEVEL = "INFO"

DEFAULT_MACRO_STYLE: dict[str, str] = {
    "i": "*",
    "b": "**",
    "c": "`",
    "m": "$",
}


def _env_flag(name: str, default: bool = False) -> bool:
    return os.getenv(name, str(default)).strip().lower() in {"1", "true", "yes", "on"}


def load_macro_style(raw: str | None) -> dict[str, str]:
    """Parse a JSON macro style override, falling back to the default style.

    Args:
        raw: JSON object mapping macro names to delimiter strings, or None.

    Returns:
        The default style updated with the parsed entries.

    Raises:
        ConfigurationError: If ``raw`` is not a JSON object mapping letter-only
            macro names to string delimiters.
    """
    style = dict(DEFAULT_MACRO_STYLE)
    if not raw or not raw.strip():
        return style
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Invalid macro style JSON: {exc}") from exc
    if not isinstance(parsed, dict) or not all(
        isinstance(key, str) and isinstance(value, str) for key, value in parsed.items()
    ):
        raise ConfigurationError("Macro style must be a JSON object of strings")
    invalid_names = sorted(name for name in parsed if not name.isalpha())
    if invalid_names:
        raise ConfigurationError(f"Macro names must be one or more letters, got {invalid_names!r}")
    style.update(parsed)
    return style


# Pages are stored as <title>.txt below this directory.
MACROWIKI_STORAGE_PATH = Path(os.getenv("MACROWIKI_STORAGE_PATH", DEFAULT_STORAGE_DIR)).expanduser().resolve()
MACROWIKI_FRONT_PAGE = os.getenv("MACROWIKI_FRONT_PAGE", DEFAULT_FRONT_PAGE)
MACROWIKI_ENABLE_EDITING = _env_flag("MACROWIKI_ENABLE_EDITING")
MACROWIKI_LOG_LEVEL = os.getenv("MACROWIKI_LOG_LEVEL", DEFAULT_LOG_LEVEL)
MACROWIKI_MACRO_STYLE = load_macro_style(os.getenv("MACROWIKI_MACRO_STYLE"))
