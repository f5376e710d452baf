"""Theme file reading and decoding."""

from __future__ import annotations

import json
import tomllib
from pathlib import Path

from termtheme.capabilities import CapabilitySet
from termtheme.document import ThemeDocument
from termtheme.errors import ThemeFileError
from termtheme.logger import get_logger

logger = get_logger(__name__)

THEME_FORMATS: tuple[str, ...] = ("toml", "json")
MAX_THEME_BYTES = 256 * 1024


def load_theme_file(path: Path | str, caps: CapabilitySet) -> ThemeDocument:
    """Load and resolve a theme file.

    The format is picked from the file suffix; ``.json`` files are decoded
    as JSON and everything else as TOML.

    Args:
        path: Path to the theme file.
        caps: Capabilities of the output target.

    Returns:
        The resolved theme.

    Raises:
        ThemeFileError: If the file cannot be read or decoded.
        InvalidFieldValue: If a non-color field holds an invalid value.
    """
    raw = read_theme_file(path)
    logger.info(f"Loading theme from {path}")
    return ThemeDocument.load(raw, caps)


def read_theme_file(path: Path | str) -> dict[str, object]:
    """Read a theme file into raw key/value data.

    Args:
        path: Path to the theme file.

    Returns:
        The decoded mapping, not yet validated.

    Raises:
        ThemeFileError: If the file cannot be read or decoded.
    """
    theme_path = Path(path)
    fmt = "json" if theme_path.suffix.lower() == ".json" else "toml"
    text = _read_text_limited(theme_path, max_bytes=MAX_THEME_BYTES)
    try:
        return parse_theme_text(text, fmt=fmt)
    except ValueError as exc:
        raise ThemeFileError(theme_path, str(exc)) from exc


def parse_theme_text(text: str, *, fmt: str = "toml") -> dict[str, object]:
    """Decode theme text into raw key/value data.

    Args:
        text: Content of a theme file.
        fmt: ``toml`` or ``json``.

    Returns:
        The decoded mapping.

    Raises:
        ValueError: If the text cannot be decoded, the top level is not an
            object, or the format is unknown.
    """
    if fmt == "toml":
        try:
            return tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            raise ValueError(f"Invalid TOML: {exc}") from exc
    if fmt == "json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise ValueError("Expected a JSON object at the top level")
        return data
    raise ValueError(f"Unknown theme format: {fmt!r}. Expected one of {', '.join(THEME_FORMATS)}")


def _read_text_limited(path: Path, *, max_bytes: int) -> str:
    try:
        size = path.stat().st_size
    except OSError as exc:
        raise ThemeFileError(path, f"unable to stat file: {exc}") from exc
    if size > max_bytes:
        raise ThemeFileError(path, f"file exceeds max size ({max_bytes} bytes)")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ThemeFileError(path, f"unable to read file: {exc}") from exc
