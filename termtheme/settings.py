"""Persistent settings for termtheme."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from termtheme.capabilities import COLOR_MODES, DEFAULT_COLOR_MODE
from termtheme.logger import get_logger

logger = get_logger(__name__)

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_THEME_FILE = "style.toml"


@dataclass(frozen=True)
class Settings:
    """User-configurable settings stored on disk."""

    theme_file: str = DEFAULT_THEME_FILE
    color_mode: str = DEFAULT_COLOR_MODE
    log_level: str = DEFAULT_LOG_LEVEL

    def theme_path(self) -> Path:
        """Get the theme file location.

        Returns:
            ``theme_file`` as is when absolute, otherwise relative to the
            configuration directory.
        """
        path = Path(self.theme_file).expanduser()
        if path.is_absolute():
            return path
        return get_config_dir() / path

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> Settings:
        """Create settings from a mapping, applying defaults for invalid values.

        Args:
            data: Mapping containing raw settings values.

        Returns:
            A Settings instance with validated values.
        """
        theme_file = _coerce_str(data.get("theme_file"))
        if theme_file is None or not theme_file.strip():
            theme_file = DEFAULT_THEME_FILE

        color_mode_value = _coerce_str(data.get("color_mode"))
        color_mode = (
            color_mode_value if color_mode_value is not None and color_mode_value in COLOR_MODES else DEFAULT_COLOR_MODE
        )

        log_level_value = _coerce_str(data.get("log_level"))
        log_level = (
            log_level_value if log_level_value is not None and log_level_value in LOG_LEVELS else DEFAULT_LOG_LEVEL
        )

        return cls(theme_file=theme_file, color_mode=color_mode, log_level=log_level)

    def to_dict(self) -> dict[str, object]:
        """Serialize settings to a dictionary.

        Returns:
            Dictionary representation of settings.
        """
        return {
            "theme_file": self.theme_file,
            "color_mode": self.color_mode,
            "log_level": self.log_level,
        }


def get_config_dir() -> Path:
    """Get the directory used for persistent configuration.

    Returns:
        Path to the configuration directory.
    """
    override_dir = os.environ.get("TERMTHEME_CONFIG_DIR")
    if override_dir:
        return Path(override_dir).expanduser()

    base_dir = os.environ.get("XDG_CONFIG_HOME")
    if base_dir:
        return Path(base_dir).expanduser() / "termtheme"

    return Path.home() / ".config" / "termtheme"


def get_settings_path() -> Path:
    """Get the full path to the settings file.

    Returns:
        Path to the settings JSON file.
    """
    return get_config_dir() / "settings.json"


def load_settings() -> Settings:
    """Load settings from disk.

    Returns:
        Loaded settings, or defaults if none exist.
    """
    settings_path = get_settings_path()
    if not settings_path.exists():
        return Settings()

    try:
        raw = json.loads(settings_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        logger.warning(f"Failed to parse settings file {settings_path}: {exc}")
        return Settings()
    except OSError as exc:
        logger.warning(f"Failed to read settings file {settings_path}: {exc}")
        return Settings()

    if not isinstance(raw, dict):
        logger.warning(f"Settings file {settings_path} contains invalid data")
        return Settings()

    return Settings.from_mapping(raw)


def save_settings(settings: Settings) -> None:
    """Persist settings to disk.

    Args:
        settings: Settings to persist.
    """
    settings_path = get_settings_path()
    try:
        settings_path.parent.mkdir(parents=True, exist_ok=True)
        settings_path.write_text(json.dumps(settings.to_dict(), indent=2), encoding="utf-8")
    except OSError as exc:
        logger.warning(f"Failed to save settings to {settings_path}: {exc}")


def _coerce_str(value: object) -> str | None:
    """Coerce a value into a string if possible.

    Args:
        value: Raw value to coerce.

    Returns:
        String value or None.
    """
    if isinstance(value, str):
        return value
    return None
