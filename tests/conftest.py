"""Shared test fixtures for termtheme."""

import os
import tempfile
from pathlib import Path

import pytest

# Keep test runs from writing logs into the user's home directory
os.environ.setdefault("TERMTHEME_LOG_DIR", tempfile.mkdtemp(prefix="termtheme-logs-"))

from termtheme.capabilities import CapabilitySet  # noqa: E402

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def full_caps() -> CapabilitySet:
    """Capabilities of a terminal with custom color support."""
    return CapabilitySet.full()


@pytest.fixture
def base_caps() -> CapabilitySet:
    """Capabilities of a terminal limited to the 16 base colors (e.g. the linux TTY)."""
    return CapabilitySet.base()


@pytest.fixture
def style_toml_path() -> Path:
    """Path to the sample theme file shipped with the tests."""
    return DATA_DIR / "style.toml"


@pytest.fixture
def fallback_toml_path() -> Path:
    """Path to a theme file exercising fallback lists."""
    return DATA_DIR / "fallback.toml"


@pytest.fixture
def base_color_names() -> list[str]:
    """All 16 base color names."""
    names = ["black", "red", "green", "yellow", "blue", "magenta", "cyan", "white"]
    return names + [f"light {name}" for name in names]


@pytest.fixture
def invalid_colors() -> list[str]:
    """Strings that are not colors in any form."""
    return [
        "",
        "BLUE",
        "Blue",
        "lightred",
        "light  red",
        "dark red",
        "purple",
        "546",
        "999",
        "12",
        "0000",
        "#",
        "#12",
        "#1234",
        "#12345",
        "#1234567",
        "#ggg",
        "#12345g",
        "#blue",
        " red",
        "red ",
    ]
