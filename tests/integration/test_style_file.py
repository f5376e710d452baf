"""Integration tests loading complete theme files."""

from pathlib import Path

from termtheme import CapabilitySet, load_theme_file
from termtheme.colors import BaseColor, Hex, LowRes
from termtheme.document import DEFAULT_COLORS, Borders


class TestSampleStyleFile:
    """The documented sample theme resolves the same on every target."""

    def test_style_fields(self, style_toml_path: Path, full_caps: CapabilitySet) -> None:
        document = load_theme_file(style_toml_path, full_caps)
        assert document.shadow is False
        assert document.borders is Borders.OUTSET

    def test_colors(self, style_toml_path: Path, full_caps: CapabilitySet) -> None:
        document = load_theme_file(style_toml_path, full_caps)
        assert document.get("colors.view") == BaseColor("white")
        for slot in DEFAULT_COLORS:
            if slot != "view":
                assert document.get(f"colors.{slot}") == BaseColor("black")

    def test_same_result_on_limited_target(
        self, style_toml_path: Path, full_caps: CapabilitySet, base_caps: CapabilitySet
    ) -> None:
        assert load_theme_file(style_toml_path, full_caps) == load_theme_file(style_toml_path, base_caps)


class TestFallbackFile:
    """Fallback lists degrade on targets without custom colors."""

    def test_custom_color_target(self, fallback_toml_path: Path, full_caps: CapabilitySet) -> None:
        document = load_theme_file(fallback_toml_path, full_caps)
        assert document.shadow is True
        assert document.borders is Borders.SIMPLE
        assert document.get("colors.background") == Hex("003")
        assert document.get("colors.shadow") == LowRes(5, 4, 1)
        assert document.get("colors.primary") == Hex("1A6")
        assert document.get("colors.title_primary") == BaseColor("blue")
        assert document.get("colors.highlight") == DEFAULT_COLORS["highlight"]

    def test_base_color_target(self, fallback_toml_path: Path, base_caps: CapabilitySet) -> None:
        document = load_theme_file(fallback_toml_path, base_caps)
        assert document.get("colors.background") == BaseColor("black")
        assert document.get("colors.shadow") == BaseColor("light black")
        assert document.get("colors.primary") == BaseColor("white")
        assert document.get("colors.title_primary") == BaseColor("blue")

    def test_omitted_slots_use_defaults(self, fallback_toml_path: Path, full_caps: CapabilitySet) -> None:
        document = load_theme_file(fallback_toml_path, full_caps)
        for slot in ("view", "secondary", "tertiary", "title_secondary", "highlight_inactive"):
            assert document.get(f"colors.{slot}") == DEFAULT_COLORS[slot]

    def test_reload_builds_new_document(self, fallback_toml_path: Path, full_caps: CapabilitySet) -> None:
        first = load_theme_file(fallback_toml_path, full_caps)
        second = load_theme_file(fallback_toml_path, full_caps)
        assert first == second
        assert first is not second
