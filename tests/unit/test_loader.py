"""Tests for theme file loading."""

import json
from pathlib import Path

import pytest
from termtheme.capabilities import CapabilitySet
from termtheme.colors import BaseColor, Hex
from termtheme.document import Borders
from termtheme.errors import InvalidFieldValue, ThemeFileError
from termtheme.loader import MAX_THEME_BYTES, load_theme_file, parse_theme_text, read_theme_file


class TestParseThemeText:
    """Tests for parse_theme_text."""

    def test_toml(self) -> None:
        raw = parse_theme_text('borders = "simple"\n[colors]\nview = ["#fff", "white"]\n')
        assert raw == {"borders": "simple", "colors": {"view": ["#fff", "white"]}}

    def test_json(self) -> None:
        raw = parse_theme_text('{"shadow": true, "colors": {"view": "white"}}', fmt="json")
        assert raw == {"shadow": True, "colors": {"view": "white"}}

    def test_invalid_toml(self) -> None:
        with pytest.raises(ValueError, match="Invalid TOML"):
            parse_theme_text("borders = ")

    def test_invalid_json(self) -> None:
        with pytest.raises(ValueError, match="Invalid JSON"):
            parse_theme_text("{", fmt="json")

    def test_json_must_be_object(self) -> None:
        with pytest.raises(ValueError, match="JSON object"):
            parse_theme_text('["red"]', fmt="json")

    def test_unknown_format(self) -> None:
        with pytest.raises(ValueError, match="Unknown theme format"):
            parse_theme_text("", fmt="yaml")


class TestLoadThemeFile:
    """Tests for load_theme_file."""

    def test_loads_toml_file(self, tmp_path: Path, full_caps: CapabilitySet) -> None:
        path = tmp_path / "theme.toml"
        path.write_text('shadow = true\n[colors]\nprimary = ["#1A6", "black"]\n', encoding="utf-8")
        document = load_theme_file(path, full_caps)
        assert document.shadow is True
        assert document.get("colors.primary") == Hex("1A6")

    def test_loads_json_file(self, tmp_path: Path, base_caps: CapabilitySet) -> None:
        path = tmp_path / "theme.json"
        path.write_text(json.dumps({"borders": "none", "colors": {"primary": ["#1A6", "black"]}}))
        document = load_theme_file(path, base_caps)
        assert document.borders is Borders.NONE
        assert document.get("colors.primary") == BaseColor("black")

    def test_accepts_string_path(self, tmp_path: Path, full_caps: CapabilitySet) -> None:
        path = tmp_path / "theme.toml"
        path.write_text('borders = "simple"\n', encoding="utf-8")
        assert load_theme_file(str(path), full_caps).borders is Borders.SIMPLE

    def test_missing_file(self, tmp_path: Path, full_caps: CapabilitySet) -> None:
        path = tmp_path / "missing.toml"
        with pytest.raises(ThemeFileError) as exc_info:
            load_theme_file(path, full_caps)
        assert exc_info.value.path == path

    def test_malformed_toml(self, tmp_path: Path, full_caps: CapabilitySet) -> None:
        path = tmp_path / "theme.toml"
        path.write_text("[colors\nview = 'white'\n", encoding="utf-8")
        with pytest.raises(ThemeFileError, match="Invalid TOML"):
            load_theme_file(path, full_caps)

    def test_oversized_file(self, tmp_path: Path, full_caps: CapabilitySet) -> None:
        path = tmp_path / "theme.toml"
        path.write_text("#" * (MAX_THEME_BYTES + 1), encoding="utf-8")
        with pytest.raises(ThemeFileError, match="max size"):
            load_theme_file(path, full_caps)

    def test_non_utf8_file(self, tmp_path: Path, full_caps: CapabilitySet) -> None:
        path = tmp_path / "theme.toml"
        path.write_bytes(b"borders = '\xff'\n")
        with pytest.raises(ThemeFileError, match="unable to read"):
            load_theme_file(path, full_caps)

    def test_field_errors_propagate(self, tmp_path: Path, full_caps: CapabilitySet) -> None:
        path = tmp_path / "theme.toml"
        path.write_text('borders = "dotted"\n', encoding="utf-8")
        with pytest.raises(InvalidFieldValue) as exc_info:
            load_theme_file(path, full_caps)
        assert exc_info.value.field == "borders"

    def test_unknown_keys_ignored(self, tmp_path: Path, full_caps: CapabilitySet) -> None:
        path = tmp_path / "theme.toml"
        path.write_text('foo = "bar"\n', encoding="utf-8")
        document = load_theme_file(path, full_caps)
        assert "foo" not in document.field_names()


class TestReadThemeFile:
    """Tests for read_theme_file."""

    def test_returns_raw_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "theme.json"
        path.write_text(json.dumps({"colors": None, "colors.view": "white"}))
        assert read_theme_file(path) == {"colors": None, "colors.view": "white"}

    def test_oversized_file(self, tmp_path: Path) -> None:
        path = tmp_path / "theme.toml"
        path.write_text("#" * (MAX_THEME_BYTES + 1), encoding="utf-8")
        with pytest.raises(ThemeFileError, match="max size"):
            read_theme_file(path)

    def test_null_colors_in_json_file(self, tmp_path: Path, full_caps: CapabilitySet) -> None:
        path = tmp_path / "theme.json"
        path.write_text(json.dumps({"colors": None}))
        with pytest.raises(InvalidFieldValue) as exc_info:
            load_theme_file(path, full_caps)
        assert exc_info.value.field == "colors"
