"""Resolved theme documents.

A ``ThemeDocument`` is built once from the raw key/value data of a theme
file and is read-only afterwards. Reloading a theme means building a new
document and swapping the reference.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from textual.theme import Theme

from termtheme.capabilities import CapabilitySet
from termtheme.colors import BaseColor, ColorSpec
from termtheme.errors import InvalidFieldValue
from termtheme.logger import get_logger
from termtheme.resolver import resolve_field

logger = get_logger(__name__)

COLORS_SECTION = "colors"
SHADOW_FIELD = "shadow"
BORDERS_FIELD = "borders"


class Borders(str, Enum):
    """Border style of views."""

    NONE = "none"
    SIMPLE = "simple"
    OUTSET = "outset"


DEFAULT_SHADOW = False
DEFAULT_BORDERS = Borders.OUTSET

# Fallback palette, base colors only so it renders on every terminal
DEFAULT_COLORS: dict[str, ColorSpec] = {
    "background": BaseColor("blue"),
    "shadow": BaseColor("black"),
    "view": BaseColor("white"),
    "primary": BaseColor("black"),
    "secondary": BaseColor("blue"),
    "tertiary": BaseColor("light white"),
    "title_primary": BaseColor("red"),
    "title_secondary": BaseColor("yellow"),
    "highlight": BaseColor("red"),
    "highlight_inactive": BaseColor("blue"),
}

COLOR_SLOTS: tuple[str, ...] = tuple(DEFAULT_COLORS)
COLOR_FIELDS: tuple[str, ...] = tuple(f"{COLORS_SECTION}.{slot}" for slot in COLOR_SLOTS)
FIELD_NAMES: tuple[str, ...] = (SHADOW_FIELD, BORDERS_FIELD, *COLOR_FIELDS)

_BORDERS_EXPECTED = "one of " + ", ".join(repr(style.value) for style in Borders)

ResolvedValue = bool | Borders | ColorSpec


@dataclass(frozen=True)
class ThemeDocument:
    """Fully resolved theme.

    Attributes:
        shadow: Whether views draw a drop shadow.
        borders: Border style of views.
        colors: Resolved color for every palette slot, keyed by slot name.
    """

    shadow: bool = DEFAULT_SHADOW
    borders: Borders = DEFAULT_BORDERS
    colors: Mapping[str, ColorSpec] = field(default_factory=lambda: MappingProxyType(dict(DEFAULT_COLORS)))

    @classmethod
    def load(cls, raw_fields: Mapping[str, object], caps: CapabilitySet) -> ThemeDocument:
        """Build a document from raw theme data.

        Accepts the nested shape of a TOML theme (``{"colors": {...}}``) as
        well as flat dotted keys (``"colors.primary"``); dotted keys take
        precedence. Unknown keys are ignored.

        Args:
            raw_fields: Raw values as read from the theme file.
            caps: Capabilities of the output target.

        Returns:
            The resolved document.

        Raises:
            InvalidFieldValue: If ``shadow``, ``borders`` or the ``colors``
                section hold a value of the wrong type.
        """
        shadow = _parse_shadow(raw_fields)
        borders = _parse_borders(raw_fields)
        raw_colors = collect_raw_colors(raw_fields)

        colors: dict[str, ColorSpec] = {}
        for slot in COLOR_SLOTS:
            if slot not in raw_colors:
                colors[slot] = DEFAULT_COLORS[slot]
                continue
            resolved = resolve_field(raw_colors[slot], caps)
            if resolved is None:
                logger.warning(
                    f"No usable color for {COLORS_SECTION}.{slot} in {raw_colors[slot]!r}, "
                    f"using default {DEFAULT_COLORS[slot]}"
                )
                resolved = DEFAULT_COLORS[slot]
            colors[slot] = resolved

        return cls(shadow=shadow, borders=borders, colors=MappingProxyType(colors))

    @staticmethod
    def field_names() -> tuple[str, ...]:
        """Names accepted by ``get``, in a stable order."""
        return FIELD_NAMES

    def get(self, field_name: str) -> ResolvedValue:
        """Look up a resolved field.

        Args:
            field_name: ``shadow``, ``borders`` or ``colors.<slot>``.

        Returns:
            The resolved value.

        Raises:
            KeyError: If the field name is not recognized.
        """
        if field_name == SHADOW_FIELD:
            return self.shadow
        if field_name == BORDERS_FIELD:
            return self.borders
        section, _, slot = field_name.partition(".")
        if section == COLORS_SECTION and slot in self.colors:
            return self.colors[slot]
        raise KeyError(field_name)

    def as_dict(self) -> dict[str, object]:
        """Serialize the document to plain values.

        Returns:
            Mapping in the nested theme file shape, colors in source form.
        """
        return {
            SHADOW_FIELD: self.shadow,
            BORDERS_FIELD: self.borders.value,
            COLORS_SECTION: {slot: str(spec) for slot, spec in self.colors.items()},
        }

    def to_textual_theme(self, name: str, *, dark: bool = True) -> Theme:
        """Build a Textual Theme from the resolved palette.

        Args:
            name: Name to register the theme under.
            dark: Whether the theme is a dark theme.

        Returns:
            A Textual Theme instance.
        """
        colors = self.colors
        view = colors["view"].hex
        return Theme(
            name=name,
            primary=colors["primary"].hex,
            secondary=colors["secondary"].hex,
            accent=colors["tertiary"].hex,
            background=colors["background"].hex,
            surface=view,
            panel=view,
            dark=dark,
            variables={
                "shadow": colors["shadow"].hex,
                "title-primary": colors["title_primary"].hex,
                "title-secondary": colors["title_secondary"].hex,
                "highlight": colors["highlight"].hex,
                "highlight-inactive": colors["highlight_inactive"].hex,
                "border-style": self.borders.value,
            },
        )


def load_document(raw_fields: Mapping[str, object], caps: CapabilitySet) -> ThemeDocument:
    """Build a ``ThemeDocument``, see ``ThemeDocument.load``."""
    return ThemeDocument.load(raw_fields, caps)


def _parse_shadow(raw_fields: Mapping[str, object]) -> bool:
    if SHADOW_FIELD not in raw_fields:
        return DEFAULT_SHADOW
    value = raw_fields[SHADOW_FIELD]
    if not isinstance(value, bool):
        raise InvalidFieldValue(SHADOW_FIELD, value, "true or false")
    return value


def _parse_borders(raw_fields: Mapping[str, object]) -> Borders:
    if BORDERS_FIELD not in raw_fields:
        return DEFAULT_BORDERS
    value = raw_fields[BORDERS_FIELD]
    if not isinstance(value, str):
        raise InvalidFieldValue(BORDERS_FIELD, value, _BORDERS_EXPECTED)
    try:
        return Borders(value)
    except ValueError:
        raise InvalidFieldValue(BORDERS_FIELD, value, _BORDERS_EXPECTED) from None


def collect_raw_colors(raw_fields: Mapping[str, object]) -> dict[str, object]:
    """Gather raw color values from the nested section and dotted keys.

    Args:
        raw_fields: Raw values as read from the theme file.

    Returns:
        Raw color values keyed by slot name, dotted keys taking precedence.

    Raises:
        InvalidFieldValue: If the ``colors`` section is present but not a table.
    """
    raw_colors: dict[str, object] = {}

    if COLORS_SECTION in raw_fields:
        section = raw_fields[COLORS_SECTION]
        if not isinstance(section, Mapping):
            raise InvalidFieldValue(COLORS_SECTION, section, "a table of colors")
        raw_colors.update(section)

    prefix = f"{COLORS_SECTION}."
    for key, value in raw_fields.items():
        if isinstance(key, str) and key.startswith(prefix):
            raw_colors[key[len(prefix):]] = value

    unknown = sorted(str(key) for key in raw_colors if key not in DEFAULT_COLORS)
    if unknown:
        logger.debug(f"Ignoring unknown color fields: {', '.join(unknown)}")
    return raw_colors
