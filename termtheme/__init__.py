"""Parsing and fallback resolution of terminal theme colors."""

from termtheme.capabilities import CapabilitySet
from termtheme.colors import BaseColor, ColorSpec, Hex, LowRes, is_valid_color, parse_color
from termtheme.document import Borders, ThemeDocument, load_document
from termtheme.errors import InvalidColorSyntax, InvalidFieldValue, ThemeError, ThemeFileError
from termtheme.loader import load_theme_file
from termtheme.resolver import resolve_field

__all__ = [
    "BaseColor",
    "Borders",
    "CapabilitySet",
    "ColorSpec",
    "Hex",
    "InvalidColorSyntax",
    "InvalidFieldValue",
    "LowRes",
    "ThemeDocument",
    "ThemeError",
    "ThemeFileError",
    "is_valid_color",
    "load_document",
    "load_theme_file",
    "parse_color",
    "resolve_field",
]
