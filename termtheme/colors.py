"""Color values used in theme files.

A theme color is written in one of three forms:

- one of the 16 base colors, by name: ``"blue"``, ``"light red"``, ...
- a low-resolution color, three digits each between 0 and 5: ``"541"``
- a full-resolution color, ``#`` followed by 3 or 6 hex digits: ``"#1A6"``

Usage:
    from termtheme.colors import parse_color

    spec = parse_color("#1A6")
    spec.rgb          # (17, 170, 102)
    spec.rich_color   # "#11aa66"
"""

from __future__ import annotations

import string
from dataclasses import dataclass

from rich.terminal_theme import DEFAULT_TERMINAL_THEME

from termtheme.errors import InvalidColorSyntax

BASE_COLOR_NAMES: tuple[str, ...] = (
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
)
LIGHT_PREFIX = "light "

# Index in the 16 color ANSI palette for every accepted name
ANSI_INDEX: dict[str, int] = {
    **{name: index for index, name in enumerate(BASE_COLOR_NAMES)},
    **{f"{LIGHT_PREFIX}{name}": index + 8 for index, name in enumerate(BASE_COLOR_NAMES)},
}

# xterm 6x6x6 color cube channel levels
LOW_RES_LEVELS: tuple[int, ...] = (0, 95, 135, 175, 215, 255)

_HEX_DIGITS = frozenset(string.hexdigits)
_LOW_RES_DIGITS = frozenset("012345")


@dataclass(frozen=True)
class BaseColor:
    """One of the 16 named terminal colors."""

    name: str

    @property
    def is_base(self) -> bool:
        return True

    @property
    def ansi_index(self) -> int:
        """Index of this color in the 16 color ANSI palette."""
        return ANSI_INDEX[self.name]

    @property
    def rgb(self) -> tuple[int, int, int]:
        triplet = DEFAULT_TERMINAL_THEME.ansi_colors[self.ansi_index]
        return (triplet.red, triplet.green, triplet.blue)

    @property
    def hex(self) -> str:
        return _to_hex(self.rgb)

    @property
    def rich_color(self) -> str:
        if self.name.startswith(LIGHT_PREFIX):
            return f"bright_{self.name[len(LIGHT_PREFIX):]}"
        return self.name

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class LowRes:
    """A color from the 6x6x6 color cube."""

    r: int
    g: int
    b: int

    @property
    def is_base(self) -> bool:
        return False

    @property
    def cube_index(self) -> int:
        """Index of this color in the 256 color palette."""
        return 16 + 36 * self.r + 6 * self.g + self.b

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (LOW_RES_LEVELS[self.r], LOW_RES_LEVELS[self.g], LOW_RES_LEVELS[self.b])

    @property
    def hex(self) -> str:
        return _to_hex(self.rgb)

    @property
    def rich_color(self) -> str:
        return f"color({self.cube_index})"

    def __str__(self) -> str:
        return f"{self.r}{self.g}{self.b}"


@dataclass(frozen=True)
class Hex:
    """A full-resolution color.

    ``digits`` keeps the value as written (without the ``#``), so a
    3-digit color still reports a precision of 3.
    """

    digits: str

    @property
    def is_base(self) -> bool:
        return False

    @property
    def precision(self) -> int:
        return len(self.digits)

    @property
    def rgb(self) -> tuple[int, int, int]:
        digits = self.digits
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    @property
    def hex(self) -> str:
        return _to_hex(self.rgb)

    @property
    def rich_color(self) -> str:
        return self.hex

    def __str__(self) -> str:
        return f"#{self.digits}"


ColorSpec = BaseColor | LowRes | Hex


def parse_color(raw: str) -> ColorSpec:
    """Parse a color string.

    The form is picked by the first character and length: a leading ``#``
    always means a hex color, then a 3-digit low-resolution color, then a
    base color name.

    Args:
        raw: The color string from the theme file.

    Returns:
        The parsed color.

    Raises:
        InvalidColorSyntax: If the string matches none of the color forms.
    """
    if not isinstance(raw, str):
        raise InvalidColorSyntax(raw)

    if raw.startswith("#"):
        digits = raw[1:]
        if len(digits) in (3, 6) and all(ch in _HEX_DIGITS for ch in digits):
            return Hex(digits)
        raise InvalidColorSyntax(raw)

    if len(raw) == 3 and all(ch in _LOW_RES_DIGITS for ch in raw):
        return LowRes(int(raw[0]), int(raw[1]), int(raw[2]))

    # Names are matched exactly, "Blue" is not a color
    if raw in ANSI_INDEX:
        return BaseColor(raw)

    raise InvalidColorSyntax(raw)


def is_valid_color(raw: str) -> bool:
    """Check whether a string parses as a color.

    Args:
        raw: Value to check.

    Returns:
        True if ``parse_color`` accepts the value.
    """
    try:
        parse_color(raw)
    except InvalidColorSyntax:
        return False
    return True


def _to_hex(rgb: tuple[int, int, int]) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)
