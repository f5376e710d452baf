"""Color capabilities of the output target."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from rich.color import ColorSystem

COLOR_MODES: tuple[str, ...] = ("auto", "base", "custom")
DEFAULT_COLOR_MODE = "auto"

# Terminals that only render the 16 base colors
_BASE_ONLY_TERMS = frozenset({"", "linux", "dumb", "vt100", "vt220", "ansi"})
_TRUECOLOR_VALUES = frozenset({"truecolor", "24bit"})

# Names used by rich's Console.color_system
_COLOR_SYSTEM_NAMES: dict[str, ColorSystem] = {
    "standard": ColorSystem.STANDARD,
    "256": ColorSystem.EIGHT_BIT,
    "eight_bit": ColorSystem.EIGHT_BIT,
    "truecolor": ColorSystem.TRUECOLOR,
    "windows": ColorSystem.WINDOWS,
}


@dataclass(frozen=True)
class CapabilitySet:
    """What the current output target can display.

    Attributes:
        supports_custom_color: True when colors other than the 16 base
            colors (low-resolution and hex colors) can be rendered.
    """

    supports_custom_color: bool = True

    @property
    def base_only(self) -> bool:
        """True when only base colors are usable."""
        return not self.supports_custom_color

    @classmethod
    def full(cls) -> CapabilitySet:
        return cls(supports_custom_color=True)

    @classmethod
    def base(cls) -> CapabilitySet:
        return cls(supports_custom_color=False)

    @classmethod
    def from_color_system(cls, system: ColorSystem | str | None) -> CapabilitySet:
        """Build capabilities from a rich color system.

        Args:
            system: A ``ColorSystem``, the name reported by
                ``Console.color_system``, or None when color is disabled.

        Returns:
            The matching capability set.

        Raises:
            ValueError: If the color system name is unknown.
        """
        if system is None:
            return cls.base()
        if isinstance(system, str):
            try:
                system = _COLOR_SYSTEM_NAMES[system.lower()]
            except KeyError:
                raise ValueError(f"Unknown color system: {system!r}") from None
        return cls(supports_custom_color=system != ColorSystem.STANDARD)

    @classmethod
    def detect(cls, environ: Mapping[str, str] | None = None) -> CapabilitySet:
        """Guess capabilities from ``TERM`` and ``COLORTERM``.

        Args:
            environ: Environment to inspect, defaults to ``os.environ``.

        Returns:
            The detected capability set.
        """
        env = os.environ if environ is None else environ
        colorterm = env.get("COLORTERM", "").strip().lower()
        term = env.get("TERM", "").strip().lower()

        if colorterm in _TRUECOLOR_VALUES:
            return cls.full()
        if "256color" in term or "direct" in term:
            return cls.full()
        if term in _BASE_ONLY_TERMS:
            return cls.base()
        return cls.full()

    @classmethod
    def for_mode(cls, mode: str, environ: Mapping[str, str] | None = None) -> CapabilitySet:
        """Build capabilities for a configured color mode.

        Args:
            mode: One of ``auto``, ``base`` or ``custom``.
            environ: Environment used when ``mode`` is ``auto``.

        Returns:
            The capability set for the mode.

        Raises:
            ValueError: If the mode is unknown.
        """
        if mode == "base":
            return cls.base()
        if mode == "custom":
            return cls.full()
        if mode == "auto":
            return cls.detect(environ)
        raise ValueError(f"Unknown color mode: {mode!r}. Expected one of {', '.join(COLOR_MODES)}")
