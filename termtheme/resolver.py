"""Fallback resolution for theme color fields.

A color field holds a single color or a list of candidates. The first
candidate that parses and that the target can display wins; base colors
are always displayable, other colors only when the target supports
custom colors.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from termtheme.capabilities import CapabilitySet
from termtheme.colors import ColorSpec, parse_color
from termtheme.errors import InvalidColorSyntax
from termtheme.logger import get_logger

logger = get_logger(__name__)


class CandidateStatus(str, Enum):
    """Outcome of a single fallback candidate."""

    SELECTED = "selected"
    USABLE = "usable"
    INVALID = "invalid"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class CandidateOutcome:
    """A candidate together with what the resolver made of it."""

    raw: object
    spec: ColorSpec | None
    status: CandidateStatus


def normalize_field_value(field: object) -> tuple[object, ...]:
    """Turn a raw field value into an ordered tuple of candidates.

    Args:
        field: A single color string or a list/tuple of them.

    Returns:
        Candidates in priority order. Values of any other type yield no
        candidates.
    """
    if isinstance(field, str):
        return (field,)
    if isinstance(field, Sequence):
        return tuple(field)
    return ()


def _is_usable(spec: ColorSpec, caps: CapabilitySet) -> bool:
    return spec.is_base or caps.supports_custom_color


def resolve_field(field: object, caps: CapabilitySet) -> ColorSpec | None:
    """Pick the first usable color of a field.

    Args:
        field: A single color string or an ordered list of candidates.
        caps: Capabilities of the output target.

    Returns:
        The first candidate that parses and is supported, or None if there
        is none.
    """
    for raw in normalize_field_value(field):
        try:
            spec = parse_color(raw)  # type: ignore[arg-type]
        except InvalidColorSyntax:
            logger.debug(f"Skipping invalid color {raw!r}")
            continue
        if not _is_usable(spec, caps):
            logger.debug(f"Skipping {raw!r}: custom colors are not supported")
            continue
        return spec
    return None


def resolve_candidates(field: object, caps: CapabilitySet) -> list[CandidateOutcome]:
    """Report the outcome of every candidate of a field.

    Args:
        field: A single color string or an ordered list of candidates.
        caps: Capabilities of the output target.

    Returns:
        One outcome per candidate, in order. At most one is SELECTED and it
        is the value ``resolve_field`` returns.
    """
    outcomes: list[CandidateOutcome] = []
    selected = False
    for raw in normalize_field_value(field):
        try:
            spec = parse_color(raw)  # type: ignore[arg-type]
        except InvalidColorSyntax:
            outcomes.append(CandidateOutcome(raw, None, CandidateStatus.INVALID))
            continue
        if not _is_usable(spec, caps):
            outcomes.append(CandidateOutcome(raw, spec, CandidateStatus.UNSUPPORTED))
            continue
        status = CandidateStatus.USABLE if selected else CandidateStatus.SELECTED
        selected = True
        outcomes.append(CandidateOutcome(raw, spec, status))
    return outcomes
