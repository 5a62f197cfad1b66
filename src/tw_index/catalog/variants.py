"""Guaranteed spacing and flex utilities for every candidate list."""

from __future__ import annotations

from collections.abc import Iterable

EXPANSION_SPACING_SCALE = ("0", "1", "2", "3", "4", "5", "6", "8", "10")
EXPANSION_SPACING_PREFIXES = ("p", "m")
EXPANSION_DIRECTIONS = ("x", "y", "t", "r", "b", "l")
FLEX_DIRECTION_UTILITIES = ("flex-row", "flex-row-reverse", "flex-col", "flex-col-reverse")
FLEX_WRAP_UTILITIES = ("flex-wrap", "flex-wrap-reverse", "flex-nowrap")
FLEX_GROW_SHRINK_UTILITIES = ("flex-1", "flex-auto", "flex-initial", "flex-none")


def spacing_utilities() -> tuple[str, ...]:
    """Return padding/margin utilities over the expansion scale."""
    output: list[str] = []
    for base in EXPANSION_SPACING_PREFIXES:
        for prefix in (base, *(base + direction for direction in EXPANSION_DIRECTIONS)):
            output.extend(f"{prefix}-{value}" for value in EXPANSION_SPACING_SCALE)
    return tuple(output)


def flex_utilities() -> tuple[str, ...]:
    """Return flex direction, wrap, and grow/shrink utilities."""
    return FLEX_DIRECTION_UTILITIES + FLEX_WRAP_UTILITIES + FLEX_GROW_SHRINK_UTILITIES


def expand_spacing_utilities(names: Iterable[str]) -> set[str]:
    return set(names) | set(spacing_utilities())


def expand_flex_utilities(names: Iterable[str]) -> set[str]:
    return set(names) | set(flex_utilities())


def expand_variants(names: Iterable[str]) -> set[str]:
    """Return a superset of names containing every guaranteed utility.

    Set-union semantics make the expansion idempotent.
    """
    return expand_flex_utilities(expand_spacing_utilities(names))
