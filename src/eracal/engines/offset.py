"""
eracal.engines.offset
---------------------
Arithmetic shared by every calendar of the form "ISO plus a constant year offset".

For offset K:
    proleptic_year = iso_year + K
Era 1 (current) counts forward from proleptic year 1; era 0 (before) counts
backward, so year-of-era 1 of era 0 is proleptic year 0.

Month, day-of-month and day-of-year coincide with ISO by construction.
"""

from __future__ import annotations

from typing import Callable, Optional, Tuple

from ..core.time import is_leap as iso_is_leap
from ..core.types import ValueRange

LeapRule = Callable[[int], bool]

ERA_BEFORE = 0
ERA_CURRENT = 1


def proleptic_year(era_value: int, year_of_era: int) -> int:
    return year_of_era if era_value == ERA_CURRENT else 1 - year_of_era


def era_and_year_of_era(proleptic: int) -> Tuple[int, int]:
    if proleptic >= 1:
        return ERA_CURRENT, proleptic
    return ERA_BEFORE, 1 - proleptic


def to_iso_year(proleptic: int, offset: int) -> int:
    return proleptic - offset


def from_iso_year(iso_year: int, offset: int) -> int:
    return iso_year + offset


def is_leap_year(proleptic: int, offset: int, rule: Optional[LeapRule] = None) -> bool:
    """ISO rule evaluated at the ISO year, unless the calendar brings its own rule."""
    if rule is not None:
        return rule(proleptic)
    return iso_is_leap(proleptic - offset)


def year_range(iso_year: ValueRange, offset: int) -> ValueRange:
    return ValueRange.of(iso_year.minimum + offset, iso_year.maximum + offset)


def max_year_of_era(iso_year: ValueRange, offset: int) -> Tuple[int, int]:
    """Largest year-of-era of (era 0, era 1) inside the representable ISO years."""
    before = -(iso_year.minimum + offset) + 1
    current = iso_year.maximum + offset
    return before, current


def year_of_era_range(iso_year: ValueRange, offset: int) -> ValueRange:
    """
    Both eras fold onto positive years starting at 1. The era that reaches
    further gives the largest maximum; the other gives the smallest.
    """
    before, current = max_year_of_era(iso_year, offset)
    return ValueRange.of(1, min(before, current), max(before, current))
