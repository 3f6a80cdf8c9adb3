from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from .errors import RangeError

YEAR_MIN = -999_999_999
YEAR_MAX = 999_999_999


@dataclass(frozen=True)
class ValueRange:
    """Closed integer range with an optionally variable maximum.

    Invariant: minimum <= smallest_maximum <= largest_maximum <= maximum.
    """
    minimum: int
    smallest_maximum: int
    largest_maximum: int
    maximum: int

    def __post_init__(self) -> None:
        if not (self.minimum <= self.smallest_maximum <= self.largest_maximum <= self.maximum):
            raise ValueError(
                "ValueRange requires minimum <= smallest_maximum <= largest_maximum <= maximum, got "
                f"({self.minimum}, {self.smallest_maximum}, {self.largest_maximum}, {self.maximum})"
            )

    @classmethod
    def of(cls, minimum: int, *maxima: int) -> "ValueRange":
        """
        of(min, max)
        of(min, smallest_max, largest_max)       -> maximum == largest_max
        of(min, smallest_max, largest_max, max)
        """
        if len(maxima) == 1:
            return cls(minimum, maxima[0], maxima[0], maxima[0])
        if len(maxima) == 2:
            return cls(minimum, maxima[0], maxima[1], maxima[1])
        if len(maxima) == 3:
            return cls(minimum, *maxima)
        raise TypeError(f"ValueRange.of takes 2 to 4 arguments ({len(maxima) + 1} given)")

    def is_fixed(self) -> bool:
        return self.smallest_maximum == self.maximum

    def contains(self, value: int) -> bool:
        return self.minimum <= value <= self.maximum

    __contains__ = contains

    def checked(self, value: int, field: Any) -> int:
        if not self.contains(value):
            raise RangeError(field, value, self)
        return value

    def __str__(self) -> str:
        if self.smallest_maximum == self.maximum:
            return f"{self.minimum} - {self.maximum}"
        return f"{self.minimum} - {self.smallest_maximum}/{self.maximum}"


class TextStyle(Enum):
    NARROW = "narrow"
    SHORT = "short"
    FULL = "full"


class Field(Enum):
    DAY_OF_WEEK = "DayOfWeek"
    ALIGNED_WEEK_OF_MONTH = "AlignedWeekOfMonth"
    DAY_OF_MONTH = "DayOfMonth"
    DAY_OF_YEAR = "DayOfYear"
    EPOCH_DAY = "EpochDay"
    ALIGNED_WEEK_OF_YEAR = "AlignedWeekOfYear"
    MONTH_OF_YEAR = "MonthOfYear"
    PROLEPTIC_MONTH = "ProlepticMonth"
    YEAR_OF_ERA = "YearOfEra"
    YEAR = "Year"
    ERA = "Era"

    @property
    def label(self) -> str:
        return self.value

    def range(self) -> ValueRange:
        """The ISO range of this field."""
        return _ISO_RANGES[self]

    def __str__(self) -> str:
        return self.value


_ISO_RANGES: Dict[Field, ValueRange] = {
    Field.DAY_OF_WEEK: ValueRange.of(1, 7),
    Field.ALIGNED_WEEK_OF_MONTH: ValueRange.of(1, 4, 5),
    Field.DAY_OF_MONTH: ValueRange.of(1, 28, 31),
    Field.DAY_OF_YEAR: ValueRange.of(1, 365, 366),
    Field.EPOCH_DAY: ValueRange.of(-365249999634, 365249999634),
    Field.ALIGNED_WEEK_OF_YEAR: ValueRange.of(1, 53),
    Field.MONTH_OF_YEAR: ValueRange.of(1, 12),
    Field.PROLEPTIC_MONTH: ValueRange.of(YEAR_MIN * 12, YEAR_MAX * 12 + 11),
    Field.YEAR_OF_ERA: ValueRange.of(1, YEAR_MAX, YEAR_MAX + 1),
    Field.YEAR: ValueRange.of(YEAR_MIN, YEAR_MAX),
    Field.ERA: ValueRange.of(0, 1),
}
