"""
eracal.engines.date
-------------------
A calendar date: one universal day bound to the chronology that labels it.

Nothing but the ISO day and the chronology reference is stored; every
calendar field is derived on demand by the chronology.
"""

from __future__ import annotations

from datetime import date
from functools import total_ordering
from typing import TYPE_CHECKING

from ..core.time import IsoDate
from ..core.types import Field, ValueRange

if TYPE_CHECKING:
    from .chronology import OffsetChronology
    from .era import Era


@total_ordering
class CalendarDate:
    __slots__ = ("_chrono", "_iso")

    def __init__(self, chronology: "OffsetChronology", iso: IsoDate):
        object.__setattr__(self, "_chrono", chronology)
        object.__setattr__(self, "_iso", iso)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def chronology(self) -> "OffsetChronology":
        return self._chrono

    @property
    def iso(self) -> IsoDate:
        return self._iso

    @property
    def jdn(self) -> int:
        return self._iso.jdn

    @property
    def epoch_day(self) -> int:
        return self._iso.epoch_day

    # -----------------------------------------------------------------
    # Calendar views
    # -----------------------------------------------------------------
    @property
    def proleptic_year(self) -> int:
        return self._chrono.proleptic_year_of(self._iso)

    @property
    def era(self) -> "Era":
        return self._chrono.era_and_year_of_era(self._iso)[0]

    @property
    def year_of_era(self) -> int:
        return self._chrono.era_and_year_of_era(self._iso)[1]

    @property
    def month(self) -> int:
        return self._iso.month

    @property
    def day(self) -> int:
        return self._iso.day

    @property
    def day_of_year(self) -> int:
        return self._iso.day_of_year

    @property
    def day_of_week(self) -> int:
        return self._iso.day_of_week

    def is_leap_year(self) -> bool:
        return self._chrono.is_leap_year(self.proleptic_year)

    def length_of_month(self) -> int:
        return self._iso.length_of_month()

    def length_of_year(self) -> int:
        return self._iso.length_of_year()

    def get(self, field: Field) -> int:
        if field is Field.ERA:
            return self.era.value
        if field is Field.YEAR_OF_ERA:
            return self.year_of_era
        if field is Field.YEAR:
            return self.proleptic_year
        if field is Field.MONTH_OF_YEAR:
            return self.month
        if field is Field.DAY_OF_MONTH:
            return self.day
        if field is Field.DAY_OF_YEAR:
            return self.day_of_year
        if field is Field.DAY_OF_WEEK:
            return self.day_of_week
        if field is Field.EPOCH_DAY:
            return self.epoch_day
        if field is Field.PROLEPTIC_MONTH:
            return self.proleptic_year * 12 + self.month - 1
        if field is Field.ALIGNED_WEEK_OF_MONTH:
            return (self.day - 1) // 7 + 1
        if field is Field.ALIGNED_WEEK_OF_YEAR:
            return (self.day_of_year - 1) // 7 + 1
        raise TypeError(f"Unsupported field: {field!r}")

    def range(self, field: Field) -> ValueRange:
        """Valid values of ``field`` in the context of this date."""
        if field is Field.DAY_OF_MONTH:
            return ValueRange.of(1, self.length_of_month())
        if field is Field.DAY_OF_YEAR:
            return ValueRange.of(1, self.length_of_year())
        if field is Field.ALIGNED_WEEK_OF_MONTH:
            return ValueRange.of(1, 4 if self.length_of_month() == 28 else 5)
        if field is Field.YEAR_OF_ERA:
            return self._chrono.year_of_era_range(self.era)
        if field is Field.PROLEPTIC_MONTH:
            # Counted on this calendar's proleptic years, see get().
            years = self._chrono.range(Field.YEAR)
            return ValueRange.of(years.minimum * 12, years.maximum * 12 + 11)
        return self._chrono.range(field)

    # -----------------------------------------------------------------
    # Conversion
    # -----------------------------------------------------------------
    def to_iso(self) -> IsoDate:
        return self._iso

    def to_date(self) -> date:
        return self._iso.to_date()

    # -----------------------------------------------------------------
    # Identity by day count
    # -----------------------------------------------------------------
    @staticmethod
    def _jdn_of(other) -> int | None:
        if isinstance(other, CalendarDate):
            return other._iso.jdn
        if isinstance(other, IsoDate):
            return other.jdn
        return None

    def __eq__(self, other) -> bool:
        j = self._jdn_of(other)
        if j is None:
            return NotImplemented
        return self._iso.jdn == j

    def __lt__(self, other) -> bool:
        j = self._jdn_of(other)
        if j is None:
            return NotImplemented
        return self._iso.jdn < j

    def __hash__(self) -> int:
        return hash(self._iso)

    def __reduce__(self):
        return (_restore_date, (self._chrono.id, self._iso.jdn))

    def __repr__(self) -> str:
        return f"CalendarDate({self._chrono.id!r}, {self})"

    def __str__(self) -> str:
        era, yoe = self._chrono.era_and_year_of_era(self._iso)
        return f"{self._chrono.id} {era.name} {yoe}-{self.month:02d}-{self.day:02d}"


def _restore_date(chronology_id: str, jdn: int) -> CalendarDate:
    from ..api import chronology_by_id
    return chronology_by_id(chronology_id).date_from_jdn(jdn)
