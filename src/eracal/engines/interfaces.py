"""
eracal.engines.interfaces
-------------------------
The contract every calendar system implements.

A chronology is stateless beyond its fixed era and offset metadata. Dates it
produces are views over a universal ISO day (see ``eracal.core.time``); the
chronology decides how that day is labelled.
"""

from __future__ import annotations

from typing import Protocol, Tuple, runtime_checkable

from ..core.time import IsoDate, TodaySource
from ..core.types import Field, ValueRange
from .date import CalendarDate
from .era import Era


@runtime_checkable
class ChronologyProtocol(Protocol):
    @property
    def id(self) -> str:
        """Stable identifier, e.g. 'ThaiBuddhist'."""
        ...

    @property
    def calendar_type(self) -> str:
        """LDML calendar type, e.g. 'buddhist'."""
        ...

    # ---------------------------------------------------------
    # 1. Construction
    # ---------------------------------------------------------
    def date_of_era(self, era: Era, year_of_era: int, month: int, day: int) -> CalendarDate:
        """Era, year-of-era, month and day. Rejects eras of other chronologies."""
        ...

    def date(self, proleptic_year: int, month: int, day: int) -> CalendarDate:
        ...

    def date_year_day_of_era(self, era: Era, year_of_era: int, day_of_year: int) -> CalendarDate:
        ...

    def date_year_day(self, proleptic_year: int, day_of_year: int) -> CalendarDate:
        ...

    def date_from(self, temporal: object) -> CalendarDate:
        """
        Wrap an already-resolved universal date (CalendarDate, IsoDate or
        datetime.date). Returns the input unchanged if it is already ours.
        """
        ...

    def date_now(self, source: TodaySource = None) -> CalendarDate:
        ...

    # ---------------------------------------------------------
    # 2. Queries
    # ---------------------------------------------------------
    def is_leap_year(self, proleptic_year: int) -> bool:
        """Not validated; only meaningful inside the supported year range."""
        ...

    def proleptic_year(self, era: Era, year_of_era: int) -> int:
        ...

    def era_of(self, value: int) -> Era:
        ...

    def eras(self) -> Tuple[Era, ...]:
        """Eras in ascending order of value."""
        ...

    def range(self, field: Field) -> ValueRange:
        ...

    # ---------------------------------------------------------
    # 3. Views used by CalendarDate
    # ---------------------------------------------------------
    def proleptic_year_of(self, iso: IsoDate) -> int:
        ...

    def era_and_year_of_era(self, iso: IsoDate) -> Tuple[Era, int]:
        ...

    def year_of_era_range(self, era: Era) -> ValueRange:
        ...
