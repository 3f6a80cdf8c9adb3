"""
eracal.engines.chronology
-------------------------
A calendar defined as ISO plus a constant year offset K, with an era split at
proleptic year 1. One class serves every such calendar; each instance is
configured by an ``OffsetCalendarSpec``.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, Tuple

from ..core.errors import InvalidEraError, TypeMismatchError
from ..core.time import IsoDate, TodaySource, resolve_today
from ..core.types import Field, ValueRange
from . import offset as off
from .date import CalendarDate
from .era import Era, build_eras

_ISO_YEAR = Field.YEAR.range()


class OffsetChronology:
    """
    Immutable and thread-safe. Everything below is derived from the spec once,
    in the constructor.
    """

    def __init__(self, spec: Any):
        self._spec = spec
        self._id = spec.id
        self._type = spec.calendar_type
        self._offset = spec.offset
        self._leap_rule = spec.leap_rule
        self._eras: Tuple[Era, Era] = build_eras(spec.id, spec.era_keys, spec.era_names)

        self._year_range = off.year_range(_ISO_YEAR, self._offset)
        self._yoe_range = off.year_of_era_range(_ISO_YEAR, self._offset)
        before_max, current_max = off.max_year_of_era(_ISO_YEAR, self._offset)
        self._era_yoe_ranges = (ValueRange.of(1, before_max), ValueRange.of(1, current_max))

    @property
    def id(self) -> str:
        return self._id

    @property
    def calendar_type(self) -> str:
        return self._type

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def spec(self) -> Any:
        return self._spec

    # ---------------------------------------------------------
    # Era handling
    # ---------------------------------------------------------
    def _own_era(self, era: Any) -> Era:
        if not isinstance(era, Era) or era.chronology_id != self._id or era.value not in (0, 1):
            raise TypeMismatchError(self._id, era)
        return self._eras[era.value]

    def proleptic_year(self, era: Era, year_of_era: int) -> int:
        e = self._own_era(era)
        return off.proleptic_year(e.value, year_of_era)

    def era_of(self, value: int) -> Era:
        if value not in (0, 1):
            raise InvalidEraError(value)
        return self._eras[value]

    def eras(self) -> Tuple[Era, ...]:
        return self._eras

    # ---------------------------------------------------------
    # Construction
    # ---------------------------------------------------------
    def _iso_year(self, proleptic_year: int) -> int:
        self._year_range.checked(proleptic_year, Field.YEAR)
        return off.to_iso_year(proleptic_year, self._offset)

    def _from_era(self, era: Era, year_of_era: int) -> int:
        e = self._own_era(era)
        self._era_yoe_ranges[e.value].checked(year_of_era, Field.YEAR_OF_ERA)
        return off.proleptic_year(e.value, year_of_era)

    def date_of_era(self, era: Era, year_of_era: int, month: int, day: int) -> CalendarDate:
        return self.date(self._from_era(era, year_of_era), month, day)

    def date(self, proleptic_year: int, month: int, day: int) -> CalendarDate:
        return CalendarDate(self, IsoDate.of(self._iso_year(proleptic_year), month, day))

    def date_year_day_of_era(self, era: Era, year_of_era: int, day_of_year: int) -> CalendarDate:
        return self.date_year_day(self._from_era(era, year_of_era), day_of_year)

    def date_year_day(self, proleptic_year: int, day_of_year: int) -> CalendarDate:
        return CalendarDate(self, IsoDate.of_year_day(self._iso_year(proleptic_year), day_of_year))

    def date_from(self, temporal: Any) -> CalendarDate:
        if isinstance(temporal, CalendarDate):
            if temporal.chronology is self:
                return temporal
            return CalendarDate(self, temporal.iso)
        if isinstance(temporal, IsoDate):
            return CalendarDate(self, temporal)
        if isinstance(temporal, date):
            return CalendarDate(self, IsoDate.from_date(temporal))
        raise TypeError(f"Cannot obtain a {self._id} date from {type(temporal).__name__}")

    def date_from_jdn(self, jdn: int) -> CalendarDate:
        return CalendarDate(self, IsoDate.from_jdn(jdn))

    def date_from_epoch_day(self, epoch_day: int) -> CalendarDate:
        return CalendarDate(self, IsoDate.from_epoch_day(epoch_day))

    def date_now(self, source: TodaySource = None) -> CalendarDate:
        return self.date_from(resolve_today(source))

    # ---------------------------------------------------------
    # Rules and ranges
    # ---------------------------------------------------------
    def is_leap_year(self, proleptic_year: int) -> bool:
        return off.is_leap_year(proleptic_year, self._offset, self._leap_rule)

    def range(self, field: Field) -> ValueRange:
        if field is Field.YEAR:
            return self._year_range
        if field is Field.YEAR_OF_ERA:
            return self._yoe_range
        return field.range()

    def year_of_era_range(self, era: Era) -> ValueRange:
        return self._era_yoe_ranges[self._own_era(era).value]

    # ---------------------------------------------------------
    # Views for CalendarDate
    # ---------------------------------------------------------
    def proleptic_year_of(self, iso: IsoDate) -> int:
        return off.from_iso_year(iso.year, self._offset)

    def era_and_year_of_era(self, iso: IsoDate) -> Tuple[Era, int]:
        era_value, yoe = off.era_and_year_of_era(self.proleptic_year_of(iso))
        return self._eras[era_value], yoe

    # ---------------------------------------------------------
    def info(self) -> Dict[str, Any]:
        return {
            "id": self._id,
            "calendar_type": self._type,
            "offset": self._offset,
            "eras": [e.name for e in self._eras],
            "description": self._spec.description,
        }

    def __reduce__(self):
        return (_restore_chronology, (self._id,))

    def __repr__(self) -> str:
        return f"OffsetChronology({self._id!r})"

    def __str__(self) -> str:
        return self._id


def _restore_chronology(chronology_id: str) -> OffsetChronology:
    from ..api import chronology_by_id
    return chronology_by_id(chronology_id)
