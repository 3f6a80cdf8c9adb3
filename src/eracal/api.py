from __future__ import annotations

from datetime import date as _date
from typing import Any, Dict, List, Optional, Union

from .core.engine import ChronologyRegistry
from .core.locale import LocaleLike, calendar_type_of
from .core.time import IsoDate, TodaySource
from .core.types import TextStyle
from .engines.chronology import OffsetChronology
from .engines.date import CalendarDate
from .engines.factory import make_chronology as _make_chronology
from .engines.specs import ChronologySpec

DEFAULT_CALENDAR = "ISO"
_registry: Optional[ChronologyRegistry] = None


def set_registry(reg: ChronologyRegistry) -> None:
    global _registry
    _registry = reg


def get_registry() -> ChronologyRegistry:
    return _reg()


def _reg() -> ChronologyRegistry:
    if _registry is None:
        raise RuntimeError("Chronology registry not initialized")
    return _registry


def _chrono(calendar: Union[str, OffsetChronology]) -> OffsetChronology:
    if isinstance(calendar, str):
        return _reg().of(calendar)
    return calendar


# ============================================================
# Lookup and registration
# ============================================================

def list_chronologies() -> List[str]:
    return list(_reg().ids())


def chronology(id_or_type: str) -> OffsetChronology:
    """By id ('ThaiBuddhist') or, failing that, by calendar type ('buddhist')."""
    return _reg().of(id_or_type)


def chronology_by_id(id: str) -> OffsetChronology:
    return _reg().get(id)


def chronology_by_calendar_type(calendar_type: str) -> OffsetChronology:
    return _reg().get_by_calendar_type(calendar_type)


def chronology_for_locale(locale: LocaleLike) -> OffsetChronology:
    """Chronology named by the locale's 'ca' extension (e.g. 'th-TH-u-ca-buddhist'); ISO otherwise."""
    ctype = calendar_type_of(locale)
    if ctype is None or ctype in ("iso", "iso8601", "gregory"):
        return _reg().get(DEFAULT_CALENDAR)
    return _reg().get_by_calendar_type(ctype)


def chronology_info(calendar: str) -> Dict[str, Any]:
    return _chrono(calendar).info()


def make_chronology(spec: ChronologySpec) -> OffsetChronology:
    return _make_chronology(spec)


def register_chronology(chrono: OffsetChronology) -> OffsetChronology:
    return _reg().register(chrono)


# ============================================================
# Dates
# ============================================================

def date(calendar: Union[str, OffsetChronology], *fields: Any) -> CalendarDate:
    """
    date(cal, proleptic_year, month, day)
    date(cal, era, year_of_era, month, day)
    """
    c = _chrono(calendar)
    if len(fields) == 3:
        return c.date(*fields)
    if len(fields) == 4:
        return c.date_of_era(*fields)
    raise TypeError(f"date() takes 3 or 4 date fields ({len(fields)} given)")


def date_year_day(calendar: Union[str, OffsetChronology], *fields: Any) -> CalendarDate:
    """
    date_year_day(cal, proleptic_year, day_of_year)
    date_year_day(cal, era, year_of_era, day_of_year)
    """
    c = _chrono(calendar)
    if len(fields) == 2:
        return c.date_year_day(*fields)
    if len(fields) == 3:
        return c.date_year_day_of_era(*fields)
    raise TypeError(f"date_year_day() takes 2 or 3 date fields ({len(fields)} given)")


def date_now(calendar: Union[str, OffsetChronology] = DEFAULT_CALENDAR, source: TodaySource = None) -> CalendarDate:
    return _chrono(calendar).date_now(source)


def to_calendar(d: Union[_date, IsoDate, CalendarDate], *, calendar: Union[str, OffsetChronology] = "ThaiBuddhist") -> CalendarDate:
    return _chrono(calendar).date_from(d)


def to_iso(d: CalendarDate) -> IsoDate:
    return d.to_iso()


def to_gregorian(d: CalendarDate) -> _date:
    """As ``datetime.date``; raises ValueError outside years 1..9999."""
    return d.to_date()


def era_names(
    calendar: Union[str, OffsetChronology],
    *,
    locale: LocaleLike = None,
    style: Union[TextStyle, str] = TextStyle.FULL,
) -> Dict[int, str]:
    return {e.value: e.display_name(style, locale) for e in _chrono(calendar).eras()}
