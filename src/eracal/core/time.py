"""
eracal.core.time
----------------
The universal day count and the clock collaborator.

Every chronology is a view over one proleptic ISO (Gregorian) day, stored as a
Julian Day Number. ``datetime.date`` only covers years 1..9999, so ``IsoDate``
carries the arithmetic itself and converts to ``datetime.date`` on request.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, tzinfo
from typing import Optional, Protocol, Tuple, Union

from .types import Field, ValueRange

# JDN of 1970-01-01
JDN_UNIX_EPOCH = 2440588

_DAYS_BEFORE_MONTH = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def is_leap(year: int) -> bool:
    """Proleptic Gregorian leap-year rule."""
    return (year & 3) == 0 and (year % 100 != 0 or year % 400 == 0)


def month_length(year: int, month: int) -> int:
    if month == 2:
        return 29 if is_leap(year) else 28
    if month in (4, 6, 9, 11):
        return 30
    return 31


def jdn_from_ymd(y: int, m: int, d: int) -> int:
    """Julian Day Number of a proleptic Gregorian date. Exact for any integer year."""
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    return d + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def ymd_from_jdn(jdn: int) -> Tuple[int, int, int]:
    """Inverse of jdn_from_ymd, counted in 400-year cycles from 0000-03-01."""
    z = jdn - 1721120
    cycle = z // 146097
    doc = z - cycle * 146097
    yoc = (doc - doc // 1460 + doc // 36524 - doc // 146096) // 365
    doy = doc - (365 * yoc + yoc // 4 - yoc // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    year = yoc + cycle * 400 + (1 if month <= 2 else 0)
    return year, month, day


def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    return jdn_from_ymd(d.year, d.month, d.day)


def from_jdn(jdn: int) -> date:
    """Convert a JDN back to ``datetime.date`` (years 1..9999 only)."""
    return date(*ymd_from_jdn(jdn))


_YEAR = Field.YEAR.range()
_MONTH = Field.MONTH_OF_YEAR.range()
JDN_MIN = jdn_from_ymd(_YEAR.minimum, 1, 1)
JDN_MAX = jdn_from_ymd(_YEAR.maximum, 12, 31)
_JDN_RANGE = ValueRange.of(JDN_MIN, JDN_MAX)


@dataclass(frozen=True, order=True)
class IsoDate:
    """A proleptic ISO date, identified by its Julian Day Number."""
    jdn: int

    @classmethod
    def of(cls, year: int, month: int, day: int) -> "IsoDate":
        _YEAR.checked(year, Field.YEAR)
        _MONTH.checked(month, Field.MONTH_OF_YEAR)
        ValueRange.of(1, month_length(year, month)).checked(day, Field.DAY_OF_MONTH)
        return cls(jdn_from_ymd(year, month, day))

    @classmethod
    def of_year_day(cls, year: int, day_of_year: int) -> "IsoDate":
        _YEAR.checked(year, Field.YEAR)
        ValueRange.of(1, 366 if is_leap(year) else 365).checked(day_of_year, Field.DAY_OF_YEAR)
        return cls(jdn_from_ymd(year, 1, 1) + day_of_year - 1)

    @classmethod
    def from_jdn(cls, jdn: int) -> "IsoDate":
        return cls(_JDN_RANGE.checked(jdn, "JulianDay"))

    @classmethod
    def from_epoch_day(cls, epoch_day: int) -> "IsoDate":
        Field.EPOCH_DAY.range().checked(epoch_day, Field.EPOCH_DAY)
        return cls.from_jdn(epoch_day + JDN_UNIX_EPOCH)

    @classmethod
    def from_date(cls, d: date) -> "IsoDate":
        if isinstance(d, datetime):
            d = d.date()
        return cls(to_jdn(d))

    # -----------------------------------------------------------------
    # Derived fields
    # -----------------------------------------------------------------
    def ymd(self) -> Tuple[int, int, int]:
        return ymd_from_jdn(self.jdn)

    @property
    def year(self) -> int:
        return self.ymd()[0]

    @property
    def month(self) -> int:
        return self.ymd()[1]

    @property
    def day(self) -> int:
        return self.ymd()[2]

    @property
    def day_of_year(self) -> int:
        y, m, d = self.ymd()
        leap_shift = 1 if (m > 2 and is_leap(y)) else 0
        return _DAYS_BEFORE_MONTH[m - 1] + leap_shift + d

    @property
    def day_of_week(self) -> int:
        """ISO day of week, 1 = Monday .. 7 = Sunday."""
        return self.jdn % 7 + 1

    @property
    def epoch_day(self) -> int:
        return self.jdn - JDN_UNIX_EPOCH

    def is_leap_year(self) -> bool:
        return is_leap(self.year)

    def length_of_month(self) -> int:
        y, m, _ = self.ymd()
        return month_length(y, m)

    def length_of_year(self) -> int:
        return 366 if self.is_leap_year() else 365

    def to_date(self) -> date:
        return date(*self.ymd())

    def __str__(self) -> str:
        y, m, d = self.ymd()
        if abs(y) < 10000:
            ys = f"{y:04d}" if y >= 0 else f"-{-y:04d}"
        else:
            ys = f"{y:+d}"
        return f"{ys}-{m:02d}-{d:02d}"


# ============================================================
# Clock collaborator
# ============================================================

class Clock(Protocol):
    def now(self) -> datetime: ...


@dataclass(frozen=True)
class SystemClock:
    tz: Optional[tzinfo] = None

    def now(self) -> datetime:
        if self.tz is None:
            return datetime.now().astimezone()
        return datetime.now(self.tz)


@dataclass(frozen=True)
class FixedClock:
    """Always answers the same instant. Useful for tests."""
    instant: datetime

    def now(self) -> datetime:
        return self.instant


TodaySource = Union[None, str, tzinfo, Clock]


def resolve_today(source: TodaySource = None) -> IsoDate:
    """Current ISO date from a clock, a time zone (object or IANA name), or the system zone."""
    if source is None:
        clock: Clock = SystemClock()
    elif isinstance(source, str):
        from zoneinfo import ZoneInfo
        clock = SystemClock(ZoneInfo(source))
    elif isinstance(source, tzinfo):
        clock = SystemClock(source)
    elif hasattr(source, "now"):
        clock = source
    else:
        raise TypeError(f"Expected a Clock, tzinfo or zone name, got {type(source).__name__}")
    return IsoDate.from_date(clock.now().date())
