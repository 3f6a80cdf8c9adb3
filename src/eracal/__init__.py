"""eracal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Initialize registry on import
from . import _bootstrap  # noqa: E402

_bootstrap.install()

from .api import (  # noqa: E402
    list_chronologies,
    chronology,
    chronology_by_id,
    chronology_by_calendar_type,
    chronology_for_locale,
    chronology_info,
    make_chronology,
    register_chronology,
    date,
    date_year_day,
    date_now,
    to_calendar,
    to_iso,
    to_gregorian,
    era_names,
)
from .core.errors import (  # noqa: E402
    EracalError,
    RangeError,
    TypeMismatchError,
    InvalidEraError,
    DuplicateChronologyError,
    NotFoundError,
)
from .core.time import IsoDate, FixedClock, SystemClock  # noqa: E402
from .core.types import Field, TextStyle, ValueRange  # noqa: E402
from .engines.date import CalendarDate  # noqa: E402
from .engines.era import Era  # noqa: E402
from .engines.specs import ChronologySpec, OffsetCalendarSpec  # noqa: E402

__all__ = [
    "list_chronologies",
    "chronology",
    "chronology_by_id",
    "chronology_by_calendar_type",
    "chronology_for_locale",
    "chronology_info",
    "make_chronology",
    "register_chronology",
    "date",
    "date_year_day",
    "date_now",
    "to_calendar",
    "to_iso",
    "to_gregorian",
    "era_names",
    "EracalError",
    "RangeError",
    "TypeMismatchError",
    "InvalidEraError",
    "DuplicateChronologyError",
    "NotFoundError",
    "IsoDate",
    "FixedClock",
    "SystemClock",
    "Field",
    "TextStyle",
    "ValueRange",
    "CalendarDate",
    "Era",
    "ChronologySpec",
    "OffsetCalendarSpec",
]
