"""
eracal.engines.specs
--------------------
Pure data describing the built-in calendar systems.

Each calendar is ISO plus a constant year offset K:
    proleptic_year = iso_year + K
and two eras, 0 (before the epoch, counting backward) and 1 (current).
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Dict, Literal, Mapping, Optional, Tuple

from .era import EraNameTable
from .offset import LeapRule


@dataclass(frozen=True)
class OffsetCalendarSpec:
    """Pure data payload for constructing an offset chronology."""
    id: str
    calendar_type: str
    offset: int
    era_keys: Tuple[str, str]   # (era 0, era 1)
    era_names: EraNameTable
    # Predicate reported by is_leap_year only; month and year lengths stay ISO.
    leap_rule: Optional[LeapRule] = None  # None -> ISO rule at proleptic_year - offset
    description: str = ""


@dataclass(frozen=True)
class ChronologySpec:
    """Top-level wrapper for all chronology specifications."""
    kind: Literal["offset"]
    payload: OffsetCalendarSpec

    @property
    def id(self) -> str:
        return self.payload.id

    @staticmethod
    def like(name: str) -> "ChronologySpec":
        if name not in ALL_SPECS:
            raise KeyError(f"Unknown base spec '{name}'. Available: {sorted(ALL_SPECS)}")
        return ALL_SPECS[name]

    def tweak(self, **kwargs) -> "ChronologySpec":
        return replace(self, payload=replace(self.payload, **kwargs))


def _names(**styles: Mapping[str, Tuple[str, str]]) -> EraNameTable:
    return MappingProxyType({st: MappingProxyType(dict(by_lang)) for st, by_lang in styles.items()})


# ============================================================
# ISO
# ============================================================
ISO_SPEC = ChronologySpec(
    kind="offset",
    payload=OffsetCalendarSpec(
        id="ISO",
        calendar_type="iso8601",
        offset=0,
        era_keys=("BCE", "CE"),
        era_names=_names(
            narrow={"en": ("B", "A")},
            short={"en": ("BC", "AD")},
            full={"en": ("Before Christ", "Anno Domini")},
        ),
        description="Proleptic Gregorian calendar as defined by ISO-8601.",
    ),
)

# ============================================================
# Thai Buddhist: 2484-01-01 (BE) is 1941-01-01 (ISO)
# ============================================================
THAI_BUDDHIST_SPEC = ChronologySpec(
    kind="offset",
    payload=OffsetCalendarSpec(
        id="ThaiBuddhist",
        calendar_type="buddhist",
        offset=543,
        era_keys=("BEFORE_BE", "BE"),
        era_names=_names(
            narrow={"en": ("BB", "BE"), "th": ("BB", "BE")},
            short={"en": ("B.B.", "B.E."), "th": ("ก่อน พ.ศ.", "พ.ศ.")},
            full={"en": ("Before Buddhist", "Buddhist Era"), "th": ("ก่อนพุทธศักราช", "พุทธศักราช")},
        ),
        description="Thai solar calendar: ISO months and leap years, years counted from 543 BCE.",
    ),
)

# ============================================================
# Minguo (Republic of China): 0001-01-01 (ROC) is 1912-01-01 (ISO)
# ============================================================
MINGUO_SPEC = ChronologySpec(
    kind="offset",
    payload=OffsetCalendarSpec(
        id="Minguo",
        calendar_type="roc",
        offset=-1911,
        era_keys=("BEFORE_ROC", "ROC"),
        era_names=_names(
            narrow={"en": ("B.R.O.C.", "R.O.C."), "zh": ("民國前", "民國")},
            short={"en": ("B.R.O.C.", "R.O.C."), "zh": ("民國前", "民國")},
            full={"en": ("Before R.O.C.", "Minguo"), "zh": ("民國前", "民國")},
        ),
        description="Calendar of the Republic of China: ISO months and leap years, years counted from 1912.",
    ),
)

ALL_SPECS: Dict[str, ChronologySpec] = {
    s.id: s for s in (ISO_SPEC, THAI_BUDDHIST_SPEC, MINGUO_SPEC)
}
