"""
eracal.engines.era
------------------
Eras and their localized names.

Name tables are frozen when a chronology is built; lookups read them without
any synchronization.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple, Union

from ..core.locale import FALLBACK_LANGUAGE, LocaleLike, language_of
from ..core.types import TextStyle

# style -> language -> (name of era 0, name of era 1)
EraNameTable = Mapping[str, Mapping[str, Tuple[str, str]]]

_NO_NAMES: Mapping[TextStyle, Mapping[str, str]] = MappingProxyType({})


@dataclass(frozen=True, order=True)
class Era:
    chronology_id: str
    value: int
    name: str
    names: Mapping[TextStyle, Mapping[str, str]] = field(
        default_factory=lambda: _NO_NAMES, compare=False, repr=False
    )

    def ordinal_value(self) -> int:
        return self.value

    def display_name(self, style: Union[TextStyle, str] = TextStyle.FULL, locale: LocaleLike = None) -> str:
        """
        Name of this era in the locale's language.
        Falls back to English, then to the ordinal value as a string.
        """
        table = self.names.get(TextStyle(style), {})
        lang = language_of(locale)
        name = table.get(lang)
        if name is None:
            name = table.get(FALLBACK_LANGUAGE)
        if name is None:
            return str(self.value)
        return name

    def __str__(self) -> str:
        return self.name

    def __reduce__(self):
        return (_restore_era, (self.chronology_id, self.value))


def _restore_era(chronology_id: str, value: int) -> Era:
    from ..api import chronology_by_id
    return chronology_by_id(chronology_id).era_of(value)


def build_eras(chronology_id: str, keys: Tuple[str, str], table: EraNameTable) -> Tuple[Era, Era]:
    """Build the (before, current) era pair of an offset calendar from its name table."""
    per_era = ({}, {})
    for style, by_lang in table.items():
        st = TextStyle(style)
        for lang, pair in by_lang.items():
            for value in (0, 1):
                per_era[value].setdefault(st, {})[lang] = pair[value]
    frozen = [
        MappingProxyType({st: MappingProxyType(names) for st, names in per_era[value].items()})
        for value in (0, 1)
    ]
    return (
        Era(chronology_id, 0, keys[0], frozen[0]),
        Era(chronology_id, 1, keys[1], frozen[1]),
    )
