"""
eracal.engines.factory
----------------------
Transforms pure data specifications into live chronology objects.
"""

from __future__ import annotations

from .chronology import OffsetChronology
from .specs import ChronologySpec, OffsetCalendarSpec


def build_offset_chronology(spec: OffsetCalendarSpec) -> OffsetChronology:
    if spec.era_keys[0] == spec.era_keys[1]:
        raise ValueError(f"Chronology '{spec.id}' needs two distinct era keys, got {spec.era_keys}")
    return OffsetChronology(spec)


def make_chronology(spec: ChronologySpec) -> OffsetChronology:
    """The universal entry point."""
    if spec.kind == "offset":
        return build_offset_chronology(spec.payload)
    raise NotImplementedError(f"Unknown chronology kind: {spec.kind!r}")
