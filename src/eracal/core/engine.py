from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping, Protocol, Tuple

from .errors import DuplicateChronologyError, NotFoundError

logger = logging.getLogger(__name__)


class Chronology(Protocol):
    """What the registry needs from a chronology: its two lookup keys."""
    @property
    def id(self) -> str: ...

    @property
    def calendar_type(self) -> str: ...


_EMPTY: Mapping[str, Chronology] = MappingProxyType({})


@dataclass(frozen=True)
class _Snapshot:
    by_id: Mapping[str, Chronology] = field(default_factory=lambda: _EMPTY)
    by_type: Mapping[str, Chronology] = field(default_factory=lambda: _EMPTY)
    ordered: Tuple[Chronology, ...] = ()


class ChronologyRegistry:
    """
    Process-wide directory of chronologies, keyed by id and by calendar type.

    Readers take no lock. They dereference ``self._snapshot`` once and work on
    that immutable value. Writers serialize on ``self._lock``, build a complete
    new snapshot and publish it with a single assignment, so both keys of a
    registration become visible together.
    """

    def __init__(self, chronologies: Iterable[Chronology] = ()):
        self._lock = threading.Lock()
        self._snapshot = _Snapshot()
        for c in chronologies:
            self.register(c)

    def register(self, chronology: Chronology) -> Chronology:
        cid, ctype = chronology.id, chronology.calendar_type
        with self._lock:
            snap = self._snapshot
            for key, table in ((cid, snap.by_id), (ctype, snap.by_type)):
                if key in table:
                    logger.debug("Rejected duplicate chronology key %r", key)
                    raise DuplicateChronologyError(key)
            by_id = dict(snap.by_id)
            by_id[cid] = chronology
            by_type = dict(snap.by_type)
            by_type[ctype] = chronology
            self._snapshot = _Snapshot(
                MappingProxyType(by_id),
                MappingProxyType(by_type),
                snap.ordered + (chronology,),
            )
        logger.debug("Registered chronology %s (calendar type %s)", cid, ctype)
        return chronology

    def get(self, id: str) -> Chronology:
        snap = self._snapshot
        try:
            return snap.by_id[id]
        except KeyError:
            raise NotFoundError(id, snap.by_id) from None

    def get_by_calendar_type(self, calendar_type: str) -> Chronology:
        snap = self._snapshot
        try:
            return snap.by_type[calendar_type]
        except KeyError:
            raise NotFoundError(calendar_type, snap.by_type) from None

    def of(self, id_or_type: str) -> Chronology:
        """Look up by id first, then by calendar type."""
        snap = self._snapshot
        found = snap.by_id.get(id_or_type) or snap.by_type.get(id_or_type)
        if found is None:
            raise NotFoundError(id_or_type, list(snap.by_id) + list(snap.by_type))
        return found

    def list(self) -> Tuple[Chronology, ...]:
        """All registered chronologies, in registration order."""
        return self._snapshot.ordered

    def ids(self) -> Tuple[str, ...]:
        return tuple(c.id for c in self._snapshot.ordered)

    def __contains__(self, id: object) -> bool:
        return id in self._snapshot.by_id

    def __len__(self) -> int:
        return len(self._snapshot.ordered)

    def __repr__(self) -> str:
        return f"ChronologyRegistry({list(self.ids())})"
