# tests/test_registry.py

import threading

import pytest

from eracal.core.engine import ChronologyRegistry
from eracal.core.errors import DuplicateChronologyError, NotFoundError
from eracal.engines.factory import make_chronology
from eracal.engines.specs import ChronologySpec


def _variant(i: int):
    spec = ChronologySpec.like("ThaiBuddhist").tweak(id=f"Plugin{i}", calendar_type=f"plugin-{i}")
    return make_chronology(spec)


def test_register_and_lookup(registry, thai):
    assert registry.register(thai) is thai
    assert registry.get("ThaiBuddhist") is thai
    assert registry.get_by_calendar_type("buddhist") is thai
    assert registry.of("ThaiBuddhist") is thai
    assert registry.of("buddhist") is thai
    assert "ThaiBuddhist" in registry
    assert len(registry) == 1
    assert registry.list() == (thai,)


def test_lookup_missing(registry, thai):
    registry.register(thai)
    with pytest.raises(NotFoundError) as exc:
        registry.get("Hijrah")
    assert exc.value.key == "Hijrah"
    assert "ThaiBuddhist" in str(exc.value)
    # Keys are not interchangeable between the two tables.
    with pytest.raises(NotFoundError):
        registry.get_by_calendar_type("ThaiBuddhist")
    with pytest.raises(KeyError):
        registry.of("islamic")


def test_first_registration_wins(registry, thai):
    registry.register(thai)
    again = make_chronology(ChronologySpec.like("ThaiBuddhist"))
    with pytest.raises(DuplicateChronologyError) as exc:
        registry.register(again)
    assert exc.value.key == "ThaiBuddhist"
    assert registry.get("ThaiBuddhist") is thai


def test_duplicate_calendar_type_leaves_no_partial_entry(registry, thai):
    registry.register(thai)
    clash = make_chronology(ChronologySpec.like("ThaiBuddhist").tweak(id="Other"))
    with pytest.raises(DuplicateChronologyError) as exc:
        registry.register(clash)
    assert exc.value.key == "buddhist"
    assert "Other" not in registry
    assert registry.ids() == ("ThaiBuddhist",)


def test_list_is_a_snapshot(registry, thai, minguo):
    registry.register(thai)
    snap = registry.list()
    registry.register(minguo)
    assert snap == (thai,)
    assert registry.list() == (thai, minguo)


def test_concurrent_register_same_id(registry):
    """N racing registrations of one id: exactly one survives, N-1 are rejected."""
    N = 16
    chronos = [make_chronology(ChronologySpec.like("ThaiBuddhist")) for _ in range(N)]
    barrier = threading.Barrier(N)
    outcomes = []
    lock = threading.Lock()

    def worker(c):
        barrier.wait()
        try:
            registry.register(c)
            result = ("ok", c)
        except DuplicateChronologyError as e:
            result = ("dup", e.key)
        with lock:
            outcomes.append(result)

    threads = [threading.Thread(target=worker, args=(c,)) for c in chronos]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    winners = [c for tag, c in outcomes if tag == "ok"]
    assert len(winners) == 1
    assert sum(1 for tag, _ in outcomes if tag == "dup") == N - 1
    assert registry.get("ThaiBuddhist") is winners[0]
    assert registry.get_by_calendar_type("buddhist") is winners[0]
    assert registry.list() == (winners[0],)


def test_readers_never_see_partial_entries(registry):
    """Concurrent readers see each registration under both keys, and never a duplicate."""
    N = 40
    chronos = [_variant(i) for i in range(N)]
    stop = threading.Event()
    problems = []

    def reader():
        while not stop.is_set():
            seen = registry.list()
            ids = [c.id for c in seen]
            if len(ids) != len(set(ids)):
                problems.append(("duplicate", ids))
            for c in seen:
                if registry.get(c.id) is not c or registry.get_by_calendar_type(c.calendar_type) is not c:
                    problems.append(("partial", c.id))

    def writer(batch):
        for c in batch:
            registry.register(c)
            # Once register() returns, the entry must be listed.
            if c not in registry.list():
                problems.append(("missing", c.id))

    readers = [threading.Thread(target=reader) for _ in range(4)]
    writers = [threading.Thread(target=writer, args=(chronos[i::4],)) for i in range(4)]
    for t in readers + writers:
        t.start()
    for t in writers:
        t.join()
    stop.set()
    for t in readers:
        t.join()

    assert problems == []
    assert sorted(registry.ids()) == sorted(c.id for c in chronos)
    assert len(registry) == N


def test_constructor_registers_in_order(thai, minguo, iso):
    reg = ChronologyRegistry([iso, thai, minguo])
    assert reg.ids() == ("ISO", "ThaiBuddhist", "Minguo")
    assert repr(reg) == "ChronologyRegistry(['ISO', 'ThaiBuddhist', 'Minguo'])"
