import pytest

from eracal.core.engine import ChronologyRegistry
from eracal.engines.factory import make_chronology
from eracal.engines.specs import ChronologySpec


@pytest.fixture
def thai():
    return make_chronology(ChronologySpec.like("ThaiBuddhist"))


@pytest.fixture
def minguo():
    return make_chronology(ChronologySpec.like("Minguo"))


@pytest.fixture
def iso():
    return make_chronology(ChronologySpec.like("ISO"))


@pytest.fixture
def registry():
    """An empty registry, isolated from the process-wide one."""
    return ChronologyRegistry()
