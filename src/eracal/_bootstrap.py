from __future__ import annotations

import logging

from eracal.core.engine import ChronologyRegistry
from eracal.engines.factory import make_chronology
from eracal.engines.specs import ALL_SPECS

logger = logging.getLogger(__name__)


def build_registry() -> ChronologyRegistry:
    reg = ChronologyRegistry()
    for spec in ALL_SPECS.values():
        reg.register(make_chronology(spec))
    logger.debug("Built chronology registry: %s", ", ".join(reg.ids()))
    return reg


def install() -> ChronologyRegistry:
    """Build the built-in chronologies and make them the process-wide registry."""
    from eracal.api import set_registry

    reg = build_registry()
    set_registry(reg)
    return reg
