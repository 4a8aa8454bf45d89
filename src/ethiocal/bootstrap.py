from __future__ import annotations
from ethiocal.core.engine import EngineRegistry
from ethiocal.engines.specs import ALL_SPECS
from ethiocal.engines.factory import make_engine
from ethiocal.highlights.data import CANONICAL_IDS, DYNAMIC_RULES, ETHIOPIAN_HIGHLIGHTS, GREGORIAN_HIGHLIGHTS
from ethiocal.highlights.resolve import HighlightCatalog


def build_registry() -> EngineRegistry:
    engines = {}
    for name, spec in ALL_SPECS.items():
        engines[name] = make_engine(spec)
    return EngineRegistry(engines)


def build_catalog() -> HighlightCatalog:
    return HighlightCatalog(
        ethiopic=ETHIOPIAN_HIGHLIGHTS,
        gregorian=GREGORIAN_HIGHLIGHTS,
        rules=DYNAMIC_RULES,
        canonical_ids=CANONICAL_IDS,
    )
