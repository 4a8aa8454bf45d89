from __future__ import annotations

from typing import Dict

from ..core.types import EngineSpec
from .ethiopic import AMETE_MIHRET_DELTA, ETH_EPOCH, EthiopicParams
from .gregorian import GregorianParams


# ============================================================
# GREGORIAN
# ============================================================

GREGORIAN_SPEC = EngineSpec(
    kind="gregorian",
    params=GregorianParams(),
    meta={"description": "Proleptic Gregorian, Fliegel-Van Flandern JDN"},
)


# ============================================================
# ETHIOPIC
# ============================================================

ETHIOPIC_SPEC = EngineSpec(
    kind="ethiopic",
    params=EthiopicParams(epoch_jdn=ETH_EPOCH, era_delta=AMETE_MIHRET_DELTA),
    meta={"description": "Ethiopic (Amete Mihret numbering, Amete Alem = AM + 5500)"},
)


ALL_SPECS: Dict[str, EngineSpec] = {
    "gregorian": GREGORIAN_SPEC,
    "ethiopic": ETHIOPIC_SPEC,
}
