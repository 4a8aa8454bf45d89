"""
ethiocal.engines.factory
------------------------
Transforms pure data specifications into live, executable Engine objects.
"""

from __future__ import annotations

from ..core.engine import CalendarEngine
from ..core.types import EngineSpec
from .ethiopic import EthiopicCalendar, EthiopicParams
from .gregorian import GregorianCalendar, GregorianParams


def make_engine(spec: EngineSpec) -> CalendarEngine:
    """The universal entry point."""
    if isinstance(spec.params, GregorianParams):
        return GregorianCalendar(spec.params)
    if isinstance(spec.params, EthiopicParams):
        return EthiopicCalendar(spec.params)
    raise TypeError(f"Unknown calendar params type: {type(spec.params)}")
