from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Union

from .core.engine import CalendarEngine, EngineRegistry
from .core.types import (
    Calendar,
    EthiopicDate,
    GregorianDate,
    Highlight,
    HighlightOnDate,
    ResolvedHighlight,
)

if TYPE_CHECKING:
    from .highlights.resolve import HighlightCatalog

DateT = Union[GregorianDate, EthiopicDate]

_registry: Optional[EngineRegistry] = None
_catalog: Optional["HighlightCatalog"] = None


def set_registry(reg: EngineRegistry) -> None:
    global _registry
    _registry = reg


def set_catalog(catalog: "HighlightCatalog") -> None:
    """Swap the reference tables used by the highlight functions below."""
    global _catalog
    _catalog = catalog


def _reg() -> EngineRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry


def _cat() -> "HighlightCatalog":
    if _catalog is None:
        raise RuntimeError("Highlight catalog not initialized")
    return _catalog


def get_catalog() -> "HighlightCatalog":
    return _cat()


def get_engine(calendar: str) -> CalendarEngine:
    return _reg().get(calendar)


def list_calendars() -> List[str]:
    return _reg().list()


def engine_info(calendar: str) -> Dict[str, Any]:
    return _reg().get(calendar).info()


def register_engine(name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
    _reg().register(name, engine, overwrite=overwrite)


# ============================================================
# Highlights (bound to the default catalog)
# ============================================================

def get_highlights_for_day(d: DateT, calendar: Calendar) -> List[Highlight]:
    return _cat().for_day(d, calendar)


def get_highlights_for_gregorian_day(d: GregorianDate) -> List[Highlight]:
    return _cat().for_gregorian_day(d)


def get_highlights_for_ethiopic_day(d: EthiopicDate) -> List[Highlight]:
    return _cat().for_ethiopic_day(d)


def get_highlights_for_week(start: DateT, calendar: Calendar, include_weekends: bool = True) -> List[HighlightOnDate]:
    return _cat().for_week(start, calendar, include_weekends=include_weekends)


def get_highlights_for_month(year: int, month: int, calendar: Calendar) -> List[Highlight]:
    return _cat().for_month(year, month, calendar)


def get_highlights_for_year(year: int, calendar: Calendar) -> List[Highlight]:
    return _cat().for_year(year, calendar)


def get_highlights_in_range(start: DateT, end: DateT, calendar: Calendar) -> List[HighlightOnDate]:
    return _cat().in_range(start, end, calendar)


def search_highlights(query: str, *, year: Optional[int] = None) -> List[Highlight]:
    return _cat().search(query, year=year)


def get_highlights_by_category(category: str, *, year: Optional[int] = None) -> List[Highlight]:
    return _cat().by_category(category, year=year)


def get_todays_highlights() -> List[HighlightOnDate]:
    return _cat().for_today()


def list_all_highlights(year: int, calendar: Calendar) -> List[ResolvedHighlight]:
    return _cat().list_all(year, calendar)
