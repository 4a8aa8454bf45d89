from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Protocol, Union

from .errors import UnknownCalendarError
from .types import EthiopicDate, GregorianDate

DateT = Union[GregorianDate, EthiopicDate]


class CalendarEngine(Protocol):
    """Calendar rules bound to the JDN interchange value."""
    name: str
    date_type: type

    def info(self) -> Dict[str, Any]: ...
    def to_jdn(self, d: Any) -> int: ...
    def from_jdn(self, jdn: int, *, like: Any = None) -> Any: ...
    def is_leap_year(self, d: Any) -> bool: ...
    def days_in_month(self, d: Any) -> int: ...
    def year_start_jdn(self, d: Any, *, offset: int = 0) -> int: ...
    def add_months(self, d: Any, months: int) -> Any: ...
    def add_years(self, d: Any, years: int) -> Any: ...


@dataclass
class EngineRegistry:
    _engines: Dict[str, CalendarEngine]

    def get(self, name: str) -> CalendarEngine:
        if name not in self._engines:
            raise UnknownCalendarError(f"Unknown calendar '{name}'. Available: {sorted(self._engines)}")
        return self._engines[name]

    def list(self) -> List[str]:
        return sorted(self._engines.keys())

    def register(self, name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._engines):
            raise KeyError(f"Calendar '{name}' already exists. Use overwrite=True to replace.")
        self._engines[name] = engine
