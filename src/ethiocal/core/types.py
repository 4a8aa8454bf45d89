from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from typing import Any, Dict, Literal, Optional, Tuple

Calendar = Literal["gregorian", "ethiopic"]
Era = Literal["AM", "AA"]  # Amete Mihret (default) or Amete Alem
HighlightCategory = Literal["religious", "national", "observance"]

CALENDARS: Tuple[str, ...] = ("gregorian", "ethiopic")


@dataclass(frozen=True)
class EngineSpec:
    """Pure data specification of a calendar engine."""
    kind: Literal["gregorian", "ethiopic"]
    params: Any  # GregorianParams | EthiopicParams
    meta: Dict[str, Any] = field(default_factory=dict)

    def tweak(self, **kwargs) -> "EngineSpec":
        return replace(self, params=replace(self.params, **kwargs))


@dataclass(frozen=True)
class GregorianDate:
    """Proleptic Gregorian label. Not validated: Feb 30 is representable."""
    year: int
    month: int  # 1..12
    day: int    # 1..31

    @classmethod
    def from_date(cls, d: date) -> "GregorianDate":
        return cls(d.year, d.month, d.day)

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


@dataclass(frozen=True)
class EthiopicDate:
    year: int    # >= 1 in the active era
    month: int   # 1..13
    day: int     # 1..30 (or 1..5/6 for Pagume)
    era: Era = "AM"

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d} {self.era}"


@dataclass(frozen=True)
class YearProgress:
    days_left: int            # days until next 1/1 (or Meskerem 1)
    total_days_in_year: int   # 365 or 366
    percent_completed: float  # 0..100, 2 decimals


@dataclass(frozen=True)
class MonthDay:
    month: int
    day: int


@dataclass(frozen=True)
class Highlight:
    id: str
    name: str           # English name
    amharic_name: str
    calendar: Calendar  # calendar the month/day are expressed in
    month: int
    day: int
    category: Optional[HighlightCategory] = None
    tags: Tuple[str, ...] = ()


@dataclass(frozen=True)
class DynamicRule:
    """
    Movable highlight. `kind` names a registered occurrence function
    (see ethiocal.highlights.rules); `params` is its plain-data argument tuple.
    """
    id: str
    name: str
    amharic_name: str
    kind: str
    params: Tuple[int, ...] = ()
    category: Optional[HighlightCategory] = None
    tags: Tuple[str, ...] = ()


@dataclass(frozen=True)
class HighlightOnDate:
    highlight: Highlight
    gregorian: GregorianDate
    ethiopic: EthiopicDate

    @property
    def weekday(self) -> int:
        from .time import gregorian_to_jdn, weekday_from_jdn
        g = self.gregorian
        return weekday_from_jdn(gregorian_to_jdn(g.year, g.month, g.day))


@dataclass(frozen=True)
class ResolvedHighlight:
    """Fully resolved highlight with both calendar counterparts."""
    id: str  # canonical id after dedupe
    name: str
    amharic_name: str
    gregorian: GregorianDate
    ethiopic: EthiopicDate
    category: Optional[HighlightCategory] = None
    tags: Tuple[str, ...] = ()
