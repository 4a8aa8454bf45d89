"""
ethiocal.engines.gregorian
--------------------------
Proleptic Gregorian rules layered on the Fliegel–Van Flandern JDN pair.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..core.errors import InvalidMonthError
from ..core.time import gregorian_to_jdn, jdn_to_gregorian
from ..core.types import GregorianDate

_THIRTY_DAY_MONTHS = (4, 6, 9, 11)


def is_gregorian_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or (year % 400 == 0)


def gregorian_days_in_month(year: int, month: int) -> int:
    if month == 2:
        return 29 if is_gregorian_leap_year(year) else 28
    if month in _THIRTY_DAY_MONTHS:
        return 30
    if 1 <= month <= 12:
        return 31
    raise InvalidMonthError("gregorian", month)


@dataclass(frozen=True)
class GregorianParams:
    name: str = "gregorian"
    months_per_year: int = 12

    def __post_init__(self) -> None:
        if self.months_per_year != 12:
            raise ValueError("Gregorian calendar has exactly 12 months")


class GregorianCalendar:
    """Gregorian engine. Fully implements CalendarEngine."""
    date_type = GregorianDate

    def __init__(self, params: Optional[GregorianParams] = None):
        self.p = params or GregorianParams()
        self.name = self.p.name

    def info(self) -> Dict[str, Any]:
        return {"name": self.name, "months_per_year": self.p.months_per_year}

    # ---------------------------------------------------------
    # JDN pair
    # ---------------------------------------------------------

    def to_jdn(self, d: GregorianDate) -> int:
        return gregorian_to_jdn(d.year, d.month, d.day)

    def from_jdn(self, jdn: int, *, like: Any = None) -> GregorianDate:
        return jdn_to_gregorian(jdn)

    # ---------------------------------------------------------
    # Rules
    # ---------------------------------------------------------

    def is_leap_year(self, d: GregorianDate) -> bool:
        return is_gregorian_leap_year(d.year)

    def days_in_month(self, d: GregorianDate) -> int:
        return gregorian_days_in_month(d.year, d.month)

    def year_start_jdn(self, d: GregorianDate, *, offset: int = 0) -> int:
        """JDN of January 1 of d.year + offset."""
        return gregorian_to_jdn(d.year + offset, 1, 1)

    # ---------------------------------------------------------
    # Month / year offsets
    # ---------------------------------------------------------

    def add_months(self, d: GregorianDate, months: int) -> GregorianDate:
        # Zero-based linear month index; floor division keeps negative moves exact.
        m0 = d.year * 12 + (d.month - 1) + months
        y2, m2 = m0 // 12, m0 % 12 + 1
        d2 = max(1, min(d.day, gregorian_days_in_month(y2, m2)))
        return GregorianDate(y2, m2, d2)

    def add_years(self, d: GregorianDate, years: int) -> GregorianDate:
        y2 = d.year + years
        d2 = 28 if d.month == 2 and d.day == 29 and not is_gregorian_leap_year(y2) else d.day
        return GregorianDate(y2, d.month, d2)
