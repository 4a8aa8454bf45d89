"""
ethiocal.engines.ethiopic
-------------------------
Ethiopic calendar rules: twelve 30-day months plus Pagume (5 or 6 days),
a plain 4-year leap cycle, and closed-form integer conversion to and from
the Julian Day Number. Amete Alem is only a renumbering of Amete Mihret.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from ..core.errors import InvalidMonthError
from ..core.time import gregorian_to_jdn, jdn_to_gregorian, tdiv, tmod
from ..core.types import Era, EthiopicDate, GregorianDate

# 1 Meskerem 1 AM == 8-08-29 (Julian)
ETH_EPOCH = 1723856

# AA 5501 == AM 1
AMETE_MIHRET_DELTA = 5500

PAGUME = 13


@dataclass(frozen=True)
class EthiopicParams:
    name: str = "ethiopic"
    epoch_jdn: int = ETH_EPOCH
    era_delta: int = AMETE_MIHRET_DELTA

    def __post_init__(self) -> None:
        if self.era_delta % 4 != 0:
            # Renumbering must not move the leap cycle.
            raise ValueError("era_delta must be a multiple of 4")


DEFAULT_PARAMS = EthiopicParams()


def normalize_am_year(year: int, era: Era = "AM", *, params: EthiopicParams = DEFAULT_PARAMS) -> int:
    return year - params.era_delta if era == "AA" else year


def is_ethiopic_leap_year(year: int, era: Era = "AM") -> bool:
    """Leap iff the Amete Mihret year is 3 mod 4."""
    return normalize_am_year(year, era) % 4 == 3


def ethiopic_days_in_month(year: int, month: int, era: Era = "AM") -> int:
    if 1 <= month <= 12:
        return 30
    if month == PAGUME:
        return 6 if is_ethiopic_leap_year(year, era) else 5
    raise InvalidMonthError("ethiopic", month)


def _to_jdn(p: EthiopicParams, year: int, month: int, day: int, era: Era) -> int:
    am = normalize_am_year(year, era, params=p)
    return p.epoch_jdn + 365 * am + tdiv(am, 4) + 30 * month + day - 31


def _from_jdn(p: EthiopicParams, jdn: int) -> EthiopicDate:
    # 1461-day quadrennium, then 365-day years; the 4th year absorbs day 1461.
    r = tmod(jdn - p.epoch_jdn, 1461)
    n = tmod(r, 365) + 365 * tdiv(r, 1460)
    year = 4 * tdiv(jdn - p.epoch_jdn, 1461) + tdiv(r, 365) - tdiv(r, 1460)
    return EthiopicDate(year, tdiv(n, 30) + 1, tmod(n, 30) + 1, "AM")


def ethiopic_to_jdn(year: int, month: int, day: int, era: Era = "AM") -> int:
    """Ethiopic -> JDN. Day overflow is not rejected; it rolls forward."""
    return _to_jdn(DEFAULT_PARAMS, year, month, day, era)


def jdn_to_ethiopic(jdn: int) -> EthiopicDate:
    """JDN -> Ethiopic, always in Amete Mihret numbering."""
    return _from_jdn(DEFAULT_PARAMS, jdn)


def to_gregorian(ed: EthiopicDate) -> GregorianDate:
    return jdn_to_gregorian(ethiopic_to_jdn(ed.year, ed.month, ed.day, ed.era))


def to_ethiopic(gd: GregorianDate) -> EthiopicDate:
    return jdn_to_ethiopic(gregorian_to_jdn(gd.year, gd.month, gd.day))


class EthiopicCalendar:
    """Ethiopic engine. Fully implements CalendarEngine."""
    date_type = EthiopicDate

    def __init__(self, params: Optional[EthiopicParams] = None):
        self.p = params or DEFAULT_PARAMS
        self.name = self.p.name

    def info(self) -> Dict[str, Any]:
        return {"name": self.name, "epoch_jdn": self.p.epoch_jdn, "era_delta": self.p.era_delta}

    # ---------------------------------------------------------
    # JDN pair
    # ---------------------------------------------------------

    def to_jdn(self, d: EthiopicDate) -> int:
        return _to_jdn(self.p, d.year, d.month, d.day, d.era)

    def from_jdn(self, jdn: int, *, like: Any = None) -> EthiopicDate:
        """Decode to AM, then re-tag into the era of `like` when it is Amete Alem."""
        e = _from_jdn(self.p, jdn)
        if isinstance(like, EthiopicDate) and like.era == "AA":
            return replace(e, year=e.year + self.p.era_delta, era="AA")
        return e

    # ---------------------------------------------------------
    # Rules
    # ---------------------------------------------------------

    def is_leap_year(self, d: EthiopicDate) -> bool:
        return normalize_am_year(d.year, d.era, params=self.p) % 4 == 3

    def days_in_month(self, d: EthiopicDate) -> int:
        return self._month_length(d.year, d.month, d.era)

    def _month_length(self, year: int, month: int, era: Era) -> int:
        if 1 <= month <= 12:
            return 30
        if month == PAGUME:
            return 6 if normalize_am_year(year, era, params=self.p) % 4 == 3 else 5
        raise InvalidMonthError("ethiopic", month)

    def year_start_jdn(self, d: EthiopicDate, *, offset: int = 0) -> int:
        """JDN of 1 Meskerem of d.year + offset (same era)."""
        return _to_jdn(self.p, d.year + offset, 1, 1, d.era)

    # ---------------------------------------------------------
    # Month / year offsets
    # ---------------------------------------------------------

    def add_months(self, d: EthiopicDate, months: int) -> EthiopicDate:
        """
        Months are linearized as 13 per year. A day leaving Pagume for
        Meskerem keeps its value (Pagume 5 -> Meskerem 5); a day entering
        Pagume is clamped to its 5 or 6 days. So +1 then -1 restores every
        Pagume day, leap day included.
        """
        total = (d.year - 1) * 13 + (d.month - 1) + months
        y2, m2 = total // 13 + 1, total % 13 + 1
        d2 = min(d.day, self._month_length(y2, m2, d.era))
        return EthiopicDate(y2, m2, d2, d.era)

    def add_years(self, d: EthiopicDate, years: int) -> EthiopicDate:
        y2 = d.year + years
        d2 = min(d.day, self._month_length(y2, d.month, d.era))
        return EthiopicDate(y2, d.month, d2, d.era)
