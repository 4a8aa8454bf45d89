"""
Calendar-aware date arithmetic.

Every operation takes an explicit calendar tag ("gregorian" or "ethiopic");
the date must be of the matching type. Day offsets go through the JDN, so
they are exact across month, year and Pagume boundaries.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TypeVar, Union

from .api import get_engine
from .core.engine import CalendarEngine
from .core.types import Calendar, EthiopicDate, GregorianDate, YearProgress
from .engines.ethiopic import to_ethiopic

DateT = TypeVar("DateT", GregorianDate, EthiopicDate)


def _engine_for(d: Union[GregorianDate, EthiopicDate], calendar: Calendar) -> CalendarEngine:
    eng = get_engine(calendar)
    if not isinstance(d, eng.date_type):
        raise TypeError(f"{type(d).__name__} is not a {calendar} date")
    return eng


def today(calendar: Calendar = "gregorian") -> Union[GregorianDate, EthiopicDate]:
    """Today's date from the UTC wall clock (no time zones)."""
    now = datetime.now(timezone.utc)
    g = GregorianDate(now.year, now.month, now.day)
    if calendar == "gregorian":
        return g
    if calendar == "ethiopic":
        return to_ethiopic(g)
    raise ValueError(f"calendar must be 'gregorian' or 'ethiopic', got {calendar!r}")


def add_days(d: DateT, days: int, calendar: Calendar) -> DateT:
    eng = _engine_for(d, calendar)
    return eng.from_jdn(eng.to_jdn(d) + days, like=d)


def add_months(d: DateT, months: int, calendar: Calendar) -> DateT:
    """Move by whole months, clamping the day to the target month's length."""
    return _engine_for(d, calendar).add_months(d, months)


def add_years(d: DateT, years: int, calendar: Calendar) -> DateT:
    """Move by whole years; only Feb 29 / Pagume 6 are clamped."""
    return _engine_for(d, calendar).add_years(d, years)


def previous_day(d: DateT, calendar: Calendar) -> DateT:
    return add_days(d, -1, calendar)


def next_day(d: DateT, calendar: Calendar) -> DateT:
    return add_days(d, +1, calendar)


def last_week(d: DateT, calendar: Calendar) -> DateT:
    return add_days(d, -7, calendar)


def next_week(d: DateT, calendar: Calendar) -> DateT:
    return add_days(d, +7, calendar)


def last_month(d: DateT, calendar: Calendar) -> DateT:
    return add_months(d, -1, calendar)


def next_month(d: DateT, calendar: Calendar) -> DateT:
    return add_months(d, +1, calendar)


def last_year(d: DateT, calendar: Calendar) -> DateT:
    return add_years(d, -1, calendar)


def next_year(d: DateT, calendar: Calendar) -> DateT:
    return add_years(d, +1, calendar)


def last_century(d: DateT, calendar: Calendar) -> DateT:
    return add_years(d, -100, calendar)


def next_century(d: DateT, calendar: Calendar) -> DateT:
    return add_years(d, +100, calendar)


def year_progress(d: Union[GregorianDate, EthiopicDate], calendar: Calendar) -> YearProgress:
    """Days until next 1 January (or 1 Meskerem), and % of the year completed."""
    eng = _engine_for(d, calendar)
    start = eng.year_start_jdn(d)
    next_start = eng.year_start_jdn(d, offset=1)
    jdn = eng.to_jdn(d)
    total = next_start - start  # 365/366
    pct = max(0.0, min(100.0, (jdn - start) / total * 100))
    return YearProgress(
        days_left=next_start - jdn,
        total_days_in_year=total,
        percent_completed=round(pct, 2),
    )
