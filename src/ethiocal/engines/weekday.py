from __future__ import annotations

from ..core.time import gregorian_to_jdn, jdn_to_gregorian, weekday_from_jdn
from ..core.types import Calendar
from .ethiopic import ethiopic_to_jdn, jdn_to_ethiopic

SUNDAY, MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY = range(7)


def first_weekday_jdn(first_of_month_jdn: int, weekday: int) -> int:
    """JDN of the first `weekday` (0=Sunday) on or after the given day."""
    return first_of_month_jdn + (weekday - weekday_from_jdn(first_of_month_jdn)) % 7


def first_weekday_of_month(year: int, month: int, weekday: int, calendar: Calendar = "gregorian"):
    """First `weekday` of a Gregorian or Ethiopic (AM) month."""
    if calendar == "gregorian":
        return jdn_to_gregorian(first_weekday_jdn(gregorian_to_jdn(year, month, 1), weekday))
    if calendar == "ethiopic":
        return jdn_to_ethiopic(first_weekday_jdn(ethiopic_to_jdn(year, month, 1), weekday))
    raise ValueError(f"calendar must be 'gregorian' or 'ethiopic', got {calendar!r}")
