"""
ethiocal.engines.paschal
------------------------
Orthodox (Ethiopian) Easter and the feasts hanging off it.

Easter is found in the Julian calendar with the Meeus algorithm and carried
to the Gregorian calendar through its JDN, which stays exact in every
century (no per-century Julian/Gregorian offset tables).
"""

from __future__ import annotations

from ..core.time import gregorian_to_jdn, jdn_to_gregorian
from ..core.types import GregorianDate
from .julian import julian_to_jdn

GOOD_FRIDAY_OFFSET = -2
HOSANNA_OFFSET = -7


def orthodox_easter_julian(year: int) -> tuple[int, int]:
    """Easter Sunday as a Julian-calendar (month, day); month is 3 or 4."""
    a = year % 4
    b = year % 7
    c = year % 19
    d = (19 * c + 15) % 30
    e = (2 * a + 4 * b - d + 34) % 7
    month = (d + e + 114) // 31
    day = (d + e + 114) % 31 + 1
    return month, day


def orthodox_easter_jdn(year: int) -> int:
    month, day = orthodox_easter_julian(year)
    return julian_to_jdn(year, month, day)


def orthodox_easter_gregorian(year: int) -> GregorianDate:
    return jdn_to_gregorian(orthodox_easter_jdn(year))


def paschal_feast_gregorian(year: int, offset: int) -> GregorianDate:
    """Day `offset` days from Easter Sunday of `year`."""
    easter = orthodox_easter_gregorian(year)
    j = gregorian_to_jdn(easter.year, easter.month, easter.day)
    return jdn_to_gregorian(j + offset)


def good_friday_gregorian(year: int) -> GregorianDate:
    return paschal_feast_gregorian(year, GOOD_FRIDAY_OFFSET)


def hosanna_gregorian(year: int) -> GregorianDate:
    """Palm Sunday: one week before Easter."""
    return paschal_feast_gregorian(year, HOSANNA_OFFSET)
