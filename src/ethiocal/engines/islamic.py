"""
ethiocal.engines.islamic
------------------------
Tabular (arithmetic, civil) Islamic calendar: 30-year cycle with 11 leap
years, months alternating 30/29 days starting with Muharram = 30.

Adequate for highlight purposes; actual observance follows moon sighting
and may differ by a day or two.
"""

from __future__ import annotations

import logging
from typing import List, Tuple

from ..core.time import jdn_to_gregorian
from ..core.types import MonthDay

logger = logging.getLogger(__name__)

# Friday, 16 July 622 (Julian)
ISLAMIC_EPOCH = 1948439

# Candidate Islamic years scanned around the estimate: iy0-1 .. iy0+2
SEARCH_WINDOW = (-1, 2)


def _ceil_half_months(k: int) -> int:
    """ceil(29.5 * k) in integer arithmetic."""
    return -((-59 * k) // 2)


def islamic_to_jdn(iy: int, im: int, id: int) -> int:
    year_days = (iy - 1) * 354 + (3 + 11 * iy) // 30
    return ISLAMIC_EPOCH + year_days + _ceil_half_months(im - 1) + id - 1


def jdn_to_islamic(jdn: int) -> Tuple[int, int, int]:
    """Inverse of islamic_to_jdn as (year, month, day)."""
    iy = (30 * (jdn - ISLAMIC_EPOCH) + 10646) // 10631
    since_muharram = jdn - (29 + islamic_to_jdn(iy, 1, 1))
    # ceil(since / 29.5) + 1, capped at Dhu al-Hijjah
    im = min(12, -((-2 * since_muharram) // 59) + 1)
    id = jdn - islamic_to_jdn(iy, im, 1) + 1
    return iy, im, id


def approx_islamic_year(gy: int) -> int:
    """Rough Islamic year overlapping Gregorian year gy."""
    return (gy - 622) * 33 // 32


def islamic_occurrences_in_gregorian_year(gy: int, im: int, id: int) -> List[MonthDay]:
    """
    All Gregorian (month, day) in year gy on which Islamic (im, id) falls.

    The lunar year drifts ~11 days a year against the solar one, so a fixed
    Islamic date lands in a given Gregorian year zero, one or (rarely) two
    times; a small window of Islamic years is converted and filtered.
    """
    iy0 = approx_islamic_year(gy)
    lo, hi = SEARCH_WINDOW
    hits: List[MonthDay] = []
    for iy in range(iy0 + lo, iy0 + hi + 1):
        g = jdn_to_gregorian(islamic_to_jdn(iy, im, id))
        if g.year == gy:
            hits.append(MonthDay(g.month, g.day))
    if not hits:
        logger.debug("Islamic %02d-%02d has no occurrence in Gregorian %d", im, id, gy)
    return hits
