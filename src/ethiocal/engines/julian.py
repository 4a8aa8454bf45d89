from __future__ import annotations

from ..core.time import tdiv


def julian_to_jdn(y: int, m: int, d: int) -> int:
    """
    Julian calendar date -> JDN (proleptic).

    Same month shift as the Gregorian formula, without the century terms
    and with the Julian epoch offset.
    """
    a = tdiv(14 - m, 12)
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    return d + tdiv(153 * m2 + 2, 5) + 365 * y2 + tdiv(y2, 4) - 32083
