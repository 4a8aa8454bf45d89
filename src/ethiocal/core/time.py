from __future__ import annotations

from .types import GregorianDate


def tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero (C / JavaScript semantics)."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def tmod(a: int, b: int) -> int:
    """Remainder matching tdiv: a == b * tdiv(a, b) + tmod(a, b)."""
    return a - b * tdiv(a, b)


# ============================================================
# Gregorian calendar date <-> JDN  (Fliegel–Van Flandern)
# ============================================================

def gregorian_to_jdn(y: int, m: int, d: int) -> int:
    """
    Gregorian date -> JDN (proleptic Gregorian, any year incl. zero/negative).

    Divisions truncate toward zero; out-of-range days simply overflow
    into the following month.
    """
    a = tdiv(14 - m, 12)
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    return (
        d
        + tdiv(153 * m2 + 2, 5)
        + 365 * y2
        + tdiv(y2, 4)
        - tdiv(y2, 100)
        + tdiv(y2, 400)
        - 32045
    )


def jdn_to_gregorian(jdn: int) -> GregorianDate:
    """Fliegel-Van Flandern inverse of gregorian_to_jdn."""
    a = jdn + 32044
    b = tdiv(4 * a + 3, 146097)
    c = a - tdiv(146097 * b, 4)
    d = tdiv(4 * c + 3, 1461)
    e = c - tdiv(1461 * d, 4)
    m = tdiv(5 * e + 2, 153)

    day = e - tdiv(153 * m + 2, 5) + 1
    month = m + 3 - 12 * tdiv(m, 10)
    year = 100 * b + d - 4800 + tdiv(m, 10)
    return GregorianDate(year, month, day)


def weekday_from_jdn(jdn: int) -> int:
    """0=Sunday..6=Saturday, defined for every integer JDN."""
    return (jdn + 1) % 7
