# tests/test_feasts.py

import pytest
import random

import ethiocal
from ethiocal import EthiopicDate, GregorianDate
from ethiocal.core.types import MonthDay
from ethiocal.engines.islamic import approx_islamic_year, islamic_occurrences_in_gregorian_year
from ethiocal.engines.julian import julian_to_jdn
from ethiocal.engines.paschal import orthodox_easter_jdn, orthodox_easter_julian
from ethiocal.engines.weekday import MONDAY, SUNDAY, first_weekday_jdn


@pytest.mark.parametrize(
    "year,easter",
    [
        (2024, GregorianDate(2024, 5, 5)),
        (2025, GregorianDate(2025, 4, 20)),
        (2026, GregorianDate(2026, 4, 12)),
    ],
)
def test_orthodox_easter(year, easter):
    assert ethiocal.orthodox_easter_gregorian(year) == easter


@pytest.mark.parametrize("year", [2024, 2025, 2026])
def test_dependent_feasts(year):
    e = orthodox_easter_jdn(year)
    gf = ethiocal.good_friday_gregorian(year)
    ho = ethiocal.hosanna_gregorian(year)
    assert ethiocal.gregorian_to_jdn(gf.year, gf.month, gf.day) == e - 2
    assert ethiocal.gregorian_to_jdn(ho.year, ho.month, ho.day) == e - 7


def test_easter_is_sunday():
    for year in range(1900, 2200):
        assert ethiocal.weekday_from_jdn(orthodox_easter_jdn(year)) == SUNDAY
        month, _ = orthodox_easter_julian(year)
        assert month in (3, 4)


def test_julian_jdn():
    # Julian 1582-10-04 is followed by Gregorian 1582-10-15
    assert julian_to_jdn(1582, 10, 4) + 1 == ethiocal.gregorian_to_jdn(1582, 10, 15)
    assert julian_to_jdn(2025, 1, 1) == ethiocal.gregorian_to_jdn(2025, 1, 14)


def test_islamic_known_dates():
    assert ethiocal.islamic_to_jdn(1446, 10, 1) == ethiocal.gregorian_to_jdn(2025, 3, 30)
    assert islamic_occurrences_in_gregorian_year(2025, 10, 1) == [MonthDay(3, 30)]
    assert islamic_occurrences_in_gregorian_year(2025, 12, 10) == [MonthDay(6, 6)]
    assert islamic_occurrences_in_gregorian_year(2025, 3, 12) == [MonthDay(9, 4)]


def test_islamic_twice_in_one_year():
    assert islamic_occurrences_in_gregorian_year(2000, 10, 1) == [MonthDay(1, 7), MonthDay(12, 27)]


def test_islamic_occurrence_count():
    for gy in range(1900, 2100):
        occ = islamic_occurrences_in_gregorian_year(gy, 10, 1)
        assert 1 <= len(occ) <= 2
        assert occ == sorted(occ, key=lambda md: (md.month, md.day))


def test_approx_islamic_year():
    assert approx_islamic_year(2025) == 1446
    assert approx_islamic_year(2000) == 1421


def test_jdn_islamic_roundtrip():
    random.seed(42)
    for _ in range(5000):
        jdn = random.randint(2400000, 2500000)
        iy, im, id = ethiocal.jdn_to_islamic(jdn)
        assert 1 <= im <= 12
        assert 1 <= id <= 30
        assert ethiocal.islamic_to_jdn(iy, im, id) == jdn


def test_first_weekday_of_month():
    assert ethiocal.first_weekday_of_month(2025, 10, SUNDAY) == GregorianDate(2025, 10, 5)
    assert ethiocal.first_weekday_of_month(2025, 10, 3) == GregorianDate(2025, 10, 1)  # Wednesday
    assert ethiocal.first_weekday_of_month(2018, 2, MONDAY, "ethiopic") == EthiopicDate(2018, 2, 3)
    with pytest.raises(ValueError):
        ethiocal.first_weekday_of_month(2025, 1, SUNDAY, "julian")


def test_first_weekday_jdn_window():
    for j in range(2460000, 2460014):
        for wd in range(7):
            hit = first_weekday_jdn(j, wd)
            assert 0 <= hit - j <= 6
            assert ethiocal.weekday_from_jdn(hit) == wd
