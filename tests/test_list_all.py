# tests/test_list_all.py

import pytest

import ethiocal
from ethiocal import EthiopicDate, GregorianDate
from ethiocal.highlights import CANONICAL_IDS


def _jdn(g):
    return ethiocal.gregorian_to_jdn(g.year, g.month, g.day)


@pytest.mark.parametrize("year,calendar", [(2025, "gregorian"), (2024, "gregorian"), (2018, "ethiopic"), (2017, "ethiopic")])
def test_sorted_and_deduplicated(year, calendar):
    out = ethiocal.list_all_highlights(year, calendar)
    jdns = [_jdn(r.gregorian) for r in out]
    assert jdns == sorted(jdns)

    keys = [(r.id, r.gregorian) for r in out]
    assert len(keys) == len(set(keys))
    # synonyms always collapse onto their canonical id
    assert not {r.id for r in out} & set(CANONICAL_IDS)


@pytest.mark.parametrize("year,calendar", [(2025, "gregorian"), (2018, "ethiopic")])
def test_both_dates_are_the_same_day(year, calendar):
    for r in ethiocal.list_all_highlights(year, calendar):
        assert ethiocal.to_ethiopic(r.gregorian) == r.ethiopic
        if calendar == "gregorian":
            assert r.gregorian.year == year
        else:
            assert r.ethiopic.year == year


def test_gregorian_2025():
    out = ethiocal.list_all_highlights(2025, "gregorian")
    # 11 Gregorian, plus Demera and Ketera, plus 9 movable
    assert len(out) == 22

    (genna,) = [r for r in out if r.gregorian == GregorianDate(2025, 1, 7)]
    assert genna.id == "genna"
    assert genna.ethiopic == EthiopicDate(2017, 4, 29)
    assert genna.category == "religious"
    assert "public-holiday" in genna.tags
    assert len(genna.tags) == len(set(genna.tags))

    assert out[0].id == "g_new_year"
    assert out[-1].id == "christmas"


def test_ethiopic_2018_starts_with_new_year():
    out = ethiocal.list_all_highlights(2018, "ethiopic")
    assert out[0].id == "enkutatash"
    assert out[0].gregorian == GregorianDate(2025, 9, 11)
    assert out[0].ethiopic == EthiopicDate(2018, 1, 1)
    ids = [r.id for r in out]
    assert ids.count("meskel") == 1
    assert "fasika" in ids
