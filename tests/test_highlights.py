# tests/test_highlights.py

import pytest

import ethiocal
from ethiocal import DynamicRule, EthiopicDate, GregorianDate, Highlight, InvalidMonthError, UnknownRuleKindError
from ethiocal.core.types import MonthDay
from ethiocal.highlights import DYNAMIC_RULES, HighlightCatalog, register_rule_kind, rule_kinds, rule_occurrences
from ethiocal.highlights import rules


def ids(items):
    return [h.id for h in items]


def pinned_ids(items):
    return [x.highlight.id for x in items]


def _rule(rule_id):
    return next(r for r in DYNAMIC_RULES if r.id == rule_id)


# --- Rules ---

def test_registered_kinds():
    assert rule_kinds() == ("ethiopic_weekday", "gregorian_weekday", "islamic", "paschal")


def test_rule_occurrences_2025():
    assert rule_occurrences(_rule("fasika"), 2025) == [MonthDay(4, 20)]
    assert rule_occurrences(_rule("good_friday"), 2025) == [MonthDay(4, 18)]
    assert rule_occurrences(_rule("hosanna"), 2025) == [MonthDay(4, 13)]
    assert rule_occurrences(_rule("eid_al_fitr"), 2025) == [MonthDay(3, 30)]
    assert rule_occurrences(_rule("irreechaa_finfinne"), 2025) == [MonthDay(10, 4)]
    assert rule_occurrences(_rule("irreechaa_bishoftu"), 2025) == [MonthDay(10, 5)]
    assert rule_occurrences(_rule("flag_day"), 2025) == [MonthDay(10, 13)]


def test_unknown_rule_kind():
    rule = DynamicRule("x", "X", "ኤክስ", "lunar_phase")
    with pytest.raises(UnknownRuleKindError):
        rule_occurrences(rule, 2025)
    assert isinstance(UnknownRuleKindError("x"), KeyError)


def test_register_rule_kind(monkeypatch):
    monkeypatch.setattr(rules, "_KINDS", dict(rules._KINDS))
    register_rule_kind("fixed_test", lambda rule, gy: [MonthDay(*rule.params)])
    rule = DynamicRule("t", "T", "ቲ", "fixed_test", (6, 1))
    assert rule_occurrences(rule, 2030) == [MonthDay(6, 1)]


# --- Day lookups ---

def test_gregorian_day():
    assert ids(ethiocal.get_highlights_for_gregorian_day(GregorianDate(2025, 1, 7))) == ["genna_g"]
    assert ids(ethiocal.get_highlights_for_gregorian_day(GregorianDate(2025, 4, 20))) == ["fasika"]
    assert ids(ethiocal.get_highlights_for_gregorian_day(GregorianDate(2025, 10, 5))) == ["irreechaa_bishoftu"]
    assert ethiocal.get_highlights_for_gregorian_day(GregorianDate(2025, 2, 11)) == []


def test_dynamic_day_carries_date():
    (h,) = ethiocal.get_highlights_for_gregorian_day(GregorianDate(2025, 3, 30))
    assert (h.id, h.calendar, h.month, h.day) == ("eid_al_fitr", "gregorian", 3, 30)
    assert h.amharic_name == "ኢድ አል-ፊትር"


def test_ethiopic_day():
    assert ids(ethiocal.get_highlights_for_ethiopic_day(EthiopicDate(2017, 4, 29))) == ["genna"]
    assert ids(ethiocal.get_highlights_for_ethiopic_day(EthiopicDate(2018, 1, 17))) == ["meskel"]
    assert ids(ethiocal.get_highlights_for_ethiopic_day(EthiopicDate(2018, 1, 24))) == ["irreechaa_finfinne"]
    assert ids(ethiocal.get_highlights_for_ethiopic_day(EthiopicDate(2018, 1, 25))) == ["irreechaa_bishoftu"]


def test_ethiopic_day_amete_alem():
    assert ids(ethiocal.get_highlights_for_ethiopic_day(EthiopicDate(7518, 1, 25, "AA"))) == ["irreechaa_bishoftu"]


def test_for_day_dispatch():
    assert ids(ethiocal.get_highlights_for_day(GregorianDate(2025, 1, 7), "gregorian")) == ["genna_g"]
    assert ids(ethiocal.get_highlights_for_day(EthiopicDate(2017, 4, 29), "ethiopic")) == ["genna"]
    with pytest.raises(TypeError):
        ethiocal.get_highlights_for_day(GregorianDate(2025, 1, 7), "ethiopic")


# --- Week / range ---

def test_week():
    week = ethiocal.get_highlights_for_week(GregorianDate(2025, 10, 4), "gregorian")
    assert pinned_ids(week) == ["irreechaa_finfinne", "irreechaa_bishoftu"]
    assert week[0].gregorian == GregorianDate(2025, 10, 4)
    assert week[0].ethiopic == EthiopicDate(2018, 1, 24)
    assert week[0].weekday == 6
    assert ethiocal.get_highlights_for_week(GregorianDate(2025, 10, 4), "gregorian", include_weekends=False) == []


def test_week_ethiopic():
    week = ethiocal.get_highlights_for_week(EthiopicDate(2017, 4, 27), "ethiopic")
    assert pinned_ids(week) == ["genna"]
    assert week[0].gregorian == GregorianDate(2025, 1, 7)


def test_range():
    hits = ethiocal.get_highlights_in_range(GregorianDate(2025, 5, 1), GregorianDate(2025, 5, 31), "gregorian")
    assert pinned_ids(hits) == ["labour", "patriots", "derg"]
    assert [x.gregorian.day for x in hits] == [1, 5, 28]


def test_range_ethiopic_across_new_year():
    hits = ethiocal.get_highlights_in_range(EthiopicDate(2017, 13, 1), EthiopicDate(2018, 1, 2), "ethiopic")
    assert pinned_ids(hits) == ["enkutatash"]
    assert hits[0].gregorian == GregorianDate(2025, 9, 11)
    assert hits[0].weekday == 4  # Thursday


def test_range_empty_when_reversed():
    assert ethiocal.get_highlights_in_range(GregorianDate(2025, 5, 31), GregorianDate(2025, 5, 1), "gregorian") == []


# --- Month / year ---

def test_gregorian_month():
    assert ids(ethiocal.get_highlights_for_month(2025, 5, "gregorian")) == ["labour", "patriots", "derg"]
    assert set(ids(ethiocal.get_highlights_for_month(2025, 10, "gregorian"))) == {
        "irreechaa_finfinne", "irreechaa_bishoftu", "flag_day",
    }


def test_ethiopic_month():
    assert set(ids(ethiocal.get_highlights_for_month(2018, 1, "ethiopic"))) == {
        "enkutatash", "demera", "meskel", "irreechaa_finfinne", "irreechaa_bishoftu",
    }
    assert ethiocal.get_highlights_for_month(2017, 13, "ethiopic") == []


@pytest.mark.parametrize("year,month,calendar", [(2025, 13, "gregorian"), (2025, 0, "gregorian"), (2017, 14, "ethiopic")])
def test_invalid_month(year, month, calendar):
    with pytest.raises(InvalidMonthError):
        ethiocal.get_highlights_for_month(year, month, calendar)


def test_gregorian_year():
    year = ethiocal.get_highlights_for_year(2025, "gregorian")
    assert len(year) == 11 + 9
    assert "fasika" in ids(year)


def test_ethiopic_year():
    year = ids(ethiocal.get_highlights_for_year(2018, "ethiopic"))
    assert year[:10] == [h.id for h in ethiocal.highlights.ETHIOPIAN_HIGHLIGHTS]
    assert {"fasika", "flag_day", "eid_al_fitr"} <= set(year)


# --- Search / category / today ---

def test_search_english():
    assert set(ids(ethiocal.search_highlights("meskel", year=2025))) == {"demera", "meskel", "meskel_g"}
    assert set(ids(ethiocal.search_highlights("EASTER", year=2025))) == {"fasika"}
    assert ethiocal.search_highlights("no such feast", year=2025) == []


def test_search_amharic():
    (h,) = ethiocal.search_highlights("ፋሲካ", year=2025)
    assert (h.id, h.month, h.day) == ("fasika", 4, 20)


def test_by_category():
    assert set(ids(ethiocal.get_highlights_by_category("observance", year=2025))) == {
        "g_new_year", "labour", "flag_day",
    }
    assert ethiocal.get_highlights_by_category("sports", year=2025) == []


def test_todays_highlights(frozen_today):
    assert pinned_ids(ethiocal.get_todays_highlights()) == ["enkutatash_g"]


# --- Injected tables ---

def test_custom_catalog(restore_catalog):
    ethiocal.set_catalog(
        HighlightCatalog(
            ethiopic=[],
            gregorian=[Highlight("h1", "Test Day", "የሙከራ ቀን", "gregorian", 2, 11, "observance")],
            rules=[],
        )
    )
    assert ids(ethiocal.get_highlights_for_gregorian_day(GregorianDate(2025, 2, 11))) == ["h1"]
    assert ethiocal.get_highlights_for_gregorian_day(GregorianDate(2025, 1, 7)) == []


def test_catalog_with_unknown_kind(restore_catalog):
    ethiocal.set_catalog(
        HighlightCatalog(ethiopic=[], gregorian=[], rules=[DynamicRule("x", "X", "ኤክስ", "lunar_phase")])
    )
    with pytest.raises(UnknownRuleKindError):
        ethiocal.get_highlights_for_gregorian_day(GregorianDate(2025, 1, 1))
