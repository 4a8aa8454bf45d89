# tests/test_cli.py

import pytest

from ethiocal import cli


def test_date_shortcut(capsys):
    assert cli.main(["2025-01-07"]) == 0
    out = capsys.readouterr().out
    assert "2025-01-07 -> 2017-04-29 AM" in out


def test_to_gregorian_with_highlights(capsys):
    assert cli.main(["to-gregorian", "2017-04-29", "--highlights"]) == 0
    out = capsys.readouterr().out
    assert "2017-04-29 AM -> 2025-01-07" in out
    assert "genna" in out


def test_to_gregorian_amete_alem(capsys):
    assert cli.main(["to-gregorian", "7517-01-01", "--era", "AA"]) == 0
    assert "2024-09-11" in capsys.readouterr().out


def test_add(capsys):
    assert cli.main(["add", "2017-13-05", "--calendar", "ethiopic", "--months", "1"]) == 0
    assert capsys.readouterr().out.strip() == "2018-01-05 AM"

    assert cli.main(["add", "2024-02-29", "--years", "1", "--days", "1"]) == 0
    assert capsys.readouterr().out.strip() == "2025-03-01"


def test_progress(capsys):
    assert cli.main(["progress", "2025-12-31"]) == 0
    assert "1 of 365 days left, 99.73% completed" in capsys.readouterr().out


def test_easter(capsys):
    assert cli.main(["easter", "2025"]) == 0
    out = capsys.readouterr().out
    assert "2025-04-20" in out
    assert "2025-04-18" in out
    assert "2025-04-13" in out


def test_highlights_category(capsys):
    assert cli.main(["highlights", "--year", "2025", "--category", "observance"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 3
    assert "flag_day" in lines[-1]


def test_search(capsys):
    assert cli.main(["search", "irreechaa", "--year", "2025"]) == 0
    out = capsys.readouterr().out
    assert "irreechaa_finfinne" in out
    assert "irreechaa_bishoftu" in out

    assert cli.main(["search", "no such feast", "--year", "2025"]) == 0
    assert "(none)" in capsys.readouterr().out


def test_pretty_month(capsys):
    assert cli.main(["pretty-month", "--eth", "2017", "13"]) == 0
    out = capsys.readouterr().out
    assert "Ethiopic month  2017-13 AM" in out
    assert "09-06" in out


def test_feasts(capsys):
    assert cli.main(["feasts", "--from-year", "2025", "--to-year", "2025", "--rules", "fasika,eid_al_fitr"]) == 0
    out = capsys.readouterr().out
    assert "04-20" in out
    assert "03-30" in out


def test_round_trip(capsys):
    assert cli.main(["diag", "round-trip", "--N", "300"]) == 0
    assert "All round-trip tests passed." in capsys.readouterr().out


def test_package_error_exit_status(capsys):
    assert cli.main(["pretty-month", "--greg", "2025", "13"]) == 1
    assert "Invalid Gregorian month: 13" in capsys.readouterr().err


def test_usage_error():
    with pytest.raises(SystemExit) as exc:
        cli.main(["no-such-command"])
    assert exc.value.code == 2
