# tests/test_cli.py

import pytest

from eracal.cli import main


def test_list(capsys):
    assert main(["list"]) == 0
    out = capsys.readouterr().out
    assert "ThaiBuddhist" in out and "buddhist" in out
    assert "offset=+543" in out
    assert "offset=-1911" in out


def test_day(capsys):
    assert main(["day", "1941-01-01", "--calendar", "buddhist", "--locale", "th"]) == 0
    out = capsys.readouterr().out
    assert "ThaiBuddhist BE 2484-01-01" in out
    assert "พุทธศักราช" in out
    assert "leap year     : False" in out


def test_bare_date_shorthand(capsys):
    assert main(["2024-05-01"]) == 0
    assert "ThaiBuddhist BE 2567-05-01" in capsys.readouterr().out


def test_iso(capsys):
    assert main(["iso", "2484-01-01", "--calendar", "ThaiBuddhist"]) == 0
    assert capsys.readouterr().out.strip() == "1941-01-01"

    assert main(["iso", "0113-05-01", "--calendar", "roc"]) == 0
    assert capsys.readouterr().out.strip() == "2024-05-01"


def test_signed_years(capsys):
    assert main(["iso", "-0001-01-01", "--calendar", "ThaiBuddhist"]) == 0
    assert capsys.readouterr().out.strip() == "-0544-01-01"

    assert main(["iso", "--calendar", "roc", "+0113-05-01"]) == 0
    assert capsys.readouterr().out.strip() == "2024-05-01"

    assert main(["-0543-01-01"]) == 0
    out = capsys.readouterr().out
    assert "ThaiBuddhist BEFORE_BE 1-01-01" in out
    assert "proleptic year: 0" in out


def test_eras(capsys):
    assert main(["eras", "ThaiBuddhist", "--style", "short", "--locale", "th-TH"]) == 0
    out = capsys.readouterr().out
    assert "BEFORE_BE" in out and "พ.ศ." in out
    assert "year-of-era: 1 - 999999457/1000000542" in out


def test_verbose_flag(capsys):
    assert main(["-v", "list"]) == 0
    assert "Minguo" in capsys.readouterr().out


def test_unknown_command():
    with pytest.raises(SystemExit):
        main(["convert"])


def test_diag_round_trip(capsys):
    assert main(["diag", "round-trip", "--N", "200", "--start-year", "-3000", "--end-year", "3000"]) == 0
    assert "All round-trip tests passed." in capsys.readouterr().out
