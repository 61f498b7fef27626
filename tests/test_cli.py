# tests/test_cli.py

from calvn.cli import main

def test_day(capsys):
    assert main(["day", "2024-02-10"]) == 0
    out = capsys.readouterr().out
    assert "2024-02-10  ->  01/01/2024" in out
    assert "Tháng Giêng năm 2024" in out

def test_date_shorthand_with_attributes(capsys):
    assert main(["2023-01-21", "--attr", "can_chi"]) == 0
    out = capsys.readouterr().out
    assert "30/12/2022" in out
    assert "can_chi: Nhâm Dần" in out

def test_day_leap_marker(capsys):
    assert main(["day", "2024-12-31", "--debug"]) == 0
    out = capsys.readouterr().out
    assert "01/11L/2024" in out
    assert "Nhuận Tháng Mười Một" in out
    assert "mode: exact" in out

def test_new_year(capsys):
    assert main(["new-year", "2025"]) == 0
    assert capsys.readouterr().out.strip() == "2025-01-29"

def test_new_year_astro(capsys):
    assert main(["new-year", "1999", "--engine", "vietnam-astro"]) == 0
    assert capsys.readouterr().out.strip() == "1999-02-16"

def test_next_tet(capsys):
    assert main(["next-tet", "2024-02-11"]) == 0
    assert capsys.readouterr().out.strip() == "2025-01-29  (353 days)"

def test_new_years_table(capsys):
    assert main(["new-years", "--from-year", "2020", "--to-year", "2023"]) == 0
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert lines[0].split() == ["Year", "Table", "Astro", "Diff"]
    assert any(l.split() == ["2023", "01-22", "01-21", "-1"] for l in lines)
    assert "1 of 4 years differ" in out

def test_leap_months(capsys):
    assert main(["leap-months", "--from-year", "2023", "--to-year", "2024"]) == 0
    out = capsys.readouterr().out
    assert "2023  -" in out
    assert "2024  leap 11  starts 2024-12-31 (30 days)" in out
    assert "1 leap years in 2" in out

def test_leap_months_unreached(capsys):
    assert main(["leap-months", "--from-year", "2026", "--to-year", "2026"]) == 0
    out = capsys.readouterr().out
    assert "2026  leap 12  not reached before the next new year" in out

def test_verbose_flag(capsys):
    assert main(["-v", "new-year", "1999"]) == 0
    assert capsys.readouterr().out.strip() == "1999-02-16"
