# tests/test_new_year.py

from datetime import date

import pytest

from calvn.engines.new_moon import NewMoonApproximator
from calvn.engines.new_year import LunarNewYearResolver
from calvn.engines.params import AstroParams
from calvn.reference.new_years import EMPTY_TABLE, VN_TET_TABLE, NewYearTable

@pytest.fixture
def params():
    return AstroParams()

@pytest.fixture
def resolver(params):
    return LunarNewYearResolver(params, VN_TET_TABLE, NewMoonApproximator(params))

@pytest.fixture
def astro(params):
    return LunarNewYearResolver(params, EMPTY_TABLE, NewMoonApproximator(params))

def test_every_table_year_is_returned_exactly(resolver):
    for year in VN_TET_TABLE.years():
        d, mode = resolver.resolve(year)
        assert d == VN_TET_TABLE.get(year)
        assert mode == "exact"

def test_table_hit_2025(resolver):
    assert resolver.lunar_new_year(2025) == date(2025, 1, 29)

def test_table_entry_outside_window_is_kept(resolver):
    # 2034-02-19 lies after Feb 18 but the table is authoritative
    assert resolver.lunar_new_year(2034) == date(2034, 2, 19)

def test_fallback_1999_is_inside_window(resolver):
    d, mode = resolver.resolve(1999)
    assert date(1999, 1, 15) < d < date(1999, 2, 18)
    assert d == date(1999, 2, 16)
    assert mode == "corrected"

def test_fallback_reproduces_reference_tet(astro):
    assert astro.lunar_new_year(2000) == date(2000, 2, 5)

@pytest.mark.parametrize(
    "year, expected",
    [
        (1900, date(1900, 1, 30)),
        (2019, date(2019, 2, 4)),
        (2023, date(2023, 1, 21)),
        (2100, date(2100, 2, 9)),
    ],
)
def test_fallback_values(astro, year, expected):
    assert astro.lunar_new_year(year) == expected

def test_fallback_always_in_window_and_year(astro):
    for year in range(1, 10000, 7):
        d = astro.lunar_new_year(year)
        assert d.year == year
        assert date(year, 1, 15) <= d <= date(year, 2, 18)

def test_approx_jd_extrapolates_from_reference(params, astro):
    assert astro.approx_jd(2000) == params.reference_jdn
    assert astro.approx_jd(2001) == pytest.approx(2451580 + 365.24219878 - 12 * 29.530588853)

def test_injected_table_takes_precedence(params):
    table = VN_TET_TABLE.extend({2019: date(2019, 2, 5)}, version="2019-2035")
    r = LunarNewYearResolver(params, table, NewMoonApproximator(params))
    assert r.lunar_new_year(2019) == date(2019, 2, 5)
    assert r.lunar_new_year(2025) == date(2025, 1, 29)
    assert 2019 not in VN_TET_TABLE

def test_table_rejects_mismatched_year():
    with pytest.raises(ValueError):
        NewYearTable(version="bad", entries={2024: date(2023, 2, 10)})

def test_table_is_read_only():
    with pytest.raises(TypeError):
        VN_TET_TABLE.entries[2036] = date(2036, 1, 28)
    assert len(VN_TET_TABLE) == 16
    assert list(VN_TET_TABLE)[0] == 2020
