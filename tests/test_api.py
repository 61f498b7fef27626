# tests/test_api.py

from datetime import date

import pytest

import calvn
from calvn.core.errors import (
    CalvnError,
    DuplicateEngineError,
    UnknownAttributeError,
    UnknownEngineError,
)
from calvn.engines.specs import VIETNAM
from calvn.reference.new_years import VN_TET_TABLE

def test_bundled_engines():
    assert {"vietnam", "vietnam-astro"} <= set(calvn.list_engines())
    assert calvn.get_engine().id.name == "vietnam"

def test_module_level_conversions():
    assert calvn.lunar_new_year(2025) == date(2025, 1, 29)
    assert calvn.lunar_new_year(2023, engine="vietnam-astro") == date(2023, 1, 21)
    t = calvn.to_lunar_date(date(2024, 9, 17))
    assert (t.year, t.month, t.day) == (2024, 8, 15)
    assert t.label() == "Tháng Tám năm 2024"
    assert calvn.next_new_year(date(2025, 1, 30)) == date(2026, 2, 17)
    assert calvn.month_heading(2024, 2) == "Tháng Giêng năm 2024"
    assert calvn.leap_month_info(2024).leap_month == 11
    assert len(calvn.lunar_months(2023)) == 12

def test_lunar_date_is_immutable():
    t = calvn.to_lunar_date(date(2024, 2, 10))
    with pytest.raises(AttributeError):
        t.day = 2

def test_day_info_attributes():
    info = calvn.day_info(date(2024, 2, 10), attributes=("weekday", "can_chi"))
    assert info.attributes == {"weekday": 5, "can_chi": "Giáp Thìn"}
    assert info.debug is None

def test_can_chi_uses_lunar_year():
    info = calvn.day_info(date(2023, 1, 21), attributes=("can_chi",))
    assert info.lunar.year == 2022
    assert info.attributes["can_chi"] == "Nhâm Dần"

def test_unknown_attribute():
    with pytest.raises(UnknownAttributeError):
        calvn.day_info(date(2024, 2, 10), attributes=("zodiac",))

def test_unknown_engine():
    with pytest.raises(UnknownEngineError) as ei:
        calvn.to_lunar_date(date(2024, 2, 10), engine="chinese")
    assert isinstance(ei.value, KeyError)
    assert isinstance(ei.value, CalvnError)

def test_register_custom_engine():
    table = VN_TET_TABLE.extend({2019: date(2019, 2, 5)}, version="2019-2035")
    spec = VIETNAM.tweak(table=table)
    calvn.register_engine("vietnam-2019", calvn.make_engine(spec), overwrite=True)

    assert calvn.lunar_new_year(2019, engine="vietnam-2019") == date(2019, 2, 5)
    t = calvn.to_lunar_date(date(2019, 2, 5), engine="vietnam-2019")
    assert (t.year, t.month, t.day) == (2019, 1, 1)
    assert calvn.engine_info("vietnam-2019")["table_version"] == "2019-2035"

    with pytest.raises(DuplicateEngineError):
        calvn.register_engine("vietnam-2019", calvn.make_engine(spec))

def test_explain_has_debug_payload():
    out = calvn.explain(date(2024, 2, 10))
    assert out["lunar"].day == 1
    assert out["debug"]["mode"] == "exact"
    assert out["debug"]["days_since_new_year"] == 0
