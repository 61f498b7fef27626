# tests/test_time.py

import random
from datetime import date
from types import SimpleNamespace

from calvn.core.time import day_of_year, from_jdn, to_jdn

def test_known_epochs():
    # J2000.0 civil date is January 1, 2000
    assert to_jdn(date(2000, 1, 1)) == 2451545
    # Reference Tet used by the engine
    assert to_jdn(date(2000, 2, 5)) == 2451580
    # Gregorian reform
    assert to_jdn(date(1582, 10, 15)) == 2299161

def test_jan_feb_shift():
    """January and February are counted as months 11 and 12 of the previous year."""
    assert to_jdn(date(2024, 3, 1)) - to_jdn(date(2024, 2, 28)) == 2
    assert to_jdn(date(2023, 3, 1)) - to_jdn(date(2023, 2, 28)) == 1
    assert to_jdn(date(2024, 1, 1)) - to_jdn(date(2023, 12, 31)) == 1

def test_jdn_date_roundtrip():
    random.seed(42)
    for _ in range(2000):
        jdn_in = random.randint(1721426, 5373484)
        assert to_jdn(from_jdn(jdn_in)) == jdn_in

def test_agrees_with_ordinal():
    for d in (date(1, 1, 1), date(1900, 3, 1), date(2024, 2, 29), date(9999, 12, 31)):
        assert to_jdn(d) - d.toordinal() == 1721425

def test_duck_typed_input_is_not_validated():
    bogus = SimpleNamespace(year=2023, month=2, day=30)
    assert to_jdn(bogus) == to_jdn(date(2023, 3, 2))

def test_day_of_year():
    assert day_of_year(date(2024, 1, 1)) == 1
    assert day_of_year(date(2024, 2, 18)) == 49
    assert day_of_year(date(2024, 12, 31)) == 366
