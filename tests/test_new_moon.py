# tests/test_new_moon.py

import pytest

from calvn.engines.new_moon import NewMoonApproximator
from calvn.engines.params import AstroParams

@pytest.fixture
def nm():
    return NewMoonApproximator(AstroParams())

def test_epoch_lunation(nm):
    # k=0 mean new moon: JDE 2451550.09766 (2000-01-06)
    assert nm.mean_new_moon(0) == pytest.approx(2451550.09766, abs=1e-9)
    assert nm.nearest_new_moon(2451580) == 2451550

def test_lunation_index_counts_from_reference_tet(nm):
    assert nm.lunation_index(2451580) == 0
    assert nm.lunation_index(2451579.9) == -1
    assert nm.lunation_index(2451580 + 295.4) == 10
    assert nm.nearest_new_moon(2451579.9) == 2451521

def test_polynomial_terms_at_one_century(nm):
    k = 1236.85  # t = 1
    expected = 2451550.09766 + 29.530588853 * k + 0.00015437 - 0.000000150 + 0.00000000073
    assert nm.mean_new_moon(k) == pytest.approx(expected, abs=1e-9)

def test_successive_lunations_are_29_or_30_days(nm):
    S = 29.530588853
    for i in range(-2000, 2000):
        jd = 2451580 + i * S
        dim = nm.nearest_new_moon(jd + S) - nm.nearest_new_moon(jd)
        assert dim in (29, 30)

def test_custom_epoch_is_honoured():
    shifted = NewMoonApproximator(AstroParams(new_moon_epoch_jd=2451551.09766))
    assert shifted.nearest_new_moon(2451580) == 2451551

def test_params_validation():
    with pytest.raises(ValueError):
        AstroParams(synodic_month=0)
    with pytest.raises(ValueError):
        AstroParams(poly=(0.1, 0.2))
    with pytest.raises(ValueError):
        AstroParams(window_start=(2, 18), window_end=(1, 15))
