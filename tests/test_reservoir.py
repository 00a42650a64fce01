import pytest

from geopower.layers.reservoir import (
    fluid_heat,
    reservoir_volume,
    rock_heat,
    rock_specific_heat,
    stored_heat,
)


def test_rock_specific_heat_reference():
    """Cr(200 degC) = -3.5344 - 32.836 + 270.4 + 994.2 = 1228.2296 J/kg degC."""
    assert rock_specific_heat(200.0) == pytest.approx(1228.2296, rel=1e-12)


def test_rock_specific_heat_intercept():
    assert rock_specific_heat(0.0) == 994.2


def test_reservoir_volume_unit_conversion():
    """225 km^2 x 2.5 km = 2.25e8 m^2 x 2500 m = 5.625e11 m^3."""
    assert reservoir_volume(225.0, 2.5) == pytest.approx(5.625e11)


def test_no_heat_at_reference_temperature():
    assert stored_heat(225.0, 2.5, 15.0, 2700.0, 0.05, 1000.0, 4180.0, 15.0) == 0.0


def test_stored_heat_is_rock_plus_fluid():
    v = reservoir_volume(225.0, 2.5)
    q_r = rock_heat(v, 2700.0, 0.05, 200.0, 15.0)
    q_f = fluid_heat(v, 1000.0, 4180.0, 0.05, 200.0, 15.0)
    q_t = stored_heat(225.0, 2.5, 200.0, 2700.0, 0.05, 1000.0, 4180.0, 15.0)
    assert q_t == pytest.approx(q_r + q_f, rel=1e-12)
    assert q_t == pytest.approx(3.4958849115375e20, rel=1e-9)


def test_zero_porosity_has_no_fluid_heat():
    v = reservoir_volume(225.0, 2.5)
    assert fluid_heat(v, 1000.0, 4180.0, 0.0, 200.0, 15.0) == 0.0


def test_full_porosity_has_no_rock_heat():
    v = reservoir_volume(225.0, 2.5)
    assert rock_heat(v, 2700.0, 1.0, 200.0, 15.0) == 0.0


def test_stored_heat_linear_in_volume():
    base = stored_heat(100.0, 1.0, 200.0, 2700.0, 0.05, 1000.0, 4180.0, 15.0)
    double = stored_heat(200.0, 1.0, 200.0, 2700.0, 0.05, 1000.0, 4180.0, 15.0)
    assert double / base == pytest.approx(2.0, rel=1e-12)
