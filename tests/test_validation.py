"""Tests for OATConfig / ReservoirInput validation."""

import warnings

import pytest
from pydantic import ValidationError

from geopower.defaults import DEFAULT_BASE_VALUES, ModelConstants
from geopower.types import ParameterDomainWarning, ParameterVector
from geopower.validation import (
    OATConfig,
    ReservoirInput,
    check_parameter_domain,
    load_oat_config,
)


def _params(**overrides):
    values = dict(
        area_km2=225.0,
        thickness_km=2.5,
        reservoir_temp_c=200.0,
        rock_density=2700.0,
        porosity=0.05,
        recovery_factor_pct=11.0,
        capacity_factor_pct=92.7,
    )
    values.update(overrides)
    return values


class TestDomainDiagnostics:
    """Suspicious physics warns, never raises."""

    def test_reference_reservoir_is_clean(self):
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter("always")
            msgs = check_parameter_domain(ParameterVector(**_params()))
        assert msgs == []
        assert not any(issubclass(x.category, ParameterDomainWarning) for x in w)

    @pytest.mark.parametrize(
        "field, value",
        [
            ("porosity", 1.2),
            ("porosity", -0.1),
            ("recovery_factor_pct", 120.0),
            ("capacity_factor_pct", -5.0),
        ],
    )
    def test_out_of_range_warns(self, field, value):
        with pytest.warns(ParameterDomainWarning, match=field):
            msgs = check_parameter_domain(ParameterVector(**_params(**{field: value})))
        assert len(msgs) == 1

    def test_negative_efficiency_warns(self):
        with pytest.warns(ParameterDomainWarning, match="negative conversion"):
            check_parameter_domain(ParameterVector(**_params(reservoir_temp_c=20.0)))

    def test_temperature_at_reference_warns(self):
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter("always")
            msgs = check_parameter_domain(
                ParameterVector(**_params(reservoir_temp_c=15.0))
            )
        assert len(msgs) == 2  # negative efficiency + no stored heat
        assert any("reference temperature" in str(x.message) for x in w)

    def test_reference_temperature_from_constants(self):
        constants = ModelConstants(reference_temp_c=250.0)
        with pytest.warns(ParameterDomainWarning, match="reference temperature"):
            check_parameter_domain(ParameterVector(**_params()), constants)


class TestReservoirInput:
    def test_valid_input(self):
        inp = ReservoirInput(**_params())
        assert inp.to_vector() == ParameterVector(**_params())

    def test_out_of_range_is_accepted_with_warning(self):
        with pytest.warns(ParameterDomainWarning, match="porosity"):
            inp = ReservoirInput(**_params(porosity=1.5))
        assert inp.porosity == 1.5

    def test_non_finite_rejected(self):
        with pytest.raises(ValidationError, match="area_km2"):
            ReservoirInput(**_params(area_km2=float("inf")))

    def test_missing_field_rejected(self):
        values = _params()
        del values["porosity"]
        with pytest.raises(ValidationError, match="porosity"):
            ReservoirInput(**values)


class TestOATConfig:
    def test_defaults(self):
        cfg = OATConfig()
        assert cfg.base_values == list(DEFAULT_BASE_VALUES)
        assert cfg.perturbation == 0.10
        assert cfg.num_simulations is None
        assert cfg.factors[0] == "Area"
        assert cfg.to_constants() == ModelConstants()

    def test_factor_pairs_in_order(self):
        cfg = OATConfig()
        pairs = cfg.factor_pairs()
        assert len(pairs) == 7
        assert pairs[2] == ("Reservoir Temp", 200.0)

    def test_wrong_vector_length_rejected(self):
        with pytest.raises(ValidationError, match="InvalidShape"):
            OATConfig(base_values=[1.0, 2.0, 3.0])

    def test_factor_name_count_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="InvalidShape"):
            OATConfig(factors=["Area", "Thickness"])

    def test_non_finite_perturbation_rejected(self):
        with pytest.raises(ValidationError, match="perturbation"):
            OATConfig(perturbation=float("nan"))

    @pytest.mark.parametrize(
        "field", ["plant_life_yr", "fluid_specific_heat", "fluid_density"]
    )
    def test_constants_must_be_positive(self, field):
        with pytest.raises(ValidationError, match=field):
            OATConfig(**{field: 0.0})

    def test_num_simulations_accepted_and_ignored(self):
        cfg = OATConfig(num_simulations=100000)
        assert cfg.num_simulations == 100000
        assert cfg.to_constants() == OATConfig().to_constants()

    def test_num_simulations_must_be_positive(self):
        with pytest.raises(ValidationError, match="num_simulations"):
            OATConfig(num_simulations=0)

    def test_domain_warning_on_baseline(self):
        values = list(DEFAULT_BASE_VALUES)
        values[4] = 2.0  # porosity
        with pytest.warns(ParameterDomainWarning, match="porosity"):
            OATConfig(base_values=values)


def test_load_oat_config_bundled():
    cfg = load_oat_config()
    assert cfg.base_values == list(DEFAULT_BASE_VALUES)
    assert cfg.num_simulations == 100000
    assert cfg.plant_life_yr == 25.0
    assert cfg.factors[-1] == "Capacity Factor"


def test_load_oat_config_from_file(tmp_path):
    run = tmp_path / "run.yaml"
    run.write_text("perturbation: 0.2\nplant_life_yr: 30\n")
    cfg = load_oat_config(run)
    assert cfg.perturbation == 0.2
    assert cfg.plant_life_yr == 30  # run file wins over constants file
    assert cfg.base_values == list(DEFAULT_BASE_VALUES)
