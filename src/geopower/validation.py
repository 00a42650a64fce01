"""Input validation for the geothermal power model.

Two levels, neither of which rejects out-of-range physics:
- Field-level constraints on run configuration (pydantic Field)
- Domain diagnostics on reservoir parameters (ParameterDomainWarning)

Only malformed configuration (wrong vector length, non-finite numbers,
non-positive constants) is an error.
"""

import warnings
from dataclasses import fields

from pydantic import BaseModel, ConfigDict, Field, model_validator

from geopower.defaults import (
    DEFAULT_BASE_VALUES,
    DEFAULT_PERTURBATION,
    ModelConstants,
    load_model_constants,
    load_oat_defaults,
)
from geopower.layers.conversion import conversion_efficiency
from geopower.types import N_FACTORS, Factor, ParameterDomainWarning, ParameterVector


def check_parameter_domain(
    params: ParameterVector,
    constants: ModelConstants | None = None,
    stacklevel: int = 2,
) -> list[str]:
    """Warn about physically suspicious inputs. Never raises.

    `stacklevel` is passed to warnings.warn; callers that wrap this check
    raise it so the warning points at their own caller.

    Returns the list of warning messages emitted.
    """
    constants = constants or ModelConstants()
    messages = []

    if not (0.0 <= params.porosity <= 1.0):
        messages.append(f"porosity = {params.porosity} is outside [0, 1]")
    if not (0.0 <= params.recovery_factor_pct <= 100.0):
        messages.append(
            f"recovery_factor_pct = {params.recovery_factor_pct} is outside [0, 100]"
        )
    if not (0.0 <= params.capacity_factor_pct <= 100.0):
        messages.append(
            f"capacity_factor_pct = {params.capacity_factor_pct} is outside [0, 100]"
        )
    eta_c = conversion_efficiency(params.reservoir_temp_c)
    if eta_c < 0:
        messages.append(
            f"reservoir_temp_c = {params.reservoir_temp_c} gives a negative "
            f"conversion efficiency ({eta_c:.4f})"
        )
    if params.reservoir_temp_c <= constants.reference_temp_c:
        messages.append(
            f"reservoir_temp_c = {params.reservoir_temp_c} is not above the "
            f"reference temperature ({constants.reference_temp_c}), "
            f"no recoverable stored heat"
        )

    for msg in messages:
        warnings.warn(msg, ParameterDomainWarning, stacklevel=stacklevel)
    return messages


class ReservoirInput(BaseModel):
    """Validated reservoir parameters. Domain problems warn, they do not fail."""

    model_config = ConfigDict(allow_inf_nan=False)

    area_km2: float
    thickness_km: float
    reservoir_temp_c: float
    rock_density: float
    porosity: float
    recovery_factor_pct: float
    capacity_factor_pct: float

    @model_validator(mode="after")
    def check_domain(self):
        check_parameter_domain(self.to_vector())
        return self

    def to_vector(self) -> ParameterVector:
        return ParameterVector(
            **{factor.value: getattr(self, factor.value) for factor in Factor}
        )


class OATConfig(BaseModel):
    """Validated configuration for a one-at-a-time sensitivity run.

    `num_simulations` is accepted for compatibility with older run files and
    has no effect: the power model is deterministic.
    """

    model_config = ConfigDict(allow_inf_nan=False)

    factors: list[str] = Field(default_factory=lambda: [f.label for f in Factor])
    base_values: list[float] = Field(
        default_factory=lambda: list(DEFAULT_BASE_VALUES)
    )
    perturbation: float = DEFAULT_PERTURBATION
    num_simulations: int | None = Field(default=None, ge=1)

    # --- Model constants ---
    plant_life_yr: float = Field(default=25.0, gt=0)
    fluid_specific_heat: float = Field(default=4180.0, gt=0)
    fluid_density: float = Field(default=1000.0, gt=0)
    reference_temp_c: float = 15.0

    @model_validator(mode="after")
    def check_shape_and_domain(self):
        """Wrong vector length is fatal; suspicious values only warn."""
        if len(self.base_values) != N_FACTORS:
            raise ValueError(
                f"InvalidShape: base_values must have exactly {N_FACTORS} "
                f"entries, got {len(self.base_values)}"
            )
        if len(self.factors) != len(self.base_values):
            raise ValueError(
                f"InvalidShape: {len(self.factors)} factor names for "
                f"{len(self.base_values)} base_values"
            )
        check_parameter_domain(self.baseline(), self.to_constants())
        return self

    def baseline(self) -> ParameterVector:
        return ParameterVector.from_sequence(self.base_values)

    def to_constants(self) -> ModelConstants:
        return ModelConstants(
            plant_life_yr=self.plant_life_yr,
            fluid_specific_heat=self.fluid_specific_heat,
            fluid_density=self.fluid_density,
            reference_temp_c=self.reference_temp_c,
        )

    def factor_pairs(self) -> list[tuple[str, float]]:
        """(name, baseline_value) pairs in declared order."""
        return list(zip(self.factors, self.base_values))


def load_oat_config(path=None, constants_path=None) -> OATConfig:
    """Build an OATConfig from the default YAML files (or the given paths)."""
    data = dict(load_oat_defaults(path))
    constants = load_model_constants(constants_path)
    for f in fields(ModelConstants):
        data.setdefault(f.name, getattr(constants, f.name))
    return OATConfig(**data)
