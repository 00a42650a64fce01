"""Top-level PowerModel API: wires the reservoir and conversion layers together."""

from geopower.defaults import ModelConstants, load_model_constants
from geopower.layers.conversion import conversion_efficiency, power_capacity
from geopower.layers.reservoir import stored_heat
from geopower.types import Factor, ParameterVector, SensitivityResult


def compute_power(params: ParameterVector, constants: ModelConstants) -> float:
    """Electrical power capacity [GWe] of a reservoir.

    Pure: no validation, no warnings. Out-of-range inputs (e.g. a reservoir
    temperature below the efficiency fit's zero) give negative or
    meaningless results that are returned unchanged.
    """
    # Layer 1: Heat in place
    q_total = stored_heat(
        area_km2=params.area_km2,
        thickness_km=params.thickness_km,
        temp_c=params.reservoir_temp_c,
        rock_density=params.rock_density,
        porosity=params.porosity,
        fluid_density=constants.fluid_density,
        fluid_specific_heat=constants.fluid_specific_heat,
        reference_temp_c=constants.reference_temp_c,
    )

    # Layer 2: Conversion to electric capacity
    eta_c = conversion_efficiency(params.reservoir_temp_c)
    return power_capacity(
        heat_j=q_total,
        recovery_factor_pct=params.recovery_factor_pct,
        efficiency=eta_c,
        capacity_factor_pct=params.capacity_factor_pct,
        plant_life_s=constants.plant_life_seconds,
    )


class PowerModel:
    def __init__(self, constants: ModelConstants = None):
        self.constants = constants or load_model_constants()

    def forward(self, params: ParameterVector) -> float:
        """Reservoir parameters -> power capacity [GWe]."""
        return compute_power(params, self.constants)

    def oat(
        self, factors: list[tuple[str, float]], perturbation: float = 0.10
    ) -> list[SensitivityResult]:
        """One-at-a-time sensitivity over (name, baseline_value) pairs."""
        from geopower.analysis.oat import run_oat

        return run_oat(factors, perturbation, self.constants)

    def sensitivity(self, params: ParameterVector) -> dict[str, float]:
        """Local elasticity of power w.r.t. each factor, via jax.grad."""
        from geopower.analysis.elasticity import elasticities

        return elasticities(params, self.constants)

    def sweep(
        self, params: ParameterVector, factor: Factor, values: list[float]
    ) -> list[float]:
        """Power for each value of a single factor, others held at `params`.

        Batched through jax.vmap in float32: expect ~1e-6 relative
        difference from forward(), which runs in float64.
        """
        from geopower.analysis.elasticity import power_sweep

        return power_sweep(params, self.constants, factor, values)
