"""One-at-a-time (OAT) sensitivity analysis.

Each factor is scaled by (1 + perturbation) while every other factor stays at
its baseline value. The change in power capacity is recorded per factor, in
the order the factors are declared.
"""

import math

from geopower.defaults import ModelConstants
from geopower.model import compute_power
from geopower.types import (
    N_FACTORS,
    InvalidShapeError,
    ParameterVector,
    SensitivityResult,
)
from geopower.validation import check_parameter_domain


def perturb(
    baseline: ParameterVector, index: int, perturbation: float
) -> ParameterVector:
    """Scale entry `index` of `baseline` by (1 + perturbation), leave the rest."""
    value = baseline.to_tuple()[index]
    return baseline.with_value(index, value * (1 + perturbation))


def relative_change(absolute_change: float, baseline_power: float) -> float:
    """absolute_change / baseline_power, or nan when the baseline is zero."""
    if baseline_power == 0:
        return math.nan
    return absolute_change / baseline_power


def run_oat(
    factors: list[tuple[str, float]],
    perturbation: float,
    constants: ModelConstants,
    check_domain: bool = True,
) -> list[SensitivityResult]:
    """Run the OAT sweep.

    Args:
        factors: (name, baseline_value) pairs, in ParameterVector order.
        perturbation: Fractional change applied to one factor at a time
            (0.10 = +10%).
        constants: Fixed model inputs.
        check_domain: Warn about out-of-range baseline values. Callers
            holding an already validated OATConfig pass False.

    Returns:
        One SensitivityResult per factor, in the same order as `factors`.

    Raises:
        InvalidShapeError: If `factors` does not hold exactly 7 pairs.
    """
    factors = list(factors)
    if len(factors) != N_FACTORS:
        raise InvalidShapeError(
            f"OAT analysis needs exactly {N_FACTORS} factors, got {len(factors)}"
        )

    baseline = ParameterVector.from_sequence(value for _, value in factors)
    if check_domain:
        check_parameter_domain(baseline, constants, stacklevel=3)

    # compute_power is pure, so the baseline is evaluated once for all factors
    baseline_power = compute_power(baseline, constants)

    results = []
    for index, (name, _) in enumerate(factors):
        perturbed_power = compute_power(
            perturb(baseline, index, perturbation), constants
        )
        absolute_change = abs(perturbed_power - baseline_power)
        results.append(
            SensitivityResult(
                name=name,
                baseline_power=baseline_power,
                perturbed_power=perturbed_power,
                absolute_change=absolute_change,
                relative_change=relative_change(absolute_change, baseline_power),
            )
        )
    return results
