"""Local sensitivities and one-factor sweeps through the JAX-traced model.

compute_power is plain arithmetic, so jax.grad gives exact derivatives and
jax.vmap evaluates many values of one factor in a single call.
"""

import math

import jax
import jax.numpy as jnp

from geopower.defaults import ModelConstants
from geopower.model import compute_power
from geopower.types import Factor, ParameterVector


def power_gradient(
    params: ParameterVector, constants: ModelConstants
) -> dict[str, float]:
    """d(power)/d(factor) in GWe per factor unit, keyed by factor label."""
    values = params.to_tuple()
    grads = {}
    for factor in Factor:
        index = factor.index

        def _power_at(x, index=index):
            return compute_power(params.with_value(index, x), constants)

        grads[factor.label] = float(jax.grad(_power_at)(float(values[index])))
    return grads


def elasticities(
    params: ParameterVector, constants: ModelConstants
) -> dict[str, float]:
    """Elasticity = % change in power per 1% change in factor.

    e = (dP/dx) * x / P. All nan when the baseline power is zero.
    """
    base_power = compute_power(params, constants)
    values = params.to_tuple()
    grads = power_gradient(params, constants)
    if base_power == 0:
        return {label: math.nan for label in grads}
    return {
        factor.label: grads[factor.label] * values[factor.index] / base_power
        for factor in Factor
    }


def power_sweep(
    params: ParameterVector,
    constants: ModelConstants,
    factor: Factor,
    values: list[float],
) -> list[float]:
    """Power [GWe] with `factor` set to each of `values`, others fixed.

    Evaluated under jax in float32, so values agree with compute_power
    (float64) to about 1e-6 relative, not bit for bit.
    """
    index = factor.index

    def _power_at(x):
        return compute_power(params.with_value(index, x), constants)

    powers = jax.vmap(_power_at)(jnp.asarray(values, dtype=jnp.float32))
    return [float(p) for p in powers]
