"""Layer 2: Conversion, heat in place to electrical power capacity."""

PCT = 100.0
W_TO_GW = 1e9


def conversion_efficiency(temp_c: float) -> float:
    """Thermal-to-electric conversion efficiency [fraction].

    eta_c = (0.0935 * TR - 2.3266) / 100. Goes negative below ~24.9 degC.
    """
    return (0.0935 * temp_c - 2.3266) / PCT


def power_capacity(
    heat_j: float,
    recovery_factor_pct: float,
    efficiency: float,
    capacity_factor_pct: float,
    plant_life_s: float,
) -> float:
    """Electrical power capacity [GWe].

    P = (qT * Rf * eta_c) / (F * t_life) / 1e9
    """
    rf = recovery_factor_pct / PCT
    f = capacity_factor_pct / PCT
    return (heat_j * rf * efficiency) / (f * plant_life_s) / W_TO_GW
