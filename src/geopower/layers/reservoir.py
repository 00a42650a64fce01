"""Layer 1: Reservoir, volumetric stored heat in rock and pore fluid.

Heat-in-place method: thermal energy stored in the reservoir volume above a
reference temperature, split between the rock matrix and the pore fluid.

  V  = A * h
  qR = rho_r * Cr(TR) * V * (1 - phi) * (TR - Tref)
  qF = rho_f * Cw     * V * phi       * (TR - Tref)

All functions are plain arithmetic so they trace under jax.grad / jax.vmap.
"""

KM2_TO_M2 = 1e6
KM_TO_M = 1e3


def rock_specific_heat(temp_c: float) -> float:
    """Rock specific heat [J/kg degC], cubic fit in reservoir temperature.

    Cr = -4.418e-7*T^3 - 8.209e-4*T^2 + 1.352*T + 994.2
    """
    t = temp_c
    return -4.418e-7 * t**3 - 8.209e-4 * t**2 + 1.352 * t + 994.2


def reservoir_volume(area_km2: float, thickness_km: float) -> float:
    """Bulk reservoir volume [m^3] from area [km^2] and thickness [km]."""
    return (area_km2 * KM2_TO_M2) * (thickness_km * KM_TO_M)


def rock_heat(
    volume: float,
    rock_density: float,
    porosity: float,
    temp_c: float,
    reference_temp_c: float,
) -> float:
    """Thermal energy stored in the rock matrix [J]."""
    cr = rock_specific_heat(temp_c)
    return rock_density * cr * volume * (1 - porosity) * (temp_c - reference_temp_c)


def fluid_heat(
    volume: float,
    fluid_density: float,
    fluid_specific_heat: float,
    porosity: float,
    temp_c: float,
    reference_temp_c: float,
) -> float:
    """Thermal energy stored in the pore fluid [J]."""
    return (
        fluid_density
        * fluid_specific_heat
        * volume
        * porosity
        * (temp_c - reference_temp_c)
    )


def stored_heat(
    area_km2: float,
    thickness_km: float,
    temp_c: float,
    rock_density: float,
    porosity: float,
    fluid_density: float,
    fluid_specific_heat: float,
    reference_temp_c: float,
) -> float:
    """Total heat in place qT = qR + qF [J]."""
    volume = reservoir_volume(area_km2, thickness_km)
    q_rock = rock_heat(volume, rock_density, porosity, temp_c, reference_temp_c)
    q_fluid = fluid_heat(
        volume, fluid_density, fluid_specific_heat, porosity, temp_c, reference_temp_c
    )
    return q_rock + q_fluid
