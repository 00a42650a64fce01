import math
from dataclasses import astuple, dataclass, fields, replace
from enum import Enum


class InvalidShapeError(ValueError):
    """Raised when a parameter vector or factor list is not exactly 7 long."""


class ParameterDomainWarning(UserWarning):
    """Input is outside its physical range but is still computed as-is."""


class Factor(Enum):
    AREA = "area_km2"
    THICKNESS = "thickness_km"
    RESERVOIR_TEMP = "reservoir_temp_c"
    ROCK_DENSITY = "rock_density"
    POROSITY = "porosity"
    RECOVERY_FACTOR = "recovery_factor_pct"
    CAPACITY_FACTOR = "capacity_factor_pct"

    @property
    def label(self) -> str:
        """Display name used in reports and plots."""
        return _FACTOR_LABEL[self]

    @property
    def unit(self) -> str:
        return _FACTOR_UNIT[self]

    @property
    def index(self) -> int:
        """Position of this factor in a ParameterVector."""
        return list(Factor).index(self)


_FACTOR_LABEL = {
    Factor.AREA: "Area",
    Factor.THICKNESS: "Thickness",
    Factor.RESERVOIR_TEMP: "Reservoir Temp",
    Factor.ROCK_DENSITY: "Rock Density",
    Factor.POROSITY: "Porosity",
    Factor.RECOVERY_FACTOR: "Recovery Factor",
    Factor.CAPACITY_FACTOR: "Capacity Factor",
}

_FACTOR_UNIT = {
    Factor.AREA: "km^2",
    Factor.THICKNESS: "km",
    Factor.RESERVOIR_TEMP: "degC",
    Factor.ROCK_DENSITY: "kg/m^3",
    Factor.POROSITY: "fraction",
    Factor.RECOVERY_FACTOR: "%",
    Factor.CAPACITY_FACTOR: "%",
}

N_FACTORS = len(Factor)


@dataclass(frozen=True)
class ParameterVector:
    """The seven reservoir inputs, in Factor order."""

    area_km2: float  # Reservoir area [km^2]
    thickness_km: float  # Reservoir thickness [km]
    reservoir_temp_c: float  # Reservoir temperature [degC]
    rock_density: float  # Rock density [kg/m^3]
    porosity: float  # Porosity [fraction 0-1]
    recovery_factor_pct: float  # Recovery factor [% 0-100]
    capacity_factor_pct: float  # Capacity factor [% 0-100]

    @classmethod
    def from_sequence(cls, values) -> "ParameterVector":
        values = list(values)
        if len(values) != N_FACTORS:
            raise InvalidShapeError(
                f"Parameter vector must have exactly {N_FACTORS} values, "
                f"got {len(values)}"
            )
        return cls(*values)

    def to_tuple(self) -> tuple:
        return astuple(self)

    def with_value(self, index: int, value: float) -> "ParameterVector":
        """Copy of this vector with only entry `index` replaced."""
        name = fields(self)[index].name
        return replace(self, **{name: value})

    def __len__(self) -> int:
        return N_FACTORS


@dataclass(frozen=True)
class SensitivityResult:
    """Outcome of perturbing a single factor. Powers in GWe."""

    name: str
    baseline_power: float
    perturbed_power: float
    absolute_change: float
    relative_change: float  # absolute_change / baseline_power, nan if baseline is 0

    @property
    def relative_change_pct(self) -> float:
        return self.relative_change * 100

    @property
    def is_degenerate(self) -> bool:
        """True when the relative change could not be computed."""
        return not math.isfinite(self.relative_change)
