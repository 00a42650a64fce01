"""Load and manage default constants and run configuration from YAML files."""

import yaml
from dataclasses import dataclass, fields, replace
from pathlib import Path

_DATA_DIR = Path(__file__).parent / "data" / "defaults"

SECONDS_PER_YEAR = 365 * 24 * 3600

# Reference reservoir, in Factor order:
# area km^2, thickness km, temp degC, rock density kg/m^3, porosity,
# recovery factor %, capacity factor %
DEFAULT_BASE_VALUES = (225.0, 2.5, 200.0, 2700.0, 0.05, 11.0, 92.7)
DEFAULT_PERTURBATION = 0.10


@dataclass(frozen=True)
class ModelConstants:
    """Fixed (non-perturbed) model inputs. Immutable, use .replace() for overrides."""

    plant_life_yr: float = 25.0
    fluid_specific_heat: float = 4180.0  # J/kg degC
    fluid_density: float = 1000.0  # kg/m^3
    reference_temp_c: float = 15.0  # degC

    @property
    def plant_life_seconds(self) -> float:
        return self.plant_life_yr * SECONDS_PER_YEAR

    def replace(self, **kwargs):
        return replace(self, **kwargs)


def load_model_constants(path: Path = None) -> ModelConstants:
    """Load model constants from YAML, falling back to dataclass defaults."""
    if path is None:
        path = _DATA_DIR / "model_constants.yaml"
    path = Path(path)
    if path.exists():
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        valid_fields = {f.name for f in fields(ModelConstants)}
        return ModelConstants(**{k: v for k, v in data.items() if k in valid_fields})
    return ModelConstants()


def load_oat_defaults(path: Path = None) -> dict:
    """Load the raw OAT run settings (factors, baseline, perturbation)."""
    if path is None:
        path = _DATA_DIR / "oat_baseline.yaml"
    path = Path(path)
    if path.exists():
        with open(path) as f:
            return yaml.safe_load(f) or {}
    return {}
