import os as _os

# The model is scalar arithmetic; keep jax on the CPU unless told otherwise.
_os.environ.setdefault("JAX_PLATFORMS", "cpu")

from geopower.analysis.oat import run_oat
from geopower.defaults import (
    ModelConstants as ModelConstants,
)
from geopower.defaults import (
    load_model_constants as load_model_constants,
)
from geopower.model import PowerModel as PowerModel
from geopower.model import compute_power as compute_power
from geopower.types import (
    Factor as Factor,
)
from geopower.types import (
    InvalidShapeError as InvalidShapeError,
)
from geopower.types import (
    ParameterDomainWarning as ParameterDomainWarning,
)
from geopower.types import (
    ParameterVector as ParameterVector,
)
from geopower.types import (
    SensitivityResult,
)
from geopower.validation import OATConfig, load_oat_config


def run_analysis(config: OATConfig | None = None) -> list[SensitivityResult]:
    """Run the OAT analysis for `config` (default: the bundled reference run)."""
    if config is None:
        config = load_oat_config()
    return run_oat(
        config.factor_pairs(),
        config.perturbation,
        config.to_constants(),
        check_domain=False,  # OATConfig already warned on construction
    )
