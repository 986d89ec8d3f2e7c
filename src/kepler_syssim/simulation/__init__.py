"""Simulation pipeline: generate, prune and observe physical catalogs."""

from kepler_syssim.simulation.diagnostics import (
    calc_prob_detect_list,
    calc_snr_list,
    run_catalog_self_check,
)
from kepler_syssim.simulation.models import (
    DetectionModel,
    ObservationScheme,
    SimulationModel,
    TargetGenerator,
    TargetObserver,
)
from kepler_syssim.simulation.observe import (
    TargetObsBuffer,
    observe_targets,
    observe_targets_single_obs,
    observe_targets_sky_avg,
    observe_targets_with_scheme,
    simulated_read_kepler_observations,
)
from kepler_syssim.simulation.physical_catalog import (
    build_physical_catalog,
    generate_physical_catalog,
)
from kepler_syssim.simulation.pruning import prune_undetected_planets
from kepler_syssim.simulation.rng import get_rng, seed_rng

__all__ = [
    "DetectionModel",
    "ObservationScheme",
    "SimulationModel",
    "TargetGenerator",
    "TargetObserver",
    "TargetObsBuffer",
    "build_physical_catalog",
    "calc_prob_detect_list",
    "calc_snr_list",
    "generate_physical_catalog",
    "get_rng",
    "observe_targets",
    "observe_targets_single_obs",
    "observe_targets_sky_avg",
    "observe_targets_with_scheme",
    "prune_undetected_planets",
    "run_catalog_self_check",
    "seed_rng",
    "simulated_read_kepler_observations",
]
