"""Debugging helpers for simulated catalogs.

Only the first planetary system of each target is inspected, matching the
single-system targets produced by the standard generators.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from kepler_syssim.compute.geometry import semimajor_axis
from kepler_syssim.errors import InvariantViolationError
from kepler_syssim.simulation.observe import simulated_read_kepler_observations
from kepler_syssim.simulation.physical_catalog import generate_physical_catalog
from kepler_syssim.simulation.rng import seed_rng

if TYPE_CHECKING:
    from kepler_syssim.config import SimulationConfig
    from kepler_syssim.domain.observed import ObsCatalog
    from kepler_syssim.domain.physical import PhysicalCatalog
    from kepler_syssim.simulation.models import DetectionModel, SimulationModel

logger = logging.getLogger(__name__)

# Kepler pipeline detection threshold
SNR_THRESHOLD = 7.1


def calc_snr_list(
    catalog: PhysicalCatalog, config: SimulationConfig, detection: DetectionModel
) -> NDArray[np.float64]:
    """SNRs above the detection threshold for every planet (first system only)."""
    snrs: list[float] = []
    for target in catalog.target:
        if not target.sys:
            continue
        for pl in range(target.sys[0].num_planets):
            snr = detection.snr_if_transit(target, 0, pl, config)
            if snr > 0.0:
                snrs.append(snr)
    arr = np.asarray(snrs, dtype=np.float64)
    return arr[arr > SNR_THRESHOLD]


def calc_prob_detect_list(
    catalog: PhysicalCatalog, config: SimulationConfig, detection: DetectionModel
) -> NDArray[np.float64]:
    """Positive detection probabilities (actual impact parameter), first system only."""
    probs: list[float] = []
    for target in catalog.target:
        if not target.sys:
            continue
        for pl in range(target.sys[0].num_planets):
            pdet = detection.prob_detect_if_transit_with_actual_b(target, 0, pl, config)
            if pdet > 0.0:
                probs.append(pdet)
    return np.asarray(probs, dtype=np.float64)


def run_catalog_self_check(
    config: SimulationConfig,
    model: SimulationModel,
    detection: DetectionModel,
    *,
    rng: np.random.Generator | None = None,
) -> tuple[PhysicalCatalog, ObsCatalog]:
    """Exercise every catalog constructor once and return the two catalogs.

    When `rng` is None and `config.random_seed` is set, the process-wide
    generator is reseeded first so the run is reproducible.

    Raises:
        InvariantViolationError: If no generated target has a planet, or a
            target's planet count disagrees with its first system.
    """
    if rng is None and config.random_seed is not None:
        rng = seed_rng(config.random_seed)
    cat_phys = generate_physical_catalog(config, model)
    target = next((t for t in cat_phys.target if t.num_planets() >= 1), None)
    if target is None:
        raise InvariantViolationError(
            "no generated target has a planet", num_targets=len(cat_phys)
        )
    semimajor_axis(target.sys[0], 0)
    pdet = calc_prob_detect_list(cat_phys, config, detection)
    logger.info("Self-check: %d planets with positive detection probability", pdet.size)
    model.calc_target_obs_single_obs(target, config)
    model.calc_target_obs_sky_ave(target, config)
    if target.sys[0].num_planets != target.num_planets():
        raise InvariantViolationError(
            "planet count of first system differs from target planet count",
            first_system=target.sys[0].num_planets,
            target=target.num_planets(),
        )
    cat_obs = simulated_read_kepler_observations(config, model, detection=detection, rng=rng)
    return cat_phys, cat_obs
