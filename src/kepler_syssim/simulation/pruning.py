"""Removal of undetected planets from a physical catalog.

Produces the "ground-truth observable" physical catalog: every planet that
either does not transit or loses its detection draw is removed from its
system. Planets are visited in reverse index order (so random draws are
consumed last-planet-first) and survivors are compacted once per system.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from kepler_syssim.compute.geometry import does_planet_transit
from kepler_syssim.domain.physical import PhysicalCatalog, PlanetarySystem
from kepler_syssim.simulation.rng import resolve_rng

if TYPE_CHECKING:
    import numpy as np

    from kepler_syssim.config import SimulationConfig
    from kepler_syssim.simulation.models import DetectionModel

logger = logging.getLogger(__name__)


def prune_undetected_planets(
    catalog: PhysicalCatalog,
    config: SimulationConfig,
    detection: DetectionModel,
    *,
    does_transit: Callable[[PlanetarySystem, int], bool] = does_planet_transit,
    rng: np.random.Generator | None = None,
) -> PhysicalCatalog:
    """Remove planets that do not transit or are not detected, in place.

    A planet survives iff it transits and a uniform draw in [0, 1) is at most
    its detection probability (given its actual impact parameter). Only
    transiting planets consume a draw.

    Target and system objects, and their planet/orbit lists, keep their
    identity; only the lists shrink. Running this again on a pruned catalog
    performs a fresh stochastic pass.

    Args:
        catalog: Physical catalog to prune (mutated)
        config: Simulation configuration passed to the detection model
        detection: Detection-probability model
        does_transit: Transit geometry test for (system, planet index)
        rng: Random generator (process-wide generator if None)

    Returns:
        The same catalog object
    """
    gen = resolve_rng(rng)
    num_before = 0
    num_removed = 0
    for target in catalog.target:
        for sys_idx, system in enumerate(target.sys):
            n = system.num_planets
            keep = [False] * n
            for pl in range(n - 1, -1, -1):
                if not does_transit(system, pl):
                    continue
                pdet = detection.prob_detect_if_transit_with_actual_b(target, sys_idx, pl, config)
                keep[pl] = gen.random() <= pdet
            num_before += n
            num_removed += system.keep_planets(keep)
    logger.debug("Pruned %d of %d planets", num_removed, num_before)
    return catalog
