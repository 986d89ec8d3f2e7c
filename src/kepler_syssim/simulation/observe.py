"""Observation of physical catalogs.

This module provides:
- TargetObsBuffer: reusable output storage for repeated simulation passes
- observe_targets: element-wise map of a physical catalog to an ObsCatalog
- observe_targets_sky_avg / observe_targets_single_obs: scheme wrappers
- simulated_read_kepler_observations: debug path building a fully simulated
  "observed" catalog in one call

Inference loops observe many thousands of passes; passing the same
`TargetObsBuffer` to every pass avoids reallocating the output list each time.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from kepler_syssim.domain.observed import ObsCatalog, TargetObs
from kepler_syssim.errors import InvariantViolationError
from kepler_syssim.simulation.physical_catalog import build_physical_catalog
from kepler_syssim.simulation.pruning import prune_undetected_planets

if TYPE_CHECKING:
    import numpy as np

    from kepler_syssim.config import SimulationConfig
    from kepler_syssim.domain.physical import PhysicalCatalog
    from kepler_syssim.simulation.models import (
        DetectionModel,
        ObservationScheme,
        SimulationModel,
        TargetObserver,
    )

logger = logging.getLogger(__name__)


class TargetObsBuffer:
    """Reusable output list for `observe_targets`.

    The list handed out by `reserve` becomes the `target` list of the returned
    ObsCatalog, so the catalog from the previous pass is overwritten by the
    next one. Not thread-safe: one buffer per concurrent pipeline.
    """

    def __init__(self, capacity: int = 0) -> None:
        self.targets: list[TargetObs | None] = [None] * capacity

    def __len__(self) -> int:
        return len(self.targets)

    def reserve(self, n: int) -> list[TargetObs | None]:
        """Return the stored list if it holds at least `n` slots, else a fresh one."""
        if len(self.targets) < n:
            self.targets = [None] * n
        return self.targets


def observe_targets(
    calc_target_obs: TargetObserver,
    catalog: PhysicalCatalog,
    config: SimulationConfig,
    *,
    buffer: TargetObsBuffer | None = None,
) -> ObsCatalog:
    """Observe every target of `catalog` with `calc_target_obs`.

    Output slot `i` holds the observation of `catalog.target[i]`. The output is
    sized for `config.num_targets_sim_pass_one` targets and then truncated to
    `len(catalog)`, so slots left over from an earlier, larger pass never leak
    into the result.

    Raises:
        InvariantViolationError: If the catalog holds more targets than the
            configured pass size.
    """
    capacity = config.num_targets_sim_pass_one
    output = buffer.reserve(capacity) if buffer is not None else [None] * capacity
    num_targets = len(catalog.target)
    if num_targets > len(output):
        raise InvariantViolationError(
            "observation buffer is smaller than the physical catalog",
            buffer_size=len(output),
            num_targets=num_targets,
        )
    for i, target in enumerate(catalog.target):
        output[i] = calc_target_obs(target, config)
    del output[num_targets:]
    return ObsCatalog(output)  # type: ignore[arg-type]


def observe_targets_sky_avg(
    catalog: PhysicalCatalog,
    config: SimulationConfig,
    model: SimulationModel,
    *,
    buffer: TargetObsBuffer | None = None,
) -> ObsCatalog:
    """Observe targets using sky-averaged detection probabilities."""
    return observe_targets(model.calc_target_obs_sky_ave, catalog, config, buffer=buffer)


def observe_targets_single_obs(
    catalog: PhysicalCatalog,
    config: SimulationConfig,
    model: SimulationModel,
    *,
    buffer: TargetObsBuffer | None = None,
) -> ObsCatalog:
    """Observe targets from a single fixed observer (the Earth)."""
    return observe_targets(model.calc_target_obs_single_obs, catalog, config, buffer=buffer)


def observe_targets_with_scheme(
    scheme: ObservationScheme,
    catalog: PhysicalCatalog,
    config: SimulationConfig,
    model: SimulationModel,
    *,
    buffer: TargetObsBuffer | None = None,
) -> ObsCatalog:
    return observe_targets(model.observer_for(scheme), catalog, config, buffer=buffer)


def simulated_read_kepler_observations(
    config: SimulationConfig,
    model: SimulationModel,
    *,
    detection: DetectionModel,
    rng: np.random.Generator | None = None,
) -> ObsCatalog:
    """Build an observed catalog from simulated targets (debugging aid).

    Generates `config.num_kepler_targets` targets, prunes undetected planets,
    and observes the survivors from a single observer.
    """
    logger.warning("Using simulated_read_kepler_observations; catalog is simulated, not read")
    catalog = build_physical_catalog(
        config.num_kepler_targets, lambda: model.generate_target(config)
    )
    catalog = prune_undetected_planets(catalog, config, detection, rng=rng)
    return ObsCatalog([model.calc_target_obs_single_obs(t, config) for t in catalog.target])
