"""Generation of simulated physical catalogs."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from kepler_syssim.domain.physical import PhysicalCatalog, Target

if TYPE_CHECKING:
    from kepler_syssim.config import SimulationConfig
    from kepler_syssim.simulation.models import SimulationModel

logger = logging.getLogger(__name__)


def build_physical_catalog(
    num_targets: int,
    generate_target: Callable[[], Target],
) -> PhysicalCatalog:
    """Build a catalog of `num_targets` targets, one generator call each.

    Targets appear in call order. Any exception from `generate_target`
    propagates and no catalog is returned.
    """
    if num_targets < 0:
        raise ValueError(f"num_targets must be non-negative, got {num_targets}")
    return PhysicalCatalog([generate_target() for _ in range(num_targets)])


def generate_physical_catalog(config: SimulationConfig, model: SimulationModel) -> PhysicalCatalog:
    """Create the catalog of simulated Kepler targets for one pass.

    Runs `model.star_table_setup` first when a stellar catalog is configured,
    then draws `config.num_targets_sim_pass_one` targets.
    """
    if config.stellar_catalog is not None and model.star_table_setup is not None:
        model.star_table_setup(config)
    catalog = build_physical_catalog(
        config.num_targets_sim_pass_one, lambda: model.generate_target(config)
    )
    logger.debug(
        "Generated physical catalog: %d targets, %d planets",
        len(catalog),
        catalog.num_planets(),
    )
    return catalog
