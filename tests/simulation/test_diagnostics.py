"""Tests for kepler_syssim.simulation.diagnostics."""

from __future__ import annotations

import math

import numpy as np
import pytest

from kepler_syssim.config import SimulationConfig
from kepler_syssim.domain.physical import PhysicalCatalog, Target
from kepler_syssim.errors import InvariantViolationError
from kepler_syssim.simulation.diagnostics import (
    calc_prob_detect_list,
    calc_snr_list,
    run_catalog_self_check,
)
from kepler_syssim.simulation.models import SimulationModel

EDGE_ON = math.pi / 2


class TestDiagnosticLists:
    def test_snr_list_applies_threshold(
        self, target_factory, detection_factory, config: SimulationConfig
    ) -> None:
        catalog = PhysicalCatalog([target_factory([EDGE_ON, EDGE_ON]), Target()])
        assert calc_snr_list(catalog, config, detection_factory(snr=10.0)).tolist() == [10.0, 10.0]
        assert calc_snr_list(catalog, config, detection_factory(snr=5.0)).size == 0

    def test_prob_detect_list_drops_zeros(
        self, target_factory, detection_factory, config: SimulationConfig
    ) -> None:
        catalog = PhysicalCatalog([target_factory([EDGE_ON]) for _ in range(3)])
        probs = calc_prob_detect_list(catalog, config, detection_factory(prob=0.25))
        assert probs.dtype == np.float64
        assert probs.tolist() == [0.25, 0.25, 0.25]
        assert calc_prob_detect_list(catalog, config, detection_factory(prob=0.0)).size == 0


class TestRunCatalogSelfCheck:
    def test_returns_physical_and_observed_catalogs(
        self, config: SimulationConfig, model: SimulationModel, detection
    ) -> None:
        cat_phys, cat_obs = run_catalog_self_check(
            config, model, detection, rng=np.random.default_rng(0)
        )
        assert len(cat_phys) == config.num_targets_sim_pass_one
        assert len(cat_obs) == config.num_kepler_targets

    def test_fails_without_planets(self, config: SimulationConfig, detection, observer) -> None:
        empty = SimulationModel(
            generate_target=lambda cfg: Target(),
            calc_target_obs_sky_ave=observer,
            calc_target_obs_single_obs=observer,
        )
        with pytest.raises(InvariantViolationError, match="no generated target"):
            run_catalog_self_check(config, empty, detection)

    def test_config_seed_makes_run_reproducible(
        self, config: SimulationConfig, model: SimulationModel, detection_factory
    ) -> None:
        cfg = config.replace(random_seed=123, num_kepler_targets=40)
        detection = detection_factory(prob=0.5)

        _, first = run_catalog_self_check(cfg, model, detection)
        _, second = run_catalog_self_check(cfg, model, detection)

        assert [t.num_planets for t in first] == [t.num_planets for t in second]
