"""Shared fixtures for kepler-syssim tests."""

from __future__ import annotations

import math
from collections.abc import Callable
from pathlib import Path

import pandas as pd
import pytest

from kepler_syssim.config import SimulationConfig
from kepler_syssim.domain.observed import StarObs, TargetObs, TransitPlanetObs
from kepler_syssim.domain.physical import Orbit, Planet, PlanetarySystem, Star, Target
from kepler_syssim.simulation.models import SimulationModel

EDGE_ON = math.pi / 2
FACE_ON = 0.0


class ConstantDetection:
    """Detection model returning fixed values and recording its calls."""

    def __init__(self, prob: float = 1.0, snr: float = 10.0) -> None:
        self.prob = prob
        self.snr = snr
        self.calls: list[tuple[int, int]] = []

    def prob_detect_if_transit_with_actual_b(self, target, sys_idx, pl_idx, config) -> float:
        self.calls.append((sys_idx, pl_idx))
        return self.prob

    def snr_if_transit(self, target, sys_idx, pl_idx, config) -> float:
        return self.snr


def make_system(incls: list[float], *, period: float = 10.0, star_id: int = 0) -> PlanetarySystem:
    star = Star(id=star_id, radius=1.0, mass=1.0)
    planets = [Planet(radius=0.01 * (i + 1), mass=3e-6) for i in range(len(incls))]
    orbits = [Orbit(period=period * (i + 1), incl=incl) for i, incl in enumerate(incls)]
    return PlanetarySystem(star=star, planet=planets, orbit=orbits)


def make_target(incls: list[float], *, star_id: int = 0) -> Target:
    return Target(sys=[make_system(incls, star_id=star_id)])


def observe_all_planets(target: Target, config: SimulationConfig) -> TargetObs:
    """Observer that reports every planet of the first system."""
    system = target.sys[0]
    obs = TargetObs.with_capacity(system.num_planets)
    obs.star = StarObs(radius=system.star.radius, mass=system.star.mass, id=system.star.id)
    for i, orbit in enumerate(system.orbit):
        obs.obs[i] = TransitPlanetObs(period=orbit.period, t0=0.0, depth=1e-4, duration=3.0)
        obs.sigma[i] = TransitPlanetObs(period=1e-4, t0=1e-3, depth=1e-5, duration=0.1)
    return obs


@pytest.fixture
def config(tmp_path: Path) -> SimulationConfig:
    return SimulationConfig(num_targets_sim_pass_one=5, num_kepler_targets=4, data_dir=tmp_path)


@pytest.fixture
def target_factory() -> Callable[..., Target]:
    return make_target


@pytest.fixture
def detection() -> ConstantDetection:
    return ConstantDetection()


@pytest.fixture
def model() -> SimulationModel:
    counter = {"n": 0}

    def generate_target(config: SimulationConfig) -> Target:
        counter["n"] += 1
        return make_target([EDGE_ON, FACE_ON], star_id=counter["n"])

    return SimulationModel(
        generate_target=generate_target,
        calc_target_obs_sky_ave=observe_all_planets,
        calc_target_obs_single_obs=observe_all_planets,
    )


KOI_COLUMNS = [
    "kepid",
    "kepoi_name",
    "koi_pdisposition",
    "koi_ror",
    "koi_period",
    "koi_period_err1",
    "koi_period_err2",
    "koi_time0bk",
    "koi_time0bk_err1",
    "koi_time0bk_err2",
    "koi_depth",
    "koi_depth_err1",
    "koi_depth_err2",
    "koi_duration",
    "koi_duration_err1",
    "koi_duration_err2",
]


def koi_row(kepid: int, name: str, **overrides: object) -> dict[str, object]:
    row: dict[str, object] = {
        "kepid": kepid,
        "kepoi_name": name,
        "koi_pdisposition": "CANDIDATE",
        "koi_ror": 0.02,
        "koi_period": 10.0,
        "koi_period_err1": 1.0,
        "koi_period_err2": -1.0,
        "koi_time0bk": 131.5,
        "koi_time0bk_err1": 0.002,
        "koi_time0bk_err2": -0.004,
        "koi_depth": 400.0,
        "koi_depth_err1": 20.0,
        "koi_depth_err2": -10.0,
        "koi_duration": 3.0,
        "koi_duration_err1": 0.1,
        "koi_duration_err2": -0.3,
    }
    row.update(overrides)
    return row


@pytest.fixture
def koi_table() -> pd.DataFrame:
    rows = [
        koi_row(1, "K00001.01"),
        koi_row(1, "K00001.02", koi_period=20.0),
        koi_row(2, "K00002.01", koi_period=5.0),
    ]
    return pd.DataFrame(rows, columns=KOI_COLUMNS)


@pytest.fixture
def star_table() -> pd.DataFrame:
    return pd.DataFrame({"kepid": [1, 2], "mass": [1.0, 1.0], "radius": [1.0, 1.0]})


@pytest.fixture
def koi_csv(tmp_path: Path) -> Path:
    """KOI CSV in NASA Exoplanet Archive layout (with # header comments)."""
    rows = [
        koi_row(10, "K00010.01"),
        koi_row(11, "K00011.01", koi_pdisposition="FALSE POSITIVE"),
        koi_row(12, "K00012.01", koi_period_err2=None),
        koi_row(13, "K00013.01", koi_ror=None),
        koi_row(14, "K00014.01"),
    ]
    path = tmp_path / "koi.csv"
    header = "# This file was produced by the NASA Exoplanet Archive\n# COLUMN kepid: KepID\n"
    path.write_text(header + pd.DataFrame(rows, columns=KOI_COLUMNS).to_csv(index=False))
    return path


@pytest.fixture
def system_factory() -> Callable[..., PlanetarySystem]:
    return make_system


@pytest.fixture
def detection_factory() -> type[ConstantDetection]:
    return ConstantDetection


@pytest.fixture
def observer() -> Callable[[Target, SimulationConfig], TargetObs]:
    return observe_all_planets


@pytest.fixture
def koi_row_factory() -> Callable[..., dict[str, object]]:
    return koi_row
