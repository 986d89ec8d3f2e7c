"""Assembly of the real (KOI-based) observed catalog.

The stellar table and the usable KOIs are joined on `kepid`; each run of
joined rows sharing a `kepid` becomes one TargetObs with one obs/sigma slot
per KOI. The result uses the same models as simulated observed catalogs so
downstream summary statistics can treat both alike.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING

import numpy as np
import pandas as pd

from kepler_syssim.domain.observed import (
    ObsCatalog,
    OneObserverSystemDetectionProbs,
    StarObs,
    TargetObs,
    TransitPlanetObs,
)
from kepler_syssim.errors import InvariantViolationError
from kepler_syssim.simulation.rng import resolve_rng

if TYPE_CHECKING:
    from kepler_syssim.config import SimulationConfig

logger = logging.getLogger(__name__)

PPM = 1.0e6
STAR_COLUMNS = ("kepid", "radius", "mass")


def _iter_runs(kepids: np.ndarray) -> Iterator[tuple[int, int]]:
    """Yield (start, stop) of runs of equal ids; ids must be non-decreasing."""
    start = 0
    for i in range(1, len(kepids)):
        if kepids[i] < kepids[i - 1]:
            raise InvariantViolationError(
                "joined KOI rows are not sorted by kepid",
                row=i,
                previous_kepid=kepids[i - 1],
                kepid=kepids[i],
            )
        if kepids[i] != kepids[i - 1]:
            yield start, i
            start = i
    if len(kepids):
        yield start, len(kepids)


def _mean_abs(err1: float, err2: float) -> float:
    return (abs(err1) + abs(err2)) / 2.0


def locate_star(star_kepids: np.ndarray, kepid: int, rng: np.random.Generator) -> int:
    """Row position of `kepid` in the sorted stellar ids.

    A missing id is logged and replaced by a uniformly random row so the
    assembly can continue.
    """
    idx = int(np.searchsorted(star_kepids, kepid, side="left"))
    if idx >= len(star_kepids) or star_kepids[idx] != kepid:
        logger.warning("Couldn't find kepid %s in star table; assigning a random star", kepid)
        idx = int(rng.integers(len(star_kepids)))
    return idx


def setup_actual_planet_candidate_catalog(
    star_table: pd.DataFrame,
    koi_table: pd.DataFrame,
    usable_koi: Sequence[int],
    config: SimulationConfig | None = None,
    *,
    rng: np.random.Generator | None = None,
) -> ObsCatalog:
    """Create the observed catalog of real Kepler targets and their KOIs.

    Args:
        star_table: Stellar table with at least `kepid`, `mass` and `radius`
        koi_table: Unfiltered KOI table (see `read_koi_catalog`)
        usable_koi: Row positions in `koi_table` to use
        config: Simulation configuration; accepted for call compatibility
            with the simulated-catalog path and not consulted
        rng: Random generator for the fallback star lookup

    Returns:
        ObsCatalog with one target per host star, in ascending `kepid` order.
        `StarObs.id` is the row position in `star_table` sorted by `kepid`.

    Notes:
        KOIs whose host is absent from `star_table` are dropped by the join.
        A host that cannot be located in the sorted stellar table is logged
        and assigned a random star index instead of aborting.
    """
    missing = [c for c in STAR_COLUMNS if c not in star_table.columns]
    if missing:
        raise KeyError(f"star table is missing required columns: {missing}")

    koi = koi_table.iloc[list(usable_koi)]
    stars = star_table.sort_values("kepid", kind="stable").reset_index(drop=True)
    joined = (
        stars.merge(koi, on="kepid", how="inner", suffixes=("", "_koi"))
        .sort_values("kepid", kind="stable")
        .reset_index(drop=True)
    )

    star_kepids = stars["kepid"].to_numpy()
    kepids = joined["kepid"].to_numpy()
    radius = joined["radius"].to_numpy(dtype=np.float64)
    mass = joined["mass"].to_numpy(dtype=np.float64)

    def col(name: str, scale: float = 1.0) -> np.ndarray:
        return joined[name].to_numpy(dtype=np.float64) / scale

    period, period_e1, period_e2 = col("koi_period"), col("koi_period_err1"), col("koi_period_err2")
    t0, t0_e1, t0_e2 = col("koi_time0bk"), col("koi_time0bk_err1"), col("koi_time0bk_err2")
    depth, depth_e1, depth_e2 = (
        col("koi_depth", PPM),
        col("koi_depth_err1", PPM),
        col("koi_depth_err2", PPM),
    )
    dur, dur_e1, dur_e2 = col("koi_duration"), col("koi_duration_err1"), col("koi_duration_err2")

    gen = resolve_rng(rng)
    output = ObsCatalog()
    for start, stop in _iter_runs(kepids):
        num_pl = stop - start
        target_obs = TargetObs.with_capacity(num_pl)

        star_idx = locate_star(star_kepids, kepids[start], gen)
        target_obs.star = StarObs(radius=radius[start], mass=mass[start], id=star_idx)

        for slot, i in enumerate(range(start, stop)):
            target_obs.obs[slot] = TransitPlanetObs(
                period=period[i], t0=t0[i], depth=depth[i], duration=dur[i]
            )
            target_obs.sigma[slot] = TransitPlanetObs(
                period=_mean_abs(period_e1[i], period_e2[i]),
                t0=_mean_abs(t0_e1[i], t0_e2[i]),
                depth=_mean_abs(depth_e1[i], depth_e2[i]),
                duration=_mean_abs(dur_e1[i], dur_e2[i]),
            )
        target_obs.prob_detect = OneObserverSystemDetectionProbs.for_planets(num_pl)
        output.target.append(target_obs)

    logger.info(
        "Assembled observed catalog: %d targets, %d KOIs", len(output), output.num_planets()
    )
    return output
