"""Simulation configuration."""

from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from platformdirs import user_data_dir

DEFAULT_KOI_CATALOG = "q1_q17_dr25_koi.csv"


def _default_data_dir() -> Path:
    """Choose the directory that relative catalog filenames resolve against.

    Preference order:
    1) `KEPLER_SYSSIM_DATA_DIR` (explicit override)
    2) OS-appropriate user data directory
    """
    explicit = os.getenv("KEPLER_SYSSIM_DATA_DIR")
    if explicit:
        return Path(explicit).expanduser()
    return Path(user_data_dir("kepler-syssim"))


@dataclass(frozen=True)
class SimulationConfig:
    """
    Parameters shared by every stage of a simulation run.

    Frozen so one run sees consistent values; use `replace` to derive
    variants (e.g. a smaller pass for tests).

    Attributes
    ----------
    num_targets_sim_pass_one : int
        Number of targets generated per simulation pass. Also the capacity
        requested from a reusable observation buffer.
    num_kepler_targets : int
        Number of targets used by the debug simulated-observations path.
    koi_catalog : str
        KOI catalog filename (CSV, or a `.pkl` snapshot) relative to
        `data_dir` unless absolute.
    stellar_catalog : str | None
        Stellar catalog filename; when set the star-table setup hook runs
        before generation.
    data_dir : Path
        Directory for catalog files.
    random_seed : int | None
        Seed for the process-wide random generator (None leaves it unseeded).
    extra_params : dict
        Opaque values for injected generator/observation functions.
    """

    num_targets_sim_pass_one: int = 150_000
    num_kepler_targets: int = 150_000
    koi_catalog: str = DEFAULT_KOI_CATALOG
    stellar_catalog: str | None = None
    data_dir: Path = field(default_factory=_default_data_dir)
    random_seed: int | None = None
    extra_params: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.num_targets_sim_pass_one < 0:
            raise ValueError("num_targets_sim_pass_one must be non-negative")
        if self.num_kepler_targets < 0:
            raise ValueError("num_kepler_targets must be non-negative")

    def koi_catalog_path(self) -> Path:
        path = Path(self.koi_catalog).expanduser()
        if path.is_absolute():
            return path
        return Path(self.data_dir) / path

    def replace(self, **changes: Any) -> SimulationConfig:
        return dataclasses.replace(self, **changes)
