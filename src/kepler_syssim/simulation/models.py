"""Strategy interfaces injected into the simulation pipeline.

Generators, observation functions and detection models are passed around as
values (usually bundled in a `SimulationModel`), never looked up by name at
call time.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from kepler_syssim.config import SimulationConfig
    from kepler_syssim.domain.observed import TargetObs
    from kepler_syssim.domain.physical import Target


class ObservationScheme(str, Enum):
    """Detection-probability convention used when observing targets."""

    SKY_AVERAGED = "sky_averaged"  # averaged over all viewing angles
    SINGLE_OBSERVER = "single_observer"  # fixed observer (the Earth)


class TargetGenerator(Protocol):
    def __call__(self, config: SimulationConfig) -> Target: ...


class TargetObserver(Protocol):
    def __call__(self, target: Target, config: SimulationConfig) -> TargetObs: ...


@runtime_checkable
class DetectionModel(Protocol):
    """Detection-probability / SNR model for transiting planets.

    Planets are addressed by target plus 0-based system and planet indices.
    """

    def prob_detect_if_transit_with_actual_b(
        self, target: Target, sys_idx: int, pl_idx: int, config: SimulationConfig
    ) -> float:
        """Detection probability given the planet's actual impact parameter."""
        ...

    def snr_if_transit(
        self, target: Target, sys_idx: int, pl_idx: int, config: SimulationConfig
    ) -> float:
        """Expected signal-to-noise ratio assuming the planet transits."""
        ...


@dataclass(frozen=True)
class SimulationModel:
    """Bundle of the injected per-target functions for one simulation setup.

    Attributes:
        generate_target: Draws one physical target.
        calc_target_obs_sky_ave: Observes a target with sky-averaged detection
            probabilities.
        calc_target_obs_single_obs: Observes a target from a single observer.
        star_table_setup: Optional hook that prepares the stellar table before
            generation (called when `config.stellar_catalog` is set).
    """

    generate_target: TargetGenerator
    calc_target_obs_sky_ave: TargetObserver
    calc_target_obs_single_obs: TargetObserver
    star_table_setup: Callable[[SimulationConfig], None] | None = None

    def observer_for(self, scheme: ObservationScheme) -> TargetObserver:
        if scheme is ObservationScheme.SKY_AVERAGED:
            return self.calc_target_obs_sky_ave
        if scheme is ObservationScheme.SINGLE_OBSERVER:
            return self.calc_target_obs_single_obs
        raise ValueError(f"Unknown observation scheme: {scheme!r}")
