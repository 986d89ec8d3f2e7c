"""Observed catalog models.

This module provides:
- TransitPlanetObs: measured (or 1-sigma uncertainty of) transit parameters
- StarObs: observed host-star parameters with a stellar-table back-reference
- OneObserverSystemDetectionProbs: detection-probability bookkeeping
- TargetObs: one observed target with per-planet obs/sigma slots
- ObsCatalog: ordered list of observed targets
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel, ConfigDict, Field


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class TransitPlanetObs(FrozenModel):
    """Transit observables of one planet.

    Used both for measured values and for their 1-sigma uncertainties.
    """

    period: float = Field(description="Orbital period (days)")
    t0: float = Field(description="Transit epoch (BKJD)")
    depth: float = Field(description="Transit depth (fractional)")
    duration: float = Field(description="Transit duration (hours)")


class StarObs(FrozenModel):
    """Observed host-star parameters."""

    radius: float = Field(description="Stellar radius (solar radii)")
    mass: float = Field(description="Stellar mass (solar masses)")
    id: int = Field(ge=0, description="Row position in the sorted stellar table")


@dataclass
class OneObserverSystemDetectionProbs:
    """Detection probabilities for a single fixed observer.

    Sized for `n` planets. Contents are owned by the detection-probability
    model; this package only allocates them with neutral values.
    """

    detect_prob: NDArray[np.float64]
    pairwise_detect_prob: NDArray[np.float64]
    transit_prob: NDArray[np.float64]
    detectable_subsets: list[list[int]]

    @classmethod
    def for_planets(cls, n: int) -> OneObserverSystemDetectionProbs:
        return cls(
            detect_prob=np.ones(n, dtype=np.float64),
            pairwise_detect_prob=np.ones((n, n), dtype=np.float64),
            transit_prob=np.ones(n, dtype=np.float64),
            detectable_subsets=[[]],
        )

    @property
    def capacity(self) -> int:
        return int(self.detect_prob.shape[0])


@dataclass
class TargetObs:
    """One observed target.

    `obs[i]` and `sigma[i]` describe the same detected planet. Slots start
    as None until filled.
    """

    star: StarObs | None = None
    obs: list[TransitPlanetObs | None] = field(default_factory=list)
    sigma: list[TransitPlanetObs | None] = field(default_factory=list)
    prob_detect: OneObserverSystemDetectionProbs = field(
        default_factory=lambda: OneObserverSystemDetectionProbs.for_planets(0)
    )

    @classmethod
    def with_capacity(cls, n: int) -> TargetObs:
        """Allocate a target with `n` empty planet slots."""
        if n < 0:
            raise ValueError(f"planet count must be non-negative, got {n}")
        return cls(
            obs=[None] * n,
            sigma=[None] * n,
            prob_detect=OneObserverSystemDetectionProbs.for_planets(n),
        )

    @property
    def num_planets(self) -> int:
        return len(self.obs)


@dataclass
class ObsCatalog:
    """Ordered list of observed targets."""

    target: list[TargetObs] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.target)

    def __iter__(self) -> Iterator[TargetObs]:
        return iter(self.target)

    def num_planets(self) -> int:
        return sum(t.num_planets for t in self.target)
