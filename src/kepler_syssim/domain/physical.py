"""Physical (true) population models.

This module provides:
- Star, Planet, Orbit: immutable physical parameters
- PlanetarySystem: a star with index-aligned planet/orbit lists
- Target: one survey target owning one or more planetary systems
- PhysicalCatalog: ordered list of simulated targets
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field

from kepler_syssim.errors import InvariantViolationError


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class Star(FrozenModel):
    """Physical star parameters (solar units)."""

    id: int = Field(default=0, description="Row position in the stellar table")
    radius: float = Field(ge=0, description="Stellar radius (solar radii)")
    mass: float = Field(ge=0, description="Stellar mass (solar masses)")


class Planet(FrozenModel):
    """Physical planet parameters (solar units)."""

    radius: float = Field(ge=0, description="Planet radius (solar radii)")
    mass: float = Field(default=0.0, ge=0, description="Planet mass (solar masses)")


class Orbit(FrozenModel):
    """Keplerian orbit of one planet.

    The semimajor axis is not stored; it follows from the period and the
    star/planet masses (see `kepler_syssim.compute.geometry.semimajor_axis`).
    """

    period: float = Field(gt=0, description="Orbital period (days)")
    ecc: float = Field(default=0.0, ge=0, lt=1, description="Eccentricity")
    incl: float = Field(default=0.0, description="Inclination (radians)")
    omega: float = Field(default=0.0, description="Argument of periapsis (radians)")
    asc_node: float = Field(default=0.0, description="Longitude of ascending node (radians)")
    mean_anom: float = Field(default=0.0, description="Mean anomaly at epoch (radians)")


@dataclass
class PlanetarySystem:
    """A star with index-aligned `planet` and `orbit` lists.

    `planet[i]` and `orbit[i]` always describe the same body. Only
    `keep_planets` shrinks the lists, and it shrinks both together.
    """

    star: Star
    planet: list[Planet] = field(default_factory=list)
    orbit: list[Orbit] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.planet) != len(self.orbit):
            raise InvariantViolationError(
                "planet and orbit lists must have the same length",
                num_planet=len(self.planet),
                num_orbit=len(self.orbit),
            )

    @property
    def num_planets(self) -> int:
        return len(self.planet)

    def keep_planets(self, keep: Sequence[bool]) -> int:
        """Compact both lists in place to the entries flagged in `keep`.

        List identity is preserved. Returns the number of removed planets.
        """
        if len(keep) != len(self.planet):
            raise InvariantViolationError(
                "keep mask must match the number of planets",
                num_mask=len(keep),
                num_planet=len(self.planet),
            )
        before = len(self.planet)
        self.planet[:] = [p for p, k in zip(self.planet, keep) if k]
        self.orbit[:] = [o for o, k in zip(self.orbit, keep) if k]
        return before - len(self.planet)


@dataclass
class Target:
    """One survey target: a star and its planetary system(s)."""

    sys: list[PlanetarySystem] = field(default_factory=list)

    @property
    def star(self) -> Star | None:
        """Star of the first system (None for a target without systems)."""
        return self.sys[0].star if self.sys else None

    def num_planets(self) -> int:
        return sum(s.num_planets for s in self.sys)


@dataclass
class PhysicalCatalog:
    """Ordered list of simulated targets."""

    target: list[Target] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.target)

    def __iter__(self) -> Iterator[Target]:
        return iter(self.target)

    def num_planets(self) -> int:
        return sum(t.num_planets() for t in self.target)
