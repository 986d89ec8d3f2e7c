"""Orbital geometry helpers for transit selection.

This module provides pure functions on physical planetary systems:
- semimajor_axis: Kepler's third law in AU / solar masses / years
- does_planet_transit: single-observer transit criterion
- select_targets_one_obs: whether any planet of a system transits

The observer looks along the reference axis, so a planet transits when the
star's projected radius exceeds the sky-projected star-planet separation at
conjunction.
"""

from __future__ import annotations

import math

from kepler_syssim.domain.physical import PlanetarySystem

# Solar radius in AU
RSOL_IN_AU = 0.00465047
DAYS_PER_YEAR = 365.25


def semimajor_axis(system: PlanetarySystem, pl: int) -> float:
    """Semimajor axis (AU) of planet `pl` from its period and the system masses.

    Args:
        system: Planetary system holding the planet
        pl: 0-based planet index

    Returns:
        Semimajor axis in AU

    Example:
        >>> # Earth around the Sun
        >>> semimajor_axis(system, 0)  # ~1.0
    """
    period_yr = system.orbit[pl].period / DAYS_PER_YEAR
    total_mass = system.star.mass + system.planet[pl].mass
    return (total_mass * period_yr**2) ** (1.0 / 3.0)


def does_planet_transit(system: PlanetarySystem, pl: int) -> bool:
    """Check whether planet `pl` transits for the reference observer."""
    orbit = system.orbit[pl]
    a = semimajor_axis(system, pl)
    r_star = RSOL_IN_AU * system.star.radius
    ecc = orbit.ecc
    # Star-planet separation at conjunction, projected onto the sky plane
    separation = a * (1.0 - ecc) * (1.0 + ecc) / (1.0 + ecc * math.sin(orbit.omega))
    return r_star > separation * abs(math.cos(orbit.incl))


def select_targets_one_obs(system: PlanetarySystem) -> bool:
    """Return True if at least one planet of `system` transits."""
    return any(does_planet_transit(system, pl) for pl in range(system.num_planets))
