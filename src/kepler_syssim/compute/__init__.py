"""Pure compute helpers (orbital geometry)."""

from kepler_syssim.compute.geometry import (
    RSOL_IN_AU,
    does_planet_transit,
    select_targets_one_obs,
    semimajor_axis,
)

__all__ = [
    "RSOL_IN_AU",
    "does_planet_transit",
    "select_targets_one_obs",
    "semimajor_axis",
]
