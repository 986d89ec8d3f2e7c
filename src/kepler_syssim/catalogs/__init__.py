"""KOI catalog loading and real observed-catalog assembly.

Usage:
    >>> from kepler_syssim.catalogs import read_koi_catalog, setup_actual_planet_candidate_catalog
    >>> koi, usable = read_koi_catalog("q1_q17_dr25_koi.csv")
    >>> write_koi_catalog_cache("koi.pkl", koi, usable)
    >>> koi, usable = read_koi_catalog("koi.pkl")
    >>> obs = setup_actual_planet_candidate_catalog(star_table, koi, usable)
"""

from kepler_syssim.catalogs.assemble import setup_actual_planet_candidate_catalog
from kepler_syssim.catalogs.koi import (
    read_koi_catalog,
    read_koi_catalog_for_config,
    usable_koi_mask,
    write_koi_catalog_cache,
)

__all__ = [
    "read_koi_catalog",
    "read_koi_catalog_for_config",
    "setup_actual_planet_candidate_catalog",
    "usable_koi_mask",
    "write_koi_catalog_cache",
]
