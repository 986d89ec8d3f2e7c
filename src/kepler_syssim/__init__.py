"""kepler-syssim: simulated and observed Kepler target catalogs.

Provides:
- Physical catalog generation from an injected per-target generator
- Stochastic pruning of non-transiting / undetected planets
- Observation of physical catalogs into observed catalogs (with buffer reuse)
- KOI catalog loading (CSV or pickle snapshot) and comparison-catalog assembly

Usage:
    >>> from kepler_syssim.catalogs import read_koi_catalog, setup_actual_planet_candidate_catalog
    >>> koi, usable = read_koi_catalog("q1_q17_dr25_koi.csv")
    >>> obs = setup_actual_planet_candidate_catalog(star_table, koi, usable)
    >>> len(obs)
"""

from __future__ import annotations

__version__ = "0.3.0"

__all__ = ["__version__"]
