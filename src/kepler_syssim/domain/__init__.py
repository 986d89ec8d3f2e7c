"""Domain models for kepler-syssim.

Physical models describe the true simulated population; observed models
describe what a transit survey reports. Both simulated and real (KOI-based)
observed catalogs use the same observed models.
"""

from kepler_syssim.domain.observed import (
    ObsCatalog,
    OneObserverSystemDetectionProbs,
    StarObs,
    TargetObs,
    TransitPlanetObs,
)
from kepler_syssim.domain.physical import (
    Orbit,
    PhysicalCatalog,
    Planet,
    PlanetarySystem,
    Star,
    Target,
)

__all__ = [
    "Orbit",
    "Planet",
    "PlanetarySystem",
    "PhysicalCatalog",
    "Star",
    "Target",
    "ObsCatalog",
    "OneObserverSystemDetectionProbs",
    "StarObs",
    "TargetObs",
    "TransitPlanetObs",
]
