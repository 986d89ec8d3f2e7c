"""Process-wide random generator used when callers do not pass one."""

from __future__ import annotations

import numpy as np

_RNG: np.random.Generator = np.random.default_rng()


def get_rng() -> np.random.Generator:
    return _RNG


def seed_rng(seed: int | None) -> np.random.Generator:
    """Replace the process-wide generator with a freshly seeded one."""
    global _RNG
    _RNG = np.random.default_rng(seed)
    return _RNG


def resolve_rng(rng: np.random.Generator | None) -> np.random.Generator:
    return rng if rng is not None else _RNG
