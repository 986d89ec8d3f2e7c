"""Local error taxonomy for kepler-syssim.

Catalog input problems are reported as `CatalogReadError` and always abort the
load. Broken internal invariants (buffer sizing, identifier ordering, list
alignment) are reported as `InvariantViolationError`, which is an
`AssertionError` so callers treat it as a programming error rather than bad
input. Failures raised by injected generator/observation functions are never
wrapped.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class CatalogReadError(Exception):
    """Raised when a candidate catalog cannot be read.

    Attributes:
        path: The file that failed to load.
        reason: Additional context about why the load failed.
    """

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to read KOI catalog >{self.path}<: {reason}")


class InvariantViolationError(AssertionError):
    """Raised when an internal structural invariant does not hold.

    Attributes:
        context: Values describing the violation (sizes, identifiers, ...).
    """

    def __init__(self, message: str, **context: Any) -> None:
        self.context = dict(context)
        super().__init__(message)
