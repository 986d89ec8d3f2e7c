"""Kepler Object of Interest (KOI) catalog loading.

The KOI table is read either from the NASA Exoplanet Archive CSV export
(`#` comment lines, one header row) or from a pickle snapshot written by
`write_koi_catalog_cache`. Both paths return the unfiltered table plus the
row positions of usable KOIs; filtering is left to the caller so those
positions stay valid indices into the returned table.
"""

from __future__ import annotations

import logging
import os
import pickle
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any

import numpy as np
import pandas as pd

from kepler_syssim.errors import CatalogReadError

if TYPE_CHECKING:
    from kepler_syssim.config import SimulationConfig

logger = logging.getLogger(__name__)

CACHE_SUFFIXES = (".pkl", ".pickle")
CACHE_TABLE_KEY = "koi_catalog"
CACHE_USABLE_KEY = "koi_catalog_usable"

CANDIDATE_DISPOSITION = "CANDIDATE"
USABILITY_COLUMNS = (
    "koi_pdisposition",
    "koi_ror",
    "koi_period",
    "koi_period_err1",
    "koi_period_err2",
)

_INSECURE_PERMS_MASK = 0o022  # group/other writable


def _is_secure_pickle_path(path: Path) -> bool:
    """Best-effort guardrail for loading pickled snapshots.

    Refuses symlinks, group/other-writable files and (POSIX) files not owned
    by the current uid.
    """
    try:
        if path.is_symlink():
            return False
        st = path.stat()
        if (st.st_mode & _INSECURE_PERMS_MASK) != 0:
            return False
        getuid = getattr(os, "getuid", None)
        if getuid is not None and st.st_uid != getuid():
            return False
        return True
    except OSError:
        return False


def _best_effort_chmod(path: Path, mode: int) -> None:
    try:
        os.chmod(path, mode)
    except OSError:
        return


def is_cache_path(path: str | Path) -> bool:
    return Path(path).suffix.lower() in CACHE_SUFFIXES


def _as_usable_list(value: Any) -> list[int] | None:
    """Normalize an integer sequence to list[int]; None if it is not one."""
    if isinstance(value, np.ndarray):
        if value.ndim != 1 or not np.issubdtype(value.dtype, np.integer):
            return None
        return [int(v) for v in value]
    if isinstance(value, (list, tuple)):
        if not all(isinstance(v, (int, np.integer)) and not isinstance(v, bool) for v in value):
            return None
        return [int(v) for v in value]
    return None


def usable_koi_mask(table: pd.DataFrame) -> pd.Series:
    """Row-wise usability: planet candidate with radius ratio and period (+ both errors)."""
    missing = [c for c in USABILITY_COLUMNS if c not in table.columns]
    if missing:
        raise KeyError(f"KOI table is missing required columns: {missing}")
    is_cand = table["koi_pdisposition"] == CANDIDATE_DISPOSITION
    has_radius = table["koi_ror"].notna()
    has_period = (
        table["koi_period"].notna()
        & table["koi_period_err1"].notna()
        & table["koi_period_err2"].notna()
    )
    return is_cand & has_radius & has_period


def _read_cache(path: Path) -> tuple[pd.DataFrame, list[int]]:
    if not _is_secure_pickle_path(path):
        raise CatalogReadError(path, "refusing to unpickle an insecure or unreadable file")
    try:
        with path.open("rb") as fh:
            data = pickle.load(fh)
    except Exception as exc:
        raise CatalogReadError(path, f"unreadable pickle snapshot ({exc})") from exc

    if not isinstance(data, dict):
        raise CatalogReadError(path, f"snapshot holds {type(data).__name__}, expected dict")
    table = data.get(CACHE_TABLE_KEY)
    if not isinstance(table, pd.DataFrame):
        raise CatalogReadError(path, f"'{CACHE_TABLE_KEY}' is not a DataFrame")
    usable = _as_usable_list(data.get(CACHE_USABLE_KEY))
    if usable is None:
        raise CatalogReadError(path, f"'{CACHE_USABLE_KEY}' is not an integer sequence")
    return table, usable


def _read_text(path: Path) -> tuple[pd.DataFrame, list[int]]:
    try:
        table = pd.read_csv(path, comment="#", low_memory=False)
    except (OSError, ValueError, pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
        raise CatalogReadError(path, f"cannot parse as a delimited table ({exc})") from exc
    try:
        mask = usable_koi_mask(table)
    except KeyError as exc:
        raise CatalogReadError(path, str(exc.args[0])) from exc
    usable = np.flatnonzero(mask.to_numpy()).tolist()
    return table, usable


def read_koi_catalog(
    path: str | Path, force_reread: bool = False
) -> tuple[pd.DataFrame, list[int]]:
    """Read the KOI catalog from a CSV export or a pickle snapshot.

    Args:
        path: CSV file, or `.pkl`/`.pickle` snapshot
        force_reread: Parse `path` as text even if it looks like a snapshot

    Returns:
        Tuple of (table, usable) where:
        - table: Unfiltered KOI table
        - usable: 0-based row positions of planet candidates with a radius
          ratio, a period and both period error bars

    Raises:
        CatalogReadError: If the file cannot be read or parsed, a required
            column is missing, or the snapshot contents have the wrong types.
    """
    p = Path(path)
    if is_cache_path(p) and not force_reread:
        table, usable = _read_cache(p)
    else:
        table, usable = _read_text(p)
    logger.info("Read KOI catalog %s: %d rows, %d usable", p, len(table), len(usable))
    return table, usable


def read_koi_catalog_for_config(
    config: SimulationConfig, force_reread: bool = False
) -> tuple[pd.DataFrame, list[int]]:
    """Read the KOI catalog named by `config.koi_catalog` (relative to `data_dir`)."""
    return read_koi_catalog(config.koi_catalog_path(), force_reread)


def write_koi_catalog_cache(
    path: str | Path, table: pd.DataFrame, usable: Sequence[int]
) -> Path:
    """Write a KOI table and its usable row positions as a pickle snapshot.

    The write is atomic (temp file + replace) and the file is made
    owner-only so `read_koi_catalog` accepts it.
    """
    p = Path(path)
    if not is_cache_path(p):
        raise ValueError(f"snapshot path must end with one of {CACHE_SUFFIXES}: {p}")
    payload = {CACHE_TABLE_KEY: table, CACHE_USABLE_KEY: [int(i) for i in usable]}
    p.parent.mkdir(parents=True, exist_ok=True)
    tmp = p.with_suffix(p.suffix + ".tmp")
    try:
        with tmp.open("wb") as fh:
            pickle.dump(payload, fh, protocol=pickle.HIGHEST_PROTOCOL)
        _best_effort_chmod(tmp, 0o600)
        tmp.replace(p)
    except Exception:
        tmp.unlink(missing_ok=True)
        raise
    return p
