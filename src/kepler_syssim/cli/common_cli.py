"""Shared helpers for click-based `syssim` commands."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import click
import pandas as pd

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_RUNTIME_ERROR = 2

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class SyssimCliError(click.ClickException):
    """Click exception with explicit exit-code control."""

    def __init__(self, message: str, *, exit_code: int = EXIT_INPUT_ERROR) -> None:
        super().__init__(message)
        self.exit_code = int(exit_code)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def load_star_table(path: Path) -> pd.DataFrame:
    """Load a stellar table CSV with user-facing errors."""
    try:
        return pd.read_csv(path, comment="#")
    except FileNotFoundError as exc:
        raise SyssimCliError(f"Star table not found: {path}") from exc
    except (OSError, ValueError) as exc:
        raise SyssimCliError(f"Cannot read star table {path}: {exc}") from exc


def dump_json_output(payload: dict[str, Any], out_path: Path | None) -> None:
    """Write JSON payload to file or stdout."""
    text = json.dumps(payload, sort_keys=True, indent=2)
    if out_path is None:
        click.echo(text)
        return
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(text + "\n", encoding="utf-8")
