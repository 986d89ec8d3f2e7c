"""Command line interface for kepler-syssim."""

from kepler_syssim.cli.main import cli, main

__all__ = ["cli", "main"]
