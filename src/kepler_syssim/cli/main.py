"""`syssim` command line interface."""

from __future__ import annotations

from pathlib import Path

import click

from kepler_syssim.catalogs.assemble import setup_actual_planet_candidate_catalog
from kepler_syssim.catalogs.koi import read_koi_catalog, write_koi_catalog_cache
from kepler_syssim.cli.common_cli import (
    LOG_LEVELS,
    SyssimCliError,
    configure_logging,
    dump_json_output,
    load_star_table,
)
from kepler_syssim.errors import CatalogReadError
from kepler_syssim.simulation.rng import seed_rng


@click.group()
@click.version_option(package_name="kepler-syssim")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging verbosity.",
)
def cli(log_level: str) -> None:
    """kepler-syssim CLI for KOI catalogs and observed-catalog assembly."""
    configure_logging(log_level)


@cli.command("koi-cache")
@click.argument("koi_csv", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("out_path", type=click.Path(dir_okay=False, path_type=Path))
def koi_cache(koi_csv: Path, out_path: Path) -> None:
    """Parse KOI_CSV and write a pickle snapshot to OUT_PATH (.pkl)."""
    try:
        table, usable = read_koi_catalog(koi_csv, force_reread=True)
        write_koi_catalog_cache(out_path, table, usable)
    except (CatalogReadError, ValueError) as exc:
        raise SyssimCliError(str(exc)) from exc
    dump_json_output(
        {"rows": len(table), "usable": len(usable), "snapshot": str(out_path)}, None
    )


@cli.command("obs-catalog")
@click.argument("star_csv", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("koi_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--force-reread",
    is_flag=True,
    default=False,
    help="Parse KOI_PATH as CSV even if it is a snapshot.",
)
@click.option("--seed", type=int, default=None, help="Seed for the fallback star lookup.")
@click.option(
    "--out",
    "-o",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the JSON summary here instead of stdout.",
)
def obs_catalog(
    star_csv: Path,
    koi_path: Path,
    force_reread: bool,
    seed: int | None,
    output_path: Path | None,
) -> None:
    """Assemble the observed catalog of real Kepler targets and summarize it."""
    star_table = load_star_table(star_csv)
    try:
        koi, usable = read_koi_catalog(koi_path, force_reread)
    except CatalogReadError as exc:
        raise SyssimCliError(str(exc)) from exc
    rng = seed_rng(seed) if seed is not None else None
    try:
        catalog = setup_actual_planet_candidate_catalog(star_table, koi, usable, rng=rng)
    except (KeyError, ValueError) as exc:
        raise SyssimCliError(f"Malformed input table: {exc}") from exc
    dump_json_output(
        {
            "targets": len(catalog),
            "planets": catalog.num_planets(),
            "planets_per_target": [t.num_planets for t in catalog.target],
        },
        output_path,
    )


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
