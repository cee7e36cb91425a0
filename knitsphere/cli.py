"""Command-line front end: print a sphere pattern as a numbered list."""

from __future__ import annotations

from dataclasses import replace

import click

from knitsphere import __version__
from knitsphere.api.generate import pattern_from_inputs
from knitsphere.api.inputs import SphereInputs
from knitsphere.config.settings import RowNumbering, load_settings
from knitsphere.errors import PatternError
from knitsphere.logging_config import configure_logging


@click.command()
@click.version_option(version=__version__, prog_name="knitsphere")
@click.option("-d", "--diameter", default=None, help="Diameter of the sphere.")
@click.option("-s", "--stitches", default=None, help="Stitches per unit of length.")
@click.option("-r", "--rows", default=None, help="Rows per unit of length.")
@click.option("-u", "--units", default=None, help="Unit label (in, cm). Display only.")
@click.option("--seed", type=int, default=None, help="Override the increase placement seed.")
@click.option("--legacy-numbering", is_flag=True, help="Use the legacy row numbering.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML settings file.",
)
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
def cli(
    diameter: str | None,
    stitches: str | None,
    rows: str | None,
    units: str | None,
    seed: int | None,
    legacy_numbering: bool,
    config_path: str | None,
    verbose: bool,
) -> None:
    """knitsphere — knitted sphere pattern generator."""
    configure_logging(debug=verbose)

    try:
        settings = load_settings(config_path)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--config") from exc
    if seed is not None:
        settings = replace(settings, seed=seed)
    if legacy_numbering:
        settings = replace(settings, row_numbering=RowNumbering.LEGACY)

    inputs = SphereInputs.from_text(
        diameter, stitches, rows, units=units or settings.default_units
    )
    try:
        lines = pattern_from_inputs(inputs, settings)
    except PatternError as exc:
        raise click.ClickException(exc.detail) from exc

    if not lines:
        click.echo("Enter a diameter, stitch gauge, and row gauge to see a pattern.")
        return

    u = inputs.units
    click.echo("Sphere Size")
    click.echo(f"  Diameter: {inputs.diameter.raw} {u}")
    click.echo("Gauge")
    click.echo(f"  Stitches/{u}: {inputs.stitches_per_unit.raw}")
    click.echo(f"  Rows/{u}: {inputs.rows_per_unit.raw}")
    click.echo("")
    click.echo("Pattern")
    for number, line in enumerate(lines, start=1):
        click.echo(f"{number:>3}. {line}")


def main() -> None:
    cli()
