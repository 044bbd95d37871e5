"""
Command-line interface for plateblock.

Commands:
- render: Build a drawing and export SVG (and optionally JSON / PDF)
- properties: Print the formatted plate properties
- ranges: Print the input slider ranges for each field
- import: Render a drawing from an exported parameter file

Usage:
    plateblock render --width 12 --hole 3 -o plate.svg
    plateblock render -c plate.yaml --unit mm --json plate.json
    plateblock properties --unit mm --precision 1
    plateblock import plate.json -o plate.svg
    plateblock -v --log-file plateblock.log render -o plate.svg
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
import yaml

from . import __version__
from .config_schema import DrawingConfig
from .drawing_generator.drawing import PlateDrawing
from .drawing_generator.parameters import PARAMETER_FIELDS, input_range
from .drawing_generator.units import Unit
from .drawing_generator.view_config import ViewConfig
from .logging_config import setup_logging

logger = logging.getLogger(__name__)

UNIT_CHOICES = [u.value for u in Unit]


def _drawing_options(func):
    """Shared options for commands that build a drawing."""
    options = [
        click.option(
            "--config", "-c", "config_path",
            type=click.Path(exists=True, dir_okay=False, path_type=Path),
            help="YAML drawing configuration to start from.",
        ),
        click.option("--width", default=None, help="Plate width in display units."),
        click.option("--thickness", default=None, help="Plate thickness in display units."),
        click.option("--hole", default=None, help="Center hole diameter in display units."),
        click.option("--unit", type=click.Choice(UNIT_CHOICES), default=None,
                      help="Display unit (in or mm)."),
        click.option("--precision", default=None, help="Decimal places (0-4)."),
        click.option("--zoom", default=None, help="Zoom factor (2.5-5.0)."),
        click.option("--dimensions/--no-dimensions", default=None,
                      help="Show or hide dimensions."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _load_config(
    config_path: Path | None,
    width: str | None,
    thickness: str | None,
    hole: str | None,
    unit: str | None,
    precision: str | None,
    zoom: str | None,
    dimensions: bool | None,
) -> DrawingConfig:
    """Merge a config file with command-line overrides."""
    try:
        config = DrawingConfig.from_yaml(config_path) if config_path else DrawingConfig()
    except (OSError, yaml.YAMLError, TypeError, ValueError) as e:
        raise click.ClickException(f"Cannot read config {config_path}: {e}") from e

    view_changes = {}
    if unit is not None:
        view_changes["unit"] = unit
    if precision is not None:
        view_changes["precision"] = precision
    if zoom is not None:
        view_changes["zoom"] = zoom
    if dimensions is not None:
        view_changes["show_dimensions"] = dimensions

    if "unit" in view_changes and config.parameters:
        # Parameters from the file are in the file's unit; pin them first
        drawing = _build_drawing(config)
        config = DrawingConfig.from_drawing(
            PlateDrawing(drawing.parameters, drawing.view.with_changes(**view_changes))
        )
    elif view_changes:
        config.view = config.view.with_changes(**view_changes)

    overrides = {"width": width, "thickness": thickness, "center_hole_diameter": hole}
    for name, value in overrides.items():
        if value is not None:
            config.parameters[name] = value
    return config


def _build_drawing(config: DrawingConfig) -> PlateDrawing:
    try:
        return config.build_drawing()
    except KeyError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Also write the log to this file.",
)
def cli(verbose: bool, log_file: Path | None):
    """plateblock - parametric plate drawings with engineering dimensions."""
    setup_logging(logging.DEBUG if verbose else logging.WARNING, log_file)


@cli.command()
@_drawing_options
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=Path("acad-block-simple.svg"),
    show_default=True,
    help="SVG output path.",
)
@click.option(
    "--json", "json_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Also write the parameters as JSON.",
)
@click.option(
    "--pdf", "pdf_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Also write a PDF (requires svglib and reportlab).",
)
def render(output: Path, json_path: Path | None, pdf_path: Path | None, **options):
    """
    Render a plate drawing to SVG.

    Values are given in the display unit and are clamped to the allowed
    ranges; values that are not numbers are ignored.

    Example:
        plateblock render --unit mm --width 300 --hole 60 -o plate.svg
    """
    drawing = _build_drawing(_load_config(**options))

    drawing.export_svg(output)
    click.echo(f"Exported SVG: {output}")

    if json_path:
        drawing.export_json(json_path)
        click.echo(f"Exported JSON: {json_path}")

    if pdf_path:
        try:
            drawing.export_pdf(pdf_path)
        except ImportError as e:
            raise click.ClickException(str(e)) from e
        click.echo(f"Exported PDF: {pdf_path}")


@cli.command()
@_drawing_options
def properties(**options):
    """Print the plate properties in the display unit."""
    drawing = _build_drawing(_load_config(**options))

    click.echo("Plate Properties")
    click.echo("-" * 30)
    for label, value in drawing.properties():
        click.echo(f"  {label:<16}{value:>12}")


@cli.command()
@_drawing_options
def ranges(**options):
    """Print the input range offered for each field."""
    drawing = _build_drawing(_load_config(**options))
    unit = drawing.view.unit

    for name in PARAMETER_FIELDS:
        rng = input_range(name, drawing.parameters, unit)
        click.echo(
            f"  {rng.label:<16}{rng.minimum:>10.2f} .. {rng.maximum:<10.2f}"
            f"step {rng.step:g} {unit.value}"
        )


@cli.command(name="import")
@click.argument("params_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="SVG output path (default: next to the parameter file).",
)
@click.option("--unit", type=click.Choice(UNIT_CHOICES), default=Unit.IMPERIAL.value,
              help="Display unit (in or mm).")
@click.option("--precision", default="2", help="Decimal places (0-4).")
def import_params(params_file: Path, output: Path | None, unit: str, precision: str):
    """Render a drawing from an exported JSON parameter file."""
    try:
        drawing = PlateDrawing.from_json(
            params_file, view=ViewConfig(unit=unit, precision=precision)
        )
    except (OSError, ValueError) as e:
        # json.JSONDecodeError is a ValueError
        raise click.ClickException(f"Cannot read parameters {params_file}: {e}") from e

    if output is None:
        output = params_file.with_suffix(".svg")

    drawing.export_svg(output)
    click.echo(f"Exported SVG: {output}")
    logger.debug("Imported parameters: %s", drawing.parameters)


def main():
    cli()


if __name__ == "__main__":
    main()
