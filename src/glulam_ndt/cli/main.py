"""
Main CLI entry point for glulam-ndt using Click.

Usage:
    glulam-ndt thickness FILE [--beam-length 8ft|12ft] [--json]
    glulam-ndt layers FILE [--json]
    glulam-ndt inspect --thickness FILE [--layers FILE] [--zone N] [--output DIR]
    glulam-ndt grid [--json]
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click

from glulam_ndt.config import DepthScanConfig, ThicknessScanConfig, load_config
from glulam_ndt.detection import detect_thickness_zones, locate_layers
from glulam_ndt.enums import BeamLength
from glulam_ndt.errors import AnalysisInputError
from glulam_ndt.models.grid import GLUE_LINES, LAYER_GRID, LUMBER_LAYERS
from glulam_ndt.models.results import DepthScanResult, ThicknessScanResult
from glulam_ndt.parsers import DepthScanParser, ThicknessScanParser
from glulam_ndt.workflow import inspect_files
from glulam_ndt.writers import dumps_report, write_inspection_to_json

BEAM_LENGTH_CHOICES = [b.value for b in BeamLength]

SEVERITY_COLORS = {
    "Severe": "red",
    "Moderate": "yellow",
    "Mild": "bright_yellow",
    "Possible": "blue",
}


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Configure logging based on verbosity."""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


class Config:
    """Shared configuration for CLI commands."""

    def __init__(self) -> None:
        self.verbose = False
        self.debug = False
        self.thickness = ThicknessScanConfig()
        self.depth = DepthScanConfig()


pass_config = click.make_pass_decorator(Config, ensure=True)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug output")
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True),
    help="JSON file overriding detector settings",
)
@click.version_option(version="0.1.0", prog_name="glulam-ndt")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, debug: bool, config_file: Optional[str]) -> None:
    """Ultrasonic delamination analysis for glulam beams."""
    ctx.ensure_object(Config)
    ctx.obj.verbose = verbose
    ctx.obj.debug = debug
    setup_logging(verbose=verbose, debug=debug)

    if config_file:
        try:
            ctx.obj.thickness, ctx.obj.depth = load_config(config_file)
        except ValueError as e:
            raise click.ClickException(f"Error loading settings: {e}")


def _resolve_beam_length(option: Optional[str], from_file: Optional[BeamLength]) -> BeamLength:
    if option:
        return BeamLength(option)
    if from_file is not None:
        return from_file
    raise click.ClickException(
        "Beam length not given: use --beam-length or add '# Beam length: 8ft' to the file"
    )


@cli.command()
@click.argument("file", type=click.Path(exists=True))
@click.option(
    "--beam-length",
    "-b",
    type=click.Choice(BEAM_LENGTH_CHOICES),
    help="Nominal beam length (defaults to the file header)",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@pass_config
def thickness(config: Config, file: str, beam_length: Optional[str], as_json: bool) -> None:
    """Detect delamination zones from a thickness-wise scan.

    FILE holds one reading per line: position (in) and TOF (μs).

    Example:
        glulam-ndt thickness beam_A.csv --beam-length 12ft
    """
    logger = logging.getLogger("thickness")

    logger.info(f"Parsing thickness scan: {file}")
    try:
        data = ThicknessScanParser().parse(file)
    except (OSError, ValueError) as e:
        raise click.ClickException(f"Error parsing scan file: {e}")

    if data.skipped:
        click.echo(
            click.style(f"Warning: skipped {data.skipped} unreadable line(s)", fg="yellow"),
            err=True,
        )

    length = _resolve_beam_length(beam_length, data.beam_length)

    try:
        result = detect_thickness_zones(data.samples, length.inches, config=config.thickness)
    except AnalysisInputError as e:
        raise click.ClickException(str(e))

    if as_json:
        output = result.to_dict()
        output["beam_length"] = length.value
        click.echo(dumps_report(output))
    else:
        _print_thickness_result(result, length)


@cli.command()
@click.argument("file", type=click.Path(exists=True))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@pass_config
def layers(config: Config, file: str, as_json: bool) -> None:
    """Locate delaminated layers from a depth-wise scan.

    FILE holds one reading per line: display depth (1.4 ... 7.0) or
    layer name (Mid-L1, GL1, ...) and TOF (μs).

    Example:
        glulam-ndt layers beam_A_zone1.txt
    """
    logger = logging.getLogger("layers")

    logger.info(f"Parsing depth scan: {file}")
    try:
        data = DepthScanParser().parse(file)
    except (OSError, ValueError) as e:
        raise click.ClickException(f"Error parsing scan file: {e}")

    try:
        result = locate_layers(data.layer_values, config=config.depth)
    except AnalysisInputError as e:
        raise click.ClickException(str(e))

    if as_json:
        click.echo(dumps_report(result.to_dict()))
    else:
        _print_depth_result(result)


@cli.command()
@click.option(
    "--thickness",
    "-t",
    "thickness_file",
    required=True,
    type=click.Path(exists=True),
    help="Thickness-wise scan file",
)
@click.option(
    "--layers",
    "-l",
    "layers_file",
    type=click.Path(exists=True),
    help="Depth-wise scan file taken in one of the zones",
)
@click.option(
    "--zone",
    "-z",
    type=click.IntRange(min=1),
    help="Zone number the depth scan was taken in (default: file header, then 1)",
)
@click.option(
    "--beam-length",
    "-b",
    type=click.Choice(BEAM_LENGTH_CHOICES),
    help="Nominal beam length (defaults to the thickness file header)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    help="Directory to write JSON reports to",
)
@click.option("--json", "as_json", is_flag=True, help="Output result as JSON")
@pass_config
def inspect(
    config: Config,
    thickness_file: str,
    layers_file: Optional[str],
    zone: Optional[int],
    beam_length: Optional[str],
    output: Optional[str],
    as_json: bool,
) -> None:
    """Run the full inspection: zones along the beam, then layers in one zone.

    Example:
        glulam-ndt inspect -t beam_A.csv -l beam_A_zone1.txt -b 12ft -o ./reports/
    """
    logger = logging.getLogger("inspect")

    logger.info("Inspecting beam...")
    try:
        result = inspect_files(
            thickness_file,
            beam_length=beam_length,
            depth_path=layers_file,
            zone_index=zone - 1 if zone else None,
            thickness_config=config.thickness,
            depth_config=config.depth,
        )
    except (OSError, ValueError) as e:
        raise click.ClickException(str(e))

    if as_json:
        click.echo(dumps_report(result.to_dict()))
    else:
        click.echo(result.summary())

    if output:
        logger.info(f"Writing to: {output}")
        try:
            paths = write_inspection_to_json(result, Path(output))
        except OSError as e:
            raise click.ClickException(f"Error writing output: {e}")
        if not as_json:
            click.echo(click.style("\nOutput files:", fg="green"))
            for name, path in paths.items():
                click.echo(f"  {name}: {path}")

    if result.has_errors:
        sys.exit(1)


@cli.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def grid(as_json: bool) -> None:
    """Show the depth-scan layer grid."""
    if as_json:
        click.echo(json.dumps([slot.to_dict() for slot in LAYER_GRID], indent=2))
        return

    click.echo(f"Depth-scan grid ({LUMBER_LAYERS} lumber layers, {GLUE_LINES} glue lines):")
    for slot in LAYER_GRID:
        click.echo(
            f'  {slot.index + 1}. {slot.display_depth:.1f}"  '
            f'{slot.layer_name:<7} actual depth {slot.actual_depth:.1f}"'
        )


def _print_thickness_result(result: ThicknessScanResult, length: BeamLength) -> None:
    """Print a summary of a zone detector result."""
    click.echo(f"Beam: {length.value} ({length.inches} inches)")
    click.echo(f"Baseline TOF: {result.mean:.0f} μs (± {result.std_dev:.0f} μs)")

    if not result.has_delamination:
        click.echo(click.style("No Delamination Detected", fg="green"))
        return

    click.echo(
        click.style(f"Delamination Detected - {result.zone_count} Zone(s) Found", fg="red")
    )
    for idx, zone in enumerate(result.zones):
        label = f"Zone {idx + 1} - {zone.severity} ({zone.confidence} Confidence)"
        click.echo(click.style(label, fg=SEVERITY_COLORS.get(zone.severity)))
        click.echo(f'  {zone.start:.1f}" to {zone.end:.1f}", {zone.point_count} point(s)')
        click.echo(f"  Pattern: {zone.tof_pattern} μs")
        if zone.needs_more_data:
            click.echo(
                click.style(
                    f'  ⚠ Take additional measurements at {zone.suggested_interval:g}" intervals',
                    fg="yellow",
                )
            )


def _print_depth_result(result: DepthScanResult) -> None:
    """Print a summary of a layer locator result."""
    if not result.has_delamination:
        click.echo(click.style("No delaminated layer identified", fg="green"))
        return

    click.echo(click.style("Delamination at:", fg="red"))
    for layer in result.identified_layers:
        click.echo(
            f'  {layer.layer_name}: depth {layer.depth}" '
            f"({layer.confidence} confidence, {layer.detection})"
        )


def app(args: Optional[list[str]] = None) -> int:
    """
    Main application entry point (for testing).

    Args:
        args: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success)
    """
    try:
        cli(args, standalone_mode=False)
        return 0
    except click.ClickException as e:
        e.show()
        return 1
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        return 1


def main() -> None:
    """CLI entry point."""
    cli()


if __name__ == "__main__":
    main()
