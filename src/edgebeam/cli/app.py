"""CLI application entry point for edgebeam.

This module provides the main CLI interface using Typer.
"""

import json
import time
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from edgebeam import __version__
from edgebeam.cli.output import (
    console,
    print_batch_summary,
    print_check,
    print_cutout,
    print_device_table,
    print_error,
    print_header,
    print_no_result,
    print_spec,
    print_step,
    print_success,
)
from edgebeam.config import (
    BeamConfig,
    EdgebeamSettings,
    GeometryConfig,
    LoggingConfig,
    LoopMode,
    ScreenConfig,
)
from edgebeam.core import build_path_spec, default_loop_mode, fits_canvas, measure_path
from edgebeam.detection import DEFAULT_DEVICE_TABLE, classify_bounding_rect, gravity_of
from edgebeam.domain import Cutout, PathSpec
from edgebeam.exceptions import (
    BatchInputError,
    EdgebeamError,
    ExportError,
    UnknownDeviceError,
)
from edgebeam.io import read_cutouts, results_to_dict, write_results, write_svg
from edgebeam.utils import BuildLogger, configure_logging, get_logger

# Create the Typer app
app = typer.Typer(
    name="edgebeam",
    help="Compute light-beam paths that trace a device's screen cutout.",
    add_completion=False,
    no_args_is_help=True,
)

ScreenWidth = Annotated[
    float,
    typer.Option("--screen-width", "-W", help="Usable screen width", min=1.0),
]
Padding = Annotated[
    float,
    typer.Option("--padding", "-p", help="Offset of the beam from the cutout edge"),
]
JsonFlag = Annotated[
    bool,
    typer.Option("--json", help="Print the result as JSON"),
]
SvgOption = Annotated[
    Path | None,
    typer.Option("--svg", help="Write an SVG preview to this path"),
]
Duration = Annotated[
    int,
    typer.Option("--duration", help="Preview duration of one traversal in ms", min=1),
]
LoopModeOption = Annotated[
    LoopMode | None,
    typer.Option(
        "--loop-mode",
        help="Preview loop mode (restart|continuous), chosen from the cutout type if unset",
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Edgebeam[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Console logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Compute light-beam paths that trace a device's screen cutout."""
    try:
        logging_config = LoggingConfig(log_file=log_file, log_level=log_level)
    except ValidationError:
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: DEBUG, INFO, WARNING, ERROR, CRITICAL",
        )
        raise typer.Exit(code=1)

    configure_logging(
        log_file=logging_config.log_file,
        console_level=logging_config.log_level,
        file_level=logging_config.file_log_level,
    )


@app.command()
def build(
    cutout_type: Annotated[
        str,
        typer.Option(
            "--type",
            "-t",
            help="Cutout type (none|punch_hole|teardrop|island|notch)",
        ),
    ] = "none",
    x: Annotated[float | None, typer.Option("--x", help="Cutout left edge")] = None,
    y: Annotated[float | None, typer.Option("--y", help="Cutout top edge")] = None,
    width: Annotated[float | None, typer.Option("--width", help="Cutout width")] = None,
    height: Annotated[float | None, typer.Option("--height", help="Cutout height")] = None,
    radius: Annotated[
        float | None,
        typer.Option("--radius", help="Corner radius for islands and notches"),
    ] = None,
    padding: Padding = 0.0,
    screen_width: ScreenWidth = 360.0,
    bleed: Annotated[
        float,
        typer.Option("--bleed", help="Canvas margin for glow", min=0.0, max=200.0),
    ] = 20.0,
    no_mask: Annotated[
        bool,
        typer.Option("--no-mask", help="Do not build the directional glow mask"),
    ] = False,
    as_json: JsonFlag = False,
    svg: SvgOption = None,
    duration: Duration = 1800,
    loop_mode: LoopModeOption = None,
    check: Annotated[
        bool,
        typer.Option("--check", help="Measure the path and compare it to the perimeter"),
    ] = False,
) -> None:
    """Build the beam path for a cutout given on the command line.

    Example:
        edgebeam build --type island --x 117 --y 11 --width 126 --height 37 --radius 20
    """
    settings = EdgebeamSettings(
        geometry=GeometryConfig(bleed=bleed, directional_mask=not no_mask),
        screen=ScreenConfig(width=screen_width),
        beam=BeamConfig(duration_ms=duration, loop_mode=loop_mode),
    )

    try:
        cutout = Cutout.from_dict(
            {
                "type": cutout_type,
                "x": x,
                "y": y,
                "width": width,
                "height": height,
                "radius": radius,
            }
        )
        _emit(cutout, padding, settings, as_json=as_json, svg=svg, check=check)
    except EdgebeamError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def device(
    model_id: Annotated[
        str,
        typer.Argument(help="Hardware model identifier, e.g. iPhone15,2", show_default=False),
    ],
    padding: Padding = 0.0,
    screen_width: ScreenWidth = 393.0,
    as_json: JsonFlag = False,
    svg: SvgOption = None,
    duration: Duration = 1800,
    loop_mode: LoopModeOption = None,
) -> None:
    """Build the beam path for a known device model."""
    settings = EdgebeamSettings(
        screen=ScreenConfig(width=screen_width),
        beam=BeamConfig(duration_ms=duration, loop_mode=loop_mode),
    )

    try:
        DEFAULT_DEVICE_TABLE.require(model_id)
        cutout = DEFAULT_DEVICE_TABLE.resolve(model_id, screen_width=screen_width)
        _emit(cutout, padding, settings, as_json=as_json, svg=svg, check=False)
    except UnknownDeviceError as e:
        print_error(str(e), details="Run 'edgebeam devices' to list known models.")
        raise typer.Exit(code=1)
    except EdgebeamError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def devices() -> None:
    """List the built-in device table."""
    print_device_table(DEFAULT_DEVICE_TABLE)


@app.command()
def classify(
    x: Annotated[float, typer.Option("--x", help="Rectangle left edge in pixels")],
    y: Annotated[float, typer.Option("--y", help="Rectangle top edge in pixels")],
    width: Annotated[float, typer.Option("--width", help="Rectangle width in pixels")],
    height: Annotated[float, typer.Option("--height", help="Rectangle height in pixels")],
    density: Annotated[
        float,
        typer.Option("--density", "-d", help="Pixels per device-independent unit", min=0.01),
    ] = 1.0,
    screen_height: Annotated[
        float,
        typer.Option("--screen-height", help="Screen height in pixels", min=1.0),
    ] = 2400.0,
    as_json: JsonFlag = False,
) -> None:
    """Classify a raw cutout bounding rectangle reported in pixels."""
    cutout = classify_bounding_rect(x, y, width, height, density=density)
    gravity = gravity_of(y, screen_height)

    if as_json:
        typer.echo(json.dumps({**cutout.to_dict(), "gravity": gravity.value}))
        return

    print_cutout(cutout, gravity)


@app.command()
def batch(
    input_file: Annotated[
        Path,
        typer.Argument(help="JSON array of cutout mappings", show_default=False),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write results to this JSON file"),
    ] = None,
    padding: Padding = 0.0,
    screen_width: ScreenWidth = 360.0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Suppress the summary"),
    ] = False,
) -> None:
    """Build beam paths for every cutout in a JSON file.

    Results map each entry's label to its path spec, or null when there is
    nothing to render. Without --output they are printed as JSON.
    """
    settings = EdgebeamSettings(screen=ScreenConfig(width=screen_width))
    build_logger = BuildLogger(get_logger(__name__))

    try:
        entries = read_cutouts(input_file)
    except BatchInputError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    start_time = time.perf_counter()
    results: dict[str, PathSpec | None] = {}
    for label, fields in entries:
        try:
            cutout = Cutout.from_dict(fields)
            spec = build_path_spec(
                cutout,
                padding,
                viewport=settings.screen.to_viewport(),
                config=settings.geometry,
            )
        except EdgebeamError as e:
            build_logger.log_error(label, e)
            continue

        results[label] = spec
        type_value = cutout.to_dict()["type"]
        if spec is None:
            build_logger.log_no_result(label, type_value)
        else:
            build_logger.log_built(label, type_value, spec.perimeter)
    elapsed = time.perf_counter() - start_time

    if output is None:
        typer.echo(json.dumps(results_to_dict(results)))
        if not quiet:
            for label, message in build_logger.stats.errors:
                typer.echo(f"{label}: {message}", err=True)
    else:
        try:
            write_results(results, output)
        except ExportError as e:
            print_error(f"Could not write results: {e.reason}")
            raise typer.Exit(code=1)
        if not quiet:
            print_batch_summary(str(output), elapsed, build_logger.stats)

    if build_logger.stats.error_count > 0:
        raise typer.Exit(code=1)


def _emit(
    cutout: Cutout,
    padding: float,
    settings: EdgebeamSettings,
    as_json: bool,
    svg: Path | None,
    check: bool,
) -> None:
    """Build a spec and report it in the requested form."""
    spec = build_path_spec(
        cutout,
        padding,
        viewport=settings.screen.to_viewport(),
        config=settings.geometry,
    )

    if as_json:
        typer.echo(json.dumps(spec.to_dict() if spec is not None else None))
    elif spec is None:
        print_no_result(cutout)
    else:
        print_header(__version__)
        print_cutout(cutout)
        print_step("Path")
        print_spec(spec)

    if spec is None:
        return

    if check and not as_json:
        _check(spec)

    if svg is not None:
        try:
            write_svg(
                spec,
                svg,
                beam_length=settings.beam.beam_length,
                duration_ms=settings.beam.duration_ms,
                loop_mode=settings.beam.loop_mode or default_loop_mode(cutout.type),
            )
        except ExportError as e:
            print_error(f"Could not write preview: {e.reason}")
            raise typer.Exit(code=1)
        if not as_json:
            print_success(f"Preview written to {svg}")


def _check(spec: PathSpec) -> None:
    print_step("Check")
    measured = measure_path(spec.path_d).length
    print_check(spec.perimeter, measured, fits_canvas(spec))


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
