"""CLI application entry point for serpentine.

This module provides the main CLI interface using Typer.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from serpentine import __version__
from serpentine.cli.output import (
    console,
    print_axes,
    print_empty_path,
    print_error,
    print_header,
    print_scene_info,
    print_segments,
    print_snap,
    print_step,
    print_summary,
)
from serpentine.config import HullConfig, LoggingConfig, SerpentineSettings
from serpentine.core import (
    AxisConstraintSolver,
    TangentHullBuilder,
    calculate_path_bounds,
    path_to_svg,
    scale_path,
)
from serpentine.domain import MirrorConfig, PathMode, PathOptions, Point
from serpentine.exceptions import SceneError, SerpentineError
from serpentine.io import read_scene
from serpentine.utils import configure_logging

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# Create the Typer app
app = typer.Typer(
    name="serpentine",
    help="Compute tangent hull paths around ordered circles.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Serpentine[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
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
    """Compute tangent hull paths around ordered circles."""


def _mirror_config(
    base: MirrorConfig, planes: int | None, start_angle: float | None
) -> MirrorConfig:
    """Apply command-line overrides to a mirror configuration."""
    return MirrorConfig(
        plane_count=base.plane_count if planes is None else planes,
        start_angle=base.start_angle if start_angle is None else start_angle,
    )


def _path_options(
    base: PathOptions,
    mode: PathMode | None,
    closed: bool | None,
    use_start: bool | None,
    use_end: bool | None,
    stretch: float | None,
) -> PathOptions:
    """Apply command-line overrides to path options.

    A mode replaces all topology flags; the individual flags then override
    single values.
    """
    options = base if mode is None else PathOptions.from_mode(mode, base.global_stretch)
    options = PathOptions(
        closed=options.closed if closed is None else closed,
        use_start_point=options.use_start_point if use_start is None else use_start,
        use_end_point=options.use_end_point if use_end is None else use_end,
        global_stretch=options.global_stretch,
    )
    if stretch is not None:
        options = options.with_stretch(stretch)
    return options


@app.command()
def hull(
    scene_file: Annotated[
        Path,
        typer.Argument(
            help="Path to JSON scene file",
            show_default=False,
        ),
    ],
    mode: Annotated[
        PathMode | None,
        typer.Option(
            "--mode",
            "-m",
            help="Path mode (overrides the scene's topology flags)",
        ),
    ] = None,
    closed: Annotated[
        bool | None,
        typer.Option(
            "--closed/--open",
            help="Close the loop from the last circle back to the first",
            show_default=False,
        ),
    ] = None,
    use_start: Annotated[
        bool | None,
        typer.Option(
            "--start/--no-start",
            help="Wrap around the back of the first circle (open paths)",
            show_default=False,
        ),
    ] = None,
    use_end: Annotated[
        bool | None,
        typer.Option(
            "--end/--no-end",
            help="Wrap around the back of the last circle (open paths)",
            show_default=False,
        ),
    ] = None,
    stretch: Annotated[
        float | None,
        typer.Option(
            "--stretch",
            "-s",
            help="Connector stretch (-1.0 to 1.0)",
            min=-1.0,
            max=1.0,
        ),
    ] = None,
    planes: Annotated[
        int | None,
        typer.Option(
            "--planes",
            "-n",
            help="Number of mirror planes (0 disables mirroring)",
            min=0,
        ),
    ] = None,
    start_angle: Annotated[
        float | None,
        typer.Option(
            "--start-angle",
            help="Angle of the first mirror plane in radians",
        ),
    ] = None,
    scale_x: Annotated[
        float,
        typer.Option(
            "--scale-x",
            help="Horizontal scale factor applied to the result",
        ),
    ] = 1.0,
    scale_y: Annotated[
        float,
        typer.Option(
            "--scale-y",
            help="Vertical scale factor applied to the result",
        ),
    ] = 1.0,
    svg: Annotated[
        bool,
        typer.Option(
            "--svg",
            help="Print SVG path data only",
        ),
    ] = False,
    as_json: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Print the path as JSON only",
        ),
    ] = False,
    precision: Annotated[
        int,
        typer.Option(
            "--precision",
            help="Decimal places in SVG output",
            min=0,
            max=12,
        ),
    ] = 3,
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
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
) -> None:
    """Compute the tangent hull of a scene and print its segments.

    Flags given on the command line override the values stored in the scene.

    Example:
        serpentine hull stadium.json --closed --svg
    """
    # Validate mutually exclusive options
    if svg and as_json:
        print_error("Cannot use --svg and --json together")
        raise typer.Exit(code=1)

    if log_level.upper() not in LOG_LEVELS:
        print_error(
            f"Invalid log level: {log_level}",
            details=f"Valid values: {', '.join(LOG_LEVELS)}",
        )
        raise typer.Exit(code=1)

    quiet = svg or as_json
    settings = SerpentineSettings(
        hull=HullConfig(),
        logging=LoggingConfig(log_file=log_file, log_level=log_level.upper()),
    )
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
    )

    try:
        scene = read_scene(scene_file)
        options = _path_options(scene.options, mode, closed, use_start, use_end, stretch)
        mirror_config = _mirror_config(scene.mirror_config, planes, start_angle)

        if not quiet:
            print_header(__version__)
            print_step("Loading scene")
            print_scene_info(
                scene_path=str(scene_file),
                circle_count=len(scene.circles),
                order_count=len(scene.order),
                mode=options.mode.value,
                planes=mirror_config.plane_count,
            )
            print_step("Computing hull")

        builder = TangentHullBuilder(config=settings.hull)
        path = builder.build(scene.circles, scene.order, options, mirror_config)
        if scale_x != 1.0 or scale_y != 1.0:
            path = scale_path(path, scale_x, scale_y)

        logger.info(
            "Hull computed",
            scene=str(scene_file),
            mode=options.mode.value,
            segments=len(path.segments),
            total_length=path.total_length,
        )

        bounds = None if path.is_empty() else calculate_path_bounds(path.segments)

        if svg:
            typer.echo(path_to_svg(path.segments, closed=options.closed, precision=precision))
            return

        if as_json:
            payload = path.to_dict()
            payload["closed"] = options.closed
            payload["bounds"] = list(bounds.to_tuple()) if bounds is not None else None
            typer.echo(json.dumps(payload, indent=2))
            return

        if path.is_empty():
            print_empty_path()
            return

        print_segments(path)
        print_summary(path, bounds)

    except SceneError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except SerpentineError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except ValueError as e:
        print_error(f"Invalid value: {e}")
        raise typer.Exit(code=1)


@app.command()
def axes(
    planes: Annotated[
        int,
        typer.Option(
            "--planes",
            "-n",
            help="Number of mirror planes (0 disables mirroring)",
            min=0,
        ),
    ] = 0,
    start_angle: Annotated[
        float,
        typer.Option(
            "--start-angle",
            help="Angle of the first mirror plane in radians",
        ),
    ] = 0.0,
) -> None:
    """List the drag constraint axes for a mirror configuration."""
    solver = AxisConstraintSolver(MirrorConfig(plane_count=planes, start_angle=start_angle))
    console.print(f"\n[bold]{len(solver.axes)} constraint axes[/bold]\n")
    print_axes(solver.axes)


@app.command()
def snap(
    dx: Annotated[float, typer.Argument(help="Horizontal movement", show_default=False)],
    dy: Annotated[float, typer.Argument(help="Vertical movement", show_default=False)],
    planes: Annotated[
        int,
        typer.Option(
            "--planes",
            "-n",
            help="Number of mirror planes (0 disables mirroring)",
            min=0,
        ),
    ] = 0,
    start_angle: Annotated[
        float,
        typer.Option(
            "--start-angle",
            help="Angle of the first mirror plane in radians",
        ),
    ] = 0.0,
) -> None:
    """Snap a drag delta to the nearest constraint axis.

    Use ``--`` before negative values, e.g. ``serpentine snap -- -3 4``.
    """
    solver = AxisConstraintSolver(MirrorConfig(plane_count=planes, start_angle=start_angle))
    delta = Point(dx, dy)
    print_snap(delta, solver.constrain(delta), solver.nearest_axis(delta))


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
