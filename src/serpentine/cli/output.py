"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

import math

from rich.console import Console
from rich.table import Table
from rich.text import Text

from serpentine.core import Bounds
from serpentine.domain import Arc, Bezier, EllipseArc, PathData, Point, Segment

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Serpentine[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_scene_info(
    scene_path: str, circle_count: int, order_count: int, mode: str, planes: int
) -> None:
    """Print scene information.

    Args:
        scene_path: Path to the scene file
        circle_count: Number of circles in the scene
        order_count: Number of ids in the traversal order
        mode: Path mode name
        planes: Number of mirror planes
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(scene_path)
    console.print(line)
    console.print(
        f"  {circle_count} circles {SYM_DOT} {order_count} in order {SYM_DOT} "
        f"{mode} {SYM_DOT} {planes} mirror planes"
    )


def _fmt_point(point: Point) -> str:
    return f"({point.x:.3f}, {point.y:.3f})"


def _describe(segment: Segment) -> str:
    """Short geometric detail for the segments table."""
    if isinstance(segment, Arc):
        direction = "ccw" if segment.counterclockwise else "cw"
        return f"r={segment.radius:.3f} {math.degrees(segment.sweep):.1f}° {direction}"
    if isinstance(segment, EllipseArc):
        direction = "ccw" if segment.counterclockwise else "cw"
        return (
            f"r={segment.radius_x:.3f}x{segment.radius_y:.3f} "
            f"{math.degrees(segment.sweep):.1f}° {direction}"
        )
    if isinstance(segment, Bezier):
        return f"cp {_fmt_point(segment.cp1)} {_fmt_point(segment.cp2)}"
    return ""


def print_segments(path: PathData) -> None:
    """Print a table of the path's segments.

    Args:
        path: Computed path
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("#", justify="right")
    table.add_column("Type")
    table.add_column("Start")
    table.add_column("End")
    table.add_column("Length", justify="right")
    table.add_column("Detail")

    for index, segment in enumerate(path.segments, start=1):
        table.add_row(
            str(index),
            segment.segment_type.value,
            _fmt_point(segment.start_point),
            _fmt_point(segment.end_point),
            f"{segment.length:.3f}",
            _describe(segment),
        )

    console.print(table)


def print_summary(path: PathData, bounds: Bounds | None) -> None:
    """Print total length and bounds of a path.

    Args:
        path: Computed path
        bounds: Bounds of the path (None for an empty path)
    """
    counts = path.count_by_type()
    parts = [f"{count} {segment_type.value}" for segment_type, count in counts.items()]
    console.print(f"\n[bold green]{SYM_OK} {len(path.segments)} segments[/bold green]")
    if parts:
        console.print(f"  {f' {SYM_DOT} '.join(parts)}")
    console.print(f"  Total length {path.total_length:.3f}")
    if bounds is not None:
        console.print(
            f"  Bounds ({bounds.min_x:.3f}, {bounds.min_y:.3f}) to "
            f"({bounds.max_x:.3f}, {bounds.max_y:.3f}) {SYM_DOT} "
            f"{bounds.width:.3f} x {bounds.height:.3f}"
        )


def print_empty_path() -> None:
    """Print the result for a path with nothing to draw."""
    console.print(f"\n{SYM_DOT} Nothing to draw (fewer than two circles take part)")


def print_axes(axes: list[float]) -> None:
    """Print constraint axes in radians and degrees.

    Args:
        axes: Axis angles in [0, pi)
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("#", justify="right")
    table.add_column("Radians", justify="right")
    table.add_column("Degrees", justify="right")
    for index, axis in enumerate(axes, start=1):
        table.add_row(str(index), f"{axis:.6f}", f"{math.degrees(axis):.2f}")
    console.print(table)


def print_snap(delta: Point, snapped: Point, axis: float | None) -> None:
    """Print a constrained drag delta.

    Args:
        delta: Requested movement
        snapped: Movement after snapping
        axis: Axis the movement snapped to (None for a zero delta)
    """
    console.print(f"  Delta    {_fmt_point(delta)}")
    if axis is None:
        console.print(f"  Snapped  {_fmt_point(snapped)} {SYM_DOT} zero movement")
    else:
        console.print(
            f"  Snapped  {_fmt_point(snapped)} {SYM_DOT} axis {math.degrees(axis):.2f}°"
        )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
