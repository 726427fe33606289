"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from edgebeam.detection import DeviceTable, Gravity
from edgebeam.domain import Cutout, PathSpec
from edgebeam.utils import BuildStats

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
    console.print(f"\n[bold]Edgebeam[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_cutout(cutout: Cutout, gravity: Gravity | None = None) -> None:
    """Print a cutout's category and geometry.

    Args:
        cutout: Cutout to describe
        gravity: Screen edge the cutout is attached to, if known
    """
    data = cutout.to_dict()
    line = Text("  ")
    line.append(str(data.pop("type")), style="bold")
    if data:
        line.append(" " + " ".join(f"{k}={v:g}" for k, v in data.items()))
    if gravity is not None:
        line.append(f" {SYM_DOT} {gravity.value}")
    console.print(line)


def print_spec(spec: PathSpec) -> None:
    """Print a path spec as a two-column table.

    Args:
        spec: Path spec to describe
    """
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("field", style="dim")
    table.add_column("value", overflow="fold")

    table.add_row("family", spec.family.value)
    table.add_row("perimeter", f"{spec.perimeter:.3f}")
    table.add_row(
        "canvas",
        f"{spec.svg_left:g},{spec.svg_top:g} {SYM_DOT} {spec.svg_width:g}×{spec.svg_height:g}",
    )
    table.add_row("path", Text(spec.path_d))
    if spec.mask_d is not None and spec.mask_fill_rule is not None:
        table.add_row("mask", Text(spec.mask_d))
        table.add_row("fill rule", spec.mask_fill_rule.value)
    console.print(table)


def print_no_result(cutout: Cutout) -> None:
    """Print the notice for a cutout that yields nothing to render."""
    type_value = cutout.to_dict()["type"]
    console.print(
        f"\n{SYM_DOT} Nothing to render for cutout type [bold]{escape(type_value)}[/bold]"
    )


def print_check(declared: float, measured: float, fits: bool) -> None:
    """Print the result of cross-checking a spec against its measured path.

    Args:
        declared: Closed-form perimeter from the spec
        measured: Numerically measured length of the path
        fits: Whether the path stays inside its canvas
    """
    ok = abs(declared - measured) <= max(1e-6, 1e-6 * abs(declared))
    style = "green" if ok else "red"
    symbol = SYM_OK if ok else SYM_ERR
    console.print(
        f"  [{style}]{symbol}[/{style}] perimeter {declared:.4f} {SYM_DOT} measured {measured:.4f}"
    )
    style = "green" if fits else "red"
    symbol = SYM_OK if fits else SYM_ERR
    console.print(f"  [{style}]{symbol}[/{style}] path inside canvas")


def print_device_table(table: DeviceTable) -> None:
    """Print every entry of a device table."""
    output = Table(box=None, padding=(0, 2))
    output.add_column("model")
    output.add_column("type")
    output.add_column("size", justify="right")
    output.add_column("radius", justify="right")
    for model_id, geometry in table.items():
        radius = "" if geometry.radius is None else f"{geometry.radius:g}"
        output.add_row(
            model_id,
            geometry.type.value,
            f"{geometry.width:g}×{geometry.height:g}",
            radius,
        )
    console.print(output)
    console.print(f"\n  {len(table)} devices")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def print_batch_summary(output_path: str | None, total_time_s: float, stats: BuildStats) -> None:
    """Print the summary of a batch run.

    Args:
        output_path: Path of the results file, if one was written
        total_time_s: Total build time in seconds
        stats: Counts collected while building
    """
    console.print(
        f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}"
    )

    if output_path is not None:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)

    error_style = "red" if stats.error_count > 0 else "green"
    console.print(
        f"  {stats.built_count} built {SYM_DOT} {stats.no_result_count} nothing to render "
        f"{SYM_DOT} [{error_style}]{stats.error_count} errors[/{error_style}]"
    )
    for label, message in stats.errors:
        console.print(f"  [red]{SYM_ERR}[/red] {escape(label)}: {escape(message)}")


def print_success(message: str) -> None:
    """Print a success line."""
    console.print(f"\n[bold green]{SYM_OK}[/bold green] {message}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        console.print(f"  {escape(details)}")
