"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from iconforge.domain import FORMAT_DEPENDENCIES, OutputFormat

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
    console.print(f"\n[bold]iconforge[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_manifest_info(manifest_path: str, formats: list[str]) -> None:
    """Print the manifest being compiled and the requested formats."""
    line = Text("  ")
    line.append(manifest_path)
    console.print(line)
    console.print(f"  formats {SYM_DOT} {', '.join(formats)}")


def print_icons_found(count: int, auto_count: int, glob_count: int) -> None:
    """Print icon collection result.

    Args:
        count: Number of registered icons
        auto_count: Icons that received an automatic code point
        glob_count: Glob patterns expanded
    """
    console.print(
        f"  [green]{count}[/green] icons {SYM_DOT} {auto_count} auto code points "
        f"{SYM_DOT} {glob_count} globs"
    )


def format_file_size(size_bytes: int) -> str:
    """Format a byte count in human-readable form (e.g. "12 KB")."""
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.0f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.1f} MB"


def _format_time(seconds: float) -> str:
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def print_artifacts(written: list[tuple[str, str, int]]) -> None:
    """Print a table of written artifacts.

    Args:
        written: (format, path, size in bytes) per written file
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Format")
    table.add_column("File")
    table.add_column("Size", justify="right")
    for format_name, path, size in written:
        table.add_row(format_name, Text(path), format_file_size(size))
    console.print(table)


def print_success(file_count: int, total_time_s: float) -> None:
    """Print success message with summary."""
    console.print(
        f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)} "
        f"{SYM_DOT} {file_count} files written"
    )


def print_formats() -> None:
    """Print every output format with the formats it is built from."""
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Format")
    table.add_column("Built from")
    for fmt in OutputFormat:
        deps = ", ".join(dep.value for dep in FORMAT_DEPENDENCIES[fmt])
        table.add_row(fmt.value, deps or SYM_DOT)
    console.print(table)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
