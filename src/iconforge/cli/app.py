"""CLI application entry point for iconforge.

This module provides the main CLI interface using Typer.
"""

import asyncio
import time
from pathlib import Path
from typing import Annotated

import typer

from iconforge import __version__
from iconforge.cli.output import (
    console,
    print_artifacts,
    print_error,
    print_formats,
    print_header,
    print_icons_found,
    print_manifest_info,
    print_step,
    print_success,
)
from iconforge.config import IconFontOptions, LoggingConfig
from iconforge.core import DEFAULT_FORMATS, compile_from_manifest
from iconforge.domain import CompileResult, OutputFormat
from iconforge.exceptions import IconForgeError, SourceNotFoundError
from iconforge.utils import CompileStats, configure_logging, get_logger

# Create the Typer app
app = typer.Typer(
    name="iconforge",
    help="Compile SVG icons into icon fonts, stylesheets and sprites.",
    add_completion=False,
    no_args_is_help=True,
)

FILE_SUFFIXES: dict[OutputFormat, str] = {
    OutputFormat.SVG_FONT: ".svg",
    OutputFormat.SVG: ".sprite.svg",
}


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]iconforge[/bold blue] v{__version__}")
        raise typer.Exit()


def list_formats_callback(value: bool) -> None:
    """Print the supported formats and exit."""
    if value:
        print_formats()
        raise typer.Exit()


def output_file_name(base: str, fmt: OutputFormat) -> str:
    """Get the file name an artifact is written to.

    Args:
        base: Output base name
        fmt: Artifact format

    Returns:
        "{base}.{ext}", with the SVG font as ".svg" and the sprite as ".sprite.svg"
    """
    return base + FILE_SUFFIXES.get(fmt, f".{fmt.value}")


def write_outputs(
    result: CompileResult,
    output_dir: Path,
    base: str,
) -> list[tuple[str, str, int]]:
    """Write every generated artifact of a compile.

    Args:
        result: Compile result
        output_dir: Directory receiving the files
        base: Output base name

    Returns:
        (format, path, size in bytes) per written file
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for fmt, artifact in result.outputs().items():
        target = output_dir / output_file_name(base, fmt)
        if isinstance(artifact, bytes):
            target.write_bytes(artifact)
            size = len(artifact)
        else:
            data = artifact.encode("utf-8")
            target.write_bytes(data)
            size = len(data)
        written.append((fmt.value, str(target), size))
    return written


@app.command()
def compile_manifest(
    manifest: Annotated[
        Path,
        typer.Argument(
            help="Path to the .iconfont manifest (or a single .svg icon)",
            show_default=False,
        ),
    ],
    formats: Annotated[
        list[str] | None,
        typer.Option(
            "--format",
            "-f",
            help="Output format, repeatable (default: eot, ttf, woff, woff2, css, html)",
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output directory (default: the manifest's directory)",
        ),
    ] = None,
    class_prefix: Annotated[
        str | None,
        typer.Option(
            "--class-prefix",
            help="CSS class prefix (default: the manifest name)",
        ),
    ] = None,
    font_name: Annotated[
        str | None,
        typer.Option(
            "--font-name",
            help="Font family name (default: the manifest name)",
        ),
    ] = None,
    hash_token: Annotated[
        str | None,
        typer.Option(
            "--hash",
            help="Cache-busting token for stylesheet URLs (default: icon count)",
        ),
    ] = None,
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
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _list_formats: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--list-formats",
            help="List output formats and exit",
            callback=list_formats_callback,
            is_eager=True,
        ),
    ] = None,
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
    """Compile an icon font manifest.

    The manifest is an XML file with an <iconfont> root whose <svg> children
    are inline icons or reference icon files through src (globs allowed).

    Example:
        iconforge icons.iconfont -f woff2 -f css

    This will create icons.woff2 and icons.css (plus icons.svg and icons.ttf,
    which woff2 is built from) next to the manifest.
    """
    logging_config = LoggingConfig(log_file=log_file, log_level=log_level)
    logger = configure_logging(
        log_file=logging_config.log_file,
        console_level=logging_config.log_level,
        file_level=logging_config.file_log_level,
        quiet=quiet,
    )

    requested = formats or list(DEFAULT_FORMATS)
    overrides = {
        key: value
        for key, value in (
            ("class_name_prefix", class_prefix),
            ("font_name", font_name),
            ("hash", hash_token),
        )
        if value is not None
    }
    options = IconFontOptions(**overrides)
    output_dir = output if output is not None else manifest.parent

    if not quiet:
        print_header(__version__)
        print_step("Compiling")
        print_manifest_info(str(manifest), requested)

    start_time = time.time()
    try:
        try:
            content = manifest.read_text(encoding="utf-8")
        except OSError as e:
            raise SourceNotFoundError(str(manifest), e.strerror or str(e)) from e

        result = asyncio.run(
            compile_from_manifest(
                content,
                str(manifest),
                formats=requested,
                options=options,
                logger=get_logger(),
            )
        )
        stats = CompileStats(
            icon_count=len(result.icons),
            auto_unicode_count=sum(1 for icon in result.icons if icon.auto_unicode),
            glob_count=len(result.glob_dependencies),
            start_time=start_time,
        )
        if not quiet:
            print_icons_found(stats.icon_count, stats.auto_unicode_count, stats.glob_count)
            print_step("Writing")

        written = write_outputs(result, output_dir, manifest.stem)
        stats.end_time = time.time()
        logger.info("Wrote artifacts", count=len(written), output_dir=str(output_dir))

        if not quiet:
            print_artifacts(written)
            print_success(len(written), stats.duration_seconds)

    except IconForgeError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except OSError as e:
        print_error(f"Could not write output: {e}")
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
