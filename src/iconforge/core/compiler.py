"""Compile entry points.

Both entry points run the same pipeline: build the options, collect icons
into a fresh :class:`CompileResult`, then generate the requested artifacts.
Every call owns its own registry, so concurrent compiles never share state.
"""

import os
from collections.abc import Awaitable, Callable, Iterable, Mapping, Sequence
from typing import Any

import structlog

from iconforge.config import IconFontOptions, options_from_attributes
from iconforge.core.collector import IconCollector
from iconforge.core.orchestrator import FormatOrchestrator
from iconforge.domain import CompileResult, IconSource, OutputFormat, resolve_formats
from iconforge.exceptions import IconForgeError
from iconforge.io import FileSystem, LocalFileSystem, parse_document
from iconforge.utils import CompileLogger, get_logger

DEFAULT_FORMATS: tuple[str, ...] = ("eot", "ttf", "woff", "woff2", "css", "html")

SourceItem = str | os.PathLike[str] | IconSource | Mapping[str, Any]


def _format_names(formats: Iterable["str | OutputFormat"]) -> list[str]:
    return [fmt.value if isinstance(fmt, OutputFormat) else str(fmt) for fmt in formats]


async def _run(
    result: CompileResult,
    collect: Callable[[], Awaitable[None]],
    formats: Sequence["str | OutputFormat"],
    options: IconFontOptions,
    compile_logger: CompileLogger,
) -> CompileResult:
    try:
        # Reject unknown formats before touching the filesystem
        resolve_formats(formats)
        await collect()
        # Record where automatic allocation ended for callers chaining compiles
        options = options.model_copy(update={"start_unicode": result.start_unicode})
        FormatOrchestrator(options, compile_logger).generate(result, formats)
    except IconForgeError as e:
        compile_logger.log_failure(e)
        raise
    compile_logger.log_complete()
    return result


async def compile_from_manifest(
    content: str,
    path: str,
    formats: Sequence["str | OutputFormat"] = DEFAULT_FORMATS,
    options: IconFontOptions | None = None,
    fs: FileSystem | None = None,
    logger: structlog.stdlib.BoundLogger | None = None,
) -> CompileResult:
    """Compile an ``.iconfont`` manifest.

    Root attributes of the manifest configure the compile; *options* win over
    them field by field. Relative ``src`` attributes resolve against the
    manifest's directory.

    Args:
        content: Manifest text
        path: Manifest path
        formats: Requested output formats
        options: Caller options layered over the manifest attributes
        fs: Filesystem used to read icons (local disk by default)
        logger: Structured logger for compile events

    Returns:
        Result with icons, dependencies and generated artifacts

    Raises:
        ManifestParseError: If the manifest or an icon file is malformed
        SourceNotFoundError: If a referenced source cannot be read
        UnknownFormatError: If a requested format is unknown
        FontEncodeError: If a font codec fails
    """
    compile_logger = CompileLogger(logger or get_logger())
    compile_logger.log_start(path, _format_names(formats))

    try:
        root = parse_document(content, path)
    except IconForgeError as e:
        compile_logger.log_failure(e)
        raise
    merged = options_from_attributes(root.attrib, path).merged(options)

    result = CompileResult()
    if merged.start_unicode is not None:
        result.registry.next_unicode = merged.start_unicode
    collector = IconCollector(result, fs or LocalFileSystem(), compile_logger)

    return await _run(
        result,
        lambda: collector.collect_manifest(root, path),
        formats,
        merged,
        compile_logger,
    )


async def compile_from_sources(
    sources: Iterable[SourceItem],
    formats: Sequence["str | OutputFormat"] = DEFAULT_FORMATS,
    options: IconFontOptions | None = None,
    fs: FileSystem | None = None,
    logger: structlog.stdlib.BoundLogger | None = None,
) -> CompileResult:
    """Compile an explicit list of icon sources.

    Args:
        sources: Icon file paths, IconSource objects or equivalent mappings
        formats: Requested output formats
        options: Compile options
        fs: Filesystem used to read icons (local disk by default)
        logger: Structured logger for compile events

    Returns:
        Result with icons, dependencies and generated artifacts

    Raises:
        ManifestParseError: If an icon file is malformed
        SourceNotFoundError: If a source cannot be read
        UnknownFormatError: If a requested format is unknown
        FontEncodeError: If a font codec fails
    """
    options = options or IconFontOptions()
    sources = list(sources)
    compile_logger = CompileLogger(logger or get_logger())
    compile_logger.log_start(f"{len(sources)} sources", _format_names(formats))

    result = CompileResult()
    if options.start_unicode is not None:
        result.registry.next_unicode = options.start_unicode
    collector = IconCollector(result, fs or LocalFileSystem(), compile_logger)

    return await _run(
        result,
        lambda: collector.collect_sources(sources),
        formats,
        options,
        compile_logger,
    )
