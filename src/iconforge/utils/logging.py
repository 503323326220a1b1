"""Logging utilities for iconforge."""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

import structlog
from structlog.typing import Processor

LOGGER_NAME = "iconforge"

_PROCESSORS: list[Processor] = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
    structlog.processors.JSONRenderer(),
]


@dataclass
class CompileStats:
    """Statistics from one compile run."""

    icon_count: int = 0
    auto_unicode_count: int = 0
    dependency_count: int = 0
    glob_count: int = 0
    artifact_sizes: dict[str, int] = field(default_factory=dict)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate compile duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Replace handlers from an earlier call instead of stacking them
    for handler in root_logger.handlers[:]:
        if handler.get_name() == LOGGER_NAME:
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(LOGGER_NAME)
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.set_name(LOGGER_NAME)
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger(LOGGER_NAME)
    logger.info("Logging initialized", log_file=str(log_file) if log_file else None)

    return logger


def get_logger(name: str = LOGGER_NAME) -> structlog.stdlib.BoundLogger:
    """Get a structured logger that writes through stdlib logging.

    Unlike ``structlog.get_logger`` this does not depend on global structlog
    configuration. The package logger carries a ``NullHandler``, so library
    calls stay silent until the application sets up logging handlers.

    Args:
        name: stdlib logger name

    Returns:
        Bound structlog logger
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )


class CompileLogger:
    """Logger for tracking compile progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = CompileStats()

    def log_start(self, source: str, formats: list[str]) -> None:
        """Log start of a compile run."""
        self._stats.start_time = time.time()
        self._logger.info("Compiling icon font", source=source, formats=formats)

    def log_icon_registered(
        self,
        icon_name: str,
        class_name: str,
        unicode: int,
        auto_unicode: bool,
    ) -> None:
        """Log an icon entering the registry."""
        self._logger.debug(
            "Icon registered",
            icon=icon_name,
            class_name=class_name,
            unicode=f"U+{unicode:04X}",
            auto=auto_unicode,
        )
        self._stats.icon_count += 1
        if auto_unicode:
            self._stats.auto_unicode_count += 1

    def log_dependency(self, path: str) -> None:
        """Log a file read during collection."""
        self._logger.debug("Reading source", path=path)
        self._stats.dependency_count += 1

    def log_glob_expanded(self, pattern: str, cwd: str, match_count: int) -> None:
        """Log a glob expansion."""
        self._logger.info("Expanded glob", glob=pattern, cwd=cwd, matches=match_count)
        self._stats.glob_count += 1

    def log_artifact(self, format_name: str, size: int) -> None:
        """Log a generated artifact."""
        self._logger.info("Generated artifact", format=format_name, size=size)
        self._stats.artifact_sizes[format_name] = size

    def log_complete(self) -> None:
        """Log end of a compile run."""
        self._stats.end_time = time.time()
        self._logger.info(
            "Compile complete",
            icons=self._stats.icon_count,
            auto_unicode=self._stats.auto_unicode_count,
            dependencies=self._stats.dependency_count,
            artifacts=sorted(self._stats.artifact_sizes),
            duration_seconds=round(self._stats.duration_seconds, 3),
        )

    def log_failure(self, error: Exception) -> None:
        """Log a fatal compile error."""
        self._logger.error(
            "Compile failed",
            error=str(error),
            error_type=type(error).__name__,
        )

    @property
    def stats(self) -> CompileStats:
        """Get current compile statistics."""
        return self._stats
