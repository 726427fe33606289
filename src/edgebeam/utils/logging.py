"""Logging utilities for Edgebeam."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import structlog

_PROCESSORS: list[Any] = [
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

_installed_handlers: list[logging.Handler] = []


@dataclass
class BuildStats:
    """Statistics from a batch of path builds."""

    built_count: int = 0
    no_result_count: int = 0
    error_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)

    @property
    def total(self) -> int:
        """Number of builds attempted."""
        return self.built_count + self.no_result_count + self.error_count


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Structured logger bound to the stdlib logger ``name``.

    Output goes through the stdlib logging tree, so nothing is emitted until
    the application configures handlers and levels (see
    :func:`configure_logging`).
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )


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

    # handlers from an earlier call are replaced, not stacked
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        _installed_handlers.append(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        _installed_handlers.append(console_handler)

    for handler in _installed_handlers:
        root_logger.addHandler(handler)

    structlog.configure(
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("edgebeam")
    logger.info("Logging initialized", log_file=str(log_file), level=file_level)

    return logger


class BuildLogger:
    """Logger for tracking path builds and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = BuildStats()

    def log_built(self, label: str, cutout_type: str, perimeter: float) -> None:
        """Log a successful build."""
        self._logger.info(
            "Path built",
            label=label,
            cutout_type=cutout_type,
            perimeter=round(perimeter, 3),
        )
        self._stats.built_count += 1

    def log_no_result(self, label: str, cutout_type: str) -> None:
        """Log a build that produced nothing to render."""
        self._logger.info("Nothing to render", label=label, cutout_type=cutout_type)
        self._stats.no_result_count += 1

    def log_error(self, label: str, error: Exception) -> None:
        """Log a build that failed on bad input."""
        self._logger.error(
            "Path build failed",
            label=label,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.error_count += 1
        self._stats.errors.append((label, str(error)))

    @property
    def stats(self) -> BuildStats:
        """Get current build statistics."""
        return self._stats
