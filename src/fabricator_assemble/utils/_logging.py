"""Logging utilities for fabricator-assemble.

This module provides standalone structlog logger factories that write
JSON-formatted or text-formatted logs to a file or to stderr. Each logger is
self-contained and does not modify global structlog configuration.
"""

import logging
import sys
from os import getenv
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TextIO, cast

import structlog

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

LogFormatType = Literal["json", "text"]


def _log_level_from_string(level: str, *, respect_env: bool = False) -> int:
    """Convert a log level string to a logging level integer.

    Args:
        level: Log level string (debug, info, warning, error).
        respect_env: If True, FABRICATOR_DEBUG overrides to DEBUG level.

    Returns:
        The logging level as an integer.
    """
    if respect_env and getenv("FABRICATOR_DEBUG", None):
        return logging.DEBUG

    log_levels = logging.getLevelNamesMapping()
    return log_levels.get(level.upper(), logging.INFO)


def _create_logger(
    stream: TextIO,
    *,
    log_level: int,
    log_format: LogFormatType = "text",
) -> "FilteringBoundLogger":  # noqa: UP037
    """Create a standalone structlog logger writing to ``stream``.

    Args:
        stream: Open text stream receiving rendered log lines.
        log_level: Minimum level that is emitted.
        log_format: Output format, either "json" or "text".

    Returns:
        A configured FilteringBoundLogger instance.
    """
    processors: list[structlog.typing.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if log_format == "json":
        processors.append(structlog.processors.dict_tracebacks)
        processors.append(structlog.processors.JSONRenderer())
    else:
        # Text format: "timestamp [level] event key=value ..."
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    wrapper_class = structlog.make_filtering_bound_logger(log_level)

    return cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            structlog.WriteLoggerFactory(file=stream)(),
            processors=processors,
            wrapper_class=wrapper_class,
            context_class=dict,
        ),
    )


def create_assemble_logger(
    *,
    level: str = "info",
    log_format: LogFormatType = "text",
    log_file: str = "",
) -> "FilteringBoundLogger":  # noqa: UP037
    """Create the logger used by an assembly run.

    Logs go to ``log_file`` when set (appending, parent directories created),
    otherwise to stderr.

    The log level can be overridden by environment variables:
    - FABRICATOR_DEBUG: If set, enables DEBUG level logging regardless of config

    Args:
        level: Log level threshold (debug, info, warning, error).
        log_format: Output format, either "json" or "text".
        log_file: Path to log file (stderr if empty).

    Returns:
        A FilteringBoundLogger instance bound to the ``assemble`` component.
    """
    effective_level = _log_level_from_string(level, respect_env=True)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        stream: TextIO = log_path.open("a", encoding="utf-8")
    else:
        stream = sys.stderr

    logger = _create_logger(stream, log_level=effective_level, log_format=log_format)
    return logger.bind(component="assemble")
