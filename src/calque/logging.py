"""Logging setup for the calque CLI.

Two sinks are configured from one `LoggingSettings` value:

- a Rich console handler on stderr, filtered by the ``-v``/``-q`` level;
- an optional "flight recorder": a `MemoryHandler` that keeps recent records
  at DEBUG and writes them to a file once something goes wrong.

Console lines from other libraries carry a short source prefix. Babel is the
only library calque logs through, and its records are tagged ``[cldr]`` since
they concern locale data rather than Babel itself.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING

import babel
from babel.core import get_cldr_version
from rich.console import Console
from rich.logging import RichHandler

from calque import config

if TYPE_CHECKING:
    from logging import Handler, Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "calque"

# Top-level logger name -> console prefix
SOURCE_PREFIXES = {"babel": "cldr"}

CONSOLE_FORMAT = "%(prefix)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)


@dataclass(frozen=True)
class LoggingSettings:
    """Everything the CLI decided about logging before a command runs.

    ``log_path=None`` turns the flight recorder off.
    """

    level: int = logging.WARNING
    debug: bool = False
    color: bool = True
    log_path: Path | None = None
    capacity: int = 2000
    force_flush: bool = False
    logger_levels: Mapping[str, int] = field(default_factory=dict)

    @property
    def flight_recorder(self) -> bool:
        return self.log_path is not None

    @property
    def console_level(self) -> int:
        return logging.DEBUG if self.debug else self.level


class SourcePrefixFilter(logging.Filter):
    """Set ``record.prefix`` to a bracketed source tag for console output.

    calque's own records get an empty prefix. Records from other libraries get
    the tag from `SOURCE_PREFIXES`, falling back to their top-level logger
    name (``some.thirdparty`` -> ``[some]``). Never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        root = record.name.split(".", 1)[0]
        if root == PROJECT_PREFIX:
            record.prefix = ""
        else:
            record.prefix = f"[{SOURCE_PREFIXES.get(root, root)}]"
        return True


def config_console_handler(settings: LoggingSettings) -> RichHandler:
    """Build the stderr console handler.

    In debug mode every record is shown with timestamps, logger names and a
    source path; otherwise records below ``settings.level`` are dropped and
    lines are prefixed by `SourcePrefixFilter`.
    """
    console = Console(color_system="auto" if settings.color else None, stderr=True)
    handler = RichHandler(
        level=settings.console_level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=settings.debug,
        enable_link_path=settings.debug,
    )
    if settings.debug:
        handler.setFormatter(logging.Formatter(DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(SourcePrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build a memory buffer of *capacity* records that dumps to *path*.

    The buffer flushes when a record at *flush_level* or above arrives, when
    it is full, and on close if *flush_on_close* is set. The file is opened
    lazily and truncated on first write, so a quiet run leaves no file behind.
    """
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(RECORDER_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def configure_logging(settings: LoggingSettings) -> list[Handler]:
    """Install the console handler (and flight recorder) on the root logger.

    The root logger passes everything through and the handlers filter, so the
    flight recorder still sees DEBUG records when the console is quiet.
    Per-logger levels from ``settings.logger_levels`` apply to both sinks.

    Returns:
        The installed handlers, console first.
    """
    handlers: list[Handler] = [config_console_handler(settings)]
    if settings.log_path is not None:
        handlers.append(
            config_flight_recorder(
                settings.log_path,
                capacity=settings.capacity,
                flush_on_close=settings.force_flush,
            )
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    for name, level in settings.logger_levels.items():
        logging.getLogger(name).setLevel(level)

    return handlers


def _log_configuration(logger: Logger) -> None:
    try:
        logger.debug("Reference date: %s", config.get_reference_date().isoformat())
    except config.ConfigError as e:
        logger.debug("Reference date: <invalid> (%s)", e)
    logger.debug("Default language tag: %s", config.get_default_language_tag())


def log_startup(
    logger: Logger,
    settings: LoggingSettings,
    handlers: list[Handler],
    *,
    app_version: str,
    catalogue_groups: Mapping[str, int] | None = None,
) -> None:
    """Log a one-line INFO summary and DEBUG diagnostics for bug reports.

    The diagnostics cover the interpreter, the Babel release and the CLDR
    version it bundles (currency and week data depend on both), the locale
    settings read from the environment, the example catalogue, and the
    logging setup itself.

    Args:
        logger: Logger to emit on.
        settings: The logging settings in effect.
        handlers: Handlers returned by `configure_logging`.
        app_version: calque version string.
        catalogue_groups: Example count per catalogue group, if loaded.
    """
    logger.info(
        "calque %s - console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(settings.console_level),
        "ON" if settings.flight_recorder else "OFF",
    )

    logger.debug(
        "Python %s on %s %s (pid %s, cwd %s)",
        sys.version.split()[0],
        platform.system(),
        platform.release(),
        os.getpid(),
        Path.cwd(),
    )
    logger.debug("Babel %s, CLDR %s", babel.__version__, get_cldr_version())
    _log_configuration(logger)

    if catalogue_groups is not None:
        logger.debug(
            "Catalogue: %d examples in %d groups %s",
            sum(catalogue_groups.values()),
            len(catalogue_groups),
            dict(catalogue_groups),
        )

    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if settings.flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            settings.log_path,
            settings.capacity,
            settings.force_flush,
        )
    logger.debug(
        "Logger levels: %s",
        {
            name: logging.getLevelName(level)
            for name, level in settings.logger_levels.items()
        }
        or "<none>",
    )
