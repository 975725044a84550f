"""calque CLI entry point.

Defines the top-level ``calque`` command (via Click-Extra) and registers the
subcommand groups.

Currently available groups
- ``calque examples`` — list and run the example catalogue.
- ``calque locale`` — resolve locale data for BCP 47 language tags.

Notes
- The CLI version is sourced from `calque.__version__` and displayed
  automatically by Click-Extra (``--version``).
- Additional command groups should be registered here via ``calque.add_command(...)``.

Examples
    $ calque --version
    $ calque examples run --group locales
    $ calque locale currency de-CH-u-cu-usd
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from calque import __version__
from calque.catalogue import load_examples
from calque.logging import LoggingSettings, configure_logging, log_startup

from .examples_cmds import examples as examples_group
from .helpers import hyperlink, parse_log_level
from .locale_cmds import locale as locale_group

logger = logging.getLogger(__name__)


HELP = """calque command-line interface.

    calque is a runnable catalogue of library-idiom examples: read-only
    collections, collectors, optional values, local type inference, and
    BCP 47 locale extensions resolved against CLDR data. Every example is an
    executable check, so the catalogue doubles as a self-test.
    """


EPILOG = "\b\n" + "\n".join(
    [
        f"{click.style('See Also:', fg='blue', bold=True, underline=True)}",
        "  BCP 47: " + hyperlink("https://www.rfc-editor.org/info/bcp47"),
        "  CLDR  : " + hyperlink("https://cldr.unicode.org/"),
        "  UTS 35: " + hyperlink("https://www.unicode.org/reports/tr35/"),
    ]
)


def _catalogue_groups() -> dict[str, int]:
    catalogue = load_examples()
    return {group: len(catalogue.cases(group=group)) for group in catalogue.groups()}


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    epilog=EPILOG,
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (enables extra developer diagnostics beyond -vvv).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file (overrides default flight recorder path).",
    default=Path(user_log_dir("calque", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="CALQUE_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=2000,
    hidden=True,
    envvar="CALQUE_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Enable the in-memory flight recorder. Keeps the last N log records "
        "(tunable via CALQUE_FLIGHT_RECORDER_CAPACITY) at DEBUG granularity "
        "(unaffected by -v/-q) and writes them to --log-path when a "
        "WARNING/ERROR occurs, or on clean exit if --force-flush is set. "
        "Console verbosity is unchanged."
    ),
    default=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help=(
        "Force-flush the flight recorder buffer to --log-path on program exit. "
        "Normally the buffer only dumps on WARNING/ERROR; console output is "
        "unaffected."
    ),
    default=False,
    envvar="CALQUE_FORCE_FLUSH_FLIGHT_RECORDER",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). This changes the "
        "logger's own level, so it applies to BOTH console and flight-recorder. "
        "Repeatable (e.g. -L babel=INFO -L calque.locales=DEBUG) or via "
        "CALQUE_LOGGER_LEVELS (comma/space list)."
    ),
    default=("babel=WARNING",),
    envvar="CALQUE_LOGGER_LEVELS",
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def calque(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """calque command-line interface."""

    # 0) compute effective verbosity
    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    # 1) console + flight recorder on the root logger, then per-logger levels
    settings = LoggingSettings(
        level=level,
        debug=debug,
        color=ctx.color is not False,  # None or True => allow color
        log_path=log_path if flight_recorder else None,
        capacity=flight_recorder_capacity,
        force_flush=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )
    handlers = configure_logging(settings)

    # 2) startup info
    log_startup(
        logger,
        settings,
        handlers,
        app_version=__version__,
        catalogue_groups=_catalogue_groups(),
    )

    # 3) flush and close handlers once the command returns
    ctx.call_on_close(logging.shutdown)


calque.add_command(examples_group)
calque.add_command(locale_group)
