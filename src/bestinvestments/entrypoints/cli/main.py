"""BestInvestments CLI entry point.

Defines the top-level ``bestinvestments`` command (via Click-Extra) and
registers its subcommands.

Currently available commands
- ``bestinvestments replay`` replays a JSON command script against an
  in-memory store and reports the resulting projects and packages.

Examples
    $ bestinvestments --version
    $ bestinvestments -v replay consultations.json
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from bestinvestments import __version__, config
from bestinvestments.logging import (
    config_console_handler,
    config_flight_recorder,
    log_startup,
)

from .helpers import error
from .helpers.log_level_parser import parse_log_level
from .replay import replay

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """BestInvestments command-line interface.

    Work with research projects, the consultations held with specialists, and
    the prepaid packages their time is billed against.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
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
    help="Enable debug mode (timestamps, logger names and source paths).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path of the flight recorder log file.",
    default=Path(user_log_dir("bestinvestments", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="BESTINVESTMENTS_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="BESTINVESTMENTS_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep the last N log records at DEBUG granularity (unaffected by -v/-q) "
        "and write them to --log-path when a WARNING/ERROR occurs, or on exit "
        "if --force-flush is set."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Write the flight recorder buffer to --log-path on exit.",
    default=False,
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
        "Set the MINIMUM LEVEL of specific LOGGERS (NAME=LEVEL). Applies to both "
        "console and flight recorder. Repeatable (e.g. -L markdown_it=INFO) or via "
        "BESTINVESTMENTS_LOGGER_LEVELS (comma/space list)."
    ),
    envvar="BESTINVESTMENTS_LOGGER_LEVELS",
    show_envvar=True,
)
@clickx.pass_context
def bestinvestments(  # pylint: disable=too-many-arguments, too-many-positional-arguments
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
    """BestInvestments command-line interface."""

    # 0) validate configuration read from the environment
    try:
        id_generator = config.get_id_generator_kind()
    except config.InvalidIdGeneratorError as e:
        error(str(e))
        ctx.exit(2)

    # 1) compute effective verbosity
    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[Handler] = [
        config_console_handler(
            level=level, debug_mode=debug, color=ctx.color is not False
        )
    ]

    # 2) flight recorder
    if flight_recorder:
        handlers.append(
            config_flight_recorder(
                path=log_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush_flight_recorder,
            )
        )

    # 3) root logger captures everything; handlers filter
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity if flight_recorder else None,
        force_flush_fr=force_flush_flight_recorder,
        logger_levels=logger_levels,
        id_generator=id_generator,
    )

    ctx.call_on_close(logging.shutdown)


bestinvestments.add_command(replay)
