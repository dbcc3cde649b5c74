"""
Ado CLI - run a program elevated from the command line.

click provides the entry point and console output. Ado's own flags
("-wait", "/?", ...) are parsed by ado.cli.parser, so the raw argument
vector is handed to the command unprocessed.
"""

import sys
from dataclasses import dataclass
from typing import Optional, Sequence

import click

from .. import __version__
from ..config import AdoConfig, load_config
from ..backend.environment import SystemEnvironment
from ..backend.launcher import ProcessLauncher, get_launcher
from ..utils.logger import setup_logger, get_logger
from ..utils.platform_check import get_platform
from .dispatcher import Dispatcher, echo_error
from .parser import ArgumentError, parse_arguments

logger = get_logger(__name__)


@dataclass
class AppContext:
    """Collaborators shared with the click command."""
    launcher: ProcessLauncher
    environment: SystemEnvironment
    config: AdoConfig


def run(
    argv: Sequence[str],
    launcher: ProcessLauncher,
    environment: SystemEnvironment,
    config: Optional[AdoConfig] = None
) -> int:
    """
    Parse and dispatch one command line.

    Returns:
        Process exit code
    """
    try:
        request = parse_arguments(argv)
    except ArgumentError as e:
        echo_error(str(e))
        return 1

    dispatcher = Dispatcher(launcher, environment, config)
    return dispatcher.dispatch(request)


@click.command(
    context_settings={"help_option_names": []}
)
@click.argument("argv", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx: click.Context, argv):
    """Ado - Administrator Do. Run -? for usage."""
    app: AppContext = ctx.obj
    ctx.exit(run(list(argv), app.launcher, app.environment, app.config))


def main(
    argv: Optional[Sequence[str]] = None,
    launcher: Optional[ProcessLauncher] = None,
    environment: Optional[SystemEnvironment] = None
) -> int:
    """Entry point for CLI."""
    if argv is None:
        argv = sys.argv[1:]

    config = load_config()
    try:
        setup_logger(level=config.log_level, log_file=config.log_file)
    except OSError as e:
        echo_error(f"Cannot open log file {config.log_file}: {e}")
        return 1

    logger.debug(f"ado {__version__} started with {list(argv)}")
    logger.debug(f"Running on:\n{get_platform()}")

    app = AppContext(
        launcher=launcher or get_launcher(),
        environment=environment or SystemEnvironment(),
        config=config,
    )

    # "--" keeps click from reading any of the tokens as its own options
    return cli.main(
        args=["--", *argv],
        prog_name="ado",
        obj=app,
        standalone_mode=False,
    )


if __name__ == "__main__":
    sys.exit(main())
