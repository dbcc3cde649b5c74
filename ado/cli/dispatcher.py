"""
Request dispatch.

A LaunchRequest runs exactly one action, chosen in this order:
help, install, uninstall, launch (with COMSPEC resolution first when -k
was given).
"""

import dataclasses
from typing import Optional

import click

from .. import __version__
from ..config import AdoConfig, COMSPEC_VARIABLE, MAX_COMMAND_LINE
from ..backend.environment import EnvironmentScope, SystemEnvironment
from ..backend.installer import Installer
from ..backend.launcher import ProcessLauncher
from ..utils.logger import get_logger
from .parser import LaunchRequest

logger = get_logger(__name__)

HELP_TEXT = """
ado - Administrator Do {version}

Executes a process on the command line elevated via UAC.
Usage: ado [-wait] [-k] prog [args]
-?\tShows this help
-wait\tWaits until prog terminates
-k\tStarts the COMSPEC environment variable value and
\texecutes prog in it (CMD.EXE, etc.)
-i\tInstalls the program to the current user's application data and
\tadds it to the user's PATH variable
-u\tUninstalls the program from the current user's application data and
\tremoves it from the user's PATH variable
prog\tThe program to execute
[args]\tOptional command line arguments to prog

Only one action runs per call: -? wins over -i, -i over -u,
and -u over launching prog.
"""


def format_help() -> str:
    return HELP_TEXT.format(version=__version__)


def echo_error(message: str):
    click.secho(message, fg="red", err=True)


class Dispatcher:
    """Runs the action a LaunchRequest asks for and returns the exit code."""

    def __init__(
        self,
        launcher: ProcessLauncher,
        environment: SystemEnvironment,
        config: Optional[AdoConfig] = None
    ):
        self.launcher = launcher
        self.environment = environment
        self.config = config or AdoConfig()

    def dispatch(self, request: LaunchRequest) -> int:
        logger.debug(f"Dispatching {request}")

        if request.show_help:
            return self.show_help()

        if request.install:
            return self.install()

        if request.uninstall:
            return self.uninstall()

        if request.use_comspec:
            request = self.resolve_comspec(request)
            if request is None:
                return 1

        return self.launch(request)

    def show_help(self) -> int:
        click.echo(format_help())
        return 0

    def _installer(self) -> Installer:
        return Installer(
            self.environment,
            install_root=self.config.install_root,
            progress_callback=click.echo
        )

    def install(self) -> int:
        success, error = self._installer().install()
        if not success:
            echo_error(f"Installation failed: {error}")
            return 1
        click.echo("Program installed successfully")
        return 0

    def uninstall(self) -> int:
        success, error = self._installer().uninstall()
        if not success:
            echo_error(f"Uninstallation failed: {error}")
            return 1
        click.echo("Program uninstalled successfully")
        return 0

    def resolve_comspec(self, request: LaunchRequest) -> Optional[LaunchRequest]:
        """
        Point the request at the command interpreter named by COMSPEC.

        Returns:
            The rewritten request, or None after reporting an error
        """
        comspec = self.environment.get_variable(COMSPEC_VARIABLE, EnvironmentScope.PROCESS)
        if not comspec:
            echo_error(f"{COMSPEC_VARIABLE} is not defined")
            return None

        command_line = f'/K "{request.command_line}"'
        if len(command_line) > MAX_COMMAND_LINE:
            echo_error("Creating command line failed")
            return None

        return dataclasses.replace(
            request,
            application_name=comspec,
            command_line=command_line,
            arguments=("/K", request.command_line),
        )

    def launch(self, request: LaunchRequest) -> int:
        success, error, exit_code = self.launcher.launch_elevated(
            request.application_name,
            request.command_line,
            request.wait,
            arguments=request.arguments
        )

        if not success:
            echo_error(f"{request.application_name} could not be launched: {error}")
            return 1

        if exit_code is not None:
            logger.debug(f"{request.application_name} exited with code {exit_code}")
        return 0
