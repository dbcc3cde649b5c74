"""
Argument parsing for Ado.

Ado's command line is not a regular option grammar: flags may start with
"-" or "/", and everything after the target program is handed to that
program untouched. parse_arguments() turns the raw vector into a
LaunchRequest.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

FLAG_PREFIXES = ("-", "/")

HELP_FLAG = "?"
WAIT_FLAG = "wait"
COMSPEC_FLAG = "k"
INSTALL_FLAG = "i"
UNINSTALL_FLAG = "u"


class ArgumentError(ValueError):
    """Raised when the command line cannot be turned into a request."""


@dataclass(frozen=True)
class LaunchRequest:
    """A parsed command line, consumed once by the dispatcher."""
    show_help: bool = False
    wait: bool = False
    use_comspec: bool = False
    install: bool = False
    uninstall: bool = False
    application_name: Optional[str] = None
    command_line: str = ""
    arguments: Tuple[str, ...] = ()


def is_flag(token: str) -> bool:
    return token.startswith(FLAG_PREFIXES)


def parse_arguments(argv: Sequence[str]) -> LaunchRequest:
    """
    Parse an argument vector (without the program name).

    Args:
        argv: Raw argument tokens

    Returns:
        The parsed LaunchRequest

    Raises:
        ArgumentError: On an unrecognized flag or when no program was given
    """
    flags = {
        HELP_FLAG: False,
        WAIT_FLAG: False,
        COMSPEC_FLAG: False,
        INSTALL_FLAG: False,
        UNINSTALL_FLAG: False,
    }
    application_name = None
    positional = []
    scanning_flags = True

    for token in argv:
        if scanning_flags and is_flag(token):
            name = token[1:].lower()
            if name not in flags:
                raise ArgumentError(f"Unrecognized flag '{name}'")
            flags[name] = True
            continue

        scanning_flags = False
        takes_program = not (flags[COMSPEC_FLAG] or flags[INSTALL_FLAG] or flags[UNINSTALL_FLAG])
        if application_name is None and takes_program:
            application_name = token
        else:
            positional.append(token)

    command_line = " ".join(positional).rstrip()

    request = LaunchRequest(
        show_help=flags[HELP_FLAG] or len(argv) == 0,
        wait=flags[WAIT_FLAG],
        use_comspec=flags[COMSPEC_FLAG],
        install=flags[INSTALL_FLAG],
        uninstall=flags[UNINSTALL_FLAG],
        application_name=application_name,
        command_line=command_line,
        arguments=tuple(positional),
    )

    if not request.show_help:
        missing_comspec_command = request.use_comspec and not request.command_line
        missing_program = (
            not request.use_comspec
            and request.application_name is None
            and not request.install
            and not request.uninstall
        )
        if missing_comspec_command or missing_program:
            raise ArgumentError("Invalid arguments")

    return request
