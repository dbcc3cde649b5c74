"""
Configuration for Ado.

The command-line flag set is fixed, so anything tunable is read from
environment variables:

    ADO_INSTALL_ROOT  directory under which the "Ado" folder is created
                      (defaults to the per-user application data directory)
    ADO_LOG_LEVEL     debug, info, warning, error or critical
    ADO_LOG_FILE      optional path of a log file
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .utils.logger import LogLevel

INSTALL_DIR_NAME = "Ado"

COMSPEC_VARIABLE = "COMSPEC"
PATH_VARIABLE = "PATH"

# Longest command line built for the COMSPEC invocation
MAX_COMMAND_LINE = 520

INSTALL_ROOT_VARIABLE = "ADO_INSTALL_ROOT"
LOG_LEVEL_VARIABLE = "ADO_LOG_LEVEL"
LOG_FILE_VARIABLE = "ADO_LOG_FILE"


@dataclass
class AdoConfig:
    """Runtime configuration."""
    install_root: Optional[Path] = None
    log_level: LogLevel = LogLevel.WARNING
    log_file: Optional[Path] = None


def load_config(environ: Optional[Mapping[str, str]] = None) -> AdoConfig:
    """
    Build the configuration from environment variables.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        AdoConfig with unset values left at their defaults
    """
    if environ is None:
        environ = os.environ

    install_root = environ.get(INSTALL_ROOT_VARIABLE)
    log_file = environ.get(LOG_FILE_VARIABLE)

    return AdoConfig(
        install_root=Path(install_root).expanduser() if install_root else None,
        log_level=LogLevel.from_name(environ.get(LOG_LEVEL_VARIABLE)),
        log_file=Path(log_file).expanduser() if log_file else None,
    )
