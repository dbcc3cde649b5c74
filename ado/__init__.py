"""
Ado - Administrator Do

Runs a program elevated from the command line (UAC on Windows, sudo
elsewhere), and can install itself to the user's PATH.
"""

__version__ = "1.0.0"
__author__ = "Ado Contributors"
__license__ = "MIT"

# Public API
from .cli.parser import LaunchRequest, ArgumentError, parse_arguments
from .cli.dispatcher import Dispatcher
from .cli.main import main, run

__all__ = [
    "__version__",
    "LaunchRequest",
    "ArgumentError",
    "parse_arguments",
    "Dispatcher",
    "main",
    "run",
]
