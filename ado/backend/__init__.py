"""Backend modules for launching, environment access, and installation."""

from .launcher import ProcessLauncher, WindowsElevatedLauncher, PosixElevatedLauncher, get_launcher
from .environment import SystemEnvironment, EnvironmentScope
from .installer import Installer

__all__ = [
    "ProcessLauncher",
    "WindowsElevatedLauncher",
    "PosixElevatedLauncher",
    "get_launcher",
    "SystemEnvironment",
    "EnvironmentScope",
    "Installer",
]
