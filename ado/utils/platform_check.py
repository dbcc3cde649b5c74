"""
Platform detection and privilege checking.

This module provides functions to detect the operating system and
check whether the current process already runs with administrative
privileges.
"""

import os
import platform
from dataclasses import dataclass
from enum import Enum


class OSType(Enum):
    """Operating system types."""
    WINDOWS = "windows"
    LINUX = "linux"
    MACOS = "macos"
    UNKNOWN = "unknown"


@dataclass
class PlatformInfo:
    """Platform information container."""
    os_type: OSType
    os_release: str
    is_admin: bool
    python_version: str
    architecture: str

    def __str__(self) -> str:
        return (
            f"Platform: {self.os_type.value} {self.os_release}\n"
            f"Admin: {self.is_admin}\n"
            f"Python: {self.python_version}\n"
            f"Architecture: {self.architecture}"
        )


def get_os_type() -> OSType:
    """Detect the operating system type."""
    system = platform.system().lower()

    if system == "windows":
        return OSType.WINDOWS
    elif system == "linux":
        return OSType.LINUX
    elif system == "darwin":
        return OSType.MACOS
    else:
        return OSType.UNKNOWN


def is_admin() -> bool:
    """
    Check if the current process has administrative privileges.

    Returns:
        True if running as admin/root, False otherwise
    """
    os_type = get_os_type()

    try:
        if os_type == OSType.WINDOWS:
            import ctypes
            return ctypes.windll.shell32.IsUserAnAdmin() != 0
        elif os_type in (OSType.LINUX, OSType.MACOS):
            return os.geteuid() == 0
        else:
            return False
    except (AttributeError, OSError):
        return False


def get_platform() -> PlatformInfo:
    """
    Get platform information.

    Returns:
        PlatformInfo object with system details
    """
    return PlatformInfo(
        os_type=get_os_type(),
        os_release=platform.release(),
        is_admin=is_admin(),
        python_version=platform.python_version(),
        architecture=platform.machine(),
    )
