"""
Environment and filesystem access.

All reads and writes of environment variables, and the file operations
used by install/uninstall, go through SystemEnvironment so the rest of
the program never touches os.environ or the registry directly.
"""

import os
import shutil
import sys
from enum import Enum
from pathlib import Path
from typing import Optional

from ..utils.platform_check import get_os_type, OSType
from ..utils.logger import get_logger

logger = get_logger(__name__)

# Registry location of persisted per-user environment variables
USER_ENVIRONMENT_KEY = "Environment"

HWND_BROADCAST = 0xFFFF
WM_SETTINGCHANGE = 0x001A
SMTO_ABORTIFHUNG = 0x0002


class EnvironmentScope(Enum):
    """Where an environment variable lives."""
    PROCESS = "process"
    USER = "user"


class SystemEnvironment:
    """
    Accessor for environment variables and the files Ado installs.

    Process-scope variables map to os.environ. User-scope variables are
    the persisted per-user variables, stored under HKEY_CURRENT_USER on
    Windows; other platforms have no equivalent and raise OSError.
    """

    def __init__(self):
        self.os_type = get_os_type()
        logger.debug(f"Initialized SystemEnvironment for {self.os_type.value}")

    @property
    def path_separator(self) -> str:
        return ";" if self.os_type == OSType.WINDOWS else ":"

    @property
    def case_sensitive_paths(self) -> bool:
        return self.os_type not in (OSType.WINDOWS, OSType.MACOS)

    # ------------------------------------------------------------------
    # Environment variables
    # ------------------------------------------------------------------

    def get_variable(self, name: str, scope: EnvironmentScope = EnvironmentScope.PROCESS) -> Optional[str]:
        """
        Read an environment variable.

        Returns:
            The value, or None if the variable is not defined
        """
        if scope == EnvironmentScope.PROCESS:
            return os.environ.get(name)
        return self._get_user_variable(name)

    def set_variable(
        self,
        name: str,
        value: Optional[str],
        scope: EnvironmentScope = EnvironmentScope.PROCESS
    ):
        """
        Write an environment variable. A value of None deletes it.

        Raises:
            OSError: If the variable could not be written
        """
        if scope == EnvironmentScope.PROCESS:
            if value is None:
                os.environ.pop(name, None)
            else:
                os.environ[name] = value
            return
        self._set_user_variable(name, value)

    def _require_windows(self):
        if self.os_type != OSType.WINDOWS:
            raise OSError(
                f"User environment variables are not supported on {self.os_type.value}"
            )

    def _get_user_variable(self, name: str) -> Optional[str]:
        self._require_windows()
        import winreg

        with winreg.OpenKey(winreg.HKEY_CURRENT_USER, USER_ENVIRONMENT_KEY) as key:
            try:
                value, _ = winreg.QueryValueEx(key, name)
            except FileNotFoundError:
                return None
        return value

    def _set_user_variable(self, name: str, value: Optional[str]):
        self._require_windows()
        import winreg

        with winreg.OpenKey(
            winreg.HKEY_CURRENT_USER,
            USER_ENVIRONMENT_KEY,
            0,
            winreg.KEY_READ | winreg.KEY_SET_VALUE
        ) as key:
            if value is None:
                try:
                    winreg.DeleteValue(key, name)
                except FileNotFoundError:
                    pass
            else:
                try:
                    _, value_type = winreg.QueryValueEx(key, name)
                except FileNotFoundError:
                    value_type = winreg.REG_EXPAND_SZ if "%" in value else winreg.REG_SZ
                winreg.SetValueEx(key, name, 0, value_type, value)

        logger.debug(f"Updated user variable {name}")
        self._broadcast_environment_change()

    def _broadcast_environment_change(self):
        """Tell running applications (Explorer, new shells) that the environment changed."""
        import ctypes
        from ctypes import wintypes

        result = wintypes.DWORD()
        sent = ctypes.windll.user32.SendMessageTimeoutW(
            HWND_BROADCAST,
            WM_SETTINGCHANGE,
            0,
            USER_ENVIRONMENT_KEY,
            SMTO_ABORTIFHUNG,
            5000,
            ctypes.byref(result)
        )
        if not sent:
            logger.warning("Environment change broadcast timed out")

    # ------------------------------------------------------------------
    # Filesystem
    # ------------------------------------------------------------------

    def application_data_dir(self) -> Path:
        """Per-user application data directory (%APPDATA% on Windows)."""
        if self.os_type == OSType.WINDOWS:
            appdata = os.environ.get("APPDATA")
            if appdata:
                return Path(appdata)
            return Path.home() / "AppData" / "Roaming"

        xdg_data = os.environ.get("XDG_DATA_HOME")
        if xdg_data:
            return Path(xdg_data)
        return Path.home() / ".local" / "share"

    def current_executable(self) -> Path:
        """
        Path of the program that is currently running.

        Frozen builds (PyInstaller) run from sys.executable; otherwise this
        is the console script that started the process.
        """
        if getattr(sys, "frozen", False):
            return Path(sys.executable).resolve()

        script = Path(sys.argv[0]).resolve()
        if not script.exists() and self.os_type == OSType.WINDOWS:
            # pip console-script launchers report argv[0] without ".exe"
            candidate = script.with_name(script.name + ".exe")
            if candidate.exists():
                return candidate
        return script

    def copy_file(self, source: Path, target_dir: Path) -> Path:
        """
        Copy a file into a directory, creating the directory if needed
        and overwriting an existing copy.

        Returns:
            Path of the copied file
        """
        target_dir.mkdir(parents=True, exist_ok=True)
        destination = target_dir / source.name
        shutil.copy2(source, destination)
        logger.debug(f"Copied {source} to {destination}")
        return destination

    def remove_directory(self, path: Path) -> bool:
        """
        Recursively delete a directory.

        Returns:
            True if the directory existed and was removed, False if absent
        """
        if not path.is_dir():
            return False
        shutil.rmtree(path)
        logger.debug(f"Removed {path}")
        return True
