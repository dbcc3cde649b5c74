"""
Elevated process launching.

ProcessLauncher is the single capability the dispatcher needs: start a
program with administrator rights, with its window shown, and optionally
block until it exits. Windows goes through ShellExecuteExW with the
"runas" verb (the UAC prompt); POSIX systems go through sudo.
"""

import shutil
import subprocess
from typing import Optional, Sequence, Tuple

from ..utils.platform_check import get_os_type, OSType
from ..utils.logger import get_logger

logger = get_logger(__name__)

SEE_MASK_NOCLOSEPROCESS = 0x00000040
SEE_MASK_NOASYNC = 0x00000100
SW_SHOWNORMAL = 1
INFINITE = 0xFFFFFFFF

LaunchResult = Tuple[bool, Optional[str], Optional[int]]


class ProcessLauncher:
    """Base class for elevated launchers."""

    def launch_elevated(
        self,
        application_name: str,
        command_line: str,
        wait: bool,
        arguments: Optional[Sequence[str]] = None
    ) -> LaunchResult:
        """
        Start a process with elevated privileges.

        Args:
            application_name: Program path or name
            command_line: Arguments as a single string, passed through verbatim
            wait: Block until the process exits
            arguments: The same arguments as separate tokens, for launchers
                that start the program from an argument list

        Returns:
            Tuple of (success, error_message, exit_code). exit_code is only
            set when wait is True and the process could be waited for.
        """
        raise NotImplementedError


class WindowsElevatedLauncher(ProcessLauncher):
    """Launches through ShellExecuteExW with the "runas" verb."""

    def launch_elevated(
        self,
        application_name: str,
        command_line: str,
        wait: bool,
        arguments: Optional[Sequence[str]] = None
    ) -> LaunchResult:
        import ctypes
        from ctypes import wintypes

        class SHELLEXECUTEINFOW(ctypes.Structure):
            _fields_ = [
                ("cbSize", wintypes.DWORD),
                ("fMask", ctypes.c_ulong),
                ("hwnd", wintypes.HWND),
                ("lpVerb", wintypes.LPCWSTR),
                ("lpFile", wintypes.LPCWSTR),
                ("lpParameters", wintypes.LPCWSTR),
                ("lpDirectory", wintypes.LPCWSTR),
                ("nShow", ctypes.c_int),
                ("hInstApp", wintypes.HINSTANCE),
                ("lpIDList", ctypes.c_void_p),
                ("lpClass", wintypes.LPCWSTR),
                ("hkeyClass", wintypes.HKEY),
                ("dwHotKey", wintypes.DWORD),
                ("hIconOrMonitor", wintypes.HANDLE),
                ("hProcess", wintypes.HANDLE),
            ]

        shell32 = ctypes.WinDLL("shell32", use_last_error=True)
        kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)

        ShellExecuteExW = shell32.ShellExecuteExW
        ShellExecuteExW.argtypes = [ctypes.POINTER(SHELLEXECUTEINFOW)]
        ShellExecuteExW.restype = wintypes.BOOL
        kernel32.WaitForSingleObject.argtypes = [wintypes.HANDLE, wintypes.DWORD]
        kernel32.WaitForSingleObject.restype = wintypes.DWORD
        kernel32.GetExitCodeProcess.argtypes = [wintypes.HANDLE, ctypes.POINTER(wintypes.DWORD)]
        kernel32.GetExitCodeProcess.restype = wintypes.BOOL
        kernel32.CloseHandle.argtypes = [wintypes.HANDLE]
        kernel32.CloseHandle.restype = wintypes.BOOL

        info = SHELLEXECUTEINFOW()
        info.cbSize = ctypes.sizeof(info)
        info.fMask = SEE_MASK_NOCLOSEPROCESS | SEE_MASK_NOASYNC
        info.lpVerb = "runas"
        info.lpFile = application_name
        info.lpParameters = command_line or None
        info.nShow = SW_SHOWNORMAL

        logger.debug(f"ShellExecuteExW runas: {application_name} {command_line}")

        if not ShellExecuteExW(ctypes.byref(info)):
            error = ctypes.WinError(ctypes.get_last_error())
            return False, error.strerror or str(error), None

        # No handle when the request was served by an already running process
        if not info.hProcess:
            return True, None, None

        try:
            if not wait:
                return True, None, None

            kernel32.WaitForSingleObject(info.hProcess, INFINITE)
            exit_code = wintypes.DWORD()
            if not kernel32.GetExitCodeProcess(info.hProcess, ctypes.byref(exit_code)):
                return True, None, None
            return True, None, exit_code.value
        finally:
            kernel32.CloseHandle(info.hProcess)


class PosixElevatedLauncher(ProcessLauncher):
    """Launches through sudo."""

    def __init__(self, elevator: str = "sudo"):
        self.elevator = elevator

    def launch_elevated(
        self,
        application_name: str,
        command_line: str,
        wait: bool,
        arguments: Optional[Sequence[str]] = None
    ) -> LaunchResult:
        elevator = shutil.which(self.elevator)
        if elevator is None:
            return False, f"{self.elevator} not found", None

        if arguments is None:
            arguments = command_line.split()

        cmd = [elevator, application_name, *arguments]
        logger.debug(f"Running: {' '.join(cmd)}")

        try:
            process = subprocess.Popen(cmd)
        except OSError as e:
            return False, e.strerror or str(e), None

        if not wait:
            return True, None, None

        return True, None, process.wait()


def get_launcher() -> ProcessLauncher:
    """Get the elevated launcher for the current platform."""
    if get_os_type() == OSType.WINDOWS:
        return WindowsElevatedLauncher()
    return PosixElevatedLauncher()
