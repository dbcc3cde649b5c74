"""Shared fixtures: a recording launcher and an in-memory environment."""

from pathlib import Path
from typing import Dict, Optional

import pytest

from ado.backend.environment import EnvironmentScope, SystemEnvironment
from ado.backend.launcher import ProcessLauncher
from ado.utils.platform_check import OSType


class FakeLauncher(ProcessLauncher):
    """Records launch requests instead of starting processes."""

    def __init__(self, error: Optional[str] = None, exit_code: Optional[int] = None):
        self.error = error
        self.exit_code = exit_code
        self.calls = []
        self.arguments = []

    def launch_elevated(self, application_name, command_line, wait, arguments=None):
        self.calls.append((application_name, command_line, wait))
        self.arguments.append(arguments)
        if self.error:
            return False, self.error, None
        return True, None, self.exit_code if wait else None


class InMemoryEnvironment(SystemEnvironment):
    """
    Environment with dict-backed variables.

    File operations are the real ones, so tests point the data directory
    and executable at tmp_path.
    """

    def __init__(self, data_dir: Path, executable: Path, os_type: OSType = OSType.WINDOWS):
        super().__init__()
        self.os_type = os_type
        self.data_dir = data_dir
        self.executable = executable
        self.variables: Dict[EnvironmentScope, Dict[str, str]] = {
            EnvironmentScope.PROCESS: {},
            EnvironmentScope.USER: {},
        }

    def get_variable(self, name, scope=EnvironmentScope.PROCESS):
        return self.variables[scope].get(name)

    def set_variable(self, name, value, scope=EnvironmentScope.PROCESS):
        if value is None:
            self.variables[scope].pop(name, None)
        else:
            self.variables[scope][name] = value

    def application_data_dir(self):
        return self.data_dir

    def current_executable(self):
        return self.executable


@pytest.fixture
def launcher():
    return FakeLauncher()


@pytest.fixture
def executable(tmp_path):
    path = tmp_path / "bin" / "ado.exe"
    path.parent.mkdir()
    path.write_bytes(b"MZ fake executable")
    return path


@pytest.fixture
def environment(tmp_path, executable):
    return InMemoryEnvironment(tmp_path / "AppData", executable)
