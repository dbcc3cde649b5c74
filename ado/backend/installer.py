"""
Install and uninstall routines.

Installing copies the running executable into <application data>/Ado and
adds that directory to the user's PATH; uninstalling reverses both steps.
"""

from pathlib import Path
from typing import Callable, Optional, Tuple

from ..config import INSTALL_DIR_NAME, PATH_VARIABLE
from ..utils.logger import get_logger
from ..utils.path_list import add_entry, remove_entry
from .environment import EnvironmentScope, SystemEnvironment

logger = get_logger(__name__)

# Sources that cannot run on their own once copied out of the package
SCRIPT_SUFFIXES = (".py", ".pyw")


class Installer:
    """
    Per-user installation of Ado.

    Methods follow the (success, error_message) convention and report
    progress through an optional callback(message).
    """

    def __init__(
        self,
        environment: SystemEnvironment,
        install_root: Optional[Path] = None,
        progress_callback: Optional[Callable[[str], None]] = None
    ):
        self.environment = environment
        self.install_root = install_root
        self.progress_callback = progress_callback

    @property
    def install_dir(self) -> Path:
        root = self.install_root or self.environment.application_data_dir()
        return root / INSTALL_DIR_NAME

    def _report(self, message: str):
        logger.info(message)
        if self.progress_callback:
            self.progress_callback(message)

    def install(self) -> Tuple[bool, Optional[str]]:
        """
        Copy the running executable to the install directory and add the
        directory to the user PATH.

        Returns:
            Tuple of (success, error_message)
        """
        try:
            source = self.environment.current_executable()
            if source.suffix.lower() in SCRIPT_SUFFIXES:
                return False, (
                    f"{source.name} is a Python script; install from the ado "
                    "console script or a frozen build"
                )

            target_dir = self.install_dir
            logger.info(f"Installing {source} to {target_dir}")

            self.environment.copy_file(source, target_dir)
            self.add_to_path(target_dir)
            return True, None

        except Exception as e:
            logger.error(f"Installation failed: {e}")
            return False, str(e)

    def uninstall(self) -> Tuple[bool, Optional[str]]:
        """
        Remove the install directory and its user PATH entry.

        Returns:
            Tuple of (success, error_message)
        """
        try:
            target_dir = self.install_dir
            logger.info(f"Uninstalling from {target_dir}")

            if not self.environment.remove_directory(target_dir):
                logger.debug(f"{target_dir} does not exist")

            self.remove_from_path(target_dir)
            return True, None

        except Exception as e:
            logger.error(f"Uninstallation failed: {e}")
            return False, str(e)

    def add_to_path(self, directory: Path) -> bool:
        """
        Append a directory to the user PATH if it is not already there.

        Returns:
            True if PATH was changed
        """
        old_path = self.environment.get_variable(PATH_VARIABLE, EnvironmentScope.USER)
        new_path, changed = add_entry(
            old_path,
            str(directory),
            separator=self.environment.path_separator,
            case_sensitive=self.environment.case_sensitive_paths
        )

        if changed:
            self.environment.set_variable(PATH_VARIABLE, new_path, EnvironmentScope.USER)
            self._report(f"Added to PATH: {directory}")
        return changed

    def remove_from_path(self, directory: Path) -> bool:
        """
        Remove a directory from the user PATH.

        Returns:
            True if PATH was changed
        """
        old_path = self.environment.get_variable(PATH_VARIABLE, EnvironmentScope.USER)
        new_path, changed = remove_entry(
            old_path,
            str(directory),
            separator=self.environment.path_separator,
            case_sensitive=self.environment.case_sensitive_paths
        )

        if changed:
            self.environment.set_variable(PATH_VARIABLE, new_path, EnvironmentScope.USER)
            self._report(f"Removed from PATH: {directory}")
        return changed
