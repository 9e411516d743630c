"""
Poppler (pdftotext) detection and installation.

Each operating system gets its own Installer implementation; get_installer()
selects the one for the running platform.
"""

import logging
import os
import shutil
import subprocess
import sys
from abc import ABC, abstractmethod
from getpass import getpass
from typing import List, Optional

from .config import (
    PDFTOTEXT_BINARY, PDFTOTEXT_VERSION_FLAG, POPPLER_SIGNATURE, LINUX_PACKAGE_MANAGERS,
    HOMEBREW_INSTALL_SCRIPT, CHOCOLATEY_INSTALL_SCRIPT
)
from .exceptions import InstallError


class Installer(ABC):
    """Base class for platform-specific Poppler installers."""

    platform_name = "unknown"

    def __init__(self, binary: str = PDFTOTEXT_BINARY):
        self.binary = binary

    def is_installed(self) -> bool:
        """
        Check whether Poppler's pdftotext is available.

        Returns:
            True if pdftotext runs and identifies as Poppler, False if it cannot be run

        Raises:
            InstallError: If a pdftotext is found that does not identify as Poppler
        """
        try:
            result = subprocess.run([self.binary, PDFTOTEXT_VERSION_FLAG], capture_output=True)
        except OSError as e:
            logging.info(f"{self.binary} could not be run: {e}")
            return False

        output = (result.stderr + result.stdout).decode('utf-8', errors='replace')
        if POPPLER_SIGNATURE in output:
            return True
        raise InstallError("Error occurred while checking if poppler is installed.")

    def run(self) -> None:
        """Install Poppler unless it is already present."""
        print("Checking if poppler-utils is installed...")
        if self.is_installed():
            logging.info(f"Poppler is installed ({self.platform_name})")
            return

        print(f"Poppler is not installed, installing it for {self.platform_name}...")
        self.install()
        print("Poppler installed successfully!")

    @abstractmethod
    def install(self) -> None:
        """Install Poppler with the platform's package manager."""
        pass

    @staticmethod
    def has_command(name: str) -> bool:
        """Check if an executable is on PATH."""
        return shutil.which(name) is not None

    @staticmethod
    def spawn(command: List[str], stdin_text: Optional[str] = None) -> int:
        """
        Run an installer command and wait for it to finish.

        The exit status is logged, not checked.

        Raises:
            InstallError: If the command cannot be started
        """
        logging.info(f"Running {' '.join(command)}")
        try:
            process = subprocess.Popen(
                command,
                stdin=subprocess.PIPE if stdin_text is not None else None,
                text=True,
            )
            process.communicate(stdin_text)
        except OSError as e:
            raise InstallError(f"Error running '{command[0]}': {e}") from e

        if process.returncode != 0:
            logging.warning(f"'{' '.join(command)}' exited with status {process.returncode}")
        return process.returncode


class LinuxInstaller(Installer):
    """Installs poppler-utils with apt, yum or pacman through sudo."""

    platform_name = "linux"

    def get_package_manager(self) -> Optional[str]:
        """Return the first available package manager, in priority order."""
        for manager, _ in LINUX_PACKAGE_MANAGERS:
            if self.has_command(manager):
                return manager
        return None

    def install(self) -> None:
        manager = self.get_package_manager()
        logging.debug(f"Package manager: {manager}")
        if manager is None:
            raise InstallError("No package manager is installed")

        install_args = dict(LINUX_PACKAGE_MANAGERS)[manager]

        if hasattr(os, 'geteuid') and os.geteuid() == 0:
            self.spawn([manager, *install_args])
            return

        try:
            password = getpass("Please enter your sudo password: ")
        except (EOFError, KeyboardInterrupt) as e:
            raise InstallError("No sudo password given, cannot install poppler-utils") from e
        self.spawn(["sudo", "-S", manager, *install_args], stdin_text=password.strip() + "\n")


class MacInstaller(Installer):
    """Installs poppler with Homebrew, installing Homebrew first if needed."""

    platform_name = "macos"

    def install(self) -> None:
        if not self.has_command("brew"):
            print("Homebrew is not installed, installing it first...")
            self.spawn(["/bin/bash", "-c", f'/bin/bash -c "$(curl -fsSL {HOMEBREW_INSTALL_SCRIPT})"'])

        self.spawn(["brew", "install", "poppler"])


class WindowsInstaller(Installer):
    """Installs poppler with Chocolatey, installing Chocolatey first if needed."""

    platform_name = "windows"

    def install(self) -> None:
        if not self.has_command("choco"):
            print("Chocolatey is not installed, installing it first...")
            self.spawn(["powershell", "-Command", CHOCOLATEY_INSTALL_SCRIPT])

        self.spawn(["choco", "install", "poppler", "-y"])


def get_installer(platform: Optional[str] = None) -> Installer:
    """Select the installer for a platform (defaults to the running one)."""
    platform = platform or sys.platform
    if platform == 'darwin':
        return MacInstaller()
    if platform.startswith('win') or platform == 'cygwin':
        return WindowsInstaller()
    return LinuxInstaller()
