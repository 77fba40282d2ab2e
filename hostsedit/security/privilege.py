#!/usr/bin/env python3
import os
import sys
import shutil
import logging
import platform
import subprocess

import hostsedit
from hostsedit import config
from hostsedit.exceptions import ElevationError


class PrivilegeGate:
    """Reports whether the process holds elevated rights and can re-launch it with them"""

    def is_elevated(self):
        raise NotImplementedError

    def relaunch_elevated(self, argv):
        """Start the program again with elevated rights and the given arguments.

        Raises ElevationError if the request is refused or cannot be issued.
        """
        raise NotImplementedError


class SystemPrivilegeGate(PrivilegeGate):
    def __init__(self, module="hostsedit"):
        self.module = module
        self.os_type = platform.system().lower()

    def command_line(self, argv):
        return [sys.executable, "-m", self.module] + list(argv)

    def launch_directory(self):
        """Directory holding the hostsedit package, so -m finds it without an install"""
        return os.path.dirname(os.path.dirname(os.path.abspath(hostsedit.__file__)))

    def forwarded_environment(self):
        """hostsedit settings from the environment, as VAR=value assignments"""
        assignments = []
        for name in config.FORWARDED_ENV:
            value = os.environ.get(name)
            if not value:
                continue
            if name in config.PATH_ENV:
                value = os.path.abspath(value)
            assignments.append(f"{name}={value}")
        return assignments

    def is_elevated(self):
        if self.os_type == "windows":
            try:
                import ctypes
                return ctypes.windll.shell32.IsUserAnAdmin() != 0
            except Exception as e:
                logging.warning(f"Could not query administrator status: {e}")
                return False
        return os.geteuid() == 0

    def relaunch_elevated(self, argv):
        if self.os_type == "windows":
            self._relaunch_windows(argv)
        else:
            self._relaunch_sudo(argv)

    def _relaunch_windows(self, argv):
        """Ask the shell for a 'runas' launch; the consent prompt is handled by the OS"""
        import ctypes
        params = subprocess.list2cmdline(self.command_line(argv)[1:])
        logging.info(f"Requesting elevation: {sys.executable} {params}")
        try:
            result = ctypes.windll.shell32.ShellExecuteW(
                None, "runas", sys.executable, params, self.launch_directory(), 1
            )
        except Exception as e:
            raise ElevationError(f"ShellExecuteW failed: {e}") from e
        # ShellExecuteW reports errors as values <= 32
        if result <= 32:
            raise ElevationError(f"ShellExecuteW returned {result}")

    def _relaunch_sudo(self, argv):
        sudo = shutil.which("sudo")
        if not sudo:
            raise ElevationError("sudo is not available")

        cmd = [sudo]
        # sudo resets the environment, so settings travel on the command line
        env_assignments = self.forwarded_environment()
        if env_assignments:
            cmd += ["env"] + env_assignments
        cmd += self.command_line(argv)
        logging.info(f"Requesting elevation: {subprocess.list2cmdline(cmd)}")
        try:
            # sudo needs the terminal for its password prompt, so wait for it
            result = subprocess.run(cmd, cwd=self.launch_directory())
        except OSError as e:
            raise ElevationError(f"Failed to run sudo: {e}") from e
        if result.returncode != 0:
            raise ElevationError(f"Elevated process exited with status {result.returncode}")
