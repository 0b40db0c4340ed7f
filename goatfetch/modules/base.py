#!/usr/bin/env python3
"""
Base collector shared by all platforms.
"""

import os
import socket
import platform
import subprocess
import logging
from typing import Dict, List, Optional

from .osrelease import OS_RELEASE_FILES, read_os_release

logger = logging.getLogger("goatfetch.collectors")

UNKNOWN = "unknown"


class FactCollector:
    """Base class for all platform collectors.

    Every public collector returns a string and never raises. Subclasses
    override the tiers that differ on their platform.
    """

    name = "generic"

    OS_RELEASE_FILES = OS_RELEASE_FILES
    ANDROID_MARKER = "/system/bin/adb"
    COMMAND_TIMEOUT = 5

    def run(self) -> Dict[str, str]:
        """Collect every fact, keyed by its display label."""
        collectors = [
            ("OS", self.os_name),
            ("Host", self.hostname),
            ("User", self.username),
            ("Kernel", self.kernel),
            ("Arch", self.architecture),
            ("Shell", self.shell),
            ("Uptime", self.uptime),
            ("Procs", self.process_count),
            ("Cores", self.cpu_cores),
            ("Terminal", self.terminal),
            ("Memory", self.memory),
        ]

        results = {}
        for label, collect in collectors:
            try:
                results[label] = collect() or UNKNOWN
            except Exception:
                logger.debug(f"Collector for {label} failed", exc_info=True)
                results[label] = UNKNOWN
        return results

    def safe_run_command(self, command: List[str]) -> Optional[str]:
        """
        Run a command safely.

        Args:
            command: Command to run as a list of strings

        Returns:
            Command stdout, or None if the command could not run or failed
        """
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                check=False,
                timeout=self.COMMAND_TIMEOUT
            )
        except subprocess.TimeoutExpired:
            logger.debug(f"Command timed out after {self.COMMAND_TIMEOUT} seconds: {' '.join(command)}")
            return None
        except Exception as e:
            logger.debug(f"Failed to run command {' '.join(command)}: {e}")
            return None

        if result.returncode != 0:
            logger.debug(f"Command {' '.join(command)} exited with {result.returncode}")
            return None
        return result.stdout

    def safe_read_file(self, file_path: str) -> Optional[str]:
        """
        Read a file safely.

        Args:
            file_path: Path to the file

        Returns:
            File content, or None if it could not be read
        """
        try:
            with open(file_path, 'r') as f:
                return f.read()
        except FileNotFoundError:
            logger.debug(f"File not found: {file_path}")
        except PermissionError:
            logger.debug(f"Permission denied: {file_path}")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Failed to read file {file_path}: {e}")
        return None

    def platform_name(self) -> str:
        """Generic lower-cased platform name, e.g. ``linux``."""
        return platform.system().lower() or UNKNOWN

    # Identity

    def username(self) -> str:
        for var in ("USER", "LOGNAME"):
            value = os.environ.get(var)
            if value:
                return value
        return self.platform_username() or UNKNOWN

    def platform_username(self) -> Optional[str]:
        return None

    def hostname(self) -> str:
        try:
            host = socket.gethostname()
        except OSError as e:
            logger.debug(f"gethostname failed: {e}")
            host = ""
        if host:
            return host.split(".")[0]
        return self.platform_hostname() or UNKNOWN

    def platform_hostname(self) -> Optional[str]:
        return None

    def shell(self) -> str:
        shell_path = os.environ.get("SHELL")
        if shell_path:
            return os.path.basename(shell_path.rstrip("/")) or UNKNOWN
        return self.platform_shell() or UNKNOWN

    def platform_shell(self) -> Optional[str]:
        return None

    def terminal(self) -> str:
        return os.environ.get("TERM") or UNKNOWN

    # Operating system

    def kernel(self) -> str:
        return self.platform_name()

    def os_name(self) -> str:
        for path in self.OS_RELEASE_FILES:
            name = read_os_release(path)
            if name:
                return name

        product = self.product_name()
        if product:
            return product

        wsl = os.environ.get("WSL_DISTRO_NAME")
        if wsl:
            return f"WSL: {wsl}"

        if os.path.exists(self.ANDROID_MARKER):
            return "Android"

        return self.platform_name()

    def product_name(self) -> Optional[str]:
        """Vendor product name and version, where the platform reports one."""
        return None

    # Hardware and load

    def architecture(self) -> str:
        return platform.machine() or UNKNOWN

    def cpu_cores(self) -> str:
        count = os.cpu_count()
        return str(count) if count else UNKNOWN

    def uptime(self) -> str:
        return UNKNOWN

    def process_count(self) -> str:
        return UNKNOWN

    def memory(self) -> str:
        return UNKNOWN
