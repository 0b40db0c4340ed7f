#!/usr/bin/env python3
"""
Collector for Unix-like systems without a /proc filesystem (BSDs).
"""

import re
import time
from typing import Optional

from .base import FactCollector, UNKNOWN, logger
from .units import format_duration

BOOTTIME_PATTERN = re.compile(r'sec\s*=\s*(\d+)')


class UnixCollector(FactCollector):
    """Collector relying on uname, sysctl and ps."""

    name = "unix"

    def kernel(self) -> str:
        output = self.safe_run_command(["uname", "-rs"])
        if output and output.strip():
            return output.strip()
        return self.platform_name()

    def boot_time(self) -> Optional[int]:
        """Boot time as a Unix timestamp, from ``kern.boottime``."""
        output = self.safe_run_command(["sysctl", "-n", "kern.boottime"])
        if not output:
            return None

        # macOS and FreeBSD print "{ sec = 1700000000, usec = 0 } ...",
        # OpenBSD prints the bare timestamp
        match = BOOTTIME_PATTERN.search(output)
        value = match.group(1) if match else output.strip()
        try:
            return int(value)
        except ValueError:
            logger.debug(f"Unrecognised kern.boottime output: {output!r}")
            return None

    def uptime(self) -> str:
        boot = self.boot_time()
        if boot is None:
            return UNKNOWN
        return format_duration(time.time() - boot)

    def process_count(self) -> str:
        output = self.safe_run_command(["ps", "-e"])
        if output is None:
            return UNKNOWN
        # First line is the column header
        lines = output.splitlines()
        return str(max(len(lines) - 1, 0))
