#!/usr/bin/env python3
"""
Linux collector backed by the /proc filesystem.
"""

import os

from .base import UNKNOWN, logger
from .unix import UnixCollector
from .units import format_duration, format_memory


class LinuxCollector(UnixCollector):
    """Collector for Linux, WSL and Android."""

    name = "linux"

    PROC_DIR = "/proc"
    UPTIME_PATH = "/proc/uptime"
    MEMINFO_PATH = "/proc/meminfo"

    def uptime(self) -> str:
        content = self.safe_read_file(self.UPTIME_PATH)
        if not content or not content.split():
            return UNKNOWN
        try:
            seconds = float(content.split()[0])
        except ValueError:
            logger.debug(f"Malformed {self.UPTIME_PATH}: {content!r}")
            return UNKNOWN
        return format_duration(seconds)

    def process_count(self) -> str:
        try:
            entries = os.scandir(self.PROC_DIR)
        except OSError as e:
            logger.debug(f"Cannot list {self.PROC_DIR}: {e}")
            return UNKNOWN

        count = 0
        with entries:
            for entry in entries:
                try:
                    if entry.name.isdigit() and entry.is_dir():
                        count += 1
                except OSError:
                    # Process exited while listing
                    continue
        return str(count)

    def memory(self) -> str:
        content = self.safe_read_file(self.MEMINFO_PATH)
        if not content:
            return UNKNOWN

        values = {}
        for line in content.splitlines():
            if ":" not in line:
                continue
            key, value = line.split(":", 1)
            fields = value.split()
            if fields and fields[0].isdigit():
                values[key.strip()] = int(fields[0])

        total = values.get("MemTotal", 0)
        if total <= 0:
            return UNKNOWN
        available = values.get("MemAvailable", 0)
        return format_memory(total - available, total)
