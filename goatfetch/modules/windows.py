#!/usr/bin/env python3
"""
Windows collector.
"""

import os
import ntpath
from typing import Optional

from .base import FactCollector

VER_PREFIX = "Microsoft Windows [Version "
VER_SUFFIX = "]"


class WindowsCollector(FactCollector):
    """Collector for Windows (cmd.exe and PowerShell hosts)."""

    name = "windows"

    def platform_username(self) -> Optional[str]:
        return os.environ.get("USERNAME")

    def platform_hostname(self) -> Optional[str]:
        output = self.safe_run_command(["hostname"])
        if output and output.strip():
            return output.strip()
        return None

    def platform_shell(self) -> Optional[str]:
        comspec = os.environ.get("ComSpec")
        if comspec:
            return ntpath.basename(comspec)
        return None

    def kernel(self) -> str:
        output = self.safe_run_command(["cmd", "/c", "ver"])
        if output and output.strip():
            version = output.strip()
            if version.startswith(VER_PREFIX):
                version = version[len(VER_PREFIX):]
            if version.endswith(VER_SUFFIX):
                version = version[:-len(VER_SUFFIX)]
            return version
        return self.platform_name()
