#!/usr/bin/env python3
"""
Module initialization - imports all platform collectors and provides a function to pick the one for this host.
"""

import platform

from .base import FactCollector, UNKNOWN
from .unix import UnixCollector
from .linux import LinuxCollector
from .darwin import DarwinCollector
from .windows import WindowsCollector

COLLECTORS = {
    "Linux": LinuxCollector,
    "Darwin": DarwinCollector,
    "FreeBSD": UnixCollector,
    "OpenBSD": UnixCollector,
    "NetBSD": UnixCollector,
    "DragonFly": UnixCollector,
    "Windows": WindowsCollector,
}


def get_collector(system=None) -> FactCollector:
    """Return the collector instance for ``system`` (defaults to this host)."""
    if system is None:
        system = platform.system()
    return COLLECTORS.get(system, FactCollector)()
